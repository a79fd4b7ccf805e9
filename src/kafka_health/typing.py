"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from enum import Enum
from typing import NewType

BrokerId = NewType("BrokerId", int)
PartitionId = NewType("PartitionId", int)
TopicName = NewType("TopicName", str)


class StrEnum(str, Enum):
    def __str__(self) -> str:
        return str(self.value)
