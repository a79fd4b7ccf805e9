"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from enum import Enum, unique


@unique
class HealthErrorCodes(Enum):
    INVALID_CONFIGURATION = 50001
    SNAPSHOT_UNAVAILABLE = 50301
