"""
kafka_health - cluster health classification

Turns the replication state of every partition in a cluster metadata
snapshot into a single Green / Yellow / Red verdict, together with the
partitions whose in-sync replica set has fallen behind their assignment.

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from kafka_health.typing import BrokerId, PartitionId, StrEnum, TopicName
from typing import Final


class HealthStatus(StrEnum):
    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def escalate(self, other: HealthStatus) -> HealthStatus:
        """Returns the more severe of the two statuses."""
        return other if other.severity > self.severity else self


_SEVERITY: Final = {
    HealthStatus.GREEN: 0,
    HealthStatus.YELLOW: 1,
    HealthStatus.RED: 2,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class Partition:
    topic: TopicName
    id: PartitionId
    replicas: Sequence[BrokerId]
    isr: Sequence[BrokerId]


@dataclass(frozen=True, slots=True, kw_only=True)
class Topic:
    name: TopicName
    partitions: Sequence[Partition] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ClusterSnapshot:
    brokers: frozenset[BrokerId] = frozenset()
    topics: Sequence[Topic] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class PartitionDetail:
    topic: TopicName
    partition: PartitionId
    replicas: tuple[BrokerId, ...]
    isr: tuple[BrokerId, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class HealthReport:
    status: HealthStatus
    brokers: int
    topics: int
    # None only when partition level checks did not run
    out_of_sync_partitions: Sequence[PartitionDetail] | None = None


def evaluate(snapshot: ClusterSnapshot) -> HealthReport:
    """Classify the health of a cluster from its metadata snapshot.

    Any partition without in-sync replicas makes the cluster Red. Partitions
    with fewer in-sync replicas than assigned replicas are reported, and make
    the cluster Yellow unless it is already Red. The snapshot is not validated
    and the function never raises for a well-formed one.
    """
    status = HealthStatus.GREEN
    out_of_sync: list[PartitionDetail] = []

    for topic in snapshot.topics:
        for partition in topic.partitions:
            if not partition.isr:
                status = status.escalate(HealthStatus.RED)
            if len(partition.replicas) > len(partition.isr):
                out_of_sync.append(
                    PartitionDetail(
                        topic=topic.name,
                        partition=partition.id,
                        replicas=tuple(partition.replicas),
                        isr=tuple(partition.isr),
                    )
                )

    if out_of_sync:
        status = status.escalate(HealthStatus.YELLOW)

    return HealthReport(
        status=status,
        brokers=len(snapshot.brokers),
        topics=len(snapshot.topics),
        out_of_sync_partitions=out_of_sync,
    )
