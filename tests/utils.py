"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from collections.abc import Sequence
from kafka_health.health import ClusterSnapshot, Partition, Topic
from kafka_health.typing import BrokerId, PartitionId, TopicName


def new_topic(name: str, *partitions: tuple[Sequence[int], Sequence[int]]) -> Topic:
    """Topic with one partition per `(replicas, isr)` pair, ids counting from zero."""
    return Topic(
        name=TopicName(name),
        partitions=tuple(
            Partition(
                topic=TopicName(name),
                id=PartitionId(partition_id),
                replicas=[BrokerId(broker) for broker in replicas],
                isr=[BrokerId(broker) for broker in isr],
            )
            for partition_id, (replicas, isr) in enumerate(partitions)
        ),
    )


def new_snapshot(brokers: Sequence[int], *topics: Topic) -> ClusterSnapshot:
    return ClusterSnapshot(brokers=frozenset(BrokerId(broker) for broker in brokers), topics=topics)
