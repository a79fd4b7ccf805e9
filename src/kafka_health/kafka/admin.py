"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from aiokafka.errors import AuthenticationFailedError
from confluent_kafka.admin import AdminClient, ClusterMetadata
from confluent_kafka.error import KafkaException
from kafka_health.health import ClusterSnapshot, Partition, Topic
from kafka_health.kafka.common import _KafkaConfigMixin, raise_from_kafkaexception
from kafka_health.typing import BrokerId, PartitionId, TopicName

import logging

LOG = logging.getLogger(__name__)


def snapshot_from_metadata(cluster_metadata: ClusterMetadata) -> ClusterSnapshot:
    """Project `confluent_kafka` cluster metadata onto a `ClusterSnapshot`.

    Topics keep the order the broker returned them in, partitions are sorted
    by id. Topic level errors (eg. leader not available) are logged and the
    partitions are kept as reported.
    """
    topics = []
    for topic_name, topic_metadata in cluster_metadata.topics.items():
        if topic_metadata.error is not None:
            LOG.warning("Metadata for topic '%s' reported error: %s", topic_name, topic_metadata.error)

        partitions = tuple(
            Partition(
                topic=TopicName(topic_name),
                id=PartitionId(partition_id),
                replicas=tuple(BrokerId(broker) for broker in partition_metadata.replicas),
                isr=tuple(BrokerId(broker) for broker in partition_metadata.isrs),
            )
            for partition_id, partition_metadata in sorted(topic_metadata.partitions.items())
        )
        topics.append(Topic(name=TopicName(topic_name), partitions=partitions))

    return ClusterSnapshot(
        brokers=frozenset(BrokerId(broker) for broker in cluster_metadata.brokers),
        topics=tuple(topics),
    )


class KafkaAdminClient(_KafkaConfigMixin, AdminClient):
    def cluster_snapshot(self, timeout: float) -> ClusterSnapshot:
        """Fetch brokers, topics and partitions of the whole cluster.

        `list_topics` returns metadata for the entire cluster, not only topics,
        and blocks for at most `timeout` seconds.
        """
        self.log.debug("Fetching cluster metadata with timeout %ss", timeout)
        try:
            cluster_metadata: ClusterMetadata = self.list_topics(timeout=timeout)
        except KafkaException as exc:
            # A failed SASL handshake surfaces as a timeout from `list_topics`
            if self.authentication_failed():
                self.log.info("Could not fetch cluster metadata due to errors: %s", self._errors)
                raise AuthenticationFailedError() from exc
            raise_from_kafkaexception(exc)
        return snapshot_from_metadata(cluster_metadata)
