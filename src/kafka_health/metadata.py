"""
kafka_health - cluster metadata sources

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from confluent_kafka.error import KafkaException
from kafka_health.config import Config, InvalidConfiguration
from kafka_health.errors import SnapshotUnavailable
from kafka_health.health import ClusterSnapshot
from kafka_health.kafka.admin import KafkaAdminClient
from threading import Lock
from typing import Protocol

import aiokafka.errors as Errors
import logging

LOG = logging.getLogger(__name__)


class MetadataSource(Protocol):
    def fetch_snapshot(self) -> ClusterSnapshot: ...

    def close(self) -> None: ...


class KafkaMetadataSource:
    """Fetches cluster snapshots with a lazily created admin client.

    The client is only created on the first fetch so the service can start,
    and report the cluster as unavailable, while Kafka is unreachable.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self._admin_client: KafkaAdminClient | None = None
        self._admin_client_lock = Lock()

    def _get_admin_client(self) -> KafkaAdminClient:
        with self._admin_client_lock:
            if self._admin_client is None:
                try:
                    self._admin_client = KafkaAdminClient(
                        bootstrap_servers=self.config.bootstrap_uri,
                        **self.config.get_kafka_client_params(),
                    )
                except KafkaException as exc:
                    raise InvalidConfiguration(f"Kafka client creation failed: {exc}") from exc
            return self._admin_client

    def fetch_snapshot(self) -> ClusterSnapshot:
        admin_client = self._get_admin_client()
        try:
            return admin_client.cluster_snapshot(timeout=self.config.metadata_timeout)
        except Errors.KafkaError as exc:
            LOG.warning("Failed to fetch metadata. Reason: %r", exc)
            raise SnapshotUnavailable(f"Failed to fetch cluster metadata: {exc!r}") from exc

    def close(self) -> None:
        with self._admin_client_lock:
            self._admin_client = None
