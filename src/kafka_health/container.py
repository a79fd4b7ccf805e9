"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from dependency_injector import containers, providers
from kafka_health.config import Config
from kafka_health.metadata import KafkaMetadataSource


class KafkaHealthContainer(containers.DeclarativeContainer):
    config = providers.Singleton(Config)
    metadata_source = providers.Singleton(KafkaMetadataSource, config=config)
