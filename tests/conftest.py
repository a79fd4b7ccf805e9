"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from kafka_health.config import Config
from kafka_health.container import KafkaHealthContainer

import pytest


@pytest.fixture(name="kafka_health_container")
def fixture_kafka_health_container() -> KafkaHealthContainer:
    return KafkaHealthContainer()


@pytest.fixture(name="config")
def fixture_config(monkeypatch: pytest.MonkeyPatch) -> Config:
    for name in (
        "KAFKA_HEALTH_BOOTSTRAP_URI",
        "KAFKA_HEALTH_SECURITY_PROTOCOL",
        "KAFKA_HEALTH_SASL_PLAIN_USERNAME",
        "KAFKA_HEALTH_SASL_PLAIN_PASSWORD",
        "KAFKA_HEALTH_METADATA_TIMEOUT",
        "KAFKA_HEALTH_PORT",
        "KAFKA_HEALTH_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
    return Config().set_config_defaults({"bootstrap_uri": "kafka-1:9092,kafka-2:9092"})
