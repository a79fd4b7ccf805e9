"""
kafka_health - configuration validation

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Mapping
from kafka_health.kafka.common import KafkaClientParams
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

import logging

LOG = logging.getLogger(__name__)

DEFAULT_METADATA_TIMEOUT_S = 30.0
SECURITY_PROTOCOLS = ("PLAINTEXT", "SSL", "SASL_PLAINTEXT", "SASL_SSL")


class InvalidConfiguration(Exception):
    pass


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="kafka_health_", env_ignore_empty=True, frozen=True)

    bootstrap_uri: str = "localhost:9092"
    client_id: str = "kafka-health"
    security_protocol: str = "PLAINTEXT"
    sasl_mechanism: str | None = None
    sasl_plain_username: str | None = None
    sasl_plain_password: str | None = None
    ssl_cafile: str | None = None
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None
    ssl_crlfile: str | None = None
    metadata_timeout: float = DEFAULT_METADATA_TIMEOUT_S
    host: str = "0.0.0.0"
    port: int = 8080
    log_handler: str | None = "stdout"
    log_level: str = "INFO"
    log_format: str = "%(name)-20s\t%(threadName)s\t%(levelname)-8s\t%(message)s"

    @field_validator("security_protocol", "log_level")
    @classmethod
    def normalise_case(cls, value: str) -> str:
        return value.upper()

    def set_config_defaults(self, new_config: Mapping[str, object] | None = None) -> Config:
        config = Config.model_validate({**self.model_dump(), **(new_config or {})})
        validate_config(config)
        return config

    def get_kafka_client_params(self) -> KafkaClientParams:
        return KafkaClientParams(
            client_id=self.client_id,
            security_protocol=self.security_protocol,
            sasl_mechanism=self.sasl_mechanism,
            sasl_plain_username=self.sasl_plain_username,
            sasl_plain_password=self.sasl_plain_password,
            ssl_cafile=self.ssl_cafile,
            ssl_certfile=self.ssl_certfile,
            ssl_keyfile=self.ssl_keyfile,
            ssl_crlfile=self.ssl_crlfile,
            socket_timeout_ms=int(self.metadata_timeout * 1000),
        )


def validate_config(config: Config) -> None:
    if not config.bootstrap_uri:
        raise InvalidConfiguration("'bootstrap_uri' must not be empty")

    if config.security_protocol.upper() not in SECURITY_PROTOCOLS:
        raise InvalidConfiguration(
            f"Invalid security protocol: {config.security_protocol}, valid values are {list(SECURITY_PROTOCOLS)}"
        )

    if (config.sasl_plain_username is None) != (config.sasl_plain_password is None):
        raise InvalidConfiguration("'sasl_plain_username' and 'sasl_plain_password' must be configured together")

    if config.metadata_timeout <= 0:
        raise InvalidConfiguration(f"'metadata_timeout' must be positive, got {config.metadata_timeout}")


def read_env_file(env_file_path: str | None) -> Config:
    return Config(_env_file=env_file_path, _env_file_encoding="utf-8")
