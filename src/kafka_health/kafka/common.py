"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from aiokafka.errors import (
    AuthenticationFailedError,
    for_code,
    IllegalStateError,
    KafkaConnectionError,
    KafkaTimeoutError,
    KafkaUnavailableError,
    UnknownTopicOrPartitionError,
)
from collections.abc import Callable, Iterable
from confluent_kafka.error import KafkaError, KafkaException
from typing import NoReturn, TypedDict
from typing_extensions import Unpack

import logging


def translate_from_kafkaerror(error: KafkaError) -> Exception:
    """Translate a `KafkaError` from `confluent_kafka` to a friendlier exception.

    `aiokafka.errors.for_code` maps broker error codes to named error classes.
    librdkafka also reports its own failures (timeouts, transport and resolve
    errors, failed authentication) with negative internal codes that
    `for_code` does not know about, those are mapped here explicitly.
    """
    code = error.code()
    if code in (
        KafkaError._NOENT,
        KafkaError._UNKNOWN_PARTITION,
        KafkaError._UNKNOWN_TOPIC,
    ):
        return UnknownTopicOrPartitionError()
    if code == KafkaError._TIMED_OUT:
        return KafkaTimeoutError()
    if code in (KafkaError._TRANSPORT, KafkaError._ALL_BROKERS_DOWN):
        return KafkaConnectionError(error.str())
    if code == KafkaError._RESOLVE:
        return KafkaUnavailableError()
    if code == KafkaError._AUTHENTICATION:
        return AuthenticationFailedError()
    if code == KafkaError._STATE:
        return IllegalStateError()

    return for_code(code)()


def raise_from_kafkaexception(exc: KafkaException) -> NoReturn:
    """Raises the `aiokafka` counterpart of a `KafkaException`.

    The `confluent_kafka` library's `KafkaException` only wraps a `KafkaError`,
    the `aiokafka` error classes carry the meaning in their names.
    """
    raise translate_from_kafkaerror(exc.args[0]) from exc


class KafkaClientParams(TypedDict, total=False):
    client_id: str | None
    sasl_mechanism: str | None
    sasl_plain_password: str | None
    sasl_plain_username: str | None
    security_protocol: str | None
    socket_timeout_ms: int | None
    ssl_cafile: str | None
    ssl_certfile: str | None
    ssl_crlfile: str | None
    ssl_keyfile: str | None


class _KafkaConfigMixin:
    """A mixin-class for Kafka client initialization.

    Meant to be combined with a client class from `confluent_kafka`, such as
    `AdminClient`. Translates keyword parameters into librdkafka configuration,
    and collects the errors reported through the error callback.
    """

    def __init__(
        self,
        bootstrap_servers: Iterable[str] | str,
        **params: Unpack[KafkaClientParams],
    ) -> None:
        self._errors: set[KafkaError] = set()
        self.log = logging.getLogger(f"{self.__module__}.{self.__class__.__qualname__}")

        super().__init__(self._get_config_from_params(bootstrap_servers, **params))  # type: ignore[call-arg]
        self._activate_callbacks()

    def _get_config_from_params(self, bootstrap_servers: Iterable[str] | str, **params: Unpack[KafkaClientParams]) -> dict:
        if not isinstance(bootstrap_servers, str):
            bootstrap_servers = ",".join(bootstrap_servers)

        config: dict[str, int | str | Callable | None] = {
            "bootstrap.servers": bootstrap_servers,
            "client.id": params.get("client_id"),
            "sasl.mechanism": params.get("sasl_mechanism"),
            "sasl.password": params.get("sasl_plain_password"),
            "sasl.username": params.get("sasl_plain_username"),
            "security.protocol": params.get("security_protocol"),
            "socket.timeout.ms": params.get("socket_timeout_ms"),
            "ssl.ca.location": params.get("ssl_cafile"),
            "ssl.certificate.location": params.get("ssl_certfile"),
            "ssl.crl.location": params.get("ssl_crlfile"),
            "ssl.key.location": params.get("ssl_keyfile"),
            "error_cb": self._error_callback,
        }
        return {key: value for key, value in config.items() if value is not None}

    def _error_callback(self, error: KafkaError) -> None:
        self._errors.add(error)

    def authentication_failed(self) -> bool:
        """Authentication failures are only reported through the error callback."""
        self._activate_callbacks()
        return any(error.code() == KafkaError._AUTHENTICATION for error in self._errors)

    def _activate_callbacks(self) -> None:
        # Callbacks registered with a `confluent_kafka` client only fire from `poll`
        self.poll(timeout=0.0)  # type: ignore[attr-defined]
