"""
kafka_health - service entry point

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Sequence
from dependency_injector import providers
from kafka_health.api.factory import create_kafka_health_application, kafka_health_lifespan
from kafka_health.config import Config, InvalidConfiguration, read_env_file
from kafka_health.container import KafkaHealthContainer
from pydantic import ValidationError

import argparse
import kafka_health.api.factory
import kafka_health.api.routers.health
import os
import sys
import uvicorn

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kafka-health",
        description="HTTP service reporting the replication health of a Kafka cluster",
    )
    parser.add_argument(
        "-b",
        "--bootstrap.servers",
        dest="bootstrap_uri",
        help="Bootstrap servers list in Kafka format, eg. localhost:9092",
    )
    parser.add_argument(
        "-s",
        "--security.protocol",
        dest="security_protocol",
        help="Kafka security protocol (plaintext, ssl, sasl_plaintext, sasl_ssl)",
    )
    parser.add_argument("-u", "--sasl.username", dest="sasl_plain_username", help="Username to authenticate with Kafka")
    parser.add_argument("-p", "--sasl.password", dest="sasl_plain_password", help="Password to authenticate with Kafka")
    parser.add_argument("--host", help="Address the HTTP server listens on")
    parser.add_argument("--port", type=int, help="Port the HTTP server listens on")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS, help="Log level")
    return parser.parse_args(argv)


def get_config(args: argparse.Namespace) -> Config:
    """Returns the configuration with command line options applied.

    Options not given on the command line keep the value from the environment,
    the optional dotenv file pointed to by KAFKA_HEALTH_DOTENV, or the default.
    """
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return read_env_file(os.environ.get("KAFKA_HEALTH_DOTENV")).set_config_defaults(overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = get_config(args)
    except (InvalidConfiguration, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    container = KafkaHealthContainer()
    container.config.override(providers.Object(config))
    container.wire(
        modules=[
            kafka_health.api.factory,
            kafka_health.api.routers.health,
        ]
    )

    app = create_kafka_health_application(config=config, lifespan=kafka_health_lifespan)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower(), log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
