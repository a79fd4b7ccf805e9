"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from dependency_injector.wiring import inject, Provide
from fastapi import Depends, FastAPI
from kafka_health import version as kafka_health_version
from kafka_health.api.http_handlers import setup_exception_handlers
from kafka_health.api.routers.setup import setup_routers
from kafka_health.config import Config
from kafka_health.container import KafkaHealthContainer
from kafka_health.logging_setup import configure_logging, log_config_without_secrets
from kafka_health.metadata import MetadataSource
from typing import AsyncContextManager

import logging


@asynccontextmanager
@inject
async def kafka_health_lifespan(
    _: FastAPI,
    metadata_source: MetadataSource = Depends(Provide[KafkaHealthContainer.metadata_source]),
) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        metadata_source.close()


def create_kafka_health_application(
    *,
    config: Config,
    lifespan: Callable[[FastAPI, MetadataSource], AsyncContextManager[None]],
) -> FastAPI:
    configure_logging(config=config)
    log_config_without_secrets(config=config)
    logging.info("Starting Kafka health service (%s)", kafka_health_version.__version__)

    app = FastAPI(title="Kafka health", version=kafka_health_version.__version__, lifespan=lifespan)  # type: ignore[arg-type]

    setup_routers(app=app)
    setup_exception_handlers(app=app)

    return app
