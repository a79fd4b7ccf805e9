"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from fastapi import FastAPI
from kafka_health.api.routers.health import health_router
from kafka_health.api.routers.root import root_router


def setup_routers(app: FastAPI) -> None:
    app.include_router(health_router)
    app.include_router(root_router)
