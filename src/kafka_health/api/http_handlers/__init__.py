"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from kafka_health.api.routers.errors import HealthErrorCodes
from kafka_health.config import InvalidConfiguration
from kafka_health.errors import SnapshotUnavailable
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request as StarletteHTTPRequest


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: StarletteHTTPRequest, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error_code": exc.status_code, "message": exc.detail},
        )

    @app.exception_handler(SnapshotUnavailable)
    async def snapshot_unavailable_handler(_: StarletteHTTPRequest, exc: SnapshotUnavailable) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error_code": HealthErrorCodes.SNAPSHOT_UNAVAILABLE.value,
                "message": str(exc),
            },
        )

    @app.exception_handler(InvalidConfiguration)
    async def invalid_configuration_handler(_: StarletteHTTPRequest, exc: InvalidConfiguration) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error_code": HealthErrorCodes.INVALID_CONFIGURATION.value,
                "message": str(exc),
            },
        )
