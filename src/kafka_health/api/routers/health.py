"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends
from kafka_health.container import KafkaHealthContainer
from kafka_health.health import evaluate, HealthReport, HealthStatus, PartitionDetail
from kafka_health.metadata import MetadataSource
from pydantic import BaseModel


class PartitionDetailResponse(BaseModel):
    topic: str
    partition: int
    replicas: list[int]
    isr: list[int]

    @classmethod
    def from_detail(cls, detail: PartitionDetail) -> "PartitionDetailResponse":
        return cls(
            topic=detail.topic,
            partition=detail.partition,
            replicas=list(detail.replicas),
            isr=list(detail.isr),
        )


class HealthReportResponse(BaseModel):
    status: HealthStatus
    brokers: int
    topics: int
    out_of_sync_partitions: list[PartitionDetailResponse] | None = None

    @classmethod
    def from_report(cls, report: HealthReport) -> "HealthReportResponse":
        out_of_sync_partitions = None
        if report.out_of_sync_partitions is not None:
            out_of_sync_partitions = [
                PartitionDetailResponse.from_detail(detail) for detail in report.out_of_sync_partitions
            ]
        return cls(
            status=report.status,
            brokers=report.brokers,
            topics=report.topics,
            out_of_sync_partitions=out_of_sync_partitions,
        )


health_router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        404: {"description": "Not found"},
        503: {"description": "Cluster metadata unavailable"},
    },
)


# A plain function: FastAPI runs it in the threadpool, the metadata fetch blocks.
@health_router.get("")
@inject
def health(
    metadata_source: MetadataSource = Depends(Provide[KafkaHealthContainer.metadata_source]),
) -> HealthReportResponse:
    snapshot = metadata_source.fetch_snapshot()
    return HealthReportResponse.from_report(evaluate(snapshot))
