"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Iterable, List

import pika

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.database.mongo_database import MongoDatabase

RABBITMQ_BACKEND = "rabbitmq"


class HealthCheckService(IHealthCheckService):
    """
    Probe MongoDB and RabbitMQ.

    MongoDB is required: when it is down the service is down. The broker
    only carries best-effort notifications, so a broker outage degrades the
    service. The broker is not probed when events are kept in memory.
    """

    def __init__(
        self,
        mongo_database: MongoDatabase,
        event_backend: str,
        broker_url: str,
        *,
        socket_timeout: float = 5.0,
    ) -> None:
        self._mongo_database = mongo_database
        self._event_backend = event_backend
        self._broker_url = broker_url
        self._socket_timeout = socket_timeout

    async def evaluate(self) -> SystemHealth:
        """Run checks concurrently and aggregate system health."""

        checks = {
            "mongo": asyncio.create_task(self._check_mongo()),
            "rabbitmq": asyncio.create_task(self._check_rabbitmq()),
        }

        dependency_statuses: List[DependencyStatus] = []

        for name, task in checks.items():
            try:
                dependency_statuses.append(await task)
            except Exception as exc:
                dependency_statuses.append(
                    DependencyStatus(
                        name=name,
                        status=ServiceStatus.DOWN,
                        message=str(exc),
                    )
                )

        overall_status = self._aggregate_status(dependency_statuses)
        return SystemHealth(status=overall_status, dependencies=dependency_statuses)

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                if status.name == "mongo":
                    return ServiceStatus.DOWN
                has_degraded = True
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN and not status.details.get(
                "skipped"
            ):
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    async def _check_mongo(self) -> DependencyStatus:
        if not self._mongo_database:
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.ping)
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.UP,
                message="MongoDB ping successful",
                latency_ms=latency_ms,
                details={"database": self._mongo_database.db.name},
            )
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=latency_ms,
            )

    async def _check_rabbitmq(self) -> DependencyStatus:
        if self._event_backend != RABBITMQ_BACKEND:
            return DependencyStatus(
                name="rabbitmq",
                status=ServiceStatus.UNKNOWN,
                message=f"Event backend '{self._event_backend}' configured.",
                details={"skipped": True},
            )
        if not self._broker_url:
            return DependencyStatus(
                name="rabbitmq",
                status=ServiceStatus.UNKNOWN,
                message="RabbitMQ broker URL not configured.",
            )

        start = perf_counter()

        def _ping() -> None:
            params = pika.URLParameters(self._broker_url)
            params.socket_timeout = self._socket_timeout
            connection = pika.BlockingConnection(params)
            try:
                channel = connection.channel()
                channel.close()
            finally:
                connection.close()

        try:
            await asyncio.to_thread(_ping)
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="rabbitmq",
                status=ServiceStatus.UP,
                message="RabbitMQ connection successful",
                latency_ms=latency_ms,
            )
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name="rabbitmq",
                status=ServiceStatus.DOWN,
                message=f"RabbitMQ connection failed: {exc}",
                latency_ms=latency_ms,
            )
