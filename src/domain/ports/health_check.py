"""Domain port for dependency health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Probes the document store and the message broker."""

    async def evaluate(self) -> SystemHealth:
        """Probe every dependency and aggregate the overall status."""
        ...
