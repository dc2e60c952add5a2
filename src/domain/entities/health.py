"""
Health domain entities.

Value objects describing the availability of the document store and the
message broker, plus the operational metadata exposed by the service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    """Aggregated health; DOWN when the document store is unreachable."""

    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.status in (ServiceStatus.UP, ServiceStatus.DEGRADED)


@dataclass(slots=True)
class ApplicationInfo:
    """Build and runtime metadata surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
