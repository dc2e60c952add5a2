"""Domain ports package."""

from .event_publisher import IEventPublisher
from .health_check import IHealthCheckService

__all__ = ["IEventPublisher", "IHealthCheckService"]
