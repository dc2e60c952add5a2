"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns: MongoDB persistence,
RabbitMQ event publishing and dependency health checks.
"""

from src.infrastructure import events, repositories

__all__ = ["events", "repositories"]
