"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Build metadata and connection targets reported by /info."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    database_name: str
    event_backend: str
    broker_url: str
    exchange: str
