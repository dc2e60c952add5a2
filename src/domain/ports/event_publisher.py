"""Domain port for publishing position change notifications."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.events import PositionChangedEvent


class IEventPublisher(Protocol):
    """Delivers domain events to downstream consumers."""

    async def publish_position_changed(self, event: PositionChangedEvent) -> None:
        """Publish a position change.

        Implementations may raise on delivery failure; callers decide whether
        the failure affects their own outcome.
        """
        ...
