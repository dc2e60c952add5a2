"""In-process event publisher used for local runs and tests."""

from __future__ import annotations

from typing import List, Tuple

from src.domain.entities.events import PositionChangedEvent
from src.domain.ports.event_publisher import IEventPublisher
from src.shared import get_logger

logger = get_logger(__name__)


class InMemoryEventPublisher(IEventPublisher):
    """Keeps published events in memory; each instance has its own store."""

    def __init__(self) -> None:
        self._events: List[PositionChangedEvent] = []

    async def publish_position_changed(self, event: PositionChangedEvent) -> None:
        self._events.append(event)
        logger.info(
            "position.event.published",
            backend="in_memory",
            company_id=str(event.company_id),
            total_position_mwh=str(event.total_position_mwh),
            reason=event.reason.value,
        )

    @property
    def events(self) -> Tuple[PositionChangedEvent, ...]:
        """Events published so far, oldest first."""
        return tuple(self._events)
