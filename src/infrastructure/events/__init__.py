"""
Events package - Infrastructure Layer

Implementations of the event publisher port.
"""

from .in_memory_event_publisher import InMemoryEventPublisher
from .rabbitmq_event_publisher import RabbitMQEventPublisher, position_changed_payload

__all__ = [
    "InMemoryEventPublisher",
    "RabbitMQEventPublisher",
    "position_changed_payload",
]
