"""RabbitMQ implementation of the event publisher port."""

from __future__ import annotations

import asyncio
import json
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pika
import pika.exceptions
from pika.adapters.blocking_connection import BlockingChannel

from src.domain.entities.events import PositionChangedEvent
from src.domain.ports.event_publisher import IEventPublisher
from src.shared import get_logger

logger = get_logger(__name__)

EVENT_TYPE = "PositionChangedEvent"


def position_changed_payload(event: PositionChangedEvent) -> Dict[str, Any]:
    """Wire representation of a position change, camelCase keys."""
    return {
        "companyId": str(event.company_id),
        "startDate": event.start_date.isoformat(),
        "endDate": event.end_date.isoformat(),
        "totalPositionMWh": str(event.total_position_mwh),
        "eventTimestamp": event.event_timestamp.isoformat(),
        "reason": event.reason.value,
    }


class RabbitMQEventPublisher(IEventPublisher):
    """
    Publish position changes to a durable topic exchange.

    pika's blocking connection is not thread safe, so publishes are
    serialised by a lock and executed in a worker thread. The connection is
    opened lazily and re-opened after a failure.
    """

    def __init__(
        self,
        broker_url: str,
        exchange: str = "forecast.events",
        routing_key: str = "position.changed",
        *,
        socket_timeout: float = 5.0,
    ) -> None:
        self._broker_url = broker_url
        self._exchange = exchange
        self._routing_key = routing_key
        self._socket_timeout = socket_timeout
        self._lock = threading.Lock()
        self._connection: Optional[pika.BlockingConnection] = None
        self._channel: Optional[BlockingChannel] = None

    async def publish_position_changed(self, event: PositionChangedEvent) -> None:
        body = json.dumps(position_changed_payload(event)).encode("utf-8")
        await asyncio.to_thread(self._publish, body)
        logger.info(
            "position.event.published",
            backend="rabbitmq",
            exchange=self._exchange,
            routing_key=self._routing_key,
            company_id=str(event.company_id),
            total_position_mwh=str(event.total_position_mwh),
            reason=event.reason.value,
        )

    def _publish(self, body: bytes) -> None:
        properties = pika.BasicProperties(
            content_type="application/json",
            delivery_mode=pika.DeliveryMode.Persistent,
            message_id=str(uuid.uuid4()),
            timestamp=int(datetime.now(timezone.utc).timestamp()),
            type=EVENT_TYPE,
        )
        with self._lock:
            channel = self._ensure_channel()
            try:
                channel.basic_publish(
                    exchange=self._exchange,
                    routing_key=self._routing_key,
                    body=body,
                    properties=properties,
                )
            except pika.exceptions.AMQPError:
                self._reset()
                raise

    def _ensure_channel(self) -> BlockingChannel:
        if self._channel is not None and self._channel.is_open:
            return self._channel

        self._reset()
        params = pika.URLParameters(self._broker_url)
        params.socket_timeout = self._socket_timeout
        connection = pika.BlockingConnection(params)
        channel = connection.channel()
        channel.exchange_declare(
            exchange=self._exchange,
            exchange_type="topic",
            durable=True,
            auto_delete=False,
        )
        self._connection = connection
        self._channel = channel
        logger.info("rabbitmq.connected", exchange=self._exchange)
        return channel

    def _reset(self) -> None:
        connection, self._connection, self._channel = self._connection, None, None
        if connection is not None and connection.is_open:
            try:
                connection.close()
            except pika.exceptions.AMQPError as exc:
                logger.debug("rabbitmq.close_failed", error=str(exc))

    def close(self) -> None:
        """Close the broker connection if one is open."""
        with self._lock:
            self._reset()
