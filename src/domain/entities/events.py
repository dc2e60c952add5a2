"""
Domain Events - Position Changed

Ephemeral notification emitted after a forecast write changes the total
production of a company for a day. It is never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID

from .timestamps import utc_now


class PositionChangeReason(str, Enum):
    """Why a company's position was recomputed."""

    FORECAST_CREATED = "Forecast Created"
    FORECAST_UPDATED = "Forecast Updated"


@dataclass(frozen=True)
class PositionChangedEvent:
    """Total position of a company over the half-open day window it covers."""

    company_id: UUID
    start_date: datetime
    end_date: datetime
    total_position_mwh: Decimal
    reason: PositionChangeReason
    event_timestamp: datetime = field(default_factory=utc_now)
