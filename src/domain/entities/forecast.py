"""
Domain Entities - Forecast

This module defines the forecast entity submitted by power plants and the
per-plant summary projection used when aggregating company positions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from .timestamps import ONE_MILLISECOND, normalize_instant, utc_now


@dataclass
class Forecast:
    """
    Expected production of a power plant at a given instant.

    The pair (power_plant_id, forecast_date_time) is the natural key: at most
    one active forecast exists for it. ``version`` is the optimistic
    concurrency token and increases by one on every persisted update.
    """

    id: UUID = field(default_factory=uuid4)
    power_plant_id: Optional[UUID] = None
    forecast_date_time: datetime = field(default_factory=utc_now)
    production_mwh: Decimal = Decimal("0")
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    version: int = 1

    def __post_init__(self) -> None:
        self.forecast_date_time = normalize_instant(self.forecast_date_time)
        self.created_at = normalize_instant(self.created_at)
        self.updated_at = normalize_instant(self.updated_at)

    @classmethod
    def new(
        cls, power_plant_id: UUID, forecast_date_time: datetime, production_mwh: Decimal
    ) -> "Forecast":
        """Create a fresh active forecast whose creation and update stamps match."""
        now = utc_now()
        return cls(
            power_plant_id=power_plant_id,
            forecast_date_time=forecast_date_time,
            production_mwh=production_mwh,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_new(self) -> bool:
        """Whether the forecast has never been updated since creation."""
        return self.created_at == self.updated_at

    def update_production(self, production_mwh: Decimal) -> None:
        """Replace the production value and advance ``updated_at``."""
        self.production_mwh = production_mwh
        self.update_timestamp()

    def update_timestamp(self) -> None:
        """Advance 'updated_at' to now, strictly past its previous value."""
        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + ONE_MILLISECOND
        self.updated_at = now


@dataclass(frozen=True)
class PowerPlantForecastSummary:
    """Sum and count of a plant's active forecasts inside a window."""

    power_plant_id: UUID
    power_plant_name: str
    country: str
    total_production_mwh: Decimal
    forecast_count: int
