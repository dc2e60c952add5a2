"""
Forecast Repository Interface

This module defines the persistence contract for forecasts, including the
aggregate queries used to compute company positions. Implementations raise
subclasses of ``PersistenceError`` when the data store fails.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from src.domain.entities.forecast import Forecast, PowerPlantForecastSummary


class IForecastRepository(ABC):
    """Interface for Forecast repository implementations."""

    @abstractmethod
    async def find_by_id(self, forecast_id: UUID) -> Optional[Forecast]:
        """
        Find a forecast by its ID, active or not.

        Args:
            forecast_id: The unique identifier of the forecast

        Returns:
            The forecast if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_plant_and_instant(
        self, power_plant_id: UUID, forecast_date_time: datetime
    ) -> Optional[Forecast]:
        """
        Find the active forecast for a natural key.

        Args:
            power_plant_id: The plant the forecast belongs to
            forecast_date_time: The forecast instant (UTC)

        Returns:
            The active forecast if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_by_plant(
        self, power_plant_id: UUID, start: datetime, end: datetime
    ) -> List[Forecast]:
        """
        List a plant's active forecasts with ``start <= instant <= end``.

        Returns:
            Forecasts ordered by forecast instant ascending
        """
        pass

    @abstractmethod
    async def create(self, forecast: Forecast) -> Forecast:
        """
        Persist a new forecast.

        Raises:
            UniqueConstraintViolationError: If an active forecast already
                exists for the same plant and instant
        """
        pass

    @abstractmethod
    async def update(self, forecast: Forecast, expected_version: int) -> Forecast:
        """
        Persist changes to an existing forecast.

        The write only applies if the stored version still equals
        ``expected_version``; the stored version is then incremented.

        Raises:
            ConcurrencyConflictError: If the stored version moved on
        """
        pass

    @abstractmethod
    async def sum_active_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> Decimal:
        """
        Sum active production of all the company's plants in ``[start, end)``.

        Returns:
            The total, ``Decimal("0")`` when nothing matches
        """
        pass

    @abstractmethod
    async def summarize_by_plant_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> List[PowerPlantForecastSummary]:
        """
        Group active forecasts in ``[start, end)`` by plant.

        Plants without forecasts in the window are omitted.

        Returns:
            One summary per plant, ordered by plant name
        """
        pass
