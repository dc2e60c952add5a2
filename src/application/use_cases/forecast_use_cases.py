"""
Forecast Use Cases - Application Layer

This module defines the forecast upsert workflow and the forecast read
queries. Expected failures are returned as ``Result`` values; persistence
exceptions raised by repositories are converted into typed errors here.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from dependency_injector.wiring import Provide, inject

from src.domain.entities.errors import (
    ForecastErrors,
    PersistenceError,
    PowerPlantErrors,
    error_from_persistence,
)
from src.domain.entities.events import PositionChangedEvent, PositionChangeReason
from src.domain.entities.forecast import Forecast
from src.domain.entities.power_plant import PowerPlant
from src.domain.entities.result import Result
from src.domain.entities.timestamps import day_window, normalize_instant, to_utc
from src.domain.ports.event_publisher import IEventPublisher
from src.domain.repositories.forecast_repository import IForecastRepository
from src.domain.repositories.power_plant_repository import IPowerPlantRepository
from src.shared import get_logger

from ..dtos.forecast_dto import CreateOrUpdateForecastRequestDTO, ForecastResponseDTO

logger = get_logger(__name__)


class CreateOrUpdateForecastUseCase:
    """
    Use case for submitting a forecast.

    A forecast is keyed by (power plant, instant). Submitting a forecast for a
    key that already has an active forecast replaces its production value,
    otherwise a new forecast is created. After a successful write the owning
    company's position for the forecast's UTC day is recomputed and published.
    """

    @inject
    def __init__(
        self,
        forecast_repository: IForecastRepository = Provide["forecast_repository"],
        power_plant_repository: IPowerPlantRepository = Provide[
            "power_plant_repository"
        ],
        event_publisher: IEventPublisher = Provide["event_publisher"],
    ):
        self.forecast_repository = forecast_repository
        self.power_plant_repository = power_plant_repository
        self.event_publisher = event_publisher

    async def execute(
        self, request: CreateOrUpdateForecastRequestDTO
    ) -> Result[ForecastResponseDTO]:
        """
        Create or update the forecast identified by plant and instant.

        Args:
            request: Forecast submission

        Returns:
            The stored forecast enriched with plant details, or one of
            PowerPlant.NotFound, Forecast.NegativeProduction,
            Forecast.ConcurrencyConflict and the Database.* errors
        """
        try:
            power_plant = await self.power_plant_repository.find_by_id(
                request.power_plant_id
            )
        except PersistenceError as exc:
            return self._persistence_failure(exc, request)

        if power_plant is None:
            return Result.failure(PowerPlantErrors.not_found(request.power_plant_id))

        if request.production_mwh < 0:
            return Result.failure(ForecastErrors.NEGATIVE_PRODUCTION)

        instant = normalize_instant(request.forecast_date_time)

        try:
            existing = await self.forecast_repository.find_active_by_plant_and_instant(
                power_plant.id, instant
            )
            if existing is not None:
                expected_version = existing.version
                existing.update_production(request.production_mwh)
                forecast = await self.forecast_repository.update(
                    existing, expected_version
                )
                reason = PositionChangeReason.FORECAST_UPDATED
            else:
                forecast = await self.forecast_repository.create(
                    Forecast.new(
                        power_plant_id=power_plant.id,
                        forecast_date_time=instant,
                        production_mwh=request.production_mwh,
                    )
                )
                reason = PositionChangeReason.FORECAST_CREATED
        except PersistenceError as exc:
            return self._persistence_failure(exc, request)

        logger.info(
            "forecast.upsert.updated"
            if reason is PositionChangeReason.FORECAST_UPDATED
            else "forecast.upsert.created",
            forecast_id=str(forecast.id),
            power_plant_id=str(power_plant.id),
            forecast_date_time=forecast.forecast_date_time.isoformat(),
            version=forecast.version,
        )

        await self._publish_position_changed(power_plant, forecast, reason)

        return Result.success(ForecastResponseDTO.from_domain(forecast, power_plant))

    async def _publish_position_changed(
        self,
        power_plant: PowerPlant,
        forecast: Forecast,
        reason: PositionChangeReason,
    ) -> None:
        """Recompute the company's daily position and notify subscribers.

        Failures are logged and never affect the outcome of the write.
        """
        if power_plant.company_id is None:
            return

        start, end = day_window(forecast.forecast_date_time)
        try:
            total = await self.forecast_repository.sum_active_for_company(
                power_plant.company_id, start, end
            )
            await self.event_publisher.publish_position_changed(
                PositionChangedEvent(
                    company_id=power_plant.company_id,
                    start_date=start,
                    end_date=end,
                    total_position_mwh=total,
                    reason=reason,
                )
            )
        except Exception as exc:
            logger.warning(
                "position.event.publish_failed",
                company_id=str(power_plant.company_id),
                forecast_id=str(forecast.id),
                reason=reason.value,
                error=str(exc),
                exc_info=True,
            )

    def _persistence_failure(
        self, exc: PersistenceError, request: CreateOrUpdateForecastRequestDTO
    ) -> Result[ForecastResponseDTO]:
        error = error_from_persistence(exc, fallback=ForecastErrors.DATABASE_ERROR)
        logger.warning(
            "forecast.upsert.persistence_failed",
            power_plant_id=str(request.power_plant_id),
            error_code=error.code,
            error=str(exc),
        )
        return Result.failure(error)


class GetForecastByIdUseCase:
    """Use case for retrieving a forecast by ID."""

    @inject
    def __init__(
        self,
        forecast_repository: IForecastRepository = Provide["forecast_repository"],
        power_plant_repository: IPowerPlantRepository = Provide[
            "power_plant_repository"
        ],
    ):
        self.forecast_repository = forecast_repository
        self.power_plant_repository = power_plant_repository

    async def execute(self, forecast_id: UUID) -> Result[ForecastResponseDTO]:
        """
        Retrieve a forecast, active or not, by its ID.

        Returns:
            The forecast enriched with plant details, or Forecast.NotFound
        """
        try:
            forecast = await self.forecast_repository.find_by_id(forecast_id)
            if forecast is None or forecast.power_plant_id is None:
                return Result.failure(ForecastErrors.not_found(forecast_id))

            power_plant = await self.power_plant_repository.find_by_id(
                forecast.power_plant_id
            )
        except PersistenceError as exc:
            return Result.failure(
                error_from_persistence(exc, fallback=ForecastErrors.DATABASE_ERROR)
            )

        if power_plant is None:
            return Result.failure(PowerPlantErrors.not_found(forecast.power_plant_id))

        return Result.success(ForecastResponseDTO.from_domain(forecast, power_plant))


class GetForecastsByPowerPlantUseCase:
    """Use case for listing a plant's active forecasts in a time range."""

    @inject
    def __init__(
        self,
        forecast_repository: IForecastRepository = Provide["forecast_repository"],
        power_plant_repository: IPowerPlantRepository = Provide[
            "power_plant_repository"
        ],
    ):
        self.forecast_repository = forecast_repository
        self.power_plant_repository = power_plant_repository

    async def execute(
        self, power_plant_id: UUID, start: datetime, end: datetime
    ) -> Result[List[ForecastResponseDTO]]:
        """
        List active forecasts of a plant with ``start <= instant <= end``.

        Args:
            power_plant_id: The plant to list forecasts for
            start: First instant of the range (inclusive)
            end: Last instant of the range (inclusive)

        Returns:
            Forecasts ordered by instant, or Forecast.InvalidDateRange /
            PowerPlant.NotFound
        """
        start = to_utc(start)
        end = to_utc(end)
        if start > end:
            return Result.failure(ForecastErrors.INVALID_DATE_RANGE)

        try:
            power_plant = await self.power_plant_repository.find_by_id(power_plant_id)
            if power_plant is None:
                return Result.failure(PowerPlantErrors.not_found(power_plant_id))

            forecasts = await self.forecast_repository.find_active_by_plant(
                power_plant_id, start, end
            )
        except PersistenceError as exc:
            return Result.failure(
                error_from_persistence(exc, fallback=ForecastErrors.DATABASE_ERROR)
            )

        return Result.success(
            [ForecastResponseDTO.from_domain(f, power_plant) for f in forecasts]
        )
