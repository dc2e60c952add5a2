"""
Company Position Use Cases - Application Layer

This module computes the aggregate expected production of a company across
all of its power plants over a range of calendar days.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID

from dependency_injector.wiring import Provide, inject

from src.domain.entities.errors import (
    CompanyErrors,
    ForecastErrors,
    PersistenceError,
    error_from_persistence,
)
from src.domain.entities.result import Result
from src.domain.entities.timestamps import date_range_window
from src.domain.repositories.company_repository import ICompanyRepository
from src.domain.repositories.forecast_repository import IForecastRepository
from src.domain.repositories.power_plant_repository import IPowerPlantRepository
from src.shared import get_logger

from ..dtos.position_dto import CompanyPositionResponseDTO, PowerPlantPositionDTO

logger = get_logger(__name__)


class GetCompanyPositionUseCase:
    """Use case for computing a company's position over a date range."""

    @inject
    def __init__(
        self,
        company_repository: ICompanyRepository = Provide["company_repository"],
        power_plant_repository: IPowerPlantRepository = Provide[
            "power_plant_repository"
        ],
        forecast_repository: IForecastRepository = Provide["forecast_repository"],
    ):
        self.company_repository = company_repository
        self.power_plant_repository = power_plant_repository
        self.forecast_repository = forecast_repository

    async def execute(
        self, company_id: UUID, start_date: date, end_date: date
    ) -> Result[CompanyPositionResponseDTO]:
        """
        Compute the position of a company between two dates, both inclusive.

        The underlying window is ``[start_date 00:00 UTC, end_date + 1 day
        00:00 UTC)``. Every plant of the company is listed, with zero
        production when it has no active forecast in the window.

        Args:
            company_id: The company to report on
            start_date: First calendar day of the range
            end_date: Last calendar day of the range

        Returns:
            The position report, or Forecast.InvalidDateRange /
            Company.NotFound / a Database.* error
        """
        if start_date > end_date:
            return Result.failure(ForecastErrors.INVALID_DATE_RANGE)

        window_start, window_end = date_range_window(start_date, end_date)

        try:
            company = await self.company_repository.find_by_id(company_id)
            if company is None:
                return Result.failure(CompanyErrors.not_found(company_id))

            summaries = await self.forecast_repository.summarize_by_plant_for_company(
                company_id, window_start, window_end
            )
            power_plants = await self.power_plant_repository.find_by_company_id(
                company_id
            )
        except PersistenceError as exc:
            error = error_from_persistence(exc)
            logger.warning(
                "position.query.persistence_failed",
                company_id=str(company_id),
                error_code=error.code,
                error=str(exc),
            )
            return Result.failure(error)

        by_plant = {summary.power_plant_id: summary for summary in summaries}
        positions = [
            PowerPlantPositionDTO.from_summary(plant, by_plant.get(plant.id))
            for plant in power_plants
        ]
        total = sum(
            (position.total_production_mwh for position in positions), Decimal("0")
        )

        logger.debug(
            "position.query.completed",
            company_id=str(company_id),
            start=window_start.isoformat(),
            end=window_end.isoformat(),
            plants=len(positions),
        )

        return Result.success(
            CompanyPositionResponseDTO(
                company_id=company.id,
                company_name=company.name,
                start_date=start_date,
                end_date=end_date,
                total_position_mwh=total,
                power_plant_positions=positions,
            )
        )
