"""
Position DTOs - Application Layer

This module defines the company position report returned by the API.
"""

from datetime import date
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.forecast import PowerPlantForecastSummary
from src.domain.entities.power_plant import PowerPlant


class PowerPlantPositionDTO(BaseModel):
    """Contribution of one plant to a company position."""

    power_plant_id: UUID
    power_plant_name: str
    country: str
    total_production_mwh: Decimal
    forecast_count: int

    @classmethod
    def from_summary(
        cls, power_plant: PowerPlant, summary: PowerPlantForecastSummary | None
    ) -> "PowerPlantPositionDTO":
        return cls(
            power_plant_id=power_plant.id,
            power_plant_name=power_plant.name,
            country=power_plant.country,
            total_production_mwh=(
                summary.total_production_mwh if summary else Decimal("0")
            ),
            forecast_count=summary.forecast_count if summary else 0,
        )


class CompanyPositionResponseDTO(BaseModel):
    """Aggregate expected production of a company over a date range."""

    company_id: UUID
    company_name: str
    start_date: date = Field(description="First day of the range (inclusive)")
    end_date: date = Field(description="Last day of the range (inclusive)")
    total_position_mwh: Decimal
    power_plant_positions: List[PowerPlantPositionDTO] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "company_id": "11111111-1111-1111-1111-111111111111",
                "company_name": "Energy Trading Corp",
                "start_date": "2025-01-01",
                "end_date": "2025-01-01",
                "total_position_mwh": "150.50",
                "power_plant_positions": [
                    {
                        "power_plant_id": "33333333-3333-3333-3333-333333333333",
                        "power_plant_name": "Bulgaria Power Plant",
                        "country": "Bulgaria",
                        "total_production_mwh": "0",
                        "forecast_count": 0,
                    },
                    {
                        "power_plant_id": "44444444-4444-4444-4444-444444444444",
                        "power_plant_name": "Spain Power Plant",
                        "country": "Spain",
                        "total_production_mwh": "50.00",
                        "forecast_count": 1,
                    },
                    {
                        "power_plant_id": "22222222-2222-2222-2222-222222222222",
                        "power_plant_name": "Turkey Power Plant",
                        "country": "Turkey",
                        "total_production_mwh": "100.50",
                        "forecast_count": 1,
                    },
                ],
            }
        }
    }
