"""
Forecast DTOs - Application Layer

This module defines the Data Transfer Objects exchanged with the API when
submitting and reading power plant forecasts.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.forecast import Forecast
from src.domain.entities.power_plant import PowerPlant


class CreateOrUpdateForecastRequestDTO(BaseModel):
    """DTO for submitting the production forecast of a plant at an instant."""

    power_plant_id: UUID = Field(..., description="Power plant the forecast is for")
    forecast_date_time: datetime = Field(
        ..., description="Forecast instant; naive values are read as UTC"
    )
    production_mwh: Decimal = Field(
        ...,
        description="Expected production in MWh",
        max_digits=18,
        decimal_places=6,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "power_plant_id": "22222222-2222-2222-2222-222222222222",
                "forecast_date_time": "2025-01-01T10:00:00Z",
                "production_mwh": "100.50",
            }
        }
    }


class ForecastResponseDTO(BaseModel):
    """DTO for a stored forecast enriched with its plant's details."""

    id: UUID
    power_plant_id: UUID
    power_plant_name: str
    country: str
    forecast_date_time: datetime
    production_mwh: Decimal
    is_active: bool
    created_at: datetime
    updated_at: datetime
    version: int

    @classmethod
    def from_domain(
        cls, forecast: Forecast, power_plant: PowerPlant
    ) -> "ForecastResponseDTO":
        return cls(
            id=forecast.id,
            power_plant_id=power_plant.id,
            power_plant_name=power_plant.name,
            country=power_plant.country,
            forecast_date_time=forecast.forecast_date_time,
            production_mwh=forecast.production_mwh,
            is_active=forecast.is_active,
            created_at=forecast.created_at,
            updated_at=forecast.updated_at,
            version=forecast.version,
        )

    @property
    def is_new(self) -> bool:
        """Whether the forecast was created rather than updated."""
        return self.created_at == self.updated_at

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "power_plant_id": "22222222-2222-2222-2222-222222222222",
                "power_plant_name": "Turkey Power Plant",
                "country": "Turkey",
                "forecast_date_time": "2025-01-01T10:00:00Z",
                "production_mwh": "100.50",
                "is_active": True,
                "created_at": "2025-01-01T09:00:00.123Z",
                "updated_at": "2025-01-01T09:00:00.123Z",
                "version": 1,
            }
        }
    }
