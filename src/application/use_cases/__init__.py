"""
Use Cases Package - Application Layer

This package contains the forecast upsert workflow, the company position
aggregation and the read queries, plus the system health use cases.
"""

from .company_position_use_cases import GetCompanyPositionUseCase
from .forecast_use_cases import (
    CreateOrUpdateForecastUseCase,
    GetForecastByIdUseCase,
    GetForecastsByPowerPlantUseCase,
)
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase

__all__ = [
    "CreateOrUpdateForecastUseCase",
    "GetForecastByIdUseCase",
    "GetForecastsByPowerPlantUseCase",
    "GetCompanyPositionUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
