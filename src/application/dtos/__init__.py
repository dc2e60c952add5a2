"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .api_result import ApiResultDTO, ProblemDetailsDTO
from .forecast_dto import CreateOrUpdateForecastRequestDTO, ForecastResponseDTO
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .position_dto import CompanyPositionResponseDTO, PowerPlantPositionDTO

__all__ = [
    "ApiResultDTO",
    "ProblemDetailsDTO",
    "CreateOrUpdateForecastRequestDTO",
    "ForecastResponseDTO",
    "CompanyPositionResponseDTO",
    "PowerPlantPositionDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
