"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .company_repository import CompanyRepository
from .forecast_repository import ForecastRepository
from .power_plant_repository import PowerPlantRepository

__all__ = ["CompanyRepository", "PowerPlantRepository", "ForecastRepository"]
