"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .company_repository import ICompanyRepository
from .forecast_repository import IForecastRepository
from .power_plant_repository import IPowerPlantRepository

__all__ = ["ICompanyRepository", "IPowerPlantRepository", "IForecastRepository"]
