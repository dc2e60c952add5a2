"""
Domain Entities Package

This package contains the core domain entities, the error/result model
and the events emitted by the forecast workflows.
"""

from .company import Company
from .errors import (
    CompanyErrors,
    ConcurrencyConflictError,
    ConstraintViolationError,
    DatabaseConnectionError,
    DatabaseErrors,
    DatabaseOperationError,
    DatabaseTimeoutError,
    DomainError,
    Error,
    ErrorKind,
    ForecastErrors,
    ForeignKeyViolationError,
    PersistenceError,
    PowerPlantErrors,
    UniqueConstraintViolationError,
    error_from_persistence,
)
from .events import PositionChangedEvent, PositionChangeReason
from .forecast import Forecast, PowerPlantForecastSummary
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .power_plant import PowerPlant
from .result import Result

__all__ = [
    "Company",
    "PowerPlant",
    "Forecast",
    "PowerPlantForecastSummary",
    "PositionChangedEvent",
    "PositionChangeReason",
    "Result",
    "Error",
    "ErrorKind",
    "ForecastErrors",
    "PowerPlantErrors",
    "CompanyErrors",
    "DatabaseErrors",
    "DomainError",
    "PersistenceError",
    "ConcurrencyConflictError",
    "UniqueConstraintViolationError",
    "ForeignKeyViolationError",
    "ConstraintViolationError",
    "DatabaseTimeoutError",
    "DatabaseConnectionError",
    "DatabaseOperationError",
    "error_from_persistence",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
]
