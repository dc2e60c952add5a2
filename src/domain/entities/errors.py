"""
Domain Errors

This module defines the typed error model returned by the forecast
workflows, the catalogues of stable error codes, and the exceptions raised
by the persistence layer before they are converted into typed errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional
from uuid import UUID


class ErrorKind(str, Enum):
    """Category of a failure; callers derive retry behaviour from it."""

    NONE = "None"
    NOT_FOUND = "NotFound"
    NEGATIVE_PRODUCTION = "NegativeProduction"
    INVALID_DATE_RANGE = "InvalidDateRange"
    CONCURRENCY_CONFLICT = "ConcurrencyConflict"
    DATABASE_ERROR = "DatabaseError"
    CONNECTION_ERROR = "ConnectionError"
    TIMEOUT_ERROR = "TimeoutError"
    UNIQUE_CONSTRAINT_VIOLATION = "UniqueConstraintViolation"
    FOREIGN_KEY_VIOLATION = "ForeignKeyViolation"
    CONSTRAINT_VIOLATION = "ConstraintViolation"


@dataclass(frozen=True)
class Error:
    """Stable (code, message) pair describing an expected failure."""

    code: str
    message: str
    kind: ErrorKind = ErrorKind.NONE

    NONE: ClassVar["Error"]


Error.NONE = Error(code="", message="", kind=ErrorKind.NONE)


class ForecastErrors:
    """Errors raised by forecast operations."""

    NEGATIVE_PRODUCTION = Error(
        "Forecast.NegativeProduction",
        "Production value cannot be negative",
        ErrorKind.NEGATIVE_PRODUCTION,
    )
    INVALID_DATE_RANGE = Error(
        "Forecast.InvalidDateRange",
        "Start date must be before or equal to end date",
        ErrorKind.INVALID_DATE_RANGE,
    )
    CONCURRENCY_CONFLICT = Error(
        "Forecast.ConcurrencyConflict",
        "The forecast was modified by another user. Please refresh and try again",
        ErrorKind.CONCURRENCY_CONFLICT,
    )
    DATABASE_ERROR = Error(
        "Forecast.DatabaseError",
        "A database error occurred while processing the forecast",
        ErrorKind.DATABASE_ERROR,
    )

    @staticmethod
    def not_found(forecast_id: UUID) -> Error:
        return Error(
            "Forecast.NotFound",
            f"Forecast with ID {forecast_id} not found",
            ErrorKind.NOT_FOUND,
        )


class PowerPlantErrors:
    """Errors raised by power plant lookups."""

    CONCURRENCY_CONFLICT = Error(
        "PowerPlant.ConcurrencyConflict",
        "The power plant was modified by another user. Please refresh and try again",
        ErrorKind.CONCURRENCY_CONFLICT,
    )

    @staticmethod
    def not_found(power_plant_id: UUID) -> Error:
        return Error(
            "PowerPlant.NotFound",
            f"Power plant with ID {power_plant_id} not found",
            ErrorKind.NOT_FOUND,
        )


class CompanyErrors:
    """Errors raised by company lookups."""

    CONCURRENCY_CONFLICT = Error(
        "Company.ConcurrencyConflict",
        "The company was modified by another user. Please refresh and try again",
        ErrorKind.CONCURRENCY_CONFLICT,
    )

    @staticmethod
    def not_found(company_id: UUID) -> Error:
        return Error(
            "Company.NotFound",
            f"Company with ID {company_id} not found",
            ErrorKind.NOT_FOUND,
        )


class DatabaseErrors:
    """Persistence faults that are not tied to a single entity."""

    CONNECTION_ERROR = Error(
        "Database.ConnectionError",
        "Unable to connect to the database. Please try again later",
        ErrorKind.CONNECTION_ERROR,
    )
    TIMEOUT_ERROR = Error(
        "Database.TimeoutError",
        "The database operation timed out. Please try again",
        ErrorKind.TIMEOUT_ERROR,
    )
    UNIQUE_CONSTRAINT_VIOLATION = Error(
        "Database.UniqueConstraintViolation",
        "A record with the same unique value already exists",
        ErrorKind.UNIQUE_CONSTRAINT_VIOLATION,
    )
    FOREIGN_KEY_VIOLATION = Error(
        "Database.ForeignKeyViolation",
        "The operation violates a foreign key constraint",
        ErrorKind.FOREIGN_KEY_VIOLATION,
    )
    CONSTRAINT_VIOLATION = Error(
        "Database.ConstraintViolation",
        "A database constraint was violated",
        ErrorKind.CONSTRAINT_VIOLATION,
    )
    DATABASE_ERROR = Error(
        "Database.DatabaseError",
        "A database error occurred while processing the request",
        ErrorKind.DATABASE_ERROR,
    )


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PersistenceError(DomainError):
    """Raised by repositories when the data store rejects or fails an operation."""

    error: ClassVar[Error] = DatabaseErrors.DATABASE_ERROR


class ConcurrencyConflictError(PersistenceError):
    """Raised when the concurrency token changed between read and write."""

    def __init__(
        self,
        entity: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.entity = entity
        self.entity_id = entity_id
        message = f"{entity} with ID {entity_id} was modified concurrently"
        super().__init__(message, details)


class UniqueConstraintViolationError(PersistenceError):
    """Raised when a write duplicates a unique key."""

    error = DatabaseErrors.UNIQUE_CONSTRAINT_VIOLATION


class ForeignKeyViolationError(PersistenceError):
    """Raised when a write references a missing parent record."""

    error = DatabaseErrors.FOREIGN_KEY_VIOLATION


class ConstraintViolationError(PersistenceError):
    """Raised when a write breaks any other declared constraint."""

    error = DatabaseErrors.CONSTRAINT_VIOLATION


class DatabaseTimeoutError(PersistenceError):
    """Raised when the data store does not answer in time."""

    error = DatabaseErrors.TIMEOUT_ERROR


class DatabaseConnectionError(PersistenceError):
    """Raised when the data store cannot be reached."""

    error = DatabaseErrors.CONNECTION_ERROR


class DatabaseOperationError(PersistenceError):
    """Raised for any persistence fault that matches no known pattern."""


_CONCURRENCY_ERRORS = {
    "Forecast": ForecastErrors.CONCURRENCY_CONFLICT,
    "PowerPlant": PowerPlantErrors.CONCURRENCY_CONFLICT,
    "Company": CompanyErrors.CONCURRENCY_CONFLICT,
}


def error_from_persistence(
    exc: PersistenceError, fallback: Error = DatabaseErrors.DATABASE_ERROR
) -> Error:
    """
    Convert a persistence exception into the typed error shown to callers.

    Args:
        exc: The exception raised by a repository
        fallback: Error used for unclassified faults

    Returns:
        The error carrying a safe, generic message
    """
    if isinstance(exc, ConcurrencyConflictError):
        return _CONCURRENCY_ERRORS.get(exc.entity, ForecastErrors.CONCURRENCY_CONFLICT)
    if isinstance(exc, DatabaseOperationError) or type(exc) is PersistenceError:
        return fallback
    return exc.error
