"""
Persistence error translation - Infrastructure Layer

Classifies driver exceptions into the domain's ``PersistenceError`` family
from their type first and their message second.
"""

from typing import Any, Dict, Optional

import pymongo.errors

from src.domain.entities.errors import (
    ConstraintViolationError,
    DatabaseConnectionError,
    DatabaseOperationError,
    DatabaseTimeoutError,
    ForeignKeyViolationError,
    PersistenceError,
    UniqueConstraintViolationError,
)

_TIMEOUT_ERRORS = (
    pymongo.errors.ExecutionTimeout,
    pymongo.errors.NetworkTimeout,
    pymongo.errors.WTimeoutError,
    TimeoutError,
)


def translate_persistence_error(
    exc: Exception, operation: str, details: Optional[Dict[str, Any]] = None
) -> PersistenceError:
    """
    Map a driver exception to a typed persistence error.

    Args:
        exc: The exception raised by the driver
        operation: Short name of the failed operation, kept for diagnostics
        details: Extra context attached to the translated error

    Returns:
        The persistence error to raise in place of ``exc``
    """
    context = {"operation": operation, **(details or {})}
    message = str(exc)

    if isinstance(exc, pymongo.errors.DuplicateKeyError):
        return UniqueConstraintViolationError(message, context)
    if isinstance(exc, pymongo.errors.ServerSelectionTimeoutError):
        return DatabaseConnectionError(message, context)
    if isinstance(exc, _TIMEOUT_ERRORS):
        return DatabaseTimeoutError(message, context)
    if isinstance(exc, pymongo.errors.ConnectionFailure):
        return DatabaseConnectionError(message, context)

    lowered = message.lower()
    if "duplicate" in lowered or "unique" in lowered:
        return UniqueConstraintViolationError(message, context)
    if "foreign key" in lowered:
        return ForeignKeyViolationError(message, context)
    if "constraint" in lowered:
        return ConstraintViolationError(message, context)
    if "timeout" in lowered or "timed out" in lowered:
        return DatabaseTimeoutError(message, context)
    if "connection" in lowered:
        return DatabaseConnectionError(message, context)

    return DatabaseOperationError(message, context)
