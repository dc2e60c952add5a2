"""
Database package - Infrastructure Layer

This package contains the MongoDB client used by the forecast service,
the translation of driver errors into persistence errors and the
reference data seeded at startup.
"""

from src.infrastructure.database.errors import translate_persistence_error
from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase", "translate_persistence_error"]
