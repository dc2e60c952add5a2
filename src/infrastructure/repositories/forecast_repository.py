"""
MongoDB Forecast Repository - Infrastructure Layer

This module implements the ForecastRepository interface using MongoDB
as the underlying data store. Production values are stored as Decimal128
so that they round-trip exactly, and company level aggregates are computed
server side in a single pipeline joined against the power plants.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

import pymongo
import pymongo.errors
from bson.decimal128 import Decimal128

from src.domain.entities.errors import ConcurrencyConflictError
from src.domain.entities.forecast import Forecast, PowerPlantForecastSummary
from src.domain.repositories.forecast_repository import IForecastRepository
from src.infrastructure.database import MongoDatabase, translate_persistence_error
from src.infrastructure.database.mongo_database import FORECASTS, POWER_PLANTS


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class ForecastRepository(IForecastRepository):
    """MongoDB implementation of the ForecastRepository."""

    COLLECTION_NAME = FORECASTS

    def __init__(self, mongo_database: MongoDatabase):
        """
        Initialize the MongoDB forecast repository.

        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database

    @staticmethod
    def to_document(forecast: Forecast) -> Dict[str, Any]:
        """Convert a Forecast entity to a MongoDB document."""
        return {
            "id": str(forecast.id),
            "power_plant_id": str(forecast.power_plant_id),
            "forecast_date_time": forecast.forecast_date_time,
            "production_mwh": Decimal128(forecast.production_mwh),
            "is_active": forecast.is_active,
            "created_at": forecast.created_at,
            "updated_at": forecast.updated_at,
            "version": forecast.version,
        }

    @staticmethod
    def to_entity(document: Dict[str, Any]) -> Forecast:
        """Convert a MongoDB document to a Forecast entity."""
        return Forecast(
            id=UUID(document["id"]),
            power_plant_id=UUID(document["power_plant_id"]),
            forecast_date_time=document["forecast_date_time"],
            production_mwh=_to_decimal(document["production_mwh"]),
            is_active=document.get("is_active", True),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            version=document.get("version", 1),
        )

    async def find_by_id(self, forecast_id: UUID) -> Optional[Forecast]:
        try:
            document = await self.db.find_one(
                self.COLLECTION_NAME, {"id": str(forecast_id)}
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "forecast.find_by_id", {"forecast_id": str(forecast_id)}
            ) from e
        if document is None:
            return None
        return self.to_entity(document)

    async def find_active_by_plant_and_instant(
        self, power_plant_id: UUID, forecast_date_time: datetime
    ) -> Optional[Forecast]:
        query = {
            "power_plant_id": str(power_plant_id),
            "forecast_date_time": forecast_date_time,
            "is_active": True,
        }
        try:
            document = await self.db.find_one(self.COLLECTION_NAME, query)
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e,
                "forecast.find_active_by_plant_and_instant",
                {"power_plant_id": str(power_plant_id)},
            ) from e
        if document is None:
            return None
        return self.to_entity(document)

    async def find_active_by_plant(
        self, power_plant_id: UUID, start: datetime, end: datetime
    ) -> List[Forecast]:
        query = {
            "power_plant_id": str(power_plant_id),
            "is_active": True,
            "forecast_date_time": {"$gte": start, "$lte": end},
        }
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME,
                query,
                sort_by="forecast_date_time",
                sort_direction=pymongo.ASCENDING,
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e,
                "forecast.find_active_by_plant",
                {"power_plant_id": str(power_plant_id)},
            ) from e
        return [self.to_entity(document) for document in documents]

    async def create(self, forecast: Forecast) -> Forecast:
        """
        Insert a new forecast.

        Raises:
            UniqueConstraintViolationError: If another active forecast for the
                same plant and instant was inserted concurrently
        """
        try:
            await self.db.insert_one(self.COLLECTION_NAME, self.to_document(forecast))
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "forecast.create", {"forecast_id": str(forecast.id)}
            ) from e
        return forecast

    async def update(self, forecast: Forecast, expected_version: int) -> Forecast:
        """
        Write the mutable fields of a forecast if its version is unchanged.

        Raises:
            ConcurrencyConflictError: If no stored forecast has the expected
                version
        """
        new_version = expected_version + 1
        update = {
            "$set": {
                "production_mwh": Decimal128(forecast.production_mwh),
                "is_active": forecast.is_active,
                "updated_at": forecast.updated_at,
                "version": new_version,
            }
        }
        try:
            matched = await self.db.update_one(
                self.COLLECTION_NAME,
                {"id": str(forecast.id), "version": expected_version},
                update,
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "forecast.update", {"forecast_id": str(forecast.id)}
            ) from e

        if matched == 0:
            raise ConcurrencyConflictError(
                "Forecast",
                str(forecast.id),
                {"expected_version": expected_version},
            )

        forecast.version = new_version
        return forecast

    def _company_window_pipeline(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> List[Dict[str, Any]]:
        return [
            {
                "$match": {
                    "is_active": True,
                    "forecast_date_time": {"$gte": start, "$lt": end},
                }
            },
            {
                "$lookup": {
                    "from": POWER_PLANTS,
                    "localField": "power_plant_id",
                    "foreignField": "id",
                    "as": "power_plant",
                }
            },
            {"$unwind": "$power_plant"},
            {"$match": {"power_plant.company_id": str(company_id)}},
        ]

    async def sum_active_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> Decimal:
        pipeline = self._company_window_pipeline(company_id, start, end) + [
            {"$group": {"_id": None, "total": {"$sum": "$production_mwh"}}}
        ]
        try:
            rows = await self.db.aggregate(self.COLLECTION_NAME, pipeline)
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "forecast.sum_active_for_company", {"company_id": str(company_id)}
            ) from e
        if not rows:
            return Decimal("0")
        return _to_decimal(rows[0].get("total"))

    async def summarize_by_plant_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> List[PowerPlantForecastSummary]:
        pipeline = self._company_window_pipeline(company_id, start, end) + [
            {
                "$group": {
                    "_id": "$power_plant_id",
                    "power_plant_name": {"$first": "$power_plant.name"},
                    "country": {"$first": "$power_plant.country"},
                    "total_production_mwh": {"$sum": "$production_mwh"},
                    "forecast_count": {"$sum": 1},
                }
            },
            {"$sort": {"power_plant_name": pymongo.ASCENDING}},
        ]
        try:
            rows = await self.db.aggregate(self.COLLECTION_NAME, pipeline)
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e,
                "forecast.summarize_by_plant_for_company",
                {"company_id": str(company_id)},
            ) from e
        return [
            PowerPlantForecastSummary(
                power_plant_id=UUID(row["_id"]),
                power_plant_name=row.get("power_plant_name") or "",
                country=row.get("country") or "",
                total_production_mwh=_to_decimal(row.get("total_production_mwh")),
                forecast_count=int(row.get("forecast_count", 0)),
            )
            for row in rows
        ]
