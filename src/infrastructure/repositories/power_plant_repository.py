"""
MongoDB Power Plant Repository - Infrastructure Layer

This module implements the PowerPlantRepository interface using MongoDB
as the underlying data store.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

import pymongo.errors

from src.domain.entities.power_plant import PowerPlant
from src.domain.repositories.power_plant_repository import IPowerPlantRepository
from src.infrastructure.database import MongoDatabase, translate_persistence_error
from src.infrastructure.database.mongo_database import POWER_PLANTS


class PowerPlantRepository(IPowerPlantRepository):
    """MongoDB implementation of the PowerPlantRepository."""

    COLLECTION_NAME = POWER_PLANTS

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    @staticmethod
    def to_document(power_plant: PowerPlant) -> Dict[str, Any]:
        """Convert a PowerPlant entity to a MongoDB document."""
        return {
            "id": str(power_plant.id),
            "name": power_plant.name,
            "country": power_plant.country,
            "company_id": (
                str(power_plant.company_id) if power_plant.company_id else None
            ),
            "created_at": power_plant.created_at,
            "updated_at": power_plant.updated_at,
        }

    @staticmethod
    def to_entity(document: Dict[str, Any]) -> PowerPlant:
        """Convert a MongoDB document to a PowerPlant entity."""
        company_id = document.get("company_id")
        return PowerPlant(
            id=UUID(document["id"]),
            name=document["name"],
            country=document.get("country") or "",
            company_id=UUID(company_id) if company_id else None,
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )

    async def find_by_id(self, power_plant_id: UUID) -> Optional[PowerPlant]:
        try:
            document = await self.db.find_one(
                self.COLLECTION_NAME, {"id": str(power_plant_id)}
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "power_plant.find_by_id", {"power_plant_id": str(power_plant_id)}
            ) from e
        if document is None:
            return None
        return self.to_entity(document)

    async def find_by_company_id(self, company_id: UUID) -> List[PowerPlant]:
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME,
                {"company_id": str(company_id)},
                sort_by="name",
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "power_plant.find_by_company_id", {"company_id": str(company_id)}
            ) from e
        return [self.to_entity(document) for document in documents]

    async def find_all(self) -> List[PowerPlant]:
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME, {}, sort_by="name"
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(e, "power_plant.find_all") from e
        return [self.to_entity(document) for document in documents]
