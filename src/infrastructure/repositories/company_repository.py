"""
MongoDB Company Repository - Infrastructure Layer

This module implements the CompanyRepository interface using MongoDB
as the underlying data store.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

import pymongo.errors

from src.domain.entities.company import Company
from src.domain.repositories.company_repository import ICompanyRepository
from src.infrastructure.database import MongoDatabase, translate_persistence_error
from src.infrastructure.database.mongo_database import COMPANIES


class CompanyRepository(ICompanyRepository):
    """MongoDB implementation of the CompanyRepository."""

    COLLECTION_NAME = COMPANIES

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    @staticmethod
    def to_document(company: Company) -> Dict[str, Any]:
        """Convert a Company entity to a MongoDB document."""
        return {
            "id": str(company.id),
            "name": company.name,
            "created_at": company.created_at,
            "updated_at": company.updated_at,
        }

    @staticmethod
    def to_entity(document: Dict[str, Any]) -> Company:
        """Convert a MongoDB document to a Company entity."""
        return Company(
            id=UUID(document["id"]),
            name=document["name"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
        )

    async def find_by_id(self, company_id: UUID) -> Optional[Company]:
        try:
            document = await self.db.find_one(
                self.COLLECTION_NAME, {"id": str(company_id)}
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(
                e, "company.find_by_id", {"company_id": str(company_id)}
            ) from e
        if document is None:
            return None
        return self.to_entity(document)

    async def find_all(self) -> List[Company]:
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME, {}, sort_by="name"
            )
        except pymongo.errors.PyMongoError as e:
            raise translate_persistence_error(e, "company.find_all") from e
        return [self.to_entity(document) for document in documents]
