"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles the connection, the collections used by the forecast service,
their indexes and the basic document operations.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pymongo.errors
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)

COMPANIES = "companies"
POWER_PLANTS = "power_plants"
FORECASTS = "forecasts"

SortSpec = Union[str, Sequence[Tuple[str, int]]]


class MongoDatabase:
    """MongoDB database client."""

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            server_selection_timeout_ms: How long to wait for a reachable server
        """
        self.client: MongoClient = MongoClient(
            mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return self.db[collection_name].find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[SortSpec] = None,
        sort_direction: int = ASCENDING,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field, or list of (field, direction) pairs, to sort by
            sort_direction: Direction used when ``sort_by`` is a single field
            skip: Number of documents to skip
            limit: Maximum number of documents to return, 0 for no limit

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query)

        if isinstance(sort_by, str):
            cursor = cursor.sort(sort_by, sort_direction)
        elif sort_by:
            cursor = cursor.sort(list(sort_by))

        cursor = cursor.skip(skip).limit(limit)

        return list(cursor)

    async def aggregate(
        self, collection_name: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline and collect its output.

        Args:
            collection_name: Name of the collection the pipeline starts from
            pipeline: Aggregation stages

        Returns:
            The documents produced by the last stage
        """
        return list(self.db[collection_name].aggregate(pipeline))

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Args:
            collection_name: Name of the collection
            document: Document to insert

        Returns:
            The inserted document with any generated fields

        Raises:
            pymongo.errors.DuplicateKeyError: If a unique index rejects it
            pymongo.errors.OperationFailure: If the insert is not acknowledged
        """
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to insert document in {collection_name}"
            )
        return document

    async def update_one(
        self,
        collection_name: str,
        query: Dict[str, Any],
        update: Dict[str, Any],
    ) -> int:
        """
        Apply an update to the first document matching a query.

        Args:
            collection_name: Name of the collection
            query: Query to match the document; may include a concurrency token
            update: Update operators to apply

        Returns:
            Number of documents matched (0 or 1)
        """
        result = self.db[collection_name].update_one(query, update)
        return result.matched_count

    async def replace_one(
        self,
        collection_name: str,
        query: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> Dict[str, Any]:
        """
        Replace a document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match document to replace
            document: New document
            upsert: Insert the document when nothing matches

        Returns:
            The new document

        Raises:
            pymongo.errors.OperationFailure: If nothing matched and
                ``upsert`` is false
        """
        result = self.db[collection_name].replace_one(query, document, upsert=upsert)
        if result.matched_count == 0 and result.upserted_id is None:
            raise pymongo.errors.OperationFailure(
                f"Document not found in {collection_name}"
            )
        return document

    def ping(self) -> Dict[str, Any]:
        """Run the ``ping`` command against the server."""
        return self.client.admin.command("ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create all necessary indexes for the application.

        Forecasts carry a partial unique index so that at most one active
        forecast exists per (power plant, instant).
        """
        try:
            self.db[COMPANIES].create_index("id", name="company_id_uidx", unique=True)

            self.db[POWER_PLANTS].create_index(
                "id", name="power_plant_id_uidx", unique=True
            )
            self.db[POWER_PLANTS].create_index(
                [("company_id", ASCENDING), ("name", ASCENDING)],
                name="company_name_idx",
            )

            self.db[FORECASTS].create_index("id", name="forecast_id_uidx", unique=True)
            self.db[FORECASTS].create_index(
                [("power_plant_id", ASCENDING), ("forecast_date_time", ASCENDING)],
                name="active_plant_instant_uidx",
                unique=True,
                partialFilterExpression={"is_active": True},
            )
            self.db[FORECASTS].create_index(
                [("forecast_date_time", ASCENDING), ("is_active", ASCENDING)],
                name="instant_active_idx",
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning("mongo.indexes.create_failed", error=str(e))
