from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional, Sequence
from uuid import UUID

import pytest

from src.domain.entities.company import Company
from src.domain.entities.errors import (
    ConcurrencyConflictError,
    UniqueConstraintViolationError,
)
from src.domain.entities.forecast import Forecast, PowerPlantForecastSummary
from src.domain.entities.power_plant import PowerPlant
from src.domain.repositories import (
    ICompanyRepository,
    IForecastRepository,
    IPowerPlantRepository,
)
from src.infrastructure.database.seed_data import seed_companies, seed_power_plants
from src.infrastructure.events import InMemoryEventPublisher

# ---------------------------------------------------------------------------
# Fake MongoDB
# ---------------------------------------------------------------------------

def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and any(k.startswith("$") for k in condition):
        for operator, operand in condition.items():
            if operator == "$gte" and not (value is not None and value >= operand):
                return False
            if operator == "$gt" and not (value is not None and value > operand):
                return False
            if operator == "$lte" and not (value is not None and value <= operand):
                return False
            if operator == "$lt" and not (value is not None and value < operand):
                return False
            if operator == "$in" and value not in operand:
                return False
        return True
    return value == condition

def matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(
        _matches_condition(document.get(key), condition)
        for key, condition in query.items()
    )

class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit = 0

    def sort(self, key_or_list: Any, direction: int = 1) -> "FakeCursor":
        keys = (
            [(key_or_list, direction)] if isinstance(key_or_list, str) else key_or_list
        )
        for key, key_direction in reversed(list(keys)):
            self._documents.sort(key=lambda d: d.get(key), reverse=key_direction < 0)
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)

class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.inserts: List[Dict[str, Any]] = []
        self.updates: List[tuple[Dict[str, Any], Dict[str, Any]]] = []
        self.pipelines: List[List[Dict[str, Any]]] = []
        self.aggregate_results: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []
        self.error: Exception | None = None

    def _raise_if_failing(self) -> None:
        if self.error is not None:
            raise self.error

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        self._raise_if_failing()
        self.last_query = query
        for document in self.documents.values():
            if matches(document, query):
                return dict(document)
        return None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self._raise_if_failing()
        self.last_query = query
        return FakeCursor(
            [dict(doc) for doc in self.documents.values() if matches(doc, query)]
        )

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self._raise_if_failing()
        self.inserts.append(document)
        self.documents[document["id"]] = dict(document)
        return SimpleNamespace(acknowledged=True, inserted_id=document["id"])

    def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> Any:
        self._raise_if_failing()
        self.updates.append((query, update))
        for document in self.documents.values():
            if matches(document, query):
                document.update(update.get("$set", {}))
                return SimpleNamespace(matched_count=1, acknowledged=True)
        return SimpleNamespace(matched_count=0, acknowledged=True)

    def replace_one(
        self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False
    ) -> Any:
        self._raise_if_failing()
        key = query.get("id")
        if key in self.documents:
            self.documents[key] = dict(document)
            return SimpleNamespace(matched_count=1, upserted_id=None, acknowledged=True)
        if upsert:
            self.documents[document["id"]] = dict(document)
            return SimpleNamespace(
                matched_count=0, upserted_id=document["id"], acknowledged=True
            )
        return SimpleNamespace(matched_count=0, upserted_id=None, acknowledged=True)

    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        self._raise_if_failing()
        self.pipelines.append(pipeline)
        return list(self.aggregate_results)

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

class FakeMongoDatabase:
    """Mirrors ``MongoDatabase`` over in-memory collections."""

    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False
        self.db = SimpleNamespace(name="forecast_db")
        self.ping_error: Exception | None = None

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Any = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query)
        if sort_by:
            cursor.sort(sort_by, sort_direction)
        cursor.skip(skip)
        cursor.limit(limit)
        return list(cursor)

    async def aggregate(
        self, collection_name: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        return self.get_collection(collection_name).aggregate(pipeline)

    async def insert_one(self, collection_name: str, document: Dict[str, Any]) -> Any:
        self.get_collection(collection_name).insert_one(document)
        return document

    async def update_one(
        self, collection_name: str, query: Dict[str, Any], update: Dict[str, Any]
    ) -> int:
        return self.get_collection(collection_name).update_one(query, update).matched_count

    async def replace_one(
        self,
        collection_name: str,
        query: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> Any:
        self.get_collection(collection_name).replace_one(query, document, upsert=upsert)
        return document

    async def create_indexes(self) -> None:
        return None

    def ping(self) -> Dict[str, Any]:
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}

    def close(self) -> None:
        self.closed = True

@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()

# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------

class InMemoryCompanyRepository(ICompanyRepository):
    def __init__(self, companies: Sequence[Company] = ()) -> None:
        self.companies: Dict[UUID, Company] = {c.id: c for c in companies}

    async def find_by_id(self, company_id: UUID) -> Optional[Company]:
        return self.companies.get(company_id)

    async def find_all(self) -> List[Company]:
        return sorted(self.companies.values(), key=lambda c: c.name)

class InMemoryPowerPlantRepository(IPowerPlantRepository):
    def __init__(self, power_plants: Sequence[PowerPlant] = ()) -> None:
        self.power_plants: Dict[UUID, PowerPlant] = {p.id: p for p in power_plants}

    async def find_by_id(self, power_plant_id: UUID) -> Optional[PowerPlant]:
        return self.power_plants.get(power_plant_id)

    async def find_by_company_id(self, company_id: UUID) -> List[PowerPlant]:
        return sorted(
            (p for p in self.power_plants.values() if p.company_id == company_id),
            key=lambda p: p.name,
        )

    async def find_all(self) -> List[PowerPlant]:
        return sorted(self.power_plants.values(), key=lambda p: p.name)

class InMemoryForecastRepository(IForecastRepository):
    """Stores copies so callers cannot mutate persisted state by reference."""

    def __init__(self, power_plants: InMemoryPowerPlantRepository) -> None:
        self.power_plants = power_plants
        self.forecasts: Dict[UUID, Forecast] = {}
        self.create_calls = 0
        self.update_calls = 0

    def _company_forecasts(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> List[Forecast]:
        plant_ids = {
            p.id for p in self.power_plants.power_plants.values()
            if p.company_id == company_id
        }
        return [
            f
            for f in self.forecasts.values()
            if f.is_active
            and f.power_plant_id in plant_ids
            and start <= f.forecast_date_time < end
        ]

    async def find_by_id(self, forecast_id: UUID) -> Optional[Forecast]:
        stored = self.forecasts.get(forecast_id)
        return replace(stored) if stored else None

    async def find_active_by_plant_and_instant(
        self, power_plant_id: UUID, forecast_date_time: datetime
    ) -> Optional[Forecast]:
        for forecast in self.forecasts.values():
            if (
                forecast.is_active
                and forecast.power_plant_id == power_plant_id
                and forecast.forecast_date_time == forecast_date_time
            ):
                return replace(forecast)
        return None

    async def find_active_by_plant(
        self, power_plant_id: UUID, start: datetime, end: datetime
    ) -> List[Forecast]:
        return sorted(
            (
                replace(f)
                for f in self.forecasts.values()
                if f.is_active
                and f.power_plant_id == power_plant_id
                and start <= f.forecast_date_time <= end
            ),
            key=lambda f: f.forecast_date_time,
        )

    async def create(self, forecast: Forecast) -> Forecast:
        self.create_calls += 1
        if await self.find_active_by_plant_and_instant(
            forecast.power_plant_id, forecast.forecast_date_time
        ):
            raise UniqueConstraintViolationError("duplicate key")
        self.forecasts[forecast.id] = replace(forecast)
        return forecast

    async def update(self, forecast: Forecast, expected_version: int) -> Forecast:
        self.update_calls += 1
        stored = self.forecasts.get(forecast.id)
        if stored is None or stored.version != expected_version:
            raise ConcurrencyConflictError("Forecast", str(forecast.id))
        forecast.version = expected_version + 1
        self.forecasts[forecast.id] = replace(forecast)
        return forecast

    async def sum_active_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> Decimal:
        return sum(
            (f.production_mwh for f in self._company_forecasts(company_id, start, end)),
            Decimal("0"),
        )

    async def summarize_by_plant_for_company(
        self, company_id: UUID, start: datetime, end: datetime
    ) -> List[PowerPlantForecastSummary]:
        grouped: Dict[UUID, List[Forecast]] = {}
        for forecast in self._company_forecasts(company_id, start, end):
            grouped.setdefault(forecast.power_plant_id, []).append(forecast)

        summaries = []
        for plant_id, forecasts in grouped.items():
            plant = self.power_plants.power_plants[plant_id]
            summaries.append(
                PowerPlantForecastSummary(
                    power_plant_id=plant_id,
                    power_plant_name=plant.name,
                    country=plant.country,
                    total_production_mwh=sum(
                        (f.production_mwh for f in forecasts), Decimal("0")
                    ),
                    forecast_count=len(forecasts),
                )
            )
        return sorted(summaries, key=lambda s: s.power_plant_name)

@pytest.fixture()
def company_repository() -> InMemoryCompanyRepository:
    return InMemoryCompanyRepository(seed_companies())

@pytest.fixture()
def power_plant_repository() -> InMemoryPowerPlantRepository:
    return InMemoryPowerPlantRepository(seed_power_plants())

@pytest.fixture()
def forecast_repository(
    power_plant_repository: InMemoryPowerPlantRepository,
) -> InMemoryForecastRepository:
    return InMemoryForecastRepository(power_plant_repository)

@pytest.fixture()
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()

@pytest.fixture()
def dummy_now() -> datetime:
    return datetime.now(timezone.utc)
