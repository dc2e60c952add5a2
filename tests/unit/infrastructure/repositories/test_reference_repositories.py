from __future__ import annotations

from uuid import uuid4

import pymongo.errors
import pytest
import pytest_asyncio

from src.domain.entities.errors import DatabaseTimeoutError
from src.infrastructure.database.mongo_database import POWER_PLANTS
from src.infrastructure.database.seed_data import (
    ENERGY_TRADING_CORP_ID,
    TURKEY_POWER_PLANT_ID,
    seed_reference_data,
)
from src.infrastructure.repositories.company_repository import CompanyRepository
from src.infrastructure.repositories.power_plant_repository import (
    PowerPlantRepository,
)


@pytest_asyncio.fixture()
async def seeded(fake_mongo_database):
    await seed_reference_data(fake_mongo_database)
    return fake_mongo_database


@pytest.mark.asyncio
async def test_company_lookup(seeded) -> None:
    repository = CompanyRepository(seeded)

    company = await repository.find_by_id(ENERGY_TRADING_CORP_ID)

    assert company.name == "Energy Trading Corp"
    assert await repository.find_by_id(uuid4()) is None
    assert [c.id for c in await repository.find_all()] == [ENERGY_TRADING_CORP_ID]


@pytest.mark.asyncio
async def test_power_plants_of_company_are_sorted_by_name(seeded) -> None:
    repository = PowerPlantRepository(seeded)

    plants = await repository.find_by_company_id(ENERGY_TRADING_CORP_ID)

    assert [p.name for p in plants] == [
        "Bulgaria Power Plant",
        "Spain Power Plant",
        "Turkey Power Plant",
    ]
    assert all(p.company_id == ENERGY_TRADING_CORP_ID for p in plants)
    assert await repository.find_by_company_id(uuid4()) == []


@pytest.mark.asyncio
async def test_power_plant_round_trip(seeded) -> None:
    repository = PowerPlantRepository(seeded)

    plant = await repository.find_by_id(TURKEY_POWER_PLANT_ID)

    assert plant.country == "Turkey"
    assert PowerPlantRepository.to_entity(PowerPlantRepository.to_document(plant)) == plant


@pytest.mark.asyncio
async def test_power_plant_errors_are_translated(seeded) -> None:
    seeded.get_collection(POWER_PLANTS).error = pymongo.errors.ExecutionTimeout("time limit")

    with pytest.raises(DatabaseTimeoutError):
        await PowerPlantRepository(seeded).find_all()
