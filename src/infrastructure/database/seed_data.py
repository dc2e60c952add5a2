"""
Reference data - Infrastructure Layer

Companies and power plants are reference data; they are seeded at startup
when enabled and never modified through the API.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID

from src.domain.entities.company import Company
from src.domain.entities.power_plant import PowerPlant
from src.infrastructure.repositories.company_repository import CompanyRepository
from src.infrastructure.repositories.power_plant_repository import PowerPlantRepository
from src.shared import get_logger

from .mongo_database import COMPANIES, POWER_PLANTS, MongoDatabase

logger = get_logger(__name__)

SEED_TIMESTAMP = datetime(2025, 1, 1, tzinfo=timezone.utc)

ENERGY_TRADING_CORP_ID = UUID("11111111-1111-1111-1111-111111111111")
TURKEY_POWER_PLANT_ID = UUID("22222222-2222-2222-2222-222222222222")
BULGARIA_POWER_PLANT_ID = UUID("33333333-3333-3333-3333-333333333333")
SPAIN_POWER_PLANT_ID = UUID("44444444-4444-4444-4444-444444444444")


def seed_companies() -> List[Company]:
    return [
        Company(
            id=ENERGY_TRADING_CORP_ID,
            name="Energy Trading Corp",
            created_at=SEED_TIMESTAMP,
            updated_at=SEED_TIMESTAMP,
        )
    ]


def seed_power_plants() -> List[PowerPlant]:
    plants = [
        (TURKEY_POWER_PLANT_ID, "Turkey Power Plant", "Turkey"),
        (BULGARIA_POWER_PLANT_ID, "Bulgaria Power Plant", "Bulgaria"),
        (SPAIN_POWER_PLANT_ID, "Spain Power Plant", "Spain"),
    ]
    return [
        PowerPlant(
            id=plant_id,
            name=name,
            country=country,
            company_id=ENERGY_TRADING_CORP_ID,
            created_at=SEED_TIMESTAMP,
            updated_at=SEED_TIMESTAMP,
        )
        for plant_id, name, country in plants
    ]


async def seed_reference_data(database: MongoDatabase) -> None:
    """Upsert the reference companies and power plants by ID."""
    for company in seed_companies():
        await database.replace_one(
            COMPANIES,
            {"id": str(company.id)},
            CompanyRepository.to_document(company),
            upsert=True,
        )

    for plant in seed_power_plants():
        await database.replace_one(
            POWER_PLANTS,
            {"id": str(plant.id)},
            PowerPlantRepository.to_document(plant),
            upsert=True,
        )

    logger.info(
        "mongo.seed.completed",
        companies=len(seed_companies()),
        power_plants=len(seed_power_plants()),
    )
