from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.application.dtos.forecast_dto import (
    CreateOrUpdateForecastRequestDTO,
    ForecastResponseDTO,
)
from src.domain.entities.forecast import Forecast
from src.domain.entities.power_plant import PowerPlant


def test_request_accepts_string_production_exactly() -> None:
    dto = CreateOrUpdateForecastRequestDTO.model_validate(
        {
            "power_plant_id": str(uuid4()),
            "forecast_date_time": "2025-01-01T10:00:00Z",
            "production_mwh": "100.123456",
        }
    )

    assert dto.production_mwh == Decimal("100.123456")
    assert dto.forecast_date_time.tzinfo is not None


def test_request_allows_negative_production_for_domain_validation() -> None:
    dto = CreateOrUpdateForecastRequestDTO(
        power_plant_id=uuid4(),
        forecast_date_time=datetime(2025, 1, 1),
        production_mwh=Decimal("-1"),
    )

    assert dto.production_mwh < 0


@pytest.mark.parametrize(
    "payload",
    [
        {"forecast_date_time": "2025-01-01T10:00:00Z", "production_mwh": "1"},
        {"power_plant_id": "not-a-uuid", "forecast_date_time": "2025-01-01T10:00:00Z", "production_mwh": "1"},
        {"power_plant_id": str(uuid4()), "forecast_date_time": "yesterday", "production_mwh": "1"},
        {"power_plant_id": str(uuid4()), "forecast_date_time": "2025-01-01T10:00:00Z", "production_mwh": "1.1234567"},
    ],
)
def test_request_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValidationError):
        CreateOrUpdateForecastRequestDTO.model_validate(payload)


def test_response_from_domain_carries_plant_details() -> None:
    plant = PowerPlant(name="Turkey Power Plant", country="Turkey", company_id=uuid4())
    forecast = Forecast.new(plant.id, datetime(2025, 1, 1, 10, tzinfo=timezone.utc), Decimal("100.50"))

    dto = ForecastResponseDTO.from_domain(forecast, plant)

    assert dto.power_plant_name == "Turkey Power Plant"
    assert dto.country == "Turkey"
    assert dto.is_new is True
    assert dto.model_dump(mode="json")["production_mwh"] == "100.50"


def test_response_is_not_new_after_update() -> None:
    plant = PowerPlant(name="Spain Power Plant", country="Spain")
    forecast = Forecast.new(plant.id, datetime(2025, 1, 1, tzinfo=timezone.utc), Decimal("1"))
    forecast.updated_at = forecast.created_at + timedelta(milliseconds=1)

    assert ForecastResponseDTO.from_domain(forecast, plant).is_new is False
