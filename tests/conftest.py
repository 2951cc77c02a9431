from datetime import date
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from rental_quote.config.settings import Settings
from rental_quote.schemas import (
    AvailabilityPeriod,
    AvailabilityState,
    AvailabilityStatus,
    PriceModel,
    RentalRange,
)
from rental_quote.services.quote import RentalQuoteService
from rental_quote.services.tiers import load_price_model


def period(start: str, end: str, status: str, **kwargs) -> AvailabilityPeriod:
    return AvailabilityPeriod(
        start_date=date.fromisoformat(start),
        end_date=date.fromisoformat(end),
        status=AvailabilityStatus(status),
        **kwargs,
    )


def rental_range(start: str, end: str) -> RentalRange:
    return RentalRange(
        start_date=date.fromisoformat(start), end_date=date.fromisoformat(end)
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(default_currency="EUR", max_rental_days=365, max_calendar_days=366)


@pytest.fixture
def quote_service(settings: Settings) -> RentalQuoteService:
    return RentalQuoteService(settings)


@pytest.fixture
def price_model_data() -> dict:
    return {
        "currency": "EUR",
        "tiers": [
            {"days_from": 1, "days_to": 3, "price_per_day": 1000},
            {"days_from": 4, "days_to": 7, "price_per_day": 800},
            {"days_from": 8, "days_to": None, "price_per_day": 600},
        ],
        "deposit": 5000,
        "fallback_daily_rate": 1200,
    }


@pytest.fixture
def tiered_price_model(price_model_data: dict) -> PriceModel:
    return load_price_model(price_model_data)


@pytest.fixture
def always_available() -> AvailabilityState:
    return AvailabilityState(is_always_available=True)


@pytest.fixture
def february_state() -> AvailabilityState:
    return AvailabilityState(
        periods=(
            period("2024-02-01", "2024-02-05", "available"),
            period("2024-02-06", "2024-02-10", "rented"),
        )
    )


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from rental_quote.main import app

    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config):
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP layer")
