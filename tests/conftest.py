"""Shared test fixtures."""

from typing import List

import pytest

from surf_forecast.config import FORECAST_FIELDS
from surf_forecast.weather.client import StormGlassClient
from surf_forecast.weather.models import ForecastPoint

BASE_URL = "https://test-stormglass.example.com/v2"


def make_hour(time: str, value: float = 1.0, source: str = "noaa") -> dict:
    """Build a raw StormGlass hourly record with every field set to ``value``."""
    hour = {"time": time}
    for field in FORECAST_FIELDS:
        hour[field] = {source: value, "sg": value + 100}
    return hour


@pytest.fixture
def stormglass_body() -> dict:
    return {
        "hours": [
            make_hour("2020-04-26T00:00:00+00:00", 1.5),
            make_hour("2020-04-26T01:00:00+00:00", 2.5),
        ],
        "meta": {"cost": 1, "dailyQuota": 10, "requestCount": 1},
    }


@pytest.fixture
def forecast_points() -> List[ForecastPoint]:
    return [
        ForecastPoint(
            time="2020-04-26T00:00:00+00:00",
            swellDirection=64.26,
            swellHeight=0.15,
            swellPeriod=3.89,
            waveDirection=231.38,
            waveHeight=0.47,
            windDirection=299.45,
            windSpeed=100,
        )
    ]


@pytest.fixture
async def stormglass_client():
    client = StormGlassClient(
        base_url=BASE_URL,
        api_token="test-token",
        source="noaa",
    )
    yield client
    await client.aclose()
