"""Shared fixtures for backend tests."""
import copy

import pytest
from fastapi.testclient import TestClient

from skypulse.core.config import Settings
from skypulse.core.errors import UpstreamError
from skypulse.main import create_app
from skypulse.repos.cache_repo import WeatherCache
from skypulse.routes.weather_route import get_weather_client


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeWeatherClient:
    """Stands in for WeatherApiClient and records every upstream call."""

    def __init__(self, forecast=None, matches=None, error=None):
        self.forecast = forecast
        self.matches = matches or []
        self.error = error
        self.forecast_calls = []
        self.search_calls = []

    async def fetch_forecast(self, city):
        self.forecast_calls.append(city)
        if self.error:
            raise self.error
        return self.forecast

    async def search_city(self, query):
        self.search_calls.append(query)
        if self.error:
            raise self.error
        return self.matches


def _day(date, max_temp, min_temp, text="Sunny"):
    return {
        "date": date,
        "day": {
            "maxtemp_c": max_temp,
            "mintemp_c": min_temp,
            "avgtemp_c": round((max_temp + min_temp) / 2, 1),
            "avghumidity": 64,
            "condition": {"text": text, "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png"},
        },
        "astro": {"sunrise": "07:41 AM", "sunset": "06:32 PM"},
    }


@pytest.fixture
def sample_payload():
    """Trimmed WeatherAPI.com forecast.json response."""
    return {
        "location": {
            "name": "Paris",
            "region": "Ile-de-France",
            "country": "France",
            "localtime": "2026-10-19 14:05",
        },
        "current": {
            "temp_c": 17.0,
            "feelslike_c": 16.2,
            "humidity": 63,
            "wind_kph": 14.8,
            "wind_dir": "SW",
            "pressure_mb": 1016.0,
            "condition": {"text": "Partly cloudy", "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png"},
            "air_quality": {
                "co": 227.0,
                "no2": 12.4,
                "o3": 61.0,
                "so2": 1.9,
                "pm2_5": 6.3,
                "pm10": 8.1,
                "us-epa-index": 1,
                "gb-defra-index": 1,
            },
        },
        "forecast": {
            "forecastday": [
                _day("2026-10-19", 18.2, 10.1),
                _day("2026-10-20", 16.4, 9.0, "Patchy rain nearby"),
                _day("2026-10-21", 14.9, 8.3, "Overcast"),
            ]
        },
    }


@pytest.fixture
def payload_without_air_quality(sample_payload):
    payload = copy.deepcopy(sample_payload)
    del payload["current"]["air_quality"]
    return payload


@pytest.fixture
def sample_matches():
    return [
        {"id": 803267, "name": "Paris", "region": "Ile-de-France", "country": "France",
         "lat": 48.87, "lon": 2.33, "url": "paris-ile-de-france-france"},
        {"id": 2618614, "name": "Paris", "region": "Texas", "country": "United States of America",
         "lat": 33.66, "lon": -95.56, "url": "paris-texas-united-states-of-america"},
    ]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_client(sample_payload, sample_matches):
    return FakeWeatherClient(forecast=sample_payload, matches=sample_matches)


@pytest.fixture
def failing_client():
    return FakeWeatherClient(error=UpstreamError("Provider returned 400"))


@pytest.fixture
def make_app(clock):
    """Build a fresh app (own cache and rate limiter) around a given upstream client."""
    def _make(weather_client, **overrides):
        app = create_app(Settings(_env_file=None, **overrides))
        app.state.weather_cache = WeatherCache(ttl_seconds=app.state.settings.CACHE_TTL_SECONDS, clock=clock)
        app.dependency_overrides[get_weather_client] = lambda: weather_client
        return app
    return _make


@pytest.fixture
def api(make_app, fake_client):
    return TestClient(make_app(fake_client))


@pytest.fixture
def weather_client_cls():
    return FakeWeatherClient
