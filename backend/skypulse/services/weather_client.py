import httpx
import logging
from typing import Any, Dict, List, Optional

from skypulse.core.config import Settings, settings as default_settings
from skypulse.core.errors import UpstreamError
from skypulse.core.logger import logs


class WeatherApiClient:
    """Thin async client for the WeatherAPI.com forecast and search endpoints."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        forecast_days: int = 14,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.forecast_days = forecast_days
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "WeatherApiClient":
        return cls(
            base_url=settings.WEATHER_API_BASE_URL,
            api_key=settings.WEATHER_API_KEY,
            forecast_days=settings.FORECAST_DAYS,
            timeout=settings.WEATHER_API_TIMEOUT,
        )

    async def fetch_forecast(self, city: str) -> Dict[str, Any]:
        """Forecast for `city` with air quality, alerts disabled."""
        params = {
            "key": self.api_key,
            "q": city,
            "days": self.forecast_days,
            "aqi": "yes",
            "alerts": "no",
        }
        return await self._get("/forecast.json", params)

    async def search_city(self, query: str) -> List[Dict[str, Any]]:
        """Autocomplete matches for a partial city name."""
        return await self._get("/search.json", {"key": self.api_key, "q": query})

    async def _get(self, path: str, params: dict) -> Any:
        url = f"{self.base_url}{path}"
        logs.log(logging.INFO, f"Calling WeatherAPI {path} for q={params['q']!r}")
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                return resp.json()
            except httpx.HTTPStatusError as e:
                logs.log(logging.ERROR, f"WeatherAPI {path} returned {e.response.status_code}: {e.response.text[:200]}")
                raise UpstreamError(f"Provider returned {e.response.status_code}") from e
            except httpx.HTTPError as e:
                logs.log(logging.ERROR, f"WeatherAPI {path} request failed: {str(e)}")
                raise UpstreamError("Provider request failed") from e
            except ValueError as e:
                logs.log(logging.ERROR, f"WeatherAPI {path} returned an undecodable body: {str(e)}")
                raise UpstreamError("Provider returned invalid JSON") from e
