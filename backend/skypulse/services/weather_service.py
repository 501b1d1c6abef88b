import logging
from typing import Any, Dict, List, Optional

from skypulse.core.errors import BadRequestError, UpstreamError
from skypulse.core.logger import logs
from skypulse.models.weather_model import WeatherSnapshot
from skypulse.repos.cache_repo import WeatherCache
from skypulse.services.weather_client import WeatherApiClient
from skypulse.services.weather_shaper import shape_snapshot

class WeatherService:
    def __init__(self, cache: WeatherCache, client: WeatherApiClient):
        self.cache = cache
        self.client = client

    async def get_weather(self, city: Optional[str]) -> WeatherSnapshot:
        if not city:
            raise BadRequestError("City is required")

        # 1. Check Cache
        cache_key = city.lower()
        cached = self.cache.get(cache_key)
        if cached is not None:
            logs.log(logging.INFO, f"✓ Weather cache HIT for '{cache_key}'")
            return cached

        # 2. Call WeatherAPI
        logs.log(logging.INFO, f"✗ Weather cache MISS for '{cache_key}'. Calling WeatherAPI...")
        try:
            payload = await self.client.fetch_forecast(city)
            # 3. Normalize (a malformed payload counts as an upstream failure)
            snapshot = shape_snapshot(payload)
        except UpstreamError as e:
            logs.log(logging.ERROR, f"Weather fetch failed for '{city}': {e.message}")
            raise UpstreamError("Failed to fetch weather data") from e

        # 4. Save to Cache
        self.cache.set(cache_key, snapshot)
        return snapshot

    async def search_city(self, query: Optional[str]) -> List[Dict[str, Any]]:
        if not query:
            raise BadRequestError("Query required")

        try:
            matches = await self.client.search_city(query)
        except UpstreamError as e:
            logs.log(logging.ERROR, f"City search failed for '{query}': {e.message}")
            raise UpstreamError("Failed to search city") from e

        # Matches pass through as-is, but they must still be a list of objects
        if not isinstance(matches, list) or not all(isinstance(m, dict) for m in matches):
            logs.log(logging.ERROR, f"City search for '{query}' returned an unexpected body: {str(matches)[:200]}")
            raise UpstreamError("Failed to search city")
        return matches
