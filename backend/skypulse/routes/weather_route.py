from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from skypulse.models.weather_model import ErrorResponse, WeatherSnapshot
from skypulse.repos.cache_repo import WeatherCache
from skypulse.services.weather_client import WeatherApiClient
from skypulse.services.weather_service import WeatherService

router = APIRouter(prefix="/api/weather", tags=["weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

# --- Dependency Injection ---
def get_weather_cache(request: Request) -> WeatherCache:
    return request.app.state.weather_cache

def get_weather_client(request: Request) -> WeatherApiClient:
    return WeatherApiClient.from_settings(request.app.state.settings)

def get_weather_service(
    cache: WeatherCache = Depends(get_weather_cache),
    client: WeatherApiClient = Depends(get_weather_client),
) -> WeatherService:
    return WeatherService(cache, client)

@router.get("", response_model=WeatherSnapshot, responses=ERROR_RESPONSES)
async def get_weather_endpoint(
    city: Optional[str] = Query(None),
    service: WeatherService = Depends(get_weather_service)
):
    return await service.get_weather(city)

@router.get("/search", responses={200: {"description": "Provider city matches, unchanged"}, **ERROR_RESPONSES})
async def search_city_endpoint(
    query: Optional[str] = Query(None),
    service: WeatherService = Depends(get_weather_service)
):
    return await service.search_city(query)
