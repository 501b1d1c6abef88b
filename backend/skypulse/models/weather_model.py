from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional, Union

# Provider values pass through untouched, ints stay ints
Number = Union[int, float]

class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: Number
    feels_like: Number
    humidity: Number
    wind_speed: Number
    wind_direction: str
    pressure: Number
    condition_text: str
    icon_ref: str
    aqi: Optional[int] = None  # US-EPA index 1..5, None when no air-quality data
    pollutant_details: Optional[Dict[str, Any]] = None

class ForecastDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    max_temp: Number
    min_temp: Number
    avg_temp: Number
    humidity: Number
    condition_text: str
    icon_ref: str
    sunrise: str
    sunset: str

class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    country: str
    local_time: str
    current: CurrentConditions
    forecast: List[ForecastDay]

class ErrorResponse(BaseModel):
    error: str
