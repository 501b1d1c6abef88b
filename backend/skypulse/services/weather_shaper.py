from typing import Any, Dict

from pydantic import ValidationError

from skypulse.core.errors import ShapingError
from skypulse.models.weather_model import CurrentConditions, ForecastDay, WeatherSnapshot


def shape_snapshot(payload: Dict[str, Any]) -> WeatherSnapshot:
    """
    Maps a WeatherAPI.com forecast payload to a WeatherSnapshot.
    Values are copied as given (Celsius, kph, mb); nothing is recomputed.
    """
    try:
        location = payload["location"]
        current = payload["current"]
        air_quality = current.get("air_quality")

        return WeatherSnapshot(
            city=location["name"],
            country=location["country"],
            local_time=location["localtime"],
            current=CurrentConditions(
                temperature=current["temp_c"],
                feels_like=current["feelslike_c"],
                humidity=current["humidity"],
                wind_speed=current["wind_kph"],
                wind_direction=current["wind_dir"],
                pressure=current["pressure_mb"],
                condition_text=current["condition"]["text"],
                icon_ref=current["condition"]["icon"],
                aqi=air_quality.get("us-epa-index") if air_quality else None,
                pollutant_details=air_quality if air_quality else None,
            ),
            forecast=[_shape_day(day) for day in payload["forecast"]["forecastday"]],
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise ShapingError(f"Malformed provider payload: {e!r}") from e


def _shape_day(day: Dict[str, Any]) -> ForecastDay:
    summary = day["day"]
    return ForecastDay(
        date=day["date"],
        max_temp=summary["maxtemp_c"],
        min_temp=summary["mintemp_c"],
        avg_temp=summary["avgtemp_c"],
        humidity=summary["avghumidity"],
        condition_text=summary["condition"]["text"],
        icon_ref=summary["condition"]["icon"],
        sunrise=day["astro"]["sunrise"],
        sunset=day["astro"]["sunset"],
    )
