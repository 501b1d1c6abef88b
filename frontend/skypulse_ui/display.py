"""Display-only attributes derived from an already fetched snapshot."""

from enum import Enum
from typing import Optional, Sequence

# First matching rule wins, so "partly cloudy" is ⛅ and not ☁️
_EMOJI_RULES = [
    (("clear", "sun"), "☀️"),
    (("partly",), "⛅"),
    (("cloud",), "☁️"),
    (("overcast",), "🌥️"),
    (("rain", "drizzle"), "🌧️"),
    (("storm", "thunder"), "⛈️"),
    (("snow",), "❄️"),
    (("mist", "fog", "haze"), "🌫️"),
]
DEFAULT_EMOJI = "🌤️"

AQI_COLORS = {
    1: "#00e400",
    2: "#ffff00",
    3: "#ff7e00",
    4: "#ff0000",
}
AQI_DEFAULT_COLOR = "#7e0023"

HEALTH_ADVICE = {
    1: "excellent",
    2: "acceptable",
    3: "sensitive groups limit exposure",
    4: "reduce outdoor activity",
}
HEALTH_ADVICE_DEFAULT = "hazardous"

SUNNY_BACKGROUND = "linear-gradient(135deg, #f7971e, #ffd200)"
RAINY_BACKGROUND = "linear-gradient(135deg, #283c86, #45a247)"
DEFAULT_BACKGROUND = "#0f172a"

WIND_ROTATION = {"N": 0, "NE": 45, "E": 90, "SE": 135, "S": 180, "SW": 225, "W": 270, "NW": 315}

POLLUTANT_LABELS = [
    ("pm2_5", "PM2.5"),
    ("pm10", "PM10"),
    ("co", "CO"),
    ("no2", "NO₂"),
    ("o3", "O₃"),
]


class Trend(str, Enum):
    WARMING = "warming trend"
    COOLING = "cooling trend"
    STABLE = "stable"


TREND_MESSAGES = {
    Trend.WARMING: "📈 Warming trend expected",
    Trend.COOLING: "📉 Cooling trend expected",
    Trend.STABLE: "🌡 Stable temperatures",
}


def weather_emoji(condition: str) -> str:
    c = condition.lower()
    for keywords, emoji in _EMOJI_RULES:
        if any(k in c for k in keywords):
            return emoji
    return DEFAULT_EMOJI


def aqi_color(aqi: Optional[int]) -> str:
    return AQI_COLORS.get(aqi, AQI_DEFAULT_COLOR)


def health_advice(aqi: Optional[int]) -> str:
    return HEALTH_ADVICE.get(aqi, HEALTH_ADVICE_DEFAULT)


def background(condition: Optional[str]) -> str:
    """CSS background for the page, keyed on the current condition."""
    if condition is None:
        return DEFAULT_BACKGROUND
    c = condition.lower()
    if "sun" in c:
        return SUNNY_BACKGROUND
    if "rain" in c:
        return RAINY_BACKGROUND
    return DEFAULT_BACKGROUND


def trend_insight(forecast: Sequence[dict]) -> Trend:
    """
    Compares the last forecast day's max temperature with the first.
    More than 3 degrees either way is a trend; an empty forecast is stable.
    """
    if not forecast:
        return Trend.STABLE
    diff = forecast[-1]["max_temp"] - forecast[0]["max_temp"]
    if diff > 3:
        return Trend.WARMING
    if diff < -3:
        return Trend.COOLING
    return Trend.STABLE


def wind_rotation(direction: Optional[str]) -> int:
    """Arrow rotation in degrees; 16-point directions like NNE fall back to 0."""
    return WIND_ROTATION.get(direction, 0)
