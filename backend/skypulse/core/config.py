from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # WeatherAPI.com Configuration
    WEATHER_API_BASE_URL: str = "https://api.weatherapi.com/v1"
    WEATHER_API_KEY: str = "your-key-here"
    WEATHER_API_TIMEOUT: float = 10.0
    FORECAST_DAYS: int = 14

    # In-memory cache (seconds)
    CACHE_TTL_SECONDS: int = 600
    CACHE_CHECK_PERIOD_SECONDS: int = 120

    # Fixed-window rate limiting per client IP
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    RATE_LIMIT_MAX_REQUESTS: int = 60

    PORT: int = 5000

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
