import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skypulse.core.config import Settings, settings as default_settings
from skypulse.core.errors import SkyPulseError
from skypulse.core.logger import logs
from skypulse.core.rate_limit import RateLimitMiddleware
from skypulse.repos.cache_repo import WeatherCache
from skypulse.routes.weather_route import router as weather_router


async def sweep_cache(cache: WeatherCache, interval: float):
    """Periodically drop expired entries so idle keys do not pile up."""
    while True:
        await asyncio.sleep(interval)
        cache.purge_expired()


@asynccontextmanager
async def lifespan(app: FastAPI):
    sweeper = asyncio.create_task(
        sweep_cache(app.state.weather_cache, app.state.settings.CACHE_CHECK_PERIOD_SECONDS)
    )
    app.state.cache_sweeper = sweeper
    logs.log(logging.INFO, "SkyPulse backend started")
    yield
    sweeper.cancel()
    with suppress(asyncio.CancelledError):
        await sweeper


async def skypulse_error_handler(request: Request, exc: SkyPulseError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title="SkyPulse Weather API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.weather_cache = WeatherCache(ttl_seconds=settings.CACHE_TTL_SECONDS)

    app.add_middleware(
        RateLimitMiddleware,
        max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SkyPulseError, skypulse_error_handler)
    app.include_router(weather_router)

    # --- Root Endpoint ---
    @app.get("/")
    async def root():
        return {
            "message": "Welcome to SkyPulse Weather API",
            "status": "running",
            "endpoints": {
                "health": "/health",
                "weather": "/api/weather?city=<city>",
                "search": "/api/weather/search?query=<text>",
                "docs": "/docs"
            },
            "version": "1.0.0"
        }

    # --- Health Check ---
    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "SkyPulse Weather API"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("skypulse.main:app", host="0.0.0.0", port=default_settings.PORT, reload=True)
