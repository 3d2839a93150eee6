"""
OpenWeatherMap weather service.

Fetch current conditions or the 5-day/3-hour forecast for a named location in
the user's preferred units. Responses are passed through as returned by the
provider and cached in Redis for WEATHER_CACHE_TTL_SECONDS, keyed by kind,
units and normalised location name.

Provider errors surface as httpx.HTTPError; the route layer maps them to 502.
"""
import json
import logging
from typing import Any

import httpx

from farmstead.core.config import settings

logger = logging.getLogger(__name__)

CURRENT = "weather"
FORECAST = "forecast"


def _cache_key(kind: str, location: str, units: str) -> str:
    return f"owm:{kind}:{units}:{location.strip().lower()}"


async def fetch_openweathermap(kind: str, location: str, units: str) -> dict:
    """Raw HTTP call to OpenWeatherMap. ``kind`` is ``weather`` or ``forecast``."""
    url = f"{settings.OPENWEATHERMAP_BASE_URL}/{kind}"
    params = {
        "q": location,
        "units": units,
        "appid": settings.OPENWEATHERMAP_API_KEY,
    }
    async with httpx.AsyncClient(timeout=15.0) as client:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()


async def _get_cached(kind: str, location: str, units: str, redis: Any) -> dict:
    key = _cache_key(kind, location, units)

    cached = await redis.get(key)
    if cached is not None:
        logger.debug("weather cache hit: %s", key)
        raw_str = cached.decode("utf-8") if isinstance(cached, bytes) else cached
        return json.loads(raw_str)

    logger.debug("weather cache miss: %s — fetching OpenWeatherMap", key)
    result = await fetch_openweathermap(kind, location, units)
    await redis.setex(key, settings.WEATHER_CACHE_TTL_SECONDS, json.dumps(result))
    return result


async def get_current_weather(location: str, units: str, redis: Any) -> dict:
    return await _get_cached(CURRENT, location, units, redis)


async def get_forecast(location: str, units: str, redis: Any) -> dict:
    return await _get_cached(FORECAST, location, units, redis)
