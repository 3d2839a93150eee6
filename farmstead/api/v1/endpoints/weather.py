import logging

import httpx
import redis.asyncio as aioredis
from fastapi import APIRouter, Depends, HTTPException

from farmstead.core.config import settings
from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.models.farm import WeatherPreference
from farmstead.schemas.weather import WeatherPreferenceRead, WeatherPreferenceUpdate
from farmstead.services.weather import get_current_weather, get_forecast
from farmstead.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])

# Module-level Redis client (connection pool, created once on first use)
_redis_client: aioredis.Redis | None = None


def _get_redis() -> aioredis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = aioredis.from_url(settings.REDIS_URL, decode_responses=True)
    return _redis_client


async def get_redis():
    yield _get_redis()


async def _preference_or_default(storage: Storage, user_id: int) -> WeatherPreference:
    pref = await storage.get_weather_preference(user_id)
    if pref is None:
        pref = await storage.set_weather_preference(user_id, WeatherPreferenceUpdate())
    return pref


@router.get("/preferences", response_model=WeatherPreferenceRead)
async def get_preferences(current_user: CurrentUser, storage: StorageDep):
    return await _preference_or_default(storage, current_user.id)


@router.patch("/preferences", response_model=WeatherPreferenceRead)
async def update_preferences(body: WeatherPreferenceUpdate, current_user: CurrentUser, storage: StorageDep):
    pref = await storage.update_weather_preference(current_user.id, body)
    if pref is None:
        pref = await storage.set_weather_preference(current_user.id, body)
    return pref


@router.get("/current")
async def current_weather(
    current_user: CurrentUser,
    storage: StorageDep,
    redis: aioredis.Redis = Depends(get_redis),
) -> dict:
    pref = await _preference_or_default(storage, current_user.id)
    try:
        return await get_current_weather(pref.location, pref.units, redis)
    except httpx.HTTPError as exc:
        logger.warning("current weather failed for %r: %s", pref.location, exc)
        raise HTTPException(status_code=502, detail=f"Weather API error: {exc}")


@router.get("/forecast")
async def weather_forecast(
    current_user: CurrentUser,
    storage: StorageDep,
    redis: aioredis.Redis = Depends(get_redis),
) -> dict:
    pref = await _preference_or_default(storage, current_user.id)
    try:
        return await get_forecast(pref.location, pref.units, redis)
    except httpx.HTTPError as exc:
        logger.warning("forecast failed for %r: %s", pref.location, exc)
        raise HTTPException(status_code=502, detail=f"Weather API error: {exc}")
