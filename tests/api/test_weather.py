import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient

from farmstead.api.v1.endpoints.weather import get_redis
from farmstead.main import app
from farmstead.services import weather as weather_service


class FakeRedis:
    def __init__(self):
        self.store: dict[str, str] = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest_asyncio.fixture
async def weather_client(client: AsyncClient, fake_redis: FakeRedis):
    async def override_get_redis():
        yield fake_redis

    app.dependency_overrides[get_redis] = override_get_redis
    yield client


@pytest.fixture
def provider_calls(monkeypatch):
    calls = []

    async def fake_fetch(kind, location, units):
        calls.append((kind, location, units))
        return {"name": location, "kind": kind, "units": units, "main": {"temp": 24.5}}

    monkeypatch.setattr(weather_service, "fetch_openweathermap", fake_fetch)
    return calls


async def test_preferences_default_on_first_read(weather_client: AsyncClient, auth_headers: dict):
    res = await weather_client.get("/api/v1/weather/preferences", headers=auth_headers)
    assert res.status_code == 200
    data = res.json()
    assert data["location"] == "Harare"
    assert data["units"] == "metric"


async def test_patch_preferences_creates_then_updates(weather_client: AsyncClient, auth_headers: dict):
    res = await weather_client.patch(
        "/api/v1/weather/preferences", json={"location": "Bulawayo"}, headers=auth_headers
    )
    assert res.status_code == 200
    assert res.json()["location"] == "Bulawayo"
    assert res.json()["units"] == "metric"
    pref_id = res.json()["id"]

    res = await weather_client.patch(
        "/api/v1/weather/preferences", json={"units": "imperial"}, headers=auth_headers
    )
    data = res.json()
    assert data["id"] == pref_id
    assert data["location"] == "Bulawayo"
    assert data["units"] == "imperial"


async def test_invalid_units_rejected(weather_client: AsyncClient, auth_headers: dict):
    res = await weather_client.patch("/api/v1/weather/preferences", json={"units": "kelvin"}, headers=auth_headers)
    assert res.status_code == 400


async def test_current_weather_uses_preference_and_caches(
    weather_client: AsyncClient, auth_headers: dict, provider_calls: list, fake_redis: FakeRedis
):
    await weather_client.patch(
        "/api/v1/weather/preferences", json={"location": "Mutare", "units": "imperial"}, headers=auth_headers
    )

    first = await weather_client.get("/api/v1/weather/current", headers=auth_headers)
    second = await weather_client.get("/api/v1/weather/current", headers=auth_headers)

    assert first.status_code == 200
    assert first.json()["name"] == "Mutare"
    assert second.json() == first.json()
    assert provider_calls == [("weather", "Mutare", "imperial")]
    assert "owm:weather:imperial:mutare" in fake_redis.store


async def test_forecast(weather_client: AsyncClient, auth_headers: dict, provider_calls: list):
    res = await weather_client.get("/api/v1/weather/forecast", headers=auth_headers)
    assert res.status_code == 200
    assert provider_calls == [("forecast", "Harare", "metric")]


async def test_provider_error_is_502(weather_client: AsyncClient, auth_headers: dict, monkeypatch):
    async def failing_fetch(kind, location, units):
        request = httpx.Request("GET", "https://api.openweathermap.org/data/2.5/weather")
        raise httpx.HTTPStatusError("401 Unauthorized", request=request, response=httpx.Response(401, request=request))

    monkeypatch.setattr(weather_service, "fetch_openweathermap", failing_fetch)

    res = await weather_client.get("/api/v1/weather/current", headers=auth_headers)
    assert res.status_code == 502
