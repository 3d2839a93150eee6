import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from farmstead.core.deps import get_storage
from farmstead.main import app
from farmstead.storage import MemStorage


@pytest.fixture
def storage() -> MemStorage:
    # Fresh in-memory backend per test; no Postgres needed
    return MemStorage()


@pytest_asyncio.fixture
async def client(storage: MemStorage):
    async def override_get_storage():
        yield storage

    app.dependency_overrides[get_storage] = override_get_storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client: AsyncClient):
    """Factory: register a farmer and return bearer auth headers for them."""

    async def _register_and_login(username: str, password: str = "testpass") -> dict:
        await client.post("/api/v1/auth/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
            "name": username.title(),
            "farm_name": f"{username.title()} Farm",
        })
        login = await client.post("/api/v1/auth/login", data={
            "username": username, "password": password
        })
        return {"Authorization": f"Bearer {login.json()['access_token']}"}

    return _register_and_login


@pytest_asyncio.fixture
async def auth_headers(register_and_login) -> dict:
    return await register_and_login("farmer")
