from httpx import AsyncClient


async def test_register(client: AsyncClient):
    res = await client.post("/api/v1/auth/register", json={
        "username": "tmoyo",
        "email": "test@example.com",
        "password": "securepassword",
        "name": "Thomas Moyo",
        "farm_name": "Green Valley Farm",
    })
    assert res.status_code == 201
    data = res.json()
    assert data["username"] == "tmoyo"
    assert data["email"] == "test@example.com"
    assert data["farm_name"] == "Green Valley Farm"
    assert data["role"] == "farmer"
    assert data["language"] == "en"
    assert "password" not in data
    assert "hashed_password" not in data


async def test_register_duplicate_username(client: AsyncClient):
    payload = {
        "username": "alice", "email": "alice@example.com", "password": "pw1234",
        "name": "Alice", "farm_name": "Alice Acres",
    }
    await client.post("/api/v1/auth/register", json=payload)
    res = await client.post("/api/v1/auth/register", json={**payload, "email": "other@example.com"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Username already taken"


async def test_register_duplicate_email(client: AsyncClient):
    payload = {
        "username": "alice", "email": "alice@example.com", "password": "pw1234",
        "name": "Alice", "farm_name": "Alice Acres",
    }
    await client.post("/api/v1/auth/register", json=payload)
    res = await client.post("/api/v1/auth/register", json={**payload, "username": "alice2"})
    assert res.status_code == 400


async def test_register_missing_fields_is_400(client: AsyncClient):
    res = await client.post("/api/v1/auth/register", json={"username": "nofarm", "password": "pw1234"})
    assert res.status_code == 400


async def test_password_is_stored_hashed(client: AsyncClient, storage):
    await client.post("/api/v1/auth/register", json={
        "username": "hashme", "email": "hash@example.com", "password": "plaintext",
        "name": "Hash", "farm_name": "Hash Farm",
    })
    user = await storage.get_user_by_username("hashme")
    assert user.hashed_password != "plaintext"
    assert user.hashed_password.startswith("$2")


async def test_login(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "bob", "email": "bob@example.com", "password": "testpass",
        "name": "Bob", "farm_name": "Bob's Barn",
    })
    res = await client.post("/api/v1/auth/login", data={"username": "bob", "password": "testpass"})
    assert res.status_code == 200
    tokens = res.json()
    assert "access_token" in tokens
    assert "refresh_token" in tokens


async def test_login_wrong_password(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "carol", "email": "carol@example.com", "password": "correct",
        "name": "Carol", "farm_name": "Carol Creek",
    })
    res = await client.post("/api/v1/auth/login", data={"username": "carol", "password": "wrong"})
    assert res.status_code == 401


async def test_login_records_last_login(client: AsyncClient, register_and_login):
    headers = await register_and_login("dave")
    res = await client.get("/api/v1/auth/me", headers=headers)
    assert res.status_code == 200
    assert res.json()["username"] == "dave"
    assert res.json()["last_login"] is not None


async def test_me_unauthenticated(client: AsyncClient):
    res = await client.get("/api/v1/auth/me")
    assert res.status_code == 401


async def test_refresh(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "eve", "email": "eve@example.com", "password": "testpass",
        "name": "Eve", "farm_name": "Eve's Orchard",
    })
    login = await client.post("/api/v1/auth/login", data={"username": "eve", "password": "testpass"})
    refresh_token = login.json()["refresh_token"]
    res = await client.post("/api/v1/auth/refresh", json={"refresh_token": refresh_token})
    assert res.status_code == 200
    assert "access_token" in res.json()


async def test_refresh_rejects_access_token(client: AsyncClient):
    await client.post("/api/v1/auth/register", json={
        "username": "frank", "email": "frank@example.com", "password": "testpass",
        "name": "Frank", "farm_name": "Frank's Field",
    })
    login = await client.post("/api/v1/auth/login", data={"username": "frank", "password": "testpass"})
    res = await client.post("/api/v1/auth/refresh", json={"refresh_token": login.json()["access_token"]})
    assert res.status_code == 401


async def test_register_rejects_password_over_72_bytes(client: AsyncClient):
    res = await client.post("/api/v1/auth/register", json={
        "username": "tmoyo",
        "email": "test@example.com",
        "password": "é" * 37,
        "name": "Thomas Moyo",
        "farm_name": "Green Valley Farm",
    })
    assert res.status_code == 400
