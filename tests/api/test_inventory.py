from datetime import datetime

from httpx import AsyncClient


def _item(quantity, threshold, **overrides) -> dict:
    payload = {"name": "Tomato Seeds", "category": "Seeds", "quantity": quantity, "unit": "kg",
               "threshold": threshold}
    payload.update(overrides)
    return payload


async def test_low_stock_then_restocked(client: AsyncClient, auth_headers: dict):
    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    assert created.status_code == 201
    item = created.json()
    assert item["status"] == "low"

    res = await client.patch(f"/api/v1/inventory/{item['id']}", json={"quantity": 12}, headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["status"] == "good"
    assert datetime.fromisoformat(res.json()["last_updated"]) >= datetime.fromisoformat(item["last_updated"])


async def test_quantity_equal_to_threshold_is_good(client: AsyncClient, auth_headers: dict):
    res = await client.post("/api/v1/inventory", json=_item(10, 10), headers=auth_headers)
    assert res.json()["status"] == "good"


async def test_raising_threshold_marks_low(client: AsyncClient, auth_headers: dict):
    created = await client.post("/api/v1/inventory", json=_item(25, 10), headers=auth_headers)
    res = await client.patch(
        f"/api/v1/inventory/{created.json()['id']}", json={"threshold": 30}, headers=auth_headers
    )
    assert res.json()["status"] == "low"


async def test_rename_keeps_status(client: AsyncClient, auth_headers: dict):
    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    res = await client.patch(
        f"/api/v1/inventory/{created.json()['id']}", json={"name": "Heirloom Tomato Seeds"}, headers=auth_headers
    )
    assert res.json()["name"] == "Heirloom Tomato Seeds"
    assert res.json()["status"] == "low"


async def test_amounts_rounded_to_two_places(client: AsyncClient, auth_headers: dict):
    res = await client.post("/api/v1/inventory", json=_item(12.3456, 2.499), headers=auth_headers)
    assert res.json()["quantity"] == 12.35
    assert res.json()["threshold"] == 2.5


async def test_negative_quantity_rejected(client: AsyncClient, auth_headers: dict):
    res = await client.post("/api/v1/inventory", json=_item(-1, 10), headers=auth_headers)
    assert res.status_code == 400


async def test_list_inventory_filters_by_status(client: AsyncClient, auth_headers: dict):
    await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    await client.post("/api/v1/inventory", json=_item(200, 50, name="NPK Fertilizer"), headers=auth_headers)

    res = await client.get("/api/v1/inventory", params={"status": "low"}, headers=auth_headers)
    assert [i["name"] for i in res.json()] == ["Tomato Seeds"]


async def test_delete_inventory_item(client: AsyncClient, auth_headers: dict):
    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    item_id = created.json()["id"]

    assert (await client.delete(f"/api/v1/inventory/{item_id}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/api/v1/inventory/{item_id}", headers=auth_headers)).status_code == 404


async def test_inventory_is_owner_scoped(client: AsyncClient, register_and_login):
    alice = await register_and_login("alice")
    bob = await register_and_login("bob")

    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=alice)
    item_id = created.json()["id"]

    assert (await client.get("/api/v1/inventory", headers=bob)).json() == []
    assert (await client.patch(f"/api/v1/inventory/{item_id}", json={"quantity": 1}, headers=bob)).status_code == 403


async def test_patch_rejects_blank_category_and_unit(client: AsyncClient, auth_headers: dict):
    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    item_id = created.json()["id"]

    res = await client.patch(f"/api/v1/inventory/{item_id}", json={"category": "", "unit": ""},
                             headers=auth_headers)
    assert res.status_code == 400

    res = await client.get(f"/api/v1/inventory/{item_id}", headers=auth_headers)
    assert (res.json()["category"], res.json()["unit"]) == ("Seeds", "kg")


async def test_oversized_strings_rejected(client: AsyncClient, auth_headers: dict):
    res = await client.post("/api/v1/inventory", json=_item(5, 10, category="x" * 101), headers=auth_headers)
    assert res.status_code == 400
    res = await client.post("/api/v1/inventory", json=_item(5, 10, unit="x" * 51), headers=auth_headers)
    assert res.status_code == 400


async def test_infinite_amounts_rejected(client: AsyncClient, auth_headers: dict):
    res = await client.post("/api/v1/inventory", json=_item("inf", 10), headers=auth_headers)
    assert res.status_code == 400

    created = await client.post("/api/v1/inventory", json=_item(5, 10), headers=auth_headers)
    res = await client.patch(
        f"/api/v1/inventory/{created.json()['id']}", json={"threshold": "nan"}, headers=auth_headers
    )
    assert res.status_code == 400
