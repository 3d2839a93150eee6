from datetime import timedelta

import pytest
from httpx import AsyncClient

from farmstead.schemas.task import TaskCreate
from farmstead.services.metrics import get_farm_metrics
from farmstead.services.status import local_today
from farmstead.storage import MemStorage


async def test_metrics_empty_farm(client: AsyncClient, auth_headers: dict):
    res = await client.get("/api/v1/metrics", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {
        "task_completion": 100,
        "inventory_health": 100,
        "equipment_utilization": 0,
        "overdue_tasks": 0,
        "low_stock_items": 0,
    }


async def test_metrics(client: AsyncClient, auth_headers: dict):
    today = local_today()
    for due, completed in [(today - timedelta(days=2), False), (today, True), (today + timedelta(days=1), False)]:
        await client.post("/api/v1/tasks", json={
            "title": "Task", "due_date": due.isoformat(), "completed": completed,
        }, headers=auth_headers)
    for quantity in (5, 50):
        await client.post("/api/v1/inventory", json={
            "name": "Feed", "category": "Feed", "quantity": quantity, "unit": "bags", "threshold": 10,
        }, headers=auth_headers)
    for status in ("in-use", "available", "available", "maintenance-due"):
        await client.post("/api/v1/equipment", json={"name": "Machine", "status": status}, headers=auth_headers)

    res = await client.get("/api/v1/metrics", headers=auth_headers)
    assert res.json() == {
        "task_completion": 33,
        "inventory_health": 50,
        "equipment_utilization": 25,
        "overdue_tasks": 1,
        "low_stock_items": 1,
    }


@pytest.mark.parametrize("done, expected", [(1, 13), (5, 63), (3, 38)])
async def test_task_completion_rounds_half_up(storage: MemStorage, done: int, expected: int):
    today = local_today()
    for i in range(8):
        await storage.create_task(1, TaskCreate(title=f"Task {i}", due_date=today, completed=i < done), today=today)

    metrics = await get_farm_metrics(storage, 1)
    assert metrics.task_completion == expected
