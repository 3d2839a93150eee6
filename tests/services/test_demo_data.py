from farmstead.core.security import verify_password
from farmstead.services.demo_data import DEMO_PASSWORD, seed_demo_data
from farmstead.storage import MemStorage


async def test_seed_demo_data_covers_every_status(storage: MemStorage):
    user = await seed_demo_data(storage)

    assert verify_password(DEMO_PASSWORD, user.hashed_password)
    tasks = await storage.list_tasks(user.id)
    assert {t.status for t in tasks} == {"today", "overdue", "upcoming", "completed"}
    inventory = await storage.list_inventory_items(user.id)
    assert [i.status for i in inventory] == ["low", "good", "good", "good"]
    assert len(await storage.list_equipment_items(user.id)) == 3
    assert (await storage.get_weather_preference(user.id)).location == "Harare"


async def test_seed_demo_data_is_idempotent(storage: MemStorage):
    first = await seed_demo_data(storage)
    second = await seed_demo_data(storage)
    assert first.id == second.id
    assert len(await storage.list_tasks(first.id)) == 4
