"""
Demo farm used for walkthroughs: one farmer with a handful of tasks, stock,
machinery and a weather preference. Due dates are relative to today so the
derived task statuses cover every value.
"""
import logging
from datetime import timedelta

from farmstead.core.security import hash_password
from farmstead.models.user import User
from farmstead.schemas.equipment import EquipmentItemCreate
from farmstead.schemas.inventory import InventoryItemCreate
from farmstead.schemas.task import TaskCreate
from farmstead.schemas.user import UserCreate
from farmstead.schemas.weather import WeatherPreferenceUpdate
from farmstead.services.status import local_today
from farmstead.storage import Storage

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "password123"


async def seed_demo_data(storage: Storage) -> User:
    """Create the demo farmer and sample records. No-op if the user already exists."""
    existing = await storage.get_user_by_username(DEMO_USERNAME)
    if existing is not None:
        logger.info("demo_data: user %r already present — skipping", DEMO_USERNAME)
        return existing

    user = await storage.create_user(
        UserCreate(
            username=DEMO_USERNAME,
            email="demo@example.com",
            password=DEMO_PASSWORD,
            name="Thomas Moyo",
            farm_name="Green Valley Farm",
        ),
        hash_password(DEMO_PASSWORD),
    )

    today = local_today()
    tasks = [
        TaskCreate(title="Harvest tomatoes", description="Harvest ripe tomatoes from field 2",
                   due_date=today, priority="high"),
        TaskCreate(title="Irrigate maize field", description="Set up irrigation system for maize field",
                   due_date=today - timedelta(days=3), priority="critical", assigned_to="John"),
        TaskCreate(title="Apply fertilizer", description="Apply NPK fertilizer to vegetable beds",
                   due_date=today + timedelta(days=5), assigned_to="Maria"),
        TaskCreate(title="Repair fence", description="Fix broken fence in north section",
                   due_date=today - timedelta(days=10), completed=True),
    ]
    for task in tasks:
        await storage.create_task(user.id, task, today=today)

    inventory = [
        InventoryItemCreate(name="Tomato Seeds", category="Seeds", quantity=5, unit="kg", threshold=10),
        InventoryItemCreate(name="NPK Fertilizer", category="Fertilizer", quantity=200, unit="kg", threshold=50),
        InventoryItemCreate(name="Pesticide", category="Chemicals", quantity=15, unit="L", threshold=5),
        InventoryItemCreate(name="Chicken Feed", category="Feed", quantity=25, unit="bags", threshold=10),
    ]
    for item in inventory:
        await storage.create_inventory_item(user.id, item)

    equipment = [
        EquipmentItemCreate(name="Tractor", status="maintenance-due", assigned_to="Thomas",
                            last_used=today - timedelta(days=15), next_service=today + timedelta(days=5)),
        EquipmentItemCreate(name="Irrigation Pump", status="available",
                            last_used=today - timedelta(days=5), next_service=today + timedelta(days=45)),
        EquipmentItemCreate(name="Harvester", status="in-use", assigned_to="Maria",
                            last_used=today, next_service=today + timedelta(days=30)),
    ]
    for item in equipment:
        await storage.create_equipment_item(user.id, item)

    await storage.set_weather_preference(user.id, WeatherPreferenceUpdate(location="Harare", units="metric"))

    logger.info("demo_data: seeded user %r (id=%d)", DEMO_USERNAME, user.id)
    return user
