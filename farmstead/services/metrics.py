import math

from farmstead.schemas.metrics import FarmMetrics
from farmstead.services.status import INVENTORY_GOOD, INVENTORY_LOW, TASK_OVERDUE
from farmstead.storage import Storage


def _percent(part: int, whole: int, empty: int) -> int:
    if whole == 0:
        return empty
    # Half-up, not Python's round-half-to-even
    return math.floor(part * 100 / whole + 0.5)


async def get_farm_metrics(storage: Storage, user_id: int) -> FarmMetrics:
    """Dashboard percentages and counts for one farmer's records."""
    tasks = await storage.list_tasks(user_id)
    inventory = await storage.list_inventory_items(user_id)
    equipment = await storage.list_equipment_items(user_id)

    completed = sum(1 for t in tasks if t.completed)
    good_stock = sum(1 for i in inventory if i.status == INVENTORY_GOOD)
    in_use = sum(1 for e in equipment if e.status == "in-use")

    return FarmMetrics(
        # Empty task and inventory lists read as 100%, no equipment as 0%
        task_completion=_percent(completed, len(tasks), empty=100),
        inventory_health=_percent(good_stock, len(inventory), empty=100),
        equipment_utilization=_percent(in_use, len(equipment), empty=0),
        overdue_tasks=sum(1 for t in tasks if t.status == TASK_OVERDUE),
        low_stock_items=sum(1 for i in inventory if i.status == INVENTORY_LOW),
    )
