from pydantic import BaseModel


class FarmMetrics(BaseModel):
    task_completion: int
    inventory_health: int
    equipment_utilization: int
    overdue_tasks: int
    low_stock_items: int
