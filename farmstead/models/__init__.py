from farmstead.models.user import User
from farmstead.models.farm import Contact, EquipmentItem, InventoryItem, Task, WeatherPreference

__all__ = [
    "User",
    "Task",
    "InventoryItem",
    "EquipmentItem",
    "Contact",
    "WeatherPreference",
]
