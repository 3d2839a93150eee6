"""
Storage facade shared by route handlers and the worker.

Every farm record belongs to exactly one user. ``list_*`` is scoped by owner;
``get_*``/``update_*``/``delete_*`` take a bare id and leave ownership checks
to the caller. Lookups that miss return ``None`` (or ``False`` for deletes)
rather than raising; backing-store failures propagate unchanged.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Optional

from farmstead.models import Contact, EquipmentItem, InventoryItem, Task, User, WeatherPreference
from farmstead.schemas.contact import ContactCreate, ContactUpdate
from farmstead.schemas.equipment import EquipmentItemCreate, EquipmentItemUpdate
from farmstead.schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from farmstead.schemas.task import TaskCreate, TaskUpdate
from farmstead.schemas.user import UserCreate, UserUpdate
from farmstead.schemas.weather import WeatherPreferenceUpdate
from farmstead.services.status import derive_inventory_status, derive_task_status, local_today

# Task fields whose change requires re-deriving status
TASK_STATUS_FIELDS = frozenset({"completed", "due_date"})
# Inventory fields whose change requires re-deriving status
INVENTORY_STATUS_FIELDS = frozenset({"quantity", "threshold"})


def apply_task_changes(task: Task, changes: dict, today: Optional[date] = None) -> Task:
    """Merge patch fields into a task, re-deriving status if an input changed."""
    for field, value in changes.items():
        setattr(task, field, value)
    if TASK_STATUS_FIELDS & changes.keys():
        task.status = derive_task_status(task.due_date, task.completed, today or local_today())
    return task


def apply_inventory_changes(item: InventoryItem, changes: dict) -> InventoryItem:
    """Merge patch fields into an inventory item and stamp last_updated."""
    for field, value in changes.items():
        setattr(item, field, value)
    if INVENTORY_STATUS_FIELDS & changes.keys():
        item.status = derive_inventory_status(item.quantity, item.threshold)
    item.last_updated = datetime.now(timezone.utc)
    return item


class Storage(ABC):
    # ── Users ─────────────────────────────────────────────────────────────────

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def list_active_users(self) -> list[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate, hashed_password: str, role: str = "farmer") -> User: ...

    @abstractmethod
    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]: ...

    @abstractmethod
    async def record_login(self, user_id: int) -> None: ...

    # ── Tasks ─────────────────────────────────────────────────────────────────

    @abstractmethod
    async def list_tasks(self, user_id: int) -> list[Task]: ...

    @abstractmethod
    async def get_task(self, task_id: int) -> Optional[Task]: ...

    @abstractmethod
    async def create_task(self, user_id: int, data: TaskCreate, *, today: Optional[date] = None) -> Task: ...

    @abstractmethod
    async def update_task(
        self, task_id: int, data: TaskUpdate, *, today: Optional[date] = None
    ) -> Optional[Task]: ...

    @abstractmethod
    async def delete_task(self, task_id: int) -> bool: ...

    @abstractmethod
    async def refresh_task_statuses(self, user_id: int, today: date) -> int:
        """Re-derive status for the user's open tasks. Returns how many changed."""

    # ── Inventory ─────────────────────────────────────────────────────────────

    @abstractmethod
    async def list_inventory_items(self, user_id: int) -> list[InventoryItem]: ...

    @abstractmethod
    async def get_inventory_item(self, item_id: int) -> Optional[InventoryItem]: ...

    @abstractmethod
    async def create_inventory_item(self, user_id: int, data: InventoryItemCreate) -> InventoryItem: ...

    @abstractmethod
    async def update_inventory_item(
        self, item_id: int, data: InventoryItemUpdate
    ) -> Optional[InventoryItem]: ...

    @abstractmethod
    async def delete_inventory_item(self, item_id: int) -> bool: ...

    # ── Equipment ─────────────────────────────────────────────────────────────

    @abstractmethod
    async def list_equipment_items(self, user_id: int) -> list[EquipmentItem]: ...

    @abstractmethod
    async def get_equipment_item(self, item_id: int) -> Optional[EquipmentItem]: ...

    @abstractmethod
    async def create_equipment_item(self, user_id: int, data: EquipmentItemCreate) -> EquipmentItem: ...

    @abstractmethod
    async def update_equipment_item(
        self, item_id: int, data: EquipmentItemUpdate
    ) -> Optional[EquipmentItem]: ...

    @abstractmethod
    async def delete_equipment_item(self, item_id: int) -> bool: ...

    # ── Contacts ──────────────────────────────────────────────────────────────

    @abstractmethod
    async def list_contacts(self, user_id: int) -> list[Contact]: ...

    @abstractmethod
    async def get_contact(self, contact_id: int) -> Optional[Contact]: ...

    @abstractmethod
    async def create_contact(self, user_id: int, data: ContactCreate) -> Contact: ...

    @abstractmethod
    async def update_contact(self, contact_id: int, data: ContactUpdate) -> Optional[Contact]: ...

    @abstractmethod
    async def delete_contact(self, contact_id: int) -> bool: ...

    # ── Weather preference ────────────────────────────────────────────────────

    @abstractmethod
    async def get_weather_preference(self, user_id: int) -> Optional[WeatherPreference]: ...

    @abstractmethod
    async def set_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> WeatherPreference:
        """Create the user's preference, or merge into the existing one."""

    @abstractmethod
    async def update_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> Optional[WeatherPreference]: ...
