"""
Process-local storage backend.

Records are plain (transient) ORM instances kept in per-entity dicts, with ids
handed out by per-entity counters starting at 1. Used by the test suite and
by the ``memory`` STORAGE_BACKEND for demos; nothing is persisted.
"""
import itertools
from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Optional

from farmstead.models import Contact, EquipmentItem, InventoryItem, Task, User, WeatherPreference
from farmstead.schemas.contact import ContactCreate, ContactUpdate
from farmstead.schemas.equipment import EquipmentItemCreate, EquipmentItemUpdate
from farmstead.schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from farmstead.schemas.task import TaskCreate, TaskUpdate
from farmstead.schemas.user import UserCreate, UserUpdate
from farmstead.schemas.weather import DEFAULT_LOCATION, DEFAULT_UNITS, WeatherPreferenceUpdate
from farmstead.services.status import derive_inventory_status, derive_task_status, local_today
from farmstead.storage.base import Storage, apply_inventory_changes, apply_task_changes


class MemStorage(Storage):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._tasks: dict[int, Task] = {}
        self._inventory: dict[int, InventoryItem] = {}
        self._equipment: dict[int, EquipmentItem] = {}
        self._contacts: dict[int, Contact] = {}
        self._weather_prefs: dict[int, WeatherPreference] = {}
        self._counters: defaultdict[str, itertools.count] = defaultdict(lambda: itertools.count(1))

    def _next_id(self, table: str) -> int:
        return next(self._counters[table])

    @staticmethod
    def _owned_by(table: dict, user_id: int) -> list:
        return [record for record in table.values() if record.user_id == user_id]

    @staticmethod
    def _patch(record, changes: dict):
        for field, value in changes.items():
            setattr(record, field, value)
        return record

    # ── Users ─────────────────────────────────────────────────────────────────

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def list_active_users(self) -> list[User]:
        return [u for u in self._users.values() if u.is_active]

    async def create_user(self, data: UserCreate, hashed_password: str, role: str = "farmer") -> User:
        user = User(
            id=self._next_id("users"),
            **data.model_dump(exclude={"password"}),
            hashed_password=hashed_password,
            role=role,
            is_active=True,
            timezone=None,
            created_at=datetime.now(timezone.utc),
            last_login=None,
        )
        self._users[user.id] = user
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        return self._patch(user, data.model_dump(exclude_unset=True))

    async def record_login(self, user_id: int) -> None:
        user = self._users.get(user_id)
        if user is not None:
            user.last_login = datetime.now(timezone.utc)

    # ── Tasks ─────────────────────────────────────────────────────────────────

    async def list_tasks(self, user_id: int) -> list[Task]:
        return self._owned_by(self._tasks, user_id)

    async def get_task(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def create_task(self, user_id: int, data: TaskCreate, *, today: Optional[date] = None) -> Task:
        task = Task(
            id=self._next_id("tasks"),
            user_id=user_id,
            **data.model_dump(),
            created_at=datetime.now(timezone.utc),
        )
        task.status = derive_task_status(task.due_date, task.completed, today or local_today())
        self._tasks[task.id] = task
        return task

    async def update_task(
        self, task_id: int, data: TaskUpdate, *, today: Optional[date] = None
    ) -> Optional[Task]:
        task = self._tasks.get(task_id)
        if task is None:
            return None
        return apply_task_changes(task, data.model_dump(exclude_unset=True), today)

    async def delete_task(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None

    async def refresh_task_statuses(self, user_id: int, today: date) -> int:
        changed = 0
        for task in self._owned_by(self._tasks, user_id):
            status = derive_task_status(task.due_date, task.completed, today)
            if status != task.status:
                task.status = status
                changed += 1
        return changed

    # ── Inventory ─────────────────────────────────────────────────────────────

    async def list_inventory_items(self, user_id: int) -> list[InventoryItem]:
        return self._owned_by(self._inventory, user_id)

    async def get_inventory_item(self, item_id: int) -> Optional[InventoryItem]:
        return self._inventory.get(item_id)

    async def create_inventory_item(self, user_id: int, data: InventoryItemCreate) -> InventoryItem:
        item = InventoryItem(
            id=self._next_id("inventory"),
            user_id=user_id,
            **data.model_dump(),
            status=derive_inventory_status(data.quantity, data.threshold),
            last_updated=datetime.now(timezone.utc),
        )
        self._inventory[item.id] = item
        return item

    async def update_inventory_item(
        self, item_id: int, data: InventoryItemUpdate
    ) -> Optional[InventoryItem]:
        item = self._inventory.get(item_id)
        if item is None:
            return None
        return apply_inventory_changes(item, data.model_dump(exclude_unset=True))

    async def delete_inventory_item(self, item_id: int) -> bool:
        return self._inventory.pop(item_id, None) is not None

    # ── Equipment ─────────────────────────────────────────────────────────────

    async def list_equipment_items(self, user_id: int) -> list[EquipmentItem]:
        return self._owned_by(self._equipment, user_id)

    async def get_equipment_item(self, item_id: int) -> Optional[EquipmentItem]:
        return self._equipment.get(item_id)

    async def create_equipment_item(self, user_id: int, data: EquipmentItemCreate) -> EquipmentItem:
        item = EquipmentItem(id=self._next_id("equipment"), user_id=user_id, **data.model_dump())
        self._equipment[item.id] = item
        return item

    async def update_equipment_item(
        self, item_id: int, data: EquipmentItemUpdate
    ) -> Optional[EquipmentItem]:
        item = self._equipment.get(item_id)
        if item is None:
            return None
        return self._patch(item, data.model_dump(exclude_unset=True))

    async def delete_equipment_item(self, item_id: int) -> bool:
        return self._equipment.pop(item_id, None) is not None

    # ── Contacts ──────────────────────────────────────────────────────────────

    async def list_contacts(self, user_id: int) -> list[Contact]:
        return self._owned_by(self._contacts, user_id)

    async def get_contact(self, contact_id: int) -> Optional[Contact]:
        return self._contacts.get(contact_id)

    async def create_contact(self, user_id: int, data: ContactCreate) -> Contact:
        contact = Contact(id=self._next_id("contacts"), user_id=user_id, **data.model_dump())
        self._contacts[contact.id] = contact
        return contact

    async def update_contact(self, contact_id: int, data: ContactUpdate) -> Optional[Contact]:
        contact = self._contacts.get(contact_id)
        if contact is None:
            return None
        return self._patch(contact, data.model_dump(exclude_unset=True))

    async def delete_contact(self, contact_id: int) -> bool:
        return self._contacts.pop(contact_id, None) is not None

    # ── Weather preference ────────────────────────────────────────────────────

    async def get_weather_preference(self, user_id: int) -> Optional[WeatherPreference]:
        return next((p for p in self._weather_prefs.values() if p.user_id == user_id), None)

    async def set_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> WeatherPreference:
        pref = await self.get_weather_preference(user_id)
        if pref is not None:
            return self._patch(pref, data.model_dump(exclude_unset=True))

        pref = WeatherPreference(
            id=self._next_id("weather_preferences"),
            user_id=user_id,
            location=data.location or DEFAULT_LOCATION,
            units=data.units or DEFAULT_UNITS,
        )
        self._weather_prefs[pref.id] = pref
        return pref

    async def update_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> Optional[WeatherPreference]:
        pref = await self.get_weather_preference(user_id)
        if pref is None:
            return None
        return self._patch(pref, data.model_dump(exclude_unset=True))
