"""
SQLAlchemy-backed storage. One instance wraps one AsyncSession (one request,
or one worker job); every mutating call commits before returning.
"""
from datetime import date, datetime, timezone
from typing import Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from farmstead.db.base import Base
from farmstead.models import Contact, EquipmentItem, InventoryItem, Task, User, WeatherPreference
from farmstead.schemas.contact import ContactCreate, ContactUpdate
from farmstead.schemas.equipment import EquipmentItemCreate, EquipmentItemUpdate
from farmstead.schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from farmstead.schemas.task import TaskCreate, TaskUpdate
from farmstead.schemas.user import UserCreate, UserUpdate
from farmstead.schemas.weather import DEFAULT_LOCATION, DEFAULT_UNITS, WeatherPreferenceUpdate
from farmstead.services.status import derive_inventory_status, derive_task_status, local_today
from farmstead.storage.base import Storage, apply_inventory_changes, apply_task_changes

ModelT = TypeVar("ModelT", bound=Base)


class DatabaseStorage(Storage):
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _save(self, record: ModelT) -> ModelT:
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def _list_owned(self, model: type[ModelT], user_id: int) -> list[ModelT]:
        result = await self.db.execute(
            select(model).where(model.user_id == user_id).order_by(model.id)
        )
        return list(result.scalars().all())

    async def _delete(self, model: type[Base], record_id: int) -> bool:
        record = await self.db.get(model, record_id)
        if record is None:
            return False
        await self.db.delete(record)
        await self.db.commit()
        return True

    async def _patch(self, model: type[ModelT], record_id: int, changes: dict) -> Optional[ModelT]:
        record = await self.db.get(model, record_id)
        if record is None:
            return None
        for field, value in changes.items():
            setattr(record, field, value)
        return await self._save(record)

    # ── Users ─────────────────────────────────────────────────────────────────

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self.db.scalar(select(User).where(User.username == username))

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self.db.scalar(select(User).where(User.email == email))

    async def list_active_users(self) -> list[User]:
        result = await self.db.execute(select(User).where(User.is_active.is_(True)).order_by(User.id))
        return list(result.scalars().all())

    async def create_user(self, data: UserCreate, hashed_password: str, role: str = "farmer") -> User:
        user = User(
            **data.model_dump(exclude={"password"}),
            hashed_password=hashed_password,
            role=role,
        )
        return await self._save(user)

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        return await self._patch(User, user_id, data.model_dump(exclude_unset=True))

    async def record_login(self, user_id: int) -> None:
        user = await self.db.get(User, user_id)
        if user is not None:
            user.last_login = datetime.now(timezone.utc)
            await self.db.commit()

    # ── Tasks ─────────────────────────────────────────────────────────────────

    async def list_tasks(self, user_id: int) -> list[Task]:
        return await self._list_owned(Task, user_id)

    async def get_task(self, task_id: int) -> Optional[Task]:
        return await self.db.get(Task, task_id)

    async def create_task(self, user_id: int, data: TaskCreate, *, today: Optional[date] = None) -> Task:
        task = Task(**data.model_dump(), user_id=user_id)
        task.status = derive_task_status(data.due_date, data.completed, today or local_today())
        return await self._save(task)

    async def update_task(
        self, task_id: int, data: TaskUpdate, *, today: Optional[date] = None
    ) -> Optional[Task]:
        task = await self.db.get(Task, task_id)
        if task is None:
            return None
        apply_task_changes(task, data.model_dump(exclude_unset=True), today)
        return await self._save(task)

    async def delete_task(self, task_id: int) -> bool:
        return await self._delete(Task, task_id)

    async def refresh_task_statuses(self, user_id: int, today: date) -> int:
        result = await self.db.execute(
            select(Task).where(Task.user_id == user_id, Task.completed.is_(False))
        )
        changed = 0
        for task in result.scalars().all():
            status = derive_task_status(task.due_date, task.completed, today)
            if status != task.status:
                task.status = status
                changed += 1
        if changed:
            await self.db.commit()
        return changed

    # ── Inventory ─────────────────────────────────────────────────────────────

    async def list_inventory_items(self, user_id: int) -> list[InventoryItem]:
        return await self._list_owned(InventoryItem, user_id)

    async def get_inventory_item(self, item_id: int) -> Optional[InventoryItem]:
        return await self.db.get(InventoryItem, item_id)

    async def create_inventory_item(self, user_id: int, data: InventoryItemCreate) -> InventoryItem:
        item = InventoryItem(
            **data.model_dump(),
            user_id=user_id,
            status=derive_inventory_status(data.quantity, data.threshold),
        )
        return await self._save(item)

    async def update_inventory_item(
        self, item_id: int, data: InventoryItemUpdate
    ) -> Optional[InventoryItem]:
        item = await self.db.get(InventoryItem, item_id)
        if item is None:
            return None
        apply_inventory_changes(item, data.model_dump(exclude_unset=True))
        return await self._save(item)

    async def delete_inventory_item(self, item_id: int) -> bool:
        return await self._delete(InventoryItem, item_id)

    # ── Equipment ─────────────────────────────────────────────────────────────

    async def list_equipment_items(self, user_id: int) -> list[EquipmentItem]:
        return await self._list_owned(EquipmentItem, user_id)

    async def get_equipment_item(self, item_id: int) -> Optional[EquipmentItem]:
        return await self.db.get(EquipmentItem, item_id)

    async def create_equipment_item(self, user_id: int, data: EquipmentItemCreate) -> EquipmentItem:
        return await self._save(EquipmentItem(**data.model_dump(), user_id=user_id))

    async def update_equipment_item(
        self, item_id: int, data: EquipmentItemUpdate
    ) -> Optional[EquipmentItem]:
        return await self._patch(EquipmentItem, item_id, data.model_dump(exclude_unset=True))

    async def delete_equipment_item(self, item_id: int) -> bool:
        return await self._delete(EquipmentItem, item_id)

    # ── Contacts ──────────────────────────────────────────────────────────────

    async def list_contacts(self, user_id: int) -> list[Contact]:
        return await self._list_owned(Contact, user_id)

    async def get_contact(self, contact_id: int) -> Optional[Contact]:
        return await self.db.get(Contact, contact_id)

    async def create_contact(self, user_id: int, data: ContactCreate) -> Contact:
        return await self._save(Contact(**data.model_dump(), user_id=user_id))

    async def update_contact(self, contact_id: int, data: ContactUpdate) -> Optional[Contact]:
        return await self._patch(Contact, contact_id, data.model_dump(exclude_unset=True))

    async def delete_contact(self, contact_id: int) -> bool:
        return await self._delete(Contact, contact_id)

    # ── Weather preference ────────────────────────────────────────────────────

    async def get_weather_preference(self, user_id: int) -> Optional[WeatherPreference]:
        return await self.db.scalar(
            select(WeatherPreference).where(WeatherPreference.user_id == user_id)
        )

    async def set_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> WeatherPreference:
        pref = await self.get_weather_preference(user_id)
        if pref is None:
            pref = WeatherPreference(
                user_id=user_id,
                location=data.location or DEFAULT_LOCATION,
                units=data.units or DEFAULT_UNITS,
            )
        else:
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(pref, field, value)
        return await self._save(pref)

    async def update_weather_preference(
        self, user_id: int, data: WeatherPreferenceUpdate
    ) -> Optional[WeatherPreference]:
        pref = await self.get_weather_preference(user_id)
        if pref is None:
            return None
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(pref, field, value)
        return await self._save(pref)
