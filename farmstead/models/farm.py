from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Enum, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from farmstead.db.base import Base


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    due_date: Mapped[date] = mapped_column(Date, index=True)
    priority: Mapped[str] = mapped_column(
        Enum("low", "medium", "high", "critical", name="task_priority_enum"), default="medium"
    )
    # Derived from due_date + completed, never written directly by clients
    status: Mapped[str] = mapped_column(
        Enum("upcoming", "today", "overdue", "completed", name="task_status_enum"),
        default="upcoming",
    )
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    assigned_to: Mapped[str] = mapped_column(String(100), default="Self")
    recurring: Mapped[Optional[str]] = mapped_column(
        Enum("daily", "weekly", "monthly", name="task_recurrence_enum")
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship(back_populates="tasks")


class InventoryItem(Base):
    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    category: Mapped[str] = mapped_column(String(100))
    quantity: Mapped[float] = mapped_column(Float)
    unit: Mapped[str] = mapped_column(String(50))
    threshold: Mapped[float] = mapped_column(Float)
    # Derived from quantity vs threshold
    status: Mapped[str] = mapped_column(Enum("low", "good", name="inventory_status_enum"), default="good")

    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship(back_populates="inventory_items")


class EquipmentItem(Base):
    __tablename__ = "equipment"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    status: Mapped[str] = mapped_column(
        Enum(
            "available", "in-use", "maintenance-due", "out-of-service",
            name="equipment_status_enum",
        ),
        default="available",
    )
    last_used: Mapped[Optional[date]] = mapped_column(Date)
    assigned_to: Mapped[Optional[str]] = mapped_column(String(100))
    next_service: Mapped[Optional[date]] = mapped_column(Date)

    user: Mapped["User"] = relationship(back_populates="equipment_items")


class Contact(Base):
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(200))
    type: Mapped[str] = mapped_column(String(100))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    address: Mapped[Optional[str]] = mapped_column(Text)
    notes: Mapped[Optional[str]] = mapped_column(Text)

    user: Mapped["User"] = relationship(back_populates="contacts")


class WeatherPreference(Base):
    __tablename__ = "weather_preferences"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), unique=True)
    location: Mapped[str] = mapped_column(String(200), default="Harare")
    units: Mapped[str] = mapped_column(Enum("metric", "imperial", name="weather_units_enum"), default="metric")

    user: Mapped["User"] = relationship(back_populates="weather_preference")
