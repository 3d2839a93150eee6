from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from farmstead.schemas.base import PatchModel

Priority = Literal["low", "medium", "high", "critical"]
Recurrence = Literal["daily", "weekly", "monthly"]
TaskStatus = Literal["upcoming", "today", "overdue", "completed"]


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    due_date: date
    priority: Priority = "medium"
    completed: bool = False
    assigned_to: str = Field("Self", min_length=1, max_length=100)
    recurring: Optional[Recurrence] = None


class TaskUpdate(PatchModel):
    non_nullable = ("title", "due_date", "priority", "completed", "assigned_to")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
    assigned_to: Optional[str] = Field(None, min_length=1, max_length=100)
    recurring: Optional[Recurrence] = None


class TaskRead(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str]
    due_date: date
    priority: str
    status: TaskStatus
    completed: bool
    assigned_to: str
    recurring: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}
