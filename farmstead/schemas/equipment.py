from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from farmstead.schemas.base import PatchModel

EquipmentStatus = Literal["available", "in-use", "maintenance-due", "out-of-service"]


class EquipmentItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    status: EquipmentStatus = "available"
    last_used: Optional[date] = None
    assigned_to: Optional[str] = Field(None, max_length=100)
    next_service: Optional[date] = None


class EquipmentItemUpdate(PatchModel):
    non_nullable = ("name", "status")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[EquipmentStatus] = None
    last_used: Optional[date] = None
    assigned_to: Optional[str] = Field(None, max_length=100)
    next_service: Optional[date] = None


class EquipmentItemRead(BaseModel):
    id: int
    user_id: int
    name: str
    status: EquipmentStatus
    last_used: Optional[date]
    assigned_to: Optional[str]
    next_service: Optional[date]

    model_config = {"from_attributes": True}
