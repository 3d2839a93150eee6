from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from farmstead.schemas.base import PatchModel

InventoryStatus = Literal["low", "good"]


class InventoryItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=100)
    quantity: float = Field(ge=0)
    unit: str = Field(min_length=1, max_length=50)
    threshold: float = Field(ge=0)

    model_config = {"allow_inf_nan": False}

    @field_validator("quantity", "threshold")
    @classmethod
    def round_amounts(cls, value: Optional[float]) -> Optional[float]:
        # Amounts are kept to two decimal places
        return round(value, 2) if value is not None else value


class InventoryItemUpdate(PatchModel):
    non_nullable = ("name", "category", "quantity", "unit", "threshold")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1, max_length=50)
    threshold: Optional[float] = Field(None, ge=0)

    model_config = {"allow_inf_nan": False}

    @field_validator("quantity", "threshold")
    @classmethod
    def round_amounts(cls, value: Optional[float]) -> Optional[float]:
        # Amounts are kept to two decimal places
        return round(value, 2) if value is not None else value


class InventoryItemRead(BaseModel):
    id: int
    user_id: int
    name: str
    category: str
    quantity: float
    unit: str
    threshold: float
    status: InventoryStatus
    last_updated: datetime

    model_config = {"from_attributes": True}
