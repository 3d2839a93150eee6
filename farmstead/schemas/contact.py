from typing import Optional

from pydantic import BaseModel, Field

from farmstead.schemas.base import PatchModel


class ContactCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    type: str = Field(min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    notes: Optional[str] = None


class ContactUpdate(PatchModel):
    non_nullable = ("name", "type")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    notes: Optional[str] = None


class ContactRead(BaseModel):
    id: int
    user_id: int
    name: str
    type: str
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    notes: Optional[str]

    model_config = {"from_attributes": True}
