from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, EmailStr, Field, field_validator

from farmstead.schemas.base import PatchModel


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=200)
    farm_name: str = Field(min_length=1, max_length=200)
    profile_image: Optional[str] = Field(None, max_length=500)
    language: str = Field("en", min_length=1, max_length=10)

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        # bcrypt rejects anything over 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password may be at most 72 bytes")
        return value


class UserUpdate(PatchModel):
    non_nullable = ("name", "farm_name")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    farm_name: Optional[str] = Field(None, min_length=1, max_length=200)
    profile_image: Optional[str] = Field(None, max_length=500)
    language: Optional[str] = Field(None, min_length=1, max_length=10)
    timezone: Optional[str] = Field(None, max_length=50)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {value}")
        return value


class UserRead(BaseModel):
    id: int
    username: str
    email: str
    name: str
    farm_name: str
    role: str
    profile_image: Optional[str]
    language: Optional[str]
    timezone: Optional[str]
    is_active: bool
    created_at: datetime
    last_login: Optional[datetime]

    model_config = {"from_attributes": True}
