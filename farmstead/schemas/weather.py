from typing import Literal, Optional

from pydantic import BaseModel, Field

from farmstead.schemas.base import PatchModel

Units = Literal["metric", "imperial"]

DEFAULT_LOCATION = "Harare"
DEFAULT_UNITS = "metric"


class WeatherPreferenceUpdate(PatchModel):
    non_nullable = ("location", "units")

    location: Optional[str] = Field(None, min_length=1, max_length=200)
    units: Optional[Units] = None


class WeatherPreferenceRead(BaseModel):
    id: int
    user_id: int
    location: str
    units: Units

    model_config = {"from_attributes": True}
