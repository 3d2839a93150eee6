from typing import ClassVar

from pydantic import BaseModel, model_validator


class PatchModel(BaseModel):
    """
    Base for partial-update bodies.

    Every field is optional so clients can send any subset. Fields listed in
    ``non_nullable`` map to NOT NULL columns: omitting them is fine, sending
    an explicit ``null`` is a validation error.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_explicit_nulls(self):
        for field in self.non_nullable:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} may not be null")
        return self
