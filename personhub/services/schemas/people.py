# personhub/services/schemas/people.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# largest id a 64-bit signed INTEGER column can hold
MAX_ID = 2**63 - 1


# ---------- Person ----------

class PersonBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    firstname: str = Field(..., min_length=1, max_length=255)
    lastname: str = Field(..., min_length=1, max_length=255)


class PersonCreate(PersonBase):
    # accepted so that a supplied id is rejected explicitly rather than ignored
    id: Optional[int] = None


class PersonUpdate(PersonBase):
    id: int = Field(..., ge=1, le=MAX_ID)


class PersonQuery(BaseModel):
    """Template for identifying a record: any populated field is a filter."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    firstname: Optional[str] = Field(default=None, max_length=255)
    lastname: Optional[str] = Field(default=None, max_length=255)

    @model_validator(mode="after")
    def _needs_a_filter(self) -> "PersonQuery":
        if not (self.id or self.firstname or self.lastname):
            raise ValueError("at least one of id, firstname, lastname is required")
        return self


class PersonRead(PersonBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


# ---------- Envelopes ----------

class StatusRead(BaseModel):
    status: str


class PersonStatusRead(StatusRead):
    person: PersonRead


class PersonListRead(BaseModel):
    persons: List[PersonRead] = []


class ErrorRead(BaseModel):
    error: str
