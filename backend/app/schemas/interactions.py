from datetime import date, datetime
from typing import Any, List, Optional

from dateutil import parser as dateparse
from pydantic import BaseModel, Field, field_validator

from app.core.config import settings


def _parse_due(value: Any) -> Any:
    """Accept '2026-10-20', '2026-10-20T09:00:00', date objects; blank clears."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            return dateparse.isoparse(s)
        except ValueError as e:
            raise ValueError(f"invalid due_date: {value!r}") from e
    return value


# ---------- OUT MODELS ----------
class InteractionOut(BaseModel):
    id: str
    customer_id: str
    type: str
    due_date: Optional[datetime] = None
    status: str
    notes: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class InteractionList(BaseModel):
    items: List[InteractionOut]
    total: int

class InteractionDeleted(BaseModel):
    ok: bool
    id: str
    deleted: bool

# ---------- IN MODELS ----------
class InteractionCreate(BaseModel):
    customer_id: str
    type: str = Field(default_factory=lambda: settings.FOLLOWUP_TYPE)
    due_date: Optional[datetime] = None
    status: str = Field(default_factory=lambda: settings.PENDING_STATUS)
    notes: str = ""

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return _parse_due(v)

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, v):
        return v or ""

# PATCH: only the fields that were sent are applied
class InteractionUpdate(BaseModel):
    customer_id: Optional[str] = None
    type: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return _parse_due(v)

    class Config:
        extra = "ignore"
