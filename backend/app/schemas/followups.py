from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel


class FollowupCard(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    type: str
    due_date: Optional[datetime] = None
    status: str
    notes: str = ""
    badge: Optional[str] = None  # "Overdue" on the overdue section only
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FollowupCounts(BaseModel):
    overdue: int
    upcoming: int
    total_pending: int  # before search
    matching: int       # after search


class FollowupBoard(BaseModel):
    as_of: date
    search: str = ""
    overdue: List[FollowupCard]
    upcoming: List[FollowupCard]
    counts: FollowupCounts
    empty_message: Optional[str] = None
    show_schedule_action: bool = False


class DeletePrompt(BaseModel):
    id: str
    title: str
    description: str
    item_name: str
