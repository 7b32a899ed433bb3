from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

# ---------- OUT MODELS ----------
class CustomerOut(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class CustomerList(BaseModel):
    items: List[CustomerOut]
    total: int

# ---------- IN MODELS ----------
class CustomerCreate(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
