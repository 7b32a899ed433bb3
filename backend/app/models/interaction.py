# app/models/interaction.py
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.sql import func
import uuid

from app.core.config import settings
from app.models.base import Base

def _uuid() -> str:
    return str(uuid.uuid4())

class Interaction(Base):
    __tablename__ = "interactions"

    id = Column(String, primary_key=True, default=_uuid)
    customer_id = Column(String, ForeignKey("customers.id"), index=True, nullable=False)
    type = Column(String, nullable=False)  # e.g., 'call', 'email', 'meeting', 'followup'
    due_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String, nullable=False, default=settings.PENDING_STATUS)  # DONE_STATUS once completed
    notes = Column(Text, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=True)
