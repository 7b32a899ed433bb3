# app/crud/interactions.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.interaction import Interaction

UPDATABLE = {"customer_id", "type", "due_date", "status", "notes"}

def _now() -> datetime:
    return datetime.utcnow()

def get_interaction(db: Session, interaction_id: str) -> Optional[Interaction]:
    if not interaction_id:
        return None
    return db.get(Interaction, interaction_id)

def list_interactions(db: Session, *, customer_id: Optional[str] = None) -> List[Interaction]:
    """Newest first."""
    stmt = select(Interaction)
    if customer_id:
        stmt = stmt.where(Interaction.customer_id == customer_id)
    return db.execute(stmt.order_by(desc(Interaction.created_at), Interaction.id)).scalars().all()

def create_interaction(db: Session, values: Dict[str, Any]) -> Interaction:
    now = _now()
    obj = Interaction(
        customer_id=values["customer_id"],
        type=values.get("type") or settings.FOLLOWUP_TYPE,
        due_date=values.get("due_date"),
        status=values.get("status") or settings.PENDING_STATUS,
        notes=values.get("notes") or "",
        created_at=now,
        updated_at=now,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj

def update_interaction(db: Session, obj: Interaction, values: Dict[str, Any]) -> Interaction:
    for k, v in values.items():
        if k not in UPDATABLE:
            continue
        if k == "notes":
            v = v or ""
        elif v is None and k != "due_date":
            continue  # required columns; only due_date can be cleared
        setattr(obj, k, v)
    obj.updated_at = _now()
    db.commit()
    db.refresh(obj)
    return obj

def mark_completed(db: Session, obj: Interaction) -> Interaction:
    obj.status = settings.DONE_STATUS
    obj.updated_at = _now()
    db.commit()
    db.refresh(obj)
    return obj

def delete_interaction(db: Session, obj: Interaction) -> None:
    db.delete(obj)
    db.commit()
