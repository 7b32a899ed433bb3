# app/api/routes/interactions.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.crud.customers import get_customer
from app.crud.interactions import (
    create_interaction,
    delete_interaction,
    get_interaction,
    list_interactions,
    mark_completed,
    update_interaction,
)
from app.models.interaction import Interaction
from app.schemas.interactions import (
    InteractionCreate,
    InteractionDeleted,
    InteractionList,
    InteractionOut,
    InteractionUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/interactions", tags=["interactions"])


def _get_or_404(db: Session, id: str) -> Interaction:
    obj = get_interaction(db, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Interaction not found")
    return obj


def _require_customer(db: Session, customer_id: Optional[str]) -> None:
    if not get_customer(db, customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")


# GET /api/interactions
@router.get("", response_model=InteractionList)
def interactions_list(customer_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    items = list_interactions(db, customer_id=customer_id)
    return {"items": items, "total": len(items)}


# GET /api/interactions/{id} (edit form initial data)
@router.get("/{id}", response_model=InteractionOut)
def interaction_detail(id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, id)


# POST /api/interactions
@router.post("", response_model=InteractionOut, status_code=status.HTTP_201_CREATED)
def interaction_create(payload: InteractionCreate, db: Session = Depends(get_db)):
    values = payload.model_dump()
    values["type"] = (values.get("type") or "").strip()
    if not values["type"]:
        raise HTTPException(status_code=400, detail="type is required")
    values["status"] = (values.get("status") or "").strip()
    if not values["status"]:
        raise HTTPException(status_code=400, detail="status is required")
    _require_customer(db, values["customer_id"])

    obj = create_interaction(db, values)
    logger.info("[interactions] created id=%s type=%s customer=%s", obj.id, obj.type, obj.customer_id)
    return obj


# PATCH /api/interactions/{id}
@router.patch("/{id}", response_model=InteractionOut)
def interaction_update(id: str, payload: InteractionUpdate, db: Session = Depends(get_db)):
    obj = _get_or_404(db, id)
    values = payload.model_dump(exclude_unset=True)

    for field in ("type", "status"):
        if values.get(field) is not None:
            values[field] = values[field].strip()
            if not values[field]:
                raise HTTPException(status_code=400, detail=f"{field} cannot be blank")
    if values.get("customer_id") is not None:
        _require_customer(db, values["customer_id"])

    obj = update_interaction(db, obj, values)
    logger.info("[interactions] updated id=%s fields=%s", obj.id, sorted(values))
    return obj


# POST /api/interactions/{id}/complete
@router.post("/{id}/complete", response_model=InteractionOut)
def interaction_complete(id: str, db: Session = Depends(get_db)):
    obj = mark_completed(db, _get_or_404(db, id))
    logger.info("[interactions] completed id=%s", obj.id)
    return obj


# DELETE /api/interactions/{id}
@router.delete("/{id}", response_model=InteractionDeleted)
def interaction_delete(id: str, db: Session = Depends(get_db)):
    obj = _get_or_404(db, id)
    delete_interaction(db, obj)
    logger.info("[interactions] deleted id=%s", id)
    return {"ok": True, "id": id, "deleted": True}
