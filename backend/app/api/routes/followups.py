# app/api/routes/followups.py
import logging
from datetime import date
from typing import Optional

from dateutil import parser as dateparse
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.crud.customers import customer_names
from app.crud.interactions import get_interaction, list_interactions
from app.schemas.followups import DeletePrompt, FollowupBoard
from app.services.followups import build_board, delete_prompt

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/followups", tags=["followups"])


def _as_of(value: Optional[str]) -> Optional[date]:
    if not value or not value.strip():
        return None
    try:
        return dateparse.isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        raise HTTPException(status_code=400, detail=f"Invalid as_of date: {value}")


# GET /api/followups
@router.get("", response_model=FollowupBoard)
def followups_board(
    search: str = Query("", alias="search"),
    as_of: Optional[str] = Query(None, alias="as_of"),  # defaults to today
    db: Session = Depends(get_db),
):
    board = build_board(
        list_interactions(db),
        customer_names(db),
        search=search,
        today=_as_of(as_of),
    )
    logger.debug(
        "[followups] board as_of=%s search=%r overdue=%d upcoming=%d pending=%d",
        board.as_of, search, board.counts.overdue, board.counts.upcoming, board.counts.total_pending,
    )
    return board


# GET /api/followups/{id}/delete-prompt
@router.get("/{id}/delete-prompt", response_model=DeletePrompt)
def followup_delete_prompt(id: str, db: Session = Depends(get_db)):
    obj = get_interaction(db, id)
    if not obj:
        raise HTTPException(status_code=404, detail="Interaction not found")
    return delete_prompt(obj)
