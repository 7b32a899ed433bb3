# app/services/followups.py
"""
Follow-up board derivation.

Works on interaction rows (ORM objects or anything with the same attributes)
and a {customer_id: name} mapping. Nothing here touches the database, so the
same functions back the API route and the daily digest job.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple

from app.core.config import settings
from app.schemas.followups import DeletePrompt, FollowupBoard, FollowupCard, FollowupCounts

UNKNOWN_CUSTOMER = "Unknown Customer"
OVERDUE_BADGE = "Overdue"

EMPTY_SEARCH_MESSAGE = "No follow-ups found matching your search."
EMPTY_BOARD_MESSAGE = "No pending follow-ups. Great job staying on top of things!"

DELETE_TITLE = "Delete Follow-up"
DELETE_DESCRIPTION = "Are you sure you want to delete this follow-up"


def _due_day(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def is_pending_followup(interaction) -> bool:
    """Follow-up typed or scheduled, and not completed yet."""
    scheduled = interaction.type == settings.FOLLOWUP_TYPE or interaction.due_date is not None
    return scheduled and interaction.status != settings.DONE_STATUS


def pending_followups(interactions: Iterable) -> List:
    return [i for i in interactions if is_pending_followup(i)]


def matches_search(interaction, customer_name: Optional[str], term: str) -> bool:
    needle = (term or "").lower()
    return needle in (customer_name or "").lower() or needle in (interaction.notes or "").lower()


def split_by_due(interactions: Iterable, today: date) -> Tuple[List, List]:
    """Return (overdue, upcoming). Rows without a due date land in neither."""
    overdue, upcoming = [], []
    for it in interactions:
        due = _due_day(it.due_date)
        if due is None:
            continue
        if due < today:
            overdue.append(it)
        else:
            upcoming.append(it)
    return overdue, upcoming


def customer_display_name(customers: Dict[str, str], customer_id: str) -> str:
    return customers.get(customer_id) or UNKNOWN_CUSTOMER


def _card(interaction, customers: Dict[str, str], badge: Optional[str] = None) -> FollowupCard:
    return FollowupCard(
        id=interaction.id,
        customer_id=interaction.customer_id,
        customer_name=customer_display_name(customers, interaction.customer_id),
        type=interaction.type,
        due_date=interaction.due_date,
        status=interaction.status or settings.PENDING_STATUS,
        notes=interaction.notes or "",
        badge=badge,
        created_at=getattr(interaction, "created_at", None),
        updated_at=getattr(interaction, "updated_at", None),
    )


def build_board(
    interactions: Iterable,
    customers: Dict[str, str],
    search: str = "",
    today: Optional[date] = None,
) -> FollowupBoard:
    """
    Derive the follow-up board.

    - total_pending counts every pending follow-up, ignoring the search term
    - overdue/upcoming only hold rows matching the search
    - empty_message is set when nothing matches; the "schedule" action is
      offered only when there is no search term
    """
    today = today or date.today()
    search = search or ""

    pending = pending_followups(interactions)
    matching = [
        it for it in pending
        if matches_search(it, customers.get(it.customer_id, ""), search)
    ]
    overdue, upcoming = split_by_due(matching, today)

    empty_message = None
    if not matching:
        empty_message = EMPTY_SEARCH_MESSAGE if search else EMPTY_BOARD_MESSAGE

    return FollowupBoard(
        as_of=today,
        search=search,
        overdue=[_card(it, customers, badge=OVERDUE_BADGE) for it in overdue],
        upcoming=[_card(it, customers) for it in upcoming],
        counts=FollowupCounts(
            overdue=len(overdue),
            upcoming=len(upcoming),
            total_pending=len(pending),
            matching=len(matching),
        ),
        empty_message=empty_message,
        show_schedule_action=not matching and not search,
    )


def delete_prompt(interaction) -> DeletePrompt:
    return DeletePrompt(
        id=interaction.id,
        title=DELETE_TITLE,
        description=DELETE_DESCRIPTION,
        item_name=interaction.type,
    )
