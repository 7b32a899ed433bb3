# backend/app/scheduler.py
import logging
from datetime import date
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI

from app.core.config import settings
from app.crud.customers import customer_names
from app.crud.interactions import list_interactions
from app.db.session import SessionLocal
from app.services.followups import build_board

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler(timezone="UTC")


def overdue_digest_job(today: Optional[date] = None) -> dict:
    """
    Daily digest of the follow-up board.
    Logs overdue items by customer so they show up in the service logs.
    """
    with SessionLocal() as db:
        board = build_board(list_interactions(db), customer_names(db), today=today)

    for card in board.overdue:
        logger.warning(
            "[followups] overdue id=%s customer=%s due=%s",
            card.id, card.customer_name, card.due_date.date() if card.due_date else None,
        )
    res = {
        "as_of": board.as_of.isoformat(),
        "overdue": board.counts.overdue,
        "upcoming": board.counts.upcoming,
        "total_pending": board.counts.total_pending,
    }
    logger.info("[followups] digest: %s", res)
    return res


def init_scheduler(app: FastAPI) -> None:
    """Attach scheduler start/stop to FastAPI lifecycle."""
    @app.on_event("startup")
    def _start_scheduler():
        if not settings.FOLLOWUP_DIGEST_ENABLED:
            logger.info("[followups] digest disabled by env")
            return
        # coalesce to run once if missed, and avoid overlap
        scheduler.add_job(
            overdue_digest_job,
            "cron",
            hour=settings.FOLLOWUP_DIGEST_UTC_HOUR,
            minute=settings.FOLLOWUP_DIGEST_UTC_MINUTE,
            id="followup_digest",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        try:
            scheduler.start()
        except Exception:
            # If scheduler cannot start, keep the API running
            logger.exception("[followups] scheduler failed to start")

    @app.on_event("shutdown")
    def _stop_scheduler():
        if not scheduler.running:
            return
        try:
            scheduler.shutdown(wait=False)
        except Exception:
            logger.exception("[followups] scheduler failed to stop")
