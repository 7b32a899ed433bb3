import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes.customers import router as customers_router
from app.api.routes.followups import router as followups_router
from app.api.routes.health import router as health_router
from app.api.routes.interactions import router as interactions_router

from app.core.config import settings
from app.db.base import create_all
from app.db.session import engine
from app.scheduler import init_scheduler

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title=settings.PROJECT_NAME, version="1.0", debug=settings.DEBUG)

allowed_origins = settings.cors_origins_list or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["health"])
app.include_router(customers_router, prefix="/api", tags=["customers"])
app.include_router(interactions_router, prefix="/api", tags=["interactions"])
app.include_router(followups_router, prefix="/api", tags=["followups"])

init_scheduler(app)

@app.on_event("startup")
def _startup_db() -> None:
    create_all(engine)
    if settings.DATABASE_URL.startswith("sqlite:///"):
        logger.info("[DB] Using: %s", Path(settings.DATABASE_URL.replace("sqlite:///", "")).resolve())
    logger.info("[CORS] allow_origins = %s", allowed_origins)
