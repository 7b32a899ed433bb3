# backend/app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- Core ----
    PROJECT_NAME: str = "Follow-ups API"
    ENV: str = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ---- Database / CORS ----
    # Use a SYNC url (e.g. sqlite:///./app.db or postgresql+psycopg2://...)
    DATABASE_URL: str = "sqlite:///./app.db"
    # Comma-separated allowed origins
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ---- Follow-ups ----
    FOLLOWUP_TYPE: str = "followup"
    PENDING_STATUS: str = "pending"
    DONE_STATUS: str = "done"

    # Daily overdue digest (APScheduler)
    FOLLOWUP_DIGEST_ENABLED: bool = True
    FOLLOWUP_DIGEST_UTC_HOUR: int = 7
    FOLLOWUP_DIGEST_UTC_MINUTE: int = 0

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",         # ignore unknown env vars
    )

    # Convenience: parse CORS list
    @property
    def cors_origins_list(self) -> list[str]:
        cleaned = []
        for v in self.CORS_ORIGINS.replace("\n", ",").split(","):
            v = v.strip().rstrip("/")
            if v and v not in cleaned:
                cleaned.append(v)
        return cleaned


@lru_cache
def get_settings() -> Settings:
    return Settings()


# singleton (import this everywhere)
settings = get_settings()
