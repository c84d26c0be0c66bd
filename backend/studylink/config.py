from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import unquote


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    app_name: str = "StudyLink"
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./db/studylink.db")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    auth_secret: str = os.getenv("AUTH_SECRET", "studylink-dev-secret")
    auth_token_ttl_seconds: int = int(os.getenv("AUTH_TOKEN_TTL_SECONDS", str(60 * 60 * 24 * 14)))
    magic_link_ttl_seconds: int = int(os.getenv("MAGIC_LINK_TTL_SECONDS", str(60 * 15)))
    resend_api_key: str = os.getenv("RESEND_API_KEY", "")
    resend_api_url: str = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
    email_from: str = os.getenv("EMAIL_FROM", "StudyLink <noreply@studylink.space>")
    app_base_url: str = os.getenv("APP_BASE_URL", "http://localhost:3000")
    cors_origins: list[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"))
    )
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() == "true"
    default_page_size: int = 10
    max_page_size: int = 100

    def ensure_directories(self) -> None:
        self._ensure_sqlite_directory()

    def _ensure_sqlite_directory(self) -> None:
        if not self.database_url.startswith("sqlite:///"):
            return
        raw_path = self.database_url.replace("sqlite:///", "", 1)
        if not raw_path or raw_path == ":memory:":
            return
        db_path = Path(unquote(raw_path))
        if not db_path.is_absolute():
            db_path = Path(".") / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
