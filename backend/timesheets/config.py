from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)
    """Application runtime configuration."""

    app_name: str = "Timesheets"
    host: str = os.getenv("TS_HOST", "127.0.0.1")
    port: int = int(os.getenv("TS_PORT", "8080"))
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("TS_CORS_ORIGINS", "http://127.0.0.1:5173,http://localhost:5173").split(",")
            if origin.strip()
        ]
    )

    database_url: Optional[str] = os.getenv("TS_DATABASE_URL")
    sqlite_path: Path = Path(os.getenv("TS_SQLITE_PATH", "./data/timesheets.db"))

    timezone: str = os.getenv("TZ", "UTC")

    log_level: str = os.getenv("TS_LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("TS_LOG_JSON", "false").lower() == "true"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, list):
            return value
        if not value:
            return []
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @computed_field
    def resolved_database_url(self) -> str:
        if not self.database_url:
            return f"sqlite:///{self.sqlite_path}"
        # Hosted Postgres providers hand out postgres:// which SQLAlchemy rejects
        if self.database_url.startswith("postgres://"):
            return self.database_url.replace("postgres://", "postgresql://", 1)
        return self.database_url

    @property
    def uses_sqlite(self) -> bool:
        return self.resolved_database_url.startswith("sqlite")


settings = Settings()

if not settings.database_url:
    settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
