from __future__ import annotations

from typing import Any, Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .config import settings


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def register_sqlite_functions(target: Engine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` so case-insensitive search folds all letters."""

    @event.listens_for(target, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


DATABASE_URL = settings.resolved_database_url

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if settings.uses_sqlite else {},
    future=True,
)
if settings.uses_sqlite:
    register_sqlite_functions(engine)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create missing tables; existing tables and rows are left alone."""
    from . import models

    models.Base.metadata.create_all(bind=engine)
