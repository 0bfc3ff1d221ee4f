from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

UTC = dt.timezone.utc


def utcnow() -> dt.datetime:
    return dt.datetime.now(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware timestamp that always loads as UTC.

    SQLite drops the offset on write, so values are converted to UTC before
    binding and tagged with UTC again when read back.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[dt.datetime], dialect: Any) -> Optional[dt.datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: Optional[dt.datetime], dialect: Any) -> Optional[dt.datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


TIMESHEET_CATEGORIES = (
    "Ticket",
    "Coordination & other supporting activities",
    "Meeting",
    "Adhoc/project",
    "Development & Testing",
    "Other",
)


class Timesheet(Base):
    __tablename__ = "timesheets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    start_time = Column(UTCDateTime(), nullable=False)
    end_time = Column(UTCDateTime(), nullable=False)
    category = Column(String(64), nullable=False, index=True)
    ticket_reference = Column(Text, nullable=True)
    line_item_count = Column(Integer, nullable=False)
    duration_seconds = Column(Integer, nullable=False)  # derived from start_time/end_time
    created_at = Column(UTCDateTime(), default=utcnow, nullable=False, index=True)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)
