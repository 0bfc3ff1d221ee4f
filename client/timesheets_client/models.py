"""Data models for the timesheet API client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class TimesheetEntry:
    """A timesheet record as returned by the API."""

    identifier: int
    name: str
    start_time: datetime
    end_time: datetime
    category: str
    line_item_count: int
    duration_seconds: int
    ticket_reference: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "TimesheetEntry":
        return cls(
            identifier=int(data["id"]),
            name=data["name"],
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=datetime.fromisoformat(data["end_time"]),
            category=data["category"],
            line_item_count=int(data["line_item_count"]),
            duration_seconds=int(data["duration_seconds"]),
            ticket_reference=data.get("ticket_reference"),
            created_at=_parse_optional(data.get("created_at")),
            updated_at=_parse_optional(data.get("updated_at")),
        )

    @property
    def duration_display(self) -> str:
        return format_duration(self.duration_seconds)


def _parse_optional(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def format_duration(seconds: int) -> str:
    """Render seconds as ``HH:MM:SS``; hours are not wrapped at 24."""
    sign = "-" if seconds < 0 else ""
    remaining = abs(seconds)
    hours, remaining = divmod(remaining, 3600)
    minutes, secs = divmod(remaining, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


__all__ = ["TimesheetEntry", "format_duration"]
