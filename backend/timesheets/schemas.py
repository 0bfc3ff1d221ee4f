from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_serializer


def _serialize_datetime(value: dt.datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    else:
        value = value.astimezone(dt.timezone.utc)
    return value.isoformat()


class TimesheetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    start_time: dt.datetime
    end_time: dt.datetime
    category: str
    ticket_reference: Optional[str]
    line_item_count: int
    duration_seconds: int
    created_at: dt.datetime
    updated_at: dt.datetime

    @model_serializer(mode="plain", when_used="json")
    def _serialize(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_time": _serialize_datetime(self.start_time),
            "end_time": _serialize_datetime(self.end_time),
            "category": self.category,
            "ticket_reference": self.ticket_reference,
            "line_item_count": self.line_item_count,
            "duration_seconds": self.duration_seconds,
            "created_at": _serialize_datetime(self.created_at),
            "updated_at": _serialize_datetime(self.updated_at),
        }


# Category is checked by the validation module so HTTP and direct callers get
# the same error messages.
class TimesheetCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    start_time: dt.datetime
    end_time: dt.datetime
    category: str
    ticket_reference: Optional[str] = None
    line_item_count: int


class TimesheetUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: Optional[str] = None
    start_time: Optional[dt.datetime] = None
    end_time: Optional[dt.datetime] = None
    category: Optional[str] = None
    ticket_reference: Optional[str] = None
    line_item_count: Optional[int] = None


class TimesheetDeleteResponse(BaseModel):
    deleted: bool


class HealthResponse(BaseModel):
    status: str
    timestamp: dt.datetime

    @model_serializer(mode="plain", when_used="json")
    def _serialize(self) -> dict[str, Any]:
        return {"status": self.status, "timestamp": _serialize_datetime(self.timestamp)}
