from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from .duration import compute_duration_seconds
from .models import Timesheet
from .queries import build_search_predicate
from .store import TimesheetStore
from .utils import UTC, ensure_utc, normalize_filter_value
from .validation import validate_category_filter, validate_create, validate_update

logger = logging.getLogger(__name__)


def _now() -> dt.datetime:
    return dt.datetime.now(UTC)


def create_timesheet(db: Session, payload: Mapping[str, Any]) -> Timesheet:
    validate_create(payload)
    start_time = ensure_utc(payload["start_time"])
    end_time = ensure_utc(payload["end_time"])
    now = _now()
    record = TimesheetStore(db).insert(
        {
            "name": payload["name"],
            "start_time": start_time,
            "end_time": end_time,
            "category": payload["category"],
            "ticket_reference": payload.get("ticket_reference"),
            "line_item_count": payload["line_item_count"],
            "duration_seconds": compute_duration_seconds(start_time, end_time),
            "created_at": now,
            "updated_at": now,
        }
    )
    logger.info("Created timesheet %s", record.id, extra={"timesheet_id": record.id})
    return record


def get_timesheet(db: Session, timesheet_id: int) -> Optional[Timesheet]:
    return TimesheetStore(db).select_by_id(timesheet_id)


def list_timesheets(
    db: Session,
    query: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Timesheet]:
    category = normalize_filter_value(category)
    validate_category_filter(category)
    predicate = build_search_predicate(query=query, category=category)
    return TimesheetStore(db).select_where(predicate)


def update_timesheet(
    db: Session,
    timesheet_id: int,
    changes: Mapping[str, Any],
) -> Optional[Timesheet]:
    """Apply a partial update.

    Only keys present in ``changes`` are written, so ``{"ticket_reference":
    None}`` clears the reference while omitting the key keeps it. The
    duration is recomputed whenever either end of the window is supplied,
    using the stored value for the end that was not.
    """
    validate_update(changes)
    store = TimesheetStore(db)
    existing = store.select_by_id(timesheet_id)
    if existing is None:
        return None

    fields: Dict[str, Any] = dict(changes)
    if "start_time" in fields:
        fields["start_time"] = ensure_utc(fields["start_time"])
    if "end_time" in fields:
        fields["end_time"] = ensure_utc(fields["end_time"])

    if "start_time" in fields or "end_time" in fields:
        start_time = fields.get("start_time", existing.start_time)
        end_time = fields.get("end_time", existing.end_time)
        fields["duration_seconds"] = compute_duration_seconds(start_time, end_time)

    fields["updated_at"] = _now()
    record = store.update_by_id(timesheet_id, fields)
    if record is not None:
        logger.info(
            "Updated timesheet %s (%s)",
            timesheet_id,
            ", ".join(sorted(changes)) or "no fields",
            extra={"timesheet_id": timesheet_id},
        )
    return record


def delete_timesheet(db: Session, timesheet_id: int) -> bool:
    deleted = TimesheetStore(db).delete_by_id(timesheet_id) > 0
    if deleted:
        logger.info("Deleted timesheet %s", timesheet_id, extra={"timesheet_id": timesheet_id})
    return deleted
