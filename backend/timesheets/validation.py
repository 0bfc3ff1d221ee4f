"""Field-level checks for timesheet create and update payloads."""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Mapping, Optional

from .models import TIMESHEET_CATEGORIES

EDITABLE_FIELDS = (
    "name",
    "start_time",
    "end_time",
    "category",
    "ticket_reference",
    "line_item_count",
)

REQUIRED_ON_CREATE = (
    "name",
    "start_time",
    "end_time",
    "category",
    "line_item_count",
)


class ValidationError(ValueError):
    """Raised when a payload violates a field constraint."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        message = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
        super().__init__(message)


def _check_field(field: str, value: Any) -> Optional[str]:
    if field == "name":
        if not isinstance(value, str) or not value:
            return "Name is required"
    elif field in {"start_time", "end_time"}:
        if not isinstance(value, dt.datetime):
            return "Must be a timestamp"
    elif field == "category":
        if value not in TIMESHEET_CATEGORIES:
            return f"Category must be one of: {', '.join(TIMESHEET_CATEGORIES)}"
    elif field == "ticket_reference":
        if value is not None and not isinstance(value, str):
            return "Ticket reference must be text or null"
    elif field == "line_item_count":
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return "Line item count must be a positive integer"
    return None


def _collect_errors(payload: Mapping[str, Any]) -> List[Dict[str, str]]:
    errors: List[Dict[str, str]] = []
    for field, value in payload.items():
        if field not in EDITABLE_FIELDS:
            errors.append({"field": field, "message": "Field cannot be set"})
            continue
        message = _check_field(field, value)
        if message:
            errors.append({"field": field, "message": message})
    return errors


def validate_create(payload: Mapping[str, Any]) -> None:
    errors = [
        {"field": field, "message": "Field is required"}
        for field in REQUIRED_ON_CREATE
        if field not in payload
    ]
    errors.extend(_collect_errors(payload))
    if errors:
        raise ValidationError(errors)


def validate_update(changes: Mapping[str, Any]) -> None:
    """Check only the fields present in ``changes``.

    ``ticket_reference`` may be ``None`` to clear it; every other field
    rejects ``None`` because none of them is nullable.
    """
    errors = _collect_errors(changes)
    if errors:
        raise ValidationError(errors)


def validate_category_filter(category: Optional[str]) -> None:
    if category is None:
        return
    message = _check_field("category", category)
    if message:
        raise ValidationError([{"field": "category", "message": message}])
