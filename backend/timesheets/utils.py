from __future__ import annotations

import datetime as dt
from typing import Any, Optional
from zoneinfo import ZoneInfo

from .config import settings

UTC = dt.timezone.utc
LOCAL_TZ = ZoneInfo(settings.timezone)


def ensure_utc(value: dt.datetime) -> dt.datetime:
    """Interpret naive values in the configured local timezone and convert to UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=LOCAL_TZ)
    return value.astimezone(UTC)


def normalize_filter_value(value: Any) -> Optional[str]:
    """Return the filter text, or None when the filter should be ignored."""
    if value is None:
        return None
    text = str(value)
    return text or None
