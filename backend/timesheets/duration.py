from __future__ import annotations

import datetime as dt

_ONE_SECOND = dt.timedelta(seconds=1)


def compute_duration_seconds(start: dt.datetime, end: dt.datetime) -> int:
    """Whole seconds from ``start`` to ``end``, floored.

    End before start yields a negative value; nothing is clamped.
    """
    return (end - start) // _ONE_SECOND
