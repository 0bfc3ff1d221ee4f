from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from .models import Timesheet
from .utils import normalize_filter_value

# Newest first; the id breaks ties between rows created in the same instant.
TIMESHEET_ORDERING = (Timesheet.created_at.desc(), Timesheet.id.desc())


def build_search_predicate(
    query: Optional[str] = None,
    category: Optional[str] = None,
) -> ColumnElement[bool]:
    """Combine the present criteria with AND; no criteria matches every row.

    ``query`` is a case-insensitive substring match against the name or the
    ticket reference. A NULL ticket reference never matches.
    """
    conditions: List[ColumnElement[bool]] = []

    term = normalize_filter_value(query)
    if term is not None:
        conditions.append(
            or_(
                Timesheet.name.icontains(term, autoescape=True),
                Timesheet.ticket_reference.icontains(term, autoescape=True),
            )
        )

    category_value = normalize_filter_value(category)
    if category_value is not None:
        conditions.append(Timesheet.category == category_value)

    if not conditions:
        return true()
    return and_(*conditions)
