from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from .models import Timesheet
from .queries import TIMESHEET_ORDERING

logger = logging.getLogger(__name__)


class TimesheetStore:
    """Persistence boundary for timesheet rows.

    Every write commits on its own. A failed write is rolled back, logged and
    re-raised as the original SQLAlchemy error.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _write(self, action: str) -> Generator[None, None, None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Timesheet %s failed", action)
            raise

    def insert(self, values: Dict[str, Any]) -> Timesheet:
        record = Timesheet(**values)
        with self._write("insert"):
            self.db.add(record)
        self.db.refresh(record)
        return record

    def select_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        return self.db.get(Timesheet, timesheet_id)

    def select_where(
        self,
        predicate: ColumnElement[bool],
        order_by: Sequence[Any] = TIMESHEET_ORDERING,
    ) -> List[Timesheet]:
        return self.db.query(Timesheet).filter(predicate).order_by(*order_by).all()

    def update_by_id(self, timesheet_id: int, fields: Dict[str, Any]) -> Optional[Timesheet]:
        record = self.db.get(Timesheet, timesheet_id)
        if record is None:
            return None
        with self._write("update"):
            for field, value in fields.items():
                setattr(record, field, value)
            self.db.add(record)
        self.db.refresh(record)
        return record

    def delete_by_id(self, timesheet_id: int) -> int:
        with self._write("delete"):
            deleted = (
                self.db.query(Timesheet)
                .filter(Timesheet.id == timesheet_id)
                .delete(synchronize_session="fetch")
            )
        return deleted
