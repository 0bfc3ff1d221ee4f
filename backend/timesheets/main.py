from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import models
from .config import settings
from .database import create_tables, get_db
from .logging_config import configure_logging
from .schemas import (
    HealthResponse,
    TimesheetCreateRequest,
    TimesheetDeleteResponse,
    TimesheetResponse,
    TimesheetUpdateRequest,
)
from .services import (
    create_timesheet,
    delete_timesheet,
    get_timesheet,
    list_timesheets,
    update_timesheet,
)
from .validation import ValidationError

configure_logging(level=settings.log_level, json_logs=settings.log_json)

create_tables()

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    location = "query" if request.method == "GET" else "body"
    detail = [
        {"loc": [location, error["field"]], "msg": error["message"], "type": "value_error"}
        for error in exc.errors
    ]
    return JSONResponse({"detail": detail}, status_code=422)


@app.get("/healthz", response_model=HealthResponse)
def healthz() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=models.utcnow())


@app.get("/categories", response_model=list[str])
def categories() -> list[str]:
    return list(models.TIMESHEET_CATEGORIES)


@app.post("/timesheets", response_model=TimesheetResponse, status_code=status.HTTP_201_CREATED)
def create_timesheet_entry(payload: TimesheetCreateRequest, db: Session = Depends(get_db)) -> TimesheetResponse:
    return create_timesheet(db, payload.model_dump())


@app.get("/timesheets", response_model=list[TimesheetResponse])
def list_timesheet_entries(
    query: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
) -> list[TimesheetResponse]:
    return list_timesheets(db, query=query, category=category)


@app.get("/timesheets/{timesheet_id}", response_model=TimesheetResponse)
def get_timesheet_entry(timesheet_id: int, db: Session = Depends(get_db)) -> TimesheetResponse:
    record = get_timesheet(db, timesheet_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Timesheet not found")
    return record


@app.patch("/timesheets/{timesheet_id}", response_model=TimesheetResponse)
def update_timesheet_entry(
    timesheet_id: int,
    payload: TimesheetUpdateRequest,
    db: Session = Depends(get_db),
) -> TimesheetResponse:
    changes = payload.model_dump(exclude_unset=True)
    record = update_timesheet(db, timesheet_id, changes)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Timesheet not found")
    return record


@app.delete("/timesheets/{timesheet_id}", response_model=TimesheetDeleteResponse)
def delete_timesheet_entry(timesheet_id: int, db: Session = Depends(get_db)) -> TimesheetDeleteResponse:
    return TimesheetDeleteResponse(deleted=delete_timesheet(db, timesheet_id))
