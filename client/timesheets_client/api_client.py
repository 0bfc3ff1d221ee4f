"""HTTP client for the timesheet API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from urllib.parse import urljoin

import requests

from .config import ClientConfig
from .models import TimesheetEntry


class ApiError(RuntimeError):
    """Error while talking to the API."""

    def __init__(self, message: str, *, response: Optional[requests.Response] = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


def _encode(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class ApiClient:
    """Wraps the HTTP calls of the timesheet API."""

    def __init__(self, base_url: str, timeout: int = 15) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ApiClient":
        return cls(config.api_base_url, timeout=config.timeout_seconds)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs):
        url = urljoin(self.base_url, path.lstrip("/"))
        kwargs.setdefault("timeout", self.timeout)
        headers = kwargs.setdefault("headers", {})
        headers.setdefault("Accept", "application/json")
        try:
            response = requests.request(method, url, **kwargs)
        except requests.RequestException as exc:  # pragma: no cover - network errors
            raise ApiError(str(exc)) from exc

        if response.status_code >= 400:
            raise ApiError(f"API error {response.status_code}: {response.text}", response=response)

        if response.headers.get("Content-Type", "").startswith("application/json"):
            return response.json()
        return response.content

    def _request_or_none(self, method: str, path: str, **kwargs):
        try:
            return self._request(method, path, **kwargs)
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def healthcheck(self) -> dict[str, Any]:
        return self._request("GET", "/healthz")

    def list_categories(self) -> list[str]:
        return list(self._request("GET", "/categories") or [])

    # ------------------------------------------------------------------
    # Timesheets
    # ------------------------------------------------------------------
    def create_timesheet(
        self,
        *,
        name: str,
        start_time: datetime,
        end_time: datetime,
        category: str,
        line_item_count: int,
        ticket_reference: Optional[str] = None,
    ) -> TimesheetEntry:
        payload = {
            "name": name,
            "start_time": _encode(start_time),
            "end_time": _encode(end_time),
            "category": category,
            "ticket_reference": ticket_reference,
            "line_item_count": line_item_count,
        }
        data = self._request("POST", "/timesheets", json=payload)
        return TimesheetEntry.from_payload(data)

    def list_timesheets(self, query: Optional[str] = None, category: Optional[str] = None) -> list[TimesheetEntry]:
        params = {key: value for key, value in {"query": query, "category": category}.items() if value}
        data = self._request("GET", "/timesheets", params=params) or []
        return [TimesheetEntry.from_payload(item) for item in data]

    def get_timesheet(self, timesheet_id: int) -> Optional[TimesheetEntry]:
        data = self._request_or_none("GET", f"/timesheets/{timesheet_id}")
        return TimesheetEntry.from_payload(data) if data else None

    def update_timesheet(self, timesheet_id: int, **changes: Any) -> Optional[TimesheetEntry]:
        """Send only the given fields; ``ticket_reference=None`` clears it."""
        payload = {field: _encode(value) for field, value in changes.items()}
        data = self._request_or_none("PATCH", f"/timesheets/{timesheet_id}", json=payload)
        return TimesheetEntry.from_payload(data) if data else None

    def delete_timesheet(self, timesheet_id: int) -> bool:
        data = self._request("DELETE", f"/timesheets/{timesheet_id}") or {}
        return bool(data.get("deleted"))


__all__ = ["ApiClient", "ApiError"]
