from __future__ import annotations

from timesheets import __main__ as entrypoint
from timesheets.config import settings


def test_main_runs_uvicorn_with_settings(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(settings, "host", "0.0.0.0")
    monkeypatch.setattr(settings, "port", 9123)
    monkeypatch.setattr(settings, "log_level", "WARNING")

    entrypoint.main()

    assert calls == [
        (
            "timesheets.main:app",
            {"host": "0.0.0.0", "port": 9123, "log_level": "warning", "log_config": None},
        )
    ]
