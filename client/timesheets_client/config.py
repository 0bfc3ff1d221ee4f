"""Configuration helpers for the timesheet API client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 15


@dataclass(slots=True)
class ClientConfig:
    """Connection settings for the API client."""

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT


def load_config(env_path: Optional[Path] = None) -> ClientConfig:
    """Load settings from the environment, after an optional `.env` file."""

    env_path = env_path or Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return ClientConfig(
        api_base_url=os.getenv("TIMESHEETS_API_BASE_URL", DEFAULT_API_BASE_URL),
        timeout_seconds=int(os.getenv("TIMESHEETS_API_TIMEOUT", DEFAULT_TIMEOUT)),
    )


__all__ = ["ClientConfig", "load_config"]
