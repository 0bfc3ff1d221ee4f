from __future__ import annotations

import uvicorn

from .config import settings

APP_PATH = "timesheets.main:app"


def main() -> None:
    """Serve the API with the configured bind address and log level."""
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
