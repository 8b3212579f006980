#!/usr/bin/env python3
"""Run the comment API under uvicorn.

Logfire is configured here, before the app module is imported, so import
time failures are reported too.
"""

import sys

import logfire
import uvicorn

from commentary.config import Settings
from commentary.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Starting comment API",
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "commentary.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            reload=settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comment API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
