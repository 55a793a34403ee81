#!/usr/bin/env python3
"""Start the ratings API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from ratings.config import Settings
from ratings.util.logging import setup_logging
from ratings.util.observability import configure_logfire


def main() -> int:
    """Start the API server and log any startup errors to Logfire."""
    settings = Settings()

    # Before the app import so startup failures are captured
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting ratings API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "ratings.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Ratings API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
