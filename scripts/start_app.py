#!/usr/bin/env python3
"""Start the StackIt API with Logfire tracking of startup errors."""

import sys

import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting StackIt API", host=settings.host, port=settings.port)

        # Single worker: the notification broker keeps subscriptions in memory
        uvicorn.run(
            "stackit.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            workers=1,
            log_config=None,  # keep the logging setup above
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
