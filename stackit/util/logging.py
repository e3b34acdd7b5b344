"""Standard library logging setup.

Application code logs through logfire. Third-party libraries (uvicorn,
SQLAlchemy, alembic) use the logging module; their records are forwarded to
logfire so both end up in the same traces.
"""

import logging

import logfire

from stackit.config import Settings

_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "websockets", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire.

    Must run after configure_logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("stackit").setLevel(level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
