"""Logging configuration shared by the CLI and the API server."""

import logging.config

from jeopardy.config import settings

# Development format: cleaner
DEV_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

# Production format: full details for debugging
PROD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Held at WARNING: client libraries log every request, and uvicorn's access
# log repeats what RequestIDMiddleware already records
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def get_log_config(level: str | None = None) -> dict:
    """Build a dictConfig for the whole process.

    uvicorn's loggers get no handlers of their own and propagate to the root
    handler, so server and game messages share one format. Pass the result to
    ``uvicorn.run(log_config=...)`` so reload workers are configured the same way.

    Args:
        level: Override for the configured log level (e.g. "DEBUG" from --verbose)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEV_FORMAT if settings.is_development else PROD_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {
            "handlers": ["default"],
            "level": level or settings.log_level,
        },
    }


def setup_logging(level: str | None = None) -> None:
    """Configure logging for the application."""
    logging.config.dictConfig(get_log_config(level))
