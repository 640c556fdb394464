"""Structured logging using structlog.

The package only emits events; it never configures logging on import.
Applications that want the bundled setup call ``configure_logging()`` once:
JSON output by default, pretty console output when debugging.

Usage:
    from steam_review_api.observ import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.warning("record_decode_failed", record="Review", field="language")
"""

import sys
import logging
from typing import Optional

import structlog

from steam_review_api.config import Settings, get_settings


# ═════════════════════════════════════════════════════════════════════════════
# Structlog Configuration
# ═════════════════════════════════════════════════════════════════════════════

def build_processors(settings: Settings) -> list:
    """Processor chain for the given settings."""
    is_dev = settings.debug or settings.log_level == "DEBUG"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if is_dev:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True)
        ])
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ])

    return processors


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure stdlib logging and structlog for an application.

    Raises:
        pydantic.ValidationError: If the environment holds invalid settings.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level)
    )

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a structured logger for the given module.

    Uses whatever structlog configuration is active when it first logs.

    Args:
        name: Module name (typically __name__)
    """
    return structlog.get_logger(name)
