"""Structlog configuration for lexicon.

Engine modules log loading and lifecycle events only; translate() failures
are raised, never logged. Output is console-rendered in development, JSON
in production and suppressed under pytest.
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from lexicon.configuration import settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Args:
        log_level: Level name override (default: settings.LOG_LEVEL).
        is_production: JSON output override (default: settings.is_production).

    Returns:
        Configured logger instance
    """
    if is_production is None:
        is_production = settings.is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if _is_test_environment():
        level = logging.CRITICAL + 1
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In lexicon/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "lexicon.i18n.loader"}
    """
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame and frame.f_back else None
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.split(".")[-1],
        module_path=module.__name__,
    )
