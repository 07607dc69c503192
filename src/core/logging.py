"""Logging for the carousel server and its clients.

Everything in ``src`` logs through structlog: snake_case event names with
keyword fields, e.g. ``logger.info("catalog_initialized", blocks=3)``.
``server_main`` calls ``configure_logging`` once before uvicorn starts;
library code only ever calls ``get_logger``.

Output format follows ENVIRONMENT. Anything other than ``production``
gets coloured console lines, production gets one JSON object per line so
the server log can be shipped as is.
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor

# Loggers that are too chatty at INFO for a small static server
QUIET_LOGGERS = ("uvicorn.access", "aiohttp", "httpx", "httpcore")


def is_development() -> bool:
    """Return True unless ENVIRONMENT is set to production."""
    return getenv("ENVIRONMENT", "development").lower() != "production"


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name (or LOG_LEVEL) to a stdlib level, INFO if unknown."""
    if name is None:
        name = getenv("LOG_LEVEL", "INFO")
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(development: bool) -> list[Processor]:
    """Processor chain ending in the console or JSON renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Route structlog through stdlib logging on stdout.

    Both arguments fall back to the environment: ``development`` to
    ``is_development()`` and ``log_level`` to LOG_LEVEL. Safe to call more
    than once; the last call wins.
    """
    if development is None:
        development = is_development()
    level = resolve_log_level(log_level)

    structlog.configure(
        processors=build_processors(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module; pass ``__name__``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Attach fields (e.g. ``request_id``) to every later log line in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()
