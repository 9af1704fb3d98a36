"""
Logging Configuration

structlog on top of the stdlib logging module, configured once on import.

Output:
=======
Development (APP_ENV=development):
    2024-01-15T10:30:00Z [info     ] Cluster created   [portico.store] cluster_id=5 name=Sales

Everything else, one JSON object per line:
    {"event": "Cluster created", "cluster_id": 5, "level": "info", "logger": "portico.store", ...}

Request handlers get ``request_method`` and ``request_path`` bound for the
duration of each request (see portico.api.main), so every event logged
while serving it carries them.

Noisy libraries (httpx request lines, uvicorn access log) are held at
WARNING unless LOG_LEVEL is DEBUG.

Usage:
======
    from portico.shared.core.logging import get_logger, log_context

    logger = get_logger("portico.graph.simulation")
    logger.debug("Simulation stopped", ticks=301, alpha=0.00099)

    log_context(request_path="/api/network")
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from portico.config.settings import settings


QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL
        json_output: Force JSON (True) or console (False) rendering;
            defaults to console in development only
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if json_output is None:
        json_output = not settings.is_development

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    library_level = numeric_level if numeric_level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Named structlog logger; module loggers use dotted ``portico.*`` names."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/values to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("portico")
