import logging
from typing import Any

import structlog

from blogboard.config import settings


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Route structlog through stdlib logging for the whole process.

    ``level`` and ``json_logs`` default to ``settings.log_level`` and
    ``settings.log_json``. Every event carries ``app_name`` and ``environment``.
    Loggers are not cached, so calling this again also reconfigures loggers
    that modules created at import time.
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    use_json = settings.log_json if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", level=log_level)
    logging.getLogger().setLevel(log_level)

    renderer: Any = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(app_name=settings.app_name, environment=settings.environment)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
