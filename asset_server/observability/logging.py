from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


_CONFIGURED = False

# Loggers owned by the server process rather than by this package.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _parse_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(level.strip().upper())
    return parsed if isinstance(parsed, int) else logging.INFO


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(level: int | str = logging.INFO, log_format: str = "json") -> None:
    """Route structlog and stdlib records (uvicorn included) through one stdout handler.

    `log_format` is "json" for container log collectors or "console" for a
    terminal. Only the first call has any effect.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = _parse_level(level)

    pre_chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(log_format),
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    for name in _SERVER_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers = [handler]
        logger.propagate = False
        logger.setLevel(numeric_level)

    # RequestContextMiddleware already writes one access line per request.
    logging.getLogger("uvicorn.access").disabled = True

    _CONFIGURED = True
