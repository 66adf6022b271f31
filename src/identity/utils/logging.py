"""Process-wide logging for the storefront backend and client.

structlog renders on top of the standard library. Development gets a coloured
console with rich tracebacks, production and staging get one JSON object per
line. Outside tests, records are also written to rotating files under
``LOG_DIR``.

Request-scoped values (method, path) are bound with ``add_context`` and show
up on every record until ``clear_context`` is called.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

# Libraries that log far more than we need
QUIET_LOGGERS = ("asyncio", "httpx", "httpcore", "passlib", "protean", "multipart")

_MAX_BYTES = 10 * 1024 * 1024


def get_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", LEVELS.get(get_environment(), "INFO")).upper()


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(filename=path, maxBytes=_MAX_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    log_level = level or get_log_level()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if get_environment() != "test":
        log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(_rotating_file(log_path / f"{log_file_prefix}.log", log_level))
        handlers.append(_rotating_file(log_path / f"{log_file_prefix}_error.log", logging.ERROR))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = handlers

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _renderer():
    if get_environment() in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=4),
    )


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
