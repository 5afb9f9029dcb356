"""Logging configuration for the checkout service."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def current_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Resolve the log level, letting LOG_LEVEL override the environment default."""
    return os.getenv("LOG_LEVEL", _LEVELS_BY_ENV.get(current_environment(), "INFO"))


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str | None = "logs", log_file_prefix: str = "checkout") -> None:
    """Route stdlib logging to stdout and, unless ``log_dir`` is None, to rotating files."""
    log_level = level or get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(exist_ok=True)
        root_logger.addHandler(_rotating_handler(directory / f"{log_file_prefix}.log", log_level))
        root_logger.addHandler(_rotating_handler(directory / f"{log_file_prefix}_error.log", logging.ERROR))

    logging.getLogger("protean").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]

    if current_environment() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str | None = "logs", log_file_prefix: str = "checkout") -> None:
    """Configure stdlib and structlog logging for the process."""
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def bind_checkout_context(**kwargs: Any) -> None:
    """Attach key/value pairs (cart id, request id) to every subsequent log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_checkout_context() -> None:
    structlog.contextvars.clear_contextvars()
