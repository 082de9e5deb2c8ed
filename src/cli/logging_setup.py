"""Diagnostic logging.

User-facing messages go through `ConsoleOutput`; this only configures the
stdlib loggers (request traces, workflow decisions) to render on stderr with
rich.
"""

from __future__ import annotations

import logging
import logging.config

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def stderr_rich_handler() -> RichHandler:
    return RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)


def build_log_config(level: str) -> dict:
    level = level.upper()
    if level not in LOG_LEVELS:
        level = "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "minimal": {"format": "%(name)s - %(message)s", "datefmt": "%H:%M:%S"},
        },
        "handlers": {
            "rich": {
                "()": stderr_rich_handler,
                "level": level,
                "formatter": "minimal",
            },
        },
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
        "root": {"level": level, "handlers": ["rich"]},
    }


def configure_logging(level: str) -> None:
    logging.config.dictConfig(build_log_config(level))
