"""Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this installs a single
stderr handler whose output is rendered by structlog:
- json (default): structured JSON lines
- console: human-readable, colored when attached to a TTY
"""

import logging
import sys

import structlog

from src.config.settings import settings


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure the root logger with a structlog-rendered handler.

    Args:
        level: Logging level name; defaults to ``settings.log_level``
        log_format: ``json`` or ``console``; defaults to ``settings.log_format``

    """
    level = (level or settings.log_level).upper()
    log_format = log_format or settings.log_format

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
