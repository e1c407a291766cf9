"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_LOG_FORMATS = ("console", "json")


def _build_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and stdlib logging.

    Arguments win over the environment:
        LAYERSCAN_LOG_LEVEL  — log level (default: INFO)
        LAYERSCAN_LOG_FORMAT — console | json (default: console)
    """
    log_level = (level or os.environ.get("LAYERSCAN_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.environ.get("LAYERSCAN_LOG_FORMAT", "console")).lower()
    if fmt not in _LOG_FORMATS:
        raise ValueError(f"unknown log format '{fmt}', expected one of {_LOG_FORMATS}")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _build_renderer(fmt),
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": log_level,
            },
            "loggers": {
                "layerscan": {"level": log_level},
                "asyncio": {"level": "WARNING"},
            },
        }
    )
