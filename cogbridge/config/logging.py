"""structlog setup."""

from __future__ import annotations

import logging

import structlog

from cogbridge.config.settings import LoggingSettings


def configure_logging(settings: LoggingSettings) -> None:
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer()
            if settings.json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.level)
        ),
    )
