"""Logging configuration."""

import logging
import sys

from pythonjsonlogger import jsonlogger

from order_service.config import Settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty libraries kept at WARNING regardless of the service level
QUIET_LOGGERS = ("uvicorn", "httpx", "httpcore", "pymongo")


def _build_formatter(settings: Settings) -> logging.Formatter:
    if settings.log_format == "json":
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt=DATE_FORMAT,
            static_fields={"service": settings.app_name, "environment": settings.environment},
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt=DATE_FORMAT,
    )


def setup_logging(settings: Settings) -> None:
    """Send all service logs to stdout at the configured level.

    JSON lines carry the service name and environment.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(settings))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info("Logging configured: level=%s, format=%s", settings.log_level, settings.log_format)
