import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

import structlog

from calendar_math.core.config import settings

PACKAGE_NAME = "calendar_math"


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings for logs. Use this if the host
    application ships its logs to a log aggregator.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Fields passed via logger.debug(..., extra={"extra_data": {...}})
        if hasattr(record, "extra_data"):
            log_obj.update(record.extra_data)  # type: ignore

        return json.dumps(log_obj)


class ConsoleFormatter(logging.Formatter):
    format_str = "%(levelname)-8s | %(asctime)s | %(name)20s:%(lineno)-4d | %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        original_name = record.name
        if original_name == PACKAGE_NAME:
            record.name = "app"
        elif original_name.startswith(f"{PACKAGE_NAME}."):
            record.name = original_name[len(PACKAGE_NAME) + 1 :]

        formatter = logging.Formatter(self.format_str, datefmt="%Y-%m-%d %H:%M:%S")
        formatted_message = formatter.format(record)

        # Other handlers may see the same record
        record.name = original_name

        return formatted_message


def setup_logging() -> None:
    """
    Configures stdlib logging for the package and routes structlog loggers
    through the same handlers. Meant to be called by the host application,
    importing the package never configures logging.
    """
    formatter_cls = (
        "calendar_math.core.logging_utils.JSONFormatter"
        if settings.LOG_FORMAT == "json"
        else "calendar_math.core.logging_utils.ConsoleFormatter"
    )

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": formatter_cls,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "": {"handlers": ["default"], "level": settings.LOG_LEVEL},
            PACKAGE_NAME: {
                "handlers": ["default"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
