"""Structured logging for coded_errors.

Library code only ever asks for loggers through get_logger(). Those loggers
wrap the matching stdlib logger, so importing coded_errors never touches the
global structlog configuration and events are filtered by `logging` levels.
Applications that want the library's events as JSON call configure_logging()
once at startup.
"""

import logging
import logging.config
import sys
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="CODED_ERRORS_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _shared_processors() -> list[Any]:
    # Run for structlog events and for plain stdlib records alike
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Send structlog and stdlib events to stdout as one JSON object per line.

    Meant for the embedding application, called once at startup. Loggers are
    not cached, so a later structlog.configure() (or capture_logs() in tests)
    still reaches loggers created at import time.
    """
    settings = settings or LoggingSettings()
    processors = _shared_processors()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.processors.JSONRenderer(),
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": settings.log_level,
                },
            },
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger bound to the stdlib logger ``name``.

    Processors come from whatever structlog configuration is active when the
    event is emitted.

    Example:
        logger = get_logger(__name__)
        logger.debug("error_code_registered", code="ERR_MODULE_NOT_FOUND")
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
