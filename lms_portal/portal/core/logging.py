"""Logging setup for the portal: JSON records in deployments, plain text locally."""
import logging
import sys
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from portal.core.config import Settings, settings as default_settings

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
JSON_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"

# Third-party loggers that flood DEBUG/INFO output with per-request noise
QUIET_LOGGERS = ("uvicorn.access", "asyncio", "multipart", "python_multipart")


class PortalJsonFormatter(jsonlogger.JsonFormatter):
    """Stamps every record with the portal's name, version and environment."""

    def __init__(self, *args: Any, config: Settings = default_settings, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.config = config

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["app_name"] = self.config.APP_NAME
        log_record["app_version"] = self.config.APP_VERSION
        log_record["environment"] = self.config.ENVIRONMENT
        log_record["level"] = record.levelname
        log_record["logger_name"] = record.name

        # Set by RequestIDMiddleware for request-scoped records
        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id


def build_formatter(config: Settings) -> logging.Formatter:
    """
    Formatter for the configured LOG_FORMAT.

    Args:
        config: Settings providing LOG_FORMAT and the service context

    Returns:
        logging.Formatter: JSON formatter, or a plain one for "text"
    """
    if config.LOG_FORMAT == "text":
        return logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S")
    return PortalJsonFormatter(
        JSON_FORMAT,
        rename_fields={"timestamp": "asctime"},
        datefmt="%Y-%m-%d %H:%M:%S",
        config=config,
    )


def setup_logging(config: Optional[Settings] = None) -> None:
    """Route all records to stdout through the configured formatter."""
    config = config or default_settings

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.LOG_LEVEL.upper()))
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(build_formatter(config))
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
