"""
Logging Configuration - Shared Layer

structlog on top of the standard library. Logging is configured once from
environment variables at import time of the application, then again from
the loaded settings.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Driver loggers that are chatty at INFO.
NOISY_LOGGERS = ("pika", "pymongo")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Read the bootstrap logging configuration from the environment.

    Returns:
        Level, format and file path, any of which may be unset
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
) -> None:
    """
    Configure the standard logging system and structlog.

    Args:
        level: Optional override for the log level.
        format_string: Optional override for the log format; only used when
            a plain stdlib formatter is requested through the environment.
        file_path: Optional log file; console logging is always enabled.
        environment: JSON output is rendered in production, console
            output otherwise.
    """
    env_config = _get_log_config_from_env()

    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    renderer: Processor
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_shared_processors(),
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.get_logger(__name__).debug(
        "logging.configured",
        level=log_level,
        file_path=log_file,
        environment=environment,
        format=format_string or env_config["format"],
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: The application settings object from Pydantic.
    """
    log_settings = settings.logging
    level = getattr(log_settings.level, "value", log_settings.level)
    environment = getattr(settings.environment, "value", settings.environment)

    configure_logging(
        level=level,
        format_string=log_settings.format,
        file_path=log_settings.file_path,
        environment=environment,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
