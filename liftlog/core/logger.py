"""Logger configuration for liftlog.

Every record carries an `app` extra ("liftlog") so engine output can be told
apart when the host application shares the loguru logger.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from liftlog.config.settings import Settings, settings

APP_NAME = "liftlog"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[app]} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace all loguru handlers with liftlog's console and optional file sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional path to a rotating log file (compressed to zip on close)
        rotation: Size or age that triggers rotation (e.g. "10 MB", "1 day")
        retention: How long rotated files are kept (e.g. "7 days")
    """
    handlers: list[dict[str, Any]] = [
        {"sink": sys.stderr, "format": CONSOLE_FORMAT, "level": level, "colorize": True},
    ]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            {
                "sink": log_path,
                "format": FILE_FORMAT,
                "level": level,
                "rotation": rotation,
                "retention": retention,
                "compression": "zip",
            }
        )

    logger.configure(handlers=handlers, extra={"app": APP_NAME})
    logger.info(f"Logger initialized with level={level} file={log_file or '-'}")


def setup_logger_from_settings(config: Settings | None = None) -> None:
    """Configure logging from LOG_LEVEL / LIFTLOG_LOG_FILE / LIFTLOG_LOG_ROTATION / LIFTLOG_LOG_RETENTION."""
    config = config or settings
    setup_logger(
        level=config.log_level,
        log_file=config.log_file or None,
        rotation=config.log_rotation,
        retention=config.log_retention,
    )
