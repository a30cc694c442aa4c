"""Logging configuration using Loguru."""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from hashnotes.config import LoggingConfig


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str = "logs",
    file_rotation: str = "10 MB",
    file_retention: str = "7 days",
    compression: str = "zip",
    serialize: bool = True,
) -> None:
    """Configure Loguru logger with optional JSON file sink and rotation."""
    logger.remove()

    # Console logging
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
        serialize=False,
    )

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "hashnotes_{time:YYYY-MM-DD}.log",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=file_rotation,
            retention=file_retention,
            compression=compression,
            serialize=serialize,
            enqueue=True,
        )


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)


def setup_logging_from_config(config: "LoggingConfig") -> None:
    """Configure logging from the `logging` section of a Config."""
    setup_logging(
        level=config.level,
        log_to_file=config.log_to_file,
        log_dir=config.log_dir,
        file_rotation=config.file_rotation,
        file_retention=config.file_retention,
        compression=config.compression,
        serialize=config.serialize,
    )
