"""Centralized logging configuration for RollingTime."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config import Config


def setup_logging(config: Config, console_level: Optional[str] = None) -> None:
    """
    Initialize logging system based on configuration.

    Console output goes to stderr so that stdout only carries table rows.
    File handlers are added only when a log directory is configured.

    Args:
        config: Configuration instance with logging settings
        console_level: Optional override for the configured console level
    """
    file_level = getattr(logging, config.log_level.upper(), logging.INFO)
    console_level = getattr(
        logging, (console_level or config.console_level).upper(), logging.WARNING
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_formatter = logging.Formatter(
        '[%(levelname)-8s] [%(name)s] %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if not config.log_dir:
        root_logger.setLevel(console_level)
        return

    log_dir_path = Path(config.log_dir)
    log_dir_path.mkdir(parents=True, exist_ok=True)
    root_logger.setLevel(min(file_level, console_level))

    rotation_config = config.log_rotation
    main_log_path = log_dir_path / "rollingtime.log"
    error_log_path = log_dir_path / "rollingtime-error.log"

    file_handler = logging.handlers.RotatingFileHandler(
        main_log_path,
        maxBytes=rotation_config["max_bytes"],
        backupCount=rotation_config["backup_count"],
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_formatter = logging.Formatter(
        '%(asctime)s [%(levelname)-8s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    # Error-only log file handler
    error_handler = logging.handlers.RotatingFileHandler(
        error_log_path,
        maxBytes=rotation_config["max_bytes"],
        backupCount=rotation_config["backup_count"],
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_formatter)
    root_logger.addHandler(error_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific component.

    Args:
        name: Logger name (typically __name__ or component name)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
