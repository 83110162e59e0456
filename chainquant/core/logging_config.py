"""
Logging configuration for chainquant.

Library modules only call logging.getLogger(__name__). Applications (and the
gas-price façade) call setup_logging() to attach console and, optionally,
rotating file output.
"""

import logging
import logging.handlers
from typing import Optional

from .config import Config, config


def setup_logging(logger_name: str = "chainquant", settings: Optional[Config] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        logger_name: Name of the logger (typically the package name)
        settings: Configuration to read levels and paths from (defaults to the global config)

    Returns:
        Configured logger instance
    """
    settings = settings or config
    logger = logging.getLogger(logger_name)

    # Don't add handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = settings.logs_dir / f"{logger_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(settings.log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
