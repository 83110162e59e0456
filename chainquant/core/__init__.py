"""
Core module: Configuration, logging, and exception handling.
"""

from .config import Config, config
from .exceptions import (
    ChainQuantError,
    ConfigurationError,
    DataValidationError,
)

__all__ = [
    "Config",
    "config",
    "ChainQuantError",
    "DataValidationError",
    "ConfigurationError",
]
