"""
Custom exceptions for chainquant.

Numeric routines never raise for short, degenerate, or out-of-range input;
they return None or an empty list instead. These exceptions cover programmer
errors: values that are not numbers at all, or inconsistent policy settings.
"""


class ChainQuantError(Exception):
    """Base exception for chainquant failures."""
    pass


class DataValidationError(ChainQuantError):
    """Raised when a sequence or scalar argument is not numeric."""
    pass


class ConfigurationError(ChainQuantError):
    """Raised when configuration is invalid or inconsistent."""
    pass
