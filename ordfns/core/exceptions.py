"""
ordfns Exception Hierarchy.

Provides structured error types so callers can tell integration mistakes
(passing a value the dispatcher cannot order) apart from configuration
problems.

Exception Hierarchy:
    OrdfnsError (base)
    └── PermanentError
        ├── UnsupportedShapeError
        └── ConfigurationError

Usage:
    from ordfns.core.exceptions import UnsupportedShapeError

    try:
        less, score = fns(value)
    except UnsupportedShapeError as e:
        # Implement less() on the type, or stop passing it in
        print(e.type_name)
"""

from typing import Optional


class OrdfnsError(Exception):
    """
    Base exception for all ordfns errors.

    All ordfns exceptions inherit from this class, making it easy
    to catch any library error while still allowing specific handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# =============================================================================
# PERMANENT ERRORS - Will not succeed on retry
# =============================================================================

class PermanentError(OrdfnsError):
    """
    Error that will not succeed on retry.

    Every ordfns error is a programming or integration error: the same
    input fails the same way every time.
    """
    pass


class UnsupportedShapeError(PermanentError):
    """
    A value matched none of the supported shapes.

    Raised by every dispatcher entry point. The fix is on the caller's
    side: give the type a ``less(other)`` method, or stop passing it in.
    """

    def __init__(self, message: str, type_name: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.type_name = type_name


class ConfigurationError(PermanentError):
    """
    Configuration is invalid.

    Examples:
    - Non-boolean warn_precision_loss

    Requires configuration fix before retry.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, kwargs)
        self.config_key = config_key


__all__ = [
    "OrdfnsError",
    "PermanentError",
    "UnsupportedShapeError",
    "ConfigurationError",
]
