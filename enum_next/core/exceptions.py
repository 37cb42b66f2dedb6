"""
Custom exceptions for enum-next.
Ensures that construction errors are specific and fail loudly.
"""

from typing import Any


class EnumNextError(Exception):
    """Base class for all enum-next custom exceptions."""
    pass

class ConfigError(EnumNextError):
    """Raised when an enumeration cannot be built from the given description."""
    pass

class ShapeError(ConfigError, ValueError):
    """Raised when the constants argument has the wrong container type or length."""
    pass

class NamingError(ConfigError, ValueError):
    """Raised when a constant key is not a valid upper case variable name."""

    def __init__(self, message: str, name: Any, index: int):
        super().__init__(message)
        self.name = name
        self.index = index

class DuplicateKeyError(ConfigError, ValueError):
    """Raised when a constant key appears more than once."""

    def __init__(self, message: str, key: Any):
        super().__init__(message)
        self.key = key

class ConcatDuplicateKeyError(DuplicateKeyError):
    """Raised when two constituents of a concatenation share a key."""
    pass

class ReservedNameError(ConfigError, ValueError):
    """Raised when a payload member or behaviour property uses a reserved name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name

class TypeMismatchError(ConfigError, TypeError):
    """Raised when an argument or element has an unsupported type."""
    pass

class ImmutabilityError(EnumNextError, AttributeError):
    """Raised when an attempt is made to modify an immutable object after initialization."""
    pass
