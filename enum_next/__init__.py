"""
enum-next: validated, immutable enumerations.

This module provides the public API for enum-next: the three construction
operations (keyed, symbol-only, concatenation), the ``make_enum`` dispatcher,
the configuration objects and the error taxonomy.
"""

import logging

__version__ = "0.2.0"

# The library never configures handlers; applications decide where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

from enum_next.core.config import (
    ConcatOptions,
    ValidationConfig,
    get_current_validation_config,
    set_current_validation_config,
    validation_config,
)
from enum_next.core.constant import Constant
from enum_next.core.enumeration import Enumeration, make_enum
from enum_next.core.exceptions import (
    ConcatDuplicateKeyError,
    ConfigError,
    DuplicateKeyError,
    EnumNextError,
    ImmutabilityError,
    NamingError,
    ReservedNameError,
    ShapeError,
    TypeMismatchError,
)
from enum_next.core.identity import IdentityToken

__all__ = [
    # Construction
    "Enumeration",
    "make_enum",

    # Key types
    "Constant",
    "IdentityToken",

    # Configuration
    "ConcatOptions",
    "ValidationConfig",
    "get_current_validation_config",
    "set_current_validation_config",
    "validation_config",

    # Errors
    "EnumNextError",
    "ConfigError",
    "ShapeError",
    "NamingError",
    "DuplicateKeyError",
    "ConcatDuplicateKeyError",
    "ReservedNameError",
    "TypeMismatchError",
    "ImmutabilityError",
]
