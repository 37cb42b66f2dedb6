"""Core module for enum-next."""

# These imports are re-exported through __all__
from enum_next.core.constant import Constant
from enum_next.core.enumeration import Enumeration, make_enum
from enum_next.core.identity import IdentityToken

__all__ = [
    'Constant',
    'Enumeration',
    'IdentityToken',
    'make_enum',
]
