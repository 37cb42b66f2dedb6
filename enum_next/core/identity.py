"""
Identity tokens for enumeration constants.
"""

from typing import Any

from enum_next.constants.constants import Messages
from enum_next.core.exceptions import ImmutabilityError


class IdentityToken:
    """
    Opaque value minted once per constant.

    A token is equal only to itself: two tokens minted for the same name, even
    by the same kind of construction, never compare equal. Copying a token
    returns the token itself so identity survives ``copy``/``deepcopy``.
    """

    def __init__(self, description: str):
        object.__setattr__(self, "_description", description)

    @property
    def description(self) -> str:
        """The name this token was minted for."""
        return self._description

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutabilityError(Messages.immutable("IdentityToken", name))

    def __delattr__(self, name: str) -> None:
        raise ImmutabilityError(Messages.immutable("IdentityToken", name))

    def __copy__(self) -> "IdentityToken":
        return self

    def __deepcopy__(self, memo: dict) -> "IdentityToken":
        return self

    def __repr__(self) -> str:
        return f"IdentityToken({self._description!r})"

    def __str__(self) -> str:
        return f"Symbol({self._description})"
