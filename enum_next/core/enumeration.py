"""
The Enumeration root object.

An Enumeration is a closed, ordered set of named constants built in one pass
and frozen afterwards. Three construction operations are exposed as class
methods (``keyed``, ``symbols`` and ``concat``); ``make_enum`` is a thin
dispatcher choosing between them from the shape of its arguments.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from enum_next.constants.constants import Messages
from enum_next.core.constant import Constant
from enum_next.core.exceptions import ImmutabilityError, TypeMismatchError
from enum_next.core.identity import IdentityToken
from enum_next.core.validation import is_sequence

logger = logging.getLogger(__name__)

Member = Union[Constant, IdentityToken]


class Enumeration:
    """
    Ordered, immutable set of named constants.

    Constants are reachable as attributes (``Color.RED``) and items
    (``Color["RED"]``). Keys are upper case by construction while every
    accessor is lower case, so a constant can never shadow an accessor.

    Instances are produced by the builders; use ``Enumeration.keyed``,
    ``Enumeration.symbols``, ``Enumeration.concat`` or ``make_enum`` rather
    than calling the constructor directly.

    Attributes:
        symbol_only: True if constants carry identity only.
        behaviour: Read-only snapshot of the shared behaviour, None when symbol-only.
    """

    def __init__(
        self,
        keys: Sequence[str],
        members: Mapping[str, Member],
        symbol_only: bool,
        behaviour: Optional[Mapping[str, Any]] = None
    ):
        object.__setattr__(self, "_is_frozen", False)
        self._keys: Tuple[str, ...] = tuple(keys)
        self._members: Dict[str, Member] = dict(members)
        self._symbol_only = bool(symbol_only)
        self._behaviour = None if symbol_only else MappingProxyType(dict(behaviour or {}))
        self._is_frozen = True

    # --- Construction ---

    @classmethod
    def keyed(cls, constants: Sequence[Any], behaviour: Optional[Mapping[str, Any]] = None) -> "Enumeration":
        """Build a keyed enumeration from a flat ``name, payload, ...`` sequence."""
        from enum_next.core.builders import build_keyed
        return build_keyed(constants, behaviour)

    @classmethod
    def symbols(cls, names: Sequence[str]) -> "Enumeration":
        """Build a symbol-only enumeration from a sequence of names."""
        from enum_next.core.builders import build_symbol_only
        return build_symbol_only(names)

    @classmethod
    def concat(cls, enumerations: Sequence["Enumeration"], options: Any = None, **overrides: Any) -> "Enumeration":
        """Combine already built enumerations; see ``enum_next.core.concat.concat``."""
        from enum_next.core.concat import concat
        return concat(enumerations, options, **overrides)

    # --- Immutability ---

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_is_frozen", False):
            raise ImmutabilityError(Messages.immutable("Enumeration", name))
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise ImmutabilityError(Messages.immutable("Enumeration", name))

    def __copy__(self) -> "Enumeration":
        return self

    def __deepcopy__(self, memo: dict) -> "Enumeration":
        return self

    # --- Properties ---

    @property
    def symbol_only(self) -> bool:
        return self._symbol_only

    @property
    def behaviour(self) -> Optional[Mapping[str, Any]]:
        return self._behaviour

    # --- Accessors ---

    def keys(self) -> List[str]:
        """Return a copy of the keys in declaration order."""
        return list(self._keys)

    def values(self) -> List[Member]:
        """Return the constants in declaration order."""
        return [self._members[key] for key in self._keys]

    def entries(self) -> List[Tuple[str, Member]]:
        """Return ``(key, constant)`` pairs in declaration order."""
        return [(key, self._members[key]) for key in self._keys]

    def __iter__(self) -> Iterator[Member]:
        # A fresh generator per call, re-derived from the keys
        for key in self._keys:
            yield self._members[key]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, item: object) -> bool:
        """True for a key of this enumeration or one of its constants."""
        if isinstance(item, str):
            return item in self._members
        return any(member is item for member in self._members.values())

    def __getitem__(self, key: str) -> Member:
        return self._members[key]

    def __getattr__(self, name: str) -> Member:
        # Only reached when normal lookup fails, so accessors always win
        members = self.__dict__.get("_members")
        if members is not None and name in members:
            return members[name]
        raise AttributeError(f"Enumeration has no constant {name!r}")

    def __dir__(self):
        return sorted(set(super().__dir__()) | {key for key in self._keys if key.isidentifier()})

    def __repr__(self) -> str:
        return f"Enumeration({list(self._keys)!r}, symbol_only={self._symbol_only})"


def make_enum(constants: Any, behaviour: Any = None) -> Enumeration:
    """
    Build an enumeration, choosing the construction from the arguments.

    Args:
        constants: A non-empty sequence of Enumerations (concatenation), a
            sequence of names (symbol-only) or a flat ``name, payload, ...``
            sequence (keyed)
        behaviour: Concat options when ``constants`` are Enumerations;
            ``True`` for symbol-only; a mapping, ``None`` or ``False`` for keyed

    Returns:
        The built Enumeration

    Raises:
        TypeMismatchError: If ``behaviour`` is none of the recognized shapes
    """
    if is_sequence(constants) and constants and all(isinstance(e, Enumeration) for e in constants):
        return Enumeration.concat(constants, behaviour)
    if behaviour is True:
        return Enumeration.symbols(constants)
    if behaviour is None or behaviour is False or isinstance(behaviour, Mapping):
        return Enumeration.keyed(constants, behaviour or None)
    raise TypeMismatchError(Messages.behaviour_type(behaviour))
