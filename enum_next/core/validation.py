"""
Validation steps shared by the enumeration builders.

Each check raises on the first violation it finds; none of them build
anything, so a failed construction never leaves a partial enumeration behind.
"""

import logging
from collections import Counter
from collections.abc import Hashable
from typing import Any, List, Mapping, Optional, Sequence, Type

from enum_next.constants.constants import Messages
from enum_next.core.config import ValidationConfig
from enum_next.core.exceptions import (
    DuplicateKeyError,
    NamingError,
    ReservedNameError,
    ShapeError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)


def is_sequence(value: Any) -> bool:
    """True for list/tuple-like containers; strings and bytes are not sequences of names."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def require_pairs(constants: Any) -> List[Any]:
    """
    Check the shape of a flat ``name, payload, ...`` sequence.

    Raises:
        ShapeError: If ``constants`` is not a sequence of even length >= 2
    """
    if not is_sequence(constants) or len(constants) < 2:
        raise ShapeError(Messages.KEYED_SHAPE)
    if len(constants) % 2:
        raise ShapeError(Messages.KEYED_ODD_LENGTH)
    return list(constants)


def require_names(constants: Any) -> List[Any]:
    """
    Check the shape of a symbol-only name sequence.

    Raises:
        ShapeError: If ``constants`` is not a non-empty sequence
    """
    if not is_sequence(constants) or not constants:
        raise ShapeError(Messages.SYMBOL_SHAPE)
    return list(constants)


def find_duplicate(names: Sequence[Any]) -> Optional[Any]:
    """
    Return a duplicated name, or None.

    Duplicates are detected by cardinality; when several names collide the
    lowest one in sorted order is reported so the error is deterministic.
    Unhashable entries cannot be valid names and are left to the naming check.
    """
    hashable = [name for name in names if isinstance(name, Hashable)]
    if len(set(hashable)) == len(hashable):
        return None
    collisions = [name for name, count in Counter(hashable).items() if count > 1]
    return sorted(collisions, key=lambda name: (str(name), type(name).__name__))[0]


def check_unique(names: Sequence[Any], error_cls: Type[DuplicateKeyError] = DuplicateKeyError) -> None:
    duplicate = find_duplicate(names)
    if duplicate is not None:
        message = Messages.duplicate(duplicate)
        logger.debug(f"Rejected duplicate key: {duplicate!r}")
        raise error_cls(message, duplicate)


def check_name(name: Any, index: int, config: ValidationConfig) -> None:
    """Raise NamingError if ``name`` is not a valid upper case variable name."""
    if not config.is_valid_name(name):
        logger.debug(f"Rejected constant name {name!r} at index {index}")
        raise NamingError(Messages.bad_name(name, index), name, index)


def check_symbol_name(name: Any, index: int, config: ValidationConfig) -> None:
    if not isinstance(name, str):
        raise TypeMismatchError(Messages.symbol_type(name, index))
    check_name(name, index, config)


def check_members(members: Mapping[Any, Any], config: ValidationConfig) -> None:
    """Reject payload member names that are not strings or are reserved."""
    for name in members:
        if not isinstance(name, str):
            raise TypeMismatchError(Messages.member_type(name, "payload member"))
        if config.is_reserved(name):
            raise ReservedNameError(Messages.reserved_member(name), name)


def check_behaviour(behaviour: Any, config: ValidationConfig) -> Optional[Mapping[str, Any]]:
    """
    Validate a behaviour argument.

    Returns:
        The behaviour mapping, or None if none was given

    Raises:
        TypeMismatchError: If behaviour is not a mapping or has non-string names
        ReservedNameError: If a behaviour property uses a reserved name
    """
    if behaviour is None:
        return None
    if not isinstance(behaviour, Mapping):
        raise TypeMismatchError(Messages.behaviour_type(behaviour))
    for name in behaviour:
        if not isinstance(name, str):
            raise TypeMismatchError(Messages.member_type(name, "behaviour property"))
        if config.is_reserved(name):
            raise ReservedNameError(Messages.reserved_behaviour(name), name)
    return behaviour
