"""
Consolidated constants for enum-next.

This module defines the naming pattern, reserved names and error message
templates shared by the builders and the validation layer.
"""

from enum import Enum
from typing import Any, Tuple


class BuildKind(Enum):
    KEYED = "keyed"
    SYMBOL_ONLY = "symbol_only"


class ConcatMode(Enum):
    REFERENCING = "referencing"  # constants are aliased, never rebuilt
    CLONING = "cloning"          # constants are rebuilt from scratch


# Naming
DEFAULT_NAME_PATTERN = r"[$A-Z_][0-9A-Z_$]*"
KEY_FIELD = "$key"
ID_FIELD = "$id"
DEFAULT_RESERVED_NAMES: Tuple[str, ...] = (KEY_FIELD, ID_FIELD)

# Canonical field name for a payload that is not a mapping
SCALAR_FIELD = "value"

# Option names accepted by concat when given as a mapping
CONCAT_OPTION_ALIASES = {
    "clean": "clean",
    "symbol_only": "symbol_only",
    "symbolOnly": "symbol_only",
    "behaviour": "behaviour",
}


def _describe(value: Any) -> str:
    return repr(value) if isinstance(value, str) else str(value)


# Error message templates
class Messages:
    """Error message templates, one per failure the builders can report."""

    KEYED_SHAPE = "Enum expected argument 'constants' to be a sequence of length >= 2"
    KEYED_ODD_LENGTH = "Enum expected argument 'constants' to have even length"
    SYMBOL_SHAPE = "Enum expected argument 'constants' to be a non-empty sequence"
    CONCAT_SHAPE = "Enum.concat expected first argument to be a non-empty sequence of Enumerations"

    @staticmethod
    def duplicate(key: Any) -> str:
        return f"Duplicate Enum constant for key {_describe(key)}"

    @staticmethod
    def concat_duplicate(key: Any) -> str:
        return f"Enum.concat: Duplicate Enum constant for key {_describe(key)}"

    @staticmethod
    def bad_name(name: Any, index: int) -> str:
        return (
            "Enum constants must be valid upper case variable names. "
            f"Constant {_describe(name)}, at index {index}, violates this invariant"
        )

    @staticmethod
    def reserved_member(name: str) -> str:
        return (
            f"Enum constants' members cannot be named {name!r}: '$key', '$id' "
            "and _sunder_ names are reserved as it would override default behaviour"
        )

    @staticmethod
    def reserved_behaviour(name: str) -> str:
        return (
            f"Enum constants' behaviour properties cannot be named {name!r}: '$key', '$id' "
            "and _sunder_ names are reserved as it would override default behaviour"
        )

    @staticmethod
    def member_type(name: Any, where: str) -> str:
        return f"Enum expected {where} names to be of type str. Found {type(name).__name__} ({name!r}) instead"

    @staticmethod
    def symbol_type(name: Any, index: int) -> str:
        return (
            f"Enum expected constant key {name!r} at index {index} to be of type str. "
            f"Found {type(name).__name__} instead"
        )

    @staticmethod
    def behaviour_type(behaviour: Any) -> str:
        return f"Enum expected argument 'behaviour' to be a mapping. Found {type(behaviour).__name__} instead"

    @staticmethod
    def concat_element(element: Any, index: int) -> str:
        return (
            "Enum.concat expected first argument to be a sequence of Enumerations. "
            f"Found instance of {type(element).__name__} at index {index} instead."
        )

    @staticmethod
    def concat_option(name: Any) -> str:
        return f"Enum.concat got an unrecognized option {name!r}"

    @staticmethod
    def concat_options_type(options: Any) -> str:
        return f"Enum.concat expected options to be a mapping or ConcatOptions. Found {type(options).__name__} instead"

    @staticmethod
    def immutable(owner: str, name: str) -> str:
        return f"Cannot modify attribute '{name}' of an immutable {owner}."
