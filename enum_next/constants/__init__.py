from enum_next.constants.constants import (
    BuildKind,
    ConcatMode,
    DEFAULT_NAME_PATTERN,
    DEFAULT_RESERVED_NAMES,
    ID_FIELD,
    KEY_FIELD,
    Messages,
    SCALAR_FIELD,
)

__all__ = [
    "BuildKind",
    "ConcatMode",
    "DEFAULT_NAME_PATTERN",
    "DEFAULT_RESERVED_NAMES",
    "ID_FIELD",
    "KEY_FIELD",
    "Messages",
    "SCALAR_FIELD",
]
