"""
Keyed and symbol-only enumeration builders.

Both builders validate their whole input before minting a single token, so
construction either returns a complete Enumeration or raises.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from enum_next.constants.constants import BuildKind
from enum_next.core.config import get_current_validation_config
from enum_next.core.constant import Constant
from enum_next.core.enumeration import Enumeration, Member
from enum_next.core.identity import IdentityToken
from enum_next.core.validation import (
    check_behaviour,
    check_members,
    check_name,
    check_symbol_name,
    check_unique,
    require_names,
    require_pairs,
)

logger = logging.getLogger(__name__)


def build_keyed(constants: Sequence[Any], behaviour: Optional[Mapping[str, Any]] = None) -> Enumeration:
    """
    Build a keyed enumeration.

    Validation runs in a fixed order and stops at the first violation: shape,
    even length, duplicate keys, key naming, payload member names, behaviour.

    Args:
        constants: Flat sequence alternating ``name, payload``
        behaviour: Properties shared by every constant unless a constant's own
            payload defines the same name

    Returns:
        Enumeration with ``symbol_only`` False

    Raises:
        ShapeError: If ``constants`` is not an even-length sequence of length >= 2
        DuplicateKeyError: If a key is declared twice
        NamingError: If a key is not a valid upper case variable name
        ReservedNameError: If a payload member or behaviour property is reserved
        TypeMismatchError: If behaviour is not a mapping, or a name is not a string
    """
    config = get_current_validation_config()
    flat = require_pairs(constants)
    keys = flat[0::2]
    payloads = flat[1::2]

    check_unique(keys)
    for index, key in enumerate(keys):
        check_name(key, index, config)
    for payload in payloads:
        if isinstance(payload, Mapping):
            check_members(payload, config)
    shared = check_behaviour(behaviour, config)

    # Later changes to the caller's mapping are not observed
    snapshot: Dict[str, Any] = dict(shared or {})
    members: Dict[str, Member] = {}
    for key, payload in zip(keys, payloads):
        members[key] = Constant(key, IdentityToken(key), payload, snapshot)

    logger.debug(f"Built {BuildKind.KEYED.value} enumeration: keys={keys}, behaviour={sorted(snapshot)}")
    return Enumeration(keys, members, symbol_only=False, behaviour=snapshot)


def build_symbol_only(names: Sequence[Any]) -> Enumeration:
    """
    Build a symbol-only enumeration whose constants are bare identity tokens.

    Raises:
        ShapeError: If ``names`` is not a non-empty sequence
        DuplicateKeyError: If a name is declared twice
        TypeMismatchError: If a name is not a string
        NamingError: If a name is not a valid upper case variable name
    """
    config = get_current_validation_config()
    keys = require_names(names)

    check_unique(keys)
    for index, key in enumerate(keys):
        check_symbol_name(key, index, config)

    members: Dict[str, Member] = {key: IdentityToken(key) for key in keys}

    logger.debug(f"Built {BuildKind.SYMBOL_ONLY.value} enumeration: keys={keys}")
    return Enumeration(keys, members, symbol_only=True)
