"""
Concatenation of already built enumerations.

Two modes are supported:

1. **Referencing** (default): the result aliases the constituents' constants.
   No token is minted and no constant is re-processed, so behaviour passed
   to concat is recorded on the result but never projected onto constants.

2. **Cloning** (``clean=True``): the constituents are flattened back into a
   builder input and rebuilt, producing new constants and new tokens. Scalar
   payloads carry over; compound payloads do not (their projected members are
   dropped and the constant is rebuilt from an empty mapping).

Duplicate keys across constituents are rejected in both modes.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from enum_next.constants.constants import ConcatMode, Messages
from enum_next.core.builders import build_keyed, build_symbol_only
from enum_next.core.config import ConcatOptions, get_current_validation_config
from enum_next.core.constant import Constant
from enum_next.core.enumeration import Enumeration, Member
from enum_next.core.exceptions import ConcatDuplicateKeyError, ShapeError, TypeMismatchError
from enum_next.core.validation import check_behaviour, is_sequence

logger = logging.getLogger(__name__)


def concat(enumerations: Sequence[Enumeration], options: Any = None, **overrides: Any) -> Enumeration:
    """
    Combine enumerations into a new one.

    Args:
        enumerations: Non-empty sequence of previously built Enumerations
        options: ConcatOptions, a mapping of option names, or None
        **overrides: Individual options (``clean``, ``symbol_only``, ``behaviour``)

    Returns:
        The combined Enumeration

    Raises:
        ShapeError: If ``enumerations`` is not a non-empty sequence
        TypeMismatchError: If an element is not an Enumeration, or the options are malformed
        ConcatDuplicateKeyError: If two constituents share a key
    """
    resolved = ConcatOptions.from_value(options, **overrides)
    constituents = _require_enumerations(enumerations)
    check_behaviour(resolved.behaviour, get_current_validation_config())

    mode = ConcatMode.CLONING if resolved.clean else ConcatMode.REFERENCING
    logger.debug(f"Concatenating {len(constituents)} enumerations in {mode.value} mode")

    if mode is ConcatMode.CLONING:
        return _concat_cloning(constituents, resolved)
    return _concat_referencing(constituents, resolved)


def _require_enumerations(enumerations: Any) -> List[Enumeration]:
    if not is_sequence(enumerations) or not enumerations:
        raise ShapeError(Messages.CONCAT_SHAPE)
    for index, element in enumerate(enumerations):
        if not isinstance(element, Enumeration):
            raise TypeMismatchError(Messages.concat_element(element, index))
    return list(enumerations)


def _iter_unique_entries(constituents: Sequence[Enumeration]):
    """Yield ``(key, member)`` across constituents, failing on the first repeated key."""
    seen = set()
    for enumeration in constituents:
        for key, member in enumeration.entries():
            if key in seen:
                logger.debug(f"Rejected duplicate key across constituents: {key!r}")
                raise ConcatDuplicateKeyError(Messages.concat_duplicate(key), key)
            seen.add(key)
            yield key, member


def _merge_behaviour(constituents: Sequence[Enumeration]) -> Dict[str, Any]:
    """Union of the constituents' behaviour; later constituents win on collision."""
    merged: Dict[str, Any] = {}
    for enumeration in constituents:
        if enumeration.behaviour is not None:
            merged.update(enumeration.behaviour)
    return merged


def _concat_referencing(constituents: Sequence[Enumeration], options: ConcatOptions) -> Enumeration:
    keys: List[str] = []
    members: Dict[str, Member] = {}
    for key, member in _iter_unique_entries(constituents):
        keys.append(key)
        members[key] = member

    all_symbol_only = all(e.symbol_only for e in constituents)
    # symbol_only wins over a supplied behaviour, but cannot strip fields
    # from constants that already carry them
    symbol_only = all_symbol_only and (options.symbol_only or options.behaviour is None)
    if options.symbol_only and not all_symbol_only:
        logger.debug("symbol_only requested but a constituent carries payloads; result stays keyed")

    behaviour: Optional[Mapping[str, Any]] = None
    if not symbol_only:
        behaviour = options.behaviour if options.behaviour is not None else _merge_behaviour(constituents)

    return Enumeration(keys, members, symbol_only=symbol_only, behaviour=behaviour)


def _concat_cloning(constituents: Sequence[Enumeration], options: ConcatOptions) -> Enumeration:
    entries = list(_iter_unique_entries(constituents))

    if options.symbol_only:
        symbol_only = True
    elif options.behaviour is not None:
        symbol_only = False
    else:
        symbol_only = all(e.symbol_only for e in constituents)

    if symbol_only:
        return build_symbol_only([key for key, _ in entries])

    flat: List[Any] = []
    for key, member in entries:
        flat.extend((key, _carried_payload(member)))

    behaviour = options.behaviour if options.behaviour is not None else _merge_behaviour(constituents)
    return build_keyed(flat, behaviour)


def _carried_payload(member: Member) -> Any:
    """Scalar payloads carry over; anything else restarts from an empty mapping."""
    if isinstance(member, Constant) and member._scalar_:
        return member._payload_
    return {}
