"""
Configuration dataclasses for enum-next.

This module defines the configuration objects read by the builders: the
validation rules applied to every construction and the options accepted by
concatenation. Configuration is immutable and provided as Python objects.
"""

import logging
import re
import threading
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any, Iterator, Mapping, Optional, Tuple

from enum_next.constants.constants import (
    CONCAT_OPTION_ALIASES,
    DEFAULT_NAME_PATTERN,
    DEFAULT_RESERVED_NAMES,
    Messages,
)
from enum_next.core.exceptions import TypeMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationConfig:
    """Rules applied when validating constant keys, payload members and behaviour."""
    name_pattern: str = DEFAULT_NAME_PATTERN
    """Regex a constant key must fully match."""

    reserved_names: Tuple[str, ...] = DEFAULT_RESERVED_NAMES
    """Names no payload member or behaviour property may use."""

    reserve_sunder_names: bool = True
    """Also reserve _sunder_ names, the namespace constants use for their own attributes."""

    def compiled_pattern(self) -> re.Pattern:
        return _compile(self.name_pattern)

    def is_valid_name(self, name: Any) -> bool:
        return isinstance(name, str) and self.compiled_pattern().fullmatch(name) is not None

    def is_reserved(self, name: str) -> bool:
        # $key and $id stay reserved whatever the config says
        if name in DEFAULT_RESERVED_NAMES or name in self.reserved_names:
            return True
        return self.reserve_sunder_names and _is_sunder(name)


@dataclass(frozen=True)
class ConcatOptions:
    """Options for combining already built enumerations."""
    clean: bool = False
    """Rebuild every constant (cloning) instead of aliasing the source constants."""

    symbol_only: bool = False
    """Force a symbol-only result; wins over a supplied behaviour."""

    behaviour: Optional[Mapping[str, Any]] = None
    """Force the behaviour of the result instead of merging the constituents' behaviour."""

    @classmethod
    def from_value(cls, options: Any = None, **overrides: Any) -> "ConcatOptions":
        """
        Normalise concat options.

        Args:
            options: None, a ConcatOptions instance, or a mapping of option names
                (``symbolOnly`` is accepted as an alias of ``symbol_only``)
            **overrides: Option values taking precedence over ``options``

        Returns:
            A ConcatOptions instance

        Raises:
            TypeMismatchError: If ``options`` has an unsupported type or names an
                unknown option
        """
        if options is None:
            base = cls()
        elif isinstance(options, cls):
            base = options
        elif isinstance(options, Mapping):
            base = cls(**_normalise_option_names(options))
        else:
            raise TypeMismatchError(Messages.concat_options_type(options))

        if overrides:
            base = replace(base, **_normalise_option_names(overrides))
        return base


def _normalise_option_names(options: Mapping[Any, Any]) -> dict:
    known = {f.name for f in fields(ConcatOptions)}
    normalised = {}
    for name, value in options.items():
        canonical = CONCAT_OPTION_ALIASES.get(name)
        if canonical is None or canonical not in known:
            raise TypeMismatchError(Messages.concat_option(name))
        normalised[canonical] = value
    return normalised


def _is_sunder(name: str) -> bool:
    return (
        len(name) > 2
        and name[0] == name[-1] == "_"
        and name[1] != "_"
        and name[-2] != "_"
    )


@lru_cache(maxsize=32)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


# Thread-local storage for the current validation config
_validation_context = threading.local()

def set_current_validation_config(config: Optional[ValidationConfig]) -> None:
    """Set the validation config used by builders on this thread (None restores defaults)."""
    _validation_context.value = config

def get_current_validation_config() -> ValidationConfig:
    """Get the validation config for this thread, falling back to the defaults."""
    config = getattr(_validation_context, "value", None)
    return config if config is not None else _DEFAULT_VALIDATION_CONFIG


@contextmanager
def validation_config(config: Optional[ValidationConfig] = None, **changes: Any) -> Iterator[ValidationConfig]:
    """
    Temporarily install a validation config on this thread.

    Either pass a complete ValidationConfig or field changes applied to the
    current one. The previous config is restored on exit.
    """
    previous = getattr(_validation_context, "value", None)
    active = config if config is not None else get_current_validation_config()
    if changes:
        active = replace(active, **changes)
    logger.debug(f"Installing validation config: {active}")
    set_current_validation_config(active)
    try:
        yield active
    finally:
        set_current_validation_config(previous)


_DEFAULT_VALIDATION_CONFIG = ValidationConfig()
