"""
Keyed-mode enumeration constants.

A Constant is the record built for each key of a keyed enumeration. It pairs
the constant's IdentityToken with its payload fields and the behaviour fields
shared by every constant of the enumeration. Field resolution (own payload
first, then behaviour) is computed once, when the constant is built.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from enum_next.constants.constants import ID_FIELD, KEY_FIELD, Messages, SCALAR_FIELD
from enum_next.core.exceptions import ImmutabilityError
from enum_next.core.identity import IdentityToken


class Constant:
    """
    One named member of a keyed enumeration.

    Fields are reachable as attributes (``constant.a``) and as items
    (``constant["a"]``). The declared name and the identity token are exposed
    as ``constant["$key"]`` / ``constant["$id"]`` and, since ``$`` cannot start
    a Python identifier, as the sunder attributes ``_key_`` / ``_id_``.

    Attributes:
        _key_: Name the constant was declared under.
        _id_: IdentityToken minted for this constant.
        _scalar_: True if the payload was kept whole as the ``value`` field.
        _payload_: The scalar payload, or a read-only mapping of the projected members.
        _fields_: Read-only mapping of every resolved field, behaviour included.
    """

    def __init__(
        self,
        key: str,
        token: IdentityToken,
        payload: Any,
        behaviour: Optional[Mapping[str, Any]] = None
    ):
        scalar = not isinstance(payload, Mapping)
        own: Dict[str, Any] = {SCALAR_FIELD: payload} if scalar else dict(payload)

        # Own payload wins over shared behaviour
        resolved: Dict[str, Any] = {}
        for name, value in (behaviour or {}).items():
            if name not in own:
                resolved[name] = value
        resolved.update(own)

        object.__setattr__(self, "_key_", key)
        object.__setattr__(self, "_id_", token)
        object.__setattr__(self, "_scalar_", scalar)
        object.__setattr__(self, "_payload_", payload if scalar else MappingProxyType(own))
        object.__setattr__(self, "_fields_", MappingProxyType(resolved))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        try:
            return object.__getattribute__(self, "_fields_")[name]
        except KeyError:
            raise AttributeError(
                f"Constant {object.__getattribute__(self, '_key_')!r} has no field {name!r}"
            ) from None

    def __getitem__(self, name: str) -> Any:
        if name == KEY_FIELD:
            return self._key_
        if name == ID_FIELD:
            return self._id_
        return self._fields_[name]

    def __contains__(self, name: object) -> bool:
        return name in (KEY_FIELD, ID_FIELD) or name in self._fields_

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields_)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutabilityError(Messages.immutable("Constant", name))

    def __delattr__(self, name: str) -> None:
        raise ImmutabilityError(Messages.immutable("Constant", name))

    def __copy__(self) -> "Constant":
        return self

    def __deepcopy__(self, memo: dict) -> "Constant":
        return self

    def __dir__(self):
        return sorted(set(super().__dir__()) | {name for name in self._fields_ if name.isidentifier()})

    def __repr__(self) -> str:
        return f"<Constant {self._key_}: {dict(self._fields_)!r}>"

    def __str__(self) -> str:
        return str(self._id_)
