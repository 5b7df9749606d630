# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base class for enumerations built from class constants."""

from __future__ import annotations

from typing import Any, ClassVar

from scalarenum.core.coercion import CoercedValue, coerce_value, is_scalar_value
from scalarenum.core.errors import InvalidKeyError, InvalidValueError, UnsupportedValueKindError
from scalarenum.core.pairs import discover_constants
from scalarenum.core.registry import EnumRegistry, default_registry, enum_name

# ###############
# Public Interface
# ###############


class Enum:
    """Base enumeration class.

    Subclasses declare public class constants, which become the keys and
    values of the enumeration::

        class Status(Enum):
            ACTIVE = "active"
            RETRIES = 3
            UNSET = None

    Override :meth:`provide_pairs` to take the pairs from somewhere else.

    - only ``str``, ``int`` and ``None`` values are supported
    - values are looked up with the coercion rules of
      :mod:`scalarenum.core.coercion`
    - values must be unique after coercion
    """

    _registry: ClassVar[EnumRegistry] = default_registry

    @classmethod
    def provide_pairs(cls) -> dict[str, Any]:
        """Return the key-value pairs of this enum, in declaration order."""
        return discover_constants(cls)

    @classmethod
    def has_key(cls, key: str) -> bool:
        return key in cls._registry.key_map(cls)

    @classmethod
    def has_value(cls, value: Any) -> bool:
        """Check whether *value* (after coercion) is defined in this enum."""
        coerced = _lookup_key(value)
        return coerced is not None and coerced in cls._registry.value_to_key(cls)

    @classmethod
    def get_value(cls, key: str) -> Any:
        """Return the value declared for *key*.

        Raises:
            InvalidKeyError: If *key* is not defined.
        """
        cls.ensure_key_exists(key)
        return cls._registry.key_to_value(cls)[key]

    @classmethod
    def get_key(cls, value: Any) -> str:
        """Return the key whose value matches *value* after coercion.

        Raises:
            InvalidValueError: If *value* is not defined.
            DuplicateValueError: If the enum declares duplicate values.
        """
        cls.ensure_value_exists(value)
        return cls._registry.value_to_key(cls)[coerce_value(value)]

    @classmethod
    def find_value(cls, key: str) -> Any:
        """Return the value declared for *key*, or None if it is not defined."""
        try:
            return cls.get_value(key)
        except InvalidKeyError:
            return None

    @classmethod
    def find_key(cls, value: Any) -> str | None:
        """Return the key for *value*, or None if it is not defined.

        Definition defects (duplicate or unsupported values) still raise.
        """
        try:
            return cls.get_key(value)
        except UnsupportedValueKindError:
            raise
        except InvalidValueError:
            return None

    @classmethod
    def get_keys(cls) -> list[str]:
        return list(cls._registry.key_to_value(cls))

    @classmethod
    def get_values(cls) -> list[Any]:
        return list(cls._registry.key_to_value(cls).values())

    @classmethod
    def get_map(cls) -> dict[str, Any]:
        """Return a copy of the key-to-value map, in declaration order."""
        return dict(cls._registry.key_to_value(cls))

    @classmethod
    def get_key_map(cls) -> dict[str, bool]:
        return dict(cls._registry.key_map(cls))

    @classmethod
    def get_value_map(cls) -> dict[CoercedValue, str]:
        """Return a copy of the coerced-value-to-key map.

        Note that the map keys are the coerced values (``None`` appears as
        ``""`` and numeric strings as integers).
        """
        return dict(cls._registry.value_to_key(cls))

    @classmethod
    def get_pair(cls, value: Any) -> dict[str, Any]:
        """Return ``{key: value}`` for the pair matching *value*.

        The returned value is the declared one, not the given one.
        """
        key = cls.get_key(value)
        return {key: cls._registry.key_to_value(cls)[key]}

    @classmethod
    def get_pair_by_key(cls, key: str) -> dict[str, Any]:
        return {key: cls.get_value(key)}

    @classmethod
    def count(cls) -> int:
        return len(cls._registry.key_to_value(cls))

    @classmethod
    def ensure_key_exists(cls, key: str) -> None:
        """Raise InvalidKeyError if *key* is not defined."""
        if not cls.has_key(key):
            raise InvalidKeyError(key, enum_name(cls), cls.get_keys())

    @classmethod
    def ensure_value_exists(cls, value: Any) -> None:
        """Raise InvalidValueError if *value* is not defined."""
        if not cls.has_value(value):
            raise InvalidValueError.undefined(value, enum_name(cls), cls.get_values())


# ################
# Implementation
# ################


def _lookup_key(value: Any) -> CoercedValue | None:
    """Coerce a lookup value, returning None for unsupported kinds."""
    if not is_scalar_value(value):
        return None
    return coerce_value(value)
