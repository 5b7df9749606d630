# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Instantiable enumerations with one cached instance per key-value pair."""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from scalarenum.core.errors import UnknownFactoryError
from scalarenum.core.registry import enum_name
from scalarenum.model.enum_static import Enum

# ###############
# Public Interface
# ###############


class EnumObject(Enum):
    """Base enumeration class that supports instantiation.

    Instances are obtained through :meth:`from_key`, :meth:`from_value` or
    :meth:`factory` and are cached, so there is exactly one instance per
    key-value pair and instances can be compared with ``is``::

        class Color(EnumObject):
            RED = "red"
            GREEN = "green"

        assert Color.from_key("RED") is Color.from_value("red")

    Instances are immutable, and copying or pickling one yields the cached
    instance again.
    """

    __slots__ = ("_key", "_value")

    _key: str
    _value: Any

    def __new__(cls, *args: Any, **kwargs: Any) -> EnumObject:
        raise TypeError(
            f"{cls.__name__} cannot be instantiated directly, use {cls.__name__}.from_key() or "
            f"{cls.__name__}.from_value()"
        )

    @classmethod
    def from_key(cls, key: str) -> Any:
        """Return the instance for *key*.

        Raises:
            InvalidKeyError: If *key* is not defined.
        """
        cls.ensure_key_exists(key)
        return cls._registry.instance(cls, key, cls._create)

    @classmethod
    def from_value(cls, value: Any) -> Any:
        """Return the instance whose value matches *value* after coercion.

        Raises:
            InvalidValueError: If *value* is not defined.
        """
        return cls._registry.instance(cls, cls.get_key(value), cls._create)

    @classmethod
    def factory(cls, name: str) -> Any:
        """Return the instance for the key *name*.

        Unlike :meth:`from_key`, an unknown name is reported as a call to an
        undefined factory method.

        Raises:
            UnknownFactoryError: If *name* is not a defined key.
        """
        if not cls.has_key(name):
            raise UnknownFactoryError(name, enum_name(cls))
        return cls._registry.instance(cls, name, cls._create)

    def key(self) -> str:
        """Get key of this key-value pair."""
        return self._key

    def value(self) -> Any:
        """Get value of this key-value pair."""
        return self._value

    def pair(self) -> dict[str, Any]:
        """Get this key-value pair as a single-entry dict."""
        return {self._key: self._value}

    def is_key(self, key: str) -> bool:
        """Compare key of this key-value pair with another key."""
        return self._key == key

    def equals(self, value: Any) -> bool:
        """Compare value of this key-value pair with another value, using coercion."""
        return self._key == type(self).find_key(value)

    def debug_info(self) -> dict[str, Any]:
        return {"key": self._key, "value": self._value}

    def __str__(self) -> str:
        return "" if self._value is None else str(self._value)

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}.{self._key}: {self._value!r}>"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __copy__(self) -> EnumObject:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> EnumObject:
        return self

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return type(self).from_key, (self._key,)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        """Validate model fields from enum values and serialise them back to values."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(_serialize),
        )

    @classmethod
    def _create(cls, key: str, value: Any) -> EnumObject:
        instance = object.__new__(cls)
        object.__setattr__(instance, "_key", key)
        object.__setattr__(instance, "_value", value)
        return instance

    @classmethod
    def _validate(cls, value: Any) -> EnumObject:
        if isinstance(value, cls):
            return value
        return cls.from_value(value)


# ################
# Implementation
# ################


def _serialize(instance: EnumObject) -> Any:
    return instance.value()
