# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lazy, per-type cache of the lookup maps of enum types.

Each enum type owns one registry entry holding:

* ``key_to_value`` – the provider's pairs in declaration order,
* ``key_map`` – every key mapped to ``True`` (existence checks that work even
  when a key maps to ``None``),
* ``value_to_key`` – coerced value to key, built on the first value lookup,
* ``instances`` – the singleton instances of instantiable enum types.

The key maps are computed once. The value map is only stored once it has been
built successfully, so a definition with duplicate values fails the same way
on every value lookup while key lookups keep working.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from scalarenum.core.coercion import CoercedValue, coerce_value, is_scalar_value, value_kind
from scalarenum.core.errors import DuplicateValueError, EnumDefinitionError, UnsupportedValueKindError
from scalarenum.core.pairs import PairSource

logger = logging.getLogger("scalarenum.registry")

T = TypeVar("T")

# ###############
# Public Interface
# ###############


def enum_name(enum_type: type) -> str:
    """Return the qualified name of *enum_type* as used in error messages."""
    return f"{enum_type.__module__}.{enum_type.__qualname__}"


class EnumRegistry:
    """Holds the lazily built lookup maps and instance caches of enum types.

    All methods are safe to call from several threads. The first access to a
    given enum type builds its entry under that entry's lock; concurrent
    callers wait and then share the result.
    """

    def __init__(self) -> None:
        self._entries: dict[type, _RegistryEntry] = {}
        self._lock = threading.Lock()

    def key_to_value(self, enum_type: type[PairSource]) -> dict[str, Any]:
        """Return the cached key-to-value map of *enum_type*, loading it on first use.

        Raises:
            EnumDefinitionError: If the provider does not return a mapping
                with string keys.
        """
        entry = self._entry(enum_type)
        if entry.key_to_value is None:
            with entry.lock:
                if entry.key_to_value is None:
                    self._load_keys(enum_type, entry)
        assert entry.key_to_value is not None
        return entry.key_to_value

    def key_map(self, enum_type: type[PairSource]) -> dict[str, bool]:
        """Return the cached key-existence map of *enum_type*."""
        self.key_to_value(enum_type)
        entry = self._entry(enum_type)
        assert entry.key_map is not None
        return entry.key_map

    def value_to_key(self, enum_type: type[PairSource]) -> dict[CoercedValue, str]:
        """Return the cached coerced-value-to-key map of *enum_type*.

        Raises:
            UnsupportedValueKindError: If a declared value is not a str, int or None.
            DuplicateValueError: If two keys share a value after coercion.
        """
        key_to_value = self.key_to_value(enum_type)
        entry = self._entry(enum_type)
        if entry.value_to_key is None:
            with entry.lock:
                if entry.value_to_key is None:
                    entry.value_to_key = _build_value_map(enum_type, key_to_value)
                    logger.debug("Built value map for %s", enum_name(enum_type))
        return entry.value_to_key

    def instance(self, enum_type: type[PairSource], key: str, factory: Callable[[str, Any], T]) -> T:
        """Return the cached instance of *enum_type* for *key*.

        On first request the instance is created with ``factory(key, value)``.
        The caller must have checked that *key* exists.
        """
        entry = self._entry(enum_type)
        existing = entry.instances.get(key)
        if existing is not None:
            return existing
        with entry.lock:
            existing = entry.instances.get(key)
            if existing is None:
                existing = factory(key, self.key_to_value(enum_type)[key])
                entry.instances[key] = existing
        return existing

    def is_loaded(self, enum_type: type) -> bool:
        """Return True if the key maps of *enum_type* have been built."""
        entry = self._entries.get(enum_type)
        return entry is not None and entry.key_to_value is not None

    def forget(self, enum_type: type) -> None:
        """Drop every cached map and instance of *enum_type*."""
        with self._lock:
            self._entries.pop(enum_type, None)

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._entries.clear()

    def _entry(self, enum_type: type) -> _RegistryEntry:
        entry = self._entries.get(enum_type)
        if entry is None:
            with self._lock:
                entry = self._entries.setdefault(enum_type, _RegistryEntry())
        return entry

    def _load_keys(self, enum_type: type[PairSource], entry: _RegistryEntry) -> None:
        pairs = enum_type.provide_pairs()
        if not isinstance(pairs, Mapping):
            raise EnumDefinitionError(
                f'Pair provider of enum class "{enum_name(enum_type)}" must return a mapping, '
                f"got {type(pairs).__name__}"
            )
        key_to_value = dict(pairs)
        for key in key_to_value:
            if not isinstance(key, str):
                raise EnumDefinitionError(
                    f'Enum keys must be strings, but found {type(key).__name__} key {key!r} '
                    f'in enum class "{enum_name(enum_type)}"'
                )
        entry.key_map = dict.fromkeys(key_to_value, True)
        entry.key_to_value = key_to_value
        logger.debug("Loaded %d pair(s) for %s", len(key_to_value), enum_name(enum_type))


default_registry = EnumRegistry()
"""The registry used by every enum type that does not set its own."""


# ################
# Implementation
# ################


@dataclass
class _RegistryEntry:
    """The cached state of a single enum type."""

    key_to_value: dict[str, Any] | None = None
    key_map: dict[str, bool] | None = None
    value_to_key: dict[CoercedValue, str] | None = None
    instances: dict[str, Any] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)


def _build_value_map(enum_type: type, key_to_value: dict[str, Any]) -> dict[CoercedValue, str]:
    """Invert *key_to_value* under coercion, rejecting unsupported kinds and duplicates."""
    value_to_key: dict[CoercedValue, str] = {}
    for key, value in key_to_value.items():
        if not is_scalar_value(value):
            raise UnsupportedValueKindError(
                f"Only integer, string and null values are allowed, but found {value_kind(value)} value "
                f'for key "{key}" in enum class "{enum_name(enum_type)}"',
                value=value,
                enum_name=enum_name(enum_type),
            )
        coerced = coerce_value(value)
        existing_key = value_to_key.get(coerced)
        if existing_key is not None:
            logger.debug("Duplicate value for key %s in %s", key, enum_name(enum_type))
            raise DuplicateValueError(
                key=key,
                value=value,
                existing_key=existing_key,
                existing_value=key_to_value[existing_key],
                enum_name=enum_name(enum_type),
            )
        value_to_key[coerced] = key
    return value_to_key
