# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Providers of the raw key-value pairs of an enum type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

# ###############
# Public Interface
# ###############


@runtime_checkable
class PairSource(Protocol):
    """Anything that can supply the declared pairs of an enum type.

    Keys must be unique strings. Values should be ``str``, ``int`` or
    ``None``; other kinds are reported when the value map is built.
    """

    @classmethod
    def provide_pairs(cls) -> Mapping[str, object]: ...


def discover_constants(cls: type) -> dict[str, object]:
    """Collect the public constants declared on *cls* and its bases.

    Attributes are gathered from the most basic class down to *cls*, in
    declaration order. A name overridden in a subclass keeps its original
    position and takes the subclass value. Names starting with an underscore,
    callables, and ``classmethod``/``staticmethod``/``property`` objects are
    not constants and are skipped.

    Args:
        cls: The enum type to inspect.

    Returns:
        An ordered mapping from constant name to its value.
    """
    constants: dict[str, object] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if _is_constant(name, value):
                constants[name] = value
    return constants


# ################
# Implementation
# ################


def _is_constant(name: str, value: object) -> bool:
    if name.startswith("_"):
        return False
    if isinstance(value, (classmethod, staticmethod, property)):
        return False
    return not callable(value)
