# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value coercion rules used for value lookup, equality and uniqueness.

Enum values are compared the way associative-array keys are normalised in
loosely typed languages: ``None`` and ``""`` are the same value, and a string
holding a canonical decimal integer is the same value as that integer.
Nothing else is coerced, so ``" "`` is not ``None`` and ``"0123"`` is not
``123``.
"""

from __future__ import annotations

import re

# ###############
# Public Interface
# ###############

ScalarValue = str | int | None
"""A value an enum pair may hold."""

CoercedValue = str | int
"""The canonical form of a scalar value, used as a lookup key."""

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def is_scalar_value(value: object) -> bool:
    """Return True if *value* is one of the supported kinds: str, int or None.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if value is None or isinstance(value, str):
        return True
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_value(value: object) -> CoercedValue:
    """Return the canonical lookup form of *value*.

    Raises:
        TypeError: If *value* is not a supported scalar kind.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return _coerce_string(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"Cannot coerce {value_kind(value)} value {value!r}")


def values_equal(a: object, b: object) -> bool:
    """Return True if *a* and *b* are the same value after coercion.

    Unsupported kinds are never equal to anything.
    """
    if not (is_scalar_value(a) and is_scalar_value(b)):
        return False
    return coerce_value(a) == coerce_value(b)


def dump_value(value: object) -> str:
    """Render *value* for diagnostics: ``"str"``, ``NULL`` or a bare number."""
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "NULL"
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return repr(value)


def value_kind(value: object) -> str:
    """Return the kind name of *value* as used in error messages."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "integer"
    return type(value).__name__


# ################
# Implementation
# ################

_CANONICAL_INT = re.compile(r"0|-?[1-9][0-9]*")


def _coerce_string(value: str) -> CoercedValue:
    """Convert a canonical decimal integer string to int, leave anything else alone."""
    if not _CANONICAL_INT.fullmatch(value):
        return value
    number = int(value)
    if INT_MIN <= number <= INT_MAX:
        return number
    return value
