# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the value coercion rules."""

import pytest

from scalarenum.core.coercion import (
    INT_MAX,
    INT_MIN,
    coerce_value,
    dump_value,
    is_scalar_value,
    value_kind,
    values_equal,
)

# ###############
# Supported kinds
# ###############


@pytest.mark.parametrize("value", ["", "foo", 0, -5, 123, None])
def test_scalar_values_are_supported(value: object) -> None:
    """str, int and None are supported kinds."""
    assert is_scalar_value(value)


@pytest.mark.parametrize("value", [True, False, 1.5, [], {}, ("a",), b"x"])
def test_other_kinds_are_not_supported(value: object) -> None:
    """bool, float and containers are not supported."""
    assert not is_scalar_value(value)


def test_coerce_rejects_unsupported_kind() -> None:
    """coerce_value() raises TypeError for unsupported kinds."""
    with pytest.raises(TypeError, match="float"):
        coerce_value(1.5)


# ###############
# Coercion
# ###############


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("", ""),
        ("0", 0),
        ("123", 123),
        ("-42", -42),
        (str(INT_MAX), INT_MAX),
        (str(INT_MIN), INT_MIN),
        (7, 7),
    ],
)
def test_coercible_values(value: object, expected: object) -> None:
    """None and canonical integer strings are normalised."""
    result = coerce_value(value)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "value",
    [" ", "0123", "+1", "-0", " 1", "1 ", "1.0", "1e3", "abc", "١٢", str(INT_MAX + 1), str(INT_MIN - 1)],
)
def test_non_canonical_strings_stay_strings(value: str) -> None:
    """Strings that are not canonical integers are left alone."""
    assert coerce_value(value) == value


def test_values_equal_follows_coercion() -> None:
    """values_equal() compares coerced forms only."""
    assert values_equal(None, "")
    assert values_equal(123, "123")
    assert values_equal("foo", "foo")
    assert not values_equal(None, " ")
    assert not values_equal(123, "0123")
    assert not values_equal(0, None)
    assert not values_equal(1, True)


# ###############
# Diagnostics
# ###############


def test_dump_value() -> None:
    """dump_value() quotes strings, prints NULL and bare integers."""
    assert dump_value("foo") == '"foo"'
    assert dump_value("") == '""'
    assert dump_value(None) == "NULL"
    assert dump_value(123) == "123"
    assert dump_value(-1) == "-1"
    assert dump_value(1.5) == "1.5"


def test_value_kind() -> None:
    """value_kind() names the kind used in diagnostics."""
    assert value_kind("x") == "string"
    assert value_kind(1) == "integer"
    assert value_kind(None) == "NULL"
    assert value_kind(True) == "boolean"
    assert value_kind(1.5) == "float"
    assert value_kind([]) == "list"
