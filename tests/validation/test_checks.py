# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the enum definition checks."""

from typing import Any

from scalarenum import Enum, EnumRegistry
from scalarenum.validation import ValidationError, ValidationResult, ValidationWarning, validate

# ###############
# Test Helpers
# ###############


def _enum(pairs: Any) -> type[Enum]:
    """Create an enum type serving *pairs* from a private registry."""

    class Checked(Enum):
        _registry = EnumRegistry()

        @classmethod
        def provide_pairs(cls) -> Any:
            return pairs

    return Checked


def _name(enum_type: type) -> str:
    return f"{enum_type.__module__}.{enum_type.__qualname__}"


# ###############
# Valid enums
# ###############


def test_valid_enum_has_no_issues() -> None:
    result = validate(_enum({"LOREM": "foo", "IPSUM": 123, "DOLOR": None}))

    assert isinstance(result, ValidationResult)
    assert result.warnings == []
    assert result.errors == []
    assert not result.has_errors


def test_constant_enum_is_checked() -> None:
    class Constants(Enum):
        A = "a"
        B = "b"

    assert not validate(Constants).has_errors


# ###############
# Warnings
# ###############


def test_empty_enum_warns() -> None:
    enum_type = _enum({})
    result = validate(enum_type)

    assert result.warnings == [ValidationWarning(f'Enum class "{_name(enum_type)}" does not define any pairs')]
    assert not result.has_errors


def test_non_identifier_key_warns() -> None:
    enum_type = _enum({"with space": 1, "OK": 2})
    result = validate(enum_type)

    assert result.warnings == [
        ValidationWarning(f'Key "with space" of enum class "{_name(enum_type)}" is not a valid identifier')
    ]


# ###############
# Errors
# ###############


def test_reports_every_duplicate() -> None:
    enum_type = _enum({"A": 1, "B": "1", "C": None, "D": "", "E": 1})
    result = validate(enum_type)
    name = _name(enum_type)

    assert result.errors == [
        ValidationError(f'Duplicate value "1" for key "B" in enum class "{name}". Value 1 is already defined for key "A".'),
        ValidationError(
            f'Duplicate value "" for key "D" in enum class "{name}". Value NULL is already defined for key "C".'
        ),
        ValidationError(f'Duplicate value 1 for key "E" in enum class "{name}". Value 1 is already defined for key "A".'),
    ]


def test_reports_unsupported_values() -> None:
    enum_type = _enum({"A": 1.5, "B": True, "C": "ok"})
    result = validate(enum_type)
    name = _name(enum_type)

    assert result.errors == [
        ValidationError(f'Unsupported float value for key "A" in enum class "{name}"'),
        ValidationError(f'Unsupported boolean value for key "B" in enum class "{name}"'),
    ]


def test_reports_non_mapping_provider() -> None:
    result = validate(_enum(["A"]))
    assert result.has_errors
    assert "must return a mapping" in result.errors[0].message


def test_reports_non_string_keys() -> None:
    enum_type = _enum({1: "a", "B": "b"})
    result = validate(enum_type)

    assert result.errors == [ValidationError(f'Key 1 of enum class "{_name(enum_type)}" is not a string')]


def test_validate_does_not_load_registry() -> None:
    enum_type = _enum({"A": 1, "B": 1})
    validate(enum_type)
    assert not enum_type._registry.is_loaded(enum_type)
