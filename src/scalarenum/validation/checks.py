# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Definition checks for enum types.

Unlike the registry, which stops at the first defect it meets, these checks
inspect every pair of an enum type and report all defects at once. They never
touch the registry caches.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from scalarenum.core.coercion import CoercedValue, coerce_value, dump_value, is_scalar_value, value_kind
from scalarenum.core.errors import EnumDefinitionError
from scalarenum.core.registry import enum_name
from scalarenum.model.enum_static import Enum

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue: the enum type works, but is probably not what was meant.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A defect that makes value lookups on the enum type fail.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the definition checks.

    Attributes:
        warnings: Non-fatal issues found.
        errors: Defects that make the enum type unusable for value lookups.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def validate(enum_type: type[Enum]) -> ValidationResult:
    """Check the pairs of *enum_type* for definition defects.

    Checks performed:

    1. **Provider output** (error): the pair provider must return a mapping
       with string keys.
    2. **Unsupported values** (error): every value must be a ``str``, ``int``
       or ``None``.
    3. **Duplicate values** (error): no two keys may share a value after
       coercion; every colliding key is reported against the first key.
    4. **Empty enum** (warning): an enum type without pairs.
    5. **Key names** (warning): keys that are not valid identifiers cannot be
       declared as class constants.

    Args:
        enum_type: The enum type to check.

    Returns:
        A :class:`ValidationResult`; an empty result means no issues were found.
    """
    name = enum_name(enum_type)
    try:
        pairs = enum_type.provide_pairs()
    except EnumDefinitionError as exc:
        return ValidationResult(errors=[ValidationError(str(exc))])

    if not isinstance(pairs, Mapping):
        return ValidationResult(
            errors=[ValidationError(f'Pair provider of enum class "{name}" must return a mapping')]
        )
    pairs = dict(pairs)

    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    bad_keys = [key for key in pairs if not isinstance(key, str)]
    if bad_keys:
        errors.extend(ValidationError(f'Key {key!r} of enum class "{name}" is not a string') for key in bad_keys)
        return ValidationResult(warnings=warnings, errors=errors)

    if not pairs:
        warnings.append(ValidationWarning(f'Enum class "{name}" does not define any pairs'))

    warnings.extend(_check_key_names(name, pairs))
    errors.extend(_check_values(name, pairs.items()))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_key_names(name: str, pairs: dict[str, object]) -> list[ValidationWarning]:
    return [
        ValidationWarning(f'Key "{key}" of enum class "{name}" is not a valid identifier')
        for key in pairs
        if not key.isidentifier()
    ]


def _check_values(name: str, items: Iterable[tuple[str, object]]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    first_seen: dict[CoercedValue, tuple[str, object]] = {}
    for key, value in items:
        if not is_scalar_value(value):
            errors.append(
                ValidationError(
                    f'Unsupported {value_kind(value)} value for key "{key}" in enum class "{name}"'
                )
            )
            continue
        coerced = coerce_value(value)
        if coerced in first_seen:
            existing_key, existing_value = first_seen[coerced]
            errors.append(
                ValidationError(
                    f'Duplicate value {dump_value(value)} for key "{key}" in enum class "{name}". '
                    f'Value {dump_value(existing_value)} is already defined for key "{existing_key}".'
                )
            )
            continue
        first_seen[coerced] = (key, value)
    return errors
