# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by all enum types."""

from __future__ import annotations

from collections.abc import Sequence

from scalarenum.core.coercion import dump_value

# ###############
# Public Interface
# ###############


class EnumError(Exception):
    """Base class for every error raised by scalarenum."""


class EnumDefinitionError(EnumError):
    """Raised when an enum definition (provider output or definition file) is malformed."""


class InvalidKeyError(EnumError, LookupError):
    """Raised when a key is not defined in an enum type.

    Attributes:
        key: The requested key.
        enum_name: Qualified name of the enum type.
        known_keys: All declared keys, in declaration order.
    """

    def __init__(self, key: str, enum_name: str, known_keys: Sequence[str]) -> None:
        self.key = key
        self.enum_name = enum_name
        self.known_keys = list(known_keys)
        super().__init__(
            f'The key "{key}" is not defined in enum class "{enum_name}", known keys: {", ".join(self.known_keys)}'
        )


class InvalidValueError(EnumError, ValueError):
    """Raised when a value is not defined in an enum type or has an unsupported kind.

    Attributes:
        value: The offending value, as given.
        enum_name: Qualified name of the enum type.
        known_values: All declared values, in declaration order. Empty when
            the error reports an unsupported value kind.
    """

    def __init__(
        self,
        message: str,
        *,
        value: object,
        enum_name: str,
        known_values: Sequence[object] = (),
    ) -> None:
        self.value = value
        self.enum_name = enum_name
        self.known_values = list(known_values)
        super().__init__(message)

    @classmethod
    def undefined(cls, value: object, enum_name: str, known_values: Sequence[object]) -> InvalidValueError:
        """Build the error reported when *value* is not one of *known_values*."""
        dumped = ", ".join(dump_value(v) for v in known_values)
        return cls(
            f'The value {dump_value(value)} is not defined in enum class "{enum_name}", known values: {dumped}',
            value=value,
            enum_name=enum_name,
            known_values=known_values,
        )


class UnsupportedValueKindError(InvalidValueError):
    """Raised when an enum type declares a value that is not a str, int or None.

    Like :class:`DuplicateValueError`, this is a defect in the enum definition;
    lookups never report it as a miss.
    """


class DuplicateValueError(EnumError):
    """Raised when two keys of one enum type resolve to the same coerced value.

    This is a defect in the enum definition itself, never a runtime miss.

    Attributes:
        key: The later key that collided.
        value: The later key's declared value.
        existing_key: The first key registered for the coerced value.
        existing_value: The first key's declared value.
        enum_name: Qualified name of the enum type.
    """

    def __init__(
        self,
        key: str,
        value: object,
        existing_key: str,
        existing_value: object,
        enum_name: str,
    ) -> None:
        self.key = key
        self.value = value
        self.existing_key = existing_key
        self.existing_value = existing_value
        self.enum_name = enum_name
        super().__init__(
            f'Duplicate value {dump_value(value)} for key "{key}" in enum class "{enum_name}". '
            f'Value {dump_value(existing_value)} is already defined for key "{existing_key}".'
        )


class UnknownFactoryError(EnumError, AttributeError):
    """Raised when a named factory lookup does not match any declared key."""

    def __init__(self, name: str, enum_name: str) -> None:
        self.name = name
        self.enum_name = enum_name
        super().__init__(f"Call to undefined static method {enum_name}.{name}()")
