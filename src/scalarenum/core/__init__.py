# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value coercion, pair providers, errors and the lazy enum registry."""

from scalarenum.core.coercion import (
    CoercedValue,
    ScalarValue,
    coerce_value,
    dump_value,
    is_scalar_value,
    value_kind,
    values_equal,
)
from scalarenum.core.errors import (
    DuplicateValueError,
    EnumDefinitionError,
    EnumError,
    InvalidKeyError,
    InvalidValueError,
    UnknownFactoryError,
    UnsupportedValueKindError,
)
from scalarenum.core.pairs import PairSource, discover_constants
from scalarenum.core.registry import EnumRegistry, default_registry, enum_name

__all__ = [
    # Coercion
    "CoercedValue",
    "ScalarValue",
    "coerce_value",
    "dump_value",
    "is_scalar_value",
    "value_kind",
    "values_equal",
    # Errors
    "DuplicateValueError",
    "EnumDefinitionError",
    "EnumError",
    "InvalidKeyError",
    "InvalidValueError",
    "UnknownFactoryError",
    "UnsupportedValueKindError",
    # Providers and registry
    "PairSource",
    "discover_constants",
    "EnumRegistry",
    "default_registry",
    "enum_name",
]
