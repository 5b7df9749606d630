# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""ScalarEnum - enumerations of scalar key-value pairs derived from class constants."""

from scalarenum.core import (
    DuplicateValueError,
    EnumDefinitionError,
    EnumError,
    EnumRegistry,
    InvalidKeyError,
    InvalidValueError,
    PairSource,
    UnknownFactoryError,
    UnsupportedValueKindError,
    default_registry,
    dump_value,
)
from scalarenum.model import Enum, EnumObject

__all__ = [
    "Enum",
    "EnumObject",
    "EnumRegistry",
    "PairSource",
    "default_registry",
    "dump_value",
    # Errors
    "EnumError",
    "EnumDefinitionError",
    "InvalidKeyError",
    "InvalidValueError",
    "DuplicateValueError",
    "UnknownFactoryError",
    "UnsupportedValueKindError",
]
