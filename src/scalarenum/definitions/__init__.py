# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML enum definition files and the enum types built from them."""

from scalarenum.definitions.builder import build_enum, build_enums
from scalarenum.definitions.config import (
    DEFINITION_FILE_SUFFIXES,
    EnumDefinition,
    EnumDefinitionFile,
    load_enum_definitions,
    parse_enum_definitions,
)

__all__ = [
    "DEFINITION_FILE_SUFFIXES",
    "EnumDefinition",
    "EnumDefinitionFile",
    "build_enum",
    "build_enums",
    "load_enum_definitions",
    "parse_enum_definitions",
]
