# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Enumeration base classes: class-level lookups and cached instances."""

from scalarenum.model.enum_object import EnumObject
from scalarenum.model.enum_static import Enum

__all__ = [
    "Enum",
    "EnumObject",
]
