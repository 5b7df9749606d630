# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Turn enum definitions into Enum and EnumObject types."""

from __future__ import annotations

from typing import Any

from scalarenum.core.registry import EnumRegistry, default_registry
from scalarenum.definitions.config import EnumDefinition, EnumDefinitionFile
from scalarenum.model.enum_object import EnumObject
from scalarenum.model.enum_static import Enum

# ###############
# Public Interface
# ###############


def build_enum(
    definition: EnumDefinition,
    *,
    module: str = __name__,
    registry: EnumRegistry | None = None,
) -> type[Enum]:
    """Create the enum type described by *definition*.

    The pairs are served through ``provide_pairs`` rather than class
    attributes, so keys that clash with method names are allowed.

    Args:
        definition: The validated definition.
        module: Value of ``__module__`` for the new type; it appears in
            error messages as part of the qualified enum name.
        registry: Registry to cache the new type in (default: the shared one).

    Returns:
        A new subclass of :class:`Enum` or :class:`EnumObject`.
    """
    base: type[Enum] = EnumObject if definition.kind == "object" else Enum
    pairs = dict(definition.pairs)

    def provide_pairs(cls: type[Enum]) -> dict[str, Any]:
        return dict(pairs)

    namespace: dict[str, Any] = {
        "__module__": module,
        "__qualname__": definition.name,
        "__doc__": definition.description,
        "provide_pairs": classmethod(provide_pairs),
        "_registry": registry or default_registry,
    }
    if base is EnumObject:
        namespace["__slots__"] = ()
    return type(definition.name, (base,), namespace)


def build_enums(
    definition_file: EnumDefinitionFile,
    *,
    module: str = __name__,
    registry: EnumRegistry | None = None,
) -> dict[str, type[Enum]]:
    """Create every enum type of *definition_file*, keyed by name in file order."""
    return {
        definition.name: build_enum(definition, module=module, registry=registry)
        for definition in definition_file.enums
    }
