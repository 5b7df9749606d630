# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for enum definition files.

A definition file declares one or more enums::

    enums:
      - name: Color
        kind: object
        pairs:
          RED: red
          GREEN: 2
          NONE: null
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator

from scalarenum.core.errors import EnumDefinitionError

logger = logging.getLogger("scalarenum.definitions")

# ###############
# Public Interface
# ###############

DEFINITION_FILE_SUFFIXES = (".yaml", ".yml")


class EnumDefinition(BaseModel):
    """A single enum declared in a definition file.

    Attributes:
        name: Class name of the generated enum type.
        kind: ``"static"`` builds an :class:`~scalarenum.Enum`, ``"object"``
            an instantiable :class:`~scalarenum.EnumObject`.
        description: Optional docstring of the generated type.
        pairs: Keys and values in declaration order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: StrictStr
    kind: Literal["static", "object"] = "static"
    description: str | None = None
    pairs: dict[StrictStr, StrictInt | StrictStr | None] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_name(self) -> EnumDefinition:
        if not self.name.isidentifier():
            raise ValueError(f"enum name '{self.name}' is not a valid identifier")
        return self


class EnumDefinitionFile(BaseModel):
    """Top-level model of a definition file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    enums: list[EnumDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_names(self) -> EnumDefinitionFile:
        seen: set[str] = set()
        for definition in self.enums:
            if definition.name in seen:
                raise ValueError(f"duplicate enum name '{definition.name}'")
            seen.add(definition.name)
        return self

    def get(self, name: str) -> EnumDefinition | None:
        """Return the definition named *name*, or None."""
        for definition in self.enums:
            if definition.name == name:
                return definition
        return None


def load_enum_definitions(path: Path) -> EnumDefinitionFile:
    """Load and validate an enum definition file.

    An empty file is treated as a file without enums.

    Args:
        path: Path to the YAML definition file.

    Returns:
        A validated EnumDefinitionFile instance.

    Raises:
        EnumDefinitionError: If the file cannot be read, contains invalid
            YAML, or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise EnumDefinitionError(f"Enum definition file not found: {path}") from None
    except OSError as exc:
        raise EnumDefinitionError(f"Cannot read enum definition file '{path}': {exc}") from exc

    definitions = parse_enum_definitions(text, source_label=str(path))
    logger.debug("Loaded %d enum definition(s) from %s", len(definitions.enums), path)
    return definitions


def parse_enum_definitions(text: str, source_label: str = "<string>") -> EnumDefinitionFile:
    """Parse definition YAML text into an EnumDefinitionFile.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        EnumDefinitionError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EnumDefinitionError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise EnumDefinitionError(f"{source_label}: enum definition file must be a YAML mapping")

    try:
        return EnumDefinitionFile.model_validate(data)
    except ValidationError as exc:
        raise EnumDefinitionError(f"Invalid enum definition file {source_label}: {exc}") from exc
