# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for constant discovery and the PairSource protocol."""

from scalarenum import Enum, PairSource
from scalarenum.core.pairs import discover_constants


class _Base:
    FIRST = 1
    SECOND = 2


class _Child(_Base):
    THIRD = 3
    FIRST = "one"
    _HIDDEN = "ignored"
    __MANGLED = "ignored"

    def method(self) -> None: ...

    @classmethod
    def factory_method(cls) -> None: ...

    @staticmethod
    def helper() -> None: ...

    @property
    def prop(self) -> int:
        return 0

    class Nested:
        pass


def test_discovers_public_constants_in_declaration_order() -> None:
    """Public constants are collected in declaration order."""
    assert discover_constants(_Base) == {"FIRST": 1, "SECOND": 2}
    assert list(discover_constants(_Base)) == ["FIRST", "SECOND"]


def test_override_keeps_position_and_takes_subclass_value() -> None:
    """An overridden constant keeps its position with the new value."""
    constants = discover_constants(_Child)
    assert list(constants) == ["FIRST", "SECOND", "THIRD"]
    assert constants["FIRST"] == "one"


def test_skips_private_members_methods_and_descriptors() -> None:
    """Private names, methods and descriptors are not constants."""
    constants = discover_constants(_Child)
    assert "_HIDDEN" not in constants
    assert "_Child__MANGLED" not in constants
    for name in ("method", "factory_method", "helper", "prop", "Nested"):
        assert name not in constants


def test_enum_base_classes_contribute_no_constants() -> None:
    """The Enum base class declares no pairs."""
    assert discover_constants(Enum) == {}


def test_enum_types_are_pair_sources() -> None:
    """Enum types satisfy the PairSource protocol."""
    class Sample(Enum):
        A = "a"

    assert isinstance(Sample, PairSource)
    assert Sample.provide_pairs() == {"A": "a"}
