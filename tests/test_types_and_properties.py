from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass

import pytest

from guard_clauses import TYPE_TAGS, GuardViolation, against, is_type_tag, type_tag_of
from guard_clauses.against import has_field


@dataclass
class _Point:
    x: int
    y: int


@pytest.mark.parametrize(
    ("value", "tag"),
    [
        (None, "none"),
        (True, "bool"),
        (1, "int"),
        (1.5, "float"),
        (1j, "complex"),
        ("s", "str"),
        (b"b", "bytes"),
        (bytearray(b"b"), "bytes"),
        ([1], "list"),
        ((1,), "tuple"),
        (OrderedDict(), "dict"),
        (frozenset(), "set"),
        (_Point(1, 2), "object"),
    ],
)
def test_type_tag_of(value: object, tag: str) -> None:
    assert type_tag_of(value) == tag


def test_is_type_tag() -> None:
    assert all(is_type_tag(tag) for tag in TYPE_TAGS)
    assert len(TYPE_TAGS) == len(set(TYPE_TAGS)) == 12
    assert TYPE_TAGS[0] == "none"
    assert is_type_tag("integer") is False


def test_of_type_with_tag() -> None:
    with pytest.raises(GuardViolation) as info:
        against.of_type("x", "str", "name")
    assert str(info.value) == "Required input name cannot be of type str."
    assert against.of_type(True, "int") is True


def test_of_type_with_class_uses_isinstance() -> None:
    with pytest.raises(GuardViolation, match="cannot be of type int"):
        against.of_type(True, int)
    point = _Point(1, 2)
    assert against.of_type(point, str) is point


def test_not_of_type() -> None:
    with pytest.raises(GuardViolation) as info:
        against.not_of_type(1, "str", "name")
    assert str(info.value) == "Required input name has to be of type str."
    ids = [1]
    assert against.not_of_type(ids, list) is ids
    assert against.not_of_type(None, "none") is None


def test_unknown_tag_is_a_programming_error() -> None:
    with pytest.raises(ValueError, match="Unknown type tag 'integer'") as info:
        against.of_type(1, "integer")
    assert not isinstance(info.value, GuardViolation)


def test_has_property_on_objects() -> None:
    point = _Point(1, 2)
    with pytest.raises(GuardViolation) as info:
        against.has_property(point, "x", "point")
    assert str(info.value) == "Required input point has an unwanted property x."
    assert against.has_property(point, "z") is point


def test_has_no_property_on_objects() -> None:
    point = _Point(1, 2)
    assert against.has_no_property(point, "y") is point
    with pytest.raises(GuardViolation, match="is missing a property z"):
        against.has_no_property(point, "z")


def test_property_guards_use_keys_for_mappings() -> None:
    payload = {"name": "x"}
    assert against.has_no_property(payload, "name") is payload
    with pytest.raises(GuardViolation):
        against.has_no_property(payload, "keys")
    with pytest.raises(GuardViolation):
        against.has_property(payload, "name")


class _Account:
    currency = "EUR"
    __slots__ = ("balance",)

    def __init__(self) -> None:
        self.balance = 0

    def close(self) -> None:
        self.balance = 0

    @staticmethod
    def open() -> _Account:
        return _Account()


class _Lazy:
    @property
    def total(self) -> int:
        raise ValueError("not loaded")


def test_methods_are_not_properties() -> None:
    account = _Account()
    assert against.has_property(account, "close") is account
    assert against.has_property(account, "open") is account
    with pytest.raises(GuardViolation, match="is missing a property close"):
        against.has_no_property(account, "close")


def test_dunders_are_not_properties() -> None:
    point = _Point(1, 2)
    assert against.has_property(point, "__class__") is point
    assert against.has_property(1, "__doc__") == 1


def test_slots_and_class_attributes_are_properties() -> None:
    account = _Account()
    assert against.has_no_property(account, "balance") is account
    assert against.has_no_property(account, "currency") is account
    with pytest.raises(GuardViolation):
        against.has_property(account, "balance")


def test_property_getters_are_not_run() -> None:
    lazy = _Lazy()
    assert has_field(lazy, "total") is True
    assert against.has_no_property(lazy, "total") is lazy
    with pytest.raises(GuardViolation, match="unwanted property total"):
        against.has_property(lazy, "total")
    with pytest.raises(GuardViolation, match="is missing a property missing"):
        against.has_no_property(lazy, "missing")
