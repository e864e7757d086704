from __future__ import annotations

from typing import Literal, TypeGuard, get_args

TypeTag = Literal[
    "none",
    "bool",
    "int",
    "float",
    "complex",
    "str",
    "bytes",
    "list",
    "tuple",
    "dict",
    "set",
    "object",
]

TYPE_TAGS: tuple[TypeTag, ...] = get_args(TypeTag)


def is_type_tag(value: str) -> TypeGuard[TypeTag]:
    return value in TYPE_TAGS


def type_tag_of(value: object) -> TypeTag:
    """Return the closed runtime tag for *value*.

    Subclasses map to their builtin base; ``bool`` is checked before ``int``.
    Anything outside the builtin scalars and containers is ``"object"``.
    """
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, complex):
        return "complex"
    if isinstance(value, str):
        return "str"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, list):
        return "list"
    if isinstance(value, tuple):
        return "tuple"
    if isinstance(value, dict):
        return "dict"
    if isinstance(value, (set, frozenset)):
        return "set"
    return "object"
