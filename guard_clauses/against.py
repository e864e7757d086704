"""Guard functions.

Every guard returns its input unchanged when the guarded condition is not
met, so calls chain inline at the top of a function body::

    from guard_clauses import against

    def transfer(account: Account | None, amount: int) -> None:
        account = against.null(account, "account")
        amount = against.negative_or_zero(amount, "amount")

When the condition is met a :class:`~guard_clauses.errors.GuardViolation` is
raised. Its text is ``message`` when given, otherwise a default built from
``label`` and the guard's operands. Composed guards run their checks left to
right and raise the first failure.
"""

from __future__ import annotations

import inspect
import numbers
import re
from collections.abc import Callable, Container, Mapping, Sized
from typing import TypeVar

from guard_clauses.errors import GuardViolation
from guard_clauses.models import TYPE_TAGS, is_type_tag, type_tag_of

T = TypeVar("T")
Num = TypeVar("Num", int, float)
SizedT = TypeVar("SizedT", bound=Sized)
ContainerT = TypeVar("ContainerT", bound=Container[object])

_MISSING = object()


def _input(label: str | None) -> str:
    return f"Required input {label}" if label else "Required input"


def _inputs(label: str | None) -> str:
    return f"Required inputs {label}" if label else "Required inputs"


def _violation(
    guard: str, default: str, label: str | None, message: str | None
) -> GuardViolation:
    return GuardViolation(
        message if message is not None else default, guard=guard, label=label
    )


def null(value: T | None, label: str | None = None, message: str | None = None) -> T:
    if value is None:
        raise _violation("null", f"{_input(label)} was null.", label, message)
    return value


def true(value: T, label: str | None = None, message: str | None = None) -> T:
    if value is True:
        raise _violation("true", f"{_input(label)} cannot be true.", label, message)
    return value


def false(value: T, label: str | None = None, message: str | None = None) -> T:
    if value is False:
        raise _violation("false", f"{_input(label)} cannot be false.", label, message)
    return value


def null_or_true(
    value: T | None, label: str | None = None, message: str | None = None
) -> T:
    checked = null(value, label, message)
    return true(checked, label, message)


def null_or_false(
    value: T | None, label: str | None = None, message: str | None = None
) -> T:
    checked = null(value, label, message)
    return false(checked, label, message)


def negative(value: Num, label: str | None = None, message: str | None = None) -> Num:
    if value < 0:
        raise _violation(
            "negative", f"{_input(label)} cannot be a negative number.", label, message
        )
    return value


def positive(value: Num, label: str | None = None, message: str | None = None) -> Num:
    if value > 0:
        raise _violation(
            "positive", f"{_input(label)} cannot be a positive number.", label, message
        )
    return value


def zero(value: Num, label: str | None = None, message: str | None = None) -> Num:
    # Loose: 0, 0.0 and -0.0 all count.
    if value == 0:
        raise _violation("zero", f"{_input(label)} cannot be zero.", label, message)
    return value


def negative_or_zero(
    value: Num, label: str | None = None, message: str | None = None
) -> Num:
    negative(value, label, message)
    return zero(value, label, message)


def positive_or_zero(
    value: Num, label: str | None = None, message: str | None = None
) -> Num:
    positive(value, label, message)
    return zero(value, label, message)


def match(
    value: T, other: object, label: str | None = None, message: str | None = None
) -> T:
    """Fail when ``value == other``.

    Equality follows Python's ``==``, so ``1``, ``1.0`` and ``True`` all match
    each other while ``"1"`` matches none of them.
    """
    if value == other:
        raise _violation(
            "match", f"{_input(label)} cannot be {other!r}.", label, message
        )
    return value


def strict_match(
    value: T, other: object, label: str | None = None, message: str | None = None
) -> T:
    """Fail when *value* is *other*, or has exactly the same type and compares equal."""
    if value is other or (type(value) is type(other) and value == other):
        raise _violation(
            "strict_match", f"{_input(label)} cannot be {other!r}.", label, message
        )
    return value


def in_range(
    value: Num,
    low: float,
    high: float,
    label: str | None = None,
    message: str | None = None,
) -> Num:
    if low <= value <= high:
        raise _violation(
            "in_range",
            f"{_input(label)} cannot be in range {low} - {high}.",
            label,
            message,
        )
    return value


def not_in_range(
    value: Num,
    low: float,
    high: float,
    label: str | None = None,
    message: str | None = None,
) -> Num:
    # Both bounds are exclusive here: hitting either one fails.
    if value <= low or value >= high:
        raise _violation(
            "not_in_range",
            f"{_input(label)} is not in range {low} - {high}.",
            label,
            message,
        )
    return value


def is_empty(value: object) -> bool:
    """Return whether *value* counts as empty.

    ``None``, ``False``, numeric zero and anything sized with length zero are
    empty. Every other value, including the string ``"0"``, is not.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def empty(value: T, label: str | None = None, message: str | None = None) -> T:
    if is_empty(value):
        raise _violation(
            "empty", f"{_input(label)} cannot be only empty.", label, message
        )
    return value


def white_space(
    value: str, label: str | None = None, message: str | None = None
) -> str:
    if value == " ":
        raise _violation(
            "white_space", f"{_input(label)} cannot be only whitespace.", label, message
        )
    return value


def empty_or_white_space(
    value: str, label: str | None = None, message: str | None = None
) -> str:
    empty(value, label, message)
    return white_space(value, label, message)


def regex(
    value: str,
    pattern: str | re.Pattern[str],
    label: str | None = None,
    message: str | None = None,
) -> str:
    """Fail when *pattern* matches anywhere in *value*.

    The default message lists the whole match followed by each capture group,
    joined with commas. Groups that did not take part render as ``""``.
    """
    found = re.search(pattern, value)
    if found is not None:
        parts: list[str] = [found.group(0)]
        parts.extend(group or "" for group in found.groups())
        raise _violation(
            "regex",
            f"{_input(label)} cannot be any of the followings: {','.join(parts)}.",
            label,
            message,
        )
    return value


def count(
    value: SizedT, size: int, label: str | None = None, message: str | None = None
) -> SizedT:
    if len(value) == size:
        raise _violation(
            "count", f"{_inputs(label)} count cannot be {size}.", label, message
        )
    return value


def count_or_more(
    value: SizedT, size: int, label: str | None = None, message: str | None = None
) -> SizedT:
    if len(value) >= size:
        raise _violation(
            "count_or_more",
            f"{_inputs(label)} count cannot be more or equals to {size}.",
            label,
            message,
        )
    return value


def count_or_less(
    value: SizedT, size: int, label: str | None = None, message: str | None = None
) -> SizedT:
    if len(value) <= size:
        raise _violation(
            "count_or_less",
            f"{_inputs(label)} count cannot be less or equals to {size}.",
            label,
            message,
        )
    return value


def _contains(value: Container[object], item: object) -> bool:
    # Mappings are searched by value, like any other collection of elements.
    if isinstance(value, Mapping):
        return item in value.values()
    return item in value


def has_value(
    value: ContainerT,
    item: object,
    label: str | None = None,
    message: str | None = None,
) -> ContainerT:
    if _contains(value, item):
        raise _violation(
            "has_value", f"{_input(label)} cannot include {item!r}.", label, message
        )
    return value


def has_no_value(
    value: ContainerT,
    item: object,
    label: str | None = None,
    message: str | None = None,
) -> ContainerT:
    if not _contains(value, item):
        raise _violation(
            "has_no_value", f"{_input(label)} has to include {item!r}.", label, message
        )
    return value


def _kind_name(kind: str | type) -> str:
    return kind.__name__ if isinstance(kind, type) else kind


def _is_kind(value: object, kind: str | type) -> bool:
    if isinstance(kind, type):
        return isinstance(value, kind)
    if not is_type_tag(kind):
        raise ValueError(
            f"Unknown type tag {kind!r}; expected one of: {', '.join(TYPE_TAGS)}"
        )
    return type_tag_of(value) == kind


def of_type(
    value: T,
    kind: str | type,
    label: str | None = None,
    message: str | None = None,
) -> T:
    """Fail when *value* is of *kind*.

    *kind* is either a tag from :data:`~guard_clauses.models.TYPE_TAGS`,
    compared with :func:`~guard_clauses.models.type_tag_of`, or a class,
    checked with ``isinstance``.
    """
    if _is_kind(value, kind):
        raise _violation(
            "of_type",
            f"{_input(label)} cannot be of type {_kind_name(kind)}.",
            label,
            message,
        )
    return value


def not_of_type(
    value: T,
    kind: str | type,
    label: str | None = None,
    message: str | None = None,
) -> T:
    if not _is_kind(value, kind):
        raise _violation(
            "not_of_type",
            f"{_input(label)} has to be of type {_kind_name(kind)}.",
            label,
            message,
        )
    return value


def has_field(value: object, name: str) -> bool:
    """Return whether *value* has the data field *name*.

    Mappings are checked for the key. Other objects are inspected statically,
    so property getters never run; instance and class attributes, slots and
    properties count, while dunder names, methods and other callables do not.
    """
    if isinstance(value, Mapping):
        return name in value
    if name.startswith("__") and name.endswith("__"):
        return False
    found = inspect.getattr_static(value, name, _MISSING)
    if found is _MISSING:
        return False
    return not (inspect.isroutine(found) or callable(found))


def has_property(
    value: T, name: str, label: str | None = None, message: str | None = None
) -> T:
    """Fail when *value* has the field *name*, as decided by :func:`has_field`."""
    if has_field(value, name):
        raise _violation(
            "has_property",
            f"{_input(label)} has an unwanted property {name}.",
            label,
            message,
        )
    return value


def has_no_property(
    value: T, name: str, label: str | None = None, message: str | None = None
) -> T:
    if not has_field(value, name):
        raise _violation(
            "has_no_property",
            f"{_input(label)} is missing a property {name}.",
            label,
            message,
        )
    return value


def expression(
    predicate: Callable[[], object], error: type[Exception], message: str
) -> None:
    """Raise ``error(message)`` when *predicate* returns a truthy value."""
    if predicate():
        raise error(message)
