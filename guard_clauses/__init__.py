"""Guard clauses for validating arguments at the top of a function body.

Each guard in :mod:`guard_clauses.against` returns its input unchanged, or
raises :class:`GuardViolation` when the guarded condition is met.
"""

from __future__ import annotations

from guard_clauses import against
from guard_clauses.errors import GuardViolation
from guard_clauses.models import TYPE_TAGS, TypeTag, is_type_tag, type_tag_of

__all__ = [
    "TYPE_TAGS",
    "GuardViolation",
    "TypeTag",
    "against",
    "is_type_tag",
    "type_tag_of",
]
