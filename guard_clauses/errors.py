from __future__ import annotations


class GuardViolation(ValueError):
    """Raised when a guarded condition is met.

    Subclasses ``ValueError`` so callers that already translate invalid
    arguments keep working. ``str(exc)`` is the message; ``guard`` names the
    check that fired and ``label`` is the caller's variable label, if any.
    """

    def __init__(self, message: str, *, guard: str, label: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.guard = guard
        self.label = label
