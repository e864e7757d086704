"""FastAPI integration for guard clauses.

Translates :class:`guard_clauses.GuardViolation` raised inside request
handlers into structured 4xx JSON responses, with settings read from the
environment and structured logging.
"""

from __future__ import annotations

from guard_http.config import Settings
from guard_http.errors import install_handlers, make_violation_handler

__all__ = ["Settings", "install_handlers", "make_violation_handler"]
