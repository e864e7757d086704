from __future__ import annotations

import os
from dataclasses import dataclass

from guard_clauses import against

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Violation translation settings loaded from environment, framework-free."""

    log_level: str
    status_code: int
    expose_messages: bool

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUARD_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        raw_status = os.getenv(f"{prefix}STATUS_CODE", "400").strip() or "400"
        status_code = against.not_in_range(
            int(raw_status),
            399,
            500,
            f"{prefix}STATUS_CODE",
            f"{prefix}STATUS_CODE must be a 4xx status, got {raw_status}",
        )
        expose = os.getenv(f"{prefix}EXPOSE_MESSAGES", "true").strip().lower()
        return Settings(
            log_level=log_level,
            status_code=status_code,
            expose_messages=expose in _TRUTHY,
        )
