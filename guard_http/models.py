from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

ErrorCode = Literal["INVALID_ARGUMENT", "INTERNAL_ERROR"]


class ViolationDetails(BaseModel):
    guard: str
    label: str | None = None


class ErrorResponse(BaseModel):
    error: str
    code: ErrorCode
    details: dict[str, object] | None = None
    timestamp: datetime
