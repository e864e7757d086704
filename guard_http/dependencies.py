from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from guard_http.config import Settings
from guard_http.logging import get_logger


def get_settings() -> Settings:
    """Dependency: typed translation settings from environment."""
    return Settings.from_env()


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_request_logger() -> logging.Logger:
    """Dependency: request-scoped logger (delegates to global logger)."""
    return get_logger("guard_http.request")
