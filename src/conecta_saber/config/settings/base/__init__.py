"""Agregador de settings base."""

from __future__ import annotations

from conecta_saber.config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
    parse_bool,
)
from conecta_saber.config.settings.base.session import (
    SessionSettings,
    SessionStoreBackend,
    get_session_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "SessionSettings",
    "SessionStoreBackend",
    "get_base_settings",
    "get_session_settings",
    "parse_bool",
]
