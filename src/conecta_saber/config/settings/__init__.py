"""Agregador de settings do cliente Conecta Saber."""

from __future__ import annotations

from conecta_saber.config.settings.backend import (
    DEFAULT_API_BASE_URL,
    BackendSettings,
    get_backend_settings,
)
from conecta_saber.config.settings.base import (
    BaseSettings,
    Environment,
    SessionSettings,
    SessionStoreBackend,
    get_base_settings,
    get_session_settings,
    parse_bool,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "BackendSettings",
    "BaseSettings",
    "Environment",
    "SessionSettings",
    "SessionStoreBackend",
    "get_backend_settings",
    "get_base_settings",
    "get_session_settings",
    "parse_bool",
]
