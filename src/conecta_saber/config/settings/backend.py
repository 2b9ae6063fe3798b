"""Settings de acesso à API do backend de agendamentos."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_BASE_URL = "https://conecta-saber-backend.onrender.com/api"


class BackendSettings(BaseModel):
    """Configurações do gateway HTTP."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=1,
        description="URL base da API (inclui o prefixo /api).",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout de cada requisição em segundos.",
    )
    max_read_retries: int = Field(
        default=2,
        ge=0,
        description="Novas tentativas para GET em falha de rede, 429 ou 5xx.",
    )
    backoff_base_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Base do backoff exponencial entre tentativas.",
    )
    backoff_max_seconds: float = Field(
        default=8.0,
        ge=0,
        description="Teto do backoff entre tentativas.",
    )


def _load_backend_from_env() -> BackendSettings:
    return BackendSettings(
        api_base_url=os.getenv("CONECTA_API_BASE_URL", DEFAULT_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("CONECTA_REQUEST_TIMEOUT_SECONDS", "30")),
        max_read_retries=int(os.getenv("CONECTA_MAX_READ_RETRIES", "2")),
        backoff_base_seconds=float(os.getenv("CONECTA_BACKOFF_BASE_SECONDS", "0.5")),
        backoff_max_seconds=float(os.getenv("CONECTA_BACKOFF_MAX_SECONDS", "8")),
    )


@lru_cache(maxsize=1)
def get_backend_settings() -> BackendSettings:
    """Retorna instância cacheada de BackendSettings."""
    return _load_backend_from_env()


__all__ = ["DEFAULT_API_BASE_URL", "BackendSettings", "get_backend_settings"]
