"""Settings de persistência da sessão (token + usuário)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from conecta_saber.config.settings.base.core import BaseSettings

SessionStoreBackend = Literal["memory", "file", "redis"]

_VALID_BACKENDS = ("memory", "file", "redis")

DEFAULT_SESSION_FILE = str(Path("~/.conecta_saber/session.json"))


@dataclass(frozen=True)
class SessionSettings:
    """Configurações do store de sessão.

    Attributes:
        store_backend: Onde a sessão é persistida
        file_path: Arquivo JSON usado pelo backend `file`
        redis_url: URL de conexão usada pelo backend `redis`
        redis_key_prefix: Namespace das chaves no Redis
    """

    store_backend: SessionStoreBackend = "file"
    file_path: str = DEFAULT_SESSION_FILE
    redis_url: str = ""
    redis_key_prefix: str = "conecta_saber:session:"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de sessão.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend not in _VALID_BACKENDS:
            errors.append(f"SESSION_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "memory" and not base.is_development:
            errors.append("SESSION_STORE_BACKEND=memory proibido fora de development")

        if self.store_backend == "file" and not self.file_path:
            errors.append("SESSION_FILE_PATH não pode ser vazio")

        if self.store_backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL obrigatório com SESSION_STORE_BACKEND=redis")

        return errors


def _load_session_from_env() -> SessionSettings:
    backend_str = os.getenv("SESSION_STORE_BACKEND", "file").lower()
    backend: SessionStoreBackend = backend_str if backend_str in _VALID_BACKENDS else "file"
    return SessionSettings(
        store_backend=backend,
        file_path=os.getenv("SESSION_FILE_PATH", DEFAULT_SESSION_FILE),
        redis_url=os.getenv("REDIS_URL", ""),
        redis_key_prefix=os.getenv("SESSION_REDIS_PREFIX", "conecta_saber:session:"),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
