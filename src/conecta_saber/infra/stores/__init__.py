"""Stores: implementações concretas de persistência da sessão.

Módulos disponíveis:
    - memory_session_store: Store em memória para desenvolvimento/testes
    - file_session_store: Store em arquivo JSON (padrão no dispositivo)
    - redis_session_store: Store usando Redis
"""

from __future__ import annotations

from conecta_saber.infra.stores.file_session_store import FileSessionStore
from conecta_saber.infra.stores.memory_session_store import MemorySessionStore
from conecta_saber.infra.stores.redis_session_store import RedisSessionStore

__all__ = [
    "FileSessionStore",
    "MemorySessionStore",
    "RedisSessionStore",
]
