"""Factories de store e gateway baseadas em configuração."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from conecta_saber.bootstrap.clients import create_redis_client
from conecta_saber.infra.http import AuthenticatedGateway, HttpClientConfig
from conecta_saber.infra.stores import FileSessionStore, MemorySessionStore, RedisSessionStore

if TYPE_CHECKING:
    import httpx

    from conecta_saber.config.settings import BackendSettings, SessionSettings
    from conecta_saber.protocols.session_store import SessionStoreProtocol
    from conecta_saber.sessions import SessionManager

logger = logging.getLogger(__name__)


def create_session_store(settings: SessionSettings) -> SessionStoreProtocol:
    """Cria o store de sessão escolhido em SESSION_STORE_BACKEND."""
    backend = settings.store_backend

    if backend == "redis":
        store: SessionStoreProtocol = RedisSessionStore(
            create_redis_client(settings.redis_url),
            key_prefix=settings.redis_key_prefix,
        )
    elif backend == "memory":
        store = MemorySessionStore()
    else:
        store = FileSessionStore(Path(settings.file_path).expanduser())

    logger.info("session_store_created", extra={"backend": backend})
    return store


def create_gateway(
    session: SessionManager,
    settings: BackendSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AuthenticatedGateway:
    """Cria o gateway HTTP ligado ao SessionManager."""
    return AuthenticatedGateway(
        session,
        base_url=settings.api_base_url,
        config=HttpClientConfig.from_settings(settings),
        transport=transport,
    )
