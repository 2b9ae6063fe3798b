"""Store de sessão em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios do app.
"""

from __future__ import annotations

import json
import logging

from conecta_saber.protocols.session_store import SessionStoreProtocol
from conecta_saber.sessions.models import TOKEN_KEY, USER_KEY, Session

logger = logging.getLogger(__name__)


class MemorySessionStore(SessionStoreProtocol):
    """Guarda token e usuário serializado num dict, sob as chaves fixas."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def save(self, session: Session) -> None:
        data = session.to_dict()
        # Substitui o dict inteiro de uma vez: nunca fica meio gravado
        self._store = {
            TOKEN_KEY: data[TOKEN_KEY],
            USER_KEY: json.dumps(data[USER_KEY]),
        }

    def load(self) -> Session | None:
        token = self._store.get(TOKEN_KEY)
        user_json = self._store.get(USER_KEY)
        if token is None or user_json is None:
            return None
        try:
            return Session.from_dict({TOKEN_KEY: token, USER_KEY: json.loads(user_json)})
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning("session_load_error", extra={"backend": "memory", "error_type": type(e).__name__})
            return None

    def clear(self) -> None:
        self._store = {}

    def keys(self) -> list[str]:
        """Chaves gravadas (apenas para testes)."""
        return sorted(self._store)
