"""Redis Session Store: sessão em Redis, para quiosques/instalações compartilhadas.

Token e usuário ficam em duas chaves fixas com namespace. A gravação usa
pipeline transacional (MULTI/EXEC) para que as duas chaves mudem juntas,
e o logout apaga ambas num único DEL.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from conecta_saber.protocols.session_store import SessionStoreProtocol
from conecta_saber.sessions.models import TOKEN_KEY, USER_KEY, Session
from conecta_saber.utils.errors import SessionStoreError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo padrão para namespace das chaves de sessão
SESSION_PREFIX = "conecta_saber:session:"


class RedisSessionStore(SessionStoreProtocol):
    """Store de sessão usando Redis.

    Args:
        redis_client: Cliente Redis síncrono
        key_prefix: Namespace das chaves (`<prefix>token`, `<prefix>usuario`)
    """

    def __init__(self, redis_client: Redis[bytes], key_prefix: str = SESSION_PREFIX) -> None:
        self._redis = redis_client
        self._prefix = key_prefix

    def _key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    def save(self, session: Session) -> None:
        data = session.to_dict()
        try:
            pipe = self._redis.pipeline(transaction=True)
            pipe.set(self._key(TOKEN_KEY), data[TOKEN_KEY])
            pipe.set(self._key(USER_KEY), json.dumps(data[USER_KEY]))
            pipe.execute()
        except RedisError as e:
            logger.error("session_save_error", extra={"backend": "redis", "error_type": type(e).__name__})
            raise SessionStoreError() from e
        logger.debug("session_saved", extra={"backend": "redis"})

    def load(self) -> Session | None:
        try:
            token, user_json = self._redis.mget([self._key(TOKEN_KEY), self._key(USER_KEY)])
        except RedisError as e:
            logger.error("session_read_error", extra={"backend": "redis", "error_type": type(e).__name__})
            raise SessionStoreError() from e
        if token is None or user_json is None:
            return None
        try:
            if isinstance(token, bytes):
                token = token.decode("utf-8")
            return Session.from_dict({TOKEN_KEY: token, USER_KEY: json.loads(user_json)})
        except (json.JSONDecodeError, UnicodeDecodeError, KeyError, ValueError) as e:
            logger.warning("session_load_error", extra={"backend": "redis", "error_type": type(e).__name__})
            return None

    def clear(self) -> None:
        try:
            self._redis.delete(self._key(TOKEN_KEY), self._key(USER_KEY))
        except RedisError as e:
            logger.error("session_clear_error", extra={"backend": "redis", "error_type": type(e).__name__})
            raise SessionStoreError() from e
