"""Testes do RedisSessionStore com mock."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from conecta_saber.domain.user import User
from conecta_saber.infra.stores.redis_session_store import SESSION_PREFIX, RedisSessionStore
from conecta_saber.sessions.models import Session
from conecta_saber.utils.errors import SessionStoreError


@pytest.fixture
def mock_redis() -> MagicMock:
    client = MagicMock()
    client.pipeline.return_value = MagicMock()
    return client


class TestRedisSessionStore:
    """Testes do RedisSessionStore."""

    def test_save_writes_both_keys_in_one_transaction(
        self, mock_redis: MagicMock, learner: User
    ) -> None:
        """Token e usuário mudam juntos (MULTI/EXEC)."""
        store = RedisSessionStore(mock_redis)

        store.save(Session(token="tok-1", user=learner))

        mock_redis.pipeline.assert_called_once_with(transaction=True)
        pipe = mock_redis.pipeline.return_value
        pipe.set.assert_any_call(f"{SESSION_PREFIX}token", "tok-1")
        user_call = pipe.set.call_args_list[1]
        assert user_call[0][0] == f"{SESSION_PREFIX}usuario"
        assert json.loads(user_call[0][1])["tipo_perfil"] == "ALUNO"
        pipe.execute.assert_called_once()

    def test_load_decodes_bytes(self, mock_redis: MagicMock, learner: User) -> None:
        mock_redis.mget.return_value = [
            b"tok-2",
            json.dumps(learner.to_payload()).encode("utf-8"),
        ]
        store = RedisSessionStore(mock_redis, key_prefix="app:")

        session = store.load()

        assert session is not None
        assert session.token == "tok-2"
        assert session.user == learner
        mock_redis.mget.assert_called_once_with(["app:token", "app:usuario"])

    def test_load_missing_key_is_no_session(self, mock_redis: MagicMock) -> None:
        mock_redis.mget.return_value = [b"tok-3", None]
        assert RedisSessionStore(mock_redis).load() is None

    def test_load_corrupted_user_is_no_session(self, mock_redis: MagicMock) -> None:
        mock_redis.mget.return_value = [b"tok-4", b"{not json"]
        assert RedisSessionStore(mock_redis).load() is None

    def test_clear_deletes_both_keys(self, mock_redis: MagicMock) -> None:
        RedisSessionStore(mock_redis).clear()
        mock_redis.delete.assert_called_once_with(
            f"{SESSION_PREFIX}token", f"{SESSION_PREFIX}usuario"
        )

    def test_redis_errors_become_session_store_errors(
        self, mock_redis: MagicMock, learner: User
    ) -> None:
        mock_redis.pipeline.return_value.execute.side_effect = RedisConnectionError("down")
        mock_redis.mget.side_effect = RedisConnectionError("down")
        mock_redis.delete.side_effect = RedisConnectionError("down")
        store = RedisSessionStore(mock_redis)

        with pytest.raises(SessionStoreError):
            store.save(Session(token="tok", user=learner))
        with pytest.raises(SessionStoreError):
            store.load()
        with pytest.raises(SessionStoreError):
            store.clear()
