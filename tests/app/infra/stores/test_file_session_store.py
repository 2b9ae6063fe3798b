"""Testes do FileSessionStore (arquivo real em tmp_path)."""

from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from conecta_saber.domain.user import User
from conecta_saber.infra.stores import FileSessionStore
from conecta_saber.sessions.models import Session
from conecta_saber.utils.errors import SessionStoreError


@pytest.fixture
def session_path(tmp_path: Path) -> Path:
    return tmp_path / "nested" / "session.json"


class TestFileSessionStore:
    """Persistência em disco."""

    def test_fresh_install_has_no_session(self, session_path: Path) -> None:
        assert FileSessionStore(session_path).load() is None

    def test_save_then_load_in_new_instance(self, session_path: Path, volunteer: User) -> None:
        """Simula reinício do app: outra instância lê o mesmo arquivo."""
        FileSessionStore(session_path).save(Session(token="tok-v", user=volunteer))

        session = FileSessionStore(session_path).load()

        assert session is not None
        assert session.token == "tok-v"
        assert session.user == volunteer

    def test_file_uses_backend_keys_and_owner_only_mode(
        self, session_path: Path, learner: User
    ) -> None:
        FileSessionStore(session_path).save(Session(token="tok", user=learner))

        data = json.loads(session_path.read_text(encoding="utf-8"))
        assert set(data) == {"token", "usuario"}
        if os.name == "posix":
            assert stat.S_IMODE(session_path.stat().st_mode) == 0o600

    def test_save_overwrites_and_leaves_no_temp_files(
        self, session_path: Path, learner: User, volunteer: User
    ) -> None:
        store = FileSessionStore(session_path)
        store.save(Session(token="old", user=learner))
        store.save(Session(token="new", user=volunteer))

        loaded = store.load()
        assert loaded is not None
        assert loaded.token == "new"
        assert [p.name for p in session_path.parent.iterdir()] == ["session.json"]

    def test_clear_equals_fresh_install(self, session_path: Path, learner: User) -> None:
        store = FileSessionStore(session_path)
        store.save(Session(token="tok", user=learner))

        store.clear()
        store.clear()

        assert not session_path.exists()
        assert store.load() is None

    @pytest.mark.parametrize(
        "content",
        [
            "{broken",
            json.dumps({"token": "x"}),
            json.dumps({"token": "", "usuario": {}}),
            json.dumps({"token": 123, "usuario": {"nome": "Ana", "tipo_perfil": "ALUNO"}}),
            json.dumps(["token", "usuario"]),
        ],
    )
    def test_corrupted_file_loads_as_absent(self, session_path: Path, content: str) -> None:
        session_path.parent.mkdir(parents=True)
        session_path.write_text(content, encoding="utf-8")

        assert FileSessionStore(session_path).load() is None

    def test_unwritable_location_raises_store_error(self, tmp_path: Path, learner: User) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = FileSessionStore(blocker / "session.json")

        with pytest.raises(SessionStoreError):
            store.save(Session(token="tok", user=learner))
