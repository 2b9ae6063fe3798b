"""Configuração do pytest para o cliente Conecta Saber."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from conecta_saber.domain.user import User, UserRole  # noqa: E402
from conecta_saber.infra.stores import MemorySessionStore  # noqa: E402
from conecta_saber.sessions import SessionManager  # noqa: E402


@pytest.fixture
def learner() -> User:
    return User(id=1, name="Ana Souza", email="ana@example.com", role=UserRole.LEARNER)


@pytest.fixture
def volunteer() -> User:
    return User(id=2, name="Bruno Lima", email="bruno@example.com", role=UserRole.VOLUNTEER)


@pytest.fixture
def memory_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def session_manager(memory_store: MemorySessionStore) -> SessionManager:
    """SessionManager sem login."""
    return SessionManager(memory_store)
