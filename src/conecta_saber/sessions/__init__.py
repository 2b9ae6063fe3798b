"""Módulo de sessão do app.

Exporta o modelo de sessão e o gerenciador.
"""

from conecta_saber.sessions.manager import SessionManager
from conecta_saber.sessions.models import TOKEN_KEY, USER_KEY, Session

__all__ = [
    "TOKEN_KEY",
    "USER_KEY",
    "Session",
    "SessionManager",
]
