"""Modelo da sessão autenticada do app.

A sessão espelha a credencial emitida pelo backend: o bearer token e o
perfil do usuário devolvido no login.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from conecta_saber.domain.user import User

# Chaves fixas usadas na persistência (as mesmas do login: token/usuario)
TOKEN_KEY = "token"
USER_KEY = "usuario"


@dataclass(frozen=True, slots=True)
class Session:
    """Par token + usuário.

    Atributos:
        token: Bearer token emitido pelo backend
        user: Perfil do usuário autenticado
    """

    token: str
    user: User

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token.strip():
            raise ValueError("token não pode ser vazio")

    def to_dict(self) -> dict[str, Any]:
        """Serializa para persistência."""
        return {
            TOKEN_KEY: self.token,
            USER_KEY: self.user.to_payload(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        """Deserializa de persistência.

        Raises:
            KeyError: Se faltar token ou usuário
            ValueError: Se o usuário gravado for inválido
        """
        return cls(
            token=data[TOKEN_KEY],
            user=User.model_validate(data[USER_KEY]),
        )

    def __repr__(self) -> str:
        # Token nunca aparece em logs/tracebacks
        return f"Session(user={self.user.name!r}, role={self.user.role.value!r})"
