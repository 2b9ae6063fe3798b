"""Usuário autenticado e seus perfis."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class UserRole(StrEnum):
    """Perfil do usuário; valor é o literal do backend (`tipo_perfil`)."""

    LEARNER = "ALUNO"
    VOLUNTEER = "VOLUNTARIO"
    MANAGER = "GESTOR"

    def __str__(self) -> str:
        return self.value


# Perfis oferecidos na tela de cadastro
SELF_REGISTRATION_ROLES: frozenset[UserRole] = frozenset({
    UserRole.LEARNER,
    UserRole.VOLUNTEER,
})


class User(BaseModel):
    """Perfil do usuário logado, como devolvido por `/login` em `usuario`."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: int | None = Field(default=None, description="Identificador no backend.")
    name: str = Field(..., alias="nome", description="Nome de exibição.")
    email: str | None = Field(default=None, description="E-mail de login.")
    role: UserRole = Field(..., alias="tipo_perfil", description="Perfil imutável.")

    def to_payload(self) -> dict[str, object]:
        """Serializa com as chaves do backend (formato persistido)."""
        return self.model_dump(by_alias=True, mode="json")


__all__ = ["SELF_REGISTRATION_ROLES", "User", "UserRole"]
