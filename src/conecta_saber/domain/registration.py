"""Formulário de criação de conta."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from conecta_saber.domain.user import SELF_REGISTRATION_ROLES, UserRole
from conecta_saber.domain.validators import require_filled
from conecta_saber.utils.errors import ValidationError


class RegistrationForm(BaseModel):
    """Dados digitados na tela de cadastro."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    password: str = Field(default="", repr=False)
    phone: str = ""
    role: UserRole = UserRole.LEARNER

    def validate_for_submission(self) -> None:
        require_filled(self.name, self.email, self.password, self.phone)
        if self.role not in SELF_REGISTRATION_ROLES:
            raise ValidationError("Escolha o perfil Aluno ou Voluntário.")

    def to_payload(self) -> dict[str, object]:
        return {
            "nome": self.name,
            "email": self.email,
            "senha": self.password,
            "telefone": self.phone,
            "tipo_perfil": self.role.value,
            "id_escola": None,
        }


__all__ = ["RegistrationForm"]
