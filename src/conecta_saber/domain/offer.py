"""Ofertas de aula: disponibilidade declarada por um voluntário."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from conecta_saber.domain.validators import require_filled, validate_time_window


def short_time(value: str | None) -> str:
    """Corta os segundos que o backend devolve (`14:00:00` → `14:00`)."""
    return (value or "")[:5]


class Offer(BaseModel):
    """Oferta publicada, como listada por busca ou `meus-registros`."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: int = Field(..., description="Identificador da oferta.")
    subject: str = Field(..., alias="disciplina", description="Disciplina (texto livre).")
    available_days: str = Field(
        default="",
        alias="dias_disponiveis",
        description="Dias disponíveis (texto livre, ex.: 'Segunda e Quarta').",
    )
    start_time: str = Field(..., alias="horario_inicio", description="Início (HH:MM[:SS]).")
    end_time: str = Field(..., alias="horario_fim", description="Fim (HH:MM[:SS]).")
    volunteer_name: str | None = Field(
        default=None,
        alias="nome_voluntario",
        description="Nome do voluntário dono (presente na busca).",
    )

    @property
    def time_window(self) -> str:
        return f"{short_time(self.start_time)} às {short_time(self.end_time)}"


class OfferDraft(BaseModel):
    """Dados digitados no formulário de nova oferta.

    Imutável: uma submissão que falha devolve o erro e o rascunho continua
    intacto nas mãos da tela para nova tentativa.
    """

    model_config = ConfigDict(frozen=True)

    subject: str = ""
    available_days: str = ""
    start_time: str = ""
    end_time: str = ""

    def validate_for_submission(self) -> None:
        """Levanta ValidationError se o rascunho não pode ser enviado."""
        require_filled(self.subject, self.available_days, self.start_time, self.end_time)
        validate_time_window(self.start_time, self.end_time)

    def to_payload(self) -> dict[str, str]:
        return {
            "disciplina": self.subject,
            "dias_disponiveis": self.available_days,
            "horario_inicio": self.start_time,
            "horario_fim": self.end_time,
        }


__all__ = ["Offer", "OfferDraft", "short_time"]
