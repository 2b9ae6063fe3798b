"""Agendamentos: pedido de aula ligando aluno, oferta e data.

O mesmo modelo atende a agenda confirmada e a lista de pendentes; a
lista de pendentes não traz horários, por isso eles são opcionais.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conecta_saber.domain.offer import short_time
from conecta_saber.domain.user import UserRole
from conecta_saber.fsm.states import AppointmentStatus, parse_status


class Appointment(BaseModel):
    """Agendamento como visto pelo usuário logado."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: int = Field(..., alias="id_agendamento", description="Identificador do agendamento.")
    subject: str = Field(default="", alias="disciplina", description="Disciplina da oferta.")
    lesson_date: str = Field(
        ...,
        alias="data_aula",
        description="Data da aula; o backend pode anexar hora ISO após AAAA-MM-DD.",
    )
    start_time: str | None = Field(default=None, alias="horario_inicio")
    end_time: str | None = Field(default=None, alias="horario_fim")
    learner_name: str | None = Field(default=None, alias="nome_aluno")
    volunteer_name: str | None = Field(default=None, alias="nome_voluntario")
    status: AppointmentStatus | None = Field(default=None)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: object) -> AppointmentStatus | None:
        return parse_status(value)

    @property
    def day(self) -> date | None:
        """Data da aula como `date` (ignora sufixo de hora, se houver)."""
        try:
            return date.fromisoformat(self.lesson_date[:10])
        except ValueError:
            return None

    @property
    def time_window(self) -> str:
        if not self.start_time or not self.end_time:
            return ""
        return f"{short_time(self.start_time)} - {short_time(self.end_time)}"

    def counterpart_name(self, viewer_role: UserRole) -> str | None:
        """Nome da outra parte: voluntário vê o aluno, demais veem o professor."""
        if viewer_role is UserRole.VOLUNTEER:
            return self.learner_name
        return self.volunteer_name

    def counterpart_label(self, viewer_role: UserRole) -> str:
        name = self.counterpart_name(viewer_role) or ""
        if viewer_role is UserRole.VOLUNTEER:
            return f"Aluno: {name}"
        return f"Prof: {name}"

    def with_status(self, status: AppointmentStatus) -> Appointment:
        return self.model_copy(update={"status": status})


__all__ = ["Appointment"]
