"""
Tipos para representar e rastrear transições de status.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from conecta_saber.fsm.states.appointment import AppointmentStatus


@dataclass(frozen=True, slots=True)
class StatusTransition:
    """
    Registro imutável de uma mudança de status já aceita pelo backend.

    Attributes:
        appointment_id: Agendamento afetado
        from_state: Status de origem
        to_state: Status de destino
        trigger: Identificador do gatilho (ex: 'volunteer_response')
        metadata: Dados adicionais para auditoria (nunca conter PII)
        timestamp: Momento da transição (UTC)
    """

    appointment_id: int
    from_state: AppointmentStatus
    to_state: AppointmentStatus
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC)
    )

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs estruturados."""
        return {
            "appointment_id": self.appointment_id,
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi bem-sucedida
        transition: Dados da transição (se success=True)
        error_reason: Motivo da falha (se success=False)
    """

    success: bool
    transition: StatusTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
