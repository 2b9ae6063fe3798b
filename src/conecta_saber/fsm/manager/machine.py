"""
Máquina de estados (AppointmentStateMachine) de um agendamento.

Espelho local do status conhecido de um agendamento. A máquina só avança
depois que o backend confirmou a mudança; antes disso ela apenas responde
se a transição seria aceita.
"""

from typing import Any

from conecta_saber.fsm.rules.guards import GuardResult, evaluate_guards
from conecta_saber.fsm.states.appointment import (
    DEFAULT_INITIAL_STATE,
    AppointmentStatus,
    is_terminal,
)
from conecta_saber.fsm.transitions.rules import get_valid_targets, is_transition_valid
from conecta_saber.fsm.types.transition import StatusTransition, TransitionResult


class AppointmentStateMachine:
    """
    Máquina de estados de um agendamento.

    Attributes:
        appointment_id: Identificador do agendamento no backend
        current_state: Status atual conhecido pelo cliente
        history: Transições aplicadas nesta sessão do app
    """

    __slots__ = ("_appointment_id", "_current_state", "_history")

    def __init__(
        self,
        appointment_id: int,
        initial_state: AppointmentStatus | None = None,
    ) -> None:
        self._appointment_id = appointment_id
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StatusTransition] = []

    @property
    def appointment_id(self) -> int:
        return self._appointment_id

    @property
    def current_state(self) -> AppointmentStatus:
        return self._current_state

    @property
    def history(self) -> list[StatusTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def check(self, target: AppointmentStatus) -> GuardResult:
        """Avalia regra + guards sem alterar o estado."""
        guard_result = evaluate_guards(self._current_state, target)
        if not guard_result.allowed:
            return guard_result
        if not is_transition_valid(self._current_state, target):
            return GuardResult.deny(
                f"Transição inválida: {self._current_state.name} → {target.name}"
            )
        return guard_result

    def can_transition_to(self, target: AppointmentStatus) -> bool:
        return self.check(target).allowed

    def get_valid_targets(self) -> frozenset[AppointmentStatus]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: AppointmentStatus,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de status.

        Args:
            target: Status de destino
            trigger: Identificador do gatilho (ex: 'volunteer_response')
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        guard_result = self.check(target)
        if not guard_result.allowed:
            return TransitionResult(success=False, error_reason=guard_result.reason)

        transition = StatusTransition(
            appointment_id=self._appointment_id,
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def sync(self, observed_state: AppointmentStatus) -> None:
        """Alinha com o status informado pelo backend (autoridade).

        Não registra histórico: não é uma transição feita pelo cliente.
        """
        self._current_state = observed_state

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual para logs."""
        return {
            "appointment_id": self._appointment_id,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in self.get_valid_targets()),
        }


def create_state_machine(
    appointment_id: int,
    initial_state: AppointmentStatus | None = None,
) -> AppointmentStateMachine:
    """Factory de AppointmentStateMachine."""
    return AppointmentStateMachine(
        appointment_id=appointment_id,
        initial_state=initial_state,
    )
