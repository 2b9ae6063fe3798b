"""
Guards para transições de status de agendamento.

Guards são checagens locais aplicadas antes de enviar uma resposta ao
backend. Cada guard recebe (origem, destino) e devolve um GuardResult.
"""

from collections.abc import Callable

from conecta_saber.fsm.states.appointment import (
    DECISIONS,
    TERMINAL_STATES,
    AppointmentStatus,
)


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


Guard = Callable[[AppointmentStatus, AppointmentStatus], GuardResult]


def guard_valid_state(
    from_state: AppointmentStatus,
    to_state: AppointmentStatus,
) -> GuardResult:
    """Guard: ambos os status precisam ser membros do enum."""
    if not isinstance(from_state, AppointmentStatus):
        return GuardResult.deny(f"Status de origem inválido: {from_state}")

    if not isinstance(to_state, AppointmentStatus):
        return GuardResult.deny(f"Status de destino inválido: {to_state}")

    return GuardResult.allow()


def guard_terminal_state(
    from_state: AppointmentStatus,
    to_state: AppointmentStatus,
) -> GuardResult:
    """
    Guard: agendamento já respondido não aceita nova resposta.

    Args:
        from_state: Status de origem
        to_state: Status de destino (não usado, mas necessário para assinatura)

    Returns:
        GuardResult indicando se transição é permitida
    """
    if from_state in TERMINAL_STATES:
        return GuardResult.deny(
            f"Agendamento já está {from_state.name}, não aceita nova resposta"
        )
    return GuardResult.allow()


def guard_decision_target(
    from_state: AppointmentStatus,
    to_state: AppointmentStatus,
) -> GuardResult:
    """Guard: o destino precisa ser uma decisão (CONFIRMED ou CANCELLED)."""
    if to_state not in DECISIONS:
        return GuardResult.deny(
            f"Transição para {to_state.name} não é uma resposta válida"
        )
    return GuardResult.allow()


# Aplicados em ordem; o primeiro que negar interrompe a avaliação
DEFAULT_GUARDS: list[Guard] = [
    guard_valid_state,
    guard_terminal_state,
    guard_decision_target,
]


def evaluate_guards(
    from_state: AppointmentStatus,
    to_state: AppointmentStatus,
    guards: list[Guard] | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Args:
        from_state: Status de origem
        to_state: Status de destino
        guards: Lista de guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state)
        if not result.allowed:
            return result

    return GuardResult.allow()
