"""
Testes abrangentes para o módulo FSM de agendamentos.

- Testamos comportamento e contrato público
- Um teste cobre múltiplos componentes relacionados
- Foco em cenários válidos + inválidos + bordas
"""

from datetime import datetime

import pytest

from conecta_saber.fsm import (
    DECISIONS,
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    AppointmentStateMachine,
    AppointmentStatus,
    GuardResult,
    StatusTransition,
    TransitionResult,
    create_state_machine,
    evaluate_guards,
    get_valid_targets,
    is_terminal,
    is_transition_valid,
    parse_status,
    validate_transition_map,
)
from conecta_saber.fsm.rules.guards import (
    DEFAULT_GUARDS,
    guard_decision_target,
    guard_terminal_state,
    guard_valid_state,
)


class TestAppointmentStatusAndTerminals:
    """Enum de status, TERMINAL_STATES, is_terminal, parse_status."""

    def test_enum_values_are_backend_literals(self) -> None:
        """Valores do enum são os literais trafegados na API."""
        assert AppointmentStatus.REQUESTED.value == "PENDENTE"
        assert AppointmentStatus.CONFIRMED.value == "CONFIRMADO"
        assert AppointmentStatus.CANCELLED.value == "CANCELADO"
        assert len(list(AppointmentStatus)) == 3

    def test_terminal_states_and_initial(self) -> None:
        """CONFIRMADO e CANCELADO são terminais; PENDENTE é o inicial."""
        assert TERMINAL_STATES == {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED}
        assert DECISIONS == TERMINAL_STATES
        assert DEFAULT_INITIAL_STATE is AppointmentStatus.REQUESTED
        assert is_terminal(AppointmentStatus.CONFIRMED)
        assert not is_terminal(AppointmentStatus.REQUESTED)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("PENDENTE", AppointmentStatus.REQUESTED),
            ("CONFIRMADO", AppointmentStatus.CONFIRMED),
            ("CONFIRMED", AppointmentStatus.CONFIRMED),
            (AppointmentStatus.CANCELLED, AppointmentStatus.CANCELLED),
            ("ACEITO", None),
            (None, None),
            (42, None),
        ],
    )
    def test_parse_status(self, raw: object, expected: AppointmentStatus | None) -> None:
        """Aceita valor de fio ou nome do membro; o resto vira None."""
        assert parse_status(raw) is expected


class TestTransitionRules:
    """VALID_TRANSITIONS e helpers."""

    def test_transition_map_is_consistent(self) -> None:
        """Todo estado tem entrada e terminais não têm saída."""
        assert validate_transition_map() == []
        for state in TERMINAL_STATES:
            assert VALID_TRANSITIONS[state] == frozenset()

    def test_requested_goes_to_either_decision(self) -> None:
        """PENDENTE → CONFIRMADO | CANCELADO, nada mais."""
        assert get_valid_targets(AppointmentStatus.REQUESTED) == DECISIONS
        assert is_transition_valid(AppointmentStatus.REQUESTED, AppointmentStatus.CONFIRMED)
        assert not is_transition_valid(AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED)
        assert not is_transition_valid(AppointmentStatus.CANCELLED, AppointmentStatus.REQUESTED)


class TestGuards:
    """Guards individuais e evaluate_guards."""

    def test_guard_result_factories(self) -> None:
        assert GuardResult.allow().allowed
        denied = GuardResult.deny("motivo")
        assert not denied.allowed
        assert denied.reason == "motivo"

    def test_terminal_source_is_denied(self) -> None:
        """Agendamento já respondido não aceita nova resposta."""
        result = guard_terminal_state(AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED)
        assert not result.allowed
        assert "CONFIRMED" in (result.reason or "")

    def test_target_must_be_a_decision(self) -> None:
        """Voltar para PENDENTE não é uma decisão."""
        assert not guard_decision_target(
            AppointmentStatus.REQUESTED, AppointmentStatus.REQUESTED
        ).allowed
        assert guard_decision_target(
            AppointmentStatus.REQUESTED, AppointmentStatus.CANCELLED
        ).allowed

    def test_valid_state_guard_and_default_chain(self) -> None:
        assert guard_valid_state(AppointmentStatus.REQUESTED, AppointmentStatus.CONFIRMED).allowed
        assert len(DEFAULT_GUARDS) >= 3
        assert evaluate_guards(AppointmentStatus.REQUESTED, AppointmentStatus.CONFIRMED).allowed
        assert not evaluate_guards(AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED).allowed


class TestTransitionTypes:
    """StatusTransition e TransitionResult."""

    def test_status_transition_log_dict_has_no_names(self) -> None:
        transition = StatusTransition(
            appointment_id=7,
            from_state=AppointmentStatus.REQUESTED,
            to_state=AppointmentStatus.CONFIRMED,
            trigger="volunteer_response",
        )
        data = transition.to_log_dict()
        assert data["appointment_id"] == 7
        assert data["from_state"] == "REQUESTED"
        assert data["to_state"] == "CONFIRMED"
        assert isinstance(transition.timestamp, datetime)

    def test_status_transition_requires_trigger(self) -> None:
        with pytest.raises(ValueError, match="trigger"):
            StatusTransition(
                appointment_id=1,
                from_state=AppointmentStatus.REQUESTED,
                to_state=AppointmentStatus.CONFIRMED,
                trigger="  ",
            )

    def test_transition_result_consistency(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)


class TestAppointmentStateMachine:
    """Máquina completa: check, transition, sync, histórico."""

    def test_confirm_from_requested_records_history(self) -> None:
        machine = create_state_machine(10)
        assert isinstance(machine, AppointmentStateMachine)
        assert machine.current_state is AppointmentStatus.REQUESTED

        result = machine.transition(AppointmentStatus.CONFIRMED, "volunteer_response")

        assert result.success
        assert result.transition is not None
        assert machine.current_state is AppointmentStatus.CONFIRMED
        assert machine.is_terminal
        assert len(machine.history) == 1
        assert machine.get_valid_targets() == frozenset()

    def test_second_decision_is_rejected_without_state_change(self) -> None:
        """Responder de novo não altera o estado nem o histórico."""
        machine = create_state_machine(11, AppointmentStatus.CANCELLED)

        assert not machine.can_transition_to(AppointmentStatus.CONFIRMED)
        result = machine.transition(AppointmentStatus.CONFIRMED, "volunteer_response")

        assert not result.success
        assert result.error_reason
        assert machine.current_state is AppointmentStatus.CANCELLED
        assert machine.history == []

    def test_sync_follows_backend_without_history(self) -> None:
        machine = create_state_machine(12)
        machine.sync(AppointmentStatus.CONFIRMED)

        summary = machine.get_state_summary()
        assert summary["current_state"] == "CONFIRMED"
        assert summary["transition_count"] == 0
        assert summary["is_terminal"] is True

    def test_history_is_a_copy(self) -> None:
        machine = create_state_machine(13)
        machine.transition(AppointmentStatus.CANCELLED, "volunteer_response")
        machine.history.clear()
        assert len(machine.history) == 1
