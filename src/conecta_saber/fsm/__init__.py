"""
Módulo FSM: máquina de estados do ciclo de vida de agendamentos.

Estrutura:
    - states/: Status canônicos (AppointmentStatus enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de estados (AppointmentStateMachine)
    - types/: Tipos de dados (StatusTransition, TransitionResult)
"""

from conecta_saber.fsm.manager import (
    AppointmentStateMachine,
    create_state_machine,
)
from conecta_saber.fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from conecta_saber.fsm.states import (
    DECISIONS,
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    AppointmentStatus,
    is_terminal,
    parse_status,
)
from conecta_saber.fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from conecta_saber.fsm.types import (
    StatusTransition,
    TransitionResult,
)

__all__ = [
    "DECISIONS",
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "AppointmentStateMachine",
    "AppointmentStatus",
    "GuardResult",
    "StatusTransition",
    "TransitionResult",
    "create_state_machine",
    "evaluate_guards",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "parse_status",
    "validate_transition_map",
]
