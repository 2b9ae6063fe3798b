"""
Exports públicos do módulo fsm/states.

Status canônicos de agendamento.
"""

from conecta_saber.fsm.states.appointment import (
    DECISIONS,
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    AppointmentStatus,
    is_terminal,
    parse_status,
)

__all__ = [
    "DECISIONS",
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "AppointmentStatus",
    "is_terminal",
    "parse_status",
]
