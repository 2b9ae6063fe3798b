"""
Exports públicos do módulo fsm/manager.
"""

from conecta_saber.fsm.manager.machine import (
    AppointmentStateMachine,
    create_state_machine,
)

__all__ = [
    "AppointmentStateMachine",
    "create_state_machine",
]
