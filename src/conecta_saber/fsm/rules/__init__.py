"""
Exports públicos do módulo fsm/rules.
"""

from conecta_saber.fsm.rules.guards import (
    DEFAULT_GUARDS,
    Guard,
    GuardResult,
    evaluate_guards,
    guard_decision_target,
    guard_terminal_state,
    guard_valid_state,
)

__all__ = [
    "DEFAULT_GUARDS",
    "Guard",
    "GuardResult",
    "evaluate_guards",
    "guard_decision_target",
    "guard_terminal_state",
    "guard_valid_state",
]
