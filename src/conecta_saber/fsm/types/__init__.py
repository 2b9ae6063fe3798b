"""
Exports públicos do módulo fsm/types.
"""

from conecta_saber.fsm.types.transition import StatusTransition, TransitionResult

__all__ = [
    "StatusTransition",
    "TransitionResult",
]
