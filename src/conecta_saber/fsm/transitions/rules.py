"""
Regras de transição válidas entre status de agendamento.

O backend é a autoridade; este grafo serve de verificação local para
não enviar ao servidor uma resposta que ele certamente rejeitaria.
"""

from conecta_saber.fsm.states.appointment import TERMINAL_STATES, AppointmentStatus

TransitionMap = dict[AppointmentStatus, frozenset[AppointmentStatus]]

# Chave: status de origem
# Valor: conjunto de status de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    # REQUESTED: voluntário aceita ou recusa
    AppointmentStatus.REQUESTED: frozenset({
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.CANCELLED,
    }),

    # Terminais
    AppointmentStatus.CONFIRMED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
}


def get_valid_targets(state: AppointmentStatus) -> frozenset[AppointmentStatus]:
    """Retorna os status de destino válidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: AppointmentStatus, to_state: AppointmentStatus) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_state: Status de origem
        to_state: Status de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in AppointmentStatus:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Status {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Status terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, AppointmentStatus):
                errors.append(
                    f"Transição {from_state.name} → {target}: destino inválido"
                )

    return errors
