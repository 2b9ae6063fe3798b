"""
Status canônicos do ciclo de vida de um agendamento.

O valor de cada membro é o literal usado pelo backend, de modo que o
enum serializa/deserializa direto do JSON sem mapeamento extra.
"""

from enum import StrEnum


class AppointmentStatus(StrEnum):
    """
    Status de um agendamento (aula solicitada por um aluno).

    Estado não-terminal:
        - REQUESTED: Solicitação criada pelo aluno, aguardando o voluntário

    Estados terminais (do ponto de vista do cliente):
        - CONFIRMED: Voluntário aceitou; aparece na agenda dos dois lados
        - CANCELLED: Voluntário recusou
    """

    REQUESTED = "PENDENTE"
    CONFIRMED = "CONFIRMADO"
    CANCELLED = "CANCELADO"

    def __str__(self) -> str:
        return self.value


# Uma vez em estado terminal, o cliente não expõe transição de saída
TERMINAL_STATES: frozenset[AppointmentStatus] = frozenset({
    AppointmentStatus.CONFIRMED,
    AppointmentStatus.CANCELLED,
})

# Decisões que o voluntário pode enviar ao responder uma solicitação
DECISIONS: frozenset[AppointmentStatus] = TERMINAL_STATES

DEFAULT_INITIAL_STATE: AppointmentStatus = AppointmentStatus.REQUESTED


def is_terminal(state: AppointmentStatus) -> bool:
    """
    Verifica se o status é terminal.

    Args:
        state: Status a ser verificado

    Returns:
        True se o status é terminal, False caso contrário
    """
    return state in TERMINAL_STATES


def parse_status(raw: object) -> AppointmentStatus | None:
    """Converte o literal do backend (ou o nome do membro) em status.

    Returns:
        AppointmentStatus correspondente ou None se desconhecido
    """
    if isinstance(raw, AppointmentStatus):
        return raw
    if not isinstance(raw, str):
        return None
    value = raw.strip().upper()
    try:
        return AppointmentStatus(value)
    except ValueError:
        return AppointmentStatus.__members__.get(value)
