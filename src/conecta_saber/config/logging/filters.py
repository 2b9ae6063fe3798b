"""Filters de logging: contexto injetado e mascaramento de credenciais.

Campos injetados:
- correlation_id: ID da requisição ao backend em andamento
- service: Nome do serviço

Campos mascarados (quando chegam via `extra`): token, senha, Authorization.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "***"

# Nomes de atributos de LogRecord que nunca podem ir em claro
SENSITIVE_FIELDS = frozenset({"token", "senha", "password", "authorization"})


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Preserva correlation_id passado explicitamente via `extra`
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveDataFilter(logging.Filter):
    """Mascara credenciais passadas por engano em `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for attr in list(vars(record)):
            if attr.lower() in SENSITIVE_FIELDS:
                setattr(record, attr, REDACTED)
        return True
