"""Configuração centralizada de logging.

Uso:
    from conecta_saber.config.logging import configure_logging

    # Uma vez, no composition root (conecta_saber.bootstrap)
    configure_logging(level="INFO", service_name="conecta_saber")

Os módulos usam `logging.getLogger(__name__)` e passam dados estruturados
em `extra`; nunca token, senha ou e-mail.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from conecta_saber.config.logging.filters import CorrelationIdFilter, SensitiveDataFilter
from conecta_saber.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "conecta_saber"

# Loggers de bibliotecas que logam URL/headers em DEBUG
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SensitiveDataFilter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um caminho degradado foi usado (sem PII).

    Ex.: requisição seguiu sem Authorization porque o store da sessão falhou.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.warning("Fallback applied for %s", component, extra=extra)
