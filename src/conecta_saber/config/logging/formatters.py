"""Formatter JSON dos logs do cliente.

Campos obrigatórios em todo registro: asctime, level, logger, message,
correlation_id e service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,123", "level": "INFO",
         "logger": "conecta_saber.infra.http.gateway",
         "message": "backend_request_completed", "correlation_id": "abc-123",
         "service": "conecta_saber", "method": "GET", "status_code": 200}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
