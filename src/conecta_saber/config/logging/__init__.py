"""Configuração de logging estruturado.

Uso:
    from conecta_saber.config.logging import configure_logging

    configure_logging(level="INFO", service_name="conecta_saber")

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from conecta_saber.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    log_fallback,
)
from conecta_saber.config.logging.filters import (
    REDACTED,
    CorrelationIdFilter,
    SensitiveDataFilter,
)
from conecta_saber.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "SensitiveDataFilter",
    "configure_logging",
    "create_json_formatter",
    "log_fallback",
]
