"""Camada HTTP: gateway autenticado para a API de agendamentos."""

from conecta_saber.infra.http.api_errors import extract_error_message
from conecta_saber.infra.http.gateway import (
    CORRELATION_HEADER,
    GENERIC_ERROR_MESSAGE,
    AuthenticatedGateway,
)
from conecta_saber.infra.http.http_base import HttpClientConfig

__all__ = [
    "CORRELATION_HEADER",
    "GENERIC_ERROR_MESSAGE",
    "AuthenticatedGateway",
    "HttpClientConfig",
    "extract_error_message",
]
