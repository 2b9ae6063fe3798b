"""Conversão dos corpos JSON do backend em modelos de domínio."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conecta_saber.utils.errors import TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

INVALID_RESPONSE_MESSAGE = "Resposta inválida do servidor."


def parse_list(payload: Any, model: type[ModelT], *, source: str) -> list[ModelT]:
    """Valida uma lista inteira; qualquer item inválido invalida a resposta.

    A lista exibida é substituída por completo ou não é tocada, nunca
    parcialmente.

    Raises:
        TransportError: Corpo não é lista ou algum item não valida
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        logger.error("backend_payload_not_list", extra={"source": source})
        raise TransportError(INVALID_RESPONSE_MESSAGE)
    try:
        return [model.model_validate(item) for item in payload]
    except PydanticValidationError as exc:
        logger.error(
            "backend_payload_invalid",
            extra={"source": source, "error_count": exc.error_count()},
        )
        raise TransportError(INVALID_RESPONSE_MESSAGE) from exc


def parse_optional(payload: Any, model: type[ModelT]) -> ModelT | None:
    """Tenta ler o recurso criado devolvido por um POST; o corpo é opcional."""
    if not isinstance(payload, dict):
        return None
    try:
        return model.model_validate(payload)
    except PydanticValidationError:
        return None
