"""Parsing das respostas de erro do backend."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

# Campo principal usado pelo backend; os demais aparecem em erros de framework
_MESSAGE_FIELDS = ("erro", "mensagem", "message")


def extract_error_message(response: httpx.Response) -> str | None:
    """Extrai a mensagem legível do corpo de erro.

    Returns:
        Texto do primeiro campo de mensagem não vazio ou None
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    for key in _MESSAGE_FIELDS:
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None
