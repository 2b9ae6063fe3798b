"""Validação local de formulários, antes de qualquer chamada de rede.

As mensagens são exibidas como estão pela camada de apresentação.
"""

from __future__ import annotations

import re

from conecta_saber.utils.errors import ValidationError

TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

MSG_REQUIRED_FIELDS = "Preencha todos os campos."
MSG_TIME_FORMAT = "Use o formato HH:mm para os horários (Ex: 14:00)."
MSG_DATE_REQUIRED = "Por favor, digite a data da aula (AAAA-MM-DD)."
MSG_DATE_FORMAT = "Formato de data inválido. Use AAAA-MM-DD (Ex: 2025-12-20)"
MSG_LOGIN_REQUIRED = "Por favor, preencha e-mail e senha."
MSG_SEARCH_TERM_REQUIRED = "Digite a matéria que deseja buscar."


def is_valid_time(value: str) -> bool:
    return bool(TIME_PATTERN.fullmatch(value or ""))


def is_valid_date(value: str) -> bool:
    return bool(DATE_PATTERN.fullmatch(value or ""))


def require_filled(*values: str | None, message: str = MSG_REQUIRED_FIELDS) -> None:
    """Falha se algum campo estiver vazio ou só com espaços."""
    if any(not (value or "").strip() for value in values):
        raise ValidationError(message)


def validate_time_window(start_time: str, end_time: str) -> None:
    """Valida formato HH:MM dos dois horários.

    Não compara início e fim: a regra de ordem não existe no cliente.
    """
    if not is_valid_time(start_time) or not is_valid_time(end_time):
        raise ValidationError(MSG_TIME_FORMAT)


def validate_lesson_date(lesson_date: str | None) -> str:
    """Valida a data da aula (AAAA-MM-DD) e retorna o valor normalizado."""
    value = (lesson_date or "").strip()
    if not value:
        raise ValidationError(MSG_DATE_REQUIRED)
    if not is_valid_date(value):
        raise ValidationError(MSG_DATE_FORMAT)
    return value
