"""Proteção contra envio duplicado (toques repetidos no mesmo botão)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from conecta_saber.utils.errors import DuplicateSubmissionError

logger = logging.getLogger(__name__)


class SubmissionGuard:
    """Marca ações em andamento por chave (ex.: `respond:42`).

    Roda num único event loop: checar e marcar acontece sem `await` no meio.
    """

    def __init__(self) -> None:
        self._in_flight: set[str] = set()

    def is_busy(self, key: str) -> bool:
        """Usado pela tela para desabilitar o botão da ação."""
        return key in self._in_flight

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Reserva a chave durante o bloco.

        Raises:
            DuplicateSubmissionError: A mesma ação já está em andamento
        """
        if key in self._in_flight:
            logger.info("duplicate_submission_blocked", extra={"action": key})
            raise DuplicateSubmissionError()
        self._in_flight.add(key)
        try:
            yield
        finally:
            self._in_flight.discard(key)
