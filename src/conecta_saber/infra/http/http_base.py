"""Configuração e backoff compartilhados pelo cliente HTTP."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conecta_saber.config.settings import BackendSettings

logger = logging.getLogger(__name__)

# Status que justificam nova tentativa de leitura
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

# Métodos seguros para repetir; escrita nunca é repetida
IDEMPOTENT_METHODS = frozenset({"GET"})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_read_retries: int = 2
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 8.0
    default_headers: dict[str, str] = field(
        default_factory=lambda: {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
    )

    @classmethod
    def from_settings(cls, settings: BackendSettings) -> HttpClientConfig:
        return cls(
            timeout_seconds=settings.request_timeout_seconds,
            max_read_retries=settings.max_read_retries,
            backoff_base_seconds=settings.backoff_base_seconds,
            backoff_max_seconds=settings.backoff_max_seconds,
        )

    def retries_for(self, method: str) -> int:
        return self.max_read_retries if method.upper() in IDEMPOTENT_METHODS else 0


async def backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"attempt": attempt, "backoff_seconds": backoff})
    await asyncio.sleep(backoff)
