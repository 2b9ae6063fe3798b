"""Gateway autenticado: único ponto de IO com o backend.

Responsabilidades:
- Injetar `Authorization: Bearer <token>` lido da sessão a cada requisição
- Traduzir respostas não-2xx em BackendError com a mensagem do backend
- Traduzir falhas de rede/timeout em TransportError
- Repetir apenas leituras (GET) em falha transitória
- Logging estruturado sem token, senha ou corpo de requisição
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from conecta_saber.config.logging import log_fallback
from conecta_saber.infra.http.api_errors import extract_error_message
from conecta_saber.infra.http.http_base import (
    RETRYABLE_STATUS_CODES,
    HttpClientConfig,
    backoff_sleep,
)
from conecta_saber.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from conecta_saber.utils.errors import BackendError, SessionStoreError, TransportError

if TYPE_CHECKING:
    from conecta_saber.sessions.manager import SessionManager

logger = logging.getLogger(__name__)

_COMPONENT = "authenticated_gateway"
CORRELATION_HEADER = "X-Correlation-ID"
GENERIC_ERROR_MESSAGE = "Não foi possível processar a ação."


class AuthenticatedGateway:
    """Cliente HTTP do app, ligado explicitamente a um SessionManager.

    Args:
        session: Dono da sessão; consultado a cada requisição
        base_url: URL base da API (ex.: https://host/api)
        config: Timeout, retries e headers padrão
        transport: Transport httpx alternativo (testes/ASGI)
    """

    def __init__(
        self,
        session: SessionManager,
        *,
        base_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._session = session
        self._config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> AuthenticatedGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def reset(self) -> None:
        """Descarta estado HTTP ligado à sessão (cookies) após logout."""
        self._client.cookies.clear()

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        fallback_message: str | None = None,
    ) -> Any:
        return await self.request("GET", path, params=params, fallback_message=fallback_message)

    async def post(
        self,
        path: str,
        json_body: dict[str, Any],
        *,
        fallback_message: str | None = None,
    ) -> Any:
        return await self.request("POST", path, json_body=json_body, fallback_message=fallback_message)

    async def patch(
        self,
        path: str,
        json_body: dict[str, Any],
        *,
        fallback_message: str | None = None,
    ) -> Any:
        return await self.request("PATCH", path, json_body=json_body, fallback_message=fallback_message)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        fallback_message: str | None = None,
    ) -> Any:
        """Executa a requisição e devolve o JSON decodificado (ou None se vazio).

        Raises:
            BackendError: Status fora de 2xx (mensagem do campo `erro`)
            TransportError: Rede, timeout ou corpo de sucesso ilegível
        """
        retries = self._config.retries_for(method)
        token = set_correlation_id()
        started = time.perf_counter()
        try:
            for attempt in range(retries + 1):
                try:
                    response = await self._client.request(
                        method,
                        path,
                        json=json_body,
                        params=params,
                        headers=self._build_headers(),
                    )
                except httpx.TransportError as exc:
                    if attempt < retries:
                        await self._backoff(attempt)
                        continue
                    self._log_transport_error(method, path, exc)
                    raise TransportError() from exc

                if response.status_code in RETRYABLE_STATUS_CODES and attempt < retries:
                    await self._backoff(attempt)
                    continue

                elapsed_ms = (time.perf_counter() - started) * 1000
                return self._process_response(response, method, path, fallback_message, elapsed_ms)
        finally:
            reset_correlation_id(token)
        # range(retries + 1) sempre executa ao menos uma vez
        raise TransportError()

    def _build_headers(self) -> dict[str, str]:
        """Monta headers da tentativa atual, lendo o token naquele instante."""
        headers = {CORRELATION_HEADER: get_correlation_id()}
        try:
            access_token = self._session.current_token()
        except SessionStoreError:
            # Segue sem autenticação; o backend responde 401 se a rota exigir
            log_fallback(logger, _COMPONENT, reason="session_store_unavailable")
            access_token = None
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        fallback_message: str | None,
        elapsed_ms: float,
    ) -> Any:
        extra = {
            "component": _COMPONENT,
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "elapsed_ms": round(elapsed_ms, 1),
        }
        if not response.is_success:
            logger.warning("backend_request_rejected", extra=extra)
            message = extract_error_message(response) or fallback_message or GENERIC_ERROR_MESSAGE
            raise BackendError(message, status_code=response.status_code)

        logger.debug("backend_request_completed", extra=extra)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("backend_response_invalid_json", extra=extra)
            raise TransportError("Resposta inválida do servidor.", status_code=response.status_code) from exc

    async def _backoff(self, attempt: int) -> None:
        await backoff_sleep(
            attempt,
            self._config.backoff_base_seconds,
            self._config.backoff_max_seconds,
        )

    def _log_transport_error(self, method: str, path: str, exc: Exception) -> None:
        logger.warning(
            "backend_transport_error",
            extra={
                "component": _COMPONENT,
                "method": method,
                "path": path,
                "error_type": type(exc).__name__,
            },
        )
