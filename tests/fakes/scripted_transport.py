"""Backend roteirizado sobre httpx.MockTransport para testes unitários.

Cada rota recebe uma fila de respostas; a última se repete. Uma resposta
pode ser `(status, corpo)` ou um callable (síncrono ou assíncrono, o
MockTransport aguarda corrotinas). Todas as requisições ficam registradas.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from conecta_saber.infra.http import AuthenticatedGateway, HttpClientConfig
from conecta_saber.sessions import SessionManager

BASE_URL = "http://backend.test/api"
_BASE_PATH = "/api"

Reply = tuple[int, Any] | Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class ScriptedBackend:
    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], list[Reply]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, *replies: Reply) -> ScriptedBackend:
        self._routes[(method.upper(), path)] = list(replies)
        return self

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method.upper() and r.url.path == _BASE_PATH + path
        ]

    def body_of(self, request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None

    def handler(self, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        self.requests.append(request)
        path = request.url.path.removeprefix(_BASE_PATH)
        replies = self._routes.get((request.method, path))
        if not replies:
            return httpx.Response(404, json={"erro": f"rota não roteirizada: {path}"})
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if callable(reply):
            return reply(request)
        status, body = reply
        return httpx.Response(status, json=body)

    def gateway(self, session: SessionManager, retries: int = 0) -> AuthenticatedGateway:
        return AuthenticatedGateway(
            session,
            base_url=BASE_URL,
            config=HttpClientConfig(max_read_retries=retries, backoff_base_seconds=0.0),
            transport=httpx.MockTransport(self.handler),
        )
