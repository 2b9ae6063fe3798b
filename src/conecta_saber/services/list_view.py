"""Estado de uma lista exibida (agenda, pendentes, ofertas, busca).

Cada leitura recebe um ticket crescente. A resposta só substitui a lista
se o ticket for mais novo que o último aplicado: uma resposta antiga que
chega depois de uma mais nova é descartada, e a lista nunca é mesclada
nem alterada parcialmente.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Generic, TypeVar

from conecta_saber.utils.errors import ConectaSaberError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListView(Generic[T]):
    """Lista com guarda de ticket por requisição.

    Attributes:
        items: Último conteúdo aplicado (cópia)
        loading: Há leitura em andamento
        loaded: Já houve ao menos uma leitura aplicada
        last_error: Mensagem da última falha relevante (None após sucesso)
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: tuple[T, ...] = ()
        self._issued = 0
        self._applied = 0
        self._in_flight: set[int] = set()
        self._loaded = False
        self._last_error: str | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def loading(self) -> bool:
        return bool(self._in_flight)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def begin(self) -> int:
        """Emite o ticket de uma nova leitura."""
        self._issued += 1
        self._in_flight.add(self._issued)
        return self._issued

    def commit(self, ticket: int, items: Iterable[T]) -> bool:
        """Aplica a resposta do ticket como substituição completa.

        Returns:
            True se aplicada; False se descartada por ser obsoleta
        """
        self._in_flight.discard(ticket)
        if ticket <= self._applied:
            logger.debug(
                "list_view_stale_response_discarded",
                extra={"view": self._name, "ticket": ticket, "applied": self._applied},
            )
            return False
        self._items = tuple(items)
        self._applied = ticket
        self._loaded = True
        self._last_error = None
        return True

    def fail(self, ticket: int, message: str | None = None) -> None:
        """Encerra o ticket sem tocar na lista (último estado bom)."""
        self._in_flight.discard(ticket)
        if ticket > self._applied:
            self._last_error = message

    def invalidate(self) -> None:
        """Esvazia a lista e descarta toda leitura já emitida (logout)."""
        self._applied = self._issued
        self._in_flight.clear()
        self._items = ()
        self._loaded = False
        self._last_error = None

    async def refresh(self, loader: Callable[[], Awaitable[list[T]]]) -> list[T]:
        """Executa `loader` sob um ticket e devolve o conteúdo vigente da lista.

        Raises:
            Qualquer erro do loader, após encerrar o ticket sem alterar a lista
        """
        ticket = self.begin()
        try:
            items = await loader()
        except BaseException as exc:
            self.fail(ticket, exc.message if isinstance(exc, ConectaSaberError) else None)
            raise
        self.commit(ticket, items)
        return self.items
