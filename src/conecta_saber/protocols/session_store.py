"""Protocolo de persistência da sessão do app (token + usuário)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conecta_saber.sessions.models import Session


class SessionStoreProtocol(ABC):
    """Contrato mínimo para armazenar a única sessão do app.

    Há no máximo uma sessão por instalação, gravada sob chaves fixas
    (`token` e `usuario`) e apagada como uma unidade.
    """

    @abstractmethod
    def save(self, session: Session) -> None:
        """Grava token e usuário atomicamente, sobrescrevendo o anterior."""

    @abstractmethod
    def load(self) -> Session | None:
        """Retorna a sessão gravada ou None (instalação nova/logout)."""

    @abstractmethod
    def clear(self) -> None:
        """Remove todo o estado gravado."""
