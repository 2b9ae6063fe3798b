"""Gerenciador da sessão autenticada: dono único do token e do usuário.

O gateway e os serviços recebem a mesma instância por construtor; ninguém
lê o store diretamente. O token é consultado a cada requisição, então um
logout vale imediatamente para a próxima chamada.

Fluxo:
    1. Login → set_session(token, usuario) grava no store e na memória
    2. Cada requisição → current_token()
    3. Logout → clear_session() apaga store e memória
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from conecta_saber.sessions.models import Session
from conecta_saber.utils.errors import NotAuthenticatedError, RoleNotAllowedError

if TYPE_CHECKING:
    from conecta_saber.domain.user import User, UserRole
    from conecta_saber.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


class SessionManager:
    """Mantém a sessão atual em memória, espelhada no store durável.

    Attributes:
        epoch: Contador incrementado a cada login/logout; permite descartar
            respostas de requisições iniciadas sob outra sessão.
    """

    def __init__(self, store: SessionStoreProtocol) -> None:
        self._store = store
        self._current: Session | None = None
        self._loaded = False
        self._epoch = 0

    @property
    def epoch(self) -> int:
        return self._epoch

    def set_session(self, token: str, user: User) -> Session:
        """Grava token e usuário, sobrescrevendo qualquer sessão anterior.

        O store é gravado primeiro: se falhar, a sessão em memória fica
        como estava.

        Raises:
            ValueError: Se token vazio
            SessionStoreError: Se o store falhar
        """
        session = Session(token=token, user=user)
        self._store.save(session)
        self._current = session
        self._loaded = True
        self._epoch += 1
        logger.info(
            "session_started",
            extra={"role": user.role.value, "epoch": self._epoch},
        )
        return session

    def get_session(self) -> Session | None:
        """Retorna a sessão atual ou None se não há login.

        Na primeira chamada carrega do store (sessão de execução anterior).

        Raises:
            SessionStoreError: Se o store não puder ser lido
        """
        if not self._loaded:
            self._current = self._store.load()
            self._loaded = True
            if self._current is not None:
                logger.info("session_restored", extra={"role": self._current.user.role.value})
        return self._current

    def clear_session(self) -> None:
        """Remove todo o estado de sessão (logout).

        A memória é limpa mesmo se o store falhar, para que nenhuma
        requisição seguinte leve o token antigo.
        """
        try:
            self._store.clear()
        finally:
            self._current = None
            self._loaded = True
            self._epoch += 1
            logger.info("session_cleared", extra={"epoch": self._epoch})

    def current_token(self) -> str | None:
        session = self.get_session()
        return session.token if session is not None else None

    def current_user(self) -> User | None:
        session = self.get_session()
        return session.user if session is not None else None

    def require_user(self, *roles: UserRole) -> User:
        """Retorna o usuário logado, opcionalmente exigindo um dos perfis.

        Raises:
            NotAuthenticatedError: Sem sessão
            RoleNotAllowedError: Perfil fora de `roles`
        """
        user = self.current_user()
        if user is None:
            raise NotAuthenticatedError()
        if roles and user.role not in roles:
            raise RoleNotAllowedError()
        return user
