"""Autenticação: login, cadastro e logout.

O resultado do login é a única fonte do token; ele é entregue ao
SessionManager e nunca aparece em log.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from conecta_saber.domain.user import User
from conecta_saber.domain.validators import MSG_LOGIN_REQUIRED, require_filled
from conecta_saber.services.submission_guard import SubmissionGuard
from conecta_saber.sessions.models import TOKEN_KEY, USER_KEY, Session
from conecta_saber.utils.errors import TransportError

if TYPE_CHECKING:
    from conecta_saber.domain.registration import RegistrationForm
    from conecta_saber.infra.http import AuthenticatedGateway
    from conecta_saber.sessions import SessionManager

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
REGISTER_PATH = "/usuarios/registro"

LOGIN_ACTION = "login"
REGISTER_ACTION = "register"

MSG_LOGIN_FAILED = "Verifique sua conexão e tente novamente."
MSG_REGISTER_FAILED = "Não foi possível criar a conta."
MSG_LOGIN_RESPONSE_INVALID = "Resposta de login inválida."

SessionListener = Callable[[], None]


class AuthService:
    """Fluxos de conta do usuário.

    Listeners registrados são chamados após login e logout, para que as
    listas do usuário anterior sejam descartadas.
    """

    def __init__(
        self,
        gateway: AuthenticatedGateway,
        session: SessionManager,
        guard: SubmissionGuard | None = None,
    ) -> None:
        self._gateway = gateway
        self._session = session
        self._guard = guard or SubmissionGuard()
        self._listeners: list[SessionListener] = []

    def add_session_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    async def login(self, email: str, password: str) -> Session:
        """Autentica e grava a sessão.

        Raises:
            ValidationError: E-mail ou senha em branco
            BackendError: Credenciais recusadas (mensagem do backend)
            TransportError: Falha de rede ou resposta sem token/usuário
            SessionStoreError: Sessão não pôde ser persistida
        """
        require_filled(email, password, message=MSG_LOGIN_REQUIRED)

        async with self._guard.hold(LOGIN_ACTION):
            body = await self._gateway.post(
                LOGIN_PATH,
                {"email": email.strip(), "senha": password},
                fallback_message=MSG_LOGIN_FAILED,
            )
        token, user = _parse_login(body)

        session = self._session.set_session(token, user)
        self._notify()
        logger.info("login_succeeded", extra={"role": user.role.value})
        return session

    async def register(self, form: RegistrationForm) -> None:
        """Cria a conta; o usuário volta à tela de login em seguida.

        Raises:
            ValidationError: Campos vazios ou perfil não permitido
            GatewayError: Rejeição do backend ou falha de rede
        """
        form.validate_for_submission()
        async with self._guard.hold(REGISTER_ACTION):
            await self._gateway.post(
                REGISTER_PATH,
                form.to_payload(),
                fallback_message=MSG_REGISTER_FAILED,
            )
        logger.info("account_registered", extra={"role": form.role.value})

    def logout(self) -> None:
        """Encerra a sessão; vale para a próxima requisição."""
        try:
            self._session.clear_session()
        finally:
            self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()


def _parse_login(body: object) -> tuple[str, User]:
    if not isinstance(body, dict):
        raise TransportError(MSG_LOGIN_RESPONSE_INVALID)
    token = body.get(TOKEN_KEY)
    raw_user = body.get(USER_KEY)
    if not isinstance(token, str) or not token or not isinstance(raw_user, dict):
        logger.error("login_response_invalid", extra={"keys": sorted(body)})
        raise TransportError(MSG_LOGIN_RESPONSE_INVALID)
    try:
        user = User.model_validate(raw_user)
    except PydanticValidationError as exc:
        logger.error("login_user_invalid", extra={"error_count": exc.error_count()})
        raise TransportError(MSG_LOGIN_RESPONSE_INVALID) from exc
    return token, user
