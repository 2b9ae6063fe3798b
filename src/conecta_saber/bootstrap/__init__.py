"""Bootstrap do cliente: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings,
cria o store de sessão e conecta gateway e serviços ao mesmo
SessionManager.

Uso:
    from conecta_saber.bootstrap import create_client

    async with create_client() as client:
        await client.auth.login(email, senha)
        agenda = await client.appointments.list_confirmed()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from conecta_saber.bootstrap.dependencies import create_gateway, create_session_store
from conecta_saber.config.logging import configure_logging
from conecta_saber.config.settings import (
    BackendSettings,
    BaseSettings,
    SessionSettings,
    get_backend_settings,
    get_base_settings,
    get_session_settings,
)
from conecta_saber.observability import get_correlation_id
from conecta_saber.services import (
    AppointmentWorkflow,
    AuthService,
    OfferRegistry,
    SubmissionGuard,
)
from conecta_saber.sessions import SessionManager

if TYPE_CHECKING:
    import httpx

    from conecta_saber.infra.http import AuthenticatedGateway
    from conecta_saber.protocols.session_store import SessionStoreProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_logging(base: BaseSettings | None = None) -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez por processo."""
    base = base or get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(base: BaseSettings, session: SessionSettings) -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"session: {error}" for error in session.validate(base))

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


class ConectaSaberClient:
    """Fachada do core usada pela camada de apresentação.

    Attributes:
        session: Dono único da sessão
        auth: Login, cadastro e logout
        offers: Cadastro, busca e listagem de ofertas
        appointments: Pedido, resposta e listas de agendamentos
    """

    def __init__(
        self,
        session: SessionManager,
        gateway: AuthenticatedGateway,
        guard: SubmissionGuard | None = None,
    ) -> None:
        guard = guard or SubmissionGuard()
        self.session = session
        self._gateway = gateway
        self.auth = AuthService(gateway, session, guard)
        self.offers = OfferRegistry(gateway, session, guard)
        self.appointments = AppointmentWorkflow(gateway, session, guard)
        self.auth.add_session_listener(self._on_session_changed)

    async def __aenter__(self) -> ConectaSaberClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def logout(self) -> None:
        """Encerra a sessão e esvazia todas as listas exibidas."""
        self.auth.logout()

    async def aclose(self) -> None:
        await self._gateway.aclose()

    def _on_session_changed(self) -> None:
        self._gateway.reset()
        self.offers.reset()
        self.appointments.reset()
        logger.debug("client_views_invalidated", extra={"epoch": self.session.epoch})


def create_client(
    *,
    base_settings: BaseSettings | None = None,
    backend_settings: BackendSettings | None = None,
    session_settings: SessionSettings | None = None,
    store: SessionStoreProtocol | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    configure_logs: bool = True,
) -> ConectaSaberClient:
    """Monta o cliente a partir das settings (env por padrão).

    Args:
        store: Store de sessão pronto (ignora SessionSettings)
        transport: Transport httpx alternativo (ex.: ASGITransport em testes)
        configure_logs: Instala o logging JSON no root logger
    """
    base = base_settings or get_base_settings()
    backend = backend_settings or get_backend_settings()
    session_cfg = session_settings or get_session_settings()

    if configure_logs:
        initialize_logging(base)
    if store is None:
        validate_runtime_settings(base, session_cfg)
        store = create_session_store(session_cfg)

    session = SessionManager(store)
    gateway = create_gateway(session, backend, transport)
    logger.info(
        "client_created",
        extra={"component": "bootstrap", "environment": base.environment},
    )
    return ConectaSaberClient(session, gateway)


__all__ = [
    "ConectaSaberClient",
    "create_client",
    "initialize_logging",
    "validate_runtime_settings",
]
