"""Registro de ofertas: cadastro e listagem do voluntário, busca do aluno."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from conecta_saber.domain.offer import Offer, OfferDraft
from conecta_saber.domain.user import UserRole
from conecta_saber.domain.validators import MSG_SEARCH_TERM_REQUIRED, require_filled
from conecta_saber.services._parsing import parse_list, parse_optional
from conecta_saber.services.list_view import ListView
from conecta_saber.services.submission_guard import SubmissionGuard
from conecta_saber.utils.errors import ConectaSaberError

if TYPE_CHECKING:
    from conecta_saber.infra.http import AuthenticatedGateway
    from conecta_saber.sessions import SessionManager

logger = logging.getLogger(__name__)

OFFERS_PATH = "/ofertas"
SEARCH_PATH = "/ofertas/busca"
OWN_OFFERS_PATH = "/ofertas/meus-registros"

CREATE_OFFER_ACTION = "create_offer"

MSG_CREATE_FAILED = "Erro ao cadastrar oferta."
MSG_SEARCH_FAILED = "Falha ao buscar aulas."
MSG_LIST_FAILED = "Erro ao buscar ofertas."
MSG_NO_RESULTS = "Nenhuma aula encontrada para essa matéria."


@dataclass(frozen=True)
class SearchResult:
    """Resultado de uma busca; lista vazia é um resultado válido.

    Attributes:
        term: Termo buscado
        offers: Ofertas devolvidas para este termo
        current: False se uma busca mais nova já ocupou a lista exibida
    """

    term: str
    offers: list[Offer] = field(default_factory=list)
    current: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.offers

    @property
    def notice(self) -> str | None:
        return MSG_NO_RESULTS if self.is_empty else None


class OfferRegistry:
    """Operações de oferta expostas à camada de apresentação.

    Attributes:
        own_offers: Ofertas do voluntário logado
        search_results: Resultado da última busca aplicada
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
        self.own_offers: ListView[Offer] = ListView("own_offers")
        self.search_results: ListView[Offer] = ListView("offer_search")

    @property
    def is_creating(self) -> bool:
        return self._guard.is_busy(CREATE_OFFER_ACTION)

    async def create_offer(self, draft: OfferDraft) -> Offer | None:
        """Publica uma oferta do voluntário logado.

        O rascunho é imutável; em qualquer falha ele continua com a tela
        para nova tentativa.

        Returns:
            Oferta criada, se o backend devolver o recurso no corpo

        Raises:
            ValidationError: Campos vazios ou horário fora de HH:MM
            RoleNotAllowedError / NotAuthenticatedError: Sem perfil voluntário
            GatewayError: Rejeição do backend ou falha de rede
        """
        self._session.require_user(UserRole.VOLUNTEER)
        draft.validate_for_submission()

        async with self._guard.hold(CREATE_OFFER_ACTION):
            body = await self._gateway.post(
                OFFERS_PATH,
                draft.to_payload(),
                fallback_message=MSG_CREATE_FAILED,
            )
        logger.info("offer_created", extra={"component": "offer_registry"})

        try:
            await self.list_own()
        except ConectaSaberError:
            logger.warning("own_offers_refresh_failed", extra={"component": "offer_registry"})
        return parse_optional(body, Offer)

    async def search(self, term: str) -> SearchResult:
        """Busca ofertas pela disciplina (substring, resolvida no backend).

        Raises:
            NotAuthenticatedError: Sem login
            ValidationError: Termo em branco
            GatewayError: Falha de rede ou rejeição do backend
        """
        self._session.require_user()
        require_filled(term, message=MSG_SEARCH_TERM_REQUIRED)
        normalized = term.strip()
        view = self.search_results

        ticket = view.begin()
        try:
            payload = await self._gateway.get(
                SEARCH_PATH,
                params={"disciplina": normalized},
                fallback_message=MSG_SEARCH_FAILED,
            )
            offers = parse_list(payload, Offer, source="offer_search")
        except BaseException as exc:
            view.fail(ticket, exc.message if isinstance(exc, ConectaSaberError) else None)
            raise
        current = view.commit(ticket, offers)
        logger.info(
            "offer_search_completed",
            extra={"component": "offer_registry", "result_count": len(offers)},
        )
        return SearchResult(term=normalized, offers=offers, current=current)

    async def list_own(self) -> list[Offer]:
        """Recarrega as ofertas do voluntário logado (substituição completa)."""
        self._session.require_user(UserRole.VOLUNTEER)
        return await self.own_offers.refresh(self._fetch_own)

    async def _fetch_own(self) -> list[Offer]:
        payload = await self._gateway.get(OWN_OFFERS_PATH, fallback_message=MSG_LIST_FAILED)
        return parse_list(payload, Offer, source="own_offers")

    def reset(self) -> None:
        self.own_offers.invalidate()
        self.search_results.invalidate()
