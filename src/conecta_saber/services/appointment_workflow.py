"""Fluxo de agendamento: pedido do aluno e resposta do voluntário.

Ciclo de vida (ver conecta_saber.fsm):
    PENDENTE → CONFIRMADO | CANCELADO

O cliente nunca altera um status por conta própria: a máquina local só
avança depois que o backend aceitou a resposta, e as listas são sempre
recarregadas do backend após uma escrita.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from conecta_saber.domain.appointment import Appointment
from conecta_saber.domain.user import UserRole
from conecta_saber.domain.validators import validate_lesson_date
from conecta_saber.fsm import (
    DECISIONS,
    AppointmentStateMachine,
    AppointmentStatus,
    StatusTransition,
    create_state_machine,
    is_terminal,
    parse_status,
)
from conecta_saber.services._parsing import parse_list, parse_optional
from conecta_saber.services.list_view import ListView
from conecta_saber.services.submission_guard import SubmissionGuard
from conecta_saber.utils.errors import (
    ConectaSaberError,
    InvalidTransitionError,
    ValidationError,
)

if TYPE_CHECKING:
    from conecta_saber.infra.http import AuthenticatedGateway
    from conecta_saber.sessions import SessionManager

logger = logging.getLogger(__name__)

APPOINTMENTS_PATH = "/agendamentos"
AGENDA_PATH = "/agendamentos/agenda"
PENDING_PATH = "/agendamentos/pendentes"
RESPOND_PATH = "/agendamentos/{appointment_id}/responder"

VOLUNTEER_RESPONSE_TRIGGER = "volunteer_response"

MSG_REQUEST_FAILED = "Erro ao solicitar agendamento."
MSG_RESPOND_FAILED = "Não foi possível processar a ação."
MSG_AGENDA_FAILED = "Erro ao carregar a agenda."
MSG_PENDING_FAILED = "Erro ao carregar solicitações."
MSG_INVALID_DECISION = "Resposta inválida: use CONFIRMADO ou CANCELADO."


class AppointmentWorkflow:
    """Operações de agendamento expostas à camada de apresentação.

    Attributes:
        confirmed: Agenda confirmada do usuário logado
        pending: Solicitações pendentes do voluntário logado
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
        self._machines: dict[int, AppointmentStateMachine] = {}
        self.confirmed: ListView[Appointment] = ListView("confirmed_agenda")
        self.pending: ListView[Appointment] = ListView("pending_requests")

    # ──────────────────────────────────────────────────────────────
    # Aluno
    # ──────────────────────────────────────────────────────────────

    def is_requesting(self, offer_id: int) -> bool:
        return self._guard.is_busy(_request_key(offer_id))

    async def request_appointment(self, offer_id: int, lesson_date: str) -> Appointment | None:
        """Pede uma aula de uma oferta numa data.

        A data é validada só pelo formato AAAA-MM-DD; o backend decide se
        o dia é atendido pela oferta.

        Returns:
            Agendamento criado, se o backend devolver o recurso no corpo

        Raises:
            ValidationError: Data vazia ou fora do formato
            RoleNotAllowedError / NotAuthenticatedError: Sem perfil aluno
            GatewayError: Rejeição do backend ou falha de rede
        """
        self._session.require_user(UserRole.LEARNER)
        lesson_day = validate_lesson_date(lesson_date)

        async with self._guard.hold(_request_key(offer_id)):
            body = await self._gateway.post(
                APPOINTMENTS_PATH,
                {"id_oferta": offer_id, "data_aula": lesson_day},
                fallback_message=MSG_REQUEST_FAILED,
            )
        logger.info("appointment_requested", extra={"offer_id": offer_id})

        created = parse_optional(body, Appointment)
        if created is None:
            return None
        created = created.with_status(created.status or AppointmentStatus.REQUESTED)
        self._track(created)
        return created

    # ──────────────────────────────────────────────────────────────
    # Voluntário
    # ──────────────────────────────────────────────────────────────

    def is_responding(self, appointment_id: int) -> bool:
        return self._guard.is_busy(_respond_key(appointment_id))

    async def respond(
        self,
        appointment_id: int,
        decision: AppointmentStatus | str,
    ) -> StatusTransition:
        """Confirma ou recusa uma solicitação pendente.

        Se o agendamento já é conhecido em estado terminal, a resposta é
        recusada localmente, sem chamada de rede. Com ou sem sucesso, a
        lista de pendentes é recarregada do backend.

        Raises:
            ValidationError: Decisão fora de CONFIRMADO/CANCELADO
            InvalidTransitionError: Agendamento já respondido
            DuplicateSubmissionError: Resposta ao mesmo item em andamento
            GatewayError: Rejeição do backend ou falha de rede
        """
        self._session.require_user(UserRole.VOLUNTEER)
        target = _parse_decision(decision)

        machine = self._machines.get(appointment_id)
        if machine is not None:
            check = machine.check(target)
            if not check.allowed:
                logger.warning(
                    "appointment_response_blocked",
                    extra={
                        "appointment_id": appointment_id,
                        "current_state": machine.current_state.name,
                        "target_state": target.name,
                    },
                )
                raise InvalidTransitionError(check.reason)

        async with self._guard.hold(_respond_key(appointment_id)):
            try:
                await self._gateway.patch(
                    RESPOND_PATH.format(appointment_id=appointment_id),
                    {"novo_status": target.value},
                    fallback_message=MSG_RESPOND_FAILED,
                )
            except ConectaSaberError as exc:
                logger.warning(
                    "appointment_response_rejected",
                    extra={
                        "appointment_id": appointment_id,
                        "target_state": target.name,
                        "error_type": type(exc).__name__,
                    },
                )
                await self._refresh_quietly(self.list_pending)
                raise

        transition = self._record_response(appointment_id, target)
        logger.info("appointment_status_changed", extra=transition.to_log_dict())

        await self._refresh_quietly(self.list_pending)
        if target is AppointmentStatus.CONFIRMED:
            await self._refresh_quietly(self.list_confirmed)
        return transition

    # ──────────────────────────────────────────────────────────────
    # Listas
    # ──────────────────────────────────────────────────────────────

    async def list_confirmed(self) -> list[Appointment]:
        """Agenda confirmada do usuário logado (aluno ou voluntário)."""
        self._session.require_user()
        items = await self.confirmed.refresh(self._fetch_confirmed)
        self._sync_machines(items)
        return items

    async def list_pending(self) -> list[Appointment]:
        """Solicitações aguardando resposta do voluntário logado."""
        self._session.require_user(UserRole.VOLUNTEER)
        items = await self.pending.refresh(self._fetch_pending)
        self._sync_machines(items)
        return items

    def counterpart_label(self, appointment: Appointment) -> str:
        """Rótulo da outra parte conforme o perfil logado ("Aluno: …"/"Prof: …")."""
        user = self._session.require_user()
        return appointment.counterpart_label(user.role)

    def machine_for(self, appointment_id: int) -> AppointmentStateMachine | None:
        return self._machines.get(appointment_id)

    def reset(self) -> None:
        """Esquece listas e máquinas (logout ou troca de usuário)."""
        self.confirmed.invalidate()
        self.pending.invalidate()
        self._machines.clear()

    # ──────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────

    async def _fetch_confirmed(self) -> list[Appointment]:
        payload = await self._gateway.get(AGENDA_PATH, fallback_message=MSG_AGENDA_FAILED)
        return _stamp(
            parse_list(payload, Appointment, source="confirmed_agenda"),
            AppointmentStatus.CONFIRMED,
        )

    async def _fetch_pending(self) -> list[Appointment]:
        payload = await self._gateway.get(PENDING_PATH, fallback_message=MSG_PENDING_FAILED)
        return _stamp(
            parse_list(payload, Appointment, source="pending_requests"),
            AppointmentStatus.REQUESTED,
        )

    def _track(self, appointment: Appointment) -> AppointmentStateMachine:
        state = appointment.status or AppointmentStatus.REQUESTED
        machine = self._machines.get(appointment.id)
        if machine is None:
            machine = create_state_machine(appointment.id, state)
            self._machines[appointment.id] = machine
        elif machine.is_terminal and not is_terminal(state):
            # Resposta já aceita pelo backend; leitura de pendentes anterior a ela
            logger.debug(
                "appointment_stale_pending_ignored",
                extra={
                    "appointment_id": appointment.id,
                    "current_state": machine.current_state.name,
                },
            )
        else:
            machine.sync(state)
        return machine

    def _sync_machines(self, items: list[Appointment]) -> None:
        for item in items:
            self._track(item)

    def _record_response(
        self,
        appointment_id: int,
        target: AppointmentStatus,
    ) -> StatusTransition:
        machine = self._machines.get(appointment_id)
        if machine is None:
            machine = create_state_machine(appointment_id)
            self._machines[appointment_id] = machine
        result = machine.transition(target, VOLUNTEER_RESPONSE_TRIGGER)
        if result.transition is not None:
            return result.transition

        # Uma leitura concorrente mudou o espelho; o backend já aceitou.
        previous = machine.current_state
        machine.sync(target)
        return StatusTransition(
            appointment_id=appointment_id,
            from_state=previous,
            to_state=target,
            trigger=VOLUNTEER_RESPONSE_TRIGGER,
            metadata={"reconciled": True},
        )

    async def _refresh_quietly(self, loader: Callable[[], Awaitable[Any]]) -> None:
        try:
            await loader()
        except ConectaSaberError as exc:
            logger.warning(
                "post_write_refresh_failed",
                extra={
                    "loader": getattr(loader, "__name__", "unknown"),
                    "error_type": type(exc).__name__,
                },
            )


def _parse_decision(decision: AppointmentStatus | str) -> AppointmentStatus:
    target = parse_status(decision)
    if target is None or target not in DECISIONS:
        raise ValidationError(MSG_INVALID_DECISION)
    return target


def _stamp(items: list[Appointment], status: AppointmentStatus) -> list[Appointment]:
    """Marca o status que a própria rota implica (a API não o envia)."""
    return [item.with_status(status) for item in items]


def _request_key(offer_id: int) -> str:
    return f"request:{offer_id}"


def _respond_key(appointment_id: int) -> str:
    return f"respond:{appointment_id}"
