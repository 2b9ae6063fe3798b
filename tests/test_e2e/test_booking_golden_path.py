"""Teste E2E do caminho feliz de agendamento contra o backend fake (ASGI)."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from tests.fakes.fake_backend import BASE_URL, FakeConectaSaberBackend

from conecta_saber.bootstrap import ConectaSaberClient, create_client
from conecta_saber.config.settings import BackendSettings
from conecta_saber.domain import OfferDraft, RegistrationForm, UserRole
from conecta_saber.fsm import AppointmentStatus
from conecta_saber.infra.stores import MemorySessionStore
from conecta_saber.utils.errors import (
    BackendError,
    InvalidTransitionError,
    NotAuthenticatedError,
)


@pytest.fixture
def fake_backend() -> FakeConectaSaberBackend:
    backend = FakeConectaSaberBackend()
    backend.add_user("Bruno Lima", "bruno@example.com", "senha-v", "VOLUNTARIO")
    return backend


@pytest_asyncio.fixture
async def client(fake_backend: FakeConectaSaberBackend) -> AsyncIterator[ConectaSaberClient]:
    async with create_client(
        backend_settings=BackendSettings(api_base_url=BASE_URL, max_read_retries=0),
        store=MemorySessionStore(),
        transport=httpx.ASGITransport(app=fake_backend.app),
        configure_logs=False,
    ) as conecta:
        yield conecta


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_offer_request_and_confirmation_flow(
    client: ConectaSaberClient,
    fake_backend: FakeConectaSaberBackend,
) -> None:
    # Voluntário publica uma oferta
    await client.auth.login("bruno@example.com", "senha-v")
    offer = await client.offers.create_offer(
        OfferDraft(subject="Matemática", available_days="Seg, Qua", start_time="14:00", end_time="16:00")
    )
    assert offer is not None
    assert [o.subject for o in client.offers.own_offers.items] == ["Matemática"]
    client.logout()

    # Aluno cria conta, entra, busca e pede a aula
    await client.auth.register(
        RegistrationForm(
            name="Ana Souza",
            email="ana@example.com",
            password="senha-a",
            phone="11988887777",
            role=UserRole.LEARNER,
        )
    )
    await client.auth.login("ana@example.com", "senha-a")
    result = await client.offers.search("mate")
    assert not result.is_empty
    [found] = result.offers
    assert found.volunteer_name == "Bruno Lima"
    assert found.time_window == "14:00 às 16:00"
    await client.appointments.request_appointment(found.id, "2025-12-22")
    assert await client.appointments.list_confirmed() == []
    client.logout()

    # Voluntário confirma a solicitação
    await client.auth.login("bruno@example.com", "senha-v")
    [pending] = await client.appointments.list_pending()
    assert pending.status is AppointmentStatus.REQUESTED
    assert client.appointments.counterpart_label(pending) == "Aluno: Ana Souza"

    await client.appointments.respond(pending.id, AppointmentStatus.CONFIRMED)

    assert client.appointments.pending.items == []
    [confirmed] = client.appointments.confirmed.items
    assert confirmed.time_window == "14:00 - 16:00"
    patches_before = len(fake_backend.requests_to("PATCH", f"/agendamentos/{pending.id}/responder"))
    with pytest.raises(InvalidTransitionError):
        await client.appointments.respond(pending.id, AppointmentStatus.CANCELLED)
    assert len(fake_backend.requests_to("PATCH", f"/agendamentos/{pending.id}/responder")) == patches_before
    client.logout()

    # Aluno vê a aula confirmada com o nome do professor
    await client.auth.login("ana@example.com", "senha-a")
    [lesson] = await client.appointments.list_confirmed()
    assert client.appointments.counterpart_label(lesson) == "Prof: Bruno Lima"
    assert lesson.day is not None and lesson.day.isoformat() == "2025-12-22"


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_old_token_is_not_sent_after_logout(
    client: ConectaSaberClient,
    fake_backend: FakeConectaSaberBackend,
) -> None:
    await client.auth.login("bruno@example.com", "senha-v")
    await client.offers.search("qualquer")
    client.logout()

    with pytest.raises(NotAuthenticatedError):
        await client.offers.search("qualquer")
    with pytest.raises(BackendError, match="E-mail já cadastrado."):
        await client.auth.register(
            RegistrationForm(
                name="Outro", email="bruno@example.com", password="x", phone="1", role=UserRole.LEARNER
            )
        )

    [search] = fake_backend.requests_to("GET", "/ofertas/busca")
    assert search.authorization is not None
    [register] = fake_backend.requests_to("POST", "/usuarios/registro")
    assert register.authorization is None


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_wrong_password_surfaces_backend_message(client: ConectaSaberClient) -> None:
    with pytest.raises(BackendError, match="E-mail ou senha inválidos."):
        await client.auth.login("bruno@example.com", "errada")
    assert client.session.get_session() is None
