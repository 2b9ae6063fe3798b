"""Serviços do core: autenticação, ofertas e agendamentos."""

from conecta_saber.services.appointment_workflow import AppointmentWorkflow
from conecta_saber.services.auth_service import AuthService
from conecta_saber.services.list_view import ListView
from conecta_saber.services.offer_registry import OfferRegistry, SearchResult
from conecta_saber.services.submission_guard import SubmissionGuard

__all__ = [
    "AppointmentWorkflow",
    "AuthService",
    "ListView",
    "OfferRegistry",
    "SearchResult",
    "SubmissionGuard",
]
