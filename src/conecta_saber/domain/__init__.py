"""Modelos de domínio do cliente Conecta Saber."""

from conecta_saber.domain.appointment import Appointment
from conecta_saber.domain.offer import Offer, OfferDraft
from conecta_saber.domain.registration import RegistrationForm
from conecta_saber.domain.user import SELF_REGISTRATION_ROLES, User, UserRole

__all__ = [
    "SELF_REGISTRATION_ROLES",
    "Appointment",
    "Offer",
    "OfferDraft",
    "RegistrationForm",
    "User",
    "UserRole",
]
