"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BackendError,
    ConectaSaberError,
    DuplicateSubmissionError,
    GatewayError,
    InvalidTransitionError,
    NotAuthenticatedError,
    RoleNotAllowedError,
    SessionStoreError,
    TransportError,
    ValidationError,
)

__all__ = [
    "BackendError",
    "ConectaSaberError",
    "DuplicateSubmissionError",
    "GatewayError",
    "InvalidTransitionError",
    "NotAuthenticatedError",
    "RoleNotAllowedError",
    "SessionStoreError",
    "TransportError",
    "ValidationError",
]
