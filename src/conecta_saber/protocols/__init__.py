"""Protocolos e contratos do core do cliente."""

from .session_store import SessionStoreProtocol

__all__ = [
    "SessionStoreProtocol",
]
