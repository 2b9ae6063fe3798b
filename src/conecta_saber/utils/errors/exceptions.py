"""Exceções do core do cliente Conecta Saber.

Toda falha carrega uma mensagem pronta para exibição; a camada de
apresentação é a única consumidora e só precisa de `str(exc)`/`exc.message`.
"""

from __future__ import annotations


class ConectaSaberError(Exception):
    """Base para falhas reportáveis ao usuário."""

    default_message = "Não foi possível concluir a operação."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ConectaSaberError):
    """Entrada local inválida; nenhuma chamada de rede foi feita."""

    default_message = "Dados inválidos."


class GatewayError(ConectaSaberError):
    """Falha na ida e volta ao backend."""

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BackendError(GatewayError):
    """Backend respondeu com status fora da faixa 2xx."""


class TransportError(GatewayError):
    """Falha de rede, timeout ou resposta ilegível."""

    default_message = "Verifique sua conexão e tente novamente."


class SessionStoreError(ConectaSaberError):
    """Falha de IO ao ler/gravar a sessão persistida."""

    default_message = "Falha ao acessar a sessão salva."


class NotAuthenticatedError(ConectaSaberError):
    """Operação exige login."""

    default_message = "Faça login para continuar."


class RoleNotAllowedError(ConectaSaberError):
    """Perfil do usuário não permite a operação."""

    default_message = "Seu perfil não permite esta ação."


class InvalidTransitionError(ConectaSaberError):
    """Máquina de estados local rejeitou a transição de status."""


class DuplicateSubmissionError(ConectaSaberError):
    """Mesma ação já está em andamento."""

    default_message = "Aguarde, a ação anterior ainda está em andamento."
