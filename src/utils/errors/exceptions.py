"""Exceções de domínio e de infraestrutura do replydesk.

Duas famílias:
    - InfrastructureError: falhas transitórias de IO (API remota, storage).
    - ReplyDeskError: falhas de domínio (sessão, credencial, entrada inválida).

Nenhuma mensagem carrega tokens ou texto de comentário.
"""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class TransientExternalError(InfrastructureError):
    """Falha de rede, timeout ou status não-2xx de API remota (retentável)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InternalPersistenceError(InfrastructureError):
    """Falha do storage ao ler ou gravar uma entidade."""


class RedisConnectionError(InternalPersistenceError):
    """Falha de conexão/timeout ao acessar Redis."""


class ReplyDeskError(Exception):
    """Base para erros de domínio."""


class Unauthorized(ReplyDeskError):
    """Sessão ausente, inativa ou expirada."""


class ReauthRequired(ReplyDeskError):
    """Provedor rejeitou o refresh token; exige novo fluxo OAuth completo.

    Não deve ser retentado automaticamente.
    """

    def __init__(self, message: str, account_id: str = "") -> None:
        super().__init__(message)
        self.account_id = account_id


class AuthExchangeError(ReplyDeskError):
    """Provedor recusou a troca do authorization code."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFound(ReplyDeskError):
    """Entidade inexistente."""


class ValidationError(ReplyDeskError):
    """Entrada malformada."""
