"""Gerenciador de sessões de login.

Sessões autorizam chamadas a este serviço e são independentes das
credenciais OAuth. Nunca são removidas: `end` apenas desativa.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.sessions.models import Session

if TYPE_CHECKING:
    from app.domain.account import Account
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionManager:
    """Cria, valida e encerra sessões."""

    __slots__ = ("_clock", "_gateway", "_ttl")

    def __init__(
        self,
        gateway: PersistenceGatewayProtocol,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Inicializa gerenciador.

        Args:
            gateway: Storage de sessões e contas
            ttl: Duração absoluta da sessão
            clock: Relógio injetável (testes)
        """
        self._gateway = gateway
        self._ttl = ttl
        self._clock = clock

    async def create(
        self,
        account_id: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Session:
        now = self._clock()
        session = Session(
            session_id=secrets.token_urlsafe(32),
            account_id=account_id,
            created_at=now,
            expires_at=now + self._ttl,
            ip_address=ip_address or "unknown",
            user_agent=user_agent or "unknown",
            active=True,
        )
        await self._gateway.create_session(session)
        logger.info("session_created", extra={"account_id": account_id})
        return session

    async def validate(self, session_id: str | None) -> tuple[Session, Account] | None:
        """Resolve sessão válida e sua conta.

        Returns:
            (Session, Account) ou None se ausente, inativa, expirada ou sem conta
        """
        if not session_id:
            return None

        session = await self._gateway.get_session(session_id)
        if session is None or not session.is_valid(self._clock()):
            return None

        account = await self._gateway.get_account(session.account_id)
        if account is None:
            logger.warning(
                "session_account_missing", extra={"account_id": session.account_id}
            )
            return None
        return session, account

    async def end(self, session_id: str) -> None:
        """Desativa a sessão. Idempotente."""
        ended = await self._gateway.end_session(session_id)
        logger.info("session_ended", extra={"found": ended})
