"""Ciclo de vida das credenciais OAuth por conta.

Único caminho pelo qual chamadas autenticadas obtêm access token: quem
chama nunca lê tokens do storage diretamente.

Refresh por conta é single-flight: chamadas concorrentes de ensure_valid
para a mesma conta aguardam a mesma task de refresh e recebem o mesmo
resultado, inclusive a mesma exceção quando o refresh falha.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.domain.credential import Credential
from utils.errors import ReauthRequired

if TYPE_CHECKING:
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.youtube_api import OAuthProviderProtocol, TokenGrant

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_WINDOW = timedelta(minutes=5)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CredentialManager:
    """Troca de code, refresh e garantia de token válido por conta."""

    def __init__(
        self,
        provider: OAuthProviderProtocol,
        gateway: PersistenceGatewayProtocol,
        refresh_window: timedelta = DEFAULT_REFRESH_WINDOW,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._provider = provider
        self._gateway = gateway
        self._refresh_window = refresh_window
        self._clock = clock
        # account_id -> refresh em andamento; removida ao terminar
        self._inflight: dict[str, asyncio.Task[str]] = {}

    def authorization_url(self, state: str) -> str:
        return self._provider.authorization_url(state)

    async def exchange_code(self, code: str) -> Credential:
        """Troca authorization code por credencial ainda não vinculada.

        Raises:
            AuthExchangeError: Provedor recusou o code
            TransientExternalError: Falha de rede/timeout
        """
        grant = await self._provider.exchange_code(code)
        credential = self._from_grant(grant, account_id="", fallback_refresh_token="")
        logger.info("credential_exchanged", extra={"scopes": list(credential.scopes)})
        return credential

    async def refresh(self, refresh_token: str, account_id: str = "") -> Credential:
        """Renova o access token.

        Mantém o refresh token original quando o provedor não envia outro.

        Raises:
            ReauthRequired: Provedor rejeitou o refresh token
            TransientExternalError: Falha de rede/timeout/5xx
        """
        if not refresh_token:
            raise ReauthRequired("missing_refresh_token", account_id=account_id)
        grant = await self._provider.refresh_token(refresh_token)
        return self._from_grant(
            grant, account_id=account_id, fallback_refresh_token=refresh_token
        )

    async def store(self, account_id: str, credential: Credential) -> Credential:
        """Vincula a credencial à conta e substitui a anterior."""
        bound = credential.bind(account_id)
        await self._gateway.save_credential(bound)
        logger.info("credential_stored", extra={"account_id": account_id})
        return bound

    async def ensure_valid(self, account_id: str) -> str:
        """Retorna access token válido, renovando se expira dentro da janela.

        Raises:
            ReauthRequired: Sem credencial, sem refresh token ou refresh rejeitado
            TransientExternalError: Falha transitória no refresh
        """
        credential = await self._load(account_id)
        if not credential.needs_refresh(self._clock(), self._refresh_window):
            return credential.access_token

        task = self._inflight.get(account_id)
        if task is None:
            task = asyncio.ensure_future(self._refresh_and_store(account_id))
            self._inflight[account_id] = task
            task.add_done_callback(lambda done: self._settle(account_id, done))
        else:
            logger.debug("credential_refresh_shared", extra={"account_id": account_id})

        # Cancelar um chamador não cancela o refresh dos demais
        return await asyncio.shield(task)

    async def _refresh_and_store(self, account_id: str) -> str:
        # Um refresh anterior pode ter terminado entre a leitura e a criação da task
        credential = await self._load(account_id)
        if not credential.needs_refresh(self._clock(), self._refresh_window):
            return credential.access_token

        try:
            refreshed = await self.refresh(credential.refresh_token, account_id=account_id)
        except ReauthRequired as exc:
            exc.account_id = account_id
            logger.warning("credential_reauth_required", extra={"account_id": account_id})
            raise

        await self._gateway.save_credential(refreshed)
        logger.info(
            "credential_refreshed",
            extra={
                "account_id": account_id,
                "expires_at": refreshed.expires_at.isoformat(),
            },
        )
        return refreshed.access_token

    def _settle(self, account_id: str, task: asyncio.Task[str]) -> None:
        if self._inflight.get(account_id) is task:
            del self._inflight[account_id]
        # Marca a exceção como consumida mesmo se todos os chamadores foram cancelados
        if not task.cancelled():
            task.exception()

    async def _load(self, account_id: str) -> Credential:
        credential = await self._gateway.get_credential(account_id)
        if credential is None:
            raise ReauthRequired("credential_not_found", account_id=account_id)
        return credential

    def _from_grant(
        self,
        grant: TokenGrant,
        *,
        account_id: str,
        fallback_refresh_token: str,
    ) -> Credential:
        # expires_in negativo nunca pode gerar expiração no passado
        expires_at = self._clock() + timedelta(seconds=max(grant.expires_in, 0))
        return Credential(
            account_id=account_id,
            access_token=grant.access_token,
            refresh_token=grant.refresh_token or fallback_refresh_token,
            expires_at=expires_at,
            token_type=grant.token_type or "Bearer",
            scopes=tuple(grant.scope.split()),
        )
