"""Composition root — conecta implementações concretas aos protocolos.

Todos os valores de configuração são passados explicitamente; os
componentes do core nunca leem o ambiente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from api.connectors.youtube import GoogleOAuthClient, YouTubeDataApiClient
from app.bootstrap.clients import (
    create_async_redis_client,
    create_google_http_client,
    create_openai_client,
)
from app.infra.ai import OpenAIReplyClient
from app.infra.crypto import TokenCipher
from app.infra.stores import MemoryPersistenceGateway, RedisPersistenceGateway
from app.services.credential_manager import CredentialManager
from app.services.interaction_ledger import InteractionLedger
from app.services.reply_generation import ReplyGenerationService
from app.services.reply_poster import ReplyPoster
from app.sessions.manager import SessionManager
from app.sync import ResourcePager, SyncEngine
from app.use_cases.authenticate_account import AuthenticateAccountUseCase

if TYPE_CHECKING:
    from openai import AsyncOpenAI
    from redis.asyncio import Redis as AsyncRedis

    from api.connectors.youtube import HttpClient
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.reply_generator import ReplyGeneratorProtocol
    from app.protocols.youtube_api import OAuthProviderProtocol, YouTubeApiProtocol
    from config.settings import (
        BaseSettings,
        OpenAISettings,
        SessionSettings,
        StorageSettings,
        YouTubeSettings,
    )

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Services:
    """Grafo de serviços usado pelas rotas (guardado em app.state)."""

    gateway: PersistenceGatewayProtocol
    credentials: CredentialManager
    sessions: SessionManager
    sync: SyncEngine
    poster: ReplyPoster
    ledger: InteractionLedger
    reply_generation: ReplyGenerationService
    authenticate: AuthenticateAccountUseCase
    session_header: str = "x-session-id"
    auth_success_redirect: str = "/auth/success"
    http_client: HttpClient | None = None
    storage_backend: str = "memory"
    redis_client: AsyncRedis | None = None
    openai_client: AsyncOpenAI | None = None

    async def aclose(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()
        if self.redis_client is not None:
            await self.redis_client.aclose()
        if self.openai_client is not None:
            await self.openai_client.close()


def create_gateway(
    storage: StorageSettings,
    base: BaseSettings,
    redis_client: AsyncRedis | None = None,
) -> PersistenceGatewayProtocol:
    """Cria gateway conforme STORAGE_BACKEND.

    - "memory": MemoryPersistenceGateway (dev only)
    - "redis": RedisPersistenceGateway (staging/production); reaproveita
      `redis_client` quando informado
    """
    if storage.backend == "redis":
        gateway = RedisPersistenceGateway(
            redis_client or create_async_redis_client(storage.redis_url),
            cipher=TokenCipher(storage.token_encryption_key),
            key_prefix=storage.redis_key_prefix,
        )
        logger.info("persistence_gateway_created", extra={"backend": "redis"})
        return gateway

    if not base.is_development:
        logger.warning(
            "memory_gateway_in_non_dev",
            extra={"backend": "memory", "environment": base.environment},
        )
    logger.info("persistence_gateway_created", extra={"backend": "memory"})
    return MemoryPersistenceGateway()


def build_services(
    *,
    gateway: PersistenceGatewayProtocol,
    oauth: OAuthProviderProtocol,
    youtube_api: YouTubeApiProtocol,
    generator: ReplyGeneratorProtocol | None,
    youtube: YouTubeSettings,
    session: SessionSettings,
    pager: ResourcePager | None = None,
    http_client: HttpClient | None = None,
    storage_backend: str = "memory",
    redis_client: AsyncRedis | None = None,
    openai_client: AsyncOpenAI | None = None,
) -> Services:
    """Monta o grafo de serviços a partir de dependências já criadas."""
    ledger = InteractionLedger(gateway)
    credentials = CredentialManager(
        oauth,
        gateway,
        refresh_window=timedelta(seconds=youtube.token_refresh_window_seconds),
    )
    sessions = SessionManager(gateway, ttl=timedelta(days=session.ttl_days))
    pager = pager or ResourcePager(youtube.min_page_interval_seconds)

    return Services(
        gateway=gateway,
        credentials=credentials,
        sessions=sessions,
        sync=SyncEngine(credentials, youtube_api, pager, gateway, ledger),
        poster=ReplyPoster(credentials, youtube_api, gateway, ledger),
        ledger=ledger,
        reply_generation=ReplyGenerationService(generator, gateway, ledger),
        authenticate=AuthenticateAccountUseCase(credentials, oauth, gateway, sessions),
        session_header=session.header_name,
        auth_success_redirect=youtube.auth_success_redirect,
        http_client=http_client,
        storage_backend=storage_backend,
        redis_client=redis_client,
        openai_client=openai_client,
    )


def create_services(
    *,
    base: BaseSettings,
    youtube: YouTubeSettings,
    session: SessionSettings,
    storage: StorageSettings,
    openai: OpenAISettings,
) -> Services:
    """Cria o grafo completo com conectores reais."""
    http_client = create_google_http_client(youtube)
    openai_client = create_openai_client(openai)
    generator = (
        OpenAIReplyClient(settings=openai, client=openai_client)
        if openai_client is not None
        else None
    )
    redis_client = (
        create_async_redis_client(storage.redis_url) if storage.backend == "redis" else None
    )
    return build_services(
        gateway=create_gateway(storage, base, redis_client),
        oauth=GoogleOAuthClient(youtube, http_client),
        youtube_api=YouTubeDataApiClient(youtube, http_client),
        generator=generator,
        youtube=youtube,
        session=session,
        http_client=http_client,
        storage_backend=storage.backend,
        redis_client=redis_client,
        openai_client=openai_client,
    )
