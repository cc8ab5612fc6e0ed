"""Factories de clientes externos — Redis, HTTP (Google) e OpenAI."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.youtube.http_base import HttpClient, HttpClientConfig

if TYPE_CHECKING:
    from openai import AsyncOpenAI
    from redis.asyncio import Redis as AsyncRedis

    from config.settings.ai.openai import OpenAISettings
    from config.settings.youtube import YouTubeSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Redis Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=4)
def create_async_redis_client(redis_url: str) -> AsyncRedis:
    """Cria cliente Redis assíncrono (singleton por URL).

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    from redis.asyncio import Redis as AsyncRedis

    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: AsyncRedis = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )
    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("async_redis_client_created", extra={"host": host})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# HTTP / OpenAI Client Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_google_http_client(settings: YouTubeSettings) -> HttpClient:
    """Cliente HTTP compartilhado pelos conectores OAuth e Data API."""
    config = HttpClientConfig(
        timeout_seconds=settings.request_timeout_seconds,
        default_headers={"Accept": "application/json"},
    )
    logger.info(
        "google_http_client_created",
        extra={"timeout_seconds": settings.request_timeout_seconds},
    )
    return HttpClient(config)


def create_openai_client(settings: OpenAISettings) -> AsyncOpenAI | None:
    """Cliente AsyncOpenAI ou None se desabilitado/sem chave."""
    if not settings.enabled or not settings.api_key:
        logger.info("openai_client_disabled")
        return None

    from openai import AsyncOpenAI

    return AsyncOpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url or None,
        timeout=settings.timeout_seconds,
        max_retries=settings.max_retries,
    )
