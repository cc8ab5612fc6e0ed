"""Testes do composition root (montagem e encerramento dos serviços)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.bootstrap.dependencies import build_services, create_gateway
from app.infra.stores import MemoryPersistenceGateway, RedisPersistenceGateway
from config.settings.base.core import BaseSettings
from config.settings.base.session import SessionSettings
from config.settings.infra.storage import StorageSettings
from config.settings.youtube import YouTubeSettings
from tests.fakes.fake_youtube import FakeOAuthProvider, FakeYouTubeApi


def _services(**clients):
    return build_services(
        gateway=MemoryPersistenceGateway(),
        oauth=FakeOAuthProvider(),
        youtube_api=FakeYouTubeApi(),
        generator=None,
        youtube=YouTubeSettings(),
        session=SessionSettings(),
        **clients,
    )


class TestServicesClose:
    """Testes de Services.aclose."""

    @pytest.mark.asyncio
    async def test_closes_every_external_client(self) -> None:
        http_client = MagicMock(aclose=AsyncMock())
        redis_client = MagicMock(aclose=AsyncMock())
        openai_client = MagicMock(close=AsyncMock())
        services = _services(
            http_client=http_client,
            redis_client=redis_client,
            openai_client=openai_client,
        )

        await services.aclose()

        http_client.aclose.assert_awaited_once()
        redis_client.aclose.assert_awaited_once()
        openai_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_without_clients_is_noop(self) -> None:
        await _services().aclose()


class TestCreateGateway:
    """Testes de create_gateway."""

    def test_memory_backend(self) -> None:
        gateway = create_gateway(StorageSettings(), BaseSettings())

        assert isinstance(gateway, MemoryPersistenceGateway)

    def test_redis_backend_reuses_given_client(self) -> None:
        redis_client = MagicMock()
        storage = StorageSettings(backend="redis", redis_url="redis://localhost:6379/0")

        gateway = create_gateway(storage, BaseSettings(), redis_client)

        assert isinstance(gateway, RedisPersistenceGateway)
        assert gateway._redis is redis_client
