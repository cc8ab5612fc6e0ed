"""Testes do RedisPersistenceGateway com cliente Redis em memória."""

from __future__ import annotations

import json
from datetime import timedelta
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisLibConnectionError

from app.domain.ai_model import DEFAULT_AI_MODELS
from app.domain.credential import Credential
from app.domain.interaction import InteractionKind, InteractionRecord
from app.infra.crypto import TokenCipher
from app.infra.stores import RedisPersistenceGateway
from app.sessions.models import Session
from tests.fakes.fake_youtube import BASE_TIME, make_thread
from utils.errors import RedisConnectionError, ValidationError


class _FakePipeline:
    def __init__(self, redis: _FakeRedis) -> None:
        self._redis = redis
        self._queued: list[tuple[str, tuple, dict]] = []

    async def __aenter__(self) -> _FakePipeline:
        return self

    async def __aexit__(self, *exc: object) -> None:
        self._queued.clear()

    def __getattr__(self, name: str):
        def queue(*args: Any, **kwargs: Any) -> _FakePipeline:
            self._queued.append((name, args, kwargs))
            return self

        return queue

    async def execute(self) -> list[Any]:
        return [await getattr(self._redis, n)(*a, **k) for n, a, k in self._queued]


class _FakeRedis:
    """Subconjunto dos comandos redis.asyncio usados pelo gateway."""

    def __init__(self) -> None:
        self.strings: dict[str, bytes] = {}
        self.hashes: dict[str, dict[str, bytes]] = {}
        self.zsets: dict[str, dict[str, float]] = {}

    def pipeline(self, transaction: bool = True) -> _FakePipeline:
        return _FakePipeline(self)

    async def get(self, key: str) -> bytes | None:
        return self.strings.get(key)

    async def set(self, key: str, value: str, nx: bool = False) -> bool:
        if nx and key in self.strings:
            return False
        self.strings[key] = value.encode()
        return True

    async def exists(self, key: str) -> int:
        return int(key in self.strings)

    async def mget(self, keys: list[str]) -> list[bytes | None]:
        return [self.strings.get(k) for k in keys]

    async def hset(self, key: str, field: str | None = None, value: str | None = None,
                   mapping: dict[str, str] | None = None) -> int:
        bucket = self.hashes.setdefault(key, {})
        items = dict(mapping or {})
        if field is not None:
            items[field] = value
        for f, v in items.items():
            bucket[f] = v.encode()
        return len(items)

    async def hget(self, key: str, field: str) -> bytes | None:
        return self.hashes.get(key, {}).get(field)

    async def hvals(self, key: str) -> list[bytes]:
        return list(self.hashes.get(key, {}).values())

    async def zadd(self, key: str, mapping: dict[str, float]) -> int:
        self.zsets.setdefault(key, {}).update(mapping)
        return len(mapping)

    async def zrange(self, key: str, start: int, end: int) -> list[bytes]:
        ordered = sorted(self.zsets.get(key, {}).items(), key=lambda kv: kv[1])
        return _slice([m.encode() for m, _ in ordered], start, end)

    async def zrevrange(self, key: str, start: int, end: int) -> list[bytes]:
        ordered = sorted(self.zsets.get(key, {}).items(), key=lambda kv: kv[1], reverse=True)
        return _slice([m.encode() for m, _ in ordered], start, end)


def _slice(items: list[bytes], start: int, end: int) -> list[bytes]:
    return items[start:] if end == -1 else items[start : end + 1]


@pytest.fixture
def redis() -> _FakeRedis:
    return _FakeRedis()


@pytest.fixture
def store(redis: _FakeRedis) -> RedisPersistenceGateway:
    return RedisPersistenceGateway(redis, cipher=TokenCipher(TokenCipher.generate_key()))


def _record(record_id: str, minutes: int, comment_id: str = "c1") -> InteractionRecord:
    return InteractionRecord(
        record_id=record_id,
        account_id="a1",
        video_id="v1",
        comment_id=comment_id,
        kind=InteractionKind.REPLY_POSTED,
        timestamp=BASE_TIME + timedelta(minutes=minutes),
    )


class TestRedisComments:
    """Testes de comentários."""

    @pytest.mark.asyncio
    async def test_save_and_read_newest_first(self, store) -> None:
        comments = [make_thread(f"c{i}", minutes=i).to_comment([]) for i in range(3)]
        await store.save_comments("v1", comments)

        result = await store.get_comments("v1")

        assert [c.comment_id for c in result] == ["c2", "c1", "c0"]

    @pytest.mark.asyncio
    async def test_replied_flag_survives_upsert(self, store) -> None:
        await store.save_comments("v1", [make_thread("c1").to_comment([])])
        assert await store.mark_comment_replied("c1") is True

        await store.save_comments("v1", [make_thread("c1").to_comment([])])

        assert (await store.get_comment("c1")).replied_to is True
        assert (await store.get_comments("v1"))[0].replied_to is True

    @pytest.mark.asyncio
    async def test_mark_unknown_comment(self, store) -> None:
        assert await store.mark_comment_replied("missing") is False
        assert await store.get_comment("missing") is None

    @pytest.mark.asyncio
    async def test_keys_use_prefix(self, redis) -> None:
        store = RedisPersistenceGateway(redis, key_prefix="tenant")

        await store.save_comments("v1", [make_thread("c1").to_comment([])])

        assert "tenant:comments:v1" in redis.hashes
        assert "tenant:comment_video:c1" in redis.strings


class TestRedisCredentials:
    """Testes de credenciais cifradas."""

    @pytest.mark.asyncio
    async def test_tokens_encrypted_at_rest(self, store, redis) -> None:
        credential = Credential(
            account_id="a1",
            access_token="plain-access",
            refresh_token="plain-refresh",
            expires_at=BASE_TIME,
            scopes=("openid",),
        )

        await store.save_credential(credential)

        raw = json.loads(redis.strings["replydesk:credential:a1"])
        assert raw["access_token"] != "plain-access"
        assert raw["encrypted"] is True
        assert await store.get_credential("a1") == credential

    @pytest.mark.asyncio
    async def test_unbound_credential_rejected(self, store) -> None:
        with pytest.raises(ValidationError):
            await store.save_credential(
                Credential(account_id="", access_token="a", refresh_token="", expires_at=BASE_TIME)
            )


class TestRedisSessionsAndInteractions:
    """Testes de sessões, ledger e modelos."""

    @pytest.mark.asyncio
    async def test_end_session(self, store) -> None:
        await store.create_session(
            Session(
                session_id="s1",
                account_id="a1",
                created_at=BASE_TIME,
                expires_at=BASE_TIME + timedelta(days=7),
            )
        )

        assert await store.end_session("s1") is True
        assert (await store.get_session("s1")).active is False
        assert await store.end_session("missing") is False

    @pytest.mark.asyncio
    async def test_interactions_ordered_and_limited(self, store) -> None:
        for minute in (3, 1, 2):
            await store.append_interaction(_record(f"r{minute}", minute))

        by_account = await store.query_interactions_by_account("a1", 2)
        by_comment = await store.query_interactions_by_comment("c1")

        assert [r.record_id for r in by_account] == ["r3", "r2"]
        assert [r.record_id for r in by_comment] == ["r1", "r2", "r3"]

    @pytest.mark.asyncio
    async def test_duplicate_interaction_rejected(self, store) -> None:
        await store.append_interaction(_record("r1", 0))

        with pytest.raises(ValidationError):
            await store.append_interaction(_record("r1", 0))

    @pytest.mark.asyncio
    async def test_ai_models_roundtrip(self, store) -> None:
        for config in DEFAULT_AI_MODELS:
            await store.save_ai_model(config)

        assert await store.get_ai_model("gpt-4") == DEFAULT_AI_MODELS[1]
        assert len(await store.list_ai_models()) == len(DEFAULT_AI_MODELS)

    @pytest.mark.asyncio
    async def test_redis_error_wrapped(self) -> None:
        client = MagicMock()
        client.get = AsyncMock(side_effect=RedisLibConnectionError("down"))
        store = RedisPersistenceGateway(client)

        with pytest.raises(RedisConnectionError):
            await store.get_account("a1")
