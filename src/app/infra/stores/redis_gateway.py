"""PersistenceGateway em Redis (redis.asyncio) para staging/production.

Layout de chaves (todas com prefixo configurável):
    comments:{video_id}            hash comment_id -> JSON do comentário
    comment_video:{comment_id}     video_id do comentário
    replied:{comment_id}           flag replied_to (separado do JSON)
    account:{account_id}           JSON da conta
    credential:{account_id}        JSON da credencial (tokens cifrados)
    session:{session_id}           JSON da sessão
    interaction:{record_id}        JSON do registro (SET NX, nunca sobrescrito)
    interactions:account:{id}      zset record_id por timestamp
    interactions:comment:{id}      zset record_id por timestamp
    ai_models                      hash model_id -> JSON

O flag replied_to fica em chave própria para que um upsert de comentários
vindo do sync nunca desfaça um mark_comment_replied concorrente.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from app.domain.account import Account
from app.domain.ai_model import AIModelConfig
from app.domain.comment import RemoteComment
from app.domain.credential import Credential
from app.domain.interaction import InteractionRecord
from app.infra.crypto import TokenCipher
from app.protocols.persistence_gateway import PersistenceGatewayProtocol
from app.sessions.models import Session
from utils.errors import RedisConnectionError, ValidationError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "replydesk"


class RedisPersistenceGateway(PersistenceGatewayProtocol):
    """Gateway durável sobre Redis.

    Args:
        redis_client: Cliente redis.asyncio
        cipher: Cifra de tokens em repouso (transparente sem chave)
        key_prefix: Namespace das chaves
    """

    def __init__(
        self,
        redis_client: AsyncRedis,
        cipher: TokenCipher | None = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._cipher = cipher or TokenCipher()
        self._prefix = key_prefix.rstrip(":")

    def _key(self, *parts: str) -> str:
        return ":".join((self._prefix, *parts))

    # ──────────────────────────────────────────────────────────────
    # Comentários
    # ──────────────────────────────────────────────────────────────

    async def get_comments(self, video_id: str) -> list[RemoteComment]:
        try:
            raw = await self._redis.hvals(self._key("comments", video_id))
            comments = [RemoteComment.from_dict(_loads(item)) for item in raw]
            replied = await self._replied_flags([c.comment_id for c in comments])
        except RedisError as exc:
            raise RedisConnectionError("Falha ao ler comentários no Redis") from exc
        merged = [c.with_replied_to(c.replied_to or replied[c.comment_id]) for c in comments]
        merged.sort(key=lambda c: c.published_at, reverse=True)
        return merged

    async def save_comments(self, video_id: str, comments: list[RemoteComment]) -> None:
        if not comments:
            return
        mapping = {c.comment_id: json.dumps(c.to_dict()) for c in comments}
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hset(self._key("comments", video_id), mapping=mapping)
                for comment in comments:
                    pipe.set(self._key("comment_video", comment.comment_id), video_id)
                    if comment.replied_to:
                        pipe.set(self._key("replied", comment.comment_id), "1")
                await pipe.execute()
        except RedisError as exc:
            raise RedisConnectionError("Falha ao salvar comentários no Redis") from exc
        logger.debug("comments_saved", extra={"video_id": video_id, "count": len(comments)})

    async def get_comment(self, comment_id: str) -> RemoteComment | None:
        try:
            video_id = await self._redis.get(self._key("comment_video", comment_id))
            if video_id is None:
                return None
            raw = await self._redis.hget(self._key("comments", _text(video_id)), comment_id)
            if raw is None:
                return None
            replied = await self._redis.exists(self._key("replied", comment_id))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao ler comentário no Redis") from exc
        comment = RemoteComment.from_dict(_loads(raw))
        return comment.with_replied_to(comment.replied_to or bool(replied))

    async def mark_comment_replied(self, comment_id: str) -> bool:
        try:
            if not await self._redis.exists(self._key("comment_video", comment_id)):
                return False
            await self._redis.set(self._key("replied", comment_id), "1")
        except RedisError as exc:
            raise RedisConnectionError("Falha ao marcar comentário no Redis") from exc
        return True

    async def _replied_flags(self, comment_ids: list[str]) -> dict[str, bool]:
        if not comment_ids:
            return {}
        values = await self._redis.mget([self._key("replied", cid) for cid in comment_ids])
        return {cid: value is not None for cid, value in zip(comment_ids, values, strict=True)}

    # ──────────────────────────────────────────────────────────────
    # Contas, credenciais e sessões
    # ──────────────────────────────────────────────────────────────

    async def save_account(self, account: Account) -> None:
        await self._set_json(self._key("account", account.account_id), account.to_dict())

    async def get_account(self, account_id: str) -> Account | None:
        data = await self._get_json(self._key("account", account_id))
        return Account.from_dict(data) if data else None

    async def save_credential(self, credential: Credential) -> None:
        if not credential.is_bound:
            raise ValidationError("credential_not_bound")
        data = credential.to_dict()
        data["access_token"] = self._cipher.encrypt(data["access_token"])
        data["refresh_token"] = self._cipher.encrypt(data["refresh_token"])
        data["encrypted"] = self._cipher.enabled
        await self._set_json(self._key("credential", credential.account_id), data)

    async def get_credential(self, account_id: str) -> Credential | None:
        data = await self._get_json(self._key("credential", account_id))
        if not data:
            return None
        if data.pop("encrypted", False):
            data["access_token"] = self._cipher.decrypt(data["access_token"])
            data["refresh_token"] = self._cipher.decrypt(data["refresh_token"])
        return Credential.from_dict(data)

    async def create_session(self, session: Session) -> None:
        await self._set_json(self._key("session", session.session_id), session.to_dict())

    async def get_session(self, session_id: str) -> Session | None:
        data = await self._get_json(self._key("session", session_id))
        return Session.from_dict(data) if data else None

    async def end_session(self, session_id: str) -> bool:
        session = await self.get_session(session_id)
        if session is None:
            return False
        if session.active:
            await self.create_session(session.deactivated())
        return True

    # ──────────────────────────────────────────────────────────────
    # Interações
    # ──────────────────────────────────────────────────────────────

    async def append_interaction(self, record: InteractionRecord) -> None:
        payload = json.dumps(record.to_dict())
        score = record.timestamp.timestamp()
        try:
            created = await self._redis.set(
                self._key("interaction", record.record_id), payload, nx=True
            )
            if not created:
                raise ValidationError("interaction_already_recorded")
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.zadd(
                    self._key("interactions", "account", record.account_id),
                    {record.record_id: score},
                )
                pipe.zadd(
                    self._key("interactions", "comment", record.comment_id),
                    {record.record_id: score},
                )
                await pipe.execute()
        except RedisError as exc:
            raise RedisConnectionError("Falha ao gravar interação no Redis") from exc

    async def query_interactions_by_account(
        self, account_id: str, limit: int
    ) -> list[InteractionRecord]:
        try:
            ids = await self._redis.zrevrange(
                self._key("interactions", "account", account_id), 0, limit - 1
            )
            return await self._load_interactions(ids)
        except RedisError as exc:
            raise RedisConnectionError("Falha ao consultar interações no Redis") from exc

    async def query_interactions_by_comment(self, comment_id: str) -> list[InteractionRecord]:
        try:
            ids = await self._redis.zrange(
                self._key("interactions", "comment", comment_id), 0, -1
            )
            return await self._load_interactions(ids)
        except RedisError as exc:
            raise RedisConnectionError("Falha ao consultar interações no Redis") from exc

    async def _load_interactions(self, ids: list[Any]) -> list[InteractionRecord]:
        if not ids:
            return []
        raw = await self._redis.mget([self._key("interaction", _text(i)) for i in ids])
        return [InteractionRecord.from_dict(_loads(item)) for item in raw if item is not None]

    # ──────────────────────────────────────────────────────────────
    # Modelos de IA
    # ──────────────────────────────────────────────────────────────

    async def save_ai_model(self, config: AIModelConfig) -> None:
        try:
            await self._redis.hset(
                self._key("ai_models"), config.model_id, json.dumps(config.to_dict())
            )
        except RedisError as exc:
            raise RedisConnectionError("Falha ao salvar modelo de IA no Redis") from exc

    async def get_ai_model(self, model_id: str) -> AIModelConfig | None:
        try:
            raw = await self._redis.hget(self._key("ai_models"), model_id)
        except RedisError as exc:
            raise RedisConnectionError("Falha ao ler modelo de IA no Redis") from exc
        return AIModelConfig.from_dict(_loads(raw)) if raw is not None else None

    async def list_ai_models(self) -> list[AIModelConfig]:
        try:
            raw = await self._redis.hvals(self._key("ai_models"))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao listar modelos de IA no Redis") from exc
        models = [AIModelConfig.from_dict(_loads(item)) for item in raw]
        return sorted(models, key=lambda m: m.model_id)

    # ──────────────────────────────────────────────────────────────
    # Helpers
    # ──────────────────────────────────────────────────────────────

    async def _set_json(self, key: str, data: dict[str, Any]) -> None:
        try:
            await self._redis.set(key, json.dumps(data))
        except RedisError as exc:
            raise RedisConnectionError("Falha ao gravar no Redis") from exc

    async def _get_json(self, key: str) -> dict[str, Any] | None:
        try:
            raw = await self._redis.get(key)
        except RedisError as exc:
            raise RedisConnectionError("Falha ao ler do Redis") from exc
        return _loads(raw) if raw is not None else None


def _text(value: bytes | str) -> str:
    return value.decode() if isinstance(value, bytes) else value


def _loads(value: bytes | str) -> dict[str, Any]:
    return json.loads(_text(value))
