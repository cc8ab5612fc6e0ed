"""PersistenceGateway em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.

Guarda snapshots serializados (to_dict) para que mutações em objetos
devolvidos nunca alterem o estado armazenado.
"""

from __future__ import annotations

import copy
from typing import Any

from app.domain.account import Account
from app.domain.ai_model import AIModelConfig
from app.domain.comment import RemoteComment
from app.domain.credential import Credential
from app.domain.interaction import InteractionRecord
from app.protocols.persistence_gateway import PersistenceGatewayProtocol
from app.sessions.models import Session
from utils.errors import ValidationError


class MemoryPersistenceGateway(PersistenceGatewayProtocol):
    """Gateway em memória — apenas para dev/test."""

    def __init__(self) -> None:
        # video_id -> {comment_id -> snapshot}
        self._comments: dict[str, dict[str, dict[str, Any]]] = {}
        self._comment_video: dict[str, str] = {}
        self._accounts: dict[str, dict[str, Any]] = {}
        self._credentials: dict[str, dict[str, Any]] = {}
        self._sessions: dict[str, dict[str, Any]] = {}
        self._interactions: list[dict[str, Any]] = []
        self._interaction_ids: set[str] = set()
        self._ai_models: dict[str, dict[str, Any]] = {}

    # Comentários

    async def get_comments(self, video_id: str) -> list[RemoteComment]:
        stored = self._comments.get(video_id, {})
        comments = [RemoteComment.from_dict(copy.deepcopy(data)) for data in stored.values()]
        comments.sort(key=lambda c: c.published_at, reverse=True)
        return comments

    async def save_comments(self, video_id: str, comments: list[RemoteComment]) -> None:
        bucket = self._comments.setdefault(video_id, {})
        for comment in comments:
            data = comment.to_dict()
            previous = bucket.get(comment.comment_id)
            # replied_to marcado entre a leitura do sync e esta escrita não é perdido
            if previous is not None and previous["replied_to"]:
                data["replied_to"] = True
            bucket[comment.comment_id] = data
            self._comment_video[comment.comment_id] = video_id

    async def get_comment(self, comment_id: str) -> RemoteComment | None:
        video_id = self._comment_video.get(comment_id)
        if video_id is None:
            return None
        data = self._comments[video_id][comment_id]
        return RemoteComment.from_dict(copy.deepcopy(data))

    async def mark_comment_replied(self, comment_id: str) -> bool:
        video_id = self._comment_video.get(comment_id)
        if video_id is None:
            return False
        self._comments[video_id][comment_id]["replied_to"] = True
        return True

    # Contas

    async def save_account(self, account: Account) -> None:
        self._accounts[account.account_id] = account.to_dict()

    async def get_account(self, account_id: str) -> Account | None:
        data = self._accounts.get(account_id)
        return Account.from_dict(copy.deepcopy(data)) if data else None

    # Credenciais

    async def save_credential(self, credential: Credential) -> None:
        if not credential.is_bound:
            raise ValidationError("credential_not_bound")
        self._credentials[credential.account_id] = credential.to_dict()

    async def get_credential(self, account_id: str) -> Credential | None:
        data = self._credentials.get(account_id)
        return Credential.from_dict(data) if data else None

    # Sessões

    async def create_session(self, session: Session) -> None:
        self._sessions[session.session_id] = session.to_dict()

    async def get_session(self, session_id: str) -> Session | None:
        data = self._sessions.get(session_id)
        return Session.from_dict(data) if data else None

    async def end_session(self, session_id: str) -> bool:
        data = self._sessions.get(session_id)
        if data is None:
            return False
        data["active"] = False
        return True

    # Interações

    async def append_interaction(self, record: InteractionRecord) -> None:
        if record.record_id in self._interaction_ids:
            raise ValidationError("interaction_already_recorded")
        self._interaction_ids.add(record.record_id)
        self._interactions.append(record.to_dict())

    async def query_interactions_by_account(
        self, account_id: str, limit: int
    ) -> list[InteractionRecord]:
        records = [
            InteractionRecord.from_dict(copy.deepcopy(data))
            for data in self._interactions
            if data["account_id"] == account_id
        ]
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records[:limit]

    async def query_interactions_by_comment(self, comment_id: str) -> list[InteractionRecord]:
        records = [
            InteractionRecord.from_dict(copy.deepcopy(data))
            for data in self._interactions
            if data["comment_id"] == comment_id
        ]
        records.sort(key=lambda r: r.timestamp)
        return records

    # Modelos de IA

    async def save_ai_model(self, config: AIModelConfig) -> None:
        self._ai_models[config.model_id] = config.to_dict()

    async def get_ai_model(self, model_id: str) -> AIModelConfig | None:
        data = self._ai_models.get(model_id)
        return AIModelConfig.from_dict(copy.deepcopy(data)) if data else None

    async def list_ai_models(self) -> list[AIModelConfig]:
        return [AIModelConfig.from_dict(copy.deepcopy(d)) for d in self._ai_models.values()]
