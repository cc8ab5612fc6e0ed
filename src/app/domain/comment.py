"""Comentários, respostas e vídeos sincronizados do YouTube.

`RemoteComment.replied_to` é um flag apenas local: o YouTube nunca o envia,
então o merge com dados remotos deve preservá-lo.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from app.domain._serialization import dump_datetime, load_datetime


@dataclass(frozen=True, slots=True)
class RemoteReply:
    """Resposta a um comentário de topo."""

    reply_id: str
    parent_id: str
    author: str
    text: str
    published_at: datetime
    author_channel_id: str = ""
    like_count: int = 0
    ai_generated: bool = False
    ai_model: str | None = None

    def with_ai_provenance(self, ai_model: str | None) -> RemoteReply:
        """Marca a resposta como gerada por IA (feito pela camada de API)."""
        return replace(self, ai_generated=True, ai_model=ai_model)

    def to_dict(self) -> dict[str, Any]:
        return {
            "reply_id": self.reply_id,
            "parent_id": self.parent_id,
            "author": self.author,
            "author_channel_id": self.author_channel_id,
            "text": self.text,
            "like_count": self.like_count,
            "published_at": dump_datetime(self.published_at),
            "ai_generated": self.ai_generated,
            "ai_model": self.ai_model,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RemoteReply:
        return cls(
            reply_id=data["reply_id"],
            parent_id=data.get("parent_id", ""),
            author=data.get("author", ""),
            author_channel_id=data.get("author_channel_id", ""),
            text=data.get("text", ""),
            like_count=int(data.get("like_count", 0)),
            published_at=load_datetime(data.get("published_at")),
            ai_generated=bool(data.get("ai_generated", False)),
            ai_model=data.get("ai_model"),
        )


@dataclass(frozen=True, slots=True)
class CommentThread:
    """Thread de comentário como chega da API (sem respostas)."""

    comment_id: str
    video_id: str
    author: str
    text: str
    published_at: datetime
    author_channel_id: str = ""
    like_count: int = 0
    total_reply_count: int = 0

    def to_comment(self, replies: list[RemoteReply], synced_by: str = "") -> RemoteComment:
        """Monta o RemoteComment com `replied_to` ainda não mesclado."""
        metadata: dict[str, Any] = {"total_reply_count": self.total_reply_count}
        if synced_by:
            metadata["synced_by"] = synced_by
        return RemoteComment(
            video_id=self.video_id,
            comment_id=self.comment_id,
            author=self.author,
            author_channel_id=self.author_channel_id,
            text=self.text,
            like_count=self.like_count,
            published_at=self.published_at,
            replies=tuple(replies),
            metadata=metadata,
        )


@dataclass(frozen=True, slots=True)
class RemoteComment:
    """Comentário de topo com suas respostas.

    Atributos:
        video_id: Vídeo ao qual o comentário pertence
        comment_id: ID do comentário de topo (= ID da thread)
        author: Nome de exibição do autor
        author_channel_id: Canal do autor
        text: Texto exibido do comentário
        like_count: Número de likes
        published_at: Publicação do comentário
        replies: Respostas da thread
        replied_to: Flag local; True depois que o dono respondeu por aqui
        metadata: Dados auxiliares (ex.: total_reply_count, synced_by)
    """

    video_id: str
    comment_id: str
    author: str
    text: str
    published_at: datetime
    author_channel_id: str = ""
    like_count: int = 0
    replies: tuple[RemoteReply, ...] = field(default_factory=tuple)
    replied_to: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def synced_by(self) -> str:
        """Conta cujo token trouxe o comentário no último sync."""
        return str(self.metadata.get("synced_by", ""))

    def with_replied_to(self, replied_to: bool) -> RemoteComment:
        return replace(self, replied_to=replied_to)

    def to_dict(self) -> dict[str, Any]:
        return {
            "video_id": self.video_id,
            "comment_id": self.comment_id,
            "author": self.author,
            "author_channel_id": self.author_channel_id,
            "text": self.text,
            "like_count": self.like_count,
            "published_at": dump_datetime(self.published_at),
            "replies": [reply.to_dict() for reply in self.replies],
            "replied_to": self.replied_to,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RemoteComment:
        return cls(
            video_id=data.get("video_id", ""),
            comment_id=data["comment_id"],
            author=data.get("author", ""),
            author_channel_id=data.get("author_channel_id", ""),
            text=data.get("text", ""),
            like_count=int(data.get("like_count", 0)),
            published_at=load_datetime(data.get("published_at")),
            replies=tuple(RemoteReply.from_dict(r) for r in data.get("replies", [])),
            replied_to=bool(data.get("replied_to", False)),
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass(frozen=True, slots=True)
class Video:
    """Vídeo do canal autenticado."""

    video_id: str
    title: str
    published_at: datetime
    description: str = ""
    thumbnail_url: str = ""
    channel_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.video_id,
            "title": self.title,
            "description": self.description,
            "published_at": dump_datetime(self.published_at),
            "thumbnail_url": self.thumbnail_url,
            "channel_id": self.channel_id,
        }
