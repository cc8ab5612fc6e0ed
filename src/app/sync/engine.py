"""Sincronização de comentários, respostas e vídeos do YouTube.

Fluxo de sync_video_comments:
    1. Token válido via CredentialManager
    2. Pagina threads de comentários do vídeo
    3. Pagina respostas de cada thread com total_reply_count > 0
    4. Monta RemoteComment de thread + respostas
    5. Copia `replied_to` do comentário já armazenado (flag apenas local)
    6. Persiste todos os comentários (upsert por comment_id)
    7. Registra um comment_observed por comentário retornado

Entradas do ledger só são gravadas depois que todos os comentários estão
persistidos. A sequência não é atômica: comment_observed duplicado ou
comentário sem entrada no ledger (crash no meio) são aceitáveis.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.interaction import InteractionKind
from app.observability import record_latency, record_sync

if TYPE_CHECKING:
    from app.domain.comment import CommentThread, RemoteComment, RemoteReply, Video
    from app.protocols.persistence_gateway import PersistenceGatewayProtocol
    from app.protocols.youtube_api import Page, YouTubeApiProtocol
    from app.services.credential_manager import CredentialManager
    from app.services.interaction_ledger import InteractionLedger
    from app.sync.pager import ResourcePager

logger = logging.getLogger(__name__)


class SyncEngine:
    """Busca dados remotos e faz merge com o estado local."""

    def __init__(
        self,
        credentials: CredentialManager,
        youtube: YouTubeApiProtocol,
        pager: ResourcePager,
        gateway: PersistenceGatewayProtocol,
        ledger: InteractionLedger,
    ) -> None:
        self._credentials = credentials
        self._youtube = youtube
        self._pager = pager
        self._gateway = gateway
        self._ledger = ledger

    async def sync_video_comments(self, account_id: str, video_id: str) -> list[RemoteComment]:
        """Sincroniza comentários de um vídeo e retorna a lista mesclada.

        Raises:
            ReauthRequired: Credencial precisa de novo login
            TransientExternalError: Falha de rede/API (parcial descartado)
            InternalPersistenceError: Falha ao persistir comentários
        """
        started = time.perf_counter()
        token = await self._credentials.ensure_valid(account_id)

        async def fetch_threads(cursor: str | None) -> Page[CommentThread]:
            return await self._youtube.list_comment_threads(token, video_id, cursor)

        threads = await self._pager.collect(
            fetch_threads, resource="comment_threads", key=lambda t: t.comment_id
        )

        built: list[RemoteComment] = []
        for thread in threads:
            replies: list[RemoteReply] = []
            if thread.total_reply_count > 0:
                replies = await self._collect_replies(token, thread.comment_id)
            built.append(thread.to_comment(replies, synced_by=account_id))

        merged = await self._merge_local_flags(video_id, built)
        await self._gateway.save_comments(video_id, merged)

        for comment in merged:
            await self._ledger.record_secondary(
                InteractionKind.COMMENT_OBSERVED,
                account_id=account_id,
                video_id=video_id,
                comment_id=comment.comment_id,
                data={
                    "reply_count": len(comment.replies),
                    "replied_to": comment.replied_to,
                },
            )

        record_latency("sync_engine", "video_comments", (time.perf_counter() - started) * 1000)
        record_sync("comments", account_id, len(merged))
        logger.info(
            "sync_completed",
            extra={
                "resource": "comments",
                "account_id": account_id,
                "video_id": video_id,
                "comments": len(merged),
            },
        )
        return merged

    async def sync_channel_videos(self, account_id: str) -> list[Video]:
        """Lista vídeos do canal da conta, mais recentes primeiro."""
        token = await self._credentials.ensure_valid(account_id)
        channel_id = await self._youtube.get_own_channel_id(token)

        async def fetch_videos(cursor: str | None) -> Page[Video]:
            return await self._youtube.list_channel_videos(token, channel_id, cursor)

        videos = await self._pager.collect(
            fetch_videos, resource="channel_videos", key=lambda v: v.video_id
        )
        videos.sort(key=lambda v: v.published_at, reverse=True)

        await self._remember_channel(account_id, channel_id)
        record_sync("videos", account_id, len(videos))
        logger.info(
            "sync_completed",
            extra={"resource": "videos", "account_id": account_id, "videos": len(videos)},
        )
        return videos

    async def load_or_sync_comments(
        self, account_id: str, video_id: str, force_refresh: bool = False
    ) -> list[RemoteComment]:
        """Cache-through: storage local primeiro, sync remoto se vazio.

        O cache só atende a conta que o sincronizou; outra conta sincroniza
        com o próprio token, que o YouTube autoriza ou recusa.
        """
        if not force_refresh:
            stored = await self._gateway.get_comments(video_id)
            if stored and all(c.synced_by == account_id for c in stored):
                logger.debug(
                    "comments_served_from_store",
                    extra={"video_id": video_id, "comments": len(stored)},
                )
                return stored
        return await self.sync_video_comments(account_id, video_id)

    async def _collect_replies(self, token: str, parent_id: str) -> list[RemoteReply]:
        async def fetch_replies(cursor: str | None) -> Page[RemoteReply]:
            return await self._youtube.list_replies(token, parent_id, cursor)

        return await self._pager.collect(
            fetch_replies, resource="comment_replies", key=lambda r: r.reply_id
        )

    async def _merge_local_flags(
        self, video_id: str, comments: list[RemoteComment]
    ) -> list[RemoteComment]:
        stored = {c.comment_id: c for c in await self._gateway.get_comments(video_id)}
        merged: list[RemoteComment] = []
        for comment in comments:
            existing = stored.get(comment.comment_id)
            if existing is not None and existing.replied_to:
                comment = comment.with_replied_to(True)
            merged.append(comment)
        return merged

    async def _remember_channel(self, account_id: str, channel_id: str) -> None:
        account = await self._gateway.get_account(account_id)
        if account is None or account.channel_id == channel_id:
            return
        account.channel_id = channel_id
        account.updated_at = datetime.now(UTC)
        await self._gateway.save_account(account)
