"""Cliente da YouTube Data API v3.

Implementa YouTubeApiProtocol. Toda resposta não-2xx ou timeout vira
TransientExternalError; a paginação (maxResults/pageToken) é conduzida
pelo ResourcePager do core, uma página por chamada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.youtube.http_base import HttpClient, bearer, error_reason
from api.normalizers.youtube.normalizer import (
    normalize_comment_thread,
    normalize_page,
    normalize_reply,
    normalize_video,
)
from utils.errors import NotFound, TransientExternalError

if TYPE_CHECKING:
    from app.domain.comment import CommentThread, RemoteReply, Video
    from app.protocols.youtube_api import Page
    from config.settings.youtube import YouTubeSettings

logger = logging.getLogger(__name__)

# search.list aceita no máximo 50 itens por página
_SEARCH_MAX_RESULTS = 50


class YouTubeDataApiClient:
    """Conector das operações de comentários, canais e vídeos."""

    def __init__(self, settings: YouTubeSettings, http: HttpClient) -> None:
        self._base_url = settings.api_base_url.rstrip("/")
        self._page_size = settings.page_size
        self._http = http

    async def list_comment_threads(
        self, access_token: str, video_id: str, page_token: str | None
    ) -> Page[CommentThread]:
        payload = await self._get(
            "commentThreads",
            access_token,
            {
                "part": "snippet",
                "videoId": video_id,
                "maxResults": self._page_size,
                "textFormat": "plainText",
            },
            page_token,
        )
        return normalize_page(payload, normalize_comment_thread)

    async def list_replies(
        self, access_token: str, parent_id: str, page_token: str | None
    ) -> Page[RemoteReply]:
        payload = await self._get(
            "comments",
            access_token,
            {
                "part": "snippet",
                "parentId": parent_id,
                "maxResults": self._page_size,
                "textFormat": "plainText",
            },
            page_token,
        )
        return normalize_page(payload, normalize_reply)

    async def get_own_channel_id(self, access_token: str) -> str:
        payload = await self._get(
            "channels", access_token, {"part": "id", "mine": "true"}, None
        )
        items = payload.get("items") or []
        if not items or not items[0].get("id"):
            raise NotFound("no youtube channel for this account")
        return str(items[0]["id"])

    async def list_channel_videos(
        self, access_token: str, channel_id: str, page_token: str | None
    ) -> Page[Video]:
        payload = await self._get(
            "search",
            access_token,
            {
                "part": "snippet",
                "channelId": channel_id,
                "order": "date",
                "type": "video",
                "maxResults": min(self._page_size, _SEARCH_MAX_RESULTS),
            },
            page_token,
        )
        return normalize_page(payload, normalize_video)

    async def insert_reply(self, access_token: str, parent_id: str, text: str) -> RemoteReply:
        response = await self._http.request(
            "POST",
            f"{self._base_url}/comments",
            params={"part": "snippet"},
            json={"snippet": {"parentId": parent_id, "textOriginal": text}},
            headers=bearer(access_token),
        )
        if not response.is_success:
            self._raise_for_status("comments.insert", response)
        return normalize_reply(response.json())

    async def _get(
        self,
        resource: str,
        access_token: str,
        params: dict[str, Any],
        page_token: str | None,
    ) -> dict[str, Any]:
        if page_token:
            params = {**params, "pageToken": page_token}
        response = await self._http.request(
            "GET",
            f"{self._base_url}/{resource}",
            params=params,
            headers=bearer(access_token),
        )
        if not response.is_success:
            self._raise_for_status(f"{resource}.list", response)
        return response.json()

    @staticmethod
    def _raise_for_status(operation: str, response: Any) -> None:
        reason = error_reason(response)
        logger.warning(
            "youtube_api_error",
            extra={
                "operation": operation,
                "status_code": response.status_code,
                "reason": reason,
            },
        )
        raise TransientExternalError(
            f"youtube: {operation} failed ({reason or response.status_code})",
            status_code=response.status_code,
        )
