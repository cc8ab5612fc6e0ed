"""Normalizer YouTube — converte payloads da Data API e do OAuth em modelos internos.

Payloads malformados levantam TransientExternalError: a resposta remota
não é confiável e a sincronização inteira deve ser descartada.
"""

from __future__ import annotations

from typing import Any

from app.domain._serialization import load_datetime
from app.domain.comment import CommentThread, RemoteReply, Video
from app.protocols.youtube_api import Page, TokenGrant, UserInfo
from utils.errors import TransientExternalError

_THUMBNAIL_PREFERENCE = ("high", "medium", "default")


def normalize_comment_thread(item: dict[str, Any]) -> CommentThread:
    """commentThreads#resource -> CommentThread."""
    try:
        snippet = item["snippet"]
        top = snippet["topLevelComment"]["snippet"]
        return CommentThread(
            comment_id=item["id"],
            video_id=snippet.get("videoId") or top.get("videoId", ""),
            author=top.get("authorDisplayName", ""),
            author_channel_id=_channel_value(top),
            text=top.get("textDisplay", ""),
            like_count=int(top.get("likeCount", 0)),
            published_at=load_datetime(top.get("publishedAt")),
            total_reply_count=int(snippet.get("totalReplyCount", 0)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TransientExternalError("youtube: malformed comment thread") from exc


def normalize_reply(item: dict[str, Any]) -> RemoteReply:
    """comments#resource (resposta) -> RemoteReply."""
    try:
        snippet = item["snippet"]
        return RemoteReply(
            reply_id=item["id"],
            parent_id=snippet.get("parentId", ""),
            author=snippet.get("authorDisplayName", ""),
            author_channel_id=_channel_value(snippet),
            text=snippet.get("textDisplay") or snippet.get("textOriginal", ""),
            like_count=int(snippet.get("likeCount", 0)),
            published_at=load_datetime(snippet.get("publishedAt")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TransientExternalError("youtube: malformed reply") from exc


def normalize_video(item: dict[str, Any]) -> Video:
    """search#result (type=video) -> Video."""
    try:
        raw_id = item["id"]
        video_id = raw_id["videoId"] if isinstance(raw_id, dict) else raw_id
        snippet = item["snippet"]
        return Video(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            published_at=load_datetime(snippet.get("publishedAt")),
            thumbnail_url=_thumbnail_url(snippet.get("thumbnails") or {}),
            channel_id=snippet.get("channelId", ""),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TransientExternalError("youtube: malformed video") from exc


def normalize_page(payload: dict[str, Any], parse: Any) -> Page[Any]:
    """Resposta paginada (`items`, `nextPageToken`) -> Page."""
    items = payload.get("items") or []
    if not isinstance(items, list):
        raise TransientExternalError("youtube: items is not a list")
    return Page(
        items=[parse(item) for item in items],
        next_cursor=payload.get("nextPageToken") or None,
    )


def normalize_token_grant(payload: dict[str, Any]) -> TokenGrant:
    access_token = payload.get("access_token")
    if not access_token:
        raise TransientExternalError("oauth: token response without access_token")
    return TokenGrant(
        access_token=access_token,
        expires_in=int(payload.get("expires_in", 0)),
        token_type=payload.get("token_type") or "Bearer",
        scope=payload.get("scope", ""),
        refresh_token=payload.get("refresh_token") or None,
    )


def normalize_user_info(payload: dict[str, Any]) -> UserInfo:
    account_id = payload.get("id")
    if not account_id:
        raise TransientExternalError("oauth: userinfo without id")
    return UserInfo(
        account_id=str(account_id),
        name=payload.get("name") or payload.get("email") or "",
        email=payload.get("email"),
        picture_url=payload.get("picture"),
    )


def _channel_value(snippet: dict[str, Any]) -> str:
    channel = snippet.get("authorChannelId") or {}
    return channel.get("value", "") if isinstance(channel, dict) else str(channel)


def _thumbnail_url(thumbnails: dict[str, Any]) -> str:
    for size in _THUMBNAIL_PREFERENCE:
        entry = thumbnails.get(size)
        if entry and entry.get("url"):
            return entry["url"]
    return ""
