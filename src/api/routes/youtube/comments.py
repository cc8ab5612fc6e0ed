"""Rotas de vídeos e comentários (cache-through)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from api.routes.youtube.dependencies import AuthDep, ServicesDep
from api.validators.youtube import require_video_id

router = APIRouter()


@router.get("/videos")
async def list_videos(auth: AuthDep, services: ServicesDep) -> list[dict[str, Any]]:
    videos = await services.sync.sync_channel_videos(auth.account_id)
    return [video.to_dict() for video in videos]


@router.get("/comments/{video_ref:path}")
async def list_comments(
    video_ref: str,
    auth: AuthDep,
    services: ServicesDep,
    refresh: bool = False,
) -> list[dict[str, Any]]:
    """Comentários do vídeo; `video_ref` aceita ID ou URL do YouTube."""
    video_id = require_video_id(video_ref)
    comments = await services.sync.load_or_sync_comments(
        auth.account_id, video_id, force_refresh=refresh
    )
    return [comment.to_dict() for comment in comments]
