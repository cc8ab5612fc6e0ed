"""Validadores de entrada específicos do YouTube."""

from api.validators.youtube.video_id import (
    VIDEO_ID_LENGTH,
    extract_video_id,
    require_video_id,
)

__all__ = [
    "VIDEO_ID_LENGTH",
    "extract_video_id",
    "require_video_id",
]
