"""Normalizer YouTube — payloads da Data API e do OAuth para modelos internos."""

from api.normalizers.youtube.normalizer import (
    normalize_comment_thread,
    normalize_page,
    normalize_reply,
    normalize_token_grant,
    normalize_user_info,
    normalize_video,
)

__all__ = [
    "normalize_comment_thread",
    "normalize_page",
    "normalize_reply",
    "normalize_token_grant",
    "normalize_user_info",
    "normalize_video",
]
