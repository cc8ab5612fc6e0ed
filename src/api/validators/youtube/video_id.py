"""Normalização de ID de vídeo a partir de ID puro ou URL do YouTube."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from utils.errors import ValidationError

VIDEO_ID_LENGTH = 11

_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
_SHORT_HOSTS = frozenset({"youtu.be", "www.youtu.be"})
_WATCH_HOSTS = frozenset({"youtube.com", "www.youtube.com", "m.youtube.com"})


def extract_video_id(value: str) -> str | None:
    """Extrai o ID de vídeo.

    Aceita:
        - ID puro de 11 caracteres
        - https://youtu.be/<id>
        - https://www.youtube.com/watch?v=<id>

    Returns:
        ID do vídeo ou None se não reconhecido
    """
    candidate = (value or "").strip()
    if not candidate:
        return None

    if len(candidate) == VIDEO_ID_LENGTH and "/" not in candidate and "?" not in candidate:
        return candidate if _VIDEO_ID_RE.match(candidate) else None

    parsed = urlparse(candidate)
    host = (parsed.hostname or "").lower()

    if host in _SHORT_HOSTS:
        segments = [s for s in parsed.path.split("/") if s]
        return segments[-1] if segments else None

    if host in _WATCH_HOSTS:
        values = parse_qs(parsed.query).get("v")
        return values[0] if values and values[0] else None

    return None


def require_video_id(value: str) -> str:
    """Como extract_video_id, mas levanta ValidationError se inválido."""
    video_id = extract_video_id(value)
    if video_id is None:
        raise ValidationError("invalid video id or url")
    return video_id
