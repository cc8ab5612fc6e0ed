"""Sincronização paginada de recursos remotos."""

from app.sync.engine import SyncEngine
from app.sync.pager import DEFAULT_MIN_PAGE_INTERVAL_SECONDS, ResourcePager

__all__ = [
    "DEFAULT_MIN_PAGE_INTERVAL_SECONDS",
    "ResourcePager",
    "SyncEngine",
]
