"""Paginação por cursor contra a API remota.

Produz a coleção completa (não um stream): o merge precisa do conjunto
inteiro antes de decidir quais respostas buscar.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from typing import TYPE_CHECKING, TypeVar

from app.observability import record_latency
from utils.errors import TransientExternalError

if TYPE_CHECKING:
    from app.protocols.youtube_api import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MIN_PAGE_INTERVAL_SECONDS = 0.1


class ResourcePager:
    """Percorre páginas até a ausência de next_cursor.

    O intervalo mínimo vale entre páginas da mesma coleção (uma chamada de
    `collect`); coleções independentes não esperam umas pelas outras.
    Nenhum retry interno: qualquer falha de página descarta o parcial.
    """

    def __init__(
        self,
        min_interval_seconds: float = DEFAULT_MIN_PAGE_INTERVAL_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._min_interval = max(min_interval_seconds, 0.0)
        self._sleep = sleep
        self._monotonic = monotonic

    async def collect(
        self,
        fetch_page: Callable[[str | None], Awaitable[Page[T]]],
        *,
        resource: str,
        key: Callable[[T], Hashable] | None = None,
    ) -> list[T]:
        """Busca todas as páginas de uma coleção.

        Args:
            fetch_page: Função (cursor) -> Page; cursor inicial é None
            resource: Nome da coleção (logs/métricas)
            key: Chave de deduplicação dos itens (opcional)

        Raises:
            TransientExternalError: Falha de página ou cursor repetido
        """
        items: list[T] = []
        seen_keys: set[Hashable] = set()
        seen_cursors: set[str] = set()
        cursor: str | None = None
        pages = 0
        started = self._monotonic()
        last_request: float | None = None

        while True:
            if last_request is not None:
                wait = self._min_interval - (self._monotonic() - last_request)
                if wait > 0:
                    await self._sleep(wait)

            last_request = self._monotonic()
            page = await fetch_page(cursor)
            pages += 1

            for item in page.items:
                if key is not None:
                    item_key = key(item)
                    if item_key in seen_keys:
                        continue
                    seen_keys.add(item_key)
                items.append(item)

            cursor = page.next_cursor
            if not cursor:
                break
            if cursor in seen_cursors:
                logger.warning(
                    "pager_cursor_repeated", extra={"resource": resource, "pages": pages}
                )
                raise TransientExternalError(f"{resource}: pagination cursor repeated")
            seen_cursors.add(cursor)

        elapsed_ms = (self._monotonic() - started) * 1000
        record_latency("pager", resource, elapsed_ms)
        logger.debug(
            "pager_collected",
            extra={"resource": resource, "pages": pages, "items": len(items)},
        )
        return items
