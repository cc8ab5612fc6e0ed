"""Cliente HTTP base para os conectores Google/YouTube."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import TransientExternalError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP sem retry: política de retry pertence a quem chama.

    Devolve a resposta para qualquer status; só falhas de transporte e
    timeout viram TransientExternalError aqui.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client or httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            return await self._client.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"url": _safe_url(url)})
            raise TransientExternalError("http request timed out") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"url": _safe_url(url), "error_type": type(exc).__name__},
            )
            raise TransientExternalError("http connection error") from exc

    async def aclose(self) -> None:
        await self._client.aclose()


def bearer(access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def error_reason(response: httpx.Response) -> str:
    """Extrai o motivo do erro do corpo JSON do Google (sem dados sensíveis)."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    error = body.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict):
        errors = error.get("errors") or [{}]
        return str(errors[0].get("reason") or error.get("status") or "")
    return ""


def _safe_url(url: str) -> str:
    return url.split("?", 1)[0]
