"""Cliente OpenAI para rascunho de respostas (chat completions).

Implementa ReplyGeneratorProtocol. Implementação de IO: pertence a app/infra.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from openai import APITimeoutError, AsyncOpenAI, OpenAIError

from app.observability import record_latency, record_token_usage
from app.protocols.reply_generator import GeneratedReply
from utils.errors import TransientExternalError

if TYPE_CHECKING:
    from app.domain.ai_model import AIModelConfig
    from config.settings.ai.openai import OpenAISettings

logger = logging.getLogger(__name__)


class OpenAIReplyClient:
    """Gera respostas via API de chat completions."""

    __slots__ = ("_client", "_timeout_seconds")

    def __init__(
        self,
        *,
        settings: OpenAISettings,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._timeout_seconds = settings.timeout_seconds
        if client is not None:
            self._client = client
        else:
            self._client = AsyncOpenAI(
                api_key=settings.api_key,
                base_url=settings.base_url or None,
                timeout=settings.timeout_seconds,
                max_retries=settings.max_retries,
            )

    async def generate(
        self,
        *,
        model: AIModelConfig,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int | None = None,
    ) -> GeneratedReply:
        """Chama o modelo e devolve o texto da resposta.

        Raises:
            TransientExternalError: Timeout, erro da API ou resposta vazia
        """
        params = model.parameters
        started = time.perf_counter()
        request: dict[str, Any] = {
            "model": model.model_id,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": params.temperature,
            "top_p": params.top_p,
            "frequency_penalty": params.frequency_penalty,
            "presence_penalty": params.presence_penalty,
            "max_tokens": max_tokens or params.max_tokens,
        }
        if params.stop:
            request["stop"] = list(params.stop)

        try:
            response = await self._client.chat.completions.create(**request)
        except APITimeoutError as exc:
            logger.warning(
                "openai_timeout",
                extra={"model": model.model_id, "timeout": self._timeout_seconds},
            )
            raise TransientExternalError("openai: request timed out") from exc
        except OpenAIError as exc:
            status_code = getattr(exc, "status_code", None)
            logger.warning(
                "openai_http_error",
                extra={
                    "model": model.model_id,
                    "status_code": status_code,
                    "error_type": type(exc).__name__,
                },
            )
            raise TransientExternalError(
                "openai: request failed", status_code=status_code
            ) from exc

        content = _extract_content(response)
        if not content:
            logger.warning("openai_empty_response", extra={"model": model.model_id})
            raise TransientExternalError("openai: empty response")

        elapsed_ms = (time.perf_counter() - started) * 1000
        usage = getattr(response, "usage", None)
        prompt_tokens = int(getattr(usage, "prompt_tokens", 0) or 0)
        completion_tokens = int(getattr(usage, "completion_tokens", 0) or 0)
        total_tokens = int(getattr(usage, "total_tokens", 0) or 0)

        record_latency("openai_reply_client", "generate", elapsed_ms)
        record_token_usage(
            "openai_reply_client",
            model.model_id,
            prompt_tokens,
            completion_tokens,
            total_tokens,
        )
        return GeneratedReply(
            reply_text=content.strip(),
            model=model.model_id,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
            generation_time_ms=round(elapsed_ms, 2),
        )


def _extract_content(response: Any) -> str:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""
