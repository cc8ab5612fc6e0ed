"""Testes do OpenAIReplyClient com AsyncOpenAI mockado."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import APITimeoutError, OpenAIError

from app.domain.ai_model import DEFAULT_AI_MODELS, AIModelConfig, AIModelParameters
from app.infra.ai import OpenAIReplyClient
from config.settings.ai.openai import OpenAISettings
from utils.errors import TransientExternalError


def _response(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=30, completion_tokens=10, total_tokens=40),
    )


def _client(create: AsyncMock) -> OpenAIReplyClient:
    sdk = MagicMock()
    sdk.chat.completions.create = create
    return OpenAIReplyClient(settings=OpenAISettings(api_key="sk-test"), client=sdk)


class TestOpenAIReplyClient:
    """Testes de geração."""

    @pytest.mark.asyncio
    async def test_generate_success(self) -> None:
        create = AsyncMock(return_value=_response("  Muito obrigado!  "))
        client = _client(create)

        result = await client.generate(
            model=DEFAULT_AI_MODELS[0], system_prompt="sys", user_prompt="user"
        )

        assert result.reply_text == "Muito obrigado!"
        assert result.model == "gpt-3.5-turbo"
        assert result.total_tokens == 40
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "gpt-3.5-turbo"
        assert kwargs["max_tokens"] == 1024
        assert kwargs["messages"][0] == {"role": "system", "content": "sys"}
        assert "stop" not in kwargs

    @pytest.mark.asyncio
    async def test_max_tokens_override_and_stop(self) -> None:
        create = AsyncMock(return_value=_response("ok"))
        client = _client(create)
        model = AIModelConfig(
            model_id="custom",
            name="Custom",
            parameters=AIModelParameters(stop=("###",)),
        )

        await client.generate(model=model, system_prompt="s", user_prompt="u", max_tokens=50)

        kwargs = create.await_args.kwargs
        assert kwargs["max_tokens"] == 50
        assert kwargs["stop"] == ["###"]

    @pytest.mark.asyncio
    async def test_timeout_is_transient(self) -> None:
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client = _client(AsyncMock(side_effect=APITimeoutError(request=request)))

        with pytest.raises(TransientExternalError):
            await client.generate(model=DEFAULT_AI_MODELS[0], system_prompt="s", user_prompt="u")

    @pytest.mark.asyncio
    async def test_api_error_is_transient(self) -> None:
        client = _client(AsyncMock(side_effect=OpenAIError("boom")))

        with pytest.raises(TransientExternalError):
            await client.generate(model=DEFAULT_AI_MODELS[0], system_prompt="s", user_prompt="u")

    @pytest.mark.asyncio
    async def test_empty_content_is_transient(self) -> None:
        client = _client(AsyncMock(return_value=_response("")))

        with pytest.raises(TransientExternalError):
            await client.generate(model=DEFAULT_AI_MODELS[0], system_prompt="s", user_prompt="u")
