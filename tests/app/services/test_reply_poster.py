"""Testes do ReplyPoster."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from app.domain.interaction import InteractionKind
from app.services.reply_poster import MAX_REPLY_LENGTH, ReplyPoster
from tests.fakes.fake_youtube import ACCOUNT_ID, make_thread
from utils.errors import (
    InternalPersistenceError,
    ReauthRequired,
    TransientExternalError,
    ValidationError,
)

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def poster(credentials, youtube, gateway, ledger) -> ReplyPoster:
    return ReplyPoster(credentials, youtube, gateway, ledger)


@pytest_asyncio.fixture
async def stored_comment(gateway):
    comment = make_thread("c1", video_id=VIDEO_ID).to_comment([])
    await gateway.save_comments(VIDEO_ID, [comment])
    return comment


class TestPostReply:
    """Testes de publicação de resposta."""

    @pytest.mark.asyncio
    async def test_post_marks_comment_and_records(
        self, poster, youtube, gateway, ledger, connected_account, stored_comment
    ) -> None:
        """Publica, marca replied_to e grava reply_posted."""
        reply = await poster.post_reply(ACCOUNT_ID, "c1", "Obrigado!")

        assert reply.parent_id == "c1"
        assert youtube.inserted == [("c1", "Obrigado!")]
        assert (await gateway.get_comment("c1")).replied_to is True

        history = await ledger.query_by_comment("c1")
        assert len(history) == 1
        record = history[0]
        assert record.kind is InteractionKind.REPLY_POSTED
        assert record.reply_id == reply.reply_id
        assert record.video_id == VIDEO_ID
        assert record.data == {"text_length": len("Obrigado!")}

    @pytest.mark.asyncio
    async def test_posting_twice_keeps_flag_and_appends(
        self, poster, gateway, ledger, connected_account, stored_comment
    ) -> None:
        """Segunda publicação: duas entradas, flag continua True."""
        await poster.post_reply(ACCOUNT_ID, "c1", "Primeira")
        await poster.post_reply(ACCOUNT_ID, "c1", "Segunda")

        assert (await gateway.get_comment("c1")).replied_to is True
        history = await ledger.query_by_comment("c1")
        assert [r.kind for r in history] == [InteractionKind.REPLY_POSTED] * 2

    @pytest.mark.asyncio
    async def test_unknown_comment_still_posts(
        self, poster, youtube, ledger, connected_account
    ) -> None:
        """Comentário fora do storage: publica e registra sem video_id."""
        await poster.post_reply(ACCOUNT_ID, "not-synced", "Oi")

        assert youtube.inserted == [("not-synced", "Oi")]
        history = await ledger.query_by_comment("not-synced")
        assert history[0].video_id == ""

    @pytest.mark.parametrize("text", ["", "   ", "x" * (MAX_REPLY_LENGTH + 1)])
    @pytest.mark.asyncio
    async def test_invalid_text_rejected_before_remote_call(
        self, poster, youtube, connected_account, text
    ) -> None:
        with pytest.raises(ValidationError):
            await poster.post_reply(ACCOUNT_ID, "c1", text)

        assert youtube.inserted == []

    @pytest.mark.asyncio
    async def test_max_length_accepted(
        self, poster, youtube, connected_account, stored_comment
    ) -> None:
        await poster.post_reply(ACCOUNT_ID, "c1", "x" * MAX_REPLY_LENGTH)

        assert len(youtube.inserted) == 1

    @pytest.mark.asyncio
    async def test_remote_failure_leaves_comment_unmarked(
        self, poster, youtube, gateway, ledger, connected_account, stored_comment
    ) -> None:
        youtube.fail_on.add("insert")

        with pytest.raises(TransientExternalError):
            await poster.post_reply(ACCOUNT_ID, "c1", "Oi")

        assert (await gateway.get_comment("c1")).replied_to is False
        assert await ledger.query_by_comment("c1") == []

    @pytest.mark.asyncio
    async def test_ledger_failure_reports_success(
        self, poster, gateway, connected_account, stored_comment
    ) -> None:
        """Falha do ledger depois da publicação não vira erro."""
        gateway.append_interaction = AsyncMock(side_effect=InternalPersistenceError("down"))

        reply = await poster.post_reply(ACCOUNT_ID, "c1", "Oi")

        assert reply.parent_id == "c1"
        assert (await gateway.get_comment("c1")).replied_to is True

    @pytest.mark.asyncio
    async def test_mark_failure_propagates(
        self, poster, gateway, connected_account, stored_comment
    ) -> None:
        gateway.mark_comment_replied = AsyncMock(side_effect=InternalPersistenceError("down"))

        with pytest.raises(InternalPersistenceError):
            await poster.post_reply(ACCOUNT_ID, "c1", "Oi")

    @pytest.mark.asyncio
    async def test_reauth_required_without_credential(self, poster, youtube) -> None:
        with pytest.raises(ReauthRequired):
            await poster.post_reply("unknown", "c1", "Oi")

        assert youtube.inserted == []

    @pytest.mark.asyncio
    async def test_read_failure_after_remote_post_does_not_fail_reply(
        self, poster, youtube, gateway, ledger, connected_account, stored_comment
    ) -> None:
        """Storage que só falha depois da publicação não derruba a resposta."""
        original_get = gateway.get_comment

        async def get_before_insert(comment_id: str):
            if youtube.inserted:
                raise InternalPersistenceError("down")
            return await original_get(comment_id)

        gateway.get_comment = get_before_insert

        reply = await poster.post_reply(ACCOUNT_ID, "c1", "Oi")

        assert reply.parent_id == "c1"
        history = await ledger.query_by_comment("c1")
        assert history[0].video_id == VIDEO_ID

    @pytest.mark.asyncio
    async def test_read_failure_before_remote_post_skips_publish(
        self, poster, youtube, gateway, connected_account, stored_comment
    ) -> None:
        gateway.get_comment = AsyncMock(side_effect=InternalPersistenceError("down"))

        with pytest.raises(InternalPersistenceError):
            await poster.post_reply(ACCOUNT_ID, "c1", "Oi")

        assert youtube.inserted == []
