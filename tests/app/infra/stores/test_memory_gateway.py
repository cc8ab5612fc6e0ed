"""Testes do MemoryPersistenceGateway."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.domain.credential import Credential
from app.infra.stores import MemoryPersistenceGateway
from app.sessions.models import Session
from tests.fakes.fake_youtube import BASE_TIME, make_thread
from utils.errors import ValidationError


@pytest.fixture
def store() -> MemoryPersistenceGateway:
    return MemoryPersistenceGateway()


class TestComments:
    """Testes de comentários."""

    @pytest.mark.asyncio
    async def test_get_comments_newest_first(self, store) -> None:
        comments = [make_thread(f"c{i}", minutes=i).to_comment([]) for i in range(3)]
        await store.save_comments("v1", comments)

        result = await store.get_comments("v1")

        assert [c.comment_id for c in result] == ["c2", "c1", "c0"]

    @pytest.mark.asyncio
    async def test_upsert_by_comment_id(self, store) -> None:
        await store.save_comments("v1", [make_thread("c1").to_comment([])])
        await store.save_comments("v1", [make_thread("c1").to_comment([])])

        assert len(await store.get_comments("v1")) == 1

    @pytest.mark.asyncio
    async def test_save_never_clears_replied_flag(self, store) -> None:
        """Upsert com replied_to=False não desfaz uma marcação."""
        await store.save_comments("v1", [make_thread("c1").to_comment([])])
        await store.mark_comment_replied("c1")

        await store.save_comments("v1", [make_thread("c1").to_comment([])])

        assert (await store.get_comment("c1")).replied_to is True

    @pytest.mark.asyncio
    async def test_mark_unknown_comment_returns_false(self, store) -> None:
        assert await store.mark_comment_replied("missing") is False

    @pytest.mark.asyncio
    async def test_returned_objects_are_snapshots(self, store) -> None:
        """Mutar o retorno não altera o estado armazenado."""
        await store.save_comments("v1", [make_thread("c1").to_comment([])])

        first = await store.get_comment("c1")
        first.metadata["total_reply_count"] = 99

        again = await store.get_comment("c1")
        assert again.metadata["total_reply_count"] == 0


class TestCredentialsAndSessions:
    """Testes de credenciais e sessões."""

    @pytest.mark.asyncio
    async def test_unbound_credential_rejected(self, store) -> None:
        credential = Credential(
            account_id="",
            access_token="a",
            refresh_token="r",
            expires_at=BASE_TIME,
        )

        with pytest.raises(ValidationError):
            await store.save_credential(credential)

    @pytest.mark.asyncio
    async def test_end_session_keeps_record(self, store) -> None:
        session = Session(
            session_id="s1",
            account_id="a1",
            created_at=BASE_TIME,
            expires_at=BASE_TIME + timedelta(days=7),
        )
        await store.create_session(session)

        assert await store.end_session("s1") is True
        assert (await store.get_session("s1")).active is False
        assert await store.end_session("missing") is False
