"""Configuração do pytest para o projeto replydesk."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.domain.account import Account  # noqa: E402
from app.infra.stores import MemoryPersistenceGateway  # noqa: E402
from app.services.credential_manager import CredentialManager  # noqa: E402
from app.services.interaction_ledger import InteractionLedger  # noqa: E402
from app.sync import ResourcePager  # noqa: E402
from tests.fakes.fake_youtube import (  # noqa: E402
    ACCOUNT_ID,
    FakeClock,
    FakeOAuthProvider,
    FakeYouTubeApi,
)


async def _no_sleep(seconds: float) -> None:
    return None


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gateway() -> MemoryPersistenceGateway:
    return MemoryPersistenceGateway()


@pytest.fixture
def oauth() -> FakeOAuthProvider:
    return FakeOAuthProvider()


@pytest.fixture
def youtube() -> FakeYouTubeApi:
    return FakeYouTubeApi()


@pytest.fixture
def credentials(
    oauth: FakeOAuthProvider, gateway: MemoryPersistenceGateway, clock: FakeClock
) -> CredentialManager:
    return CredentialManager(oauth, gateway, clock=clock)


@pytest.fixture
def ledger(gateway: MemoryPersistenceGateway, clock: FakeClock) -> InteractionLedger:
    return InteractionLedger(gateway, clock=clock)


@pytest.fixture
def pager() -> ResourcePager:
    """Pager sem espera real entre páginas."""
    return ResourcePager(min_interval_seconds=0.0, sleep=_no_sleep)


@pytest_asyncio.fixture
async def connected_account(
    gateway: MemoryPersistenceGateway,
    credentials: CredentialManager,
    clock: FakeClock,
) -> Account:
    """Conta com credencial válida por 1h."""
    account = Account(account_id=ACCOUNT_ID, name="Canal Teste")
    await gateway.save_account(account)
    credential = await credentials.exchange_code("initial")
    await credentials.store(ACCOUNT_ID, credential)
    return account
