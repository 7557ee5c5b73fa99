from unittest.mock import AsyncMock

import pytest

from constants.contract_addresses import REQUIRED_CHAIN_ID
from governance.governance_client import GovernanceClient
from governance.models.session_state import SessionState
from governance.service.proposal_repository import ProposalRepository
from governance.service.session_resolver import SessionResolver
from tests.unit.governance.fakes import NOW, FakeGateway, FakeLedger, FakeWeb3


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def wallet():
    wallet = AsyncMock()
    wallet.connect = AsyncMock(return_value=object())
    return wallet


@pytest.fixture
def web3_factory():
    return lambda provider: FakeWeb3(provider)


@pytest.fixture
def state():
    return SessionState()


@pytest.fixture
def resolver(wallet, state, web3_factory):
    return SessionResolver(wallet, state, REQUIRED_CHAIN_ID, web3_factory=web3_factory)


@pytest.fixture
def gateway(ledger):
    return FakeGateway(ledger)


@pytest.fixture
def repository(resolver, gateway):
    return ProposalRepository(resolver, gateway)


@pytest.fixture
def client(wallet, gateway, web3_factory):
    return GovernanceClient(
        wallet,
        gateway=gateway,
        required_chain_id=REQUIRED_CHAIN_ID,
        clock=lambda: NOW,
        web3_factory=web3_factory,
    )
