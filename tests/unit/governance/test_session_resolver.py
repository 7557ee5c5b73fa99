import pytest
from unittest.mock import AsyncMock

from constants.contract_addresses import REQUIRED_CHAIN_ID
from governance.exceptions import ConnectionRejected, NetworkMismatch, RemoteReadError
from governance.service.accessor import ReadOnlyAccessor, SigningAccessor
from governance.service.session_resolver import SessionResolver
from tests.unit.governance.fakes import VOTER, FakeWeb3

ETHEREUM_MAINNET = 1


@pytest.mark.asyncio
async def test_resolve_read_only(resolver, state):
    accessor = await resolver.resolve()

    assert isinstance(accessor, ReadOnlyAccessor)
    assert not accessor.is_signer
    assert state.connected is True


@pytest.mark.asyncio
async def test_resolve_signer_binds_first_account(wallet, state):
    accounts = [VOTER.lower(), "0x1111111111111111111111111111111111111111"]
    resolver = SessionResolver(
        wallet, state, REQUIRED_CHAIN_ID, web3_factory=lambda p: FakeWeb3(p, accounts=accounts)
    )

    accessor = await resolver.resolve(require_signer=True)

    assert isinstance(accessor, SigningAccessor)
    assert accessor.address == VOTER  # checksummed


@pytest.mark.asyncio
async def test_connect_is_requested_once(resolver, wallet):
    await resolver.resolve()
    await resolver.resolve(require_signer=True)
    await resolver.resolve()

    wallet.connect.assert_awaited_once()


@pytest.mark.asyncio
async def test_wrong_network_is_a_hard_stop(wallet, state):
    resolver = SessionResolver(
        wallet, state, REQUIRED_CHAIN_ID, web3_factory=lambda p: FakeWeb3(p, chain_id=ETHEREUM_MAINNET)
    )

    with pytest.raises(NetworkMismatch) as exc_info:
        await resolver.resolve(require_signer=True)

    assert exc_info.value.expected_chain_id == REQUIRED_CHAIN_ID
    assert exc_info.value.actual_chain_id == ETHEREUM_MAINNET
    assert state.connected is False


@pytest.mark.asyncio
async def test_network_is_rechecked_on_every_resolve(wallet, state):
    web3 = FakeWeb3(None)
    resolver = SessionResolver(wallet, state, REQUIRED_CHAIN_ID, web3_factory=lambda p: web3)
    await resolver.resolve()

    # User switches networks in the wallet
    web3.eth.chain_id_value = ETHEREUM_MAINNET

    with pytest.raises(NetworkMismatch):
        await resolver.resolve(require_signer=True)


@pytest.mark.asyncio
async def test_rejected_connection_can_be_retried(state, web3_factory):
    wallet = AsyncMock()
    wallet.connect = AsyncMock(side_effect=[ConnectionRejected("User rejected the request."), object()])
    resolver = SessionResolver(wallet, state, REQUIRED_CHAIN_ID, web3_factory=web3_factory)

    with pytest.raises(ConnectionRejected):
        await resolver.resolve()
    assert not resolver.is_connected
    assert state.connected is False

    await resolver.resolve()
    assert state.connected is True
    assert wallet.connect.await_count == 2


@pytest.mark.asyncio
async def test_wallet_without_accounts_cannot_sign(wallet, state):
    resolver = SessionResolver(wallet, state, REQUIRED_CHAIN_ID, web3_factory=lambda p: FakeWeb3(p, accounts=[]))

    with pytest.raises(ConnectionRejected):
        await resolver.resolve(require_signer=True)


@pytest.mark.asyncio
async def test_chain_id_read_failure(wallet, state):
    resolver = SessionResolver(
        wallet, state, REQUIRED_CHAIN_ID, web3_factory=lambda p: FakeWeb3(p, chain_id=ConnectionError("down"))
    )

    with pytest.raises(RemoteReadError):
        await resolver.resolve()


@pytest.mark.asyncio
async def test_connect_listeners_run_exactly_once(resolver, state):
    listener = AsyncMock()
    state.add_connect_listener(listener)

    await resolver.resolve()
    await resolver.resolve(require_signer=True)

    listener.assert_awaited_once()


@pytest.mark.asyncio
async def test_disconnect_asks_the_wallet_again(resolver, wallet, state):
    await resolver.resolve()
    resolver.disconnect()
    state.reset()

    await resolver.resolve()

    assert wallet.connect.await_count == 2
    assert state.connected is True
