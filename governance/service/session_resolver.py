import asyncio
from typing import Callable, Optional

import aiohttp
from web3 import AsyncWeb3
from web3.exceptions import Web3Exception

from constants.contract_addresses import REQUIRED_CHAIN_ID
from governance.exceptions import ConnectionRejected, NetworkMismatch, RemoteReadError
from governance.models.session_state import SessionState
from governance.providers.wallet_provider import WalletProvider
from governance.service.accessor import ReadOnlyAccessor, SessionAccessor, SigningAccessor
from utils.formatter_utils import to_checksum_address
from utils.logger_utils import get_logger
from utils.rpc_utils import UNAUTHORIZED, USER_REJECTED_REQUEST, extract_rpc_error

logger = get_logger("Session Resolver")

TRANSPORT_ERRORS = (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)


class SessionResolver(object):
    """
    Turns the wallet collaborator into accessors. The wallet is asked for access
    once per session; the active chain is checked on every resolution so a
    network switch in the wallet is caught on the next call.
    """

    def __init__(
        self,
        wallet_provider: WalletProvider,
        state: SessionState,
        required_chain_id: int = REQUIRED_CHAIN_ID,
        chain_name: Optional[str] = None,
        web3_factory: Callable[..., AsyncWeb3] = AsyncWeb3,
    ):
        self._wallet_provider = wallet_provider
        self._state = state
        self.required_chain_id = required_chain_id
        self.chain_name = chain_name
        self._web3_factory = web3_factory
        self._w3: Optional[AsyncWeb3] = None

    @property
    def is_connected(self) -> bool:
        return self._w3 is not None

    async def resolve(self, require_signer: bool = False) -> SessionAccessor:
        w3 = await self._ensure_connected()

        chain_id = await self._read_chain_id(w3)
        if chain_id != self.required_chain_id:
            logger.error(f"Wallet is on chain {chain_id}, required chain is {self.required_chain_id}")
            raise NetworkMismatch(self.required_chain_id, chain_id, self.chain_name)

        if require_signer:
            accessor = SigningAccessor(w3, await self._first_account(w3))
        else:
            accessor = ReadOnlyAccessor(w3)

        await self._state.mark_connected()
        return accessor

    def disconnect(self) -> None:
        """Forget the wallet session; the next resolve asks the wallet again."""
        self._w3 = None

    async def _ensure_connected(self) -> AsyncWeb3:
        if self._w3 is None:
            raw_provider = await self._wallet_provider.connect()
            self._w3 = self._web3_factory(raw_provider)
        return self._w3

    async def _read_chain_id(self, w3: AsyncWeb3) -> int:
        try:
            return await w3.eth.chain_id
        except TRANSPORT_ERRORS as e:
            _, message = extract_rpc_error(e)
            logger.error(f"Failed to read the active chain id: {message}")
            raise RemoteReadError(f"Failed to read the active chain id: {message}") from e

    async def _first_account(self, w3: AsyncWeb3) -> str:
        try:
            accounts = await w3.eth.accounts
        except TRANSPORT_ERRORS as e:
            code, message = extract_rpc_error(e)
            if code in (USER_REJECTED_REQUEST, UNAUTHORIZED):
                logger.warning(f"Wallet refused to expose an account: {message}")
                raise ConnectionRejected(message) from e
            logger.error(f"Failed to read wallet accounts: {message}")
            raise RemoteReadError(f"Failed to read wallet accounts: {message}") from e

        if not accounts:
            raise ConnectionRejected("Wallet did not expose any account")
        return to_checksum_address(accounts[0])
