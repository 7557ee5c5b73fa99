import asyncio
from abc import ABC, abstractmethod

import aiohttp
from web3.providers.async_base import AsyncBaseProvider
from web3.types import RPCEndpoint

from governance.exceptions import ConnectionRejected, InvalidConfiguration
from governance.providers.provider_factory import DEFAULT_TIMEOUT, get_async_provider_from_uri
from utils.logger_utils import get_logger
from utils.rpc_utils import JSON_RPC_METHOD_NOT_FOUND, USER_REJECTED_REQUEST, rpc_response_error

logger = get_logger("Wallet Provider")


class WalletProvider(ABC):
    """
    The wallet collaborator. `connect` asks the wallet for access and hands back
    a raw provider from which the chain id and the signing account are derived.
    """

    @abstractmethod
    async def connect(self) -> AsyncBaseProvider:
        ...


class JsonRpcWalletProvider(WalletProvider):
    """
    Wallet exposed as a JSON-RPC endpoint (desktop wallets such as Frame, or a dev
    node holding unlocked accounts). Access is requested with EIP-1102
    `eth_requestAccounts`; the wallet signs `eth_sendTransaction` itself.
    """

    def __init__(self, uri: str, timeout: int = DEFAULT_TIMEOUT):
        self.uri = uri
        self.timeout = timeout

    async def connect(self) -> AsyncBaseProvider:
        try:
            provider = get_async_provider_from_uri(self.uri, timeout=self.timeout)
        except ValueError as e:
            logger.error(f"Invalid wallet provider URI {self.uri}: {e}")
            raise InvalidConfiguration(str(e)) from e

        logger.info(f"Requesting wallet access from {self.uri}")
        try:
            response = await provider.make_request(RPCEndpoint("eth_requestAccounts"), [])
        except (aiohttp.ClientError, asyncio.TimeoutError, ConnectionError) as e:
            logger.error(f"Wallet at {self.uri} is unreachable: {e}")
            raise ConnectionRejected(f"Wallet at {self.uri} is unreachable: {e}") from e

        error = rpc_response_error(response)
        if error is None:
            return provider

        code = error.get("code")
        if code == JSON_RPC_METHOD_NOT_FOUND:
            # Nodes without EIP-1102 expose their accounts without a prompt
            logger.debug(f"{self.uri} does not implement eth_requestAccounts, continuing")
            return provider

        message = error.get("message") or "Wallet connection failed"
        if code == USER_REJECTED_REQUEST:
            logger.warning(f"Wallet connection rejected by user: {message}")
        else:
            logger.error(f"Wallet connection failed ({code}): {message}")
        raise ConnectionRejected(message)
