import asyncio
from typing import List

import aiohttp
from web3.exceptions import Web3Exception

from governance.exceptions import RemoteReadError, ValueConversionError
from governance.mappers.proposal_mapper import ProposalMapper
from governance.models.proposal import Proposal
from governance.service.contract_gateway import ContractGateway
from governance.service.session_resolver import SessionResolver
from utils.formatter_utils import to_uint256
from utils.logger_utils import get_logger
from utils.rpc_utils import extract_rpc_error

logger = get_logger("Proposal Repository")

READ_ERRORS = (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)


class ProposalRepository(object):
    """
    Read path. Every call resolves a fresh read-only accessor, so each read
    re-validates the network and returns a new snapshot.
    """

    def __init__(self, resolver: SessionResolver, gateway: ContractGateway):
        self._resolver = resolver
        self._gateway = gateway
        self._mapper = ProposalMapper()

    async def fetch_one(self, proposal_id: int) -> Proposal:
        accessor = await self._resolver.resolve()
        governance = self._gateway.governance(accessor)
        try:
            raw = await governance.proposal(proposal_id)
        except READ_ERRORS as e:
            raise self._read_error(f"proposals({proposal_id})", e) from e
        return self._mapper.raw_to_proposal(proposal_id, raw)

    async def fetch_all(self, count: int) -> List[Proposal]:
        """
        Fetches ids 0..count-1 one after the other, in ascending order.
        The first failure aborts the remaining reads and propagates; no partial list is returned.
        """
        proposals = []
        for proposal_id in range(count):
            proposals.append(await self.fetch_one(proposal_id))
        logger.info(f"Fetched {len(proposals)} proposal(s)")
        return proposals

    async def fetch_count(self) -> int:
        accessor = await self._resolver.resolve()
        try:
            count = await self._gateway.governance(accessor).num_proposals()
        except READ_ERRORS as e:
            raise self._read_error("numProposals()", e) from e
        return self._to_int(count, "numProposals")

    async def fetch_treasury_balance(self) -> int:
        accessor = await self._resolver.resolve()
        try:
            balance = await self._gateway.governance(accessor).treasury_balance()
        except READ_ERRORS as e:
            raise self._read_error("treasury balance", e) from e
        return self._to_int(balance, "treasury balance")

    async def fetch_membership_balance(self, owner: str) -> int:
        accessor = await self._resolver.resolve()
        try:
            balance = await self._gateway.membership(accessor).balance_of(owner)
        except READ_ERRORS as e:
            raise self._read_error(f"balanceOf({owner})", e) from e
        return self._to_int(balance, "balanceOf")

    @staticmethod
    def _to_int(value, field_name: str) -> int:
        try:
            return to_uint256(value, field_name)
        except ValueError as e:
            raise ValueConversionError(str(e)) from e

    @staticmethod
    def _read_error(call: str, exc: BaseException) -> RemoteReadError:
        _, message = extract_rpc_error(exc)
        logger.error(f"Remote read {call} failed: {message}")
        return RemoteReadError(f"Remote read {call} failed: {message}")
