from typing import Any, Tuple

from hexbytes import HexBytes
from web3.contract.async_contract import AsyncContract, AsyncContractFunction
from web3.types import TxReceipt

from abi.dao_governance_abi import DAO_GOVERNANCE_ABI
from abi.erc721_abi import ERC721_ABI
from constants.contract_addresses import DAO_GOVERNANCE_CONTRACT_ADDRESS, MEMBERSHIP_NFT_CONTRACT_ADDRESS
from governance.enums.vote_choice import VoteChoice
from governance.exceptions import Unauthorized
from governance.service.accessor import SessionAccessor, SigningAccessor
from utils.formatter_utils import to_checksum_address


class GovernanceHandle(object):
    """Typed wrappers around the governance contract bound to one accessor."""

    def __init__(self, contract: AsyncContract, accessor: SessionAccessor):
        self._contract = contract
        self._accessor = accessor

    @property
    def address(self) -> str:
        return self._contract.address

    async def num_proposals(self) -> int:
        return await self._contract.functions.numProposals().call()

    async def proposal(self, proposal_id: int) -> Tuple[Any, ...]:
        return await self._contract.functions.proposals(proposal_id).call()

    async def treasury_balance(self) -> int:
        return await self._accessor.w3.eth.get_balance(self._contract.address)

    async def create_proposal(self, nft_token_id: int) -> HexBytes:
        return await self._transact(self._contract.functions.createProposal(nft_token_id))

    async def vote_on_proposal(self, proposal_id: int, vote: VoteChoice) -> HexBytes:
        return await self._transact(self._contract.functions.voteOnProposal(proposal_id, int(vote)))

    async def execute_proposal(self, proposal_id: int) -> HexBytes:
        return await self._transact(self._contract.functions.executeProposal(proposal_id))

    async def wait_for_receipt(self, tx_hash: HexBytes, timeout: float, poll_latency: float) -> TxReceipt:
        return await self._accessor.w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=timeout, poll_latency=poll_latency
        )

    async def _transact(self, func: AsyncContractFunction) -> HexBytes:
        if not isinstance(self._accessor, SigningAccessor):
            raise Unauthorized(f"{func.fn_name} requires a signing accessor")
        return await func.transact({"from": self._accessor.address})


class MembershipHandle(object):
    def __init__(self, contract: AsyncContract):
        self._contract = contract

    @property
    def address(self) -> str:
        return self._contract.address

    async def balance_of(self, owner: str) -> int:
        return await self._contract.functions.balanceOf(to_checksum_address(owner)).call()


class ContractGateway(object):
    """
    Binds accessors to the two contracts. Construction is pure: no I/O happens
    until a handle method is awaited, and handles share no mutable state.
    """

    def __init__(
        self,
        governance_address: str = DAO_GOVERNANCE_CONTRACT_ADDRESS,
        membership_address: str = MEMBERSHIP_NFT_CONTRACT_ADDRESS,
    ):
        self.governance_address = to_checksum_address(governance_address)
        self.membership_address = to_checksum_address(membership_address)

    def governance(self, accessor: SessionAccessor) -> GovernanceHandle:
        contract = accessor.w3.eth.contract(address=self.governance_address, abi=DAO_GOVERNANCE_ABI)
        return GovernanceHandle(contract, accessor)

    def membership(self, accessor: SessionAccessor) -> MembershipHandle:
        contract = accessor.w3.eth.contract(address=self.membership_address, abi=ERC721_ABI)
        return MembershipHandle(contract)
