import asyncio
from typing import Any, Mapping

import aiohttp
from eth_utils import to_hex
from hexbytes import HexBytes
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception

from governance.enums.governance_action import GovernanceAction
from governance.enums.vote_choice import VoteChoice
from governance.exceptions import (
    ConfirmationTimeout,
    RemoteExecutionError,
    RemoteReadError,
    Unauthorized,
    UserRejected,
)
from governance.models.proposal import TransactionOutcome
from governance.models.session_state import SessionState
from governance.service.accessor import SessionAccessor, SigningAccessor
from governance.service.contract_gateway import ContractGateway, GovernanceHandle
from governance.service.proposal_repository import ProposalRepository
from utils.logger_utils import get_logger
from utils.rpc_utils import extract_rpc_error, is_user_rejection

logger = get_logger("Transaction Orchestrator")

SUBMIT_ERRORS = (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)

DEFAULT_CONFIRMATION_TIMEOUT = 120.0
DEFAULT_POLL_LATENCY = 0.5


class TransactionOrchestrator(object):
    """
    Write path: one governance transaction at a time, submitted and confirmed as
    a single awaited round trip, followed by a re-read of the state it changed.
    Sole writer of `SessionState.in_flight`.
    """

    def __init__(
        self,
        gateway: ContractGateway,
        repository: ProposalRepository,
        state: SessionState,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        poll_latency: float = DEFAULT_POLL_LATENCY,
    ):
        self._gateway = gateway
        self._repository = repository
        self._state = state
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency

    async def submit(
        self, action: GovernanceAction, params: Mapping[str, Any], accessor: SessionAccessor
    ) -> TransactionOutcome:
        if not isinstance(accessor, SigningAccessor):
            logger.error(f"Refusing to {action.value} without a signing accessor")
            raise Unauthorized(f"{action.value} requires a signing accessor")

        governance = self._gateway.governance(accessor)

        self._state.in_flight = True
        try:
            tx_hash = await self._send(governance, action, params)
            logger.info(f"Submitted {action.value} transaction {tx_hash}, waiting for confirmation")
            block_number = await self._confirm(governance, tx_hash)
        finally:
            self._state.in_flight = False

        logger.info(f"{action.value} transaction {tx_hash} confirmed in block {block_number}")
        refreshed = await self._refresh(action)
        return TransactionOutcome(action=action, tx_hash=tx_hash, block_number=block_number, refreshed=refreshed)

    async def _send(self, governance: GovernanceHandle, action: GovernanceAction, params: Mapping[str, Any]) -> str:
        try:
            if action is GovernanceAction.PROPOSE:
                tx_hash = await governance.create_proposal(params["nft_token_id"])
            elif action is GovernanceAction.VOTE:
                tx_hash = await governance.vote_on_proposal(params["proposal_id"], VoteChoice(params["vote"]))
            elif action is GovernanceAction.EXECUTE:
                tx_hash = await governance.execute_proposal(params["proposal_id"])
            else:
                raise ValueError(f"Unsupported governance action: {action}")
        except KeyError as e:
            raise ValueError(f"Missing parameter {e} for {action.value}") from e
        except ContractLogicError as e:
            _, message = extract_rpc_error(e)
            logger.error(f"{action.value} reverted before submission: {message}")
            raise RemoteExecutionError(message) from e
        except SUBMIT_ERRORS as e:
            if is_user_rejection(e):
                logger.warning(f"{action.value} transaction rejected by the signer")
                raise UserRejected(extract_rpc_error(e)[1]) from e
            _, message = extract_rpc_error(e)
            logger.error(f"Failed to submit {action.value}: {message}")
            raise RemoteExecutionError(message) from e

        return to_hex(HexBytes(tx_hash))

    async def _confirm(self, governance: GovernanceHandle, tx_hash: str) -> int:
        try:
            receipt = await governance.wait_for_receipt(
                HexBytes(tx_hash), timeout=self.confirmation_timeout, poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            logger.error(f"Transaction {tx_hash} not confirmed within {self.confirmation_timeout}s")
            raise ConfirmationTimeout(
                f"Transaction {tx_hash} not confirmed within {self.confirmation_timeout}s", tx_hash=tx_hash
            ) from e
        except SUBMIT_ERRORS as e:
            _, message = extract_rpc_error(e)
            logger.error(f"Failed waiting for {tx_hash}: {message}")
            raise RemoteExecutionError(message, tx_hash=tx_hash) from e

        if receipt.get("status") != 1:
            logger.error(f"Transaction {tx_hash} reverted")
            raise RemoteExecutionError(f"Transaction {tx_hash} reverted", tx_hash=tx_hash)
        return receipt.get("blockNumber")

    async def _refresh(self, action: GovernanceAction) -> bool:
        """
        Re-reads what the transaction changed. The transaction is final at this
        point, so a failed read keeps the previous snapshot instead of failing the write.
        """
        try:
            count = await self._repository.fetch_count()
            proposals = None
            if action is not GovernanceAction.PROPOSE:
                proposals = tuple(await self._repository.fetch_all(count))
        except RemoteReadError as e:
            logger.warning(f"{action.value} confirmed but the state refresh failed, keeping the last snapshot: {e.message}")
            return False

        self._state.proposal_count = count
        if proposals is not None:
            self._state.proposals = proposals
        return True
