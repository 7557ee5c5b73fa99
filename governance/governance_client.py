from datetime import datetime
from typing import Callable, List, Optional, Union

from web3 import AsyncWeb3

from config.settings import Settings
from constants.contract_addresses import REQUIRED_CHAIN_ID, REQUIRED_CHAIN_NAME
from governance.enums.governance_action import GovernanceAction
from governance.enums.view import View
from governance.enums.vote_choice import VoteChoice
from governance.exceptions import ActionNotAllowed, ConnectionRejected, NotEligible
from governance.models.proposal import Proposal, ProposalView, TransactionOutcome
from governance.models.session_state import SessionState
from governance.providers.wallet_provider import JsonRpcWalletProvider, WalletProvider
from governance.service.accessor import SigningAccessor
from governance.service.contract_gateway import ContractGateway
from governance.service.proposal_lifecycle import ProposalLifecycle, utc_now
from governance.service.proposal_repository import ProposalRepository
from governance.service.session_resolver import SessionResolver
from governance.service.transaction_orchestrator import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    DEFAULT_POLL_LATENCY,
    TransactionOrchestrator,
)
from utils.logger_utils import get_logger

logger = get_logger("Governance Client")


class GovernanceClient(object):
    """
    Operations a UI or script invokes against the DAO. Owns the session state
    and wires the resolver, gateway, repository and orchestrator together.
    Renders nothing.
    """

    def __init__(
        self,
        wallet_provider: WalletProvider,
        gateway: Optional[ContractGateway] = None,
        state: Optional[SessionState] = None,
        required_chain_id: int = REQUIRED_CHAIN_ID,
        chain_name: Optional[str] = REQUIRED_CHAIN_NAME,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        poll_latency: float = DEFAULT_POLL_LATENCY,
        clock: Callable[[], datetime] = utc_now,
        web3_factory: Callable[..., AsyncWeb3] = AsyncWeb3,
    ):
        self.state = state or SessionState()
        self._clock = clock
        self._resolver = SessionResolver(
            wallet_provider, self.state, required_chain_id, chain_name, web3_factory=web3_factory
        )
        self._gateway = gateway or ContractGateway()
        self._repository = ProposalRepository(self._resolver, self._gateway)
        self._orchestrator = TransactionOrchestrator(
            self._gateway, self._repository, self.state, confirmation_timeout, poll_latency
        )
        self.state.add_connect_listener(self._on_connected)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "GovernanceClient":
        wallet_provider = JsonRpcWalletProvider(
            settings.network.wallet_provider_uri, timeout=settings.network.rpc_timeout
        )
        gateway = ContractGateway(settings.contracts.governance_address, settings.contracts.membership_address)
        required_chain_id = settings.network.required_chain_id
        # The bundled name only describes the default chain
        if required_chain_id != REQUIRED_CHAIN_ID:
            kwargs.setdefault("chain_name", None)
        return cls(
            wallet_provider,
            gateway=gateway,
            required_chain_id=required_chain_id,
            confirmation_timeout=settings.transactions.confirmation_timeout,
            poll_latency=settings.transactions.poll_latency,
            **kwargs,
        )

    @property
    def is_busy(self) -> bool:
        return self.state.in_flight

    # --- Session ---

    async def connect(self) -> None:
        """Connects the wallet. The first connection loads balances and the proposal count."""
        await self._resolver.resolve()

    async def close(self) -> None:
        self._resolver.disconnect()
        self.state.reset()
        logger.info("Session closed")

    async def _on_connected(self) -> None:
        await self.get_treasury_balance()
        try:
            await self.get_membership_balance()
        except ConnectionRejected as e:
            # Read-only session: proposals stay readable, writes are refused later
            logger.warning(f"No signing account available, membership balance left at 0: {e.message}")
            self.state.membership_balance = 0
        await self.get_proposal_count()

    # --- Reads ---

    async def get_treasury_balance(self) -> int:
        """Wei held by the governance contract."""
        self.state.treasury_balance = await self._repository.fetch_treasury_balance()
        return self.state.treasury_balance

    async def get_proposal_count(self) -> int:
        self.state.proposal_count = await self._repository.fetch_count()
        return self.state.proposal_count

    async def get_membership_balance(self) -> int:
        signer = await self._signer()
        self.state.membership_balance = await self._repository.fetch_membership_balance(signer.address)
        return self.state.membership_balance

    async def is_eligible(self) -> bool:
        return await self.get_membership_balance() > 0

    async def list_proposals(self) -> List[Proposal]:
        count = await self.get_proposal_count()
        proposals = await self._repository.fetch_all(count)
        self.state.proposals = tuple(proposals)
        return proposals

    async def activate_view(self, view: View) -> None:
        """View activation event: the proposals view loads the full set, the create view re-checks eligibility."""
        self.state.selected_view = view
        if view is View.PROPOSALS:
            await self.list_proposals()
        elif view is View.CREATE_PROPOSAL:
            await self.get_membership_balance()

    def describe_proposals(self, now: Optional[datetime] = None) -> List[ProposalView]:
        now = now or self._clock()
        eligible = self.state.is_eligible
        return [ProposalLifecycle.describe(p, now, eligible) for p in self.state.proposals]

    # --- Writes ---

    async def create_proposal(self, nft_token_id: int) -> TransactionOutcome:
        signer = await self._signer()
        await self._require_eligible(signer)
        return await self._orchestrator.submit(
            GovernanceAction.PROPOSE, {"nft_token_id": nft_token_id}, signer
        )

    async def vote(self, proposal_id: int, choice: Union[VoteChoice, str]) -> TransactionOutcome:
        if isinstance(choice, str):
            choice = VoteChoice.from_label(choice)
        signer = await self._signer()
        await self._require_eligible(signer)
        await self._require_action(proposal_id, GovernanceAction.VOTE, eligible=True)
        return await self._orchestrator.submit(
            GovernanceAction.VOTE, {"proposal_id": proposal_id, "vote": choice}, signer
        )

    async def execute(self, proposal_id: int) -> TransactionOutcome:
        signer = await self._signer()
        await self._require_action(proposal_id, GovernanceAction.EXECUTE, eligible=False)
        return await self._orchestrator.submit(GovernanceAction.EXECUTE, {"proposal_id": proposal_id}, signer)

    async def _signer(self) -> SigningAccessor:
        return await self._resolver.resolve(require_signer=True)

    async def _require_eligible(self, signer: SigningAccessor) -> None:
        balance = await self._repository.fetch_membership_balance(signer.address)
        self.state.membership_balance = balance
        if balance <= 0:
            logger.warning(f"{signer.address} holds no membership token")
            raise NotEligible("You do not own any membership NFTs. You cannot create or vote on proposals.")

    async def _require_action(self, proposal_id: int, action: GovernanceAction, eligible: bool) -> Proposal:
        proposal = await self._repository.fetch_one(proposal_id)
        now = self._clock()
        if action not in ProposalLifecycle.legal_actions(proposal, now, eligible):
            status = ProposalLifecycle.derive_status(proposal, now)
            logger.warning(f"Cannot {action.value} proposal {proposal_id} while it is {status.value}")
            raise ActionNotAllowed(f"Cannot {action.value} proposal {proposal_id}: proposal is {status.value}")
        return proposal
