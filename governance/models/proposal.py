from datetime import datetime
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from governance.enums.governance_action import GovernanceAction
from governance.enums.proposal_status import ProposalStatus
from governance.enums.vote_choice import VoteChoice


class Proposal(BaseModel):
    """
    Snapshot of one on-chain proposal. Every read produces a new instance;
    instances are never mutated or cached across writes.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(ge=0, description="Sequential id assigned by the ledger, starting at 0")
    nft_token_id: int = Field(alias="nftTokenId")
    deadline: datetime
    yay_votes: int = Field(default=0, ge=0, alias="yayVotes")
    nay_votes: int = Field(default=0, ge=0, alias="nayVotes")
    executed: bool = False

    @property
    def total_votes(self) -> int:
        return self.yay_votes + self.nay_votes


class ProposalView(BaseModel):
    """What a caller needs to present one proposal: its status and what can be done with it."""

    model_config = ConfigDict(frozen=True)

    proposal: Proposal
    status: ProposalStatus
    actions: FrozenSet[GovernanceAction] = frozenset()
    # Only set while awaiting execution. Display hint, the contract decides the outcome.
    expected_outcome: Optional[VoteChoice] = None

    @property
    def can_vote(self) -> bool:
        return GovernanceAction.VOTE in self.actions

    @property
    def can_execute(self) -> bool:
        return GovernanceAction.EXECUTE in self.actions


class TransactionOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: GovernanceAction
    tx_hash: str
    block_number: Optional[int] = None
    # False when the post-confirmation re-read failed and the session kept its last snapshot
    refreshed: bool = True
