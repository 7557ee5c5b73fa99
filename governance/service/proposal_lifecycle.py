from datetime import datetime, timezone
from typing import FrozenSet, Optional

from governance.enums.governance_action import GovernanceAction
from governance.enums.proposal_status import ProposalStatus
from governance.enums.vote_choice import VoteChoice
from governance.models.proposal import Proposal, ProposalView

NO_ACTIONS: FrozenSet[GovernanceAction] = frozenset()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProposalLifecycle(object):
    """
    Status and action derivation. Pure: the result depends only on the
    proposal snapshot, the supplied clock reading and the eligibility flag.
    """

    @staticmethod
    def derive_status(proposal: Proposal, now: datetime) -> ProposalStatus:
        if proposal.executed:
            return ProposalStatus.EXECUTED
        if now < proposal.deadline:
            return ProposalStatus.ACTIVE
        return ProposalStatus.AWAITING_EXECUTION

    @staticmethod
    def legal_actions(proposal: Proposal, now: datetime, eligible: bool) -> FrozenSet[GovernanceAction]:
        status = ProposalLifecycle.derive_status(proposal, now)
        if status is ProposalStatus.ACTIVE:
            # Only membership holders may vote
            return frozenset({GovernanceAction.VOTE}) if eligible else NO_ACTIONS
        if status is ProposalStatus.AWAITING_EXECUTION:
            return frozenset({GovernanceAction.EXECUTE})
        return NO_ACTIONS

    @staticmethod
    def expected_outcome(proposal: Proposal, now: datetime) -> Optional[VoteChoice]:
        """
        Which branch execution is expected to take: YAY only on a strict majority,
        ties go to NAY. Mirrors the contract for display, it does not decide anything.
        """
        if ProposalLifecycle.derive_status(proposal, now) is not ProposalStatus.AWAITING_EXECUTION:
            return None
        return VoteChoice.YAY if proposal.yay_votes > proposal.nay_votes else VoteChoice.NAY

    @staticmethod
    def describe(proposal: Proposal, now: datetime, eligible: bool) -> ProposalView:
        return ProposalView(
            proposal=proposal,
            status=ProposalLifecycle.derive_status(proposal, now),
            actions=ProposalLifecycle.legal_actions(proposal, now, eligible),
            expected_outcome=ProposalLifecycle.expected_outcome(proposal, now),
        )
