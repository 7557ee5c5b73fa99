from governance.enums.governance_action import GovernanceAction
from governance.enums.proposal_status import ProposalStatus
from governance.enums.view import View
from governance.enums.vote_choice import VoteChoice

__all__ = ["GovernanceAction", "ProposalStatus", "View", "VoteChoice"]
