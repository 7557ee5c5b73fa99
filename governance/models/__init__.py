from governance.models.proposal import Proposal, ProposalView, TransactionOutcome
from governance.models.session_state import SessionState

__all__ = ["Proposal", "ProposalView", "SessionState", "TransactionOutcome"]
