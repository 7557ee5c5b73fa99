from typing import Any, Dict, Sequence

from governance.exceptions import ValueConversionError
from governance.models.proposal import Proposal
from utils.formatter_utils import timestamp_to_datetime, to_uint256

PROPOSAL_FIELDS = ("nftTokenId", "deadline", "yayVotes", "nayVotes", "executed")


class ProposalMapper(object):
    """
    The single conversion boundary between the ledger's integer representation
    and the local domain. Anything that does not convert exactly is rejected.
    """

    @staticmethod
    def raw_to_proposal(proposal_id: int, raw: Sequence[Any]) -> Proposal:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != len(PROPOSAL_FIELDS):
            raise ValueConversionError(
                f"Proposal {proposal_id}: expected a tuple of {len(PROPOSAL_FIELDS)} fields, got {raw!r}"
            )

        nft_token_id, deadline, yay_votes, nay_votes, executed = raw
        try:
            if not isinstance(executed, bool):
                raise ValueError(f"executed must be a boolean, got {type(executed).__name__}")
            return Proposal(
                id=to_uint256(proposal_id, "id"),
                nft_token_id=to_uint256(nft_token_id, "nftTokenId"),
                deadline=timestamp_to_datetime(to_uint256(deadline, "deadline"), "deadline"),
                yay_votes=to_uint256(yay_votes, "yayVotes"),
                nay_votes=to_uint256(nay_votes, "nayVotes"),
                executed=executed,
            )
        except ValueError as e:
            # pydantic.ValidationError is a ValueError as well
            raise ValueConversionError(f"Proposal {proposal_id}: {e}") from e

    @staticmethod
    def proposal_to_dict(proposal: Proposal) -> Dict[str, Any]:
        return proposal.model_dump(mode="json")
