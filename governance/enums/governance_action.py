from enum import Enum


class GovernanceAction(str, Enum):
    PROPOSE = "propose"
    VOTE = "vote"
    EXECUTE = "execute"
