from enum import Enum


class ProposalStatus(str, Enum):
    ACTIVE = "active"                           # deadline not reached, open for votes
    AWAITING_EXECUTION = "awaiting_execution"   # deadline passed, not executed yet
    EXECUTED = "executed"
