from typing import Optional


class GovernanceClientError(Exception):
    """
    Base class for every failure surfaced by the governance client.
    `message` carries the remote-provided message when one was available.
    """

    kind = "GovernanceClientError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkMismatch(GovernanceClientError):
    """The wallet is on another chain. The user has to switch networks, never retried."""

    kind = "NetworkMismatch"

    def __init__(self, expected_chain_id: int, actual_chain_id: int, chain_name: Optional[str] = None):
        target = chain_name or f"chain {expected_chain_id}"
        super().__init__(
            f"Please switch to the {target} network (expected chain id {expected_chain_id}, got {actual_chain_id})"
        )
        self.expected_chain_id = expected_chain_id
        self.actual_chain_id = actual_chain_id


class InvalidConfiguration(GovernanceClientError):
    """A configured value (wallet URI, address, chain id) cannot be used as given."""

    kind = "InvalidConfiguration"


class ConnectionRejected(GovernanceClientError):
    """The wallet connection was declined or could not be established."""

    kind = "ConnectionRejected"


class RemoteReadError(GovernanceClientError):
    kind = "RemoteReadError"


class ValueConversionError(RemoteReadError):
    """A ledger value could not be represented locally without loss."""

    kind = "ValueConversionError"


class UserRejected(GovernanceClientError):
    """The signer declined the transaction. Nothing was submitted."""

    kind = "UserRejected"


class RemoteExecutionError(GovernanceClientError):
    """The transaction reverted or failed after submission."""

    kind = "RemoteExecutionError"

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class ConfirmationTimeout(RemoteExecutionError):
    kind = "ConfirmationTimeout"


class Unauthorized(GovernanceClientError):
    """A write was attempted without a signing accessor."""

    kind = "Unauthorized"


class NotEligible(GovernanceClientError):
    """The connected address holds no membership token."""

    kind = "NotEligible"


class ActionNotAllowed(GovernanceClientError):
    """The proposal's current status does not permit the requested action."""

    kind = "ActionNotAllowed"
