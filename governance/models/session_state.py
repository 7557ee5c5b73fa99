from typing import Awaitable, Callable, List, Optional, Tuple

from governance.enums.view import View
from governance.models.proposal import Proposal
from utils.logger_utils import get_logger

logger = get_logger("Session State")

ConnectListener = Callable[[], Awaitable[None]]


class SessionState(object):
    """
    Process-wide session flags and the last snapshots read from the ledger.

    One instance is created per client and passed to the components that own
    each field: SessionResolver flips `connected`, TransactionOrchestrator is the
    only writer of `in_flight`, the facade owns `selected_view` and the snapshots.
    """

    def __init__(self):
        self._connect_listeners: List[ConnectListener] = []
        self.reset()

    def reset(self) -> None:
        """Back to the disconnected, idle baseline. Listeners stay registered."""
        self.connected: bool = False
        self.in_flight: bool = False
        self.selected_view: Optional[View] = None
        self.treasury_balance: int = 0
        self.proposal_count: int = 0
        self.membership_balance: int = 0
        self.proposals: Tuple[Proposal, ...] = ()

    def add_connect_listener(self, listener: ConnectListener) -> None:
        self._connect_listeners.append(listener)

    async def mark_connected(self) -> bool:
        """
        Flips `connected` to True and awaits every connect listener.
        Returns False without notifying anyone when already connected.
        If a listener fails the session goes back to disconnected, so the
        next connection runs the listeners again.
        """
        if self.connected:
            return False

        # Set first: listeners read through the resolver, which calls back here
        self.connected = True
        logger.info(f"Session connected, notifying {len(self._connect_listeners)} listener(s)")
        try:
            for listener in list(self._connect_listeners):
                await listener()
        except Exception:
            self.connected = False
            logger.warning("Connect listener failed, session marked disconnected")
            raise
        return True

    @property
    def is_eligible(self) -> bool:
        # Last known value only; gating decisions re-read the balance.
        return self.membership_balance > 0
