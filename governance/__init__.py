from governance.governance_client import GovernanceClient

__all__ = ["GovernanceClient"]
