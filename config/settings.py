from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.contract_addresses import (
    DAO_GOVERNANCE_CONTRACT_ADDRESS,
    MEMBERSHIP_NFT_CONTRACT_ADDRESS,
    REQUIRED_CHAIN_ID,
)

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True
)


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = _ENV_CONFIG

    name: str = Field("DAO Governance Client", validation_alias="APP_NAME")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


class NetworkSettings(BaseSettings):
    """Settings related to the wallet provider and the network it must be on."""

    model_config = _ENV_CONFIG

    wallet_provider_uri: str = Field(
        default="http://127.0.0.1:1248",
        validation_alias="WALLET_PROVIDER_URI",
        description="JSON-RPC endpoint of the wallet that signs transactions",
    )
    required_chain_id: int = Field(default=REQUIRED_CHAIN_ID, gt=0, validation_alias="REQUIRED_CHAIN_ID")
    # Timeout for RPC calls (seconds)
    rpc_timeout: int = Field(default=60, gt=0, validation_alias="RPC_TIMEOUT")

    @field_validator("required_chain_id", mode="before")
    @classmethod
    def _parse_chain_id(cls, value: Any) -> Any:
        # Wallets report chain ids in hex, accept both notations
        if isinstance(value, str):
            return int(value, 0)
        return value


class ContractSettings(BaseSettings):
    """Addresses of the governance and membership contracts."""

    model_config = _ENV_CONFIG

    governance_address: str = Field(
        default=DAO_GOVERNANCE_CONTRACT_ADDRESS, validation_alias="GOVERNANCE_CONTRACT_ADDRESS"
    )
    membership_address: str = Field(
        default=MEMBERSHIP_NFT_CONTRACT_ADDRESS, validation_alias="MEMBERSHIP_CONTRACT_ADDRESS"
    )


class TransactionSettings(BaseSettings):
    """Settings for submitted governance transactions."""

    model_config = _ENV_CONFIG

    # How long to wait for a receipt before giving up (seconds)
    confirmation_timeout: float = Field(default=120.0, gt=0, validation_alias="TX_CONFIRMATION_TIMEOUT")
    poll_latency: float = Field(default=0.5, gt=0, validation_alias="TX_POLL_LATENCY")


class Settings(BaseSettings):
    """
    Main Settings class that composes all sub-settings.
    Each sub-settings class reads its own flat env vars.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    contracts: ContractSettings = Field(default_factory=ContractSettings)
    transactions: TransactionSettings = Field(default_factory=TransactionSettings)

    model_config = _ENV_CONFIG


# Singleton instance
settings = Settings()
