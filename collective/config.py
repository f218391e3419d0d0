"""Configuration management for collective."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global settings."""

    model_config = SettingsConfigDict(env_prefix="COLLECTIVE_")

    # ABI descriptors
    abi_path: str = "contracts"

    # Chain
    rpc_url: str = Field(default="")
    private_key: str = Field(default="")

    # Transactions
    gas: int = 570_000
    gas_price_gwei: str = "22.1"
    receipt_timeout: int = 300  # seconds
    poll_latency: float = 0.5  # seconds

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


# Global instance
settings = Settings()
