"""Configuration management for the Polymarket approval tools."""

import os
from dotenv import load_dotenv

from models import ApprovalConfig

load_dotenv()


class Config:
    """Approval configuration loaded from environment variables."""

    # Wallet Configuration
    PRIVATE_KEY: str = os.getenv("PRIVATE_KEY", "")
    PROXY_WALLET: str = os.getenv("PROXY_WALLET", "")

    # Network Configuration
    RPC_URL: str = os.getenv("RPC_URL", "https://polygon-rpc.com")
    CHAIN_ID: int = int(os.getenv("CHAIN_ID", "137"))

    # Report what would be approved without sending transactions
    SIMULATION_MODE: bool = os.getenv("SIMULATION_MODE", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "approvals.log")

    @classmethod
    def validate(cls) -> bool:
        """Validate required configuration."""
        if not cls.PRIVATE_KEY:
            raise ValueError("PRIVATE_KEY is required in .env file")
        if not cls.PROXY_WALLET:
            raise ValueError("PROXY_WALLET is required in .env file")
        return True

    @classmethod
    def load(cls) -> ApprovalConfig:
        """Validate and freeze the current configuration."""
        cls.validate()
        return ApprovalConfig(
            private_key=cls.PRIVATE_KEY,
            wallet_address=cls.PROXY_WALLET,
            rpc_url=cls.RPC_URL or "https://polygon-rpc.com",
            chain_id=cls.CHAIN_ID,
            simulation_mode=cls.SIMULATION_MODE,
        )
