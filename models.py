"""Data models for the Polymarket approval tools."""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, SecretStr
from enum import Enum


class ApprovalConfig(BaseModel):
    """Validated run configuration."""
    model_config = ConfigDict(frozen=True)

    private_key: SecretStr
    wallet_address: str
    rpc_url: str
    chain_id: int = 137
    simulation_mode: bool = False


class TokenDescriptor(BaseModel):
    """ERC-20 token being approved."""
    model_config = ConfigDict(frozen=True)

    address: str
    name: str


class SpenderDescriptor(BaseModel):
    """Polymarket contract allowed to spend a token."""
    model_config = ConfigDict(frozen=True)

    address: str
    name: str


class ApprovalTask(BaseModel):
    """A single (token, spender) pair to approve."""
    model_config = ConfigDict(frozen=True)

    token: TokenDescriptor
    spender: SpenderDescriptor

    @property
    def label(self) -> str:
        return f"{self.token.name} → {self.spender.name}"


class ApprovalStatus(str, Enum):
    """Approval status enumeration."""
    ALREADY_APPROVED = "ALREADY_APPROVED"
    APPROVED = "APPROVED"
    SIMULATED = "SIMULATED"
    FAILED = "FAILED"


class ApprovalOutcome(BaseModel):
    """Result of processing one approval task."""
    task: ApprovalTask
    status: ApprovalStatus
    allowance: Optional[int] = None
    tx_hash: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status != ApprovalStatus.FAILED


class RunSummary(BaseModel):
    """Tally of a full approval run."""
    outcomes: List[ApprovalOutcome] = Field(default_factory=list)

    def record(self, outcome: ApprovalOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded

    @property
    def transactions_sent(self) -> int:
        """Number of approvals that reached the network."""
        return sum(1 for outcome in self.outcomes if outcome.tx_hash)
