"""USDC approvals for the Polymarket exchange contracts."""
import time
from decimal import Decimal
from typing import List, Optional

from web3 import Web3

from contracts import (
    ALREADY_APPROVED_THRESHOLD,
    APPROVAL_DELAY_SECONDS,
    APPROVAL_GAS_LIMIT,
    APPROVAL_TASKS,
    ERC20_ABI,
    EXPLORER_TX_URL,
    GAS_PRICE_BUMP_PERCENT,
    MAX_APPROVAL,
    RECEIPT_TIMEOUT_SECONDS,
)
from logger import logger, log_success
from models import (
    ApprovalConfig,
    ApprovalOutcome,
    ApprovalStatus,
    ApprovalTask,
    RunSummary,
)

# Shown when a display-only balance lookup fails
BALANCE_FALLBACK = "0"


def connect(rpc_url: str) -> Web3:
    """Open an HTTP connection to the Polygon node."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        raise ConnectionError(f"Cannot connect to Polygon RPC at {rpc_url}")
    return w3


def bump_gas_price(gas_price: int) -> int:
    """Price a transaction above the current estimate."""
    return gas_price * GAS_PRICE_BUMP_PERCENT // 100


def format_units(amount: int, decimals: int) -> str:
    """Scale a raw token amount by its decimals, e.g. 1500000, 6 -> '1.5'."""
    value = Decimal(amount) / (Decimal(10) ** decimals)
    return format(value.normalize() if value else Decimal(0), "f")


class TokenApprover:
    """Checks and grants ERC-20 allowances for the configured wallet."""

    def __init__(self, settings: ApprovalConfig, w3: Optional[Web3] = None):
        self.settings = settings
        self.w3 = w3 if w3 is not None else connect(settings.rpc_url)

        # Transactions are signed locally by this account
        self.account = self.w3.eth.account.from_key(settings.private_key.get_secret_value())
        self.owner = Web3.to_checksum_address(settings.wallet_address)

        if self.account.address.lower() != self.owner.lower():
            logger.warning(
                f"Signing account {self.account.address} differs from PROXY_WALLET {self.owner}; "
                f"allowances are read for PROXY_WALLET but granted by the signer"
            )

    def _token(self, token_address: str):
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(token_address),
            abi=ERC20_ABI
        )

    def get_allowance(self, token_address: str, spender_address: str) -> int:
        """Current allowance of spender over the wallet's tokens, in raw units."""
        token = self._token(token_address)
        return token.functions.allowance(
            self.owner,
            Web3.to_checksum_address(spender_address)
        ).call()

    def get_balance(self, token_address: str) -> str:
        """
        Token balance of the wallet as a decimal string.

        Used for display only: any lookup failure returns BALANCE_FALLBACK
        instead of raising.
        """
        try:
            token = self._token(token_address)
            raw_balance = token.functions.balanceOf(self.owner).call()
            decimals = token.functions.decimals().call()
        except Exception as e:
            logger.debug(f"Balance lookup failed for {token_address}: {e}")
            return BALANCE_FALLBACK
        return format_units(raw_balance, decimals)

    def get_native_balance(self) -> Decimal:
        """MATIC held by the signing account for gas."""
        balance_wei = self.w3.eth.get_balance(self.account.address)
        return Web3.from_wei(balance_wei, "ether")

    def get_fee_estimate(self) -> Optional[int]:
        """Network gas price, or a max-fee estimate when the node reports none."""
        gas_price = self.w3.eth.gas_price
        if gas_price:
            return gas_price

        base_fee = self.w3.eth.get_block("latest").get("baseFeePerGas")
        if base_fee is None:
            return None
        return base_fee * 2 + self.w3.eth.max_priority_fee

    def _send_approval(self, task: ApprovalTask) -> bytes:
        token = self._token(task.token.address)
        spender = Web3.to_checksum_address(task.spender.address)

        tx_params = {
            'from': self.account.address,
            'nonce': self.w3.eth.get_transaction_count(self.account.address, "pending"),
            'gas': APPROVAL_GAS_LIMIT,
            'chainId': self.settings.chain_id
        }
        fee_estimate = self.get_fee_estimate()
        if fee_estimate is not None:
            tx_params['gasPrice'] = bump_gas_price(fee_estimate)

        approve_txn = token.functions.approve(spender, MAX_APPROVAL).build_transaction(tx_params)

        signed_txn = self.account.sign_transaction(approve_txn)
        return self.w3.eth.send_raw_transaction(signed_txn.raw_transaction)

    def approve(self, task: ApprovalTask) -> ApprovalOutcome:
        """
        Grant an unlimited allowance for one (token, spender) pair if needed.

        Never raises: every failure is logged and reported as FAILED so the
        caller can move on to the next pair.

        Args:
            task: Token and spender to approve

        Returns:
            Outcome of the task
        """
        label = task.label
        try:
            allowance = self.get_allowance(task.token.address, task.spender.address)

            if allowance > ALREADY_APPROVED_THRESHOLD:
                log_success(f"{label}: already approved")
                return ApprovalOutcome(task=task, status=ApprovalStatus.ALREADY_APPROVED, allowance=allowance)

            if self.settings.simulation_mode:
                logger.warning(f"[SIMULATION] {label}: approval needed, skipping transaction")
                return ApprovalOutcome(task=task, status=ApprovalStatus.SIMULATED, allowance=allowance)

            logger.info(f"{label}: approving...")
            tx_hash = Web3.to_hex(self._send_approval(task))
            logger.info(f"  TX: {tx_hash}")
            logger.debug(f"  PolygonScan: {EXPLORER_TX_URL.format(tx_hash)}")

            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=RECEIPT_TIMEOUT_SECONDS)

            if receipt.status == 1:
                log_success(f"{label}: approved (gas used: {receipt.gasUsed})")
                return ApprovalOutcome(task=task, status=ApprovalStatus.APPROVED, allowance=allowance, tx_hash=tx_hash)

            logger.error(f"{label}: approval transaction reverted")
            return ApprovalOutcome(
                task=task,
                status=ApprovalStatus.FAILED,
                allowance=allowance,
                tx_hash=tx_hash,
                error_message="transaction reverted"
            )

        except Exception as e:
            logger.error(f"{label}: {e}")
            return ApprovalOutcome(task=task, status=ApprovalStatus.FAILED, error_message=str(e))

    def run(self, tasks: List[ApprovalTask] = APPROVAL_TASKS) -> RunSummary:
        """Process every task in order, pausing between them to let the nonce settle."""
        summary = RunSummary()
        for task in tasks:
            summary.record(self.approve(task))
            time.sleep(APPROVAL_DELAY_SECONDS)
        return summary
