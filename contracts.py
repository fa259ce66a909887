"""Polygon contract addresses, ABI and the approval table."""

from decimal import Decimal
from typing import List

from models import ApprovalTask, SpenderDescriptor, TokenDescriptor

# Tokens
USDC_E = TokenDescriptor(
    address="0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",  # USDC.e (PoS bridge)
    name="USDC.e",
)
USDC = TokenDescriptor(
    address="0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359",  # Native USDC
    name="USDC",
)

# Polymarket contracts
CTF_EXCHANGE = SpenderDescriptor(
    address="0x4bFb41d5B3570DeFd03C39a9A4D8dE6Bd8B8982E",
    name="CTF Exchange",
)
NEG_RISK_CTF_EXCHANGE = SpenderDescriptor(
    address="0xC5d563A36AE78145C45a50134d48A1215220f80a",
    name="Neg Risk Exchange",
)
NEG_RISK_ADAPTER = SpenderDescriptor(
    address="0xd91E80cF2E7be2e162c6513ceD06f1dD0dA35296",
    name="Neg Risk Adapter",
)
CONDITIONAL_TOKENS = SpenderDescriptor(
    address="0x4D97DCd97eC945f40cF65F87097ACe5EA0476045",
    name="CTF Contract",
)

# Processed in this order; one account means one nonce sequence.
APPROVAL_TASKS: List[ApprovalTask] = [
    ApprovalTask(token=USDC_E, spender=CTF_EXCHANGE),
    ApprovalTask(token=USDC_E, spender=NEG_RISK_CTF_EXCHANGE),
    ApprovalTask(token=USDC_E, spender=NEG_RISK_ADAPTER),
    ApprovalTask(token=USDC_E, spender=CONDITIONAL_TOKENS),
    ApprovalTask(token=USDC, spender=CTF_EXCHANGE),
    ApprovalTask(token=USDC, spender=NEG_RISK_CTF_EXCHANGE),
    ApprovalTask(token=USDC, spender=NEG_RISK_ADAPTER),
    ApprovalTask(token=USDC, spender=CONDITIONAL_TOKENS),
]

ERC20_ABI = [
    {
        "constant": False,
        "inputs": [
            {"name": "_spender", "type": "address"},
            {"name": "_value", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [
            {"name": "_owner", "type": "address"},
            {"name": "_spender", "type": "address"}
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "balance", "type": "uint256"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function"
    }
]

MAX_APPROVAL = 2**256 - 1

# Anything above 1M USDC counts as an unlimited approval already in place
USDC_DECIMALS = 6
ALREADY_APPROVED_THRESHOLD = 1_000_000 * 10**USDC_DECIMALS

APPROVAL_GAS_LIMIT = 100000
GAS_PRICE_BUMP_PERCENT = 120
APPROVAL_DELAY_SECONDS = 1
RECEIPT_TIMEOUT_SECONDS = 120

MIN_NATIVE_BALANCE = Decimal("0.01")  # MATIC

EXPLORER_TX_URL = "https://polygonscan.com/tx/{}"
