"""
Pytest configuration and shared fixtures

Provides an in-memory stand-in for a Web3 handle so approvals can be
exercised without a node.
"""
import os

# Keep test runs from writing a log file; must happen before config is imported
os.environ["LOG_FILE"] = ""

from types import SimpleNamespace

import pytest
from pydantic import SecretStr

from contracts import APPROVAL_TASKS
from models import ApprovalConfig

WALLET = "0x" + "ab" * 20
SIGNER = "0x" + "ab" * 20
PRIVATE_KEY = "0x" + "11" * 32


class FakeCall:
    def __init__(self, fn):
        self.fn = fn

    def call(self):
        return self.fn()


class FakeFunctions:
    def __init__(self, chain, address):
        self.chain = chain
        self.address = address

    def allowance(self, owner, spender):
        def read():
            self.chain.calls.append(("allowance", self.address, spender))
            return self.chain.allowances.get((self.address.lower(), spender.lower()), 0)
        return FakeCall(read)

    def balanceOf(self, owner):
        def read():
            if self.chain.balance_error:
                raise self.chain.balance_error
            return self.chain.balances.get(self.address.lower(), 0)
        return FakeCall(read)

    def decimals(self):
        return FakeCall(lambda: 6)

    def approve(self, spender, amount):
        chain = self.chain
        token = self.address

        class Builder:
            def build_transaction(self, params):
                txn = dict(params)
                txn.update({"to": token, "spender": spender, "amount": amount})
                chain.built.append(txn)
                return txn
        return Builder()


class FakeAccount:
    def __init__(self, address):
        self.address = address

    def sign_transaction(self, txn):
        return SimpleNamespace(raw_transaction=txn)


class FakeEth:
    def __init__(self, chain):
        self.chain = chain
        self.account = SimpleNamespace(from_key=lambda key: FakeAccount(chain.signer))

    def contract(self, address=None, abi=None):
        return SimpleNamespace(functions=FakeFunctions(self.chain, address))

    @property
    def gas_price(self):
        return self.chain.gas_price

    @property
    def max_priority_fee(self):
        return self.chain.max_priority_fee

    def get_block(self, identifier):
        return {"baseFeePerGas": self.chain.base_fee}

    def get_balance(self, address):
        return self.chain.native_balance

    def get_transaction_count(self, address, block_identifier="latest"):
        return self.chain.nonce

    def send_raw_transaction(self, raw):
        if self.chain.send_error:
            raise self.chain.send_error
        self.chain.sent.append(raw)
        self.chain.nonce += 1
        return bytes([len(self.chain.sent)]) * 32

    def wait_for_transaction_receipt(self, tx_hash, timeout=120):
        raw = self.chain.sent[-1]
        status = 0 if raw["spender"].lower() in self.chain.reverting_spenders else 1
        if status:
            self.chain.allowances[(raw["to"].lower(), raw["spender"].lower())] = raw["amount"]
        return SimpleNamespace(status=status, gasUsed=46000, blockNumber=1)


class FakeChain:
    """Node state plus a record of every transaction sent."""

    def __init__(self):
        self.signer = SIGNER
        self.allowances = {}
        self.balances = {}
        self.balance_error = None
        self.native_balance = 10**18
        self.gas_price = 30 * 10**9
        self.base_fee = None
        self.max_priority_fee = 30 * 10**9
        self.nonce = 0
        self.send_error = None
        self.reverting_spenders = set()
        self.calls = []
        self.built = []
        self.sent = []
        self.eth = FakeEth(self)

    def approve_all(self, amount):
        for task in APPROVAL_TASKS:
            self.allowances[(task.token.address.lower(), task.spender.address.lower())] = amount


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def settings():
    return ApprovalConfig(
        private_key=SecretStr(PRIVATE_KEY),
        wallet_address=WALLET,
        rpc_url="http://localhost:8545",
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Record approval delays instead of sleeping."""
    import approver
    delays = []
    monkeypatch.setattr(approver.time, "sleep", lambda seconds: delays.append(seconds))
    return delays
