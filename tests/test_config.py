"""Tests for configuration validation."""
import pytest

from config import Config


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(Config, "PRIVATE_KEY", "0x" + "11" * 32)
    monkeypatch.setattr(Config, "PROXY_WALLET", "0x" + "ab" * 20)
    monkeypatch.setattr(Config, "RPC_URL", "https://polygon-rpc.com")
    monkeypatch.setattr(Config, "SIMULATION_MODE", False)


def test_missing_private_key(configured, monkeypatch):
    monkeypatch.setattr(Config, "PRIVATE_KEY", "")

    with pytest.raises(ValueError, match="PRIVATE_KEY"):
        Config.validate()


def test_missing_wallet(configured, monkeypatch):
    monkeypatch.setattr(Config, "PROXY_WALLET", "")

    with pytest.raises(ValueError, match="PROXY_WALLET"):
        Config.load()


def test_load_returns_frozen_settings(configured):
    settings = Config.load()

    assert settings.wallet_address == "0x" + "ab" * 20
    assert settings.rpc_url == "https://polygon-rpc.com"
    assert settings.chain_id == Config.CHAIN_ID
    assert settings.simulation_mode is False
    assert settings.private_key.get_secret_value() == "0x" + "11" * 32
    assert "11111111" not in repr(settings)

    with pytest.raises(Exception):
        settings.rpc_url = "http://elsewhere"


def test_empty_rpc_url_uses_public_endpoint(configured, monkeypatch):
    monkeypatch.setattr(Config, "RPC_URL", "")

    assert Config.load().rpc_url == "https://polygon-rpc.com"
