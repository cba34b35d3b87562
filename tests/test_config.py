"""Tests for environment configuration."""

import pytest
from pydantic import ValidationError

from aptos_wallet import config
from aptos_wallet.config import LogConfig, Settings, WalletConfig, get_settings
from aptos_wallet.identity import DEFAULT_PRIVATE_KEY_TEMPLATE
from aptos_wallet.wallet import Wallet


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from the caller's environment and cached settings."""
    for name in (
        "APTOS_NETWORK",
        "APTOS_PRIVATE_KEY_TEMPLATE",
        "APTOS_DERIVATION_PATH",
        "APTOS_COIN_DECIMALS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)


class TestWalletConfig:
    """Tests for WalletConfig."""

    def test_defaults(self) -> None:
        """Defaults match the standard Aptos wallet."""
        wallet_config = WalletConfig(_env_file=None)
        assert wallet_config.network == "testnet"
        assert wallet_config.private_key_template.get_secret_value() == DEFAULT_PRIVATE_KEY_TEMPLATE
        assert wallet_config.derivation_path == "m/44'/637'/0'/0'/0"
        assert wallet_config.coin_decimals == 8

    def test_template_is_secret(self) -> None:
        """The template key is masked in reprs."""
        wallet_config = WalletConfig(_env_file=None)
        assert DEFAULT_PRIVATE_KEY_TEMPLATE not in repr(wallet_config)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """APTOS_* variables override the defaults."""
        monkeypatch.setenv("APTOS_NETWORK", "mainnet")
        monkeypatch.setenv("APTOS_DERIVATION_PATH", "m/44'/637'/2'/0'/0'")
        wallet_config = WalletConfig(_env_file=None)
        assert wallet_config.network == "mainnet"
        assert wallet_config.derivation_path == "m/44'/637'/2'/0'/0'"

    def test_invalid_network(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown networks fail validation."""
        monkeypatch.setenv("APTOS_NETWORK", "localnet")
        with pytest.raises(ValidationError):
            WalletConfig(_env_file=None)

    def test_invalid_derivation_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-Aptos derivation paths fail validation."""
        monkeypatch.setenv("APTOS_DERIVATION_PATH", "m/44'/60'/0'/0/0")
        with pytest.raises(ValidationError):
            WalletConfig(_env_file=None)

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL sets the log level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert LogConfig(_env_file=None).level == "DEBUG"


class TestSettings:
    """Tests for the settings aggregate."""

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns a single shared instance."""
        assert get_settings() is get_settings()

    def test_wallet_uses_configured_template(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A configured template key feeds password derivation."""
        default_address = Wallet(password="toto", settings=Settings()).get_address()

        monkeypatch.setenv("APTOS_PRIVATE_KEY_TEMPLATE", "0x" + "33" * 32)
        custom_address = Wallet(password="toto", settings=Settings()).get_address()

        assert custom_address != default_address

    def test_wallet_uses_configured_network(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured network applies when none is passed."""
        monkeypatch.setenv("APTOS_NETWORK", "devnet")
        wallet = Wallet(password="toto", settings=Settings())
        assert wallet.network.value == "devnet"
