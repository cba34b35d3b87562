"""Configuration architecture using pydantic-settings for typed environment loading."""

from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aptos_wallet.exceptions import InvalidDerivationPathError
from aptos_wallet.identity import DEFAULT_PRIVATE_KEY_TEMPLATE
from aptos_wallet.keys import DEFAULT_DERIVATION_PATH, parse_derivation_path
from aptos_wallet.units import APT_DECIMALS


class WalletConfig(BaseSettings):
    """Wallet identity and network configuration.

    The template key is mixed into every password derivation; changing it
    changes every password-derived address.
    """

    model_config = SettingsConfigDict(
        env_prefix="APTOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    network: Literal["mainnet", "testnet", "devnet"] = "testnet"
    private_key_template: SecretStr = SecretStr(DEFAULT_PRIVATE_KEY_TEMPLATE)
    derivation_path: str = DEFAULT_DERIVATION_PATH
    coin_decimals: int = APT_DECIMALS

    @field_validator("derivation_path")
    @classmethod
    def _check_derivation_path(cls, value: str) -> str:
        try:
            parse_derivation_path(value)
        except InvalidDerivationPathError as e:
            raise ValueError(str(e)) from e
        return value


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"


class Settings:
    """Root settings aggregating all configuration sections."""

    def __init__(self) -> None:
        self.wallet = WalletConfig()
        self.log = LogConfig()


# Global settings instance - lazily loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
