"""Aptos wallet key derivation and amount conversion.

Provides:
- derive_identity: Deterministic seed phrase, private key and address
- format_units / parse_units: Exact base-unit amount conversion
- Wallet: Identity plus ledger client facade
"""

from aptos_wallet.identity import (
    FromPassword,
    FromPrivateKey,
    FromSeedPhrase,
    Identity,
    RandomIdentity,
    derive_identity,
    identity_source,
)
from aptos_wallet.units import APT_DECIMALS, format_units, parse_units
from aptos_wallet.wallet import Wallet

__all__ = [
    "APT_DECIMALS",
    "FromPassword",
    "FromPrivateKey",
    "FromSeedPhrase",
    "Identity",
    "RandomIdentity",
    "Wallet",
    "derive_identity",
    "format_units",
    "identity_source",
    "parse_units",
]
