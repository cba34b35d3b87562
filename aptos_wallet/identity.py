"""Deterministic identity derivation.

An identity is derived once from exactly one source:

- a password, hashed together with a template key into 128 bits of
  mnemonic entropy;
- an existing seed phrase;
- an existing private key (no seed phrase can be recovered);
- nothing, in which case fresh random entropy is used.

Every source except the raw private key goes through the same BIP-39 seed
and derivation path, so a password always yields the same seed phrase,
private key and address.
"""

import hashlib
import secrets
from dataclasses import dataclass, field

from loguru import logger
from mnemonic import Mnemonic

from aptos_wallet.exceptions import InvalidSeedPhraseError
from aptos_wallet.keys import (
    DEFAULT_DERIVATION_PATH,
    address_from_public_key,
    address_to_hex,
    derive_private_key,
    parse_derivation_path,
    parse_private_key,
    public_key_from_private_key,
)

DEFAULT_PRIVATE_KEY_TEMPLATE = (
    "0x414693f6eac56f81a02d071a640a0fc1692e86a26cbc52d03553775b3012d706"
)

# 128 bits -> 12 words
ENTROPY_BYTES = 16

_MNEMONIC = Mnemonic("english")


@dataclass(frozen=True)
class FromPassword:
    """Derive from a password and the configured template key."""

    password: str = field(repr=False)


@dataclass(frozen=True)
class FromSeedPhrase:
    """Derive from an existing BIP-39 seed phrase."""

    phrase: str = field(repr=False)


@dataclass(frozen=True)
class FromPrivateKey:
    """Use a raw Ed25519 private key; the identity has no seed phrase."""

    private_key: str | bytes = field(repr=False)


@dataclass(frozen=True)
class RandomIdentity:
    """Generate a fresh seed phrase from a CSPRNG."""


IdentitySource = FromPassword | FromSeedPhrase | FromPrivateKey | RandomIdentity


@dataclass(frozen=True)
class Identity:
    """An immutable wallet identity.

    The private key and seed phrase are kept out of ``repr()`` so they never
    reach a log line by accident.
    """

    private_key: bytes = field(repr=False)
    public_key: bytes = field(repr=False)
    address: bytes
    mnemonic: str | None = field(default=None, repr=False)

    @property
    def private_key_hex(self) -> str:
        """Private key as hex string with 0x prefix."""
        return f"0x{self.private_key.hex()}"

    @property
    def public_key_hex(self) -> str:
        return f"0x{self.public_key.hex()}"

    @property
    def address_hex(self) -> str:
        return address_to_hex(self.address)

    @property
    def short_address(self) -> str:
        """Return shortened address for display (0x1234...5678)."""
        return f"{self.address_hex[:6]}...{self.address_hex[-4:]}"

    def __str__(self) -> str:
        return f"Identity({self.address_hex})"


def identity_source(
    password: str | None = None,
    mnemonic: str | None = None,
    private_key: str | bytes | None = None,
) -> IdentitySource:
    """Pick the identity source from optional inputs.

    The first input present wins, in the order password, seed phrase,
    private key; the others are ignored. With no input a random identity
    is selected.
    """
    if password is not None:
        source: IdentitySource = FromPassword(password)
    elif mnemonic is not None:
        source = FromSeedPhrase(mnemonic)
    elif private_key is not None:
        source = FromPrivateKey(private_key)
    else:
        return RandomIdentity()

    supplied = sum(item is not None for item in (password, mnemonic, private_key))
    if supplied > 1:
        logger.debug("Multiple identity inputs given, using {}", type(source).__name__)
    return source


def password_entropy(password: str, private_key_template: str) -> bytes:
    """Hash template key and password into 16 bytes of mnemonic entropy.

    Only the first 32 hex digits of the SHA-256 digest are used. The
    truncation is part of the derivation: changing it changes every address
    ever derived from a password.
    """
    digest = hashlib.sha256((private_key_template + password).encode("utf-8")).hexdigest()
    return bytes.fromhex(digest[: ENTROPY_BYTES * 2])


def normalize_seed_phrase(phrase: str) -> str:
    """Trim, lower-case and single-space a seed phrase."""
    return " ".join(word.lower() for word in phrase.split())


def validate_seed_phrase(phrase: str) -> str:
    """Return the normalized phrase.

    Raises:
        InvalidSeedPhraseError: If a word is not in the English wordlist or
            the checksum does not match.
    """
    normalized = normalize_seed_phrase(phrase)
    unknown = [word for word in normalized.split(" ") if word not in _MNEMONIC.wordlist]
    if not normalized or unknown:
        raise InvalidSeedPhraseError(
            f"Seed phrase contains {len(unknown)} word(s) outside the wordlist"
        )
    if not _MNEMONIC.check(normalized):
        raise InvalidSeedPhraseError("Seed phrase checksum or length is invalid")
    return normalized


def _from_private_key(private_key: bytes, mnemonic: str | None) -> Identity:
    public_key = public_key_from_private_key(private_key)
    return Identity(
        private_key=private_key,
        public_key=public_key,
        address=address_from_public_key(public_key),
        mnemonic=mnemonic,
    )


def _from_mnemonic(mnemonic: str, derivation_path: str) -> Identity:
    seed = Mnemonic.to_seed(mnemonic, passphrase="")
    return _from_private_key(derive_private_key(seed, derivation_path), mnemonic)


def derive_identity(
    source: IdentitySource,
    *,
    private_key_template: str = DEFAULT_PRIVATE_KEY_TEMPLATE,
    derivation_path: str = DEFAULT_DERIVATION_PATH,
) -> Identity:
    """Derive an identity from a single source.

    Args:
        source: One of FromPassword, FromSeedPhrase, FromPrivateKey or
            RandomIdentity.
        private_key_template: Template key hashed with a password.
        derivation_path: Aptos derivation path for seed-based sources.

    Returns:
        The derived Identity.

    Raises:
        InvalidSeedPhraseError: If a seed phrase is malformed.
        InvalidPrivateKeyError: If a private key is malformed.
        InvalidDerivationPathError: If the derivation path is malformed.
    """
    # Fail on a bad path before touching any key material
    parse_derivation_path(derivation_path)

    if isinstance(source, FromPassword):
        entropy = password_entropy(source.password, private_key_template)
        identity = _from_mnemonic(_MNEMONIC.to_mnemonic(entropy), derivation_path)
    elif isinstance(source, FromSeedPhrase):
        identity = _from_mnemonic(validate_seed_phrase(source.phrase), derivation_path)
    elif isinstance(source, FromPrivateKey):
        identity = _from_private_key(parse_private_key(source.private_key), None)
    elif isinstance(source, RandomIdentity):
        entropy = secrets.token_bytes(ENTROPY_BYTES)
        identity = _from_mnemonic(_MNEMONIC.to_mnemonic(entropy), derivation_path)
    else:
        raise TypeError(f"Unsupported identity source: {type(source).__name__}")

    logger.debug(
        "Derived identity from {}: {}", type(source).__name__, identity.short_address
    )
    return identity
