"""Ed25519 key primitives for Aptos accounts.

Child keys follow SLIP-0010 for Ed25519, which only defines hardened
derivation, so every path segment is hardened regardless of its quote mark.
The account address is the single-signer authentication key:
SHA3-256(public_key || 0x00).
"""

import hashlib
import hmac
import re
import struct

from nacl.signing import SigningKey

from aptos_wallet.exceptions import InvalidDerivationPathError, InvalidPrivateKeyError

DEFAULT_DERIVATION_PATH = "m/44'/637'/0'/0'/0"

PRIVATE_KEY_LENGTH = 32
ADDRESS_LENGTH = 32

# AIP-80 private key prefix
AIP80_ED25519_PREFIX = "ed25519-priv-"

HARDENED_OFFSET = 0x80000000
ED25519_SEED_KEY = b"ed25519 seed"
# Authentication key scheme id for single Ed25519 signers
ED25519_SCHEME = b"\x00"

_APTOS_PATH_RE = re.compile(r"m/44'/637'/([0-9]+)'/([0-9]+)'/([0-9]+)'?")
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def parse_derivation_path(path: str) -> tuple[int, ...]:
    """Parse an Aptos derivation path into unhardened segment indices.

    Args:
        path: Path such as ``m/44'/637'/0'/0'/0``.

    Returns:
        Segment indices without the hardened offset, e.g. ``(44, 637, 0, 0, 0)``.

    Raises:
        InvalidDerivationPathError: If the path is not an Aptos path.
    """
    match = _APTOS_PATH_RE.fullmatch(path)
    if match is None:
        raise InvalidDerivationPathError(f"Invalid derivation path: {path}")

    indices = (44, 637, *(int(group) for group in match.groups()))
    if any(index >= HARDENED_OFFSET for index in indices):
        raise InvalidDerivationPathError(f"Path index out of range: {path}")
    return indices


def derive_private_key(seed: bytes, path: str = DEFAULT_DERIVATION_PATH) -> bytes:
    """Derive the Ed25519 private key for ``path`` from a BIP-39 seed."""
    digest = hmac.new(ED25519_SEED_KEY, seed, hashlib.sha512).digest()
    key, chain_code = digest[:32], digest[32:]
    for index in parse_derivation_path(path):
        data = b"\x00" + key + struct.pack(">L", index | HARDENED_OFFSET)
        digest = hmac.new(chain_code, data, hashlib.sha512).digest()
        key, chain_code = digest[:32], digest[32:]
    return key


def parse_private_key(value: str | bytes) -> bytes:
    """Normalize a private key to its 32 raw bytes.

    Accepts raw bytes, hex with or without ``0x``, and the AIP-80
    ``ed25519-priv-0x...`` form.

    Raises:
        InvalidPrivateKeyError: If the key has the wrong length or encoding.
    """
    if isinstance(value, (bytes, bytearray)):
        key = bytes(value)
    elif isinstance(value, str):
        text = value.strip()
        if text.startswith(AIP80_ED25519_PREFIX):
            text = text[len(AIP80_ED25519_PREFIX):]
        if text[:2].lower() == "0x":
            text = text[2:]
        if _HEX_RE.fullmatch(text) is None:
            raise InvalidPrivateKeyError("Private key must be valid hexadecimal")
        key = bytes.fromhex(text)
    else:
        raise InvalidPrivateKeyError(
            f"Private key must be str or bytes, got {type(value).__name__}"
        )

    if len(key) != PRIVATE_KEY_LENGTH:
        raise InvalidPrivateKeyError(
            f"Private key must be {PRIVATE_KEY_LENGTH} bytes (got {len(key)})"
        )
    return key


def public_key_from_private_key(private_key: bytes) -> bytes:
    """Return the 32-byte Ed25519 public key for a private key."""
    return SigningKey(private_key).verify_key.encode()


def address_from_public_key(public_key: bytes) -> bytes:
    """Return the account address (authentication key) for a public key."""
    return hashlib.sha3_256(public_key + ED25519_SCHEME).digest()


def address_to_hex(address: bytes) -> str:
    """Render an address in long form: ``0x`` + 64 hex digits."""
    return f"0x{address.hex()}"
