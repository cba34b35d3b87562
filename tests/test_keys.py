"""Tests for Ed25519 key primitives."""

import pytest

from aptos_wallet.exceptions import InvalidDerivationPathError, InvalidPrivateKeyError
from aptos_wallet.keys import (
    DEFAULT_DERIVATION_PATH,
    address_from_public_key,
    address_to_hex,
    derive_private_key,
    parse_derivation_path,
    parse_private_key,
    public_key_from_private_key,
)

# RFC 8032 section 7.1, test 1
RFC8032_SECRET = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
RFC8032_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)

KNOWN_KEY_HEX = "6c3ddd0897562fff871827cc3a0cbebf471a17a1fd53abe04ad9899b48072468"
KNOWN_ADDRESS = "0x45e9806b95c08601e60ebede8c8ea624f150796c427aeeb1110a3e68b7eac5ba"


class TestDerivationPath:
    """Tests for derivation path parsing."""

    def test_default_path(self) -> None:
        """Default path parses to its five indices."""
        assert parse_derivation_path(DEFAULT_DERIVATION_PATH) == (44, 637, 0, 0, 0)

    def test_hardened_last_segment_accepted(self) -> None:
        """A hardened address index is accepted."""
        assert parse_derivation_path("m/44'/637'/3'/0'/7'") == (44, 637, 3, 0, 7)

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "m",
            "m/44'/60'/0'/0/0",
            "m/44'/637'/0'/0/0",
            "m/44'/637'/0'/0'",
            "m/44/637/0/0/0",
            "m/44'/637'/x'/0'/0",
            "m/44'/637'/2147483648'/0'/0",
        ],
    )
    def test_invalid_paths_rejected(self, path: str) -> None:
        """Non-Aptos or out-of-range paths are rejected."""
        with pytest.raises(InvalidDerivationPathError):
            parse_derivation_path(path)

    def test_last_segment_always_hardened(self) -> None:
        """Ed25519 only hardens, so 0 and 0' derive the same key."""
        seed = bytes(range(64))
        assert derive_private_key(seed, "m/44'/637'/0'/0'/0") == derive_private_key(
            seed, "m/44'/637'/0'/0'/0'"
        )

    def test_accounts_differ(self) -> None:
        """Different account indices derive different keys."""
        seed = bytes(range(64))
        assert derive_private_key(seed, "m/44'/637'/0'/0'/0") != derive_private_key(
            seed, "m/44'/637'/1'/0'/0"
        )

    def test_derived_key_length(self) -> None:
        """Derived private keys are 32 bytes."""
        assert len(derive_private_key(b"\x01" * 64)) == 32


class TestParsePrivateKey:
    """Tests for private key normalization."""

    @pytest.mark.parametrize(
        "value",
        [
            KNOWN_KEY_HEX,
            f"0x{KNOWN_KEY_HEX}",
            f"0X{KNOWN_KEY_HEX.upper()}",
            f"ed25519-priv-0x{KNOWN_KEY_HEX}",
            bytes.fromhex(KNOWN_KEY_HEX),
        ],
    )
    def test_accepted_encodings(self, value: str | bytes) -> None:
        """Hex, 0x-hex, AIP-80 and raw bytes all normalize to the same key."""
        assert parse_private_key(value) == bytes.fromhex(KNOWN_KEY_HEX)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "0x1234",
            "zz" * 32,
            KNOWN_KEY_HEX[:-2],
            KNOWN_KEY_HEX + "00",
            KNOWN_KEY_HEX[:-1],
            "6c 3d" + KNOWN_KEY_HEX[4:],
            b"\x00" * 31,
            b"\x00" * 33,
        ],
    )
    def test_malformed_keys_rejected(self, value: str | bytes) -> None:
        """Wrong length or non-hex keys raise InvalidPrivateKeyError."""
        with pytest.raises(InvalidPrivateKeyError):
            parse_private_key(value)

    def test_wrong_type_rejected(self) -> None:
        """Only str and bytes are keys."""
        with pytest.raises(InvalidPrivateKeyError):
            parse_private_key(12345)  # type: ignore[arg-type]


class TestPublicKeyAndAddress:
    """Tests for public key and address derivation."""

    def test_rfc8032_public_key(self) -> None:
        """Public key matches the RFC 8032 test vector."""
        assert public_key_from_private_key(RFC8032_SECRET) == RFC8032_PUBLIC

    def test_known_address(self) -> None:
        """Address of a known Aptos key matches its on-chain address."""
        public_key = public_key_from_private_key(bytes.fromhex(KNOWN_KEY_HEX))
        assert address_to_hex(address_from_public_key(public_key)) == KNOWN_ADDRESS

    def test_address_long_form(self) -> None:
        """Addresses render as 0x plus 64 hex digits."""
        address = address_to_hex(address_from_public_key(RFC8032_PUBLIC))
        assert address.startswith("0x")
        assert len(address) == 66
