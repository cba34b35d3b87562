"""Custom exceptions for the aptos-wallet key and amount utilities."""


# =============================================================================
# Identity Layer Exceptions
# =============================================================================


class IdentityError(Exception):
    """Base exception for identity derivation errors."""

    pass


class InvalidSeedPhraseError(IdentityError):
    """Raised when a seed phrase has an unknown word or a bad checksum."""

    pass


class InvalidPrivateKeyError(IdentityError):
    """Raised when a private key has the wrong length or encoding."""

    pass


class InvalidDerivationPathError(IdentityError):
    """Raised when a derivation path is not a valid Aptos Ed25519 path."""

    pass


# =============================================================================
# Units Layer Exceptions
# =============================================================================


class UnitsError(ValueError):
    """Base exception for amount conversion errors."""

    pass


class InvalidDecimalStringError(UnitsError):
    """Raised when an amount string is not of the form [-]digits[.digits]."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid decimal string: {value!r}")
        self.value = value


class InvalidDecimalsError(UnitsError):
    """Raised when a token precision is negative or not an integer."""

    def __init__(self, decimals: object) -> None:
        super().__init__(f"decimals must be a non-negative integer, got {decimals!r}")
        self.decimals = decimals


# =============================================================================
# Ledger Layer Exceptions
# =============================================================================


class LedgerError(Exception):
    """Base exception for ledger client errors."""

    pass


class LedgerUnavailableError(LedgerError):
    """Raised when the ledger node cannot be reached or times out.

    Distinguishes a failed lookup from a confirmed zero balance.
    """

    pass


class LedgerNotConfiguredError(LedgerError):
    """Raised when a ledger operation is requested on a wallet without a client."""

    pass


class AssetNotFoundError(LedgerError):
    """Raised when the ledger has no metadata for the requested asset type."""

    def __init__(self, asset_type: str) -> None:
        super().__init__(f"Unknown asset type: {asset_type}")
        self.asset_type = asset_type


class TransactionError(LedgerError):
    """Raised when a transaction cannot be built, simulated or submitted.

    Attributes:
        vm_status: Status reported by the ledger VM, if any.
    """

    def __init__(self, message: str, vm_status: str | None = None) -> None:
        super().__init__(message)
        self.vm_status = vm_status
