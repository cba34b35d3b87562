"""Abstract base class defining the ledger client interface."""

from abc import ABC, abstractmethod
from typing import Any

from aptos_wallet.exceptions import (
    AssetNotFoundError,
    LedgerError,
    LedgerUnavailableError,
    TransactionError,
)
from aptos_wallet.identity import Identity
from aptos_wallet.models import AssetMetadata, SimulationOutcome

# Re-export exceptions for convenience
__all__ = [
    "BaseLedgerClient",
    "AssetNotFoundError",
    "LedgerError",
    "LedgerUnavailableError",
    "TransactionError",
]


class BaseLedgerClient(ABC):
    """Abstract base class for Aptos ledger clients.

    The client owns the network protocol and the transaction format; the
    wallet only passes amounts in base units and opaque transactions.
    Implementations must raise rather than return placeholder values, so
    that a failed lookup is never mistaken for a zero balance.
    """

    @abstractmethod
    async def get_account_amount(self, address: str, asset_type: str | None = None) -> int:
        """Get an account balance in base units.

        Args:
            address: Account address.
            asset_type: Coin or fungible asset type; None for APT.

        Returns:
            The balance in base units (0 only if confirmed empty).

        Raises:
            LedgerUnavailableError: If the node cannot be reached.
            LedgerError: For any other ledger-side failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_asset_metadata(self, asset_type: str) -> AssetMetadata:
        """Get symbol, name and decimals for an asset type.

        Raises:
            AssetNotFoundError: If the asset type does not exist.
            LedgerUnavailableError: If the node cannot be reached.
        """
        raise NotImplementedError

    @abstractmethod
    async def build_transfer(
        self,
        sender: Identity,
        recipient: str,
        amount: int,
        asset_type: str | None = None,
    ) -> Any:
        """Build an unsigned transfer transaction.

        Args:
            sender: Identity of the sending account.
            recipient: Recipient address.
            amount: Amount in base units.
            asset_type: Coin type to transfer; None for APT.

        Raises:
            TransactionError: If the transaction cannot be built.
            LedgerUnavailableError: If the node cannot be reached.
        """
        raise NotImplementedError

    @abstractmethod
    async def simulate_transaction(self, public_key: bytes, transaction: Any) -> SimulationOutcome:
        """Simulate a transaction without submitting it.

        Raises:
            LedgerUnavailableError: If the node cannot be reached.
        """
        raise NotImplementedError

    @abstractmethod
    async def submit_transaction(self, signer: Identity, transaction: Any) -> str:
        """Sign and submit a transaction.

        Returns:
            The pending transaction hash.

        Raises:
            TransactionError: If the ledger rejects the transaction.
            LedgerUnavailableError: If the node cannot be reached.
        """
        raise NotImplementedError
