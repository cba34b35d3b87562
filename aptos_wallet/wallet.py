"""Wallet facade combining a derived identity with a ledger client."""

from typing import Any

from loguru import logger

from aptos_wallet.config import Settings, get_settings
from aptos_wallet.exceptions import LedgerError, LedgerNotConfiguredError
from aptos_wallet.identity import Identity, derive_identity, identity_source
from aptos_wallet.interfaces.ledger import BaseLedgerClient
from aptos_wallet.models import (
    AssetMetadata,
    Balance,
    CostEstimate,
    Network,
    TransactionResult,
)
from aptos_wallet.units import format_units, parse_units


class Wallet:
    """Aptos wallet with an identity fixed at construction.

    The identity comes from the first of ``password``, ``mnemonic`` or
    ``private_key`` that is given, or is random when none is. Amounts are
    exchanged with callers as decimal strings and with the ledger as base
    units.

    Usage:
        wallet = Wallet(ledger=client, password="hunter2")
        print(wallet.get_address())

        balance = await wallet.get_coin_balance()
        result = await wallet.send_coin_to("0xabc...", "1.5")
    """

    def __init__(
        self,
        ledger: BaseLedgerClient | None = None,
        *,
        network: Network | str | None = None,
        password: str | None = None,
        mnemonic: str | None = None,
        private_key: str | bytes | None = None,
        private_key_template: str | None = None,
        derivation_path: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the wallet and derive its identity.

        Args:
            ledger: Ledger client for balance and transaction calls.
            network: Network name; defaults to the configured network.
            password: Password to derive a deterministic identity from.
            mnemonic: Existing seed phrase.
            private_key: Existing private key (hex or raw bytes).
            private_key_template: Template key for password derivation;
                defaults to the configured template.
            derivation_path: Derivation path; defaults to the configured path.
            settings: Settings instance; defaults to the global settings.

        Raises:
            InvalidSeedPhraseError: If the seed phrase is malformed.
            InvalidPrivateKeyError: If the private key is malformed.
        """
        self._settings = settings or get_settings()
        config = self._settings.wallet
        self._ledger = ledger
        self._network = Network(config.network if network is None else network)
        self._coin_decimals = config.coin_decimals

        # An explicit empty string is an input, not a request for the default
        if private_key_template is None:
            private_key_template = config.private_key_template.get_secret_value()
        if derivation_path is None:
            derivation_path = config.derivation_path

        source = identity_source(password=password, mnemonic=mnemonic, private_key=private_key)
        self._identity = derive_identity(
            source,
            private_key_template=private_key_template,
            derivation_path=derivation_path,
        )
        logger.info("Wallet ready on {}: {}", self._network.value, self._identity.short_address)

    @property
    def identity(self) -> Identity:
        """The wallet's immutable identity."""
        return self._identity

    @property
    def network(self) -> Network:
        return self._network

    def get_private_key(self) -> str:
        """Private key as hex string with 0x prefix."""
        return self._identity.private_key_hex

    def get_mnemonic(self) -> str | None:
        """Seed phrase, or None for a wallet built from a private key."""
        return self._identity.mnemonic

    def get_address(self) -> str:
        return self._identity.address_hex

    def _require_ledger(self) -> BaseLedgerClient:
        if self._ledger is None:
            raise LedgerNotConfiguredError("Wallet has no ledger client configured")
        return self._ledger

    # =========================================================================
    # Balances and metadata
    # =========================================================================

    async def get_token_information(self, asset_type: str) -> AssetMetadata:
        """Get metadata for an asset type.

        Raises:
            AssetNotFoundError: If the asset type does not exist.
            LedgerUnavailableError: If the ledger cannot be reached.
        """
        return await self._require_ledger().get_asset_metadata(asset_type)

    async def get_balance(
        self, address: str | None = None, asset_type: str | None = None
    ) -> Balance:
        """Get a confirmed balance for APT or an asset type.

        Args:
            address: Account to query; defaults to this wallet.
            asset_type: Asset type; None for APT.

        Returns:
            Balance with both base-unit and decimal values.

        Raises:
            LedgerUnavailableError: If the ledger cannot be reached.
            LedgerError: For any other ledger-side failure.
        """
        ledger = self._require_ledger()
        if address is None:
            address = self.get_address()

        if asset_type is None:
            decimals = self._coin_decimals
        else:
            decimals = (await ledger.get_asset_metadata(asset_type)).decimals

        raw = await ledger.get_account_amount(address, asset_type)
        return Balance(
            address=address,
            asset_type=asset_type,
            raw=raw,
            decimals=decimals,
            formatted=format_units(raw, decimals),
        )

    async def get_coin_balance(self, address: str | None = None) -> str:
        """Get the APT balance as a decimal string (e.g. '1.01')."""
        return (await self.get_balance(address)).formatted

    async def get_token_balance(self, asset_type: str, address: str | None = None) -> str:
        """Get an asset balance as a decimal string at the asset's precision."""
        return (await self.get_balance(address, asset_type)).formatted

    # =========================================================================
    # Transactions
    # =========================================================================

    async def estimate_cost_of_tx(self, tx: Any) -> CostEstimate:
        """Simulate a transaction and report whether it would succeed.

        Raises:
            LedgerUnavailableError: If the ledger cannot be reached.
        """
        outcome = await self._require_ledger().simulate_transaction(
            self._identity.public_key, tx
        )
        if outcome.success:
            return CostEstimate(
                success=True,
                description=f"Estimated fee: {format_units(outcome.fee, self._coin_decimals)} APT",
                simulation=outcome,
            )

        logger.warning("Estimation failed: {}", outcome.vm_status)
        return CostEstimate(
            success=False,
            description=f"Estimation Failed: {outcome.vm_status}",
            simulation=outcome,
        )

    async def _build_transfer(
        self, recipient: str, amount: str, asset_type: str | None
    ) -> Any:
        ledger = self._require_ledger()
        if asset_type is None:
            decimals = self._coin_decimals
        else:
            decimals = (await ledger.get_asset_metadata(asset_type)).decimals
        return await ledger.build_transfer(
            self._identity, recipient, parse_units(amount, decimals), asset_type
        )

    async def estimate_cost_send_coin_to(self, recipient: str, amount: str) -> CostEstimate:
        """Estimate an APT transfer of ``amount`` (decimal string)."""
        tx = await self._build_transfer(recipient, amount, None)
        return await self.estimate_cost_of_tx(tx)

    async def estimate_cost_send_token_to(
        self, asset_type: str, recipient: str, amount: str
    ) -> CostEstimate:
        """Estimate an asset transfer of ``amount`` (decimal string)."""
        tx = await self._build_transfer(recipient, amount, asset_type)
        return await self.estimate_cost_of_tx(tx)

    async def _send(
        self, recipient: str, amount: str, asset_type: str | None, failure_label: str
    ) -> TransactionResult:
        ledger = self._require_ledger()
        # Amount validation errors propagate; only ledger failures become results
        try:
            tx = await self._build_transfer(recipient, amount, asset_type)
            tx_hash = await ledger.submit_transaction(self._identity, tx)
        except LedgerError as e:
            logger.error("{} to {}: {}", failure_label, recipient, e)
            return TransactionResult(success=False, description=f"{failure_label}: {e}")

        logger.info("Submitted transfer of {} to {}: {}", amount, recipient, tx_hash)
        return TransactionResult(success=True, description=tx_hash, tx_hash=tx_hash)

    async def send_coin_to(self, recipient: str, amount: str) -> TransactionResult:
        """Send ``amount`` APT (decimal string) to ``recipient``.

        Returns:
            TransactionResult with the pending hash, or success=False with
            the ledger's failure reason.

        Raises:
            InvalidDecimalStringError: If amount is not a decimal string.
            LedgerNotConfiguredError: If the wallet has no ledger client.
        """
        return await self._send(recipient, amount, None, "Transaction Failed")

    async def send_token_to(
        self, asset_type: str, recipient: str, amount: str
    ) -> TransactionResult:
        """Send ``amount`` of ``asset_type`` (decimal string) to ``recipient``."""
        return await self._send(recipient, amount, asset_type, "Transfer Failed")
