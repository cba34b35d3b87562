"""Domain models for ledger data consumed by the wallet."""

from enum import Enum

from pydantic import BaseModel, Field


class Network(str, Enum):
    """Aptos network the wallet talks to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"


class AssetMetadata(BaseModel):
    """Fungible asset metadata reported by the ledger.

    Immutable data structure returned from the ledger client.
    """

    model_config = {"frozen": True}

    symbol: str = Field(..., description="Ticker symbol (e.g. 'USDT')")
    name: str = Field(..., description="Human-readable asset name")
    decimals: int = Field(..., ge=0, description="Base-unit precision")


class Balance(BaseModel):
    """A confirmed account balance.

    Only produced from a successful ledger lookup, so a zero here always
    means a confirmed zero.
    """

    model_config = {"frozen": True}

    address: str = Field(..., description="Account address queried")
    asset_type: str | None = Field(default=None, description="Asset type (None for APT)")
    raw: int = Field(..., description="Amount in base units")
    decimals: int = Field(..., ge=0, description="Precision used for display")
    formatted: str = Field(..., description="Exact decimal representation")


class SimulationOutcome(BaseModel):
    """Result of simulating a transaction against the ledger."""

    model_config = {"frozen": True}

    success: bool = Field(..., description="Whether the VM executed the transaction")
    vm_status: str = Field(default="", description="VM status string for diagnostics")
    gas_used: int = Field(default=0, ge=0, description="Gas units consumed")
    gas_unit_price: int = Field(default=0, ge=0, description="Octas per gas unit")

    @property
    def fee(self) -> int:
        """Estimated fee in octas."""
        return self.gas_used * self.gas_unit_price


class CostEstimate(BaseModel):
    """Outcome of a transaction cost estimation."""

    model_config = {"frozen": True}

    success: bool = Field(..., description="Whether the simulated transaction succeeds")
    description: str = Field(..., description="Summary or failure reason")
    simulation: SimulationOutcome | None = Field(
        default=None, description="Full simulation outcome"
    )


class TransactionResult(BaseModel):
    """Result of a transfer submission attempt."""

    model_config = {"frozen": True}

    success: bool = Field(..., description="Whether the ledger accepted the transaction")
    description: str = Field(..., description="Transaction hash or failure reason")
    tx_hash: str | None = Field(default=None, description="Hash of the pending transaction")
