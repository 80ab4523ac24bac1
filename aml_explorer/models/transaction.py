"""Transaction decode targets and the derived feature vector."""

from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict

from aml_explorer.constants import SATOSHIS_PER_BTC

# Explorer amounts must be real JSON numbers: no numeric strings, booleans,
# NaN or infinities
BtcAmount = Annotated[float, Strict(), AllowInfNan(False)]
SatoshiAmount = Annotated[int, Strict()]


class RawInput(BaseModel):
    """Transaction input as returned by the explorer."""

    value: BtcAmount | None = None
    value_sat: SatoshiAmount | None = Field(default=None, ge=0)

    def resolved_value(self) -> float | None:
        """Input value in BTC, preferring ``value`` over ``value_sat``."""
        if self.value is not None:
            return self.value
        if self.value_sat is not None:
            return self.value_sat / SATOSHIS_PER_BTC
        return None


class RawOutput(BaseModel):
    """Transaction output as returned by the explorer."""

    value: BtcAmount
    value_sat: SatoshiAmount | None = Field(default=None, ge=0)


class RawTransaction(BaseModel):
    """Subset of the explorer transaction body the extractor relies on."""

    txid: str | None = None
    vin: list[RawInput]
    vout: list[RawOutput]


class TransactionFeatures(BaseModel):
    """Numeric features of a Bitcoin transaction. All amounts are in BTC."""

    model_config = ConfigDict(frozen=True)

    n_inputs: int = Field(ge=0, description="Number of transaction inputs")
    n_outputs: int = Field(ge=0, description="Number of transaction outputs")
    input_value_sum: float
    output_value_sum: float
    transaction_fee: float = Field(description="input_value_sum - output_value_sum")
    avg_input_value: float
    avg_output_value: float
