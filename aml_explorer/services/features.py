"""Transaction feature extraction service."""

import logging

from pydantic import ValidationError

from aml_explorer.core.exceptions import DecodeFailedError, MissingInputValueError
from aml_explorer.core.explorer import GatewayProvider
from aml_explorer.models.transaction import RawTransaction, TransactionFeatures

logger = logging.getLogger(__name__)


class TransactionFeatureExtractor:
    """
    Derives the numeric feature vector of a transaction.

    One explorer round trip per call, no retries. The explorer gateway is
    obtained from the injected provider, which builds it on first use.
    """

    def __init__(self, gateway_provider: GatewayProvider) -> None:
        self._gateway_provider = gateway_provider

    async def extract_features(self, txid: str) -> TransactionFeatures:
        """
        Fetch a transaction and compute its features.

        Args:
            txid: Transaction id (64 hex characters).

        Returns:
            Populated TransactionFeatures.

        Raises:
            GatewayUnavailableError: If the explorer gateway cannot be built.
            FetchFailedError: If the fetch fails or returns an error status.
            DecodeFailedError: If the body lacks the ``vin``/``vout`` arrays.
            MissingInputValueError: If an input has neither value nor value_sat.
        """
        gateway = await self._gateway_provider.get()
        payload = await gateway.fetch_transaction(txid)
        tx = self.decode(txid, payload)
        return self.compute(txid, tx)

    @staticmethod
    def decode(txid: str, payload: object) -> RawTransaction:
        """Decode the explorer JSON into inputs and outputs."""
        try:
            return RawTransaction.model_validate(payload)
        except ValidationError as e:
            raise DecodeFailedError(txid, str(e)) from e

    @staticmethod
    def compute(txid: str, tx: RawTransaction) -> TransactionFeatures:
        """Compute features from a decoded transaction."""
        n_inputs = len(tx.vin)
        n_outputs = len(tx.vout)

        # Every input must resolve before anything is summed
        input_values: list[float] = []
        for index, vin in enumerate(tx.vin):
            value = vin.resolved_value()
            if value is None:
                raise MissingInputValueError(txid, index)
            input_values.append(value)

        input_value_sum = sum(input_values, 0.0)
        output_value_sum = sum((vout.value for vout in tx.vout), 0.0)
        transaction_fee = input_value_sum - output_value_sum

        avg_input_value = input_value_sum / n_inputs if n_inputs > 0 else 0.0
        avg_output_value = output_value_sum / n_outputs if n_outputs > 0 else 0.0

        features = TransactionFeatures(
            n_inputs=n_inputs,
            n_outputs=n_outputs,
            input_value_sum=input_value_sum,
            output_value_sum=output_value_sum,
            transaction_fee=transaction_fee,
            avg_input_value=avg_input_value,
            avg_output_value=avg_output_value,
        )
        logger.debug(f"Features for {txid[:16]}...: {features}")
        return features
