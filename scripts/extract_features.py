"""
Print the feature vector of a Bitcoin transaction.

Usage: python scripts/extract_features.py [txid]
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aml_explorer.api.dependencies import build_gateway_provider
from aml_explorer.config import get_settings
from aml_explorer.core.exceptions import AmlExplorerError
from aml_explorer.services.features import TransactionFeatureExtractor

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def main(txid: str) -> int:
    provider = build_gateway_provider(get_settings())
    extractor = TransactionFeatureExtractor(provider)

    try:
        features = await extractor.extract_features(txid)
    except AmlExplorerError as e:
        logger.error(f"{e.code}: {e.message}")
        return 1
    finally:
        await provider.close()

    print("Transaction Features:")
    print(f"  Inputs: {features.n_inputs}")
    print(f"  Outputs: {features.n_outputs}")
    print(f"  Input Value Sum: {features.input_value_sum} BTC")
    print(f"  Output Value Sum: {features.output_value_sum} BTC")
    print(f"  Transaction Fee: {features.transaction_fee} BTC")
    print(f"  Avg Input Value: {features.avg_input_value} BTC")
    print(f"  Avg Output Value: {features.avg_output_value} BTC")
    return 0


if __name__ == "__main__":
    tx_id = sys.argv[1] if len(sys.argv) > 1 else get_settings().test_tx_id
    sys.exit(asyncio.run(main(tx_id)))
