"""Dataset layout, classification codes and render colours."""

from enum import Enum
from typing import NamedTuple

SATOSHIS_PER_BTC = 100_000_000

# Files every dataset folder must provide for graph building
TX_CLASSES_FILE = "elliptic_txs_classes.csv"
ADDRESS_CLASSES_FILE = "wallets_features_classes_combined.csv"
ADDR_TX_EDGES_FILE = "AddrTx_edgelist.csv"
TX_ADDR_EDGES_FILE = "TxAddr_edgelist.csv"

# Per-record lookup sources
TX_FEATURES_FILE = "elliptic_txs_features.csv"

UNKNOWN_CLASS = "unknown"


class NodeColor(str, Enum):
    """Fill colour of an address node, keyed off the address class code."""

    GREEN = "#00FF00"
    GRAY = "#CCCCCC"
    WHITE = "#FFFFFF"


class EdgeColor(str, Enum):
    """Stroke colour of an edge, keyed off the transaction class code."""

    GREEN = "#00FF00"
    RED = "#FF0000"
    GRAY = "#CCCCCC"


NODE_COLORS: dict[str, NodeColor] = {
    "3": NodeColor.GREEN,
    "2": NodeColor.GRAY,
}

EDGE_COLORS: dict[str, EdgeColor] = {
    UNKNOWN_CLASS: EdgeColor.GREEN,
    "2": EdgeColor.RED,
}


def node_color(class_code: str) -> NodeColor:
    """Map an address class code to its node colour."""
    return NODE_COLORS.get(class_code, NodeColor.WHITE)


def edge_color(class_code: str) -> EdgeColor:
    """Map a transaction class code to its edge colour."""
    return EDGE_COLORS.get(class_code, EdgeColor.GRAY)


class ClassificationLayout(NamedTuple):
    """Column positions of a classification table (0-indexed)."""

    key_column: int
    class_column: int


# elliptic_txs_classes.csv: txId, class
TX_CLASS_LAYOUT = ClassificationLayout(key_column=0, class_column=1)
# wallets_features_classes_combined.csv: address, Time step, class, ...
ADDRESS_CLASS_LAYOUT = ClassificationLayout(key_column=0, class_column=2)

ADDR_TX_COLUMNS = ("input_address", "txId")
TX_ADDR_COLUMNS = ("txId", "output_address")
