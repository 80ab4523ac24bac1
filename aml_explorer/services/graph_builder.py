"""Address-transaction graph building service."""

import logging

from aml_explorer.constants import (
    ADDR_TX_COLUMNS,
    ADDR_TX_EDGES_FILE,
    ADDRESS_CLASS_LAYOUT,
    ADDRESS_CLASSES_FILE,
    TX_ADDR_COLUMNS,
    TX_ADDR_EDGES_FILE,
    TX_CLASS_LAYOUT,
    TX_CLASSES_FILE,
    UNKNOWN_CLASS,
    edge_color,
    node_color,
)
from aml_explorer.datasets.reader import DatasetReader
from aml_explorer.models.graph import GraphEdge, GraphNode, GraphResult

logger = logging.getLogger(__name__)


class GraphBuilderService:
    """
    Joins the classification tables and edge lists of a dataset folder
    into a coloured address graph.

    Each transaction is reduced to a single source address: the input
    address on its last row in the address->transaction list. Output rows
    of a transaction that never appears there produce no edge.
    """

    def __init__(self, reader: DatasetReader) -> None:
        self._reader = reader

    def build_graph(self, folder: str) -> GraphResult:
        """
        Build the graph of ``folder``.

        Raises:
            SourceNotFoundError: If any of the four dataset files is absent.
            MalformedRecordError: If a file cannot be parsed.
        """
        tx_classes = self._reader.read_classification(folder, TX_CLASSES_FILE, TX_CLASS_LAYOUT)
        address_classes = self._reader.read_classification(
            folder, ADDRESS_CLASSES_FILE, ADDRESS_CLASS_LAYOUT
        )

        # dict keys double as an insertion-ordered set
        addresses: dict[str, None] = {}
        tx_sources: dict[str, str] = {}
        for input_address, tx_id in self._reader.read_edges(
            folder, ADDR_TX_EDGES_FILE, ADDR_TX_COLUMNS
        ):
            addresses[input_address] = None
            tx_sources[tx_id] = input_address

        edges: list[GraphEdge] = []
        dropped = 0
        for tx_id, output_address in self._reader.read_edges(
            folder, TX_ADDR_EDGES_FILE, TX_ADDR_COLUMNS
        ):
            addresses[output_address] = None
            source = tx_sources.get(tx_id)
            if source is None:
                dropped += 1
                continue
            edges.append(
                GraphEdge(
                    from_address=source,
                    to_address=output_address,
                    tx_id=tx_id,
                    visual_class=edge_color(tx_classes.get(tx_id, UNKNOWN_CLASS)),
                )
            )

        nodes = [
            GraphNode(
                id=address,
                visual_class=node_color(address_classes.get(address, UNKNOWN_CLASS)),
            )
            for address in addresses
        ]

        logger.debug(
            f"Graph for {folder}: {len(nodes)} nodes, {len(edges)} edges, "
            f"{dropped} unresolved output rows"
        )
        return GraphResult(nodes=nodes, edges=edges)
