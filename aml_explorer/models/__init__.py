"""Domain models package."""

from aml_explorer.models.graph import GraphEdge, GraphNode, GraphResult
from aml_explorer.models.transaction import (
    RawInput,
    RawOutput,
    RawTransaction,
    TransactionFeatures,
)

__all__ = [
    "GraphEdge",
    "GraphNode",
    "GraphResult",
    "RawInput",
    "RawOutput",
    "RawTransaction",
    "TransactionFeatures",
]
