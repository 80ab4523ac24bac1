"""Services package."""

from aml_explorer.services.features import TransactionFeatureExtractor
from aml_explorer.services.graph_builder import GraphBuilderService

__all__ = [
    "GraphBuilderService",
    "TransactionFeatureExtractor",
]
