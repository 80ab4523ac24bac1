"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from aml_explorer.config import Settings, get_settings
from aml_explorer.core.explorer import GatewayProvider
from aml_explorer.datasets.reader import DatasetReader
from aml_explorer.providers.blockbook import BlockbookExplorer
from aml_explorer.services.features import TransactionFeatureExtractor
from aml_explorer.services.graph_builder import GraphBuilderService


def build_gateway_provider(settings: Settings) -> GatewayProvider:
    """Create the initialize-once provider of the Blockbook gateway."""
    return GatewayProvider(
        lambda: BlockbookExplorer(
            base_url=settings.explorer_base_url,
            timeout=settings.explorer_timeout,
            max_connections=settings.explorer_max_connections,
        )
    )


def get_gateway_provider(request: Request) -> GatewayProvider:
    """Get the application's shared gateway provider."""
    return request.app.state.gateway_provider


def get_dataset_reader(
    settings: Annotated[Settings, Depends(get_settings)]
) -> DatasetReader:
    """Get dataset reader rooted at the configured data directory."""
    return DatasetReader(settings.data_dir)


def get_feature_extractor(
    gateway_provider: Annotated[GatewayProvider, Depends(get_gateway_provider)],
) -> TransactionFeatureExtractor:
    """Get transaction feature extractor instance."""
    return TransactionFeatureExtractor(gateway_provider)


def get_graph_builder(
    reader: Annotated[DatasetReader, Depends(get_dataset_reader)],
) -> GraphBuilderService:
    """Get graph builder service instance."""
    return GraphBuilderService(reader)
