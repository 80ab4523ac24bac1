"""Core module for base interfaces and abstractions."""

from aml_explorer.core.exceptions import (
    AmlExplorerError,
    DatasetError,
    DecodeFailedError,
    ExplorerError,
    FetchFailedError,
    GatewayUnavailableError,
    MalformedRecordError,
    MissingInputValueError,
    SourceNotFoundError,
)
from aml_explorer.core.explorer import ExplorerGateway, GatewayProvider

__all__ = [
    "AmlExplorerError",
    "DatasetError",
    "DecodeFailedError",
    "ExplorerError",
    "ExplorerGateway",
    "FetchFailedError",
    "GatewayProvider",
    "GatewayUnavailableError",
    "MalformedRecordError",
    "MissingInputValueError",
    "SourceNotFoundError",
]
