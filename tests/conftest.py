"""Test configuration and fixtures."""

from pathlib import Path
from typing import Any

import pytest

from aml_explorer.constants import (
    ADDR_TX_EDGES_FILE,
    ADDRESS_CLASSES_FILE,
    TX_ADDR_EDGES_FILE,
    TX_CLASSES_FILE,
    TX_FEATURES_FILE,
)
from aml_explorer.core.explorer import ExplorerGateway, GatewayProvider
from aml_explorer.datasets.reader import DatasetReader
from aml_explorer.services.features import TransactionFeatureExtractor
from aml_explorer.services.graph_builder import GraphBuilderService

DATASET_FOLDER = "1111DAYXhoxZx2tsRnzimfozo783x1yC2"
TXID = "d6176384de4c0b98702eccb97f3ad6670bc8410d9da715fe5b49462d3e603993"

DATASET_FILES: dict[str, str] = {
    TX_CLASSES_FILE: (
        "txId,class\n"
        "t1,2\n"
        "t2,unknown\n"
        "t3,1\n"
    ),
    ADDRESS_CLASSES_FILE: (
        "address,Time step,class,total_txs\n"
        "1A,2,3,5\n"
        "1B,3,2,1\n"
        "1C,2,1,2\n"
    ),
    ADDR_TX_EDGES_FILE: (
        "input_address,txId\n"
        "1A,t1\n"
        "1B,t1\n"
        "1C,t2\n"
        "1C,t3\n"
        "1A,t4\n"
    ),
    TX_ADDR_EDGES_FILE: (
        "txId,output_address\n"
        "t1,1D\n"
        "t2,1E\n"
        "t3,1A\n"
        "t9,1F\n"
        "t4,1B\n"
    ),
    TX_FEATURES_FILE: (
        "txId,Time step,in_txs_degree,out_txs_degree\n"
        "t1,1,2,1\n"
        "t2,1,1,1\n"
    ),
}


def write_dataset(
    root: Path, folder: str = DATASET_FOLDER, files: dict[str, str] | None = None
) -> Path:
    """Write dataset CSV files under ``root/folder``."""
    target = root / folder
    target.mkdir(parents=True, exist_ok=True)
    for name, content in (DATASET_FILES if files is None else files).items():
        (target / name).write_text(content, encoding="utf-8")
    return target


class FakeExplorer(ExplorerGateway):
    """In-memory explorer returning canned transaction bodies."""

    def __init__(
        self,
        payloads: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.payloads = payloads or {}
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "fake"

    async def fetch_transaction(self, txid: str) -> dict[str, Any]:
        self.calls.append(txid)
        if self.error is not None:
            raise self.error
        return self.payloads[txid]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_explorer() -> FakeExplorer:
    """Provide an empty fake explorer."""
    return FakeExplorer()


@pytest.fixture
def gateway_provider(fake_explorer: FakeExplorer) -> GatewayProvider:
    """Provide a gateway provider wrapping the fake explorer."""
    return GatewayProvider(lambda: fake_explorer)


@pytest.fixture
def extractor(gateway_provider: GatewayProvider) -> TransactionFeatureExtractor:
    """Provide a feature extractor backed by the fake explorer."""
    return TransactionFeatureExtractor(gateway_provider)


@pytest.fixture
def dataset_root(tmp_path: Path) -> Path:
    """Provide a data directory holding one complete dataset folder."""
    write_dataset(tmp_path)
    return tmp_path


@pytest.fixture
def dataset_reader(dataset_root: Path) -> DatasetReader:
    """Provide a dataset reader over the sample dataset."""
    return DatasetReader(dataset_root)


@pytest.fixture
def graph_builder(dataset_reader: DatasetReader) -> GraphBuilderService:
    """Provide a graph builder over the sample dataset."""
    return GraphBuilderService(dataset_reader)
