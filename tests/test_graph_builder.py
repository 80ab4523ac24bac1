"""Tests for the address-transaction graph builder."""

from pathlib import Path

import pytest

from aml_explorer.constants import (
    ADDR_TX_EDGES_FILE,
    ADDRESS_CLASSES_FILE,
    TX_ADDR_EDGES_FILE,
    TX_CLASSES_FILE,
    EdgeColor,
    NodeColor,
)
from aml_explorer.core.exceptions import MalformedRecordError, SourceNotFoundError
from aml_explorer.datasets.reader import DatasetReader
from aml_explorer.services.graph_builder import GraphBuilderService
from tests.conftest import DATASET_FILES, DATASET_FOLDER, write_dataset

REQUIRED_FILES = [TX_CLASSES_FILE, ADDRESS_CLASSES_FILE, ADDR_TX_EDGES_FILE, TX_ADDR_EDGES_FILE]


def build(root: Path, files: dict[str, str]) -> GraphBuilderService:
    write_dataset(root, files=files)
    return GraphBuilderService(DatasetReader(root))


class TestGraphBuilderService:
    """Tests for GraphBuilderService."""

    def test_build_graph(self, graph_builder: GraphBuilderService) -> None:
        """Test the full join on the sample dataset."""
        graph = graph_builder.build_graph(DATASET_FOLDER)

        edges = [(e.from_address, e.to_address, e.tx_id, e.visual_class) for e in graph.edges]
        assert edges == [
            ("1B", "1D", "t1", EdgeColor.RED),
            ("1C", "1E", "t2", EdgeColor.GREEN),
            ("1C", "1A", "t3", EdgeColor.GRAY),
            ("1A", "1B", "t4", EdgeColor.GREEN),
        ]

        nodes = {node.id: node.visual_class for node in graph.nodes}
        assert nodes == {
            "1A": NodeColor.GREEN,
            "1B": NodeColor.GRAY,
            "1C": NodeColor.WHITE,
            "1D": NodeColor.WHITE,
            "1E": NodeColor.WHITE,
            "1F": NodeColor.WHITE,
        }

    def test_last_input_address_wins(self, graph_builder: GraphBuilderService) -> None:
        """Test the last input row of a transaction becomes its source."""
        graph = graph_builder.build_graph(DATASET_FOLDER)

        sources = {edge.from_address for edge in graph.edges if edge.tx_id == "t1"}
        assert sources == {"1B"}

    def test_unresolved_output_rows_dropped(self, graph_builder: GraphBuilderService) -> None:
        """Test outputs of unseen transactions create a node but no edge."""
        graph = graph_builder.build_graph(DATASET_FOLDER)

        assert all(edge.tx_id != "t9" for edge in graph.edges)
        assert "1F" in {node.id for node in graph.nodes}

    def test_nodes_deduplicated(self, graph_builder: GraphBuilderService) -> None:
        """Test each address appears once."""
        graph = graph_builder.build_graph(DATASET_FOLDER)

        ids = [node.id for node in graph.nodes]
        assert len(ids) == len(set(ids))

    def test_address_class_taken_from_third_column(self, tmp_path: Path) -> None:
        """Test the address class code is read from the third column."""
        files = dict(DATASET_FILES)
        files[ADDRESS_CLASSES_FILE] = (
            "address,Time step,class\n"
            "1A,2,3\n"
            "1B,3,2\n"
        )
        files[ADDR_TX_EDGES_FILE] = "input_address,txId\n1A,t1\n"
        files[TX_ADDR_EDGES_FILE] = "txId,output_address\nt1,1B\nt1,1X\n"

        graph = build(tmp_path, files).build_graph(DATASET_FOLDER)

        nodes = {node.id: node.visual_class for node in graph.nodes}
        assert nodes == {"1A": NodeColor.GREEN, "1B": NodeColor.GRAY, "1X": NodeColor.WHITE}

    def test_empty_edge_lists(self, tmp_path: Path) -> None:
        """Test header-only edge lists give an empty graph."""
        files = dict(DATASET_FILES)
        files[ADDR_TX_EDGES_FILE] = "input_address,txId\n"
        files[TX_ADDR_EDGES_FILE] = "txId,output_address\n"

        graph = build(tmp_path, files).build_graph(DATASET_FOLDER)

        assert graph.nodes == []
        assert graph.edges == []

    @pytest.mark.parametrize("missing", REQUIRED_FILES)
    def test_missing_source(self, tmp_path: Path, missing: str) -> None:
        """Test each required file is reported by name when absent."""
        files = {name: content for name, content in DATASET_FILES.items() if name != missing}

        with pytest.raises(SourceNotFoundError) as exc_info:
            build(tmp_path, files).build_graph(DATASET_FOLDER)

        assert exc_info.value.file_name == missing

    def test_missing_folder(self, tmp_path: Path) -> None:
        """Test an absent dataset folder fails on the first file."""
        builder = GraphBuilderService(DatasetReader(tmp_path))

        with pytest.raises(SourceNotFoundError) as exc_info:
            builder.build_graph("no_such_dataset_folder")

        assert exc_info.value.file_name == TX_CLASSES_FILE

    def test_edge_list_missing_column(self, tmp_path: Path) -> None:
        """Test an edge list without its named columns is malformed."""
        files = dict(DATASET_FILES)
        files[TX_ADDR_EDGES_FILE] = "txId,address\nt1,1D\n"

        with pytest.raises(MalformedRecordError) as exc_info:
            build(tmp_path, files).build_graph(DATASET_FOLDER)

        assert exc_info.value.file_name == TX_ADDR_EDGES_FILE

    def test_short_row(self, tmp_path: Path) -> None:
        """Test a row with missing fields aborts the build."""
        files = dict(DATASET_FILES)
        files[ADDR_TX_EDGES_FILE] = "input_address,txId\n1A,t1\n1B\n"

        with pytest.raises(MalformedRecordError) as exc_info:
            build(tmp_path, files).build_graph(DATASET_FOLDER)

        assert exc_info.value.file_name == ADDR_TX_EDGES_FILE

    @pytest.mark.parametrize(
        ("file_name", "content"),
        [
            (ADDRESS_CLASSES_FILE, "address,Time step,class\n1A,2,3,9\n1B,3,2,9\n"),
            (ADDRESS_CLASSES_FILE, "address,Time step,class\n1A,2\n"),
            (TX_CLASSES_FILE, "txId,class\nt1\n"),
            (TX_ADDR_EDGES_FILE, "txId,output_address\nt1,1D,1E\n"),
        ],
        ids=["surplus-column", "short-address-row", "short-tx-row", "long-edge-row"],
    )
    def test_mismatched_row_width(self, tmp_path: Path, file_name: str, content: str) -> None:
        """Test rows wider or narrower than the header abort the build."""
        files = dict(DATASET_FILES)
        files[file_name] = content

        with pytest.raises(MalformedRecordError) as exc_info:
            build(tmp_path, files).build_graph(DATASET_FOLDER)

        assert exc_info.value.file_name == file_name
