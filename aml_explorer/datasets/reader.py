"""CSV access to dataset folders."""

import logging
import warnings
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from aml_explorer.constants import ClassificationLayout
from aml_explorer.core.exceptions import MalformedRecordError, SourceNotFoundError

logger = logging.getLogger(__name__)

LOOKUP_CHUNK_SIZE = 50_000

# Cells are kept as text; only empty cells become NA. The tokenizer pads
# short rows with empty fields, so missing fields show up as NA too.
# index_col=False stops pandas from turning a surplus leading column
# into the index.
READ_OPTIONS: dict[str, Any] = {
    "dtype": str,
    "keep_default_na": False,
    "na_values": [""],
    "index_col": False,
}

PARSE_ERRORS = (
    pd.errors.ParserError,
    pd.errors.ParserWarning,
    pd.errors.EmptyDataError,
    UnicodeDecodeError,
)


class DatasetReader:
    """
    Reads the tabular files of a dataset folder.

    Every cell is read as a string, so class codes such as ``"unknown"``
    and numeric transaction ids keep their textual form. Rows with surplus
    fields, and rows whose columns used by a join are missing or empty,
    are rejected as malformed.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, folder: str, file_name: str) -> Path:
        """Path of ``file_name`` inside dataset ``folder``."""
        return self._data_dir / folder / file_name

    def _require(self, folder: str, file_name: str) -> Path:
        path = self.path_for(folder, file_name)
        if not path.is_file():
            logger.warning(f"Dataset file not found: {path}")
            raise SourceNotFoundError(file_name, str(path))
        return path

    def _load(self, folder: str, file_name: str) -> pd.DataFrame:
        path = self._require(folder, file_name)
        try:
            with warnings.catch_warnings():
                # Surplus fields are only warned about and then dropped
                warnings.simplefilter("error", pd.errors.ParserWarning)
                frame = pd.read_csv(path, **READ_OPTIONS)
        except PARSE_ERRORS as e:
            raise MalformedRecordError(file_name, str(e)) from e

        logger.debug(f"Loaded {len(frame)} rows from {path}")
        return frame

    @staticmethod
    def _check_complete(frame: pd.DataFrame, columns: Sequence[int], file_name: str) -> None:
        """Reject rows with a missing or empty value in any of ``columns``."""
        incomplete = frame.iloc[:, list(columns)].isna().any(axis=1)
        if incomplete.any():
            row = int(incomplete.to_numpy().argmax()) + 2
            raise MalformedRecordError(file_name, f"line {row} has missing fields")

    def read_classification(
        self, folder: str, file_name: str, layout: ClassificationLayout
    ) -> dict[str, str]:
        """
        Load a ``key -> class code`` table.

        Columns are taken by position as declared in ``layout``. Later rows
        overwrite earlier ones for a repeated key.

        Raises:
            SourceNotFoundError: If the file is absent.
            MalformedRecordError: If the file cannot be parsed, is too
                narrow, or a row lacks its key or class code.
        """
        frame = self._load(folder, file_name)
        needed = max(layout.key_column, layout.class_column) + 1
        if frame.shape[1] < needed:
            raise MalformedRecordError(
                file_name, f"expected at least {needed} columns, found {frame.shape[1]}"
            )
        self._check_complete(frame, [layout.key_column, layout.class_column], file_name)
        return dict(
            zip(frame.iloc[:, layout.key_column], frame.iloc[:, layout.class_column])
        )

    def read_edges(
        self, folder: str, file_name: str, columns: tuple[str, ...]
    ) -> list[tuple[str, ...]]:
        """
        Load an edge list as tuples of the named ``columns``, in file order.

        Raises:
            SourceNotFoundError: If the file is absent.
            MalformedRecordError: If a named column is missing or a row is
                short, long or has an empty endpoint.
        """
        frame = self._load(folder, file_name)
        missing = [column for column in columns if column not in frame.columns]
        if missing:
            raise MalformedRecordError(file_name, f"missing columns: {', '.join(missing)}")
        self._check_complete(
            frame, [frame.columns.get_loc(column) for column in columns], file_name
        )
        return list(frame[list(columns)].itertuples(index=False, name=None))

    def find_record(self, folder: str, file_name: str, key: str) -> dict[str, str] | None:
        """
        Find the first row whose first column equals ``key``.

        The file is scanned in chunks so large feature tables are never
        held in memory whole. Empty cells come back as empty strings.

        Returns:
            The row as ``header -> value``, or None if no row matches.
        """
        path = self._require(folder, file_name)
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("error", pd.errors.ParserWarning)
                for chunk in self._chunks(path):
                    matches = chunk[chunk.iloc[:, 0] == key]
                    if not matches.empty:
                        row = matches.iloc[0]
                        return {
                            str(column): "" if pd.isna(value) else str(value)
                            for column, value in row.items()
                        }
        except PARSE_ERRORS as e:
            raise MalformedRecordError(file_name, str(e)) from e
        return None

    @staticmethod
    def _chunks(path: Path) -> Iterator[pd.DataFrame]:
        with pd.read_csv(path, chunksize=LOOKUP_CHUNK_SIZE, **READ_OPTIONS) as reader:
            yield from reader
