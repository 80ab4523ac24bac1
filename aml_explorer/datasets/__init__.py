"""Dataset access package."""

from aml_explorer.datasets.reader import DatasetReader

__all__ = [
    "DatasetReader",
]
