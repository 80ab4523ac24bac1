"""Block explorer gateways package."""

from aml_explorer.providers.blockbook import BlockbookExplorer

__all__ = [
    "BlockbookExplorer",
]
