"""Bitcoin AML explorer: transaction features and address-transaction graphs."""

__version__ = "1.0.0"
