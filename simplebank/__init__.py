"""Accounts, entries and transactional transfers stored in SQLite."""

__version__ = "0.1.0"
__all__ = ["models", "queries", "random_utils", "store"]