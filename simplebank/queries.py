"""Typed queries over the bank's SQLite database.

The connection passed to :class:`Queries` is expected to run in autocommit
mode (``isolation_level=None``); transactions are managed explicitly by the
caller, who hands the transactional connection to :meth:`Queries.with_tx`.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Any, Sequence

from .models import Account, Entry, Transfer

_SCHEMA = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    balance INTEGER NOT NULL,
    currency TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS accounts_owner_idx ON accounts (owner);

CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS entries_account_id_idx ON entries (account_id);

CREATE TABLE IF NOT EXISTS transfers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_account_id INTEGER NOT NULL REFERENCES accounts (id),
    to_account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS transfers_from_idx ON transfers (from_account_id);
CREATE INDEX IF NOT EXISTS transfers_to_idx ON transfers (to_account_id);
CREATE INDEX IF NOT EXISTS transfers_from_to_idx
    ON transfers (from_account_id, to_account_id);
"""

_ACCOUNT_COLUMNS = "id, owner, balance, currency, created_at"
_ENTRY_COLUMNS = "id, account_id, amount, created_at"
_TRANSFER_COLUMNS = "id, from_account_id, to_account_id, amount, created_at"


class NoRowsError(LookupError):
    """Raised when a query that must return one row returns none."""

    def __init__(self, message: str = "sql: no rows in result set") -> None:
        super().__init__(message)


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the accounts, entries and transfers tables if missing."""
    conn.execute("PRAGMA foreign_keys = ON")
    conn.executescript(_SCHEMA)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _account(row: Sequence[Any]) -> Account:
    id_, owner, balance, currency, created_at = row
    return Account(id_, owner, balance, currency, datetime.fromisoformat(created_at))


def _entry(row: Sequence[Any]) -> Entry:
    id_, account_id, amount, created_at = row
    return Entry(id_, account_id, amount, datetime.fromisoformat(created_at))


def _transfer(row: Sequence[Any]) -> Transfer:
    id_, from_id, to_id, amount, created_at = row
    return Transfer(id_, from_id, to_id, amount, datetime.fromisoformat(created_at))


class Queries:
    """Query methods bound to one database connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def with_tx(self, tx: sqlite3.Connection) -> Queries:
        """Return a new Queries bound to the given transactional connection."""
        return Queries(tx)

    def _one(self, sql: str, params: Sequence[Any]) -> Sequence[Any]:
        row = self._conn.execute(sql, params).fetchone()
        if row is None:
            raise NoRowsError()
        return row

    # Accounts

    def create_account(self, owner: str, balance: int, currency: str) -> Account:
        """Insert an account and return it."""
        cur = self._conn.execute(
            "INSERT INTO accounts (owner, balance, currency, created_at) "
            "VALUES (?, ?, ?, ?)",
            (owner, balance, currency, _now()),
        )
        return self.get_account(cur.lastrowid)

    def get_account(self, account_id: int) -> Account:
        """Return the account with this id, or raise NoRowsError."""
        return _account(
            self._one(
                f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
                (account_id,),
            )
        )

    def list_accounts(self, limit: int, offset: int) -> list[Account]:
        """Return accounts ordered by id, paginated."""
        cur = self._conn.execute(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
        )
        return [_account(row) for row in cur]

    def update_account(self, account_id: int, balance: int) -> Account:
        """Set an account's balance and return the updated account."""
        cur = self._conn.execute(
            "UPDATE accounts SET balance = ? WHERE id = ?", (balance, account_id)
        )
        if cur.rowcount == 0:
            raise NoRowsError()
        return self.get_account(account_id)

    def delete_account(self, account_id: int) -> None:
        """Delete the account with this id, if it exists."""
        self._conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    # Entries

    def create_entry(self, account_id: int, amount: int) -> Entry:
        """Insert an entry and return it."""
        cur = self._conn.execute(
            "INSERT INTO entries (account_id, amount, created_at) VALUES (?, ?, ?)",
            (account_id, amount, _now()),
        )
        return self.get_entry(cur.lastrowid)

    def get_entry(self, entry_id: int) -> Entry:
        """Return the entry with this id, or raise NoRowsError."""
        return _entry(
            self._one(
                f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ? LIMIT 1",
                (entry_id,),
            )
        )

    def list_entries(self, account_id: int, limit: int, offset: int) -> list[Entry]:
        """Return one account's entries ordered by id, paginated."""
        cur = self._conn.execute(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (account_id, limit, offset),
        )
        return [_entry(row) for row in cur]

    # Transfers

    def create_transfer(
        self, from_account_id: int, to_account_id: int, amount: int
    ) -> Transfer:
        """Insert a transfer and return it."""
        cur = self._conn.execute(
            "INSERT INTO transfers (from_account_id, to_account_id, amount, created_at) "
            "VALUES (?, ?, ?, ?)",
            (from_account_id, to_account_id, amount, _now()),
        )
        return self.get_transfer(cur.lastrowid)

    def get_transfer(self, transfer_id: int) -> Transfer:
        """Return the transfer with this id, or raise NoRowsError."""
        return _transfer(
            self._one(
                f"SELECT {_TRANSFER_COLUMNS} FROM transfers WHERE id = ? LIMIT 1",
                (transfer_id,),
            )
        )

    def list_transfers(
        self, from_account_id: int, to_account_id: int, limit: int, offset: int
    ) -> list[Transfer]:
        """Return transfers from one account or to another, ordered by id."""
        cur = self._conn.execute(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers "
            "WHERE from_account_id = ? OR to_account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (from_account_id, to_account_id, limit, offset),
        )
        return [_transfer(row) for row in cur]