"""Transactions that span several queries, such as money transfers."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, TypeVar

from .models import Account, Entry, Transfer
from .queries import Queries

_T = TypeVar("_T")


@dataclass(frozen=True)
class TransferTxParams:
    """Input of a transfer: who pays, who receives and how much."""

    from_account_id: int
    to_account_id: int
    amount: int


@dataclass(frozen=True)
class TransferTxResult:
    """Everything a transfer transaction created.

    The account fields stay ``None``: a transfer does not change balances.
    """

    transfer: Transfer
    from_entry: Entry
    to_entry: Entry
    from_account: Optional[Account] = None
    to_account: Optional[Account] = None


class Store(Queries):
    """Runs single queries and multi-query transactions on one connection.

    The connection must be in autocommit mode (``isolation_level=None``).
    Transactions on the same store are serialised.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        super().__init__(conn)
        self._lock = threading.Lock()

    @contextmanager
    def _transaction(self) -> Iterator[Queries]:
        with self._lock:
            self._conn.execute("BEGIN")
            try:
                yield self.with_tx(self._conn)
            except BaseException as err:
                try:
                    self._conn.execute("ROLLBACK")
                except sqlite3.Error as rb_err:
                    raise RuntimeError(f"tx err: {err}, rb err: {rb_err}") from err
                raise
            else:
                self._conn.execute("COMMIT")

    def _exec_tx(self, fn: Callable[[Queries], _T]) -> _T:
        with self._transaction() as q:
            return fn(q)

    def transfer_tx(self, params: TransferTxParams) -> TransferTxResult:
        """Record a transfer and its two entries in one transaction."""

        def run(q: Queries) -> TransferTxResult:
            transfer = q.create_transfer(
                params.from_account_id, params.to_account_id, params.amount
            )
            from_entry = q.create_entry(params.from_account_id, -params.amount)
            to_entry = q.create_entry(params.to_account_id, params.amount)
            return TransferTxResult(
                transfer=transfer, from_entry=from_entry, to_entry=to_entry
            )

        return self._exec_tx(run)