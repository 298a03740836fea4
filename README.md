# simplebank

A small data layer for a bank: accounts, balance entries and transfers
between accounts, kept in an SQLite database. A money transfer runs inside a
single database transaction, so either every record of the transfer is
written or none is.

It has no dependencies beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Open the connection in autocommit mode (`isolation_level=None`): the package
starts and ends transactions itself.

```python
import sqlite3

from simplebank.queries import NoRowsError, Queries, create_schema
from simplebank.store import Store, TransferTxParams

conn = sqlite3.connect(":memory:", isolation_level=None)
create_schema(conn)

queries = Queries(conn)
alice = queries.create_account("alice", 100, "USD")
bob = queries.create_account("bob", 50, "USD")

store = Store(conn)
result = store.transfer_tx(
    TransferTxParams(from_account_id=alice.id, to_account_id=bob.id, amount=10)
)
print(result.transfer.amount)       # 10
print(result.from_entry.amount)     # -10
print(result.to_entry.amount)       # 10

print(queries.list_transfers(alice.id, alice.id, limit=5, offset=0))

queries.delete_account(bob.id)
try:
    queries.get_account(bob.id)
except NoRowsError:
    print("account is gone")
```

### Schema

`simplebank.queries.create_schema(conn)` turns on foreign keys for the
connection and creates the `accounts`, `entries` and `transfers` tables and
their indexes if they do not exist yet.

### Queries

`simplebank.queries.Queries` wraps a connection and offers:

- accounts: `create_account(owner, balance, currency)`,
  `get_account(account_id)`, `list_accounts(limit, offset)`,
  `update_account(account_id, balance)`, `delete_account(account_id)`
- entries: `create_entry(account_id, amount)`, `get_entry(entry_id)`,
  `list_entries(account_id, limit, offset)`
- transfers: `create_transfer(from_account_id, to_account_id, amount)`,
  `get_transfer(transfer_id)`,
  `list_transfers(from_account_id, to_account_id, limit, offset)`

Lists are ordered by id. `list_transfers` returns transfers that leave
`from_account_id` or arrive at `to_account_id`.

`get_*` on a missing id raises `NoRowsError` (a `LookupError` with the
message `sql: no rows in result set`); so does `update_account`. Deleting a
missing account does nothing. `with_tx(tx)` returns a `Queries` bound to
another connection.

Records come back as the frozen dataclasses `Account`, `Entry` and
`Transfer` from `simplebank.models`; their `created_at` is a timezone-aware
UTC `datetime` set when the row is inserted.

### Store

`simplebank.store.Store` is a `Queries` that can also run transactions.
`Store.transfer_tx(params)` takes a `TransferTxParams` (`from_account_id`,
`to_account_id`, `amount`) and, in one transaction, records the transfer, a
debit entry of `-amount` for the source account and a credit entry of
`amount` for the destination account. It returns a `TransferTxResult` with
`transfer`, `from_entry` and `to_entry`.

If any step fails the transaction is rolled back and the error is raised
again; if the rollback itself fails, a `RuntimeError` naming both errors is
raised. Transactions on one `Store` are serialised with a lock, so the store
may be shared between threads when the connection allows it
(`check_same_thread=False`).

### Random test data

`simplebank.random_utils` generates sample data:

- `random_int(min_value, max_value)`: an integer in the closed range; raises
  `ValueError` if `max_value < min_value`
- `random_string(n)`: `n` lower-case ASCII letters
- `random_owner()`: a six-letter name
- `random_money()`: an integer from 0 to 1000
- `random_currency()`: one of `USD`, `EUR`, `CAD`
- `random_email()`: a six-letter name at `example.com`

## What it does not do

- A transfer does not change account balances: `transfer_tx` writes only
  the transfer and its two entries, and the `from_account` and `to_account`
  fields of `TransferTxResult` are always `None`. Use `update_account` to
  change a balance.
- Amounts, currencies and balances are not checked; nothing stops an
  overdraft or a transfer between accounts of different currencies.
- There is no command-line program, no server and no schema migration
  beyond `create_schema`; the package is a library over an SQLite
  connection you open yourself.