import dataclasses
from datetime import datetime, timezone

import pytest

from simplebank.models import Account, Entry, Transfer

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_account_equality_and_fields():
    a = Account(id=1, owner="alice", balance=100, currency="USD", created_at=NOW)
    b = Account(1, "alice", 100, "USD", NOW)
    assert a == b
    assert (a.id, a.owner, a.balance, a.currency, a.created_at) == (
        1,
        "alice",
        100,
        "USD",
        NOW,
    )


def test_account_is_immutable():
    account = Account(1, "alice", 100, "USD", NOW)
    with pytest.raises(dataclasses.FrozenInstanceError):
        account.balance = 5
    assert account.balance == 100
    assert account == Account(1, "alice", 100, "USD", NOW)


def test_account_replace_changes_only_balance():
    account = Account(1, "alice", 100, "USD", NOW)
    updated = dataclasses.replace(account, balance=250)
    assert updated.balance == 250
    assert dataclasses.replace(updated, balance=100) == account


def test_entry_fields_order():
    entry = Entry(7, 3, -10, NOW)
    assert [f.name for f in dataclasses.fields(entry)] == [
        "id",
        "account_id",
        "amount",
        "created_at",
    ]
    assert entry.amount == -10


def test_transfer_fields_and_inequality():
    t1 = Transfer(1, 2, 3, 10, NOW)
    t2 = Transfer(1, 3, 2, 10, NOW)
    assert t1.from_account_id == t2.to_account_id
    assert t1 != t2
    assert [f.name for f in dataclasses.fields(t1)] == [
        "id",
        "from_account_id",
        "to_account_id",
        "amount",
        "created_at",
    ]