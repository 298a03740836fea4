"""Random values for seeding accounts, entries and transfers in tests."""

from __future__ import annotations

import random
import string

ALPHABET = string.ascii_lowercase
CURRENCIES = ("USD", "EUR", "CAD")


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer in the closed range [min_value, max_value].

    Raises ValueError when max_value is smaller than min_value.
    """
    if max_value < min_value:
        raise ValueError(
            f"invalid range: max_value {max_value} is less than min_value {min_value}"
        )
    return random.randint(min_value, max_value)


def random_string(n: int) -> str:
    """Return a random string of ``n`` lower-case ASCII letters."""
    return "".join(random.choices(ALPHABET, k=max(n, 0)))


def random_owner() -> str:
    """Return a random owner name."""
    return random_string(6)


def random_money() -> int:
    """Return a random amount of money between 0 and 1000."""
    return random_int(0, 1000)


def random_currency() -> str:
    """Return a random currency code."""
    return random.choice(CURRENCIES)


def random_email() -> str:
    """Return a random e-mail address."""
    return f"{random_string(6)}@example.com"