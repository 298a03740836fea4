import pytest

from simplebank.random_utils import (
    ALPHABET,
    CURRENCIES,
    random_currency,
    random_email,
    random_int,
    random_money,
    random_owner,
    random_string,
)


def test_random_int_stays_in_range():
    for _ in range(200):
        value = random_int(-5, 5)
        assert -5 <= value <= 5


def test_random_int_single_value_range():
    assert random_int(42, 42) == 42


def test_random_int_rejects_inverted_range():
    with pytest.raises(ValueError):
        random_int(10, 1)


@pytest.mark.parametrize("length", [0, 1, 6, 50])
def test_random_string_length_and_alphabet(length):
    value = random_string(length)
    assert len(value) == length
    assert set(value) <= set(ALPHABET)


def test_random_string_negative_length_is_empty():
    assert random_string(-3) == ""


def test_random_owner_has_six_letters():
    owner = random_owner()
    assert len(owner) == 6
    assert owner.isalpha() and owner.islower()


def test_random_money_range():
    for _ in range(200):
        assert 0 <= random_money() <= 1000


def test_random_currency_is_known():
    seen = {random_currency() for _ in range(300)}
    assert seen <= set(CURRENCIES)
    assert set(CURRENCIES) == {"USD", "EUR", "CAD"}


def test_random_email_shape():
    email = random_email()
    local, _, domain = email.partition("@")
    assert domain == "example.com"
    assert len(local) == 6
    assert set(local) <= set(ALPHABET)