import pytest
from hypothesis import given
from hypothesis import strategies as st

from feemarket.coins import Coin, DecCoin, new_coins
from feemarket.legacydec import LegacyDec


def test_coin_string_form():
    assert str(Coin("stake", 10)) == "10stake"


def test_coin_rejects_negative_amount():
    with pytest.raises(ValueError):
        Coin("stake", -1)


@pytest.mark.parametrize("denom", ["", "ab", "1abc", "a b c"])
def test_coin_rejects_bad_denom(denom):
    with pytest.raises(ValueError):
        Coin(denom, 1)


def test_coin_zero_and_positive():
    assert Coin("test", 0).is_zero()
    assert Coin("test", 5).is_positive()
    assert not Coin("test", 5).is_zero()


def test_dec_coin_string_uses_decimal_form():
    amount = LegacyDec.from_int(5)
    assert str(DecCoin("atom", amount)) == str(amount) + "atom"


def test_dec_coin_rejects_negative():
    with pytest.raises(ValueError):
        DecCoin("atom", LegacyDec.from_str("-0.5"))


def test_new_coins_drops_zero_and_sorts():
    coins = new_coins(Coin("stake", 3), Coin("test", 0), Coin("atom", 7))
    assert coins == (Coin("atom", 7), Coin("stake", 3))


def test_new_coins_empty():
    assert new_coins() == ()


def test_new_coins_rejects_duplicates():
    with pytest.raises(ValueError):
        new_coins(Coin("stake", 1), Coin("stake", 2))


@given(st.lists(st.integers(min_value=0, max_value=10**20), max_size=5))
def test_new_coins_invariants(amounts):
    denoms = ["aaa", "bbb", "ccc", "ddd", "eee"]
    coins = new_coins(*(Coin(d, a) for d, a in zip(denoms, amounts)))
    assert all(c.amount > 0 for c in coins)
    assert [c.denom for c in coins] == sorted(c.denom for c in coins)