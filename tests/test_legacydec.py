import pytest
from hypothesis import given, strategies as st

from feemarket.legacydec import LegacyDec


def test_str_format_has_eighteen_places():
    assert str(LegacyDec.from_str("0.125")) == "0.125000000000000000"


@given(st.integers(min_value=-(10**30), max_value=10**30))
def test_str_round_trip(raw):
    dec = LegacyDec(raw)
    assert LegacyDec.from_str(str(dec)) == dec


@given(st.integers(min_value=-(10**12), max_value=10**12))
def test_from_int_truncate_round_trip(value):
    assert LegacyDec.from_int(value).truncate_int() == value


def test_truncate_toward_zero():
    assert LegacyDec.from_str("2.7").truncate_int() == 2
    assert LegacyDec.from_str("-2.7").truncate_int() == -2


@given(st.integers(min_value=-(10**20), max_value=10**20))
def test_mul_by_one_is_identity(raw):
    dec = LegacyDec(raw)
    assert dec.mul(LegacyDec.one()) == dec


@given(st.integers(min_value=1, max_value=10**12), st.integers(min_value=1, max_value=10**6))
def test_quo_undoes_integer_mul(a, b):
    x = LegacyDec.from_int(a)
    y = LegacyDec.from_int(b)
    assert x.mul(y).quo(y) == x


def test_ordering_and_sign():
    a = LegacyDec.from_str("-0.1")
    b = LegacyDec.from_str("0.05")
    assert a < b
    assert a.is_negative()
    assert not b.is_negative()
    assert a.add(b) == LegacyDec.from_str("-0.05")


@pytest.mark.parametrize("text", ["abc", "1.", "", "0.1234567890123456789"])
def test_invalid_strings(text):
    with pytest.raises(ValueError):
        LegacyDec.from_str(text)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        LegacyDec.one().quo(LegacyDec.zero())


def test_overflow():
    big = LegacyDec(2**300)
    with pytest.raises(OverflowError):
        big.mul(big)