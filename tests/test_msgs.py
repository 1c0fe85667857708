import pytest

from feemarket.address import AddressError, acc_address_to_bech32
from feemarket.defaults import default_params
from feemarket.msgs import MsgParams


def test_rejects_invalid_authority():
    msg = MsgParams("invalid", default_params())
    with pytest.raises(AddressError):
        msg.validate_basic()


def test_accepts_valid_authority():
    msg = MsgParams(acc_address_to_bech32(b"test"), default_params())
    msg.validate_basic()
    assert msg.get_signers() == [b"test"]


def test_get_signers_invalid_authority():
    with pytest.raises(AddressError):
        MsgParams("invalid", default_params()).get_signers()