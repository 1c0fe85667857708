import pytest

from feemarket.defaults import DEFAULT_FEE_DENOM, default_aimd_params, default_params
from feemarket.legacydec import LegacyDec
from feemarket.params import Params

D = LegacyDec.from_str


def test_valid_defaults():
    default_params().validate_basic()
    default_aimd_params().validate_basic()
    assert default_params().target_block_utilization() == 15_000_000


def _full(**overrides):
    base = dict(
        window=1,
        alpha=D("0.1"),
        beta=D("0.1"),
        gamma=D("0.1"),
        delta=D("0.1"),
        max_block_utilization=3,
        min_base_gas_price=D("1.0"),
        min_learning_rate=D("0.01"),
        max_learning_rate=D("0.05"),
        fee_denom=DEFAULT_FEE_DENOM,
    )
    base.update(overrides)
    return Params(**base)


def test_full_valid_params():
    p = _full()
    p.validate_basic()
    assert p.target_block_utilization() == 1


INVALID = {
    "invalid window": Params(),
    "nil alpha": Params(window=1, fee_denom=DEFAULT_FEE_DENOM),
    "negative alpha": Params(window=1, alpha=D("-0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "beta is nil": Params(window=1, alpha=D("0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "beta is negative": Params(window=1, alpha=D("0.1"), beta=D("-0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "beta > 1": Params(window=1, alpha=D("0.1"), beta=D("1.1"), fee_denom=DEFAULT_FEE_DENOM),
    "theta nil": Params(window=1, alpha=D("0.1"), beta=D("0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "theta negative": Params(window=1, alpha=D("0.1"), beta=D("0.1"), gamma=D("-0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "theta > 1": Params(window=1, alpha=D("0.1"), beta=D("0.1"), gamma=D("1.1"), fee_denom=DEFAULT_FEE_DENOM),
    "delta nil": Params(window=1, alpha=D("0.1"), beta=D("0.1"), gamma=D("0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "delta negative": Params(window=1, alpha=D("0.1"), beta=D("0.1"), gamma=D("0.1"), delta=D("-0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "max block size zero": Params(window=1, alpha=D("0.1"), beta=D("0.1"), gamma=D("0.1"), delta=D("0.1"), fee_denom=DEFAULT_FEE_DENOM),
    "min base gas price nil": _full(min_base_gas_price=None, min_learning_rate=None, max_learning_rate=None),
    "min base gas price negative": _full(min_base_gas_price=D("-1.0"), min_learning_rate=None, max_learning_rate=None),
    "min lr nil": _full(min_learning_rate=None, max_learning_rate=None),
    "min lr negative": _full(min_learning_rate=D("-0.1"), max_learning_rate=None),
    "max lr nil": _full(min_learning_rate=D("0.1"), max_learning_rate=None),
    "max lr negative": _full(min_learning_rate=D("0.1"), max_learning_rate=D("-0.1")),
    "min lr > max lr": _full(min_learning_rate=D("0.1"), max_learning_rate=D("0.05")),
    "fee denom empty": _full(fee_denom=""),
}


@pytest.mark.parametrize("name", sorted(INVALID))
def test_invalid(name):
    with pytest.raises(ValueError):
        INVALID[name].validate_basic()