import json

import pytest

from feemarket.defaults import default_aimd_params, default_params, default_state
from feemarket.genesis import (
    GenesisState,
    default_aimd_genesis_state,
    default_genesis_state,
    genesis_state_from_app_state,
)
from feemarket.params import Params
from feemarket.state import State


def test_default_genesis_state_is_valid():
    gs = default_genesis_state()
    gs.validate_basic()
    assert gs.params == default_params()


def test_default_aimd_genesis_state_is_valid():
    gs = default_aimd_genesis_state()
    gs.validate_basic()
    assert gs.params == default_aimd_params()
    assert len(gs.state.window) == 8


def test_invalid_params_rejected():
    with pytest.raises(ValueError):
        GenesisState(Params(), default_state()).validate_basic()


def test_invalid_state_rejected():
    with pytest.raises(ValueError):
        GenesisState(default_params(), State()).validate_basic()


@pytest.mark.parametrize("factory", [default_genesis_state, default_aimd_genesis_state])
def test_dict_round_trip(factory):
    gs = factory()
    assert GenesisState.from_dict(json.loads(json.dumps(gs.to_dict()))) == gs


def test_dict_uses_string_integers():
    data = default_genesis_state().to_dict()
    assert data["params"]["max_block_utilization"] == "30000000"
    assert data["params"]["fee_denom"] == "stake"


def test_from_app_state_raw_json():
    gs = default_aimd_genesis_state()
    app_state = {"feemarket": json.dumps(gs.to_dict()), "bank": "{}"}
    assert genesis_state_from_app_state(app_state) == gs


def test_from_app_state_missing_module():
    with pytest.raises(KeyError):
        genesis_state_from_app_state({"bank": "{}"})