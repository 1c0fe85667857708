"""Genesis state of the fee market module."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from feemarket.defaults import (
    default_aimd_params,
    default_aimd_state,
    default_params,
    default_state,
)
from feemarket.errors import MODULE_NAME
from feemarket.legacydec import LegacyDec
from feemarket.params import Params
from feemarket.state import State

_PARAM_DECIMALS = (
    "alpha",
    "beta",
    "gamma",
    "delta",
    "min_base_gas_price",
    "min_learning_rate",
    "max_learning_rate",
)


def _dec_out(value: LegacyDec | None) -> str | None:
    return None if value is None else str(value)


def _dec_in(value: Any) -> LegacyDec | None:
    if value is None or value == "":
        return None
    return LegacyDec.from_str(str(value))


def _params_to_dict(params: Params) -> dict[str, Any]:
    data: dict[str, Any] = {name: _dec_out(getattr(params, name)) for name in _PARAM_DECIMALS}
    data.update(
        window=str(params.window),
        max_block_utilization=str(params.max_block_utilization),
        fee_denom=params.fee_denom,
        enabled=params.enabled,
        distribute_fees=params.distribute_fees,
    )
    return data


def _params_from_dict(data: Mapping[str, Any]) -> Params:
    return Params(
        window=int(data.get("window", 0)),
        max_block_utilization=int(data.get("max_block_utilization", 0)),
        fee_denom=data.get("fee_denom", ""),
        enabled=bool(data.get("enabled", False)),
        distribute_fees=bool(data.get("distribute_fees", False)),
        **{name: _dec_in(data.get(name)) for name in _PARAM_DECIMALS},
    )


def _state_to_dict(state: State) -> dict[str, Any]:
    return {
        "base_gas_price": _dec_out(state.base_gas_price),
        "learning_rate": _dec_out(state.learning_rate),
        "window": None if state.window is None else [str(v) for v in state.window],
        "index": str(state.index),
    }


def _state_from_dict(data: Mapping[str, Any]) -> State:
    window = data.get("window")
    return State(
        window=None if window is None else [int(v) for v in window],
        base_gas_price=_dec_in(data.get("base_gas_price")),
        index=int(data.get("index", 0)),
        learning_rate=_dec_in(data.get("learning_rate")),
    )


@dataclass
class GenesisState:
    """Parameters and state the module starts from."""

    params: Params
    state: State

    def validate_basic(self) -> None:
        """Raise ValueError if the parameters or the state are invalid."""
        self.params.validate_basic()
        self.state.validate_basic()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; integers are written as strings."""
        return {"params": _params_to_dict(self.params), "state": _state_to_dict(self.state)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenesisState":
        return cls(
            params=_params_from_dict(data.get("params") or {}),
            state=_state_from_dict(data.get("state") or {}),
        )


def default_genesis_state() -> GenesisState:
    """Genesis for plain EIP-1559."""
    return GenesisState(default_params(), default_state())


def default_aimd_genesis_state() -> GenesisState:
    """Genesis for EIP-1559 with AIMD learning rate adjustment."""
    return GenesisState(default_aimd_params(), default_aimd_state())


def genesis_state_from_app_state(app_state: Mapping[str, Any]) -> GenesisState:
    """Extract this module's genesis from the application genesis mapping."""
    raw = app_state[MODULE_NAME]
    data = json.loads(raw) if isinstance(raw, (str, bytes, bytearray)) else raw
    return GenesisState.from_dict(data)