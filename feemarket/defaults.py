"""Default parameters and state for the base and AIMD EIP-1559 fee markets."""

from __future__ import annotations

from feemarket.legacydec import LegacyDec
from feemarket.params import Params
from feemarket.state import State, new_state

DEFAULT_WINDOW = 1
DEFAULT_ALPHA = LegacyDec.from_str("0.0")
DEFAULT_BETA = LegacyDec.from_str("1.0")
DEFAULT_GAMMA = LegacyDec.from_str("0.0")
DEFAULT_DELTA = LegacyDec.from_str("0.0")
DEFAULT_MAX_BLOCK_UTILIZATION = 30_000_000
DEFAULT_MIN_BASE_GAS_PRICE = LegacyDec.one()
DEFAULT_MIN_LEARNING_RATE = LegacyDec.from_str("0.125")
DEFAULT_MAX_LEARNING_RATE = LegacyDec.from_str("0.125")
DEFAULT_FEE_DENOM = "stake"

DEFAULT_AIMD_WINDOW = 8
DEFAULT_AIMD_ALPHA = LegacyDec.from_str("0.025")
DEFAULT_AIMD_BETA = LegacyDec.from_str("0.95")
DEFAULT_AIMD_GAMMA = LegacyDec.from_str("0.25")
DEFAULT_AIMD_DELTA = LegacyDec.from_str("0.0")
DEFAULT_AIMD_MAX_BLOCK_SIZE = 30_000_000
DEFAULT_AIMD_MIN_BASE_FEE = LegacyDec.from_str("1000000000")
DEFAULT_AIMD_MIN_LEARNING_RATE = LegacyDec.from_str("0.01")
DEFAULT_AIMD_MAX_LEARNING_RATE = LegacyDec.from_str("0.50")
DEFAULT_AIMD_FEE_DENOM = DEFAULT_FEE_DENOM


def default_params() -> Params:
    """Parameters for plain EIP-1559 without learning rate adjustment."""
    return Params(
        window=DEFAULT_WINDOW,
        alpha=DEFAULT_ALPHA,
        beta=DEFAULT_BETA,
        gamma=DEFAULT_GAMMA,
        delta=DEFAULT_DELTA,
        max_block_utilization=DEFAULT_MAX_BLOCK_UTILIZATION,
        min_base_gas_price=DEFAULT_MIN_BASE_GAS_PRICE,
        min_learning_rate=DEFAULT_MIN_LEARNING_RATE,
        max_learning_rate=DEFAULT_MAX_LEARNING_RATE,
        fee_denom=DEFAULT_FEE_DENOM,
        enabled=True,
    )


def default_state() -> State:
    """State for plain EIP-1559."""
    return new_state(DEFAULT_WINDOW, DEFAULT_MIN_BASE_GAS_PRICE, DEFAULT_MIN_LEARNING_RATE)


def default_aimd_params() -> Params:
    """Parameters for EIP-1559 with AIMD learning rate adjustment."""
    return Params(
        window=DEFAULT_AIMD_WINDOW,
        alpha=DEFAULT_AIMD_ALPHA,
        beta=DEFAULT_AIMD_BETA,
        gamma=DEFAULT_AIMD_GAMMA,
        delta=DEFAULT_AIMD_DELTA,
        max_block_utilization=DEFAULT_AIMD_MAX_BLOCK_SIZE,
        min_base_gas_price=DEFAULT_AIMD_MIN_BASE_FEE,
        min_learning_rate=DEFAULT_AIMD_MIN_LEARNING_RATE,
        max_learning_rate=DEFAULT_AIMD_MAX_LEARNING_RATE,
        fee_denom=DEFAULT_AIMD_FEE_DENOM,
        enabled=True,
    )


def default_aimd_state() -> State:
    """State for EIP-1559 with AIMD learning rate adjustment."""
    return new_state(
        DEFAULT_AIMD_WINDOW, DEFAULT_AIMD_MIN_BASE_FEE, DEFAULT_AIMD_MIN_LEARNING_RATE
    )