"""EIP-1559 and AIMD fee market: decimals, parameters, state, genesis, messages and fee payout."""

__version__ = "0.1.0"