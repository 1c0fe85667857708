"""Fee market state: utilization window, base gas price and learning rate."""

from __future__ import annotations

from dataclasses import dataclass

from feemarket.legacydec import LegacyDec
from feemarket.params import Params


@dataclass
class State:
    """Sliding window of block utilization plus current price and learning rate."""

    window: list[int] | None = None
    base_gas_price: LegacyDec | None = None
    index: int = 0
    learning_rate: LegacyDec | None = None

    def update(self, gas: int, params: Params) -> None:
        """Add gas to the current block; raise ValueError past the maximum."""
        if gas < 0:
            raise ValueError("gas cannot be negative")
        updated = self.window[self.index] + gas
        if updated > params.max_block_utilization:
            raise ValueError(
                f"block utilization of {updated} cannot exceed max block "
                f"utilization of {params.max_block_utilization}"
            )
        self.window[self.index] = updated

    def increment_height(self) -> None:
        """Move to the next slot of the window and clear it."""
        self.index = (self.index + 1) % len(self.window)
        self.window[self.index] = 0

    def update_base_gas_price(self, params: Params) -> LegacyDec:
        """Recompute the base gas price from the current block and window."""
        try:
            current = LegacyDec.from_int(self.window[self.index])
            target = LegacyDec.from_int(params.target_block_utilization())
            utilization = current.sub(target).quo(target)
            adjustment = LegacyDec.one().add(self.learning_rate.mul(utilization))
            net = LegacyDec.from_int(self.get_net_utilization(params)).mul(params.delta)
            price = self.base_gas_price.mul(adjustment).add(net)
            if price < params.min_base_gas_price:
                price = params.min_base_gas_price
        except ArithmeticError:
            price = params.min_base_gas_price
        self.base_gas_price = price
        return price

    def update_learning_rate(self, params: Params) -> LegacyDec:
        """Apply the AIMD rule to the learning rate."""
        try:
            avg = self.get_average_utilization(params)
            if avg <= params.gamma or avg >= LegacyDec.one().sub(params.gamma):
                lr = params.alpha.add(self.learning_rate)
                if lr > params.max_learning_rate:
                    lr = params.max_learning_rate
            else:
                lr = self.learning_rate.mul(params.beta)
                if lr < params.min_learning_rate:
                    lr = params.min_learning_rate
        except ArithmeticError:
            lr = params.min_learning_rate
        self.learning_rate = lr
        return lr

    def get_net_utilization(self, params: Params) -> int:
        """Sum over the window of utilization minus target."""
        target = params.target_block_utilization()
        return sum(used - target for used in self.window)

    def get_average_utilization(self, params: Params) -> LegacyDec:
        """Average utilization of the window as a fraction of the maximum."""
        total = LegacyDec.from_int(sum(self.window))
        divisor = LegacyDec.from_int(params.max_block_utilization).mul(
            LegacyDec.from_int(len(self.window))
        )
        return total.quo(divisor)

    def validate_basic(self) -> None:
        """Raise ValueError if the state is not valid."""
        if self.window is None:
            raise ValueError("block utilization window cannot be nil or empty")
        if self.base_gas_price is None or self.base_gas_price <= LegacyDec.zero():
            raise ValueError("base gas price must be positive")
        if self.learning_rate is None or self.learning_rate <= LegacyDec.zero():
            raise ValueError("learning rate must be positive")


def new_state(window_size: int, base_gas_price: LegacyDec, learning_rate: LegacyDec) -> State:
    """Create a state with an empty window of the given size."""
    return State(
        window=[0] * window_size,
        base_gas_price=base_gas_price,
        index=0,
        learning_rate=learning_rate,
    )