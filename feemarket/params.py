"""Fee market parameters."""

from __future__ import annotations

from dataclasses import dataclass

from feemarket.legacydec import LegacyDec

_HALF = LegacyDec.from_str("0.5")


@dataclass
class Params:
    """Parameters for both the base and the AIMD EIP-1559 fee markets.

    Decimal fields left as None count as unset.
    """

    window: int = 0
    alpha: LegacyDec | None = None
    beta: LegacyDec | None = None
    gamma: LegacyDec | None = None
    delta: LegacyDec | None = None
    max_block_utilization: int = 0
    min_base_gas_price: LegacyDec | None = None
    min_learning_rate: LegacyDec | None = None
    max_learning_rate: LegacyDec | None = None
    fee_denom: str = ""
    enabled: bool = False
    distribute_fees: bool = False

    def validate_basic(self) -> None:
        """Raise ValueError if the parameters are not valid."""
        if self.window == 0:
            raise ValueError("window cannot be zero")
        if self.alpha is None or self.alpha.is_negative():
            raise ValueError("alpha cannot be nil must be between [0, inf)")
        if self.beta is None or self.beta.is_negative() or self.beta > LegacyDec.one():
            raise ValueError("beta cannot be nil and must be between [0, 1]")
        if self.gamma is None or self.gamma.is_negative() or self.gamma > _HALF:
            raise ValueError("theta cannot be nil and must be between [0, 0.5]")
        if self.delta is None or self.delta.is_negative():
            raise ValueError("delta cannot be nil and must be between [0, inf)")
        if self.min_base_gas_price is None or self.min_base_gas_price.is_negative():
            raise ValueError(
                "min base gas price cannot be nil and must be greater than or equal to zero"
            )
        if (
            self.max_learning_rate is None
            or self.min_learning_rate is None
            or self.min_learning_rate.is_negative()
        ):
            raise ValueError("min learning rate cannot be negative or nil")
        if self.max_block_utilization < 2:
            raise ValueError("max block utilization cannot be less than 2")
        if self.max_learning_rate.is_negative():
            raise ValueError("max learning rate cannot be negative or nil")
        if self.min_learning_rate > self.max_learning_rate:
            raise ValueError("min learning rate cannot be greater than max learning rate")
        if not self.fee_denom:
            raise ValueError("fee denom must be set")

    def target_block_utilization(self) -> int:
        """Half of the maximum block utilization."""
        return self.max_block_utilization // 2