"""Integer and decimal coin amounts tagged with a denomination."""

from __future__ import annotations

import re
from dataclasses import dataclass

from feemarket.legacydec import LegacyDec

_DENOM_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")


def _validate_denom(denom: str) -> None:
    if not _DENOM_RE.match(denom):
        raise ValueError(f"invalid denom: {denom!r}")


@dataclass(frozen=True)
class Coin:
    """A non-negative integer amount of one denomination."""

    denom: str
    amount: int

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class DecCoin:
    """A non-negative decimal amount of one denomination."""

    denom: str
    amount: LegacyDec

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        if self.amount.is_negative():
            raise ValueError(f"negative decimal coin amount: {self.amount}")

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


def new_coins(*coins: Coin) -> tuple[Coin, ...]:
    """Build a sorted coin set, dropping zero amounts and rejecting duplicates."""
    kept = sorted((coin for coin in coins if not coin.is_zero()), key=lambda c: c.denom)
    seen: set[str] = set()
    for coin in kept:
        if coin.denom in seen:
            raise ValueError(f"duplicate denomination {coin.denom}")
        seen.add(coin.denom)
    return tuple(kept)