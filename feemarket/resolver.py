"""Conversion of fee coins into the fee market's base denomination."""

from __future__ import annotations

from typing import Any, Protocol

from feemarket.coins import DecCoin


class DenomResolver(Protocol):
    """Converts a coin into an equivalent amount in another denomination."""

    def convert_to_denom(self, ctx: Any, coin: DecCoin, denom: str) -> DecCoin:
        """Return the amount of coin expressed in denom."""
        ...

    def extra_denoms(self, ctx: Any) -> list[str]:
        """Denominations accepted for fees besides the base denomination."""
        ...


class TestDenomResolver:
    """Treats every denomination as one-to-one with the target. Not for production."""

    __test__ = False

    extra: tuple[str, ...] = ()

    def convert_to_denom(self, ctx: Any, coin: DecCoin, denom: str) -> DecCoin:
        if coin.denom == denom:
            return coin
        return DecCoin(denom, coin.amount)

    def extra_denoms(self, ctx: Any) -> list[str]:
        return list(self.extra)


class ErrorDenomResolver:
    """Fails for every denomination but the target. Not for production."""

    extra: tuple[str, ...] = ()

    def convert_to_denom(self, ctx: Any, coin: DecCoin, denom: str) -> DecCoin:
        if coin.denom == denom:
            return coin
        raise ValueError("error resolving denom")

    def extra_denoms(self, ctx: Any) -> list[str]:
        return list(self.extra)