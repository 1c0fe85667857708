"""Error types and store/event keys of the fee market module."""

from __future__ import annotations

MODULE_NAME = "feemarket"
STORE_KEY = MODULE_NAME
FEE_COLLECTOR_NAME = "feemarket-fee-collector"

KEY_PARAMS = bytes([1])
KEY_STATE = bytes([2])
KEY_ENABLED_HEIGHT = bytes([3])

EVENT_TYPE_FEE_PAY = "fee_pay"
EVENT_TYPE_TIP_PAY = "tip_pay"
ATTRIBUTE_KEY_TIP = "tip"
ATTRIBUTE_KEY_TIP_PAYER = "tip_payer"
ATTRIBUTE_KEY_TIP_PAYEE = "tip_payee"


class FeeMarketError(Exception):
    """Base class for registered fee market errors."""

    codespace = MODULE_NAME
    code = 0
    description = "fee market error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = f"{detail}: {self.description}" if detail else self.description
        super().__init__(text)


class NoFeeCoinsError(FeeMarketError):
    """No fee coin was supplied with a transaction."""

    code = 1
    description = "no fee coin provided. Must provide one."


class TooManyFeeCoinsError(FeeMarketError):
    """More than one fee coin was supplied with a transaction."""

    code = 2
    description = "too many fee coins provided.  Only one fee coin may be provided"


class ResolverNotSetError(FeeMarketError):
    """No denom resolver is configured."""

    code = 3
    description = (
        "denom resolver interface not set.  Only the feemarket base fee "
        "denomination can be used"
    )