"""Paying out fees and tips collected by the fee market after a transaction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from feemarket.address import acc_address_to_bech32
from feemarket.coins import Coin, DecCoin, new_coins
from feemarket.errors import (
    ATTRIBUTE_KEY_TIP,
    ATTRIBUTE_KEY_TIP_PAYEE,
    EVENT_TYPE_FEE_PAY,
    EVENT_TYPE_TIP_PAY,
    FEE_COLLECTOR_NAME,
)
from feemarket.params import Params
from feemarket.state import State

BANK_SEND_GAS_CONSUMPTION = 12490
AUTH_FEE_COLLECTOR_NAME = "fee_collector"
ATTRIBUTE_KEY_FEE = "fee"


class AccountKeeper(Protocol):
    """Account lookups used around fee handling."""

    def get_account(self, ctx: Any, addr: bytes) -> Any: ...

    def get_module_address(self, name: str) -> bytes: ...

    def get_module_account(self, ctx: Any, name: str) -> Any: ...


class BankKeeper(Protocol):
    """Coin transfers used to pay out fees and tips."""

    def is_send_enabled_coins(self, ctx: Any, *coins: Coin) -> None: ...

    def send_coins(self, ctx: Any, from_addr: bytes, to_addr: bytes, amt: tuple[Coin, ...]) -> None: ...

    def send_coins_from_account_to_module(
        self, ctx: Any, sender_addr: bytes, recipient_module: str, amt: tuple[Coin, ...]
    ) -> None: ...

    def send_coins_from_module_to_module(
        self, ctx: Any, sender_module: str, recipient_module: str, amt: tuple[Coin, ...]
    ) -> None: ...

    def send_coins_from_module_to_account(
        self, ctx: Any, sender_module: str, recipient_addr: bytes, amt: tuple[Coin, ...]
    ) -> None: ...


class FeeMarketKeeper(Protocol):
    """Access to fee market parameters and state."""

    def get_state(self, ctx: Any) -> State: ...

    def get_params(self, ctx: Any) -> Params: ...

    def set_params(self, ctx: Any, params: Params) -> None: ...

    def set_state(self, ctx: Any, state: State) -> None: ...

    def resolve_to_denom(self, ctx: Any, coin: DecCoin, denom: str) -> DecCoin: ...

    def get_min_gas_price(self, ctx: Any, denom: str) -> DecCoin: ...

    def get_enabled_height(self, ctx: Any) -> int: ...


@dataclass(frozen=True)
class Event:
    """A typed event with ordered key/value attributes."""

    type: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass
class Context:
    """Block information and the events emitted while handling a transaction."""

    block_height: int = 0
    proposer_address: bytes = b""
    events: list[Event] = field(default_factory=list)

    def emit_events(self, events: list[Event]) -> None:
        self.events.extend(events)


def deduct_coins(
    bank_keeper: BankKeeper, ctx: Any, coins: tuple[Coin, ...], distribute_fees: bool
) -> None:
    """Forward collected fees to the default fee collector when distributing.

    Otherwise the coins stay in the fee market collector (a soft burn).
    """
    if distribute_fees:
        bank_keeper.send_coins_from_module_to_module(
            ctx, FEE_COLLECTOR_NAME, AUTH_FEE_COLLECTOR_NAME, coins
        )


def send_tip(bank_keeper: BankKeeper, ctx: Any, proposer: bytes, coins: tuple[Coin, ...]) -> None:
    """Send a tip from the fee market collector to the block proposer."""
    bank_keeper.send_coins_from_module_to_account(ctx, FEE_COLLECTOR_NAME, proposer, coins)


@dataclass
class FeeMarketDeductDecorator:
    """Pays out the fee and tip of a transaction from the fee market collector."""

    account_keeper: AccountKeeper | None
    bank_keeper: BankKeeper
    feemarket_keeper: FeeMarketKeeper

    def pay_out_fee_and_tip(self, ctx: Context, fee: Coin | None, tip: Coin | None) -> None:
        """Settle the fee and the tip, then emit an event for each one paid."""
        try:
            params = self.feemarket_keeper.get_params(ctx)
        except Exception as err:
            raise RuntimeError(f"error getting feemarket params: {err}") from err

        events: list[Event] = []
        if fee is not None:
            deduct_coins(self.bank_keeper, ctx, new_coins(fee), params.distribute_fees)
            events.append(Event(EVENT_TYPE_FEE_PAY, ((ATTRIBUTE_KEY_FEE, str(fee)),)))

        proposer = ctx.proposer_address
        if tip is not None:
            send_tip(self.bank_keeper, ctx, proposer, new_coins(tip))
            events.append(
                Event(
                    EVENT_TYPE_TIP_PAY,
                    (
                        (ATTRIBUTE_KEY_TIP, str(tip)),
                        (ATTRIBUTE_KEY_TIP_PAYEE, acc_address_to_bech32(proposer)),
                    ),
                )
            )

        ctx.emit_events(events)