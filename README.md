# feemarket

A fee market for gas-metered transactions, following EIP-1559 and an
additive-increase / multiplicative-decrease (AIMD) variant whose learning
rate adapts to block utilization over a sliding window. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Decimals

`feemarket.legacydec.LegacyDec` is a signed fixed-point decimal with 18
places, stored as an integer scaled by 10**18. Build one with
`LegacyDec.from_str("0.125")`, `LegacyDec.from_int(5)`, `LegacyDec.zero()`
or `LegacyDec.one()`. It supports `add`, `sub`, `mul` (rounding half to
even), `mul_int`, `quo`, `truncate_int`, the matching `+ - * /` operators,
comparisons and `is_negative` / `is_zero` / `is_positive`. Values beyond the
supported range raise `OverflowError`; dividing by zero raises
`ZeroDivisionError`.

## Parameters and state

- `feemarket.params.Params` is a dataclass holding the market settings:
  `window`, `alpha`, `beta`, `gamma`, `delta`, `max_block_utilization`,
  `min_base_gas_price`, `min_learning_rate`, `max_learning_rate`,
  `fee_denom`, `enabled` and `distribute_fees`. Decimal fields left as
  `None` count as unset. `validate_basic()` raises `ValueError` on invalid
  settings; `target_block_utilization()` is half the maximum (integer
  division).
- `feemarket.state.State` tracks the gas used per block in `window`, the
  current slot `index`, `base_gas_price` and `learning_rate`. Create one
  with `new_state(window_size, base_gas_price, learning_rate)`.

`State` methods:

- `update(gas, params)` adds gas to the current block; it raises
  `ValueError` if the block would exceed `max_block_utilization` or if the
  gas is negative.
- `increment_height()` moves to the next slot (wrapping around) and clears it.
- `update_learning_rate(params)` applies the AIMD rule: when the average
  utilization is at most `gamma` or at least `1 - gamma`, `alpha` is added
  (capped at `max_learning_rate`); otherwise the rate is multiplied by
  `beta` (floored at `min_learning_rate`).
- `update_base_gas_price(params)` scales the price by
  `1 + learning_rate * (current - target) / target`, adds
  `net_utilization * delta`, and never goes below `min_base_gas_price`; an
  arithmetic failure resets it to the minimum.
- `get_average_utilization(params)` and `get_net_utilization(params)`
  report how full the window is.
- `validate_basic()` raises `ValueError` unless the window is set and the
  price and learning rate are positive.

## Defaults

`feemarket.defaults` provides two ready-made configurations:

- `default_params()` / `default_state()` – plain EIP-1559: a one-block
  window, a fixed learning rate of 0.125 and a minimum base gas price of 1.
- `default_aimd_params()` / `default_aimd_state()` – AIMD: an eight-block
  window, a learning rate kept between 0.01 and 0.50 and a minimum base fee
  of 1000000000.

Both use the fee denomination `stake` and a maximum block utilization of
30,000,000. The individual values are exposed as module constants such as
`DEFAULT_AIMD_ALPHA`.

## Example

```python
from feemarket.defaults import default_aimd_params, default_aimd_state

params = default_aimd_params()
state = default_aimd_state()

state.update(20_000_000, params)          # record gas used in this block
lr = state.update_learning_rate(params)   # adjust the learning rate
price = state.update_base_gas_price(params)
state.increment_height()                  # move on to the next block
```

## Genesis

`feemarket.genesis.GenesisState` pairs a `Params` and a `State`.
`validate_basic()` validates both; `to_dict()` gives a JSON-ready dictionary
(decimals and integers written as strings) and `GenesisState.from_dict()`
reads one back. `default_genesis_state()` and `default_aimd_genesis_state()`
build the two default configurations, and
`genesis_state_from_app_state(app_state)` picks the `feemarket` entry out of
an application genesis mapping, accepting either a JSON string/bytes or an
already decoded mapping.

## Addresses and messages

`feemarket.address` encodes and decodes bech32 account addresses:
`acc_address_from_bech32(address, prefix="cosmos")` returns the raw bytes
and raises `AddressError` (a `ValueError`) for a bad string, prefix or
checksum; `acc_address_to_bech32(raw, prefix="cosmos")` returns the string,
or an empty string for empty bytes.

`feemarket.msgs.MsgParams(authority, params)` is a parameter update signed
by an authority. `validate_basic()` raises `AddressError` unless the
authority is a valid `cosmos` address, and `get_signers()` returns its raw
bytes in a one-element list.

## Coins and denomination resolvers

`feemarket.coins` has `Coin` (integer amount) and `DecCoin` (`LegacyDec`
amount), both frozen dataclasses that reject negative amounts and invalid
denominations. `new_coins(*coins)` builds a sorted tuple, dropping zero
amounts and raising `ValueError` on duplicate denominations.

`feemarket.resolver.DenomResolver` is the protocol for converting a
`DecCoin` into another denomination (`convert_to_denom`) and listing extra
accepted denominations (`extra_denoms`). Two test implementations are
provided: `TestDenomResolver` converts one-to-one, `ErrorDenomResolver`
raises `ValueError` for any denomination but the target.

## Paying out fees and tips

`feemarket.post_fee` describes the keepers it works with as protocols
(`AccountKeeper`, `BankKeeper`, `FeeMarketKeeper`) and provides:

- `deduct_coins(bank_keeper, ctx, coins, distribute_fees)` – when
  `distribute_fees` is true, moves the coins from the
  `feemarket-fee-collector` module to `fee_collector`; otherwise the coins
  stay where they are.
- `send_tip(bank_keeper, ctx, proposer, coins)` – sends coins from the fee
  market collector to the proposer address.
- `FeeMarketDeductDecorator(account_keeper, bank_keeper, feemarket_keeper)`
  with `pay_out_fee_and_tip(ctx, fee, tip)`, which reads the params
  (a failure is raised as `RuntimeError`), settles the fee and/or tip when
  given, and appends a `fee_pay` and/or `tip_pay` `Event` to `ctx`.
- `Context` (block height, proposer address, collected events) and `Event`
  (type plus ordered attributes).

`feemarket.errors` defines `FeeMarketError` and its subclasses
`NoFeeCoinsError`, `TooManyFeeCoinsError` and `ResolverNotSetError`, along
with the module name, store keys and event attribute names.

## What the package does not do

- It has no keeper or storage: parameters, state and the enabled height are
  kept by whatever object implements `FeeMarketKeeper`.
- `FeeMarketDeductDecorator` only pays out a fee and tip that are already
  decided. It does not check a transaction's fee against the minimum gas
  price, split off the tip, record gas in the market state, or charge
  simulated bank-transfer gas (`BANK_SEND_GAS_CONSUMPTION` is only a
  constant).
- There is no command line, node, query service or transaction handling.