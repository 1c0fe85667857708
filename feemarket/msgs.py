"""Governance message that replaces the module parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from feemarket.address import DEFAULT_PREFIX, acc_address_from_bech32
from feemarket.params import Params


@dataclass
class MsgParams:
    """Request to update the fee market parameters, signed by the authority."""

    AMINO_NAME: ClassVar[str] = "feemarket/MsgParams"

    authority: str
    params: Params

    def get_signers(self) -> list[bytes]:
        """The authority address is the only signer."""
        return [acc_address_from_bech32(self.authority, DEFAULT_PREFIX)]

    def validate_basic(self) -> None:
        """Raise AddressError unless the authority is a valid account address."""
        acc_address_from_bech32(self.authority, DEFAULT_PREFIX)