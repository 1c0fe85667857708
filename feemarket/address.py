"""Bech32 encoding of account addresses."""

from __future__ import annotations

DEFAULT_PREFIX = "cosmos"
MAX_ADDRESS_LENGTH = 255
_MAX_BECH32_LENGTH = 1023
_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class AddressError(ValueError):
    """An address string or byte form is invalid."""


def _polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATORS):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: bytes | list[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise AddressError("invalid padding in bech32 data")
    return out


def _decode(text: str) -> tuple[str, list[int]]:
    if len(text) > _MAX_BECH32_LENGTH:
        raise AddressError("bech32 string too long")
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise AddressError("invalid character in bech32 string")
    if text.lower() != text and text.upper() != text:
        raise AddressError("mixed case in bech32 string")
    text = text.lower()
    sep = text.rfind("1")
    if sep < 1 or sep + 7 > len(text):
        raise AddressError("invalid separator position in bech32 string")
    hrp, payload = text[:sep], text[sep + 1 :]
    try:
        data = [_CHARSET.index(c) for c in payload]
    except ValueError:
        raise AddressError("invalid character in bech32 data") from None
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise AddressError("invalid bech32 checksum")
    return hrp, data[:-6]


def acc_address_from_bech32(address: str, prefix: str = DEFAULT_PREFIX) -> bytes:
    """Decode a bech32 account address with the given prefix into raw bytes."""
    if not address.strip():
        raise AddressError("empty address string is not allowed")
    hrp, data = _decode(address)
    if hrp != prefix:
        raise AddressError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    raw = bytes(_convert_bits(data, 5, 8, False))
    if not raw:
        raise AddressError("addresses cannot be empty")
    if len(raw) > MAX_ADDRESS_LENGTH:
        raise AddressError(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(raw)}"
        )
    return raw


def acc_address_to_bech32(raw: bytes, prefix: str = DEFAULT_PREFIX) -> str:
    """Encode raw address bytes; an empty address gives an empty string."""
    if not raw:
        return ""
    data = _convert_bits(raw, 8, 5, True)
    polymod = _polymod(_hrp_expand(prefix) + data + [0] * 6) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return prefix + "1" + "".join(_CHARSET[d] for d in data + checksum)