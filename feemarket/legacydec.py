"""Fixed-point decimal with 18 digits of precision and bounded size."""

from __future__ import annotations

import functools
import re

PRECISION = 18
_ONE = 10**PRECISION
_MAX_BITS = 256 + 60
_DEC_RE = re.compile(r"^(-?)(\d+)(?:\.(\d+))?$")


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def _chop_round(n: int) -> int:
    """Divide by 10**18 rounding half to even."""
    negative = n < 0
    q, r = divmod(abs(n), _ONE)
    twice = 2 * r
    if twice > _ONE or (twice == _ONE and q % 2 == 1):
        q += 1
    return -q if negative else q


@functools.total_ordering
class LegacyDec:
    """Signed decimal stored as an integer scaled by 10**18."""

    __slots__ = ("_raw",)

    def __init__(self, raw: int) -> None:
        if abs(raw).bit_length() > _MAX_BITS:
            raise OverflowError("decimal out of range")
        self._raw = raw

    @classmethod
    def from_str(cls, text: str) -> "LegacyDec":
        match = _DEC_RE.match(text.strip())
        if not match:
            raise ValueError(f"invalid decimal string: {text!r}")
        sign, whole, frac = match.groups()
        frac = frac or ""
        if len(frac) > PRECISION:
            raise ValueError(f"too much precision in {text!r}")
        raw = int(whole) * _ONE + int(frac.ljust(PRECISION, "0") or "0")
        return cls(-raw if sign else raw)

    @classmethod
    def from_int(cls, value: int) -> "LegacyDec":
        return cls(int(value) * _ONE)

    @classmethod
    def zero(cls) -> "LegacyDec":
        return cls(0)

    @classmethod
    def one(cls) -> "LegacyDec":
        return cls(_ONE)

    def add(self, other: "LegacyDec") -> "LegacyDec":
        return LegacyDec(self._raw + other._raw)

    def sub(self, other: "LegacyDec") -> "LegacyDec":
        return LegacyDec(self._raw - other._raw)

    def mul(self, other: "LegacyDec") -> "LegacyDec":
        product = self._raw * other._raw
        return LegacyDec(_chop_round(product))

    def mul_int(self, value: int) -> "LegacyDec":
        return LegacyDec(self._raw * int(value))

    def quo(self, other: "LegacyDec") -> "LegacyDec":
        if other._raw == 0:
            raise ZeroDivisionError("division by zero")
        scaled = self._raw * _ONE * _ONE
        if abs(scaled).bit_length() > _MAX_BITS + 2 * 60:
            raise OverflowError("decimal out of range")
        return LegacyDec(_chop_round(_trunc_div(scaled, other._raw)))

    def truncate_int(self) -> int:
        return _trunc_div(self._raw, _ONE)

    def is_negative(self) -> bool:
        return self._raw < 0

    def is_zero(self) -> bool:
        return self._raw == 0

    def is_positive(self) -> bool:
        return self._raw > 0

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = quo

    def __neg__(self) -> "LegacyDec":
        return LegacyDec(-self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LegacyDec):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: "LegacyDec") -> bool:
        if not isinstance(other, LegacyDec):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        q, r = divmod(abs(self._raw), _ONE)
        sign = "-" if self._raw < 0 else ""
        return f"{sign}{q}.{r:0{PRECISION}d}"

    def __repr__(self) -> str:
        return f"LegacyDec('{self}')"