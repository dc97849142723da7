"""Parse user-supplied laddr literals for each variant."""
from __future__ import annotations

import re

from laddr_codec.variant_a import Laddr
from laddr_core.protocol import HALF_BITS, LADDR_BITS

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
# Debug form printed for laddr_le_t, e.g. "low = 1234, high = 5678"
_LOW_HIGH_RE = re.compile(r"low = ([0-9]+), high = ([0-9]+)")


class LiteralError(ValueError):
    def __init__(self, code: str, detail: str):
        super().__init__(detail)
        self.code = code
        self.detail = detail


def _hex_to_int(digits: str, text: str) -> int:
    if not _HEX_RE.fullmatch(digits):
        raise LiteralError("E_LITERAL_FORMAT", f"not a hex literal: {text!r}")
    u = int(digits, 16)
    if u.bit_length() > LADDR_BITS:
        raise LiteralError("E_LITERAL_OVERFLOW", f"{text!r} is wider than {LADDR_BITS} bits")
    return u


# 2**64 - 1 has 20 decimal digits
_MAX_HALF_DIGITS = 20


def _dec_half(digits: str, name: str) -> int:
    if len(digits.lstrip("0")) > _MAX_HALF_DIGITS:
        raise LiteralError("E_LITERAL_OVERFLOW", f"{name} has more than {_MAX_HALF_DIGITS} digits")
    u = int(digits, 10)
    if u.bit_length() > HALF_BITS:
        raise LiteralError("E_LITERAL_OVERFLOW", f"{name} = {digits} is wider than {HALF_BITS} bits")
    return u


def parse_variant_a(text: str) -> Laddr:
    s = text.strip()
    if s.startswith("0x"):
        return Laddr.from_int(_hex_to_int(s[2:], s))
    m = _LOW_HIGH_RE.search(s)
    if m is None:
        raise LiteralError(
            "E_LITERAL_FORMAT", f"expected 0x<hex> or 'low = <dec>, high = <dec>', got {s!r}"
        )
    return Laddr(low=_dec_half(m.group(1), "low"), high=_dec_half(m.group(2), "high"))


def parse_variant_b(text: str) -> int:
    s = text.strip()
    digits = s[1:] if s.startswith("L") else s
    return _hex_to_int(digits, s)


def parse_variant_c(text: str) -> int:
    s = text.strip()
    if s.startswith("L"):
        digits = s[1:]
    elif s.startswith("0x"):
        digits = s[2:]
    else:
        digits = s
    return _hex_to_int(digits, s)
