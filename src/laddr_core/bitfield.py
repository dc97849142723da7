"""Bit-field descriptor over a fixed-width integer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BitField:
    """One field of ``bit_width`` bits starting at ``bit_offset``.

    ``total_width`` is the width of the integer the field lives in. The
    descriptor is a constant; a bad offset/width is a programming error.
    """

    bit_offset: int
    bit_width: int
    total_width: int = 128

    def __post_init__(self) -> None:
        assert self.bit_offset >= 0, f"negative bit_offset {self.bit_offset}"
        assert self.bit_width > 0, f"non-positive bit_width {self.bit_width}"
        assert self.bit_offset + self.bit_width <= self.total_width, (
            f"field [{self.bit_offset}, +{self.bit_width}) exceeds {self.total_width} bits"
        )

    @property
    def mask(self) -> int:
        return ((1 << self.bit_width) - 1) << self.bit_offset

    @property
    def top(self) -> int:
        """Index of the bit just above the field."""
        return self.bit_offset + self.bit_width

    def extract(self, value: int) -> int:
        return (value & self.mask) >> self.bit_offset

    def insert(self, value: int, field_value: int) -> int:
        mask = self.mask
        return (value & ~mask) | ((field_value << self.bit_offset) & mask)

    def test(self, value: int) -> bool:
        return self.extract(value) != 0

    def assign(self, value: int, flag: bool) -> int:
        """Set or clear a single-bit field."""
        return self.insert(value, 1 if flag else 0)


def packed(*fields: BitField) -> int:
    """OR of the masks of ``fields``."""
    m = 0
    for f in fields:
        m |= f.mask
    return m
