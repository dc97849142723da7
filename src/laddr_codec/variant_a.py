"""Variant A: laddr split into 64-bit low/high halves, shadow-aware.

high: [pool:8 | shard:8 | crush:32 | random_hi:16]
low:  [random_lo:17 or 18 | shadow:1 (has_shadow only) | metadata:1 | snap:1
       | local_snap_id:32 | offset:12]

With has_shadow the low half of the random field is 17 bits (63:47) and bit
46 is the shadow flag. Without it, bit 46 belongs to random, which is then
18 bits (63:46). Both readings are computed from the same raw value.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from laddr_core.bitfield import BitField
from laddr_core.fmt import fmt_flag
from laddr_core.protocol import BLOCK_SHIFT, HALF_BITS

HALF_MASK = (1 << HALF_BITS) - 1

# high half
HIGH_POOL = BitField(56, 8, HALF_BITS)
HIGH_SHARD = BitField(48, 8, HALF_BITS)
HIGH_CRUSH = BitField(16, 32, HALF_BITS)
HIGH_RANDOM = BitField(0, 16, HALF_BITS)

# low half, mode dependent
NO_SHADOW_LOW_RANDOM = BitField(46, 18, HALF_BITS)
HAS_SHADOW_LOW_RANDOM = BitField(47, 17, HALF_BITS)
HAS_SHADOW_LOW_SHADOW = BitField(46, 1, HALF_BITS)

# low half
LOW_METADATA = BitField(45, 1, HALF_BITS)
LOW_SNAP = BitField(44, 1, HALF_BITS)
LOW_LOCAL_SNAP_ID = BitField(12, 32, HALF_BITS)
LOW_OFFSET = BitField(0, 12, HALF_BITS)


@dataclass(frozen=True)
class Laddr:
    low: int
    high: int

    @classmethod
    def from_int(cls, value: int) -> "Laddr":
        return cls(low=value & HALF_MASK, high=(value >> HALF_BITS) & HALF_MASK)

    def to_int(self) -> int:
        return (self.high << HALF_BITS) | self.low

    def pool(self) -> int:
        return HIGH_POOL.extract(self.high)

    def shard(self) -> int:
        return HIGH_SHARD.extract(self.high)

    def crush(self) -> int:
        return HIGH_CRUSH.extract(self.high)

    def random(self, has_shadow: bool) -> int:
        if has_shadow:
            return (HIGH_RANDOM.extract(self.high) << 17) | (
                (self.low & HAS_SHADOW_LOW_RANDOM.mask) >> 47
            )
        else:
            return (HIGH_RANDOM.extract(self.high) << 18) | (
                (self.low & NO_SHADOW_LOW_RANDOM.mask) >> 46
            )

    def shadow(self) -> bool:
        return HAS_SHADOW_LOW_SHADOW.test(self.low)

    def with_shadow(self, shadow: bool) -> "Laddr":
        return replace(self, low=HAS_SHADOW_LOW_SHADOW.assign(self.low, shadow))

    def metadata(self) -> bool:
        return LOW_METADATA.test(self.low)

    def with_metadata(self, metadata: bool) -> "Laddr":
        return replace(self, low=LOW_METADATA.assign(self.low, metadata))

    def snap(self) -> bool:
        return LOW_SNAP.test(self.low)

    def with_snap(self, snap: bool) -> "Laddr":
        return replace(self, low=LOW_SNAP.assign(self.low, snap))

    def local_snap_id(self) -> int:
        return LOW_LOCAL_SNAP_ID.extract(self.low)

    def offset(self) -> int:
        """Byte offset; the stored value counts 4 KiB blocks."""
        return LOW_OFFSET.extract(self.low) << BLOCK_SHIFT

    def object_prefix(self, has_shadow: bool) -> "Laddr":
        """Keep only the random bits of ``low`` for the given mode."""
        if has_shadow:
            low = self.low & HAS_SHADOW_LOW_RANDOM.mask
        else:
            low = self.low & NO_SHADOW_LOW_RANDOM.mask
        return replace(self, low=low)

    def onode_prefix(self) -> "Laddr":
        return Laddr(low=self.low & ~LOW_OFFSET.mask, high=self.high)


def layout(has_shadow: bool) -> dict[str, BitField]:
    """Field descriptors over the joined 128-bit value, high half first."""
    fields = {
        "pool": BitField(HALF_BITS + HIGH_POOL.bit_offset, HIGH_POOL.bit_width),
        "shard": BitField(HALF_BITS + HIGH_SHARD.bit_offset, HIGH_SHARD.bit_width),
        "crush": BitField(HALF_BITS + HIGH_CRUSH.bit_offset, HIGH_CRUSH.bit_width),
    }
    if has_shadow:
        fields["random"] = BitField(HAS_SHADOW_LOW_RANDOM.bit_offset, 17 + 16)
        fields["shadow"] = BitField(HAS_SHADOW_LOW_SHADOW.bit_offset, 1)
    else:
        fields["random"] = BitField(NO_SHADOW_LOW_RANDOM.bit_offset, 18 + 16)
    fields["metadata"] = BitField(LOW_METADATA.bit_offset, 1)
    fields["snap"] = BitField(LOW_SNAP.bit_offset, 1)
    fields["local_snap_id"] = BitField(LOW_LOCAL_SNAP_ID.bit_offset, 32)
    fields["offset"] = BitField(LOW_OFFSET.bit_offset, 12)
    return fields


def fmt_laddr(laddr: Laddr) -> str:
    return f"{laddr.high:#x}{laddr.low:016x}"


def build_rows(laddr: Laddr) -> list[tuple[str, str]]:
    return [
        ("literal", fmt_laddr(laddr)),
        ("object_prefix_no_shadow", fmt_laddr(laddr.object_prefix(False))),
        ("object_prefix_has_shadow", fmt_laddr(laddr.object_prefix(True))),
        ("onode_prefix", fmt_laddr(laddr.onode_prefix())),
        ("with_shadow", fmt_laddr(laddr.with_shadow(True))),
        ("without_shadow", fmt_laddr(laddr.with_shadow(False))),
        ("with_metadata", fmt_laddr(laddr.with_metadata(True))),
        ("without_metadata", fmt_laddr(laddr.with_metadata(False))),
        ("with_snap", fmt_laddr(laddr.with_snap(True))),
        ("without_snap", fmt_laddr(laddr.with_snap(False))),
        ("pool", str(laddr.pool())),
        ("shard", str(laddr.shard())),
        ("crush", f"{laddr.crush():#x}"),
        ("random_no_shadow", f"{laddr.random(False):#x}"),
        ("random_has_shadow", f"{laddr.random(True):#x}"),
        ("shadow", fmt_flag(laddr.shadow())),
        ("metadata", fmt_flag(laddr.metadata())),
        ("snap", fmt_flag(laddr.snap())),
        ("local_snap_id", str(laddr.local_snap_id())),
        ("offset", str(laddr.offset())),
    ]
