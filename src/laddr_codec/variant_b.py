"""Variant B: single 128-bit laddr with a per-call clone/offset split.

MSB first:
[upgrade:1 | pool:12 | shard:8 | reverse_hash:32 | local_object_id:27
 | is_metadata:1 | object_content:47]

object_content = [local_clone_id:(47 - offset_bits) | offset:offset_bits]
"""
from __future__ import annotations

from dataclasses import dataclass

from laddr_core.bitfield import BitField
from laddr_core.fmt import fmt_flag
from laddr_core.protocol import B_DEFAULT_OFFSET_BITS, B_OBJECT_CONTENT_BITS, BLOCK_SHIFT

UPGRADE = BitField(127, 1)
POOL = BitField(115, 12)
SHARD = BitField(107, 8)
REVERSE_HASH = BitField(75, 32)
LOCAL_OBJECT_ID = BitField(48, 27)
IS_METADATA = BitField(47, 1)
OBJECT_CONTENT = BitField(0, B_OBJECT_CONTENT_BITS)

LAYOUT: dict[str, BitField] = {
    "upgrade": UPGRADE,
    "pool": POOL,
    "shard": SHARD,
    "reverse_hash": REVERSE_HASH,
    "local_object_id": LOCAL_OBJECT_ID,
    "is_metadata": IS_METADATA,
    "object_content": OBJECT_CONTENT,
}


class ContentSplit:
    """local_clone_id / offset split of the 47-bit object_content region.

    Either side may be zero bits wide; a zero-width side always reads 0.
    """

    def __init__(self, offset_bits: int = B_DEFAULT_OFFSET_BITS):
        if not isinstance(offset_bits, int) or isinstance(offset_bits, bool):
            raise ValueError(f"offset_bits must be an integer, got {offset_bits!r}")
        if not 0 <= offset_bits <= B_OBJECT_CONTENT_BITS:
            raise ValueError(
                f"offset_bits must be within [0, {B_OBJECT_CONTENT_BITS}], got {offset_bits}"
            )
        self.offset_bits = offset_bits
        self.clone_bits = B_OBJECT_CONTENT_BITS - offset_bits
        self.offset = BitField(0, offset_bits, B_OBJECT_CONTENT_BITS) if offset_bits else None
        self.clone = (
            BitField(offset_bits, self.clone_bits, B_OBJECT_CONTENT_BITS) if self.clone_bits else None
        )

    def local_clone_id(self, object_content: int) -> int:
        return self.clone.extract(object_content) if self.clone else 0

    def block_offset(self, object_content: int) -> int:
        return self.offset.extract(object_content) if self.offset else 0

    def join(self, local_clone_id: int, block_offset: int) -> int:
        content = 0
        if self.clone:
            content = self.clone.insert(content, local_clone_id)
        if self.offset:
            content = self.offset.insert(content, block_offset)
        return content


@dataclass(frozen=True)
class LaddrB:
    value: int
    offset_bits: int
    upgrade: bool
    pool: int
    shard: int
    reverse_hash: int
    local_object_id: int
    is_metadata: bool
    object_content: int
    local_clone_id: int
    block_offset: int

    @property
    def offset(self) -> int:
        """Byte offset of ``block_offset``."""
        return self.block_offset << BLOCK_SHIFT

    def rows(self) -> list[tuple[str, str]]:
        return [
            ("laddr", f"L{self.value:x}"),
            ("upgrade", fmt_flag(self.upgrade)),
            ("pool", str(self.pool)),
            ("shard", str(self.shard)),
            ("reverse_hash", f"{self.reverse_hash:#x}"),
            ("local_object_id", str(self.local_object_id)),
            ("is_metadata", fmt_flag(self.is_metadata)),
            ("object_content", f"{self.object_content:#x}"),
            ("local_clone_id", str(self.local_clone_id)),
            ("offset", str(self.offset)),
        ]


def decode(value: int, offset_bits: int = B_DEFAULT_OFFSET_BITS) -> LaddrB:
    split = ContentSplit(offset_bits)
    content = OBJECT_CONTENT.extract(value)
    return LaddrB(
        value=value,
        offset_bits=offset_bits,
        upgrade=UPGRADE.test(value),
        pool=POOL.extract(value),
        shard=SHARD.extract(value),
        reverse_hash=REVERSE_HASH.extract(value),
        local_object_id=LOCAL_OBJECT_ID.extract(value),
        is_metadata=IS_METADATA.test(value),
        object_content=content,
        local_clone_id=split.local_clone_id(content),
        block_offset=split.block_offset(content),
    )


def encode(
    *,
    upgrade: bool = False,
    pool: int = 0,
    shard: int = 0,
    reverse_hash: int = 0,
    local_object_id: int = 0,
    is_metadata: bool = False,
    local_clone_id: int = 0,
    block_offset: int = 0,
    offset_bits: int = B_DEFAULT_OFFSET_BITS,
) -> int:
    """Pack fields into a 128-bit value. Oversized field values are truncated to width."""
    split = ContentSplit(offset_bits)
    v = UPGRADE.assign(0, upgrade)
    v = POOL.insert(v, pool)
    v = SHARD.insert(v, shard)
    v = REVERSE_HASH.insert(v, reverse_hash)
    v = LOCAL_OBJECT_ID.insert(v, local_object_id)
    v = IS_METADATA.assign(v, is_metadata)
    return OBJECT_CONTENT.insert(v, split.join(local_clone_id, block_offset))
