"""Variant C: single 128-bit laddr with a zero-prefix short form.

MSB first:
[upgrade:1 | shard:6 | pool:12 | reverse_hash:16 | local_object_id:42
 | local_clone_id:23 | is_metadata:1 | block_offset:27]

The prefix is everything above object_content (bits 127:51). An address
whose prefix is zero is a bare object_content address and decodes to a
ShortForm carrying only ``laddr`` and ``object_content``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from laddr_core.bitfield import BitField, packed
from laddr_core.fmt import fmt_flag
from laddr_core.protocol import BLOCK_SHIFT, C_OBJECT_CONTENT_BITS

UPGRADE = BitField(127, 1)
SHARD = BitField(121, 6)
POOL = BitField(109, 12)
REVERSE_HASH = BitField(93, 16)
LOCAL_OBJECT_ID = BitField(51, 42)
LOCAL_CLONE_ID = BitField(28, 23)
IS_METADATA = BitField(27, 1)
BLOCK_OFFSET = BitField(0, 27)

OBJECT_CONTENT = BitField(0, C_OBJECT_CONTENT_BITS)
PREFIX_MASK = packed(UPGRADE, SHARD, POOL, REVERSE_HASH, LOCAL_OBJECT_ID)

LAYOUT: dict[str, BitField] = {
    "upgrade": UPGRADE,
    "shard": SHARD,
    "pool": POOL,
    "reverse_hash": REVERSE_HASH,
    "local_object_id": LOCAL_OBJECT_ID,
    "local_clone_id": LOCAL_CLONE_ID,
    "is_metadata": IS_METADATA,
    "block_offset": BLOCK_OFFSET,
}


@dataclass(frozen=True)
class ShortForm:
    laddr: int
    object_content: int

    form = "short"

    def rows(self) -> list[tuple[str, str]]:
        return [
            ("laddr", f"L{self.laddr:x}"),
            ("object_content", f"{self.object_content:#x}"),
        ]


@dataclass(frozen=True)
class FullForm:
    laddr: int
    upgrade: bool
    shard: int
    pool: int
    reverse_hash: int
    local_object_id: int
    object_content: int
    local_clone_id: int
    is_metadata: bool
    block_offset: int

    form = "full"

    @property
    def offset(self) -> int:
        """Byte offset of ``block_offset``."""
        return self.block_offset << BLOCK_SHIFT

    def rows(self) -> list[tuple[str, str]]:
        return [
            ("laddr", f"L{self.laddr:x}"),
            ("upgrade", fmt_flag(self.upgrade)),
            ("shard", str(self.shard)),
            ("pool", str(self.pool)),
            ("reverse_hash", f"{self.reverse_hash:#x}"),
            ("local_object_id", str(self.local_object_id)),
            ("object_content", f"{self.object_content:#x}"),
            ("local_clone_id", str(self.local_clone_id)),
            ("is_metadata", fmt_flag(self.is_metadata)),
            ("block_offset", f"{self.offset:#x}"),
            ("block_offset_bytes", str(self.offset)),
        ]


Decoded = Union[ShortForm, FullForm]


def prefix(value: int) -> int:
    return value & PREFIX_MASK


def decode(value: int) -> Decoded:
    if prefix(value) == 0:
        return ShortForm(laddr=value, object_content=OBJECT_CONTENT.extract(value))
    return FullForm(
        laddr=value,
        upgrade=UPGRADE.test(value),
        shard=SHARD.extract(value),
        pool=POOL.extract(value),
        reverse_hash=REVERSE_HASH.extract(value),
        local_object_id=LOCAL_OBJECT_ID.extract(value),
        object_content=OBJECT_CONTENT.extract(value),
        local_clone_id=LOCAL_CLONE_ID.extract(value),
        is_metadata=IS_METADATA.test(value),
        block_offset=BLOCK_OFFSET.extract(value),
    )


def encode(
    *,
    upgrade: bool = False,
    shard: int = 0,
    pool: int = 0,
    reverse_hash: int = 0,
    local_object_id: int = 0,
    local_clone_id: int = 0,
    is_metadata: bool = False,
    block_offset: int = 0,
) -> int:
    """Pack fields into a 128-bit value. Oversized field values are truncated to width."""
    v = UPGRADE.assign(0, upgrade)
    v = SHARD.insert(v, shard)
    v = POOL.insert(v, pool)
    v = REVERSE_HASH.insert(v, reverse_hash)
    v = LOCAL_OBJECT_ID.insert(v, local_object_id)
    v = LOCAL_CLONE_ID.insert(v, local_clone_id)
    v = IS_METADATA.assign(v, is_metadata)
    return BLOCK_OFFSET.insert(v, block_offset)
