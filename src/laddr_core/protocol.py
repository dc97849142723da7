"""Logical address layout constants.

Single source of truth for widths and shifts shared by the variant codecs.
Each variant still owns its own field descriptors.
"""

LADDR_BITS = 128
HALF_BITS = 64

# Offsets are stored in 4 KiB blocks
BLOCK_SHIFT = 12
BLOCK_SIZE = 1 << BLOCK_SHIFT  # 4096

# Variant B: object_content = local_clone_id | offset, split per call
B_OBJECT_CONTENT_BITS = 47
B_DEFAULT_OFFSET_BITS = 15

# Variant C: object_content = local_clone_id | is_metadata | block_offset
C_OBJECT_CONTENT_BITS = 51
