"""laddr core - shared bit-field primitive and layout constants."""
from .bitfield import BitField

__all__ = ["BitField"]
