"""laddr codec - one module per on-disk laddr layout."""
from . import variant_a, variant_b, variant_c
from .variant_a import Laddr, fmt_laddr

__all__ = ["variant_a", "variant_b", "variant_c", "Laddr", "fmt_laddr"]
