from laddr_codec import variant_a, variant_b, variant_c
from laddr_core.protocol import B_DEFAULT_OFFSET_BITS
from .const import ERRORS, VARIANTS
from .literal import LiteralError, parse_variant_a, parse_variant_b, parse_variant_c

def _fail(code: str, detail: str) -> dict:
    errors = [{"code": code, "message": ERRORS[code], "detail": detail}]
    return {"status": "FAIL", "error_count": len(errors), "errors": errors}

def decode_rows(variant: str, text: str, offset_bits: int = B_DEFAULT_OFFSET_BITS) -> tuple[str, list[tuple[str, str]]]:
    """Parse ``text`` and decode it; returns (form, rows). Raises on bad input."""
    if variant == "a":
        return "full", variant_a.build_rows(parse_variant_a(text))
    if variant == "b":
        # Validate the split before touching the literal so no partial work is done.
        variant_b.ContentSplit(offset_bits)
        return "full", variant_b.decode(parse_variant_b(text), offset_bits).rows()
    if variant == "c":
        decoded = variant_c.decode(parse_variant_c(text))
        return decoded.form, decoded.rows()
    raise ValueError(f"variant must be one of {', '.join(VARIANTS)}, got {variant!r}")

def inspect_literal(variant: str, text: str, offset_bits: int = B_DEFAULT_OFFSET_BITS) -> dict:
    if variant not in VARIANTS:
        return _fail("E_VARIANT", f"variant must be one of {', '.join(VARIANTS)}, got {variant!r}")
    if variant == "b":
        try:
            variant_b.ContentSplit(offset_bits)
        except ValueError as e:
            return _fail("E_PARAM_RANGE", str(e))
    try:
        form, rows = decode_rows(variant, text, offset_bits)
    except LiteralError as e:
        return _fail(e.code, e.detail)
    return {
        "status": "PASS",
        "variant": variant,
        "form": form,
        "rows": [[name, value] for name, value in rows],
    }
