import pytest

from laddr_inspect.logic import decode_rows, inspect_literal
from laddr_inspect.render import canonical_json, render_table


def test_pass_variant_a():
    r = inspect_literal("a", "0x01020000000300040000000000000000")
    assert r["status"] == "PASS"
    assert r["form"] == "full"
    values = dict(r["rows"])
    assert values["random_no_shadow"] == "0x100000"
    assert values["pool"] == "1"


def test_variant_c_short_form():
    r = inspect_literal("c", "L1234")
    assert r["form"] == "short"
    assert r["rows"] == [["laddr", "L1234"], ["object_content", "0x1234"]]


def test_param_range_fails_before_parsing():
    r = inspect_literal("b", "not hex", offset_bits=48)
    assert r["status"] == "FAIL"
    assert r["error_count"] == 1
    assert r["errors"][0]["code"] == "E_PARAM_RANGE"
    assert "offset_bits" in r["errors"][0]["detail"]


def test_literal_failure():
    r = inspect_literal("c", "Lxyz")
    assert r["status"] == "FAIL"
    assert r["errors"][0]["code"] == "E_LITERAL_FORMAT"
    assert "rows" not in r


def test_unknown_variant():
    r = inspect_literal("d", "0")
    assert r["errors"][0]["code"] == "E_VARIANT"


def test_canonical_json_is_compact_and_sorted():
    assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'


def test_render_table():
    out = render_table([("laddr", "L1234"), ("object_content", "0x1234")])
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[0].split() == ["property", "value"]
    assert lines[1].split() == ["laddr", "L1234"]
    assert lines[2].split() == ["object_content", "0x1234"]


def test_oversized_decimal_half_is_literal_overflow():
    r = inspect_literal("a", "low = " + "9" * 5000 + ", high = 0")
    assert r["status"] == "FAIL"
    assert r["errors"][0]["code"] == "E_LITERAL_OVERFLOW"


def test_decode_rows_rejects_unknown_variant():
    with pytest.raises(ValueError, match="one of a, b, c"):
        decode_rows("d", "0")
