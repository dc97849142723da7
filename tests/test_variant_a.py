from itertools import combinations

import pytest

from laddr_codec.variant_a import Laddr, build_rows, fmt_laddr, layout

SAMPLES = [
    Laddr(low=0, high=0),
    Laddr(low=0xFFFFFFFFFFFFFFFF, high=0xFFFFFFFFFFFFFFFF),
    Laddr(low=0x8000_4000_0000_1001, high=0x0102000000030004),
    Laddr(low=0x1234_5678_9ABC_DEF0, high=0x0FED_CBA9_8765_4321),
]


def _fixed(a: Laddr):
    return (a.pool(), a.shard(), a.crush(), a.local_snap_id(), a.offset())


def test_concrete_example_no_shadow():
    a = Laddr(low=0, high=0x0102000000030004)
    assert a.pool() == 0x01
    assert a.shard() == 0x02
    assert a.crush() == 0x00000003
    assert a.random(False) == 0x100000
    assert a.random(True) == 0x80000
    assert a.shadow() is False
    assert a.metadata() is False
    assert a.snap() is False
    assert a.local_snap_id() == 0
    assert a.offset() == 0


def test_random_branches():
    # low[63:46] all set, bit 46 is the shadow flag in has-shadow mode
    a = Laddr(low=0xFFFFC00000000000, high=0)
    assert a.random(False) == (1 << 18) - 1
    assert a.random(True) == (1 << 17) - 1
    assert a.shadow() is True


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("flag", [True, False])
def test_flag_round_trip(a, flag):
    m = a.with_metadata(flag)
    assert m.metadata() is flag
    assert _fixed(m) == _fixed(a)
    assert m.high == a.high

    s = a.with_snap(flag)
    assert s.snap() is flag
    assert _fixed(s) == _fixed(a)
    assert s.high == a.high

    sh = a.with_shadow(flag)
    assert sh.shadow() is flag
    assert _fixed(sh) == _fixed(a)
    assert sh.random(True) == a.random(True)
    assert sh.high == a.high


def test_shadow_changes_no_shadow_random():
    a = Laddr(low=0, high=0)
    assert a.with_shadow(True).random(False) == 1
    assert a.with_shadow(True).random(True) == 0
    b = Laddr(low=1 << 46, high=0)
    assert b.with_shadow(False).random(False) == b.random(False) - 1


@pytest.mark.parametrize("a", SAMPLES)
def test_idempotence(a):
    for flag in (True, False):
        assert a.with_metadata(flag).with_metadata(flag) == a.with_metadata(flag)
        assert a.with_snap(flag).with_snap(flag) == a.with_snap(flag)
        assert a.with_shadow(flag).with_shadow(flag) == a.with_shadow(flag)


def test_prefixes():
    a = Laddr(low=0xFFFFFFFFFFFFFFFF, high=0x0102000000030004)
    assert a.object_prefix(False) == Laddr(low=0xFFFFC00000000000, high=a.high)
    assert a.object_prefix(True) == Laddr(low=0xFFFF800000000000, high=a.high)
    assert a.onode_prefix() == Laddr(low=0xFFFFFFFFFFFFF000, high=a.high)
    assert a.object_prefix(True).random(True) == a.random(True)
    assert a.object_prefix(False).random(False) == a.random(False)


def test_offset_is_block_aligned():
    a = Laddr(low=0xFFF | (5 << 12), high=0)
    assert a.offset() == 0xFFF * 4096
    assert a.local_snap_id() == 5


@pytest.mark.parametrize("has_shadow", [True, False])
def test_layout_masks_are_disjoint(has_shadow):
    fields = layout(has_shadow)
    for (n1, f1), (n2, f2) in combinations(fields.items(), 2):
        assert f1.mask & f2.mask == 0, (n1, n2)


@pytest.mark.parametrize("has_shadow", [True, False])
def test_layout_matches_accessors(has_shadow):
    fields = layout(has_shadow)
    for a in SAMPLES:
        v = a.to_int()
        assert fields["pool"].extract(v) == a.pool()
        assert fields["crush"].extract(v) == a.crush()
        assert fields["random"].extract(v) == a.random(has_shadow)
        assert fields["local_snap_id"].extract(v) == a.local_snap_id()


def test_int_split():
    v = (0x0102000000030004 << 64) | 0x10
    a = Laddr.from_int(v)
    assert a == Laddr(low=0x10, high=0x0102000000030004)
    assert a.to_int() == v


def test_fmt_laddr():
    assert fmt_laddr(Laddr(low=0xAB, high=0x0102000000030004)) == "0x10200000003000400000000000000ab"
    assert fmt_laddr(Laddr(low=0, high=0)) == "0x00000000000000000"


def test_build_rows_order():
    rows = build_rows(Laddr(low=0, high=0x0102000000030004))
    assert [name for name, _ in rows] == [
        "literal",
        "object_prefix_no_shadow",
        "object_prefix_has_shadow",
        "onode_prefix",
        "with_shadow",
        "without_shadow",
        "with_metadata",
        "without_metadata",
        "with_snap",
        "without_snap",
        "pool",
        "shard",
        "crush",
        "random_no_shadow",
        "random_has_shadow",
        "shadow",
        "metadata",
        "snap",
        "local_snap_id",
        "offset",
    ]
    values = dict(rows)
    assert values["pool"] == "1"
    assert values["shard"] == "2"
    assert values["crush"] == "0x3"
    assert values["random_no_shadow"] == "0x100000"
    assert values["random_has_shadow"] == "0x80000"
    assert values["shadow"] == "false"
    assert values["with_metadata"] == "0x1020000000300040000200000000000"
