import pytest
from hypothesis import given, strategies as st

from respvalue.value import Bulk, Data, Int, Nil, Okay, Status, Value


def test_cursor_shape_detected():
    v = Bulk([Data(b"0"), Bulk([Data(b"a")])])
    assert v.looks_like_cursor() is True


@pytest.mark.parametrize(
    "value",
    [
        Nil(),
        Okay(),
        Int(1),
        Bulk([Data(b"0")]),
        Bulk([Int(0), Bulk([])]),
        Bulk([Data(b"0"), Data(b"x")]),
        Bulk([Data(b"0"), Bulk([]), Nil()]),
    ],
)
def test_not_cursor(value):
    assert value.looks_like_cursor() is False


def test_as_sequence():
    items = [Int(1), Data(b"x")]
    assert Bulk(items).as_sequence() == tuple(items)
    assert Nil().as_sequence() == ()
    assert Int(3).as_sequence() is None
    assert Status("x").as_sequence() is None


def test_as_map_iter_pairs():
    v = Bulk([Data(b"a"), Int(1), Data(b"b"), Int(2)])
    assert list(v.as_map_iter()) == [(Data(b"a"), Int(1)), (Data(b"b"), Int(2))]


def test_as_map_iter_drops_trailing_item():
    v = Bulk([Data(b"a"), Int(1), Data(b"b")])
    assert list(v.as_map_iter()) == [(Data(b"a"), Int(1))]


def test_as_map_iter_non_bulk():
    assert Nil().as_map_iter() is None
    assert Data(b"x").as_map_iter() is None


@given(st.lists(st.integers(min_value=-(2**63), max_value=2**63 - 1)))
def test_map_iter_length_invariant(numbers):
    v = Bulk([Int(n) for n in numbers])
    pairs = list(v.as_map_iter())
    assert len(pairs) == len(numbers) // 2
    flat = [x for pair in pairs for x in pair]
    assert flat == list(v.items[: len(flat)])


def test_equality():
    assert Nil() == Nil()
    assert Okay() == Okay()
    assert Int(5) == Int(5)
    assert Data(bytearray(b"ab")) == Data(b"ab")
    assert Bulk([Int(1)]) == Bulk((Int(1),))
    assert Okay() != Status("OK")
    assert Nil() != Bulk([])


def test_repr_simple():
    assert repr(Nil()) == "nil"
    assert repr(Okay()) == "ok"
    assert repr(Int(42)) == "int(42)"


def test_repr_data_and_bulk():
    assert repr(Data(b"foo")) == "string-data('\"foo\"')"
    assert repr(Data(b"\xff\x01")) == "binary-data([255, 1])"
    assert repr(Bulk([Nil(), Okay()])) == "bulk(nil, ok)"
    assert repr(Status("ready")) == 'status("ready")'


def test_int_range_checked():
    with pytest.raises(ValueError):
        Int(2**63)
    with pytest.raises(TypeError):
        Int("1")


def test_bulk_rejects_non_values():
    with pytest.raises(TypeError):
        Bulk([1, 2])


def test_all_are_values():
    for v in (Nil(), Okay(), Int(0), Data(b""), Bulk(), Status("")):
        assert isinstance(v, Value)
        assert v.as_map_iter() is None or list(v.as_map_iter()) == []