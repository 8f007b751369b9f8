import attr
import pytest

from assoclist import ext
from assoclist.entry import Entry, OccupiedEntry, VacantEntry, ValueRef
from assoclist.interfaces import IDeref


@pytest.mark.parametrize("cls", [VacantEntry, OccupiedEntry])
def test_entry_interface_membership(cls):
    assert issubclass(cls, Entry)


def test_value_ref_interface_membership():
    assert isinstance(ValueRef([("a", 1)], 0), IDeref)


class TestVacantEntry:
    def test_insert(self):
        seq = [("a", 1)]
        e = VacantEntry(seq, "b")
        assert "b" == e.key
        assert 2 == e.insert(2)
        assert [("a", 1), ("b", 2)] == seq

    def test_and_modify_is_noop(self):
        seq = []
        e = VacantEntry(seq, "b")
        assert e is e.and_modify(lambda v: v + 1)
        assert [] == seq

    def test_or_insert_with_factory(self):
        seq = []
        assert [] == ext.entry(seq, "k").or_insert_with(list)
        assert [("k", [])] == seq

    def test_frozen(self):
        e = VacantEntry([], "b")
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            e.key = "c"


class TestOccupiedEntry:
    @pytest.fixture
    def seq(self):
        return [("a", 1), ("b", 2), ("c", 3)]

    def test_get(self, seq):
        e = ext.entry(seq, "b")
        assert isinstance(e, OccupiedEntry)
        assert 1 == e.index
        assert 2 == e.get()

    def test_insert_returns_old(self, seq):
        e = ext.entry(seq, "b")
        assert 2 == e.insert(20)
        assert 20 == e.get()
        assert [("a", 1), ("b", 20), ("c", 3)] == seq

    def test_as_ref(self, seq):
        ref = ext.entry(seq, "c").as_ref()
        assert "c" == ref.key
        assert 3 == ref.deref()
        ref.swap(lambda v: v * 10)
        assert [("a", 1), ("b", 2), ("c", 30)] == seq

    def test_remove_is_stable(self, seq):
        assert 1 == ext.entry(seq, "a").remove()
        assert [("b", 2), ("c", 3)] == seq

    def test_remove_entry_returns_stored_key(self):
        stored = [1, 2]
        seq = [(stored, "v"), ("x", "y")]
        k, v = ext.entry(seq, [1, 2]).remove_entry()
        assert k is stored
        assert "v" == v
        assert [("x", "y")] == seq

    def test_key_is_lookup_key(self):
        stored = [1, 2]
        lookup = [1, 2]
        e = ext.entry([(stored, "v")], lookup)
        assert e.key is lookup

    def test_and_modify_chains(self, seq):
        e = ext.entry(seq, "a").and_modify(lambda v: v + 1).and_modify(
            lambda v: v * 2
        )
        assert 4 == e.get()
        assert 4 == e.or_insert(100)
        assert 3 == len(seq)

    def test_or_insert_with_key_not_called(self, seq):
        def fail(_):
            raise AssertionError("default should not be computed")

        assert 3 == ext.entry(seq, "c").or_insert_with_key(fail)


class TestValueRef:
    def test_reset_preserves_position(self):
        seq = [("a", 1), ("b", 2)]
        ValueRef(seq, 0).reset(10)
        assert [("a", 10), ("b", 2)] == seq

    def test_swap_kwargs(self):
        seq = [("a", "x")]
        ref = ValueRef(seq, 0)
        assert "x-y" == ref.swap(lambda v, sep, end: v + sep + end, "-", end="y")
        assert [("a", "x-y")] == seq

    def test_identity_equality(self):
        seq = [("a", 1)]
        ref = ValueRef(seq, 0)
        assert ref == ref
        assert ref != ValueRef(seq, 0)
        assert ext.get_mut([("a", 1)], "a") != ext.get_mut([("a", 1)], "a")


@pytest.mark.parametrize(
    "make_handle",
    [
        lambda seq: ext.get_mut(seq, "a"),
        lambda seq: ext.entry(seq, "a"),
        lambda seq: ext.entry(seq, "b"),
    ],
)
def test_handles_hash_by_identity(seq_type, make_handle):
    h1 = make_handle(seq_type([("a", 1)]))
    h2 = make_handle(seq_type([("a", 1)]))
    assert hash(h1) == hash(h1)
    assert h1 != h2
    assert 2 == len({h1, h2})
    assert h1 in {h1}
