"""
Tests for EqualityDefinition on a type that inherits it indirectly.

A derived type's marked members include its base's marked members.
"""

from structeq.core import EqualityCore

from entities import ChildRecord, Record


class TestInheritedMembers:
    """Members declared on the base take part in the derived type's equality."""

    def test_members_accumulate_base_first(self):
        names = [d.name for d in EqualityCore().registry.members_of(ChildRecord)]
        assert names == ["numeric", "text"]

    def test_equal_values_are_equal(self, child_records):
        first, copy, _, _, same = child_records
        assert first == same
        assert first == copy
        assert first.equals(copy)

    def test_differs_on_base_member(self, child_records):
        first, _, base_differs, _, _ = child_records
        assert first != base_differs
        assert not first.equals(base_differs)

    def test_differs_on_own_member(self, child_records):
        first, _, _, own_differs, _ = child_records
        assert first != own_differs

    def test_unmarked_member_is_ignored(self):
        assert ChildRecord(1, "test", other_text="a") == ChildRecord(1, "test", other_text="b")
        assert hash(ChildRecord(1, "test", "a")) == hash(ChildRecord(1, "test", "b"))

    def test_hash_consistent(self, child_records):
        first, copy, base_differs, own_differs, same = child_records
        assert hash(first) == hash(same)
        assert hash(first) == hash(copy)
        assert hash(first) != hash(base_differs)
        assert hash(first) != hash(own_differs)


class TestMixedTypes:
    """Base and derived instances compared with each other."""

    def test_base_and_derived_with_more_members_are_not_equal(self):
        base, child = Record(1), ChildRecord(1, "test")
        assert base != child
        assert child != base
        assert not base.equals(child)
        assert not child.equals(base)

    def test_derived_without_new_members_compares_by_base_members(self):
        class Renamed(Record):
            pass

        assert Record(1) == Renamed(1)
        assert Renamed(1) == Record(1)
        assert hash(Record(1)) == hash(Renamed(1))
        assert Record(1) != Renamed(2)
