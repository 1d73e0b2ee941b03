"""
Tests for canonical values: kinds, numeric equality, NaN, fallbacks.
"""

import datetime
from decimal import Decimal
from enum import Enum, IntEnum
from fractions import Fraction

import pytest

from structeq.core import CanonicalValue, ValueKind, normalize


class Color(Enum):
    RED = "red"


class Level(IntEnum):
    ONE = 1


class TestKinds:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (1, ValueKind.NUMBER),
            (2**70, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (Decimal("1.5"), ValueKind.NUMBER),
            (Fraction(1, 3), ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            ("text", ValueKind.TEXT),
            ("c", ValueKind.TEXT),
            (datetime.datetime(2024, 1, 1, 12), ValueKind.INSTANT),
            (datetime.date(2024, 1, 1), ValueKind.INSTANT),
            (datetime.time(12, 30), ValueKind.INSTANT),
            (None, ValueKind.OPAQUE),
            (Color.RED, ValueKind.OPAQUE),
            (Level.ONE, ValueKind.OPAQUE),
            (b"bytes", ValueKind.OPAQUE),
        ],
    )
    def test_kind(self, value, kind):
        assert normalize(value).kind is kind


class TestValueEquality:
    def test_numeric_equality_across_types(self):
        values = [normalize(1), normalize(1.0), normalize(Decimal("1.00")), normalize(Fraction(2, 2))]
        assert all(v == values[0] for v in values)
        assert len({hash(v) for v in values}) == 1

    def test_exact_text(self):
        assert normalize("abc") == normalize("abc")
        assert normalize("abc") != normalize("ABC")

    def test_exact_instant(self):
        moment = datetime.datetime(2024, 1, 1, 12, 0, 0)
        assert normalize(moment) == normalize(datetime.datetime(2024, 1, 1, 12, 0, 0))
        assert normalize(moment) != normalize(moment + datetime.timedelta(microseconds=1))

    def test_different_kinds_never_equal(self):
        assert normalize(True) != normalize(1)
        assert normalize(False) != normalize(0)
        assert normalize("1") != normalize(1)
        assert normalize(Level.ONE) != normalize(1)
        assert normalize(datetime.date(2024, 1, 1)) != normalize("2024-01-01")

    def test_nan_is_reflexive_and_hash_stable(self):
        first, second = normalize(float("nan")), normalize(float("nan"))
        assert first == second
        assert hash(first) == hash(second)
        assert normalize(Decimal("NaN")) == first

    def test_none(self):
        assert normalize(None) == normalize(None)
        assert normalize(None) != normalize(0)


class TestOpaqueFallback:
    def test_plain_objects_compare_by_identity(self):
        thing = object()
        assert normalize(thing) == normalize(thing)
        assert normalize(object()) != normalize(object())

    def test_own_equality_is_used(self):
        assert normalize((1, 2)) == normalize((1, 2))
        assert normalize([1, 2]) == normalize([1, 2])

    def test_unhashable_value_raises_on_hash(self):
        with pytest.raises(TypeError):
            hash(normalize([1, 2]))

    def test_not_equal_to_raw_values(self):
        assert normalize(1) != 1
        assert isinstance(normalize(1), CanonicalValue)
