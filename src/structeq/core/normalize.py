"""Canonical member values: value semantics for primitive-like kinds, own equality otherwise."""
from __future__ import annotations

import datetime
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

# Every NaN normalizes to this object so NaN members stay reflexive and hash alike.
_NAN = math.nan


class ValueKind(Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"
    INSTANT = "instant"
    OPAQUE = "opaque"


@dataclass(frozen=True, eq=False)
class CanonicalValue:
    """
    Normalized member value. Values of different kinds never compare equal;
    within a kind, identical or == values do.
    """

    kind: ValueKind
    value: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalValue):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        return self.value is other.value or bool(self.value == other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def normalize(value: Any) -> CanonicalValue:
    """Map a raw member value to its CanonicalValue."""
    # Enum before bool/int/str: IntEnum and StrEnum members keep their own identity.
    if value is None or isinstance(value, Enum):
        return CanonicalValue(ValueKind.OPAQUE, value)
    if isinstance(value, bool):
        return CanonicalValue(ValueKind.BOOLEAN, value)
    if isinstance(value, (numbers.Real, Decimal)):
        if _is_nan(value):
            return CanonicalValue(ValueKind.NUMBER, _NAN)
        return CanonicalValue(ValueKind.NUMBER, value)
    if isinstance(value, str):
        return CanonicalValue(ValueKind.TEXT, value)
    if isinstance(value, (datetime.date, datetime.time)):
        return CanonicalValue(ValueKind.INSTANT, value)
    return CanonicalValue(ValueKind.OPAQUE, value)
