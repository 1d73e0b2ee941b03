"""
EqualityDefinition — base class that gives a type structural equality.

Mark the members that take part (equality_member, member(), or
__equality_members__); ==, !=, hash() and the equals()/not_equals()
helpers then all agree. With no marked members the type keeps
identity equality and identity hashing.

Override is_equal_to() and/or equality_hash() when marked members cannot
express the definition (tolerances, comparing nested composites by value).
Do not override __eq__ directly: Python would drop the inherited __hash__.
"""
from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from structeq.core.equality import EqualityCore, get_default_core

T = TypeVar("T", bound="EqualityDefinition")


class EqualityDefinition:
    """Structural equality over marked members; identity when none are marked."""

    __equality_type__: ClassVar[type[EqualityDefinition]]
    __equality_core__: ClassVar[EqualityCore | None] = None

    def __init_subclass__(cls, equality_root: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if equality_root or EqualityDefinition in cls.__bases__:
            cls.__equality_type__ = cls

    @classmethod
    def equality_core(cls) -> EqualityCore:
        return cls.__equality_core__ or get_default_core()

    def is_equal_to(self: T, other: T) -> bool:
        """Equality algorithm; default compares marked members."""
        return self.equality_core().is_equal(self, other)

    def equality_hash(self) -> int:
        """Hash algorithm; default sums marked member hashes."""
        return self.equality_core().hash_of(self)

    def equals(self: T, other: T | None) -> bool:
        """
        Typed equality: False for None or an instance outside this equality
        type, True for the same instance.
        """
        if other is None or not isinstance(other, self.__equality_type__):
            return False
        if other is self:
            return True
        return self.is_equal_to(other)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return self.equality_hash()


EqualityDefinition.__equality_type__ = EqualityDefinition


def equals(left: EqualityDefinition | None, right: EqualityDefinition | None) -> bool:
    """Symmetric equality between two possibly-None references."""
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return left.equals(right)


def not_equals(left: EqualityDefinition | None, right: EqualityDefinition | None) -> bool:
    return not equals(left, right)
