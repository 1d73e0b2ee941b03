"""Catalog domain: entities, value objects and a hand-marked line type."""
from __future__ import annotations

from dataclasses import field
from decimal import Decimal

from structeq import EqualityDefinition, Entity, ValueObject, equality_member, value_object


@value_object
class Money(ValueObject):
    amount: Decimal
    currency: str


@value_object
class Sku(ValueObject):
    code: str
    # display label is presentation only
    label: str = field(default="", metadata={"equality_member": False})


class Product(Entity):
    def __init__(self, id: str, sku: Sku, price: Money) -> None:
        super().__init__(id)
        self.sku = sku
        self.price = price


class OrderLine(EqualityDefinition):
    """Two lines are the same when they order the same quantity of the same sku."""

    def __init__(self, sku: Sku, quantity: int, note: str = "") -> None:
        self._sku = sku
        self._quantity = quantity
        self.note = note

    @equality_member
    def sku(self) -> Sku:
        return self._sku

    @equality_member
    def quantity(self) -> int:
        return self._quantity
