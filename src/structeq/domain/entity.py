"""Entity — identity-bearing object (id)."""
from __future__ import annotations

from typing import Any

from structeq.domain.definition import EqualityDefinition


class Entity(EqualityDefinition):
    """
    Entity: equality and hash by id.
    Each direct subclass is its own equality type, so an Order and a
    Customer sharing an id are not equal.
    """

    __equality_members__ = ("id",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        kwargs.setdefault("equality_root", Entity in cls.__bases__)
        super().__init_subclass__(**kwargs)

    def __init__(self, id: str) -> None:
        self.id = id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
