"""ValueObject — value without identity; equality by fields."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from structeq.domain.definition import EqualityDefinition


class ValueObject(EqualityDefinition):
    """
    Value object: equality and hash by every dataclass field.
    Exclude a field with field(metadata={"equality_member": False}).
    Declare subclasses with @value_object, not a bare @dataclass.
    """

    __equality_all_fields__ = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        kwargs.setdefault("equality_root", ValueObject in cls.__bases__)
        super().__init_subclass__(**kwargs)


def value_object(cls: Any = None, **kwargs: Any) -> Any:
    """
    Frozen dataclass that keeps ValueObject's __eq__/__hash__
    (a plain @dataclass(frozen=True) would generate its own).
    """
    kwargs.update(frozen=True, eq=False)
    if cls is None:
        return dataclass(**kwargs)
    return dataclass(**kwargs)(cls)
