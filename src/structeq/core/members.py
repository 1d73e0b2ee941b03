"""Equality members: how a class marks them and how they are discovered."""
from __future__ import annotations

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from structeq.core.errors import MemberAccessError, MemberConfigurationError

logger = logging.getLogger(__name__)

MEMBER_METADATA_KEY = "equality_member"


class equality_member(property):
    """
    Property that takes part in equality and hashing.

        class Money(EqualityDefinition):
            @equality_member
            def amount(self) -> int:
                return self._amount
    """


def member(**kwargs: Any) -> Any:
    """
    dataclasses.field() whose value takes part in equality and hashing.
    Declare the dataclass with eq=False so it keeps the inherited __eq__/__hash__.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[MEMBER_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclass(frozen=True)
class MemberDescriptor:
    """One designated member of a class: name, declared kind, declaring class."""

    name: str
    kind: Any
    owner: type[Any]

    def read(self, instance: Any) -> Any:
        try:
            return getattr(instance, self.name)
        except AttributeError as exc:
            raise MemberAccessError(self.owner, self.name, f"cannot be read: {exc}") from exc


def _explicit_members(klass: type[Any]) -> list[MemberDescriptor]:
    names = vars(klass).get("__equality_members__", ())
    if isinstance(names, str):
        raise MemberConfigurationError(
            klass, names, "__equality_members__ must be a sequence of names, not a string"
        )
    annotations = inspect.get_annotations(klass)
    out: list[MemberDescriptor] = []
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise MemberConfigurationError(klass, repr(name), "not a valid attribute name")
        out.append(MemberDescriptor(name, annotations.get(name), klass))
    return out


def _property_members(klass: type[Any]) -> list[MemberDescriptor]:
    out: list[MemberDescriptor] = []
    for name, attr in vars(klass).items():
        if not isinstance(attr, equality_member):
            continue
        if attr.fget is None:
            raise MemberConfigurationError(klass, name, "equality_member has no getter")
        kind = inspect.get_annotations(attr.fget).get("return")
        out.append(MemberDescriptor(name, kind, klass))
    return out


def _field_members(klass: type[Any]) -> list[MemberDescriptor]:
    if "__dataclass_fields__" not in vars(klass):
        return []
    if "__eq__" in vars(klass) or klass.__hash__ is None:
        raise MemberConfigurationError(
            klass, "__eq__", "dataclass replaces the inherited __eq__/__hash__; declare it with eq=False"
        )
    all_fields = getattr(klass, "__equality_all_fields__", False)
    out: list[MemberDescriptor] = []
    for f in dataclasses.fields(klass):
        flag = f.metadata.get(MEMBER_METADATA_KEY)
        if flag or (all_fields and flag is None):
            out.append(MemberDescriptor(f.name, f.type, klass))
    return out


def _excluded_fields(klass: type[Any]) -> list[str]:
    """Fields klass itself declares with equality_member=False."""
    if "__dataclass_fields__" not in vars(klass):
        return []
    own = inspect.get_annotations(klass)
    return [
        f.name for f in dataclasses.fields(klass)
        if f.name in own and f.metadata.get(MEMBER_METADATA_KEY) is False
    ]


class MemberRegistry:
    """
    Discover designated members per class, base classes first.
    Results are cached per class; the cache is filled with setdefault,
    so concurrent first use just recomputes the same tuple.
    """

    def __init__(self, cache: bool = True) -> None:
        self._cache = cache
        self._members: dict[type[Any], tuple[MemberDescriptor, ...]] = {}

    def members_of(self, cls: type[Any]) -> tuple[MemberDescriptor, ...]:
        """Ordered designated members of cls and all its ancestors; empty if none."""
        if not isinstance(cls, type):
            raise TypeError(f"members_of() expects a class, got {cls!r}")
        cached = self._members.get(cls)
        if cached is not None:
            return cached
        members = self._discover(cls)
        if not self._cache:
            return members
        logger.debug("Caching %d equality members for %s", len(members), cls.__qualname__)
        return self._members.setdefault(cls, members)

    def clear(self) -> None:
        self._members.clear()

    def _discover(self, cls: type[Any]) -> tuple[MemberDescriptor, ...]:
        found: dict[str, MemberDescriptor] = {}
        collectors: tuple[Callable[[type[Any]], list[MemberDescriptor]], ...] = (
            _explicit_members,
            _property_members,
            _field_members,
        )
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for collect in collectors:
                for descriptor in collect(klass):
                    # redeclared names keep the base position
                    found[descriptor.name] = descriptor
            for name in _excluded_fields(klass):
                found.pop(name, None)
        members = tuple(found.values())
        logger.debug(
            "Discovered equality members for %s: %s",
            cls.__qualname__,
            ", ".join(d.name for d in members) or "<none>",
        )
        return members
