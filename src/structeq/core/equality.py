"""EqualityCore: structural equality and hashing over designated members."""
from __future__ import annotations

import logging
from typing import Any

from structeq.core.config import EqualityConfig
from structeq.core.errors import MemberHashError
from structeq.core.members import MemberDescriptor, MemberRegistry
from structeq.core.normalize import normalize

logger = logging.getLogger(__name__)


class EqualityCore:
    """
    Decide equality between two instances and hash one instance
    from the same set of designated members.
    """

    def __init__(self, registry: MemberRegistry | None = None, config: EqualityConfig | None = None) -> None:
        self.config = config or EqualityConfig()
        self.registry = registry or MemberRegistry(cache=self.config.cache_members)

    def is_equal(self, instance: Any, other: Any) -> bool:
        """
        True when every designated member of other's type holds an equal
        value on both instances. With no designated members only the same
        instance is equal.
        """
        if other is None:
            return False
        members = self.registry.members_of(type(other))
        if not members:
            return instance is other
        if type(instance) is not type(other) and not self._same_members(type(instance), members):
            return False
        for descriptor in members:
            mine = normalize(descriptor.read(instance))
            theirs = normalize(descriptor.read(other))
            if mine != theirs:
                logger.debug(
                    "%s differs on %r: %r != %r",
                    type(other).__qualname__, descriptor.name, mine.value, theirs.value,
                )
                return False
        return True

    def hash_of(self, instance: Any) -> int:
        """Sum of member hashes plus salt; identity hash when nothing is designated."""
        members = self.registry.members_of(type(instance))
        if not members:
            return object.__hash__(instance)
        salt = self.config.hash_salt
        return sum(self._member_hash(descriptor, instance) + salt for descriptor in members)

    def _same_members(self, cls: type[Any], members: tuple[MemberDescriptor, ...]) -> bool:
        own = self.registry.members_of(cls)
        return [d.name for d in own] == [d.name for d in members]

    @staticmethod
    def _member_hash(descriptor: MemberDescriptor, instance: Any) -> int:
        value = descriptor.read(instance)
        try:
            return hash(normalize(value))
        except TypeError as exc:
            raise MemberHashError(
                descriptor.owner, descriptor.name, f"value of type {type(value).__name__} is unhashable"
            ) from exc


_default_core: EqualityCore | None = None


def get_default_core() -> EqualityCore:
    """Core shared by all EqualityDefinition types that do not pin their own."""
    global _default_core
    if _default_core is None:
        _default_core = EqualityCore(config=EqualityConfig.load_from_env())
    return _default_core


def configure(config: EqualityConfig) -> EqualityCore:
    """Replace the default core. Call before any instance is hashed."""
    global _default_core
    _default_core = EqualityCore(config=config)
    logger.debug("Default equality core configured: %r", config)
    return _default_core
