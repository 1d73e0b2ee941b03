"""
structeq — structural equality by declaration.
Inherit EqualityDefinition and mark the members that define equality;
==, !=, hash() and set/dict deduplication follow from them.
"""
from structeq.core import (
    EqualityConfig,
    EqualityCore,
    EqualityError,
    MemberAccessError,
    MemberConfigurationError,
    MemberHashError,
    MemberRegistry,
    configure,
    equality_member,
    member,
    normalize,
)
from structeq.domain import (
    EqualityDefinition,
    Entity,
    ValueObject,
    equals,
    not_equals,
    value_object,
)

__all__ = [
    "EqualityDefinition",
    "Entity",
    "ValueObject",
    "value_object",
    "equals",
    "not_equals",
    "equality_member",
    "member",
    "EqualityConfig",
    "EqualityCore",
    "MemberRegistry",
    "configure",
    "normalize",
    "EqualityError",
    "MemberAccessError",
    "MemberConfigurationError",
    "MemberHashError",
]
