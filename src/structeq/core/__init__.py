from structeq.core.config import EqualityConfig
from structeq.core.equality import EqualityCore, configure, get_default_core
from structeq.core.errors import (
    EqualityError,
    MemberAccessError,
    MemberConfigurationError,
    MemberHashError,
)
from structeq.core.members import (
    MEMBER_METADATA_KEY,
    MemberDescriptor,
    MemberRegistry,
    equality_member,
    member,
)
from structeq.core.normalize import CanonicalValue, ValueKind, normalize

__all__ = [
    "EqualityConfig",
    "EqualityCore",
    "configure",
    "get_default_core",
    "EqualityError",
    "MemberAccessError",
    "MemberConfigurationError",
    "MemberHashError",
    "MEMBER_METADATA_KEY",
    "MemberDescriptor",
    "MemberRegistry",
    "equality_member",
    "member",
    "CanonicalValue",
    "ValueKind",
    "normalize",
]
