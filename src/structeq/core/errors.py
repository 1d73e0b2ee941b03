"""Errors raised when a type's equality declaration is malformed."""
from __future__ import annotations

from typing import Any


class EqualityError(Exception):
    """Base error for structeq."""


class MemberConfigurationError(EqualityError):
    """A designated equality member is declared or configured incorrectly."""

    def __init__(self, owner: type[Any], member: str, message: str) -> None:
        self.owner = owner
        self.member = member
        super().__init__(f"{owner.__qualname__}.{member}: {message}")


class MemberAccessError(MemberConfigurationError):
    """A designated equality member could not be read from an instance."""


class MemberHashError(MemberConfigurationError):
    """A designated equality member holds a value that cannot be hashed."""
