"""Library config: hash salt and member caching, optionally loaded from env."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class EqualityConfig:
    """
    Settings shared by one EqualityCore.
    hash_salt is added per member when hashing, so it must be non-zero.
    Change it only before any instance has been hashed.
    """

    hash_salt: int = 17
    cache_members: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.hash_salt, bool) or not isinstance(self.hash_salt, int):
            raise ValueError(f"hash_salt must be an int, got {self.hash_salt!r}")
        if self.hash_salt == 0:
            raise ValueError("hash_salt must be non-zero")

    @classmethod
    def load_from_env(cls, prefix: str = "STRUCTEQ_", **defaults: Any) -> EqualityConfig:
        """Build from os.environ with prefix (STRUCTEQ_HASH_SALT, STRUCTEQ_CACHE_MEMBERS) over defaults."""
        values = dict(defaults)
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            if name == "hash_salt":
                try:
                    values[name] = int(value)
                except ValueError:
                    raise ValueError(f"{key} must be an integer, got {value!r}") from None
            elif name == "cache_members":
                values[name] = _parse_bool(key, value)
        return cls(**values)
