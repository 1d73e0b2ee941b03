import pytest

from structeq.core import equality
from entities import ChildRecord, Record


@pytest.fixture(autouse=True)
def isolated_default_core(monkeypatch):
    """Every test starts from a fresh default core built from a clean environment."""
    for key in ("STRUCTEQ_HASH_SALT", "STRUCTEQ_CACHE_MEMBERS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(equality, "_default_core", None)


@pytest.fixture
def records():
    """(first, equal copy, different value, same instance as first)."""
    first = Record(1)
    return first, Record(1), Record(2), first


@pytest.fixture
def child_records():
    """(first, equal copy, differs on base member, differs on own member, same instance)."""
    first = ChildRecord(1, "test")
    return first, ChildRecord(1, "test"), ChildRecord(2, "test"), ChildRecord(1, "test2"), first
