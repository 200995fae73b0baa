from __future__ import annotations

import itertools
from datetime import datetime, timezone

import pytest

from church_roster.state import AppState
from church_roster.storage.adapter import StorageAdapter
from church_roster.storage.store import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def state(store):
    return AppState.load(StorageAdapter(store))


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"s{next(counter)}"


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 21, 9, 30, 0, tzinfo=timezone.utc)
