import pytest

from app_usage.errors import (
    InsufficientBufferError,
    OsOperationError,
    StorageNotFoundError,
)
from app_usage.store import KeyInfo, KeyValueStore


class FakeStore(KeyValueStore):
    """
    In-memory store keyed by full path. Values are (name, data) lists.

    `failures` maps a path to an exception raised on open. `hint` controls
    whether InsufficientBufferError carries the required sizes.
    """

    def __init__(self, keys=None, failures=None, hint=False):
        self.keys = keys or {}
        self.failures = failures or {}
        self.hint = hint
        self.open_handles = set()
        self.opened_paths = []
        self.attempts = []

    def open(self, path):
        self.opened_paths.append(path)
        if path in self.failures:
            raise self.failures[path]
        if path not in self.keys:
            raise StorageNotFoundError(path)
        self.open_handles.add(path)
        return path

    def info(self, handle):
        return KeyInfo(value_count=len(self.keys[handle]))

    def enumerate_at(self, handle, index, name_capacity, value_capacity):
        self.attempts.append((handle, index, name_capacity, value_capacity))
        values = self.keys[handle]
        if index >= len(values):
            raise OsOperationError(259, "No more data is available.")
        name, data = values[index]
        if len(name) + 1 > name_capacity or len(data) > value_capacity:
            if self.hint:
                raise InsufficientBufferError(name_hint=len(name) + 1, value_hint=len(data))
            raise InsufficientBufferError()
        return name, data

    def close(self, handle):
        self.open_handles.discard(handle)


@pytest.fixture
def fake_store():
    return FakeStore
