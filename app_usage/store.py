# MIT License – Copyright (c) 2025 Menny Levinski

"""
Key-value store interface the enumerator reads UserAssist records from.

A store never reports name or value sizes up front. enumerate_at() is
handed the capacities the caller is prepared to accept and raises
InsufficientBufferError when either is too small.
"""

import abc
from contextlib import contextmanager
from typing import NamedTuple


class KeyInfo(NamedTuple):
    value_count: int
    max_name_chars: int = 0
    max_value_bytes: int = 0


class KeyValueStore(abc.ABC):

    @abc.abstractmethod
    def open(self, path):
        """Open `path` and return a handle.

        Raises StorageNotFoundError when the key does not exist and
        OsOperationError for any other failure.
        """

    @abc.abstractmethod
    def info(self, handle):
        """Return a KeyInfo for an open handle."""

    @abc.abstractmethod
    def enumerate_at(self, handle, index, name_capacity, value_capacity):
        """Return (name, data) for the value at `index`.

        Raises InsufficientBufferError when the name does not fit in
        `name_capacity` characters or the data in `value_capacity` bytes.
        """

    @abc.abstractmethod
    def close(self, handle):
        pass


@contextmanager
def opened(store, path):
    handle = store.open(path)
    try:
        yield handle
    finally:
        store.close(handle)
