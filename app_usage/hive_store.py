# MIT License – Copyright (c) 2025 Menny Levinski

"""
Offline store reading an NTUSER.DAT hive file with python-registry.
"""

import logging
from typing import Any, List, NamedTuple

from Registry import Registry, RegistryParse

from .errors import (
    ERROR_BADDB,
    ERROR_NO_MORE_ITEMS,
    InsufficientBufferError,
    OsOperationError,
    StorageNotFoundError,
)
from .store import KeyInfo, KeyValueStore

logger = logging.getLogger(__name__)


class _HiveKey(NamedTuple):
    path: str
    values: List[Any]


class HiveStore(KeyValueStore):
    """
    Key paths are relative to the hive root, which is where the
    HKEY_CURRENT_USER tree starts inside NTUSER.DAT.
    """

    def __init__(self, hive_path):
        self.hive_path = hive_path
        try:
            self.registry = Registry.Registry(hive_path)
        except FileNotFoundError as e:
            raise StorageNotFoundError(hive_path, e.strerror) from e
        except OSError as e:
            raise OsOperationError(e.errno, e.strerror, hive_path) from e
        except RegistryParse.ParseException as e:
            raise OsOperationError(ERROR_BADDB, f"Invalid registry hive: {e}", hive_path) from e
        logger.debug("Loaded hive %s", hive_path)

    def open(self, path):
        relative = path.strip("\\")
        try:
            key = self.registry.open(relative)
            return _HiveKey(relative, list(key.values()))
        except Registry.RegistryKeyNotFoundException as e:
            raise StorageNotFoundError(path) from e
        except RegistryParse.ParseException as e:
            raise OsOperationError(ERROR_BADDB, str(e), path) from e

    def info(self, handle):
        try:
            return KeyInfo(
                value_count=len(handle.values),
                max_name_chars=max((len(v.name()) for v in handle.values), default=0),
                max_value_bytes=max((len(v.raw_data()) for v in handle.values), default=0),
            )
        except RegistryParse.ParseException as e:
            raise OsOperationError(ERROR_BADDB, str(e), handle.path) from e

    def enumerate_at(self, handle, index, name_capacity, value_capacity):
        if not 0 <= index < len(handle.values):
            raise OsOperationError(ERROR_NO_MORE_ITEMS, "No more data is available", handle.path)

        value = handle.values[index]
        try:
            name = value.name()
            data = value.raw_data()
        except RegistryParse.ParseException as e:
            raise OsOperationError(ERROR_BADDB, str(e), handle.path) from e

        # Capacities count the terminating NUL for names, as RegEnumValueW does
        if len(name) + 1 > name_capacity or len(data) > value_capacity:
            raise InsufficientBufferError(name_hint=len(name) + 1, value_hint=len(data))
        return name, data

    def close(self, handle):
        handle.values.clear()
