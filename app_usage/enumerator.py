# MIT License – Copyright (c) 2025 Menny Levinski

"""
Walks the UserAssist Count keys and collects every record into a Catalog.
"""

import logging

from . import cipher, config
from .catalog import Catalog, CatalogEntry
from .codec import LayoutVersion
from .errors import InsufficientBufferError, RecordTooLargeError, StorageNotFoundError
from .store import opened

logger = logging.getLogger(__name__)

_LOCATIONS = {
    LayoutVersion.LEGACY: config.LEGACY_LOCATIONS,
    LayoutVersion.MODERN: config.MODERN_LOCATIONS,
}


def locations_for(layout):
    return _LOCATIONS[layout]


def storage_path(location):
    return f"{config.KEY_PREFIX}{location}{config.KEY_SUFFIX}"


class Enumerator:
    """
    Reads UserAssist records from `store` for one record layout.

    Any storage error aborts the pass and nothing is returned. With
    `skip_missing`, a location that does not exist is skipped instead.
    """

    def __init__(self, store, layout, locations=None, skip_missing=False,
                 initial_name_chars=config.INITIAL_NAME_CHARS,
                 initial_value_bytes=config.INITIAL_VALUE_BYTES,
                 max_name_chars=config.MAX_NAME_CHARS,
                 max_value_bytes=config.MAX_VALUE_BYTES):
        for label, value in (("initial_name_chars", initial_name_chars),
                             ("initial_value_bytes", initial_value_bytes),
                             ("max_name_chars", max_name_chars),
                             ("max_value_bytes", max_value_bytes)):
            if value <= 0:
                raise ValueError(f"{label} must be positive, got {value}")
        if initial_name_chars > max_name_chars or initial_value_bytes > max_value_bytes:
            raise ValueError("Initial buffer capacities exceed their caps")

        self.store = store
        self.layout = layout
        self.locations = tuple(locations) if locations is not None else locations_for(layout)
        self.skip_missing = skip_missing
        self.initial_name_chars = initial_name_chars
        self.initial_value_bytes = initial_value_bytes
        self.max_name_chars = max_name_chars
        self.max_value_bytes = max_value_bytes

    def enumerate(self):
        """Build a fresh Catalog from every location, in order."""
        catalog = Catalog(self.layout)
        for location in self.locations:
            path = storage_path(location)
            try:
                with opened(self.store, path) as handle:
                    self._read_location(handle, location, path, catalog)
            except StorageNotFoundError:
                if not self.skip_missing:
                    raise
                logger.warning("Skipping missing location %s", path)

        logger.debug("Collected %d entries", catalog.size())
        return catalog

    def _read_location(self, handle, location, path, catalog):
        info = self.store.info(handle)
        logger.debug("Opened %s (%d values)", path, info.value_count)
        for index in range(info.value_count):
            name, data = self.retrieve(handle, index, path, info)
            catalog.append(CatalogEntry(name=cipher.transform(name), raw=bytes(data), location=location))

    def retrieve(self, handle, index, path=None, info=None):
        """
        Fetch the (name, data) pair at `index`, growing both buffer
        capacities while the store reports them too small.

        When `info` carries the key's longest name and value, the first
        attempt is sized from them. Capacities at least double on each
        attempt and are capped, so the loop ends after a bounded number of
        attempts with either the record or RecordTooLargeError.
        """
        name_chars = self.initial_name_chars
        value_bytes = self.initial_value_bytes
        if info is not None:
            # Longest name excludes the terminating NUL
            if info.max_name_chars:
                name_chars = min(max(name_chars, info.max_name_chars + 1), self.max_name_chars)
            if info.max_value_bytes:
                value_bytes = min(max(value_bytes, info.max_value_bytes), self.max_value_bytes)
        while True:
            try:
                return self.store.enumerate_at(handle, index, name_chars, value_bytes)
            except InsufficientBufferError as e:
                if name_chars >= self.max_name_chars and value_bytes >= self.max_value_bytes:
                    raise RecordTooLargeError(index, name_chars, value_bytes, path) from e
                name_chars = self._grow(name_chars, e.name_hint, self.max_name_chars)
                value_bytes = self._grow(value_bytes, e.value_hint, self.max_value_bytes)
                logger.debug("Value %d: retrying with %d name chars, %d value bytes",
                             index, name_chars, value_bytes)

    @staticmethod
    def _grow(current, hint, cap):
        wanted = max(current * config.GROWTH_FACTOR, current + 1, hint or 0)
        return min(wanted, cap)
