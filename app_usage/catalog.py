# MIT License – Copyright (c) 2025 Menny Levinski

"""
Ordered, read-only collection of UserAssist entries from one enumeration pass.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from . import codec


@dataclass
class CatalogEntry:
    name: str
    raw: bytes
    location: str = ""
    _decoded: Optional[codec.DecodeResult] = field(default=None, init=False, repr=False, compare=False)
    _decoded_layout: Optional[codec.LayoutVersion] = field(default=None, init=False, repr=False, compare=False)

    def decoded(self, layout):
        # Cached per layout; the raw bytes stay the source of truth
        if self._decoded is None or self._decoded_layout is not layout:
            self._decoded = codec.decode(self.raw, layout)
            self._decoded_layout = layout
        return self._decoded


class Catalog:
    """
    Entries in discovery order: storage location order, then the order the
    store enumerated values within a location. Duplicate names are kept.

    Every decode uses the single layout the catalog was built with.
    """

    def __init__(self, layout, entries=None):
        self.layout = layout
        self._entries: List[CatalogEntry] = list(entries or [])

    def append(self, entry):
        self._entries.append(entry)

    def size(self):
        return len(self._entries)

    def name(self, index):
        return self._entry(index).name

    def raw(self, index):
        return self._entry(index).raw

    def location(self, index):
        return self._entry(index).location

    def decoded(self, index):
        return self._entry(index).decoded(self.layout)

    def counter(self, index):
        return self.decoded(index).counter

    def last_run(self, index):
        return self.decoded(index).last_run

    @property
    def entries(self):
        return tuple(self._entries)

    def _entry(self, index):
        if not 0 <= index < len(self._entries):
            raise IndexError(f"Catalog index {index} out of range (size {len(self._entries)})")
        return self._entries[index]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self):
        return f"Catalog(layout={self.layout.value}, size={len(self._entries)})"
