# MIT License – Copyright (c) 2025 Menny Levinski

"""
Reads the Windows UserAssist registry area: which applications a user
launched, how many times, and when each was last run.
"""

from .catalog import Catalog, CatalogEntry
from .codec import DecodeResult, LayoutVersion, decode, encode, select_layout
from .enumerator import Enumerator
from .errors import (
    AppUsageError,
    DecodeError,
    EncodeError,
    OsOperationError,
    PlatformProbeError,
    RecordTooLargeError,
    RecordTooShortError,
    StorageNotFoundError,
)

__all__ = [
    "AppUsageError",
    "Catalog",
    "CatalogEntry",
    "DecodeError",
    "DecodeResult",
    "EncodeError",
    "Enumerator",
    "LayoutVersion",
    "OsOperationError",
    "PlatformProbeError",
    "RecordTooLargeError",
    "RecordTooShortError",
    "StorageNotFoundError",
    "decode",
    "encode",
    "select_layout",
]
