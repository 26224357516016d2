# MIT License – Copyright (c) 2025 Menny Levinski

"""
Conversion between UserAssist value data and (run counter, last run time).

Record layout:

    Field                Legacy offset   Modern offset   Width
    run counter          4               4               u32 LE
    last run (high,low)  8               60              2 x u32 LE

The last run time is a FILETIME tick count (100 ns intervals since
1601-01-01), assembled as (high << 32) | low. It is never converted to
Unix time implicitly; use ticks_to_unix() or ticks_to_datetime().
"""

import enum
import struct
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

from .errors import EncodeError, RecordTooShortError

COUNTER_OFFSET = 4
FILETIME_UNIX_DIFF = 116444736000000000
TICKS_PER_SECOND = 10000000
FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)

_U32 = struct.Struct("<I")
_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


class LayoutVersion(enum.Enum):
    LEGACY = "legacy"    # Windows XP / Vista
    MODERN = "modern"    # Windows 7 and later


_TIMESTAMP_OFFSETS = {
    LayoutVersion.LEGACY: 8,
    LayoutVersion.MODERN: 60,
}


class DecodeResult(NamedTuple):
    counter: int
    last_run: int
    error: Optional[RecordTooShortError] = None

    @property
    def ok(self):
        return self.error is None


def select_layout(major, minor):
    """Windows 7 (6.1) and every later release use the modern layout."""
    if (major, minor) >= (6, 1):
        return LayoutVersion.MODERN
    return LayoutVersion.LEGACY


def timestamp_offset(layout):
    return _TIMESTAMP_OFFSETS[layout]


def minimum_length(layout):
    return timestamp_offset(layout) + 8


def decode(raw, layout, length=None):
    """
    Extract the run counter and last run ticks from a raw value.

    `length` limits how much of `raw` is considered and can never extend
    past the end of the buffer. A record shorter than the layout's minimum
    yields counter=0, last_run=0 with a RecordTooShortError attached
    instead of raising, so one bad record does not stop a report.
    """
    available = len(raw) if length is None else max(0, min(length, len(raw)))
    required = minimum_length(layout)
    if available < required:
        return DecodeResult(0, 0, RecordTooShortError(available, required))

    offset = timestamp_offset(layout)
    (counter,) = _U32.unpack_from(raw, COUNTER_OFFSET)
    (high,) = _U32.unpack_from(raw, offset)
    (low,) = _U32.unpack_from(raw, offset + 4)
    return DecodeResult(counter, (high << 32) | low)


def encode(counter, last_run, layout):
    """
    Build a minimal record holding `counter` and `last_run` for `layout`.

    Returns b"" when either value is zero: a zero counter or timestamp is
    treated as "nothing to encode". Values that do not fit their field
    raise EncodeError.
    """
    if counter == 0 or last_run == 0:
        return b""
    if not 0 < counter <= _U32_MAX:
        raise EncodeError(f"Counter out of range: {counter}")
    if not 0 < last_run <= _U64_MAX:
        raise EncodeError(f"Timestamp out of range: {last_run}")

    offset = timestamp_offset(layout)
    buffer = bytearray(minimum_length(layout))
    _U32.pack_into(buffer, COUNTER_OFFSET, counter)
    _U32.pack_into(buffer, offset, last_run >> 32)
    _U32.pack_into(buffer, offset + 4, last_run & _U32_MAX)
    return bytes(buffer)


def ticks_to_unix(ticks):
    return (ticks - FILETIME_UNIX_DIFF) / TICKS_PER_SECOND


def ticks_to_datetime(ticks):
    """Convert FILETIME ticks to an aware UTC datetime.

    Raises OverflowError or ValueError when the value is outside the
    range datetime can represent.
    """
    if ticks < 0:
        raise ValueError(f"Negative FILETIME: {ticks}")
    return FILETIME_EPOCH + timedelta(microseconds=ticks // 10)
