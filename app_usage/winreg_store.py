# MIT License – Copyright (c) 2025 Menny Levinski

"""
Live registry store for the current user (HKEY_CURRENT_USER).

Keys are opened with winreg. Key info and values are read with
RegQueryInfoKeyW and RegEnumValueW through ctypes so the caller's buffer
capacities are honoured and ERROR_MORE_DATA reaches the grow-and-retry loop.
"""

import ctypes
import logging
import winreg
from ctypes import wintypes

import pywintypes
import win32api
import win32con as con
import winerror

from .errors import InsufficientBufferError, OsOperationError, StorageNotFoundError
from .store import KeyInfo, KeyValueStore

logger = logging.getLogger(__name__)

_advapi32 = ctypes.WinDLL("advapi32")
_RegEnumValueW = _advapi32.RegEnumValueW
_RegEnumValueW.argtypes = [
    wintypes.HKEY,
    wintypes.DWORD,
    wintypes.LPWSTR,
    ctypes.POINTER(wintypes.DWORD),
    ctypes.POINTER(wintypes.DWORD),
    ctypes.POINTER(wintypes.DWORD),
    ctypes.POINTER(ctypes.c_ubyte),
    ctypes.POINTER(wintypes.DWORD),
]
_RegEnumValueW.restype = wintypes.LONG

_RegQueryInfoKeyW = _advapi32.RegQueryInfoKeyW
_RegQueryInfoKeyW.argtypes = (
    [wintypes.HKEY, wintypes.LPWSTR]
    + [ctypes.POINTER(wintypes.DWORD)] * 9
    + [ctypes.c_void_p]    # PFILETIME
)
_RegQueryInfoKeyW.restype = wintypes.LONG


def describe_error(code):
    """System message for a Win32 error code, or "" if there is none."""
    try:
        return win32api.FormatMessage(code)
    except pywintypes.error:
        return ""


class WinregStore(KeyValueStore):

    def __init__(self, root=winreg.HKEY_CURRENT_USER):
        self.root = root

    def open(self, path):
        access = con.KEY_READ | con.KEY_ENUMERATE_SUB_KEYS | con.KEY_QUERY_VALUE
        try:
            return winreg.OpenKey(self.root, path, 0, access)
        except FileNotFoundError as e:
            raise StorageNotFoundError(path, e.strerror or describe_error(winerror.ERROR_FILE_NOT_FOUND)) from e
        except OSError as e:
            code = e.winerror or e.errno
            raise OsOperationError(code, e.strerror or describe_error(code), path) from e

    def info(self, handle):
        values = wintypes.DWORD(0)
        max_name = wintypes.DWORD(0)
        max_data = wintypes.DWORD(0)
        status = _RegQueryInfoKeyW(
            wintypes.HKEY(handle.handle),
            None, None, None, None, None, None,
            ctypes.byref(values),
            ctypes.byref(max_name),    # characters, without the NUL
            ctypes.byref(max_data),
            None,
            None,
        )
        if status != winerror.ERROR_SUCCESS:
            raise OsOperationError(status, describe_error(status))
        return KeyInfo(values.value, max_name.value, max_data.value)

    def enumerate_at(self, handle, index, name_capacity, value_capacity):
        name = ctypes.create_unicode_buffer(name_capacity)
        name_len = wintypes.DWORD(name_capacity)
        data = (ctypes.c_ubyte * value_capacity)()
        data_len = wintypes.DWORD(value_capacity)
        value_type = wintypes.DWORD(0)

        status = _RegEnumValueW(
            wintypes.HKEY(handle.handle),
            index,
            name,
            ctypes.byref(name_len),
            None,
            ctypes.byref(value_type),
            data,
            ctypes.byref(data_len),
        )
        if status == winerror.ERROR_MORE_DATA:
            # Only the data length is updated on ERROR_MORE_DATA
            hint = data_len.value if data_len.value > value_capacity else None
            logger.debug("Value %d: more data (name %d chars, value %d bytes offered, %s needed)",
                         index, name_capacity, value_capacity, hint or "unknown")
            raise InsufficientBufferError(value_hint=hint)
        if status != winerror.ERROR_SUCCESS:
            raise OsOperationError(status, describe_error(status))

        return name.value[:name_len.value], bytes(data[:data_len.value])

    def close(self, handle):
        handle.Close()
