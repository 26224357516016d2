# MIT License – Copyright (c) 2025 Menny Levinski

"""
Exception types raised while reading and decoding UserAssist data.
"""

import string

ERROR_FILE_NOT_FOUND = 2
ERROR_MORE_DATA = 234
ERROR_NO_MORE_ITEMS = 259
ERROR_BADDB = 1009


class AppUsageError(Exception):
    """Base class for every error raised by the app_usage package."""


class DecodeError(AppUsageError):
    pass


class RecordTooShortError(DecodeError):
    def __init__(self, length, required):
        self.length = length
        self.required = required
        super().__init__(f"Record too short: {length} bytes, need {required}")


class EncodeError(AppUsageError):
    pass


class PlatformProbeError(AppUsageError):
    pass


class InsufficientBufferError(AppUsageError):
    """
    The store could not fit a name or value into the offered capacities.

    `name_hint` and `value_hint` carry the sizes the store reported as
    required, when it reported any.
    """

    def __init__(self, name_hint=None, value_hint=None):
        self.name_hint = name_hint
        self.value_hint = value_hint
        super().__init__("Buffer too small")


class OsOperationError(AppUsageError):
    """
    A storage operation failed with a native error code.

    The description is the system message for the code, with trailing
    whitespace and periods removed.
    """

    def __init__(self, code, description=None, path=None):
        self.code = code
        self.description = clean_description(description)
        self.path = path
        super().__init__(self.description or "WindowsError")

    def __str__(self):
        return self.description or "WindowsError"


class StorageNotFoundError(OsOperationError):
    def __init__(self, path=None, description="The system cannot find the file specified"):
        super().__init__(ERROR_FILE_NOT_FOUND, description, path)


class RecordTooLargeError(OsOperationError):
    def __init__(self, index, name_capacity, value_capacity, path=None):
        self.index = index
        self.name_capacity = name_capacity
        self.value_capacity = value_capacity
        super().__init__(
            ERROR_MORE_DATA,
            f"Record {index} does not fit in {name_capacity} name characters "
            f"and {value_capacity} value bytes",
            path,
        )


def clean_description(text):
    if not text:
        return ""
    return text.rstrip(string.whitespace + ".")
