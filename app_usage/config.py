# MIT License – Copyright (c) 2025 Menny Levinski

"""
Fixed settings for locating and reading UserAssist records.
"""

# --- Registry paths (relative to HKEY_CURRENT_USER or the NTUSER.DAT root) ---
KEY_PREFIX = "Software\\Microsoft\\Windows\\CurrentVersion\\Explorer\\UserAssist\\"
KEY_SUFFIX = "\\Count"

# GUID subkeys holding Count values, per record layout
LEGACY_LOCATIONS = (
    "{0D6D4F41-2994-4BA0-8FEF-620E43CD2812}",
    "{5E6AB780-7743-11CF-A12B-00AA004AE837}",
    "{75048700-EF1F-11D0-9888-006097DEACF9}",
)
MODERN_LOCATIONS = (
    "{CEBFF5CD-ACE2-4F4F-9178-9926F41749EA}",  # executables
    "{F4E57C4B-2036-45F0-A9AB-443BCFE33D9F}",  # shortcuts
)

# --- Grow-and-retry buffer sizing ---
INITIAL_NAME_CHARS = 64
INITIAL_VALUE_BYTES = 128
GROWTH_FACTOR = 2
MAX_NAME_CHARS = 16384       # registry value names are limited to 16383 chars
MAX_VALUE_BYTES = 1024 * 1024

# --- Report ---
TIME_PLACEHOLDER = "INCORRECT TIME STAMP"
LONG_DATE_FORMAT = "%A, %d %B %Y"
SEPARATOR = "–" * 40
