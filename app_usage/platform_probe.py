# MIT License – Copyright (c) 2025 Menny Levinski

"""
Windows version detection used to pick the UserAssist record layout.
"""

import logging
import platform
import re

from .codec import LayoutVersion, select_layout
from .errors import PlatformProbeError

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^\s*(\d+)\.(\d+)")


def parse_version(text):
    match = _VERSION_RE.match(text or "")
    if not match:
        raise PlatformProbeError(f"Unrecognized Windows version: {text!r}")
    return int(match.group(1)), int(match.group(2))


def current_version():
    """Return the running Windows (major, minor) version."""
    if platform.system() != "Windows":
        raise PlatformProbeError(f"Not running on Windows ({platform.system() or 'unknown'})")
    return parse_version(platform.version())


def detect_layout():
    """
    Select the record layout for the running system.

    A failed version probe falls back to the legacy layout instead of
    aborting the report.
    """
    try:
        major, minor = current_version()
    except PlatformProbeError as e:
        logger.warning("Version probe failed (%s), using legacy layout", e)
        return LayoutVersion.LEGACY

    layout = select_layout(major, minor)
    logger.debug("Windows %d.%d uses %s layout", major, minor, layout.value)
    return layout
