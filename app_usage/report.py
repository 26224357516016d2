# MIT License – Copyright (c) 2025 Menny Levinski

"""
Text and JSON rendering of a Catalog.
"""

import json

from . import config
from .codec import ticks_to_datetime


def format_long_date(ticks):
    """Long date for FILETIME ticks, or the placeholder if it can't be shown."""
    if not ticks:
        return config.TIME_PLACEHOLDER
    try:
        return ticks_to_datetime(ticks).strftime(config.LONG_DATE_FORMAT)
    except (OverflowError, ValueError):
        return config.TIME_PLACEHOLDER


def _iso_time(ticks):
    if not ticks:
        return None
    try:
        return ticks_to_datetime(ticks).isoformat()
    except (OverflowError, ValueError):
        return None


def format_catalog(catalog):
    """Return the File / Counter / Time report, one block per entry."""
    report = [""]

    size = catalog.size()
    if size == 0:
        report.append("(No entries found)")
        return "\n".join(report)

    for i in range(size):
        report.append(f"File:    {catalog.name(i)}")
        report.append(f"Counter: {catalog.counter(i)}")
        report.append(f"Time:    {format_long_date(catalog.last_run(i))}")

        # Add separator only if not the last entry
        if i != size - 1:
            report.append(config.SEPARATOR)

    return "\n".join(report)


def catalog_to_json(catalog):
    entries = []
    for i in range(catalog.size()):
        last_run = catalog.last_run(i)
        entries.append({
            "name": catalog.name(i),
            "counter": catalog.counter(i),
            "last_run": last_run,
            "last_run_time": _iso_time(last_run),
            "location": catalog.location(i),
        })
    return json.dumps({"layout": catalog.layout.value, "entries": entries}, indent=4)
