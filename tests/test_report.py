import json

from app_usage import codec, config
from app_usage.catalog import Catalog, CatalogEntry
from app_usage.codec import LayoutVersion
from app_usage.report import catalog_to_json, format_catalog, format_long_date

# 2020-09-09 12:00:00 UTC
TICKS = 116444736000000000 + 1599652800 * 10000000


def _catalog():
    catalog = Catalog(LayoutVersion.MODERN)
    catalog.append(CatalogEntry("C:\\Windows\\notepad.exe", codec.encode(4, TICKS, LayoutVersion.MODERN), "{A}"))
    catalog.append(CatalogEntry("UEME_CTLSESSION", b"\x00" * 8, "{A}"))
    return catalog


def test_format_long_date():
    assert format_long_date(TICKS) == "Wednesday, 09 September 2020"


def test_format_long_date_placeholder():
    assert format_long_date(0) == config.TIME_PLACEHOLDER
    assert format_long_date(0xFFFFFFFFFFFFFFFF) == config.TIME_PLACEHOLDER


def test_format_catalog():
    report = format_catalog(_catalog())

    assert report.splitlines() == [
        "",
        "File:    C:\\Windows\\notepad.exe",
        "Counter: 4",
        "Time:    Wednesday, 09 September 2020",
        config.SEPARATOR,
        "File:    UEME_CTLSESSION",
        "Counter: 0",
        f"Time:    {config.TIME_PLACEHOLDER}",
    ]


def test_format_empty_catalog():
    assert "(No entries found)" in format_catalog(Catalog(LayoutVersion.LEGACY))


def test_catalog_to_json():
    data = json.loads(catalog_to_json(_catalog()))

    assert data["layout"] == "modern"
    assert data["entries"][0] == {
        "name": "C:\\Windows\\notepad.exe",
        "counter": 4,
        "last_run": TICKS,
        "last_run_time": "2020-09-09T12:00:00+00:00",
        "location": "{A}",
    }
    assert data["entries"][1]["last_run_time"] is None
