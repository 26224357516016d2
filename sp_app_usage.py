# MIT License – Copyright (c) 2025 Menny Levinski

"""
Outputs the applications a user has launched, with run counts and last run dates.
"""

import argparse
import logging
import os
import sys

from app_usage.codec import LayoutVersion
from app_usage.enumerator import Enumerator
from app_usage.errors import AppUsageError
from app_usage.platform_probe import detect_layout
from app_usage.report import catalog_to_json, format_catalog

logger = logging.getLogger("sp_app_usage")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Application usage (UserAssist) report")
    parser.add_argument("--hive", metavar="PATH",
                        help="read an offline NTUSER.DAT instead of the live registry")
    parser.add_argument("--layout", choices=[v.value for v in LayoutVersion],
                        help="record layout (default: detected from the running Windows version)")
    parser.add_argument("--skip-missing", action="store_true",
                        help="skip UserAssist keys that do not exist instead of failing")
    parser.add_argument("--json", action="store_true", help="output JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    parser.add_argument("--no-pause", action="store_true",
                        help="do not wait for a key press before exiting")
    return parser.parse_args(argv)


# --- Pick the registry source ---
def open_store(hive_path=None):
    if hive_path:
        from app_usage.hive_store import HiveStore
        return HiveStore(hive_path)

    # winreg and pywin32 only exist on Windows
    from app_usage.winreg_store import WinregStore
    return WinregStore()


# --- Collect and format the usage entries ---
def get_app_usage(hive_path=None, layout=None, skip_missing=False, output_json=False):
    if layout is None:
        # An offline hive may come from any Windows version; the running one is only a guess
        layout = detect_layout()
    else:
        layout = LayoutVersion(layout)

    store = open_store(hive_path)
    catalog = Enumerator(store, layout, skip_missing=skip_missing).enumerate()
    if output_json:
        return catalog_to_json(catalog)
    return format_catalog(catalog)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        report = get_app_usage(args.hive, args.layout, args.skip_missing, args.json)
    except AppUsageError as e:
        logger.debug("Report failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    if args.json:
        print(report)
        return 0

    print("Application Usage Report")
    print("–" * len("Application Usage Report"))
    print(report)
    print("")

    if sys.platform.startswith("win") and not args.no_pause:
        os.system("pause")
    return 0


# --- Output ---
if __name__ == "__main__":
    sys.exit(main())
