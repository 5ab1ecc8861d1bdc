#!/usr/bin/env python3
"""
rclonecfg - Write rclone.conf from a JSON list of remotes.

    python main.py [config.json]          import into rclone.conf
    python main.py --export [target]      copy rclone.conf out
    python main.py --export-json [target] convert rclone.conf back to JSON

Build standalone binary: pyinstaller -F main.py
"""

import sys

from rclonecfg.errors import TranslateError
from rclonecfg.translator import export_config, export_json, import_config
from rclonecfg.utils import log


KNOWN_FLAGS = ("--export", "--export-json")


def main(argv: list | None = None) -> None:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    paths = [a for a in args if not a.startswith("--")]

    unknown = [a for a in args if a.startswith("--") and a not in KNOWN_FLAGS]
    if unknown:
        # A mistyped export flag must not fall through to an import
        log(f"Rejected unknown option(s): {' '.join(unknown)}")
        print(f"[error] usage: unknown option {unknown[0]} (expected one of {', '.join(KNOWN_FLAGS)})")
        sys.exit(1)

    try:
        if "--export-json" in args:
            path = export_json(*paths[:1])
            print(f"rclone configuration exported to {path}")
        elif "--export" in args:
            path = export_config(*paths[:1])
            print(f"rclone configuration copied to {path}")
        else:
            import_config(*paths[:1])
            print("rclone configuration imported successfully.")
    except TranslateError as e:
        log(f"{e.stage} error: {e}")
        print(f"[error] {e.stage}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
