"""Command line entry point: split an export file into per-page folders."""

from __future__ import annotations

import argparse
import json
import os
from collections.abc import Sequence
from pathlib import Path

from bakerysplit.navigation import ExportError
from bakerysplit.pages import to_pages
from bakerysplit.writer import write_to_fs


def split_path(full: str) -> tuple[str, str, str]:
    """Split *full* into its directory (with separator), stem and file name."""
    file = os.path.basename(full)
    directory = full[: len(full) - len(file)]
    stem, dot, _ = file.rpartition(".")
    base = stem if dot else file
    return directory, base, file


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bakerysplit",
        description="Split an export into one folder per top-level page.",
    )
    parser.add_argument(
        "-file", "--file", dest="file", default="", help="input file name (expected .json)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the export named by -file and write its pages under a folder of the same stem.

    The file name part of the argument is read from the working directory.
    """
    args = _parser().parse_args(argv)
    if not args.file:
        print("Specify filename: -file=name.json")
        return 0
    _, base, file = split_path(args.file)

    try:
        raw = Path(file).read_bytes()
    except OSError as err:
        print(f"Reading error: {err}")
        return 0

    try:
        export = json.loads(raw)
    except ValueError as err:
        print(f"Json error: {err}")
        return 0
    if export is None:
        export = {}
    if not isinstance(export, dict):
        print("Json error: top-level value is not an object")
        return 0

    try:
        pages = to_pages(export)
    except ExportError as err:
        print(f"Processing error: {err}")
        return 0

    try:
        write_to_fs(base, pages, export)
    except (ExportError, OSError):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())