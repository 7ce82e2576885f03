"""Writing export fragments to a directory tree, one folder per page url."""

from __future__ import annotations

import json
import os
from collections import Counter
from collections.abc import Callable, Mapping
from contextlib import suppress
from typing import Any

from bakerysplit.navigation import (
    ExportError,
    as_node,
    get_array,
    get_string_or_blank,
)

WriteFile = Callable[[str, bytes], None]
MakeDirs = Callable[[str], None]

_FRAGMENT_SECTIONS = ("rootPageList", "componentList", "slotList", "workflowList")

# Characters escaped inside JSON strings so the output is safe to embed in HTML.
_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class DuplicatedUrlError(ExportError):
    """Two fragments would be written to the same page folder."""


def _encode(data: list[Any]) -> bytes:
    text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)
    return text.translate(_ESCAPES).encode("utf-8")


def write_list(base: str, name: str, data: list[Any], write_file: WriteFile) -> None:
    """Write *data* as indented JSON to ``base/name.json``; empty lists are skipped."""
    if not data:
        return
    write_file(os.path.join(base, name + ".json"), _encode(data))


def url_for_fragment(fragment: Mapping[str, Any]) -> str:
    """Return the url of the first page in rootPageList that has one, or ""."""
    for page in get_array(fragment, "rootPageList"):
        if isinstance(page, dict) and (url := get_string_or_blank(page, "url")):
            return url
    return ""


def check_distinct(fragments: Mapping[str, Any]) -> None:
    """Raise DuplicatedUrlError if two fragments share a url (and so a folder)."""
    counts = Counter(url_for_fragment(as_node(fragment)) for fragment in fragments.values())
    for url, count in counts.items():
        if count > 1:
            raise DuplicatedUrlError(f"url {url} - duplicated url")


def write_other(root: str, export: Mapping[str, Any], write_file: WriteFile) -> None:
    """Write every list of *export* other than the page sections to ``root``."""
    for element, data in export.items():
        if element in _FRAGMENT_SECTIONS or not isinstance(data, list):
            continue
        write_list(root, element, data, write_file)


def write_fragments(
    root: str,
    fragments: Mapping[str, Any],
    export: Mapping[str, Any] | None,
    mkdir_all: MakeDirs,
    write_file: WriteFile,
) -> None:
    """Write each fragment into ``root/pages/<url>`` and the rest of *export* into *root*.

    Fragments without a url are written straight into *root*. Failures to
    create folders and to write the remaining export lists are ignored.
    """
    check_distinct(fragments)

    for fragment in fragments.values():
        node = as_node(fragment)
        name = url_for_fragment(node)
        base = os.path.join(root, "pages", name) if name else root
        with suppress(OSError):
            mkdir_all(base)

        areas = (
            (name, "rootPageList"),
            ("components", "componentList"),
            ("slots", "slotList"),
            ("workflows", "workflowList"),
        )
        for filename, element in areas:
            write_list(base, filename, get_array(node, element), write_file)

    with suppress(OSError):
        write_other(root, export or {}, write_file)


def _make_dirs(path: str) -> None:
    os.makedirs(path, mode=0o777, exist_ok=True)


def _write_bytes(path: str, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def write_to_fs(
    root: str, fragments: Mapping[str, Any], export: Mapping[str, Any] | None
) -> None:
    """Write fragments and the rest of *export* under *root* on the real file system."""
    write_fragments(root, fragments, export, _make_dirs, _write_bytes)