"""Splitting an export document into fragments, one per top-level page."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from bakerysplit.navigation import ExportError, UIBakery, as_node, get_array

_SECTIONS = ("rootPageList", "componentList", "slotList", "workflowList")


@contextmanager
def _prefixed(prefix: str) -> Iterator[None]:
    try:
        yield
    except ExportError as err:
        raise type(err)(f"{prefix}, {err}") from err


def _group(
    items: list[Any], label: str, owner: Callable[[dict[str, Any]], str]
) -> dict[str, list[Any]]:
    grouped: dict[str, list[Any]] = defaultdict(list)
    for item in items:
        with _prefixed(label):
            grouped[owner(as_node(item))].append(item)
    return grouped


def to_pages(export: dict[str, Any]) -> dict[str, dict[str, list[Any]]]:
    """Group the elements of *export* by the id of their top-level page.

    Elements that belong to no page are gathered under the empty id.
    Each fragment holds only the non-empty lists among rootPageList,
    componentList, slotList and workflowList.
    """
    bakery = UIBakery(export)

    pages: dict[str, list[Any]] = defaultdict(list)
    queue = deque(get_array(export, "rootPageList"))
    while queue:
        with _prefixed("pages"):
            page = as_node(queue.popleft())
            pages[bakery.page_of_page(page)].append(page)
        queue.extend(get_array(page, "children"))

    slots = _group(get_array(export, "slotList"), "slots", bakery.page_of_slot)
    components = _group(
        get_array(export, "componentList"), "component", bakery.page_of_component
    )
    workflows = _group(
        get_array(export, "workflowList"), "workflow", bakery.page_of_workflow
    )

    by_section = dict(zip(_SECTIONS, (pages, components, slots, workflows)))
    top_ids = dict.fromkeys([*pages, *components, *slots, *workflows])
    return {
        top: {
            section: grouped[top]
            for section, grouped in by_section.items()
            if grouped.get(top)
        }
        for top in top_ids
    }