"""Lookup of UI Bakery export elements and resolution of their top-level page."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from contextlib import contextmanager, suppress
from typing import Any


class ExportError(Exception):
    """Base class for problems found in an export document."""


class MissingPropertyError(ExportError):
    """A required string property is absent or not a string."""


class NotANodeError(ExportError):
    """A value that should be a JSON object is something else."""


def as_node(value: Any) -> dict[str, Any]:
    """Return *value* if it is a JSON object, else raise NotANodeError."""
    if not isinstance(value, dict):
        raise NotANodeError("node expected")
    return value


def get_string(node: dict[str, Any], field: str) -> str:
    """Return the string stored under *field*, or raise MissingPropertyError."""
    value = node.get(field)
    if not isinstance(value, str):
        raise MissingPropertyError(f'property "{field}": missing property')
    return value


def get_string_or_blank(node: dict[str, Any], field: str) -> str:
    """Return the string stored under *field*, or an empty string."""
    value = node.get(field)
    return value if isinstance(value, str) else ""


def get_array(node: dict[str, Any], field: str) -> list[Any]:
    """Return the list stored under *field*, or an empty list if there is none."""
    value = node.get(field)
    return value if isinstance(value, list) else []


def index_by_id(items: Iterable[Any], into: MutableMapping[str, Any]) -> None:
    """Record every item and its nested children in *into*, keyed by id.

    A malformed item among the top-level items raises; a malformed child
    only stops the indexing of its own sibling list.
    """
    for item in items:
        node = as_node(item)
        into[get_string(node, "id")] = item
        children = get_array(node, "children")
        if children:
            with suppress(ExportError):
                index_by_id(children, into)


@contextmanager
def _prefixed(prefix: str) -> Iterator[None]:
    try:
        yield
    except ExportError as err:
        raise type(err)(f"{prefix}: {err}") from err


class UIBakery:
    """An export document with its pages, components, slots and workflows indexed by id."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.data = data
        self.pages: dict[str, Any] = {}
        self.components: dict[str, Any] = {}
        self.slots: dict[str, Any] = {}
        self.workflows: dict[str, Any] = {}
        sections = (
            ("pages", "rootPageList", self.pages),
            ("components", "componentList", self.components),
            ("slots", "slotList", self.slots),
            ("workflows", "workflowList", self.workflows),
        )
        for label, key, index in sections:
            with _prefixed(f"parsing {label}"):
                index_by_id(get_array(data, key), index)

    def page_of_page(self, page: dict[str, Any]) -> str:
        """Return the id of the top page that owns *page* (possibly itself)."""
        current = page
        visited = {id(current)}
        parent_id = get_string_or_blank(current, "parentPageId")
        while parent_id:
            parent = self.pages.get(parent_id)
            if not isinstance(parent, dict) or id(parent) in visited:
                break
            current = parent
            visited.add(id(current))
            parent_id = get_string_or_blank(current, "parentPageId")
        return get_string(current, "id")

    def page_of_component(self, component: dict[str, Any]) -> str:
        """Return the top page id owning *component*, or "" if it is unclaimed."""
        slot_id = get_string_or_blank(component, "parentSlotId")
        if not slot_id:
            return ""
        slot = self.slots.get(slot_id)
        if not isinstance(slot, dict):
            return ""
        return self.page_of_slot(slot)

    def page_of_slot(self, slot: dict[str, Any]) -> str:
        """Return the top page id owning *slot*, via its page or its component."""
        page_id = get_string_or_blank(slot, "parentPageId")
        if page_id:
            return self.page_of_page(as_node(self.pages.get(page_id)))
        component_id = get_string_or_blank(slot, "parentComponentId")
        if not component_id:
            return ""
        return self.page_of_component(as_node(self.components.get(component_id)))

    def page_of_workflow(self, workflow: dict[str, Any]) -> str:
        """Return the top page id owning *workflow*, or its plain parent id."""
        page_id = get_string_or_blank(workflow, "parentPageId")
        if page_id:
            return self.page_of_page(as_node(self.pages.get(page_id)))
        return get_string_or_blank(workflow, "parentId")