import pytest

from bakerysplit.navigation import (
    ExportError,
    MissingPropertyError,
    NotANodeError,
    UIBakery,
    as_node,
    get_array,
    get_string,
    get_string_or_blank,
    index_by_id,
)


def test_as_node_returns_dict():
    node = {"id": "1"}
    assert as_node(node) is node


@pytest.mark.parametrize("value", [1, "x", [1], None])
def test_as_node_rejects_non_objects(value):
    with pytest.raises(NotANodeError):
        as_node(value)


def test_errors_share_base_class():
    with pytest.raises(ExportError):
        as_node(3)
    with pytest.raises(ExportError):
        get_string({}, "id")


def test_get_string_present():
    assert get_string({"id": "abc"}, "id") == "abc"


@pytest.mark.parametrize("node", [{}, {"id": 1}, {"id": None}])
def test_get_string_missing(node):
    with pytest.raises(MissingPropertyError, match="id"):
        get_string(node, "id")


def test_get_string_or_blank():
    assert get_string_or_blank({"url": "home"}, "url") == "home"
    assert get_string_or_blank({"url": 5}, "url") == ""
    assert get_string_or_blank({}, "url") == ""


def test_get_array():
    items = [1, 2]
    assert get_array({"list": items}, "list") is items
    assert get_array({"list": 1}, "list") == []
    assert get_array({}, "list") == []


def test_index_by_id_includes_children():
    child = {"id": "2"}
    grandchild = {"id": "3"}
    child["children"] = [grandchild]
    root = {"id": "1", "children": [child]}
    into = {}
    index_by_id([root], into)
    assert into == {"1": root, "2": child, "3": grandchild}


def test_index_by_id_top_level_errors_raise():
    with pytest.raises(NotANodeError):
        index_by_id([{"id": "1"}, 5], {})
    with pytest.raises(MissingPropertyError):
        index_by_id([{"name": "x"}], {})


def test_index_by_id_bad_child_stops_only_its_siblings():
    into = {}
    index_by_id([{"id": "1", "children": [5, {"id": "2"}]}, {"id": "3"}], into)
    assert sorted(into) == ["1", "3"]


def test_bakery_indexes_all_lists():
    data = {
        "rootPageList": [{"id": "p"}],
        "componentList": [{"id": "c"}],
        "slotList": [{"id": "s"}],
        "workflowList": [{"id": "w"}],
    }
    bakery = UIBakery(data)
    assert list(bakery.pages) == ["p"]
    assert list(bakery.components) == ["c"]
    assert list(bakery.slots) == ["s"]
    assert list(bakery.workflows) == ["w"]


def test_bakery_reports_bad_slot_list():
    with pytest.raises(NotANodeError, match="parsing slots"):
        UIBakery({"slotList": [1]})


def test_page_of_page_follows_parents():
    data = {
        "rootPageList": [
            {"id": "1"},
            {"id": "2", "parentPageId": "1"},
            {"id": "3", "parentPageId": "2"},
        ]
    }
    bakery = UIBakery(data)
    assert bakery.page_of_page(bakery.pages["3"]) == "1"
    assert bakery.page_of_page(bakery.pages["1"]) == "1"


def test_page_of_page_stops_at_unknown_parent():
    bakery = UIBakery({"rootPageList": [{"id": "5", "parentPageId": "9"}]})
    assert bakery.page_of_page(bakery.pages["5"]) == "5"


def test_page_of_page_survives_cycle():
    data = {
        "rootPageList": [
            {"id": "a", "parentPageId": "b"},
            {"id": "b", "parentPageId": "a"},
        ]
    }
    bakery = UIBakery(data)
    assert bakery.page_of_page(bakery.pages["a"]) in {"a", "b"}


def test_page_of_component_through_slots():
    data = {
        "rootPageList": [{"id": "1"}],
        "componentList": [
            {"id": "11", "parentSlotId": "21"},
            {"id": "12", "parentSlotId": "22"},
        ],
        "slotList": [
            {"id": "21", "parentPageId": "1"},
            {"id": "22", "parentComponentId": "11"},
        ],
    }
    bakery = UIBakery(data)
    assert bakery.page_of_component(bakery.components["12"]) == "1"
    assert bakery.page_of_slot(bakery.slots["22"]) == "1"


def test_unclaimed_component_and_slot():
    bakery = UIBakery({"componentList": [{"id": "11"}, {"id": "12", "parentSlotId": "99"}]})
    assert bakery.page_of_component(bakery.components["11"]) == ""
    assert bakery.page_of_component(bakery.components["12"]) == ""
    assert bakery.page_of_slot({"id": "21"}) == ""


def test_page_of_slot_missing_page_raises():
    bakery = UIBakery({"slotList": [{"id": "21", "parentPageId": "2"}]})
    with pytest.raises(NotANodeError):
        bakery.page_of_slot(bakery.slots["21"])


def test_page_of_slot_missing_component_raises():
    bakery = UIBakery({"slotList": [{"id": "21", "parentComponentId": "11"}]})
    with pytest.raises(NotANodeError):
        bakery.page_of_slot(bakery.slots["21"])


def test_page_of_workflow():
    bakery = UIBakery({"rootPageList": [{"id": "1"}]})
    assert bakery.page_of_workflow({"id": "w", "parentPageId": "1"}) == "1"
    assert bakery.page_of_workflow({"id": "w", "parentId": "app"}) == "app"
    assert bakery.page_of_workflow({"id": "w"}) == ""
    with pytest.raises(NotANodeError):
        bakery.page_of_workflow({"id": "w", "parentPageId": "7"})