"""
Pagewright Node Factory — Default Tests
"""

import pytest

from pagewright.kernel.factory import create_node
from pagewright.kernel.ids import new_id, sequential_ids
from pagewright.kernel.types import NODE_KINDS


@pytest.mark.parametrize("kind", sorted(NODE_KINDS))
def test_every_kind_gets_base_style(kind):
    node = create_node(kind, "root", id_factory=sequential_ids())
    assert node.kind == kind
    assert node.parent_id == "root"
    assert node.style.position == "relative"
    assert node.children == ()


def test_table_has_three_rows():
    node = create_node("table")
    assert len(node.data["data"]) == 3
    assert node.data["actionLabel"] == "Edit"


def test_form_has_three_fields():
    fields = create_node("form").data["fields"]
    assert [f["type"] for f in fields] == ["email", "text", "textarea"]


@pytest.mark.parametrize("kind", ["tabs", "accordion", "list", "dropdown"])
def test_item_kinds_have_three_items(kind):
    assert len(create_node(kind).data["items"]) == 3


def test_avatar_group():
    data = create_node("avatarGroup").data
    assert len(data["images"]) == 4
    assert data["max"] == 3


def test_interaction_counts():
    assert create_node("interaction").data == {"likes": 124, "dislikes": 12, "views": 5400}


def test_content_and_icon_defaults():
    assert create_node("button").content == "Button"
    assert create_node("icon").icon == "Star"
    assert create_node("input").content == "Enter text..."


def test_library_is_recorded():
    assert create_node("button", library="shadcn").library == "shadcn"


def test_unknown_kind_gets_empty_data():
    node = create_node("hologram")
    assert node.data == {}
    assert node.name == "Hologram"


def test_data_bags_are_not_shared():
    first = create_node("table")
    first.data["data"].append({"id": 4})
    first.data["data"][0]["name"] = "Changed"
    fresh = create_node("table")
    assert len(fresh.data["data"]) == 3
    assert fresh.data["data"][0]["name"] != "Changed"


def test_ids_are_unique():
    assert len({new_id() for _ in range(500)}) == 500


class TestPresets:
    def test_sidebar(self):
        sidebar = create_node("sidebar", "root", id_factory=sequential_ids("p"))
        assert sidebar.kind == "container"
        assert sidebar.name == "Sidebar Preset"
        assert sidebar.style.width == "250px"
        assert [c.kind for c in sidebar.children] == ["text", "list", "container"]
        profile = sidebar.children[2]
        assert [c.kind for c in profile.children] == ["image", "text"]

    def test_navbar(self):
        navbar = create_node("navbar", id_factory=sequential_ids("p"))
        assert navbar.style.flex_direction == "row"
        logo, links, cta = navbar.children
        assert logo.content == "MyApp"
        assert [c.content for c in links.children] == ["Features", "Pricing", "About"]
        assert cta.content == "Get Started"

    @pytest.mark.parametrize("preset", ["sidebar", "navbar"])
    def test_parent_pointers_and_ids(self, preset):
        root = create_node(preset, "root", id_factory=sequential_ids("p"))
        ids = [n.id for n in root.depth_first()]
        assert len(ids) == len(set(ids))
        assert root.parent_id == "root"
        for node in root.depth_first():
            for child in node.children:
                assert child.parent_id == node.id
