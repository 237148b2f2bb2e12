"""
Pagewright Tree Engine — Edit Tests

insert, duplicate, wrap, remove, update_node and update_style.
Each test checks the structural result, parent pointers, and that
no-op edits hand back the input object.
"""

import pytest

from pagewright.kernel.tests.builders import (
    all_ids,
    assert_parent_pointers,
    assert_unique_ids,
    child_ids,
)
from pagewright.kernel.tree import (
    duplicate,
    find_node,
    find_parent,
    insert,
    remove,
    update_node,
    update_style,
    wrap,
)
from pagewright.kernel.types import Node

# ============================================================================
# insert
# ============================================================================


class TestInsert:
    def test_appends_by_default(self, sample_tree):
        result = insert(sample_tree, "root", Node(id="d", kind="text"))
        assert child_ids(result) == ["a", "b", "c", "d"]
        assert find_node(result, "d").parent_id == "root"

    def test_inserts_at_index(self, sample_tree):
        result = insert(sample_tree, "a", Node(id="x", kind="text"), 1)
        assert child_ids(find_node(result, "a")) == ["a1", "x", "a2"]

    @pytest.mark.parametrize("index,expected", [(-5, ["x", "a1", "a2"]), (99, ["a1", "a2", "x"])])
    def test_index_is_clamped(self, sample_tree, index, expected):
        result = insert(sample_tree, "a", Node(id="x", kind="text"), index)
        assert child_ids(find_node(result, "a")) == expected

    def test_missing_parent_is_noop(self, sample_tree):
        assert insert(sample_tree, "ghost", Node(id="x", kind="text")) is sample_tree

    def test_reused_id_is_noop(self, sample_tree):
        assert insert(sample_tree, "root", Node(id="a1", kind="text")) is sample_tree

    def test_reused_id_deep_in_new_subtree_is_noop(self, sample_tree):
        new = Node(id="x", kind="container", children=(Node(id="b", kind="text", parent_id="x"),))
        assert insert(sample_tree, "root", new) is sample_tree

    def test_sets_parent_pointer_on_inserted_node(self, sample_tree):
        result = insert(sample_tree, "b", Node(id="x", kind="text", parent_id="somewhere"))
        assert find_node(result, "x").parent_id == "b"
        assert_parent_pointers(result)

    def test_untouched_siblings_are_shared(self, sample_tree):
        result = insert(sample_tree, "a", Node(id="x", kind="text"))
        assert find_node(result, "b") is find_node(sample_tree, "b")
        assert find_node(result, "a1") is find_node(sample_tree, "a1")
        assert find_node(result, "a") is not find_node(sample_tree, "a")

    def test_input_is_not_modified(self, sample_tree):
        before = sample_tree.to_dict()
        insert(sample_tree, "a", Node(id="x", kind="text"))
        assert sample_tree.to_dict() == before


# ============================================================================
# duplicate
# ============================================================================


class TestDuplicate:
    def test_clone_lands_after_original(self, sample_tree, ids):
        result = duplicate(sample_tree, "a", id_factory=ids)
        assert child_ids(result)[:2] == ["a", "new1"]

    def test_clone_lands_before_original(self, sample_tree, ids):
        result = duplicate(sample_tree, "b", "before", id_factory=ids)
        assert child_ids(result) == ["a", "new1", "b", "c"]

    def test_clone_has_fresh_ids_throughout(self, sample_tree, ids):
        result = duplicate(sample_tree, "a", id_factory=ids)
        clone = find_node(result, "new1")
        assert [n.id for n in clone.depth_first()] == ["new1", "new2", "new3"]
        assert_unique_ids(result)
        assert_parent_pointers(result)

    def test_clone_preserves_structure_and_fields(self, sample_tree, ids):
        result = duplicate(sample_tree, "a", id_factory=ids)
        original = find_node(result, "a")
        clone = find_node(result, "new1")
        assert [c.kind for c in clone.children] == [c.kind for c in original.children]
        assert [c.content for c in clone.children] == ["hello", "Go"]
        assert clone.style == original.style

    def test_clone_data_is_independent(self, ids):
        tree = insert(
            Node(id="root", kind="container"),
            "root",
            Node(id="t", kind="table", data={"actionLabel": "Edit"}),
        )
        result = duplicate(tree, "t", id_factory=ids)
        assert find_node(result, "new1").data == {"actionLabel": "Edit"}
        assert find_node(result, "new1").data is not find_node(result, "t").data

    def test_root_is_noop(self, sample_tree, ids):
        assert duplicate(sample_tree, "root", id_factory=ids) is sample_tree

    def test_missing_is_noop(self, sample_tree, ids):
        assert duplicate(sample_tree, "ghost", id_factory=ids) is sample_tree


# ============================================================================
# wrap
# ============================================================================


class TestWrap:
    def test_wraps_in_place(self, sample_tree, ids):
        result = wrap(sample_tree, "b", id_factory=ids)
        assert child_ids(result) == ["a", "new1", "c"]
        wrapper = find_node(result, "new1")
        assert wrapper.kind == "container"
        assert child_ids(wrapper) == ["b"]
        assert find_parent(result, "b").id == "new1"
        assert_parent_pointers(result)

    def test_wrapper_style(self, sample_tree, ids):
        wrapper = find_node(wrap(sample_tree, "a1", "card", id_factory=ids), "new1")
        assert wrapper.kind == "card"
        assert wrapper.style.width == "100%"
        assert wrapper.style.flex_direction == "column"
        assert wrapper.style.padding == "10px"

    def test_root_is_noop(self, sample_tree, ids):
        assert wrap(sample_tree, "root", id_factory=ids) is sample_tree

    def test_non_wrapper_kind_is_noop(self, sample_tree, ids):
        assert wrap(sample_tree, "a1", "table", id_factory=ids) is sample_tree

    def test_missing_is_noop(self, sample_tree, ids):
        assert wrap(sample_tree, "ghost", id_factory=ids) is sample_tree


# ============================================================================
# remove
# ============================================================================


class TestRemove:
    def test_removes_whole_subtree(self, sample_tree):
        result = remove(sample_tree, "a")
        assert all_ids(result) == ["root", "b", "c"]

    def test_removes_nested(self, sample_tree):
        result = remove(sample_tree, "a2")
        assert child_ids(find_node(result, "a")) == ["a1"]

    def test_root_is_noop(self, sample_tree):
        assert remove(sample_tree, "root") is sample_tree

    def test_missing_is_noop(self, sample_tree):
        assert remove(sample_tree, "ghost") is sample_tree


# ============================================================================
# update_node / update_style
# ============================================================================


class TestUpdateNode:
    def test_merges_fields(self, sample_tree):
        result = update_node(sample_tree, "a1", {"content": "bye", "name": "Greeting", "href": "/home"})
        node = find_node(result, "a1")
        assert (node.content, node.name, node.href) == ("bye", "Greeting", "/home")

    def test_accepts_external_spellings(self, sample_tree):
        result = update_node(sample_tree, "a2", {"iconName": "Star", "onClick": "alert(1)"})
        node = find_node(result, "a2")
        assert node.icon == "Star"
        assert node.on_click == "alert(1)"

    def test_structural_keys_are_ignored(self, sample_tree):
        changes = {"id": "zzz", "children": [], "parent_id": "b", "style": {"color": "red"}}
        assert update_node(sample_tree, "a", changes) is sample_tree

    def test_same_values_is_noop(self, sample_tree):
        assert update_node(sample_tree, "a1", {"content": "hello"}) is sample_tree

    def test_missing_node_is_noop(self, sample_tree):
        assert update_node(sample_tree, "ghost", {"content": "x"}) is sample_tree

    def test_data_is_replaced(self, sample_tree):
        result = update_node(sample_tree, "b", {"data": {"items": [1, 2]}})
        assert find_node(result, "b").data == {"items": [1, 2]}

    @pytest.mark.parametrize("bad", [5, "text", [1, 2], True])
    def test_non_mapping_data_is_ignored(self, sample_tree, bad):
        assert update_node(sample_tree, "a", {"data": bad}) is sample_tree

    def test_non_mapping_data_keeps_other_changes(self, sample_tree):
        before = find_node(sample_tree, "a1").data
        result = update_node(sample_tree, "a1", {"data": 5, "content": "bye"})
        node = find_node(result, "a1")
        assert node.content == "bye"
        assert node.data == before


class TestUpdateStyle:
    def test_camel_and_snake_keys(self, sample_tree):
        result = update_style(sample_tree, "b", {"backgroundColor": "#ff0000", "font_size": "14px"})
        style = find_node(result, "b").style
        assert style.background_color == "#ff0000"
        assert style.font_size == "14px"

    def test_empty_string_clears(self, sample_tree):
        tree = update_style(sample_tree, "b", {"color": "#111"})
        result = update_style(tree, "b", {"color": ""})
        assert find_node(result, "b").style.color is None

    def test_unknown_keys_only_is_noop(self, sample_tree):
        assert update_style(sample_tree, "b", {"bogus": "1"}) is sample_tree

    def test_other_fields_survive(self, sample_tree):
        result = update_style(sample_tree, "root", {"gap": "4px"})
        assert result.style.gap == "4px"
        assert result.style.padding == "20px"

    def test_flag_and_number_coercion(self, sample_tree):
        result = update_style(sample_tree, "b", {"boxShadow": True, "flexGrow": "2"})
        style = find_node(result, "b").style
        assert style.box_shadow is True
        assert style.flex_grow == 2.0
