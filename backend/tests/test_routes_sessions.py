"""
Session route tests — HTTP round trips over the editor kernel.

Every session endpoint returns the tree plus selection and undo/redo flags;
`applied` says whether the call changed the tree.
"""

import pytest

# ============================================================================
# Helpers
# ============================================================================


async def insert(client, session_id, kind, parent_id="root", **extra):
    resp = await client.post(f"/api/sessions/{session_id}/nodes", json={"kind": kind, "parent_id": parent_id, **extra})
    assert resp.status_code == 200, resp.text
    return resp.json()


def root_children(body):
    return body["tree"]["children"]


# ============================================================================
# Lifecycle
# ============================================================================


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_create_blank_session(self, async_client):
        resp = await async_client.post("/api/sessions")
        assert resp.status_code == 201
        body = resp.json()
        assert body["tree"]["id"] == "root"
        assert body["tree"]["name"] == "Root Page"
        assert body["tree"]["style"]["backgroundColor"] == "#ffffff"
        assert body["selected_id"] is None
        assert body["can_undo"] is False
        assert body["can_redo"] is False
        assert body["applied"] is False

    @pytest.mark.asyncio
    async def test_create_with_tree_repairs_it(self, async_client):
        raw = {"id": "page", "type": "container", "children": [{"kind": "text", "content": "hi"}, "junk"]}
        resp = await async_client.post("/api/sessions", json={"tree": raw})
        assert resp.status_code == 201
        tree = resp.json()["tree"]
        assert tree["id"] == "root"
        assert len(tree["children"]) == 1
        assert tree["children"][0]["content"] == "hi"
        assert tree["children"][0]["id"]
        assert tree["children"][0]["parentId"] == "root"

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_fields(self, async_client):
        resp = await async_client.post("/api/sessions", json={"tree": None, "owner": "me"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_get_and_delete(self, async_client, session_id):
        resp = await async_client.get(f"/api/sessions/{session_id}")
        assert resp.status_code == 200
        assert resp.json()["id"] == session_id

        resp = await async_client.delete(f"/api/sessions/{session_id}")
        assert resp.status_code == 200

        resp = await async_client.get(f"/api/sessions/{session_id}")
        assert resp.status_code == 404
        resp = await async_client.delete(f"/api/sessions/{session_id}")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_session_is_404_everywhere(self, async_client):
        assert (await async_client.post("/api/sessions/nope/undo")).status_code == 404
        assert (await async_client.post("/api/sessions/nope/nodes", json={"kind": "text"})).status_code == 404
        assert (await async_client.get("/api/sessions/nope/export")).status_code == 404


# ============================================================================
# Node edits
# ============================================================================


class TestNodeEdits:
    @pytest.mark.asyncio
    async def test_insert(self, async_client, session_id):
        body = await insert(async_client, session_id, "button", library="shadcn")
        assert body["applied"] is True
        assert body["can_undo"] is True
        child = root_children(body)[0]
        assert child["id"] == body["node_id"]
        assert child["kind"] == "button"
        assert child["library"] == "shadcn"
        assert child["parentId"] == "root"

    @pytest.mark.asyncio
    async def test_insert_into_missing_parent_is_a_no_op(self, async_client, session_id):
        body = await insert(async_client, session_id, "text", parent_id="ghost")
        assert body["applied"] is False
        assert body["node_id"] is None
        assert body["can_undo"] is False

    @pytest.mark.asyncio
    async def test_insert_validation(self, async_client, session_id):
        url = f"/api/sessions/{session_id}/nodes"
        assert (await async_client.post(url, json={"kind": "text", "library": "bootstrap"})).status_code == 422
        assert (await async_client.post(url, json={"kind": "text", "index": -1})).status_code == 422
        assert (await async_client.post(url, json={"kind": ""})).status_code == 422
        assert (await async_client.post(url, json={"kind": "text", "colour": "red"})).status_code == 422

    @pytest.mark.asyncio
    async def test_update_node_and_repeat_is_no_op(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        url = f"/api/sessions/{session_id}/nodes/{node_id}"

        resp = await async_client.patch(url, json={"changes": {"content": "Hello"}})
        body = resp.json()
        assert body["applied"] is True
        assert root_children(body)[0]["content"] == "Hello"

        resp = await async_client.patch(url, json={"changes": {"content": "Hello"}})
        assert resp.json()["applied"] is False

    @pytest.mark.asyncio
    async def test_update_node_with_non_object_data_is_a_no_op(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        resp = await async_client.patch(f"/api/sessions/{session_id}/nodes/{node_id}", json={"changes": {"data": 5}})
        assert resp.status_code == 200
        assert resp.json()["applied"] is False

    @pytest.mark.asyncio
    async def test_update_style_accepts_camel_case(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "container"))["node_id"]
        resp = await async_client.patch(
            f"/api/sessions/{session_id}/nodes/{node_id}/style",
            json={"changes": {"backgroundColor": "#ff0000", "padding": ""}},
        )
        style = root_children(resp.json())[0]["style"]
        assert style["backgroundColor"] == "#ff0000"
        assert "padding" not in style

    @pytest.mark.asyncio
    async def test_remove(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        resp = await async_client.delete(f"/api/sessions/{session_id}/nodes/{node_id}")
        body = resp.json()
        assert body["applied"] is True
        assert root_children(body) == []

    @pytest.mark.asyncio
    async def test_remove_root_is_a_no_op(self, async_client, session_id):
        resp = await async_client.delete(f"/api/sessions/{session_id}/nodes/root")
        assert resp.json()["applied"] is False

    @pytest.mark.asyncio
    async def test_move_into_container(self, async_client, session_id):
        box = (await insert(async_client, session_id, "container"))["node_id"]
        label = (await insert(async_client, session_id, "text"))["node_id"]
        resp = await async_client.post(
            f"/api/sessions/{session_id}/nodes/{label}/move",
            json={"parent_id": box, "index": 0},
        )
        body = resp.json()
        assert body["applied"] is True
        children = root_children(body)
        assert [c["id"] for c in children] == [box]
        assert children[0]["children"][0]["id"] == label
        assert children[0]["children"][0]["parentId"] == box

    @pytest.mark.asyncio
    async def test_move_into_own_descendant_is_rejected(self, async_client, session_id):
        outer = (await insert(async_client, session_id, "container"))["node_id"]
        inner = (await insert(async_client, session_id, "container", parent_id=outer))["node_id"]
        resp = await async_client.post(f"/api/sessions/{session_id}/nodes/{outer}/move", json={"parent_id": inner})
        assert resp.json()["applied"] is False

    @pytest.mark.asyncio
    async def test_duplicate_before_and_after(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        url = f"/api/sessions/{session_id}/nodes/{node_id}/duplicate"

        body = (await async_client.post(url)).json()
        ids = [c["id"] for c in root_children(body)]
        assert ids[0] == node_id
        assert len(ids) == 2 and ids[1] != node_id

        body = (await async_client.post(url, json={"direction": "before"})).json()
        ids = [c["id"] for c in root_children(body)]
        assert len(ids) == 3
        assert ids[1] == node_id

    @pytest.mark.asyncio
    async def test_wrap(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        resp = await async_client.post(f"/api/sessions/{session_id}/nodes/{node_id}/wrap", json={"wrapper_kind": "card"})
        wrapper = root_children(resp.json())[0]
        assert wrapper["kind"] == "card"
        assert wrapper["style"]["padding"] == "10px"
        assert [c["id"] for c in wrapper["children"]] == [node_id]


# ============================================================================
# Drag and drop
# ============================================================================


class TestDrop:
    @pytest.mark.asyncio
    async def test_hover_positions(self, async_client, session_id):
        url = f"/api/sessions/{session_id}/drop/hover"
        base = {"target_id": "root", "box_top": 0, "box_height": 100, "payload": {"kind": "text"}}

        assert (await async_client.post(url, json={**base, "pointer_y": 50})).json() == {"position": "inside"}
        assert (await async_client.post(url, json={**base, "pointer_y": 5})).json() == {"position": "top"}
        assert (await async_client.post(url, json={**base, "pointer_y": 95})).json() == {"position": "bottom"}
        missing = {**base, "target_id": "ghost", "pointer_y": 50}
        assert (await async_client.post(url, json=missing)).json() == {"position": None}

    @pytest.mark.asyncio
    async def test_hover_over_self_has_no_highlight(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "container"))["node_id"]
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop/hover",
            json={"target_id": node_id, "pointer_y": 50, "box_top": 0, "box_height": 100, "payload": {"node_id": node_id}},
        )
        assert resp.json() == {"position": None}

    @pytest.mark.asyncio
    async def test_hover_does_not_touch_history(self, async_client, session_id):
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop/hover",
            json={"target_id": "root", "pointer_y": 50, "box_top": 0, "box_height": 100, "payload": {"kind": "text"}},
        )
        assert resp.status_code == 200
        session = (await async_client.get(f"/api/sessions/{session_id}")).json()
        assert session["can_undo"] is False

    @pytest.mark.asyncio
    async def test_drop_palette_item_inside_root(self, async_client, session_id):
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop",
            json={"target_id": "root", "position": "inside", "payload": {"kind": "card", "library": "shadcn"}},
        )
        body = resp.json()
        assert body["applied"] is True
        assert root_children(body)[0]["kind"] == "card"
        assert root_children(body)[0]["library"] == "shadcn"

    @pytest.mark.asyncio
    async def test_drop_beside_root_is_a_no_op(self, async_client, session_id):
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop",
            json={"target_id": "root", "position": "top", "payload": {"kind": "text"}},
        )
        assert resp.json()["applied"] is False

    @pytest.mark.asyncio
    async def test_drop_existing_node_below_sibling(self, async_client, session_id):
        first = (await insert(async_client, session_id, "text"))["node_id"]
        second = (await insert(async_client, session_id, "text"))["node_id"]
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop",
            json={"target_id": second, "position": "bottom", "payload": {"node_id": first}},
        )
        body = resp.json()
        assert body["applied"] is True
        assert [c["id"] for c in root_children(body)] == [second, first]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"kind": "text", "node_id": "x"}])
    async def test_drop_payload_needs_exactly_one_source(self, async_client, session_id, payload):
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop",
            json={"target_id": "root", "position": "inside", "payload": payload},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_drop_rejects_unknown_position(self, async_client, session_id):
        resp = await async_client.post(
            f"/api/sessions/{session_id}/drop",
            json={"target_id": "root", "position": "left", "payload": {"kind": "text"}},
        )
        assert resp.status_code == 422


# ============================================================================
# History and selection
# ============================================================================


class TestHistory:
    @pytest.mark.asyncio
    async def test_undo_redo_round_trip(self, async_client, session_id):
        inserted = await insert(async_client, session_id, "text")

        body = (await async_client.post(f"/api/sessions/{session_id}/undo")).json()
        assert body["applied"] is True
        assert root_children(body) == []
        assert body["can_undo"] is False
        assert body["can_redo"] is True

        body = (await async_client.post(f"/api/sessions/{session_id}/redo")).json()
        assert body["applied"] is True
        assert body["tree"] == inserted["tree"]
        assert body["can_redo"] is False

    @pytest.mark.asyncio
    async def test_undo_on_fresh_session_is_a_no_op(self, async_client, session_id):
        body = (await async_client.post(f"/api/sessions/{session_id}/undo")).json()
        assert body["applied"] is False
        body = (await async_client.post(f"/api/sessions/{session_id}/redo")).json()
        assert body["applied"] is False

    @pytest.mark.asyncio
    async def test_new_edit_after_undo_clears_redo(self, async_client, session_id):
        await insert(async_client, session_id, "text")
        await async_client.post(f"/api/sessions/{session_id}/undo")
        body = await insert(async_client, session_id, "button")
        assert body["can_redo"] is False


class TestSelection:
    @pytest.mark.asyncio
    async def test_select_and_clear(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        url = f"/api/sessions/{session_id}/selection"

        body = (await async_client.put(url, json={"node_id": node_id})).json()
        assert body["applied"] is True
        assert body["selected_id"] == node_id

        body = (await async_client.put(url, json={"node_id": "ghost"})).json()
        assert body["applied"] is False
        assert body["selected_id"] == node_id

        body = (await async_client.put(url, json={"node_id": None})).json()
        assert body["selected_id"] is None

    @pytest.mark.asyncio
    async def test_removing_selected_node_clears_selection(self, async_client, session_id):
        node_id = (await insert(async_client, session_id, "text"))["node_id"]
        await async_client.put(f"/api/sessions/{session_id}/selection", json={"node_id": node_id})
        body = (await async_client.delete(f"/api/sessions/{session_id}/nodes/{node_id}")).json()
        assert body["selected_id"] is None


# ============================================================================
# Generated trees and export
# ============================================================================


class TestApplyTree:
    @pytest.mark.asyncio
    async def test_generated_tree_replaces_canvas_as_one_step(self, async_client, session_id):
        raw = {
            "type": "container",
            "children": [
                {"id": "hero", "type": "text", "content": "Welcome"},
                {"id": "hero", "type": "button", "content": "Start"},
            ],
        }
        resp = await async_client.put(f"/api/sessions/{session_id}/tree", json={"tree": raw})
        body = resp.json()
        assert body["applied"] is True
        assert body["can_undo"] is True
        ids = [c["id"] for c in root_children(body)]
        assert ids[0] == "hero"
        assert ids[1] != "hero"

        body = (await async_client.post(f"/api/sessions/{session_id}/undo")).json()
        assert root_children(body) == []

    @pytest.mark.asyncio
    async def test_tree_must_be_an_object(self, async_client, session_id):
        resp = await async_client.put(f"/api/sessions/{session_id}/tree", json={"tree": ["not", "a", "tree"]})
        assert resp.status_code == 422


class TestExport:
    @pytest.mark.asyncio
    async def test_default_target(self, async_client, session_id):
        await insert(async_client, session_id, "text")
        resp = await async_client.get(f"/api/sessions/{session_id}/export")
        assert resp.status_code == 200
        body = resp.json()
        assert body["target"] == "react"
        assert body["filename"] == "page.tsx"
        assert "export default function Page() {" in body["source"]

    @pytest.mark.asyncio
    async def test_flutter_with_options(self, async_client, session_id):
        resp = await async_client.get(
            f"/api/sessions/{session_id}/export",
            params={"target": "dart", "widget_name": "HomeScreen", "app_title": "Demo"},
        )
        body = resp.json()
        assert body["target"] == "flutter"
        assert body["filename"] == "main.dart"
        assert "class HomeScreen extends StatelessWidget {" in body["source"]
        assert 'title: "Demo",' in body["source"]

    @pytest.mark.asyncio
    async def test_unknown_target_is_400(self, async_client, session_id):
        resp = await async_client.get(f"/api/sessions/{session_id}/export", params={"target": "vue"})
        assert resp.status_code == 400
        assert "vue" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_bad_component_name_is_422(self, async_client, session_id):
        resp = await async_client.get(f"/api/sessions/{session_id}/export", params={"component_name": "my page"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_export_does_not_record_history(self, async_client, session_id):
        await async_client.get(f"/api/sessions/{session_id}/export")
        body = (await async_client.get(f"/api/sessions/{session_id}")).json()
        assert body["can_undo"] is False
