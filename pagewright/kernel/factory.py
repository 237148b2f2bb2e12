"""
Pagewright Kernel — Node Factory

create_node(kind) → a fresh Node with kind-appropriate default style and data.
Used by the palette (new nodes), by wrap (wrapper nodes) and by presets.

Presets ("sidebar", "navbar") are palette entries that expand into a small
container subtree rather than a single node.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Any

from pagewright.kernel.ids import IdFactory, new_id
from pagewright.kernel.types import Library, Node, NodeKind, Style

PRESETS: frozenset[str] = frozenset({"sidebar", "navbar"})

# Base style shared by every freshly created node
_BASE_STYLE = Style(
    position="relative",
    flex_direction="column",
    padding="0px",
    gap="10px",
    width="auto",
    height="auto",
)

_FIELD_STYLE = {
    "width": "100%",
    "padding": "8px",
    "border_width": "1px",
    "border_radius": "6px",
    "border_color": "#cbd5e1",
}

# kind → (style overrides, data, content, icon)
_DEFAULTS: dict[str, tuple[dict[str, Any], dict[str, Any], str | None, str | None]] = {
    NodeKind.CONTAINER: (
        {
            "width": "100%",
            "min_height": "100px",
            "background_color": "#f8fafc",
            "padding": "16px",
            "border_width": "1px",
            "border_style": "dashed",
            "border_color": "#cbd5e1",
        },
        {},
        None,
        None,
    ),
    NodeKind.CARD: (
        {
            "width": "100%",
            "min_height": "150px",
            "background_color": "#ffffff",
            "padding": "20px",
            "border_radius": "8px",
            "box_shadow": True,
            "border_width": "1px",
            "border_color": "#e2e8f0",
        },
        {},
        None,
        None,
    ),
    NodeKind.TEXT: ({}, {}, "Text Block", None),
    NodeKind.BUTTON: (
        {"background_color": "#1e293b", "color": "#ffffff", "padding": "8px 16px", "border_radius": "6px"},
        {},
        "Button",
        None,
    ),
    NodeKind.IMAGE: (
        {"width": "100%", "height": "200px", "border_radius": "8px"},
        {},
        "https://picsum.photos/300/200",
        None,
    ),
    NodeKind.INPUT: (dict(_FIELD_STYLE), {}, "Enter text...", None),
    NodeKind.TEXTAREA: ({**_FIELD_STYLE, "height": "80px"}, {}, "Enter description...", None),
    NodeKind.SELECT: (
        {**_FIELD_STYLE, "background_color": "#ffffff"},
        {"options": ["Option 1", "Option 2", "Option 3"]},
        "Select option",
        None,
    ),
    NodeKind.CHECKBOX: (
        {"flex_direction": "row", "align_items": "center", "gap": "8px"},
        {"checked": True},
        "Enable Option",
        None,
    ),
    NodeKind.SWITCH: (
        {"flex_direction": "row", "align_items": "center", "gap": "8px"},
        {"checked": True},
        "Toggle Mode",
        None,
    ),
    NodeKind.DIVIDER: (
        {"width": "100%", "height": "1px", "background_color": "#e2e8f0", "margin": "10px 0"},
        {},
        None,
        None,
    ),
    NodeKind.ICON: ({"color": "#64748b"}, {}, None, "Star"),
    NodeKind.TABS: (
        {"width": "100%"},
        {
            "items": [
                {"id": "tab1", "label": "Account", "icon": "User", "content": "<p>Manage your account settings here.</p>"},
                {"id": "tab2", "label": "Password", "icon": "Lock", "content": "<p>Change your password securely.</p>"},
                {
                    "id": "tab3",
                    "label": "Notifications",
                    "icon": "Bell",
                    "content": "<p>Configure your notification preferences.</p>",
                },
            ],
            "activeTab": "tab1",
        },
        None,
        None,
    ),
    NodeKind.ACCORDION: (
        {"width": "100%"},
        {
            "items": [
                {
                    "id": "item1",
                    "title": "Is it accessible?",
                    "icon": "Check",
                    "content": "Yes. It adheres to the WAI-ARIA design pattern.",
                },
                {
                    "id": "item2",
                    "title": "Is it styled?",
                    "icon": "Palette",
                    "content": "Yes. It comes with default styles that match the other components.",
                },
                {
                    "id": "item3",
                    "title": "Is it animated?",
                    "icon": "Sparkles",
                    "content": "Yes. It uses CSS transitions for smooth expansion.",
                },
            ],
            "allowMultiple": False,
        },
        None,
        None,
    ),
    NodeKind.LIST: (
        {"width": "100%"},
        {
            "items": [
                {"id": "1", "title": "Inbox", "description": "12 Unread messages", "icon": "Box"},
                {"id": "2", "title": "Sent", "description": "5 pending items", "icon": "ArrowRight"},
                {"id": "3", "title": "Junk", "description": "Cleared", "icon": "Trash2"},
            ],
            "pagination": False,
        },
        None,
        None,
    ),
    NodeKind.DROPDOWN: (
        {},
        {
            "label": "Options",
            "items": [
                {"id": "1", "label": "Profile", "icon": "User"},
                {"id": "2", "label": "Settings", "icon": "Settings"},
                {"id": "3", "label": "Logout", "icon": "LogOut", "danger": True},
            ],
        },
        None,
        None,
    ),
    NodeKind.AVATAR_GROUP: (
        {"flex_direction": "row"},
        {
            "images": [
                "https://i.pravatar.cc/150?u=a042581f4e29026024d",
                "https://i.pravatar.cc/150?u=a04258a2462d826712d",
                "https://i.pravatar.cc/150?u=a042581f4e29026704d",
                "https://i.pravatar.cc/150?u=a04258114e29026302d",
            ],
            "max": 3,
        },
        None,
        None,
    ),
    NodeKind.TABLE: (
        {"width": "100%", "overflow": "auto"},
        {
            "data": [
                {"id": 1, "name": "John Doe", "role": "Admin", "status": "Active"},
                {"id": 2, "name": "Jane Smith", "role": "User", "status": "Active"},
                {"id": 3, "name": "Bob Johnson", "role": "Guest", "status": "Inactive"},
            ],
            "actionLabel": "Edit",
        },
        None,
        None,
    ),
    NodeKind.FORM: (
        {"width": "100%"},
        {
            "submitLabel": "Submit Request",
            "endpoint": "/api/submit",
            "fields": [
                {
                    "id": "f1",
                    "name": "email",
                    "label": "Email Address",
                    "type": "email",
                    "placeholder": "john@example.com",
                    "required": True,
                },
                {
                    "id": "f2",
                    "name": "subject",
                    "label": "Subject",
                    "type": "text",
                    "placeholder": "How can we help?",
                    "required": True,
                },
                {
                    "id": "f3",
                    "name": "message",
                    "label": "Message",
                    "type": "textarea",
                    "placeholder": "Describe your issue...",
                    "required": True,
                },
            ],
        },
        None,
        None,
    ),
    NodeKind.INTERACTION: ({}, {"likes": 124, "dislikes": 12, "views": 5400}, None, None),
}


def display_name(kind: str) -> str:
    return kind[:1].upper() + kind[1:] if kind else "Node"


def create_node(
    kind: str,
    parent_id: str | None = None,
    library: str = Library.RADIX,
    *,
    id_factory: IdFactory = new_id,
) -> Node:
    """
    Build a fresh node of the given kind (or palette preset) with default
    style and data. Unknown kinds get the base style and an empty data bag.
    """
    if kind in PRESETS:
        return _PRESET_BUILDERS[kind](parent_id, library, id_factory)

    style_overrides, data, content, icon = _DEFAULTS.get(kind, ({}, {}, None, None))
    # Data bags are deep-copied so nodes never share mutable defaults
    return Node(
        id=id_factory(),
        kind=kind,
        name=display_name(kind),
        library=library,
        data=copy.deepcopy(data),
        style=replace(_BASE_STYLE, **style_overrides),
        content=content,
        icon=icon,
        parent_id=parent_id,
    )


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


def _adopt(parent: Node, *children: Node) -> Node:
    """Attach children to a freshly built parent, fixing their parent pointers."""
    return replace(parent, children=tuple(replace(c, parent_id=parent.id) for c in children))


def _text(parent_id: str, library: str, id_factory: IdFactory, content: str, **style: Any) -> Node:
    node = create_node(NodeKind.TEXT, parent_id, library, id_factory=id_factory)
    return replace(node, content=content, style=replace(node.style, **style))


def _build_sidebar(parent_id: str | None, library: str, id_factory: IdFactory) -> Node:
    base = create_node(NodeKind.CONTAINER, parent_id, library, id_factory=id_factory)
    base = replace(
        base,
        name="Sidebar Preset",
        style=replace(
            _BASE_STYLE,
            width="250px",
            height="100%",
            background_color="#ffffff",
            border_right="1px",
            border_color="#e2e8f0",
            padding="20px",
            align_items="flex-start",
        ),
    )

    logo = _text(
        base.id, library, id_factory, "Dashboard Pro",
        font_size="20px", font_weight="bold", margin_bottom="20px", color="#1e293b",
    )

    nav = create_node(NodeKind.LIST, base.id, library, id_factory=id_factory)
    nav = replace(
        nav,
        data={
            "items": [
                {"id": "p1", "title": "Overview", "icon": "Layout"},
                {"id": "p2", "title": "Analytics", "icon": "BarChart"},
                {"id": "p3", "title": "Customers", "icon": "Users"},
                {"id": "p4", "title": "Settings", "icon": "Settings"},
            ]
        },
    )

    profile = create_node(NodeKind.CONTAINER, base.id, library, id_factory=id_factory)
    profile = replace(
        profile,
        style=replace(
            profile.style,
            margin_top="auto",
            flex_direction="row",
            align_items="center",
            gap="10px",
            padding="10px",
            background_color="#f8fafc",
            border_radius="8px",
            width="100%",
            min_height=None,
            border_width=None,
            border_style=None,
            border_color=None,
        ),
    )
    avatar = create_node(NodeKind.IMAGE, profile.id, library, id_factory=id_factory)
    avatar = replace(
        avatar,
        content="https://i.pravatar.cc/150?u=a042581f4e29026024d",
        style=replace(avatar.style, width="40px", height="40px", border_radius="20px"),
    )
    user_name = _text(profile.id, library, id_factory, "John Admin", font_size="14px", font_weight="500")
    profile = _adopt(profile, avatar, user_name)

    return _adopt(base, logo, nav, profile)


def _build_navbar(parent_id: str | None, library: str, id_factory: IdFactory) -> Node:
    base = create_node(NodeKind.CONTAINER, parent_id, library, id_factory=id_factory)
    base = replace(
        base,
        name="Navbar Preset",
        style=replace(
            _BASE_STYLE,
            width="100%",
            height="64px",
            background_color="#ffffff",
            border_bottom="1px",
            border_color="#e2e8f0",
            flex_direction="row",
            align_items="center",
            justify_content="space-between",
            padding="0 24px",
        ),
    )

    logo = _text(base.id, library, id_factory, "MyApp", font_size="18px", font_weight="bold", color="#0f172a")

    links = create_node(NodeKind.CONTAINER, base.id, library, id_factory=id_factory)
    links = replace(
        links,
        style=replace(
            links.style,
            flex_direction="row",
            gap="20px",
            align_items="center",
            width="auto",
            min_height=None,
            padding=None,
            background_color="transparent",
            border_width="0px",
            border_style=None,
            border_color=None,
        ),
    )
    links = _adopt(
        links,
        *(
            _text(links.id, library, id_factory, label, font_size="14px", color="#64748b", cursor="pointer")
            for label in ("Features", "Pricing", "About")
        ),
    )

    cta = create_node(NodeKind.BUTTON, base.id, library, id_factory=id_factory)
    cta = replace(cta, content="Get Started")

    return _adopt(base, logo, links, cta)


_PRESET_BUILDERS = {
    "sidebar": _build_sidebar,
    "navbar": _build_navbar,
}
