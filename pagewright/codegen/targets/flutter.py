"""
Pagewright Codegen — Flutter Target

Emits a multi-file Flutter bundle as one text document. Each file is
preceded by a banner:

    // ==============================================================================
    // FILE: lib/main.dart
    // ==============================================================================

Files: lib/main.dart (app + page widget), lib/theme/app_theme.dart, and one
lib/components/<name>.dart per smart component the tree uses, together with
the components those depend on.

Layout nodes become Container + Column/Row with SizedBox gap spacers. CSS
shorthands for padding/margin ("8px 16px") become EdgeInsets; hex colors
become Color(0xAARRGGBB). Navigation references wrap the node in
InkWell + Navigator.pushNamed. Unknown kinds become a Placeholder widget.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import chevron

from pagewright.codegen.literals import dart_string, to_dart_literal
from pagewright.codegen.targets.base import Dependencies, Target, indent_str, load_template
from pagewright.kernel.types import Node, NodeKind, Style

if TYPE_CHECKING:
    from pagewright.codegen.generator import GenerateOptions

BANNER_RULE = "// " + "=" * 78

THEME_IMPORT = "import 'theme/app_theme.dart';"

# component class → file stem under lib/components/
COMPONENT_FILES: dict[str, str] = {
    "CustomButton": "custom_button",
    "CustomTextField": "custom_text_field",
    "DynamicList": "dynamic_list",
    "SmartAccordion": "smart_accordion",
    "SmartForm": "smart_form",
    "SmartTable": "smart_table",
    "SmartTabs": "smart_tabs",
}

# component → components it imports
COMPONENT_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "SmartForm": ("CustomButton", "CustomTextField"),
}

_KIND_COMPONENTS: dict[str, str] = {
    NodeKind.INPUT: "CustomTextField",
    NodeKind.TEXTAREA: "CustomTextField",
    NodeKind.BUTTON: "CustomButton",
    NodeKind.FORM: "SmartForm",
    NodeKind.TABLE: "SmartTable",
    NodeKind.LIST: "DynamicList",
    NodeKind.TABS: "SmartTabs",
    NodeKind.ACCORDION: "SmartAccordion",
}

MATERIAL_ICONS: dict[str, str] = {
    "Home": "Icons.home",
    "User": "Icons.person",
    "Users": "Icons.people",
    "Settings": "Icons.settings",
    "Bell": "Icons.notifications",
    "Search": "Icons.search",
    "Menu": "Icons.menu",
    "Star": "Icons.star",
    "Heart": "Icons.favorite",
    "Share": "Icons.share",
    "ArrowRight": "Icons.arrow_forward",
    "Box": "Icons.check_box_outline_blank",
    "Check": "Icons.check",
    "X": "Icons.close",
    "Trash2": "Icons.delete",
    "Plus": "Icons.add",
    "Edit": "Icons.edit",
    "Eye": "Icons.visibility",
    "Lock": "Icons.lock",
    "LogOut": "Icons.logout",
    "Layout": "Icons.dashboard",
    "BarChart": "Icons.bar_chart",
    "Palette": "Icons.palette",
    "Sparkles": "Icons.auto_awesome",
    "Mail": "Icons.mail",
    "Calendar": "Icons.calendar_today",
}
FALLBACK_ICON = "Icons.help_outline"

NAMED_COLORS: dict[str, str] = {
    "white": "AppTheme.white",
    "black": "AppTheme.black",
    "red": "Colors.red",
    "green": "Colors.green",
    "blue": "Colors.blue",
    "grey": "Colors.grey",
    "gray": "Colors.grey",
}


def material_icon(name: str | None) -> str:
    return MATERIAL_ICONS.get(name or "", FALLBACK_ICON)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------

_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?|-?\.\d+)")


def parse_double(value: str | None, default: str = "0.0") -> str:
    """CSS length → Dart double literal. "100%" is double.infinity; unparsable values use default."""
    if not value:
        return default
    if value.strip() == "100%":
        return "double.infinity"
    match = _NUMBER.match(value)
    if match is None:
        return default
    return f"{float(match.group(1)):.1f}"


def parse_color(value: str | None) -> str:
    if not value or value == "transparent":
        return "Colors.transparent"
    value = value.strip()
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6 and _is_hex(digits):
            return f"Color(0xFF{digits.upper()})"
        if len(digits) == 8 and _is_hex(digits):
            # CSS #RRGGBBAA → Dart 0xAARRGGBB
            return f"Color(0x{digits[6:].upper()}{digits[:6].upper()})"
        return "Colors.black"
    return NAMED_COLORS.get(value.lower(), "Colors.black")


def _is_hex(digits: str) -> bool:
    return all(ch in "0123456789abcdefABCDEF" for ch in digits)


def _shorthand(value: str) -> tuple[str, str, str, str]:
    """CSS 1-4 value shorthand → (top, right, bottom, left)."""
    parts = value.split()
    if len(parts) == 1:
        return parts[0], parts[0], parts[0], parts[0]
    if len(parts) == 2:
        return parts[0], parts[1], parts[0], parts[1]
    if len(parts) == 3:
        return parts[0], parts[1], parts[2], parts[1]
    return parts[0], parts[1], parts[2], parts[3]


def edge_insets(style: Style, prefix: str) -> str | None:
    """
    Padding or margin fields → EdgeInsets expression, or None when unset.
    Side-specific fields override the shorthand.
    """
    shorthand = getattr(style, prefix)
    sides = {side: getattr(style, f"{prefix}_{side}") for side in ("top", "right", "bottom", "left")}
    if shorthand is None and not any(sides.values()):
        return None

    top, right, bottom, left = _shorthand(shorthand) if shorthand else ("0", "0", "0", "0")
    top = sides["top"] or top
    right = sides["right"] or right
    bottom = sides["bottom"] or bottom
    left = sides["left"] or left
    t, r, b, l = (parse_double(v) for v in (top, right, bottom, left))
    if "double.infinity" in (t, r, b, l):
        t, r, b, l = (v if v != "double.infinity" else "0.0" for v in (t, r, b, l))

    if t == r == b == l:
        return "EdgeInsets.zero" if t == "0.0" else f"const EdgeInsets.all({t})"
    if t == b and l == r:
        return f"const EdgeInsets.symmetric(vertical: {t}, horizontal: {l})"
    return f"const EdgeInsets.fromLTRB({l}, {t}, {r}, {b})"


def _box_decoration(style: Style, pad: str) -> str | None:
    fields: list[str] = []
    if style.background_color and style.background_color != "transparent":
        fields.append(f"color: {parse_color(style.background_color)}")
    if style.border_radius:
        fields.append(f"borderRadius: BorderRadius.circular({parse_double(style.border_radius)})")
    if style.border_width and style.border_width not in ("0", "0px"):
        color = parse_color(style.border_color) if style.border_color else "AppTheme.border"
        fields.append(f"border: Border.all(color: {color}, width: {parse_double(style.border_width)})")
    if style.box_shadow:
        fields.append("boxShadow: const [BoxShadow(color: Color(0x1A000000), blurRadius: 6, offset: Offset(0, 2))]")
    if not fields:
        return None
    inner = "".join(f"{pad}  {f},\n" for f in fields)
    return f"BoxDecoration(\n{inner}{pad})"


_MAIN_AXIS = {
    "flex-start": "MainAxisAlignment.start",
    "center": "MainAxisAlignment.center",
    "flex-end": "MainAxisAlignment.end",
    "space-between": "MainAxisAlignment.spaceBetween",
    "space-around": "MainAxisAlignment.spaceAround",
    "space-evenly": "MainAxisAlignment.spaceEvenly",
}

_CROSS_AXIS = {
    "flex-start": "CrossAxisAlignment.start",
    "center": "CrossAxisAlignment.center",
    "flex-end": "CrossAxisAlignment.end",
    "stretch": "CrossAxisAlignment.stretch",
}

_TEXT_ALIGN = {
    "left": "TextAlign.left",
    "center": "TextAlign.center",
    "right": "TextAlign.right",
    "justify": "TextAlign.justify",
}

_FONT_WEIGHTS = {"normal": "FontWeight.normal", "bold": "FontWeight.bold"}
_FONT_WEIGHTS.update({str(n): f"FontWeight.w{n}" for n in range(100, 1000, 100)})


# ---------------------------------------------------------------------------
# Widget call formatting
# ---------------------------------------------------------------------------


def _call(name: str, args: list[str], indent: int) -> str:
    """
    Widget constructor call. The first line carries no indentation (callers
    place it); arguments sit one level deeper; the closing paren at indent.
    """
    if not args:
        return f"{name}()"
    pad = indent_str(indent)
    inner = "".join(f"{pad}  {a},\n" for a in args)
    return f"{name}(\n{inner}{pad})"


def _list(items: list[str], indent: int) -> str:
    if not items:
        return "const []"
    pad = indent_str(indent)
    inner = "".join(f"{pad}  {item},\n" for item in items)
    return f"[\n{inner}{pad}]"


def _data_list(node: Node, key: str) -> list[Any]:
    value = node.data.get(key)
    return value if isinstance(value, list) else []


# ---------------------------------------------------------------------------
# Emitters
#
# Each emitter returns an expression whose first line is unindented and
# whose continuation lines are relative to `indent`.
# ---------------------------------------------------------------------------


def _container(node: Node, indent: int, decorated: bool = True) -> str:
    style = node.style
    args: list[str] = []
    if style.width and style.width != "auto":
        args.append(f"width: {parse_double(style.width)}")
    # unbounded heights are not allowed inside the scroll view
    if style.height and style.height != "auto" and parse_double(style.height) != "double.infinity":
        args.append(f"height: {parse_double(style.height)}")
    padding = edge_insets(style, "padding")
    if padding:
        args.append(f"padding: {padding}")
    margin = edge_insets(style, "margin")
    if margin:
        args.append(f"margin: {margin}")
    decoration = _box_decoration(style, indent_str(indent + 1)) if decorated else None
    if decoration:
        args.append(f"decoration: {decoration}")
    if node.children:
        args.append(f"child: {_flex(node, indent + 1)}")
    return _call("Container", args, indent)


def _emit_layout(node: Node, indent: int) -> str:
    if node.kind != NodeKind.CARD:
        return _container(node, indent)
    style = node.style
    radius = parse_double(style.border_radius, "8.0")
    card_args = [
        f"elevation: {'2' if style.box_shadow else '0'}",
        f"color: {parse_color(style.background_color) if style.background_color else 'AppTheme.white'}",
        f"shape: RoundedRectangleBorder(borderRadius: BorderRadius.circular({radius}))",
        f"child: {_container(node, indent + 1, decorated=False)}",
    ]
    return _call("Card", card_args, indent)


def _flex(node: Node, indent: int) -> str:
    style = node.style
    is_row = style.flex_direction in ("row", "row-reverse")
    children = [emit_node(c, indent + 2).lstrip() for c in node.children]
    if style.gap:
        gap = parse_double(style.gap)
        spacer = f"const SizedBox({'width' if is_row else 'height'}: {gap})"
        spaced: list[str] = []
        for i, child in enumerate(children):
            if i:
                spaced.append(spacer)
            spaced.append(child)
        children = spaced
    args = [
        f"mainAxisAlignment: {_MAIN_AXIS.get(style.justify_content or '', 'MainAxisAlignment.start')}",
        f"crossAxisAlignment: {_CROSS_AXIS.get(style.align_items or '', 'CrossAxisAlignment.start')}",
        "mainAxisSize: MainAxisSize.min",
        f"children: {_list(children, indent + 1)}",
    ]
    return _call("Row" if is_row else "Column", args, indent)


def _text_style(style: Style, indent: int, default_size: str = "14.0") -> str:
    args = [f"fontSize: {parse_double(style.font_size, default_size)}"]
    if style.color:
        args.append(f"color: {parse_color(style.color)}")
    if style.font_weight:
        args.append(f"fontWeight: {_FONT_WEIGHTS.get(style.font_weight, 'FontWeight.normal')}")
    return _call("TextStyle", args, indent)


def _emit_text(node: Node, indent: int) -> str:
    args = [dart_string(node.content or "")]
    if node.style.text_align in _TEXT_ALIGN:
        args.append(f"textAlign: {_TEXT_ALIGN[node.style.text_align]}")
    args.append(f"style: {_text_style(node.style, indent + 1)}")
    return _call("Text", args, indent)


def _emit_button(node: Node, indent: int) -> str:
    variant = node.data.get("variant")
    is_primary = variant in (None, "", "default")
    return _call(
        "CustomButton",
        [
            f"label: {dart_string(node.content or 'Button')}",
            "onPressed: () {}",
            f"isPrimary: {'true' if is_primary else 'false'}",
        ],
        indent,
    )


def _emit_text_field(node: Node, indent: int) -> str:
    return _call(
        "CustomTextField",
        [
            'label: ""',
            f"hint: {dart_string(node.content or '')}",
            f"maxLines: {4 if node.kind == NodeKind.TEXTAREA else 1}",
        ],
        indent,
    )


def _emit_select(node: Node, indent: int) -> str:
    options = [str(o) for o in _data_list(node, "options")] or ["Option 1"]
    items = [f"DropdownMenuItem(value: {dart_string(o)}, child: Text({dart_string(o)}))" for o in options]
    return _call(
        "DropdownButtonFormField<String>",
        [
            f"hint: Text({dart_string(node.content or 'Select...')})",
            f"items: {_list(items, indent + 1)}",
            "onChanged: (value) {}",
        ],
        indent,
    )


def _emit_toggle(node: Node, indent: int) -> str:
    control = "Switch" if node.kind == NodeKind.SWITCH else "Checkbox"
    checked = "true" if node.data.get("checked") else "false"
    label = node.content or control
    children = [f"{control}(value: {checked}, onChanged: (value) {{}})", f"Text({dart_string(label)})"]
    return _call("Row", ["mainAxisSize: MainAxisSize.min", f"children: {_list(children, indent + 1)}"], indent)


def _emit_image(node: Node, indent: int) -> str:
    image_args = [dart_string(node.content or "https://picsum.photos/200")]
    if node.style.width and node.style.width != "auto":
        image_args.append(f"width: {parse_double(node.style.width)}")
    if node.style.height and node.style.height != "auto":
        image_args.append(f"height: {parse_double(node.style.height)}")
    image_args.append("fit: BoxFit.cover")
    return _call(
        "ClipRRect",
        [
            f"borderRadius: BorderRadius.circular({parse_double(node.style.border_radius)})",
            f"child: Image.network({', '.join(image_args)})",
        ],
        indent,
    )


def _emit_icon(node: Node, indent: int) -> str:
    color = parse_color(node.style.color) if node.style.color else "AppTheme.textSecondary"
    return f"Icon({material_icon(node.icon)}, color: {color}, size: 24)"


def _emit_divider(node: Node, indent: int) -> str:
    color = parse_color(node.style.background_color) if node.style.background_color else "AppTheme.border"
    return f"Divider(height: {parse_double(node.style.height, '1.0')}, thickness: 1, color: {color})"


def _emit_table(node: Node, indent: int) -> str:
    args = [f"data: {to_dart_literal(_data_list(node, 'data'))}"]
    if node.data.get("actionLabel"):
        args.append(f"actionLabel: {dart_string(str(node.data['actionLabel']))}")
    return _call("SmartTable", args, indent)


def _emit_form(node: Node, indent: int) -> str:
    return _call(
        "SmartForm",
        [
            f"endpoint: {dart_string(str(node.data.get('endpoint') or ''))}",
            f"submitLabel: {dart_string(str(node.data.get('submitLabel') or 'Submit'))}",
            f"fieldsData: {to_dart_literal(_data_list(node, 'fields'))}",
        ],
        indent,
    )


def _emit_list(node: Node, indent: int) -> str:
    pagination = "true" if node.data.get("pagination") else "false"
    return _call(
        "DynamicList",
        [f"data: {to_dart_literal(_data_list(node, 'items'))}", f"enablePagination: {pagination}"],
        indent,
    )


def _emit_tabs(node: Node, indent: int) -> str:
    return _call("SmartTabs", [f"tabsData: {to_dart_literal(_data_list(node, 'items'))}"], indent)


def _emit_accordion(node: Node, indent: int) -> str:
    allow = "true" if node.data.get("allowMultiple") else "false"
    return _call(
        "SmartAccordion",
        [f"items: {to_dart_literal(_data_list(node, 'items'))}", f"allowMultiple: {allow}"],
        indent,
    )


def _emit_dropdown(node: Node, indent: int) -> str:
    label = dart_string(str(node.data.get("label") or "Options"))
    items = [i for i in _data_list(node, "items") if isinstance(i, dict)]
    if not items:
        return 'const Text("No options")'
    entries = []
    for item in items:
        style = ", style: const TextStyle(color: Colors.red)" if item.get("danger") else ""
        text = dart_string(str(item.get("label") or "Item"))
        value = dart_string(str(item.get("id") or item.get("label") or ""))
        entries.append(f"PopupMenuItem<String>(value: {value}, child: Text({text}{style}))")
    return _call(
        "PopupMenuButton<String>",
        [
            "onSelected: (value) {}",
            f"itemBuilder: (context) => {_list(entries, indent + 1)}",
            f"child: Row(mainAxisSize: MainAxisSize.min, children: [Text({label}), const Icon(Icons.arrow_drop_down)])",
        ],
        indent,
    )


def _emit_avatar_group(node: Node, indent: int) -> str:
    images = [str(i) for i in _data_list(node, "images")]
    if not images:
        return 'const Text("No avatars")'
    limit = node.data.get("max")
    if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
        limit = len(images)
    shown, hidden = images[:limit], max(0, len(images) - limit)
    avatars = [
        f"Positioned(left: {i * 28}.0, child: CircleAvatar(radius: 20, backgroundImage: NetworkImage({dart_string(src)})))"
        for i, src in enumerate(shown)
    ]
    if hidden:
        avatars.append(
            f"Positioned(left: {len(shown) * 28}.0, child: CircleAvatar(radius: 20, child: Text({dart_string(f'+{hidden}')})))"
        )
    width = (len(avatars) - 1) * 28 + 40
    return _call(
        "SizedBox",
        [f"width: {width}.0", "height: 40.0", f"child: Stack(children: {_list(avatars, indent + 1)})"],
        indent,
    )


def _emit_interaction(node: Node, indent: int) -> str:
    buttons = []
    for icon, key in (("Icons.thumb_up_outlined", "likes"), ("Icons.thumb_down_outlined", "dislikes"), ("Icons.visibility", "views")):
        count = node.data.get(key, 0)
        buttons.append(
            f"TextButton.icon(onPressed: () {{}}, icon: const Icon({icon}, size: 16), label: Text({dart_string(str(count))}))"
        )
    return _call("Row", ["mainAxisSize: MainAxisSize.min", f"children: {_list(buttons, indent + 1)}"], indent)


def _emit_unsupported(node: Node, indent: int) -> str:
    label = dart_string(f"Unsupported component: {node.kind or 'unknown'}")
    return _call("Placeholder", ["fallbackHeight: 40", f"child: Center(child: Text({label}))"], indent)


_EMITTERS: dict[str, Callable[[Node, int], str]] = {
    NodeKind.CONTAINER: _emit_layout,
    NodeKind.CARD: _emit_layout,
    NodeKind.TEXT: _emit_text,
    NodeKind.BUTTON: _emit_button,
    NodeKind.INPUT: _emit_text_field,
    NodeKind.TEXTAREA: _emit_text_field,
    NodeKind.SELECT: _emit_select,
    NodeKind.CHECKBOX: _emit_toggle,
    NodeKind.SWITCH: _emit_toggle,
    NodeKind.IMAGE: _emit_image,
    NodeKind.ICON: _emit_icon,
    NodeKind.DIVIDER: _emit_divider,
    NodeKind.TABLE: _emit_table,
    NodeKind.FORM: _emit_form,
    NodeKind.LIST: _emit_list,
    NodeKind.TABS: _emit_tabs,
    NodeKind.ACCORDION: _emit_accordion,
    NodeKind.DROPDOWN: _emit_dropdown,
    NodeKind.AVATAR_GROUP: _emit_avatar_group,
    NodeKind.INTERACTION: _emit_interaction,
}


def emit_node(node: Node, indent: int = 0) -> str:
    """Widget expression for node, first line indented to `indent`."""
    emitter = _EMITTERS.get(node.kind, _emit_unsupported)
    if node.href:
        widget = emitter(node, indent + 1)
        expr = _call(
            "InkWell",
            [f"onTap: () => Navigator.pushNamed(context, {dart_string(node.href)})", f"child: {widget}"],
            indent,
        )
    else:
        expr = emitter(node, indent)
    return indent_str(indent) + expr


# ---------------------------------------------------------------------------
# Dependency collection
# ---------------------------------------------------------------------------


def _with_transitive(components: set[str]) -> set[str]:
    result: set[str] = set()
    pending = list(components)
    while pending:
        name = pending.pop()
        if name in result:
            continue
        result.add(name)
        pending.extend(COMPONENT_DEPENDENCIES.get(name, ()))
    return result


def collect_dependencies(tree: Node) -> Dependencies:
    deps = Dependencies(imports={THEME_IMPORT})
    used: set[str] = set()
    for node in tree.depth_first():
        component = _KIND_COMPONENTS.get(node.kind)
        if component:
            used.add(component)
    # Material icons ship with flutter/material.dart and need no import.
    # main.dart imports only what it calls directly; bundled files cover the rest
    deps.imports.update(f"import 'components/{COMPONENT_FILES[c]}.dart';" for c in used)
    deps.helpers = _with_transitive(used)
    return deps


# ---------------------------------------------------------------------------
# Document assembly
# ---------------------------------------------------------------------------


def file_banner(path: str) -> str:
    return f"{BANNER_RULE}\n// FILE: {path}\n{BANNER_RULE}\n"


def bundle(files: list[tuple[str, str]]) -> str:
    return "\n".join(file_banner(path) + content.strip() + "\n" for path, content in files)


class FlutterTarget(Target):
    name = "flutter"
    filename = "main.dart"
    aliases = ("dart", "mobile")
    body_indent = 5

    def collect_dependencies(self, tree: Node) -> Dependencies:
        return collect_dependencies(tree)

    def emit_node(self, node: Node, indent: int = 0) -> str:
        return emit_node(node, indent)

    def serialize_literal(self, value: Any) -> str:
        return to_dart_literal(value)

    def wrap_document(
        self,
        tree: Node,
        body: str,
        dependencies: Dependencies,
        options: GenerateOptions | None = None,
    ) -> str:
        widget_name = options.widget_name if options else "MyPage"
        app_title = options.app_title if options else "Generated App"
        main = chevron.render(
            load_template("flutter/main.dart.mustache"),
            {
                "imports": "\n".join(dependencies.sorted_imports()),
                "app_title": dart_string(app_title),
                "widget_name": widget_name,
                "page_title": dart_string(tree.name or app_title),
                "body": body.lstrip(),
            },
        )
        files = [
            ("lib/main.dart", main),
            ("lib/theme/app_theme.dart", load_template("flutter/app_theme.dart")),
        ]
        for component in dependencies.sorted_helpers():
            stem = COMPONENT_FILES[component]
            files.append((f"lib/components/{stem}.dart", load_template(f"flutter/components/{stem}.dart")))
        return bundle(files)
