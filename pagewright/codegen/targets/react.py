"""
Pagewright Codegen — React Target

Emits a Next.js page component (page.tsx) styled with Tailwind classes.

  - one emitter per node kind in _EMITTERS; unknown kinds get a marked placeholder
  - library branches (shadcn / radix / plain) live inside each emitter
  - nodes with href are wrapped in next/link (bound as NextLink)
  - icons collapse into a single lucide-react import; an icon whose name is
    already bound in the file is imported as <Name>Icon
  - stateful blocks (DataTable, TabsBlock) are hoisted once as helper components,
    and their presence turns the file into a client component
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import chevron

from pagewright.codegen.literals import jsx_attr, jsx_text, to_ts_literal
from pagewright.codegen.styles import class_names
from pagewright.codegen.targets.base import Dependencies, Target, indent_str, load_template
from pagewright.kernel.types import Library, Node, NodeKind

if TYPE_CHECKING:
    from pagewright.codegen.generator import GenerateOptions

LINK_IMPORT = 'import NextLink from "next/link";'

_SHADCN_IMPORTS: dict[str, str] = {
    NodeKind.BUTTON: 'import { Button } from "@/components/ui/button";',
    NodeKind.CARD: 'import { Card, CardContent } from "@/components/ui/card";',
    NodeKind.INPUT: 'import { Input } from "@/components/ui/input";',
    NodeKind.TEXTAREA: 'import { Textarea } from "@/components/ui/textarea";',
    NodeKind.CHECKBOX: 'import { Checkbox } from "@/components/ui/checkbox";',
    NodeKind.SWITCH: 'import { Switch } from "@/components/ui/switch";',
    NodeKind.SELECT: (
        'import { Select, SelectContent, SelectItem, SelectTrigger, SelectValue } from "@/components/ui/select";'
    ),
    NodeKind.DIVIDER: 'import { Separator } from "@/components/ui/separator";',
}

_RADIX_IMPORTS: dict[str, str] = {
    NodeKind.SWITCH: 'import * as RadixSwitch from "@radix-ui/react-switch";',
    NodeKind.CHECKBOX: 'import * as RadixCheckbox from "@radix-ui/react-checkbox";',
}

# helper name → (template file, React hooks it uses, icons it renders)
_HELPERS: dict[str, tuple[str, tuple[str, ...], tuple[str, ...]]] = {
    "DataTable": ("react/data_table.tsx", ("useMemo", "useState"), ("ChevronLeft", "ChevronRight", "Search")),
    "TabsBlock": ("react/tabs_block.tsx", ("useState",), ()),
}

_KIND_HELPERS: dict[str, str] = {
    NodeKind.TABLE: "DataTable",
    NodeKind.TABS: "TabsBlock",
}

_KIND_ICONS: dict[str, tuple[str, ...]] = {
    NodeKind.DROPDOWN: ("ChevronDown",),
    NodeKind.INTERACTION: ("Eye", "ThumbsDown", "ThumbsUp"),
}

DEFAULT_ICON = "Box"
_ICON_NAME = re.compile(r"[A-Z][A-Za-z0-9]*")


def icon_component(name: Any) -> str:
    """lucide-react component name, falling back to Box for anything unusable."""
    if isinstance(name, str) and _ICON_NAME.fullmatch(name):
        return name
    return DEFAULT_ICON


def _bound_names(import_line: str) -> list[str]:
    return re.findall(r"[A-Z][A-Za-z0-9]*", import_line.split(" from ")[0])


# Component names the preamble binds besides lucide icons
BOUND_NAMES: frozenset[str] = frozenset(
    {
        "React",
        *_HELPERS,
        *_bound_names(LINK_IMPORT),
        *(name for line in _SHADCN_IMPORTS.values() for name in _bound_names(line)),
        *(name for line in _RADIX_IMPORTS.values() for name in _bound_names(line)),
    }
)


def icon_tag(name: Any) -> str:
    """JSX tag for an icon: the lucide name, or <Name>Icon when the name is already bound."""
    component = icon_component(name)
    return f"{component}Icon" if component in BOUND_NAMES else component


def _icon_specifiers(icons: list[str]) -> list[str]:
    """lucide-react import specifiers, one per local name."""
    specifiers: dict[str, str] = {}
    for icon in icons:
        local = icon_tag(icon)
        specifiers.setdefault(local, icon if local == icon else f"{icon} as {local}")
    return [specifiers[local] for local in sorted(specifiers)]


def _item_icons(node: Node) -> list[str]:
    items = node.data.get("items")
    if not isinstance(items, list):
        return []
    return [icon_component(item["icon"]) for item in items if isinstance(item, dict) and item.get("icon")]


# ---------------------------------------------------------------------------
# Dependency collection
# ---------------------------------------------------------------------------


def collect_dependencies(tree: Node) -> Dependencies:
    deps = Dependencies()
    for node in tree.depth_first():
        if node.href:
            deps.imports.add(LINK_IMPORT)
        if node.library == Library.SHADCN and node.kind in _SHADCN_IMPORTS:
            deps.imports.add(_SHADCN_IMPORTS[node.kind])
        if node.library == Library.RADIX and node.kind in _RADIX_IMPORTS:
            deps.imports.add(_RADIX_IMPORTS[node.kind])
            if node.kind == NodeKind.CHECKBOX:
                deps.icons.add("Check")
        if node.kind == NodeKind.ICON:
            deps.icons.add(icon_component(node.icon))
        if node.kind in (NodeKind.LIST, NodeKind.DROPDOWN):
            deps.icons.update(_item_icons(node))
        deps.icons.update(_KIND_ICONS.get(node.kind, ()))
        helper = _KIND_HELPERS.get(node.kind)
        if helper:
            deps.helpers.add(helper)
            deps.icons.update(_HELPERS[helper][2])
    return deps


# ---------------------------------------------------------------------------
# Node emission
# ---------------------------------------------------------------------------


def _variant(node: Node) -> str | None:
    variant = node.data.get("variant")
    return variant if isinstance(variant, str) else None


def _class_attr(node: Node, *extra: str) -> str:
    resolved = class_names(node.style, node.kind, node.library, _variant(node))
    classes = " ".join(filter(None, (resolved, *extra)))
    return f" className={jsx_attr(classes)}" if classes else ""


def _events(node: Node) -> str:
    return f" onClick={{{node.on_click}}}" if node.on_click else ""


def _children(node: Node, indent: int) -> str:
    return "\n".join(emit_node(c, indent) for c in node.children)


def _block(pad: str, open_tag: str, close_tag: str, inner: str) -> str:
    if not inner:
        return f"{pad}{open_tag}{close_tag}"
    return f"{pad}{open_tag}\n{inner}\n{pad}{close_tag}"


def _emit_container(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    inner = _children(node, indent + 1)
    if not inner:
        return f"{pad}<div{_class_attr(node)}{_events(node)} />"
    return _block(pad, f"<div{_class_attr(node)}{_events(node)}>", "</div>", inner)


def _emit_card(node: Node, indent: int) -> str:
    if node.library != Library.SHADCN:
        return _emit_container(node, indent)
    pad = indent_str(indent)
    inner_pad = indent_str(indent + 1)
    content = _children(node, indent + 2)
    body = _block(inner_pad, '<CardContent className="p-6">', "</CardContent>", content)
    return _block(pad, f"<Card{_class_attr(node)}{_events(node)}>", "</Card>", body)


def _emit_text(node: Node, indent: int) -> str:
    return f"{indent_str(indent)}<div{_class_attr(node)}{_events(node)}>{jsx_text(node.content or '')}</div>"


def _emit_button(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    if node.library == Library.SHADCN:
        variant = _variant(node)
        variant_attr = f" variant={jsx_attr(variant)}" if variant else ""
        open_tag = f"<Button{variant_attr}{_class_attr(node)}{_events(node)}>"
        close_tag = "</Button>"
    else:
        open_tag = f'<button type="button"{_class_attr(node)}{_events(node)}>'
        close_tag = "</button>"
    if node.children:
        return _block(pad, open_tag, close_tag, _children(node, indent + 1))
    return f"{pad}{open_tag}{jsx_text(node.content or 'Button')}{close_tag}"


def _emit_input(node: Node, indent: int) -> str:
    placeholder = jsx_attr(node.content or "")
    if node.library == Library.SHADCN:
        return f"{indent_str(indent)}<Input placeholder={placeholder}{_class_attr(node)}{_events(node)} />"
    return f'{indent_str(indent)}<input type="text" placeholder={placeholder}{_class_attr(node)}{_events(node)} />'


def _emit_textarea(node: Node, indent: int) -> str:
    tag = "Textarea" if node.library == Library.SHADCN else "textarea"
    return f"{indent_str(indent)}<{tag} placeholder={jsx_attr(node.content or '')}{_class_attr(node)}{_events(node)} />"


def _options(node: Node) -> list[str]:
    options = node.data.get("options")
    if not isinstance(options, list) or not options:
        return ["Option 1"]
    return [str(o) for o in options]


def _emit_select(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1, p2 = indent_str(indent + 1), indent_str(indent + 2)
    options = _options(node)
    if node.library == Library.SHADCN:
        items = "\n".join(
            f"{p2}<SelectItem value={jsx_attr(opt)}>{jsx_text(opt)}</SelectItem>" for opt in options
        )
        return "\n".join(
            [
                f"{pad}<Select>",
                f"{p1}<SelectTrigger{_class_attr(node)}>",
                f"{p2}<SelectValue placeholder={jsx_attr(node.content or 'Select...')} />",
                f"{p1}</SelectTrigger>",
                f"{p1}<SelectContent>",
                items,
                f"{p1}</SelectContent>",
                f"{pad}</Select>",
            ]
        )
    lines = [f'{pad}<select defaultValue=""{_class_attr(node)}{_events(node)}>']
    lines.append(f'{p1}<option value="" disabled>{jsx_text(node.content or "Select...")}</option>')
    lines.extend(f"{p1}<option value={jsx_attr(opt)}>{jsx_text(opt)}</option>" for opt in options)
    lines.append(f"{pad}</select>")
    return "\n".join(lines)


def _emit_toggle(node: Node, indent: int) -> str:
    """Checkbox and switch share a label row; only the control differs per library."""
    pad = indent_str(indent)
    p1, p2, p3 = (indent_str(indent + n) for n in (1, 2, 3))
    checked = " defaultChecked" if node.data.get("checked") else ""
    control_id = jsx_attr(node.id)
    is_switch = node.kind == NodeKind.SWITCH
    label = node.content or ("Switch" if is_switch else "Checkbox")

    if node.library == Library.SHADCN:
        control = [f"{p1}<{'Switch' if is_switch else 'Checkbox'} id={control_id}{checked}{_events(node)} />"]
    elif node.library == Library.RADIX and is_switch:
        control = [
            f"{p1}<RadixSwitch.Root id={control_id}{checked}{_events(node)}"
            ' className="w-[42px] h-[25px] bg-black/50 rounded-full relative data-[state=checked]:bg-black outline-none">',
            f'{p2}<RadixSwitch.Thumb className="block w-[21px] h-[21px] bg-white rounded-full transition-transform'
            ' translate-x-0.5 data-[state=checked]:translate-x-[19px]" />',
            f"{p1}</RadixSwitch.Root>",
        ]
    elif node.library == Library.RADIX:
        control = [
            f"{p1}<RadixCheckbox.Root id={control_id}{checked}{_events(node)}"
            ' className="flex h-[25px] w-[25px] items-center justify-center rounded-[4px] bg-white shadow outline-none">',
            f'{p2}<RadixCheckbox.Indicator className="text-black">',
            f"{p3}<Check size={{16}} />",
            f"{p2}</RadixCheckbox.Indicator>",
            f"{p1}</RadixCheckbox.Root>",
        ]
    else:
        role = ' role="switch"' if is_switch else ""
        control = [f'{p1}<input type="checkbox"{role} id={control_id}{checked}{_events(node)} />']

    return "\n".join(
        [
            f"{pad}<div{_class_attr(node)}>",
            *control,
            f'{p1}<label htmlFor={control_id} className="text-sm font-medium">{jsx_text(label)}</label>',
            f"{pad}</div>",
        ]
    )


def _emit_image(node: Node, indent: int) -> str:
    src = jsx_attr(node.content or "https://picsum.photos/200")
    alt = jsx_attr(node.name or "image")
    return f"{indent_str(indent)}<img src={src} alt={alt}{_class_attr(node)}{_events(node)} />"


def _emit_icon(node: Node, indent: int) -> str:
    return f"{indent_str(indent)}<{icon_tag(node.icon)} size={{24}}{_class_attr(node)}{_events(node)} />"


def _emit_divider(node: Node, indent: int) -> str:
    tag = "Separator" if node.library == Library.SHADCN else "hr"
    return f"{indent_str(indent)}<{tag}{_class_attr(node)} />"


def _emit_table(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1 = indent_str(indent + 1)
    rows = node.data.get("data")
    if not isinstance(rows, list):
        rows = []
    rows_literal = _indent_literal(to_ts_literal(rows), p1)
    lines = [f"{pad}<DataTable", f"{p1}rows={{{rows_literal}}}"]
    action = node.data.get("actionLabel")
    if action:
        lines.append(f"{p1}actionLabel={jsx_attr(str(action))}")
    classes = class_names(node.style, node.kind, node.library)
    if classes:
        lines.append(f"{p1}className={jsx_attr(classes)}")
    lines.append(f"{pad}/>")
    return "\n".join(lines)


def _indent_literal(literal: str, pad: str) -> str:
    """Re-indent a multi-line literal so its continuation lines sit under pad."""
    return literal.replace("\n", "\n" + pad)


def _field_control(field: dict[str, Any], pad: str) -> list[str]:
    name = jsx_attr(str(field.get("name") or field.get("id") or "field"))
    placeholder = jsx_attr(str(field.get("placeholder") or ""))
    required = " required" if field.get("required") else ""
    field_type = str(field.get("type") or "text")
    control_classes = 'className="w-full rounded-md border border-gray-300 p-2 text-sm"'

    if field_type == "textarea":
        return [f"{pad}<textarea name={name} placeholder={placeholder}{required} {control_classes} />"]
    if field_type == "select":
        options = field.get("options") if isinstance(field.get("options"), list) else []
        lines = [f"{pad}<select name={name}{required} {control_classes}>"]
        lines.extend(f"{pad}  <option value={jsx_attr(str(o))}>{jsx_text(str(o))}</option>" for o in options)
        lines.append(f"{pad}</select>")
        return lines
    if field_type == "checkbox":
        return [f'{pad}<input type="checkbox" name={name}{required} />']
    return [f"{pad}<input type={jsx_attr(field_type)} name={name} placeholder={placeholder}{required} {control_classes} />"]


def _emit_form(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1, p2 = indent_str(indent + 1), indent_str(indent + 2)
    endpoint = jsx_attr(str(node.data.get("endpoint") or ""))
    fields = node.data.get("fields")
    lines = [f"{pad}<form action={endpoint} onSubmit={{(e) => e.preventDefault()}}{_class_attr(node)}>"]
    if isinstance(fields, list) and fields:
        for field in fields:
            if not isinstance(field, dict):
                continue
            lines.append(f'{p1}<div className="flex flex-col gap-1">')
            label = field.get("label")
            if label:
                lines.append(f'{p2}<label className="text-sm font-medium">{jsx_text(str(label))}</label>')
            lines.extend(_field_control(field, p2))
            lines.append(f"{p1}</div>")
    else:
        lines.append(f'{p1}<p className="text-sm text-gray-500">No fields</p>')
    submit = jsx_text(str(node.data.get("submitLabel") or "Submit"))
    lines.append(f'{p1}<button type="submit" className="rounded bg-slate-900 px-4 py-2 text-white">{submit}</button>')
    lines.append(f"{pad}</form>")
    return "\n".join(lines)


def _emit_list(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1, p2, p3 = (indent_str(indent + n) for n in (1, 2, 3))
    items = node.data.get("items")
    lines = [f"{pad}<ul{_class_attr(node, 'divide-y', 'rounded-md', 'border')}>"]
    if isinstance(items, list) and items:
        for item in items:
            if not isinstance(item, dict):
                continue
            lines.append(f'{p1}<li className="flex items-center gap-3 p-3">')
            if item.get("icon"):
                lines.append(f'{p2}<{icon_tag(item["icon"])} size={{18}} className="text-slate-500" />')
            lines.append(f'{p2}<div className="flex flex-col">')
            lines.append(f'{p3}<span className="font-medium">{jsx_text(str(item.get("title") or "Item"))}</span>')
            if item.get("description"):
                lines.append(f'{p3}<span className="text-sm text-gray-500">{jsx_text(str(item["description"]))}</span>')
            lines.append(f"{p2}</div>")
            lines.append(f"{p1}</li>")
    else:
        lines.append(f'{p1}<li className="p-3 text-sm text-gray-500">No items</li>')
    lines.append(f"{pad}</ul>")
    return "\n".join(lines)


def _emit_tabs(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1 = indent_str(indent + 1)
    items = node.data.get("items")
    if not isinstance(items, list):
        items = []
    lines = [f"{pad}<TabsBlock", f"{p1}items={{{_indent_literal(to_ts_literal(items), p1)}}}"]
    active = node.data.get("activeTab")
    if active:
        lines.append(f"{p1}defaultTab={jsx_attr(str(active))}")
    classes = class_names(node.style, node.kind, node.library)
    if classes:
        lines.append(f"{p1}className={jsx_attr(classes)}")
    lines.append(f"{pad}/>")
    return "\n".join(lines)


def _emit_accordion(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1, p2 = indent_str(indent + 1), indent_str(indent + 2)
    items = node.data.get("items")
    lines = [f"{pad}<div{_class_attr(node, 'divide-y')}>"]
    if isinstance(items, list) and items:
        for item in items:
            if not isinstance(item, dict):
                continue
            lines.append(f'{p1}<details className="py-2">')
            title = jsx_text(str(item.get("title") or "Item"))
            lines.append(f'{p2}<summary className="cursor-pointer font-medium">{title}</summary>')
            content = jsx_text(str(item.get("content") or ""))
            lines.append(f'{p2}<div className="pt-2 text-sm text-gray-600">{content}</div>')
            lines.append(f"{p1}</details>")
    else:
        lines.append(f'{p1}<p className="text-sm text-gray-500">No items</p>')
    lines.append(f"{pad}</div>")
    return "\n".join(lines)


def _emit_dropdown(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1, p2, p3 = (indent_str(indent + n) for n in (1, 2, 3))
    label = jsx_text(str(node.data.get("label") or "Options"))
    items = node.data.get("items")
    lines = [
        f"{pad}<details{_class_attr(node, 'relative', 'inline-block')}>",
        f'{p1}<summary className="flex cursor-pointer items-center gap-1 rounded border px-3 py-2 text-sm">',
        f"{p2}{label}",
        f"{p2}<ChevronDown size={{16}} />",
        f"{p1}</summary>",
        f'{p1}<ul className="absolute z-10 mt-1 min-w-[160px] rounded-md border bg-white py-1 shadow-md">',
    ]
    if isinstance(items, list) and items:
        for item in items:
            if not isinstance(item, dict):
                continue
            tone = "text-red-600" if item.get("danger") else "text-gray-700"
            lines.append(f'{p2}<li className="flex items-center gap-2 px-3 py-2 text-sm {tone} hover:bg-gray-50">')
            if item.get("icon"):
                lines.append(f"{p3}<{icon_tag(item['icon'])} size={{14}} />")
            lines.append(f"{p3}{jsx_text(str(item.get('label') or 'Item'))}")
            lines.append(f"{p2}</li>")
    else:
        lines.append(f'{p2}<li className="px-3 py-2 text-sm text-gray-500">No options</li>')
    lines.append(f"{p1}</ul>")
    lines.append(f"{pad}</details>")
    return "\n".join(lines)


def _emit_avatar_group(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1 = indent_str(indent + 1)
    images = node.data.get("images")
    if not isinstance(images, list):
        images = []
    limit = node.data.get("max")
    limit = limit if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0 else len(images)
    shown, hidden = images[:limit], max(0, len(images) - limit)
    lines = [f"{pad}<div{_class_attr(node, '-space-x-2')}>"]
    for src in shown:
        lines.append(
            f'{p1}<img src={jsx_attr(str(src))} alt="avatar" className="h-10 w-10 rounded-full border-2 border-white" />'
        )
    if hidden:
        lines.append(
            f'{p1}<span className="flex h-10 w-10 items-center justify-center rounded-full border-2 border-white '
            f'bg-gray-100 text-xs font-medium">+{hidden}</span>'
        )
    if not images:
        lines.append(f'{p1}<span className="text-sm text-gray-500">No avatars</span>')
    lines.append(f"{pad}</div>")
    return "\n".join(lines)


def _emit_interaction(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    p1 = indent_str(indent + 1)
    lines = [f"{pad}<div{_class_attr(node, 'gap-4', 'text-sm', 'text-gray-600')}>"]
    for icon, key in (("ThumbsUp", "likes"), ("ThumbsDown", "dislikes"), ("Eye", "views")):
        count = node.data.get(key, 0)
        lines.append(
            f'{p1}<button type="button" className="flex items-center gap-1"><{icon} size={{16}} /> {count}</button>'
        )
    lines.append(f"{pad}</div>")
    return "\n".join(lines)


def _emit_unsupported(node: Node, indent: int) -> str:
    pad = indent_str(indent)
    label = jsx_text(f"Unsupported component: {node.kind or 'unknown'}")
    marker = f"<div data-unsupported={jsx_attr(node.kind or 'unknown')}{_class_attr(node)}>"
    inner = "\n".join(filter(None, [f"{indent_str(indent + 1)}{label}", _children(node, indent + 1)]))
    return _block(pad, marker, "</div>", inner)


_EMITTERS: dict[str, Callable[[Node, int], str]] = {
    NodeKind.CONTAINER: _emit_container,
    NodeKind.CARD: _emit_card,
    NodeKind.TEXT: _emit_text,
    NodeKind.BUTTON: _emit_button,
    NodeKind.INPUT: _emit_input,
    NodeKind.TEXTAREA: _emit_textarea,
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
    emitter = _EMITTERS.get(node.kind, _emit_unsupported)
    if not node.href:
        return emitter(node, indent)
    pad = indent_str(indent)
    return f"{pad}<NextLink href={jsx_attr(node.href)}>\n{emitter(node, indent + 1)}\n{pad}</NextLink>"


# ---------------------------------------------------------------------------
# Document assembly
# ---------------------------------------------------------------------------


def _preamble(deps: Dependencies) -> str:
    hooks = sorted({hook for name in deps.helpers for hook in _HELPERS[name][1]})
    sections: list[str] = []
    if hooks:
        sections.append('"use client";')

    imports = [f"import React, {{ {', '.join(hooks)} }} from \"react\";" if hooks else 'import React from "react";']
    imports.extend(deps.sorted_imports())
    if deps.icons:
        imports.append(f'import {{ {", ".join(_icon_specifiers(deps.sorted_icons()))} }} from "lucide-react";')
    sections.append("\n".join(imports))

    for name in deps.sorted_helpers():
        sections.append(load_template(_HELPERS[name][0]).rstrip("\n"))

    return "\n\n".join(sections) + "\n"


class ReactTarget(Target):
    name = "react"
    filename = "page.tsx"
    aliases = ("web", "nextjs", "tsx")
    body_indent = 2

    def collect_dependencies(self, tree: Node) -> Dependencies:
        return collect_dependencies(tree)

    def emit_node(self, node: Node, indent: int = 0) -> str:
        return emit_node(node, indent)

    def serialize_literal(self, value: Any) -> str:
        return to_ts_literal(value)

    def wrap_document(
        self,
        tree: Node,
        body: str,
        dependencies: Dependencies,
        options: GenerateOptions | None = None,
    ) -> str:
        component_name = options.component_name if options else "Page"
        return chevron.render(
            load_template("react/page.tsx.mustache"),
            {"preamble": _preamble(dependencies), "component_name": component_name, "body": body},
        )
