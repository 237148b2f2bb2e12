"""
Pagewright Codegen — Style Resolver

Pure function: (style, kind, library, variant?) → ordered list of utility-class tokens
No side effects. Deterministic: same input → same token list, same order.

Token order:
  1. base tokens       fixed per kind
  2. library tokens    fixed per (library, kind, variant)
  3. field tokens      one or more per populated style field, in _FIELD_ORDER

Enumerated fields map to keyword tokens (flex-col, justify-between).
Free-form values map to bracketed literals (bg-[#1e293b], w-[250px]).
An enumerated field holding a value outside its domain becomes an
arbitrary-property literal ([text-align:start]) so the value is never lost.

Inside brackets, whitespace is written as "_" (the utility-class encoding
for a space), so "8px 16px" becomes p-[8px_16px].
"""

from __future__ import annotations

import re
from collections.abc import Callable

from pagewright.kernel.types import Library, NodeKind, Style

# ---------------------------------------------------------------------------
# Base tokens (per kind)
# ---------------------------------------------------------------------------

BASE_TOKENS: dict[str, tuple[str, ...]] = {
    NodeKind.CONTAINER: ("flex",),
    NodeKind.CARD: ("flex",),
    NodeKind.BUTTON: ("inline-flex", "items-center", "justify-center"),
    NodeKind.IMAGE: ("object-cover",),
    NodeKind.ICON: ("shrink-0",),
    NodeKind.DIVIDER: ("shrink-0",),
    NodeKind.CHECKBOX: ("inline-flex", "items-center"),
    NodeKind.SWITCH: ("inline-flex", "items-center"),
    NodeKind.AVATAR_GROUP: ("flex", "items-center"),
    NodeKind.INTERACTION: ("flex", "items-center"),
}

# ---------------------------------------------------------------------------
# Library tokens (per library, kind, variant)
# ---------------------------------------------------------------------------

_SHADCN_BUTTON_BASE = (
    "whitespace-nowrap rounded-md text-sm font-medium transition-colors "
    "focus-visible:outline-none h-10 px-4 py-2"
)

LIBRARY_TOKENS: dict[tuple[str, str, str | None], tuple[str, ...]] = {
    (Library.SHADCN, NodeKind.BUTTON, "default"): tuple(
        f"{_SHADCN_BUTTON_BASE} bg-slate-900 text-white hover:bg-slate-900/90".split()
    ),
    (Library.SHADCN, NodeKind.BUTTON, "secondary"): tuple(
        f"{_SHADCN_BUTTON_BASE} bg-slate-100 text-slate-900 hover:bg-slate-100/80".split()
    ),
    (Library.SHADCN, NodeKind.BUTTON, "ghost"): tuple(
        f"{_SHADCN_BUTTON_BASE} hover:bg-slate-100 hover:text-slate-900".split()
    ),
    (Library.SHADCN, NodeKind.BUTTON, "outline"): tuple(
        f"{_SHADCN_BUTTON_BASE} border border-slate-200 bg-white hover:bg-slate-100 hover:text-slate-900".split()
    ),
    (Library.SHADCN, NodeKind.BUTTON, "destructive"): tuple(
        f"{_SHADCN_BUTTON_BASE} bg-red-500 text-white hover:bg-red-500/90".split()
    ),
    (Library.SHADCN, NodeKind.CARD, None): ("rounded-lg", "border", "text-slate-950", "shadow-sm"),
    (Library.SHADCN, NodeKind.INPUT, None): tuple(
        "h-10 w-full rounded-md border border-slate-200 bg-white px-3 py-2 text-sm".split()
    ),
    (Library.SHADCN, NodeKind.TEXTAREA, None): tuple(
        "min-h-[80px] w-full rounded-md border border-slate-200 bg-white px-3 py-2 text-sm".split()
    ),
    (Library.SHADCN, NodeKind.SELECT, None): tuple(
        "h-10 w-full items-center justify-between rounded-md border border-slate-200 bg-white px-3 py-2 text-sm".split()
    ),
    (Library.SHADCN, NodeKind.DIVIDER, None): ("bg-slate-200",),
    (Library.RADIX, NodeKind.BUTTON, None): tuple("rounded px-4 py-2 font-medium focus:outline-none".split()),
    (Library.RADIX, NodeKind.INPUT, None): tuple(
        "block w-full rounded-md border border-gray-300 shadow-sm p-2 sm:text-sm".split()
    ),
    (Library.PLAIN, NodeKind.BUTTON, None): tuple("rounded px-4 py-2 font-medium focus:outline-none".split()),
    (Library.PLAIN, NodeKind.INPUT, None): tuple(
        "block w-full rounded-md border border-gray-300 shadow-sm p-2 sm:text-sm".split()
    ),
}

# Kinds whose library bundle depends on a variant; missing variant means "default"
_VARIANT_DEFAULTS: dict[tuple[str, str], str] = {
    (Library.SHADCN, NodeKind.BUTTON): "default",
}


def library_tokens(library: str, kind: str, variant: str | None = None) -> tuple[str, ...]:
    if (library, kind) in _VARIANT_DEFAULTS:
        key = (library, kind, variant or _VARIANT_DEFAULTS[(library, kind)])
        return LIBRARY_TOKENS.get(key, LIBRARY_TOKENS[(library, kind, _VARIANT_DEFAULTS[(library, kind)])])
    return LIBRARY_TOKENS.get((library, kind, None), ())


# ---------------------------------------------------------------------------
# Field tokens
# ---------------------------------------------------------------------------

_WHITESPACE = re.compile(r"\s+")


def bracket(prefix: str, value: str) -> str:
    """Bracketed literal: bracket("w", "250px") → "w-[250px]"."""
    return f"{prefix}-[{_WHITESPACE.sub('_', value.strip())}]"


def arbitrary(css_property: str, value: str) -> str:
    """Arbitrary-property literal: arbitrary("text-align", "start") → "[text-align:start]"."""
    return f"[{css_property}:{_WHITESPACE.sub('_', value.strip())}]"


def _css_name(field_name: str) -> str:
    return field_name.replace("_", "-")


def _keyword(mapping: dict[str, str]) -> Callable[[str, str, str], list[str]]:
    def resolve(field_name: str, value: str, kind: str) -> list[str]:
        token = mapping.get(value)
        if token is None:
            return [arbitrary(_css_name(field_name), value)]
        return [token]

    return resolve


def _literal(prefix: str) -> Callable[[str, str, str], list[str]]:
    def resolve(field_name: str, value: str, kind: str) -> list[str]:
        return [bracket(prefix, value)]

    return resolve


def _sized(prefix: str) -> Callable[[str, str, str], list[str]]:
    def resolve(field_name: str, value: str, kind: str) -> list[str]:
        if value == "100%":
            return [f"{prefix}-full"]
        if value == "auto":
            return [f"{prefix}-auto"]
        return [bracket(prefix, value)]

    return resolve


def _border_width(field_name: str, value: str, kind: str) -> list[str]:
    if value in ("0", "0px"):
        return ["border-0"]
    return [bracket("border", value)]


def _flex_grow(field_name: str, value: float, kind: str) -> list[str]:
    if value == 1:
        return ["grow"]
    if value == 0:
        return ["grow-0"]
    return [bracket("grow", _number(value))]


def _box_shadow(field_name: str, value: bool, kind: str) -> list[str]:
    return ["shadow-md"] if value else []


def _cursor(field_name: str, value: str, kind: str) -> list[str]:
    token = _CURSORS.get(value)
    tokens = [token] if token else [arbitrary("cursor", value)]
    if value == "pointer" and kind == NodeKind.CONTAINER:
        tokens.extend(["hover:bg-slate-100", "hover:text-slate-900", "transition-colors"])
    return tokens


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


_POSITIONS = {v: v for v in ("relative", "absolute", "fixed", "static", "sticky")}

_BORDER_STYLES = {
    "solid": "border-solid",
    "dashed": "border-dashed",
    "dotted": "border-dotted",
    "double": "border-double",
    "none": "border-none",
}

_FLEX_DIRECTIONS = {
    "row": "flex-row",
    "column": "flex-col",
    "row-reverse": "flex-row-reverse",
    "column-reverse": "flex-col-reverse",
}

_JUSTIFY = {
    "flex-start": "justify-start",
    "center": "justify-center",
    "flex-end": "justify-end",
    "space-between": "justify-between",
    "space-around": "justify-around",
    "space-evenly": "justify-evenly",
}

_ALIGN = {
    "flex-start": "items-start",
    "center": "items-center",
    "flex-end": "items-end",
    "stretch": "items-stretch",
    "baseline": "items-baseline",
}

_TEXT_ALIGN = {v: f"text-{v}" for v in ("left", "center", "right", "justify")}

_OVERFLOW = {v: f"overflow-{v}" for v in ("visible", "hidden", "scroll", "auto")}

_FONT_WEIGHTS = {
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "normal": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "bold": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
}

_CURSORS = {
    v: f"cursor-{v}"
    for v in ("auto", "default", "pointer", "wait", "text", "move", "help", "not-allowed", "grab", "grabbing")
}


def _font_weight(field_name: str, value: str, kind: str) -> list[str]:
    return [_FONT_WEIGHTS.get(value) or bracket("font", value)]


# Field name → resolver, in emission order
_FIELD_ORDER: dict[str, Callable[..., list[str]]] = {
    # Positioning
    "position": _keyword(_POSITIONS),
    "top": _literal("top"),
    "left": _literal("left"),
    "right": _literal("right"),
    "bottom": _literal("bottom"),
    "z_index": _literal("z"),
    # Colors
    "background_color": _literal("bg"),
    "color": _literal("text"),
    # Spacing
    "padding": _literal("p"),
    "padding_top": _literal("pt"),
    "padding_right": _literal("pr"),
    "padding_bottom": _literal("pb"),
    "padding_left": _literal("pl"),
    "margin": _literal("m"),
    "margin_top": _literal("mt"),
    "margin_right": _literal("mr"),
    "margin_bottom": _literal("mb"),
    "margin_left": _literal("ml"),
    # Borders
    "border_radius": _literal("rounded"),
    "border_width": _border_width,
    "border_color": _literal("border"),
    "border_style": _keyword(_BORDER_STYLES),
    "border_top": _literal("border-t"),
    "border_right": _literal("border-r"),
    "border_bottom": _literal("border-b"),
    "border_left": _literal("border-l"),
    # Flex
    "flex_direction": _keyword(_FLEX_DIRECTIONS),
    "flex_grow": _flex_grow,
    "gap": _literal("gap"),
    "justify_content": _keyword(_JUSTIFY),
    "align_items": _keyword(_ALIGN),
    # Sizing
    "width": _sized("w"),
    "height": _sized("h"),
    "min_height": _literal("min-h"),
    "min_width": _literal("min-w"),
    "max_width": _literal("max-w"),
    "overflow": _keyword(_OVERFLOW),
    # Effects and typography
    "box_shadow": _box_shadow,
    "font_size": _literal("text"),
    "font_weight": _font_weight,
    "text_align": _keyword(_TEXT_ALIGN),
    "cursor": _cursor,
}

_FLEX_FIELDS = ("flex_direction", "gap", "justify_content", "align_items")


def field_tokens(style: Style, kind: str) -> list[str]:
    tokens: list[str] = []
    if any(getattr(style, f) is not None for f in _FLEX_FIELDS):
        tokens.append("flex")
    for name, resolve in _FIELD_ORDER.items():
        value = getattr(style, name)
        if value is None:
            continue
        tokens.extend(resolve(name, value, kind))
    return tokens


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_style(style: Style, kind: str, library: str, variant: str | None = None) -> list[str]:
    """
    Resolve a style descriptor to utility-class tokens.
    Repeated tokens keep their first position.
    """
    tokens = [*BASE_TOKENS.get(kind, ()), *library_tokens(library, kind, variant), *field_tokens(style, kind)]
    # inline-flex already establishes a flex context
    if "inline-flex" in tokens:
        tokens = [t for t in tokens if t != "flex"]
    return list(dict.fromkeys(tokens))


def class_names(style: Style, kind: str, library: str, variant: str | None = None) -> str:
    return " ".join(resolve_style(style, kind, library, variant))
