"""
Pagewright Codegen — Target Interface

A Target turns a node tree into source text for one UI framework.

    collect_dependencies(tree)   one walk: import lines, icon names, helper blocks
    emit_node(node, indent)      recursive: node → source text at indent
    serialize_literal(value)     data-bag value → target literal syntax
    wrap_document(tree, body, dependencies, options)
                                 final file: header, imports, skeleton, body

Targets register themselves by name (and aliases) in a module-level registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pagewright.kernel.types import Node

if TYPE_CHECKING:
    from pagewright.codegen.generator import GenerateOptions

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

# Cache loaded templates in memory (they don't change at runtime)
_cache: dict[str, str] = {}


def load_template(name: str) -> str:
    """Load and cache a template file, e.g. load_template("flutter/app_theme.dart")."""
    if name not in _cache:
        _cache[name] = (TEMPLATES_DIR / name).read_text(encoding="utf-8")
    return _cache[name]


class UnknownTarget(Exception):
    """No target is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown target: {name!r} (available: {', '.join(sorted(_REGISTRY))})")
        self.name = name


@dataclass
class Dependencies:
    """
    Everything a generated document needs besides its body.
    Sets give deduplication; output order is always sorted.
    """

    imports: set[str] = field(default_factory=set)
    icons: set[str] = field(default_factory=set)
    helpers: set[str] = field(default_factory=set)

    def merge(self, other: Dependencies) -> None:
        self.imports |= other.imports
        self.icons |= other.icons
        self.helpers |= other.helpers

    def sorted_imports(self) -> list[str]:
        return sorted(self.imports)

    def sorted_icons(self) -> list[str]:
        return sorted(self.icons)

    def sorted_helpers(self) -> list[str]:
        return sorted(self.helpers)


class Target:
    name: str = ""
    filename: str = ""
    aliases: tuple[str, ...] = ()
    # Indent level of the root node inside the document skeleton
    body_indent: int = 0

    def collect_dependencies(self, tree: Node) -> Dependencies:
        raise NotImplementedError

    def emit_node(self, node: Node, indent: int = 0) -> str:
        raise NotImplementedError

    def serialize_literal(self, value: Any) -> str:
        raise NotImplementedError

    def wrap_document(
        self,
        tree: Node,
        body: str,
        dependencies: Dependencies,
        options: GenerateOptions | None = None,
    ) -> str:
        raise NotImplementedError

    def describe(self) -> dict[str, Any]:
        return {"name": self.name, "filename": self.filename, "aliases": list(self.aliases)}


def indent_str(level: int) -> str:
    return "  " * level


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[str, Target] = {}
_ALIASES: dict[str, str] = {}


def register(target: Target) -> Target:
    _REGISTRY[target.name] = target
    for alias in target.aliases:
        _ALIASES[alias] = target.name
    return target


def get_target(name: str) -> Target:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    target = _REGISTRY.get(key)
    if target is None:
        raise UnknownTarget(name)
    return target


def available_targets() -> list[Target]:
    return [_REGISTRY[name] for name in sorted(_REGISTRY)]
