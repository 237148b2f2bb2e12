"""
Pagewright Codegen — Generator

Pure function: (target name, tree, options) → GeneratedSource.

    1. resolve the target by name or alias
    2. collect dependencies in one walk over the tree
    3. emit the body from the root at the target's body indent
    4. wrap the body in the target's document skeleton

Generation never mutates the tree and is deterministic: the same tree and
options always produce byte-identical output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from pagewright.codegen.targets import get_target
from pagewright.kernel.types import Node

_IDENTIFIER = re.compile(r"[A-Z][A-Za-z0-9_]*")


@dataclass(frozen=True)
class GenerateOptions:
    component_name: str = "Page"
    widget_name: str = "MyPage"
    app_title: str = "Generated App"

    def __post_init__(self) -> None:
        for field_name in ("component_name", "widget_name"):
            value = getattr(self, field_name)
            if not _IDENTIFIER.fullmatch(value):
                raise ValueError(f"{field_name} must be a capitalized identifier, got {value!r}")


@dataclass(frozen=True)
class GeneratedSource:
    target: str
    filename: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {"target": self.target, "filename": self.filename, "source": self.source}


def generate(target_name: str, tree: Node, options: GenerateOptions | None = None) -> GeneratedSource:
    """Render tree as source for the named target. Raises UnknownTarget."""
    target = get_target(target_name)
    options = options or GenerateOptions()
    dependencies = target.collect_dependencies(tree)
    body = target.emit_node(tree, target.body_indent)
    source = target.wrap_document(tree, body, dependencies, options)
    return GeneratedSource(target=target.name, filename=target.filename, source=source)
