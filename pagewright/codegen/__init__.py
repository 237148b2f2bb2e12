"""
Pagewright Codegen — node tree → framework source.

Components:
    styles      style record → utility class tokens
    literals    data-bag values → TypeScript / Dart literals
    targets     React (TSX) and Flutter (Dart) emitters + registry
    generator   generate(target, tree, options) entry point
"""

from pagewright.codegen.generator import GeneratedSource, GenerateOptions, generate
from pagewright.codegen.styles import class_names, resolve_style
from pagewright.codegen.targets import UnknownTarget, available_targets, get_target

__all__ = [
    "GenerateOptions",
    "GeneratedSource",
    "UnknownTarget",
    "available_targets",
    "class_names",
    "generate",
    "get_target",
    "resolve_style",
]
