"""Built-in code generation targets, registered on import."""

from pagewright.codegen.targets.base import (
    Dependencies,
    Target,
    UnknownTarget,
    available_targets,
    get_target,
    register,
)
from pagewright.codegen.targets.flutter import FlutterTarget
from pagewright.codegen.targets.react import ReactTarget

register(ReactTarget())
register(FlutterTarget())

__all__ = [
    "Dependencies",
    "FlutterTarget",
    "ReactTarget",
    "Target",
    "UnknownTarget",
    "available_targets",
    "get_target",
    "register",
]
