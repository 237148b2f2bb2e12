"""
Pagewright Codegen — Literal Serializers

Convert data-bag values (str, int, float, bool, None, list, dict) into
source literals for each target language.

    TypeScript  JSON syntax, pretty-printed; null for None
    Dart        double-quoted strings with \\ " $ and control characters
                escaped; null for None; {"k": v} maps and [a, b] lists

Strings embedded in JSX need their own quoting (attribute vs. text child);
see jsx_attr and jsx_text.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

# ---------------------------------------------------------------------------
# TypeScript / JSX
# ---------------------------------------------------------------------------


def to_ts_literal(value: Any, indent: int | None = 2) -> str:
    return json.dumps(_json_safe(value), indent=indent, ensure_ascii=False)


def _json_safe(value: Any) -> Any:
    """Replace values JSON cannot express (NaN, Infinity, unknown objects) with null or text."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


_JSX_TEXT_SPECIAL = set("{}<>")


def jsx_attr(value: str) -> str:
    """
    A JSX attribute value. Plain strings use "..." form; strings with quotes,
    backslashes or line breaks use the {"..."} expression form.
    """
    if any(ch in value for ch in '"\\\n\r'):
        return "{" + json.dumps(value, ensure_ascii=False) + "}"
    return f'"{value}"'


def jsx_text(value: str) -> str:
    """A JSX text child. Text with braces, angle brackets or line breaks becomes an expression."""
    if any(ch in _JSX_TEXT_SPECIAL for ch in value) or "\n" in value:
        return "{" + json.dumps(value, ensure_ascii=False) + "}"
    return value


# ---------------------------------------------------------------------------
# Dart
# ---------------------------------------------------------------------------

_DART_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def dart_string(value: str) -> str:
    return '"' + "".join(_DART_ESCAPES.get(ch, ch) for ch in value) + '"'


def to_dart_literal(value: Any) -> str:
    # bool before int: True is an int in Python
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "double.nan"
        if math.isinf(value):
            return "double.infinity" if value > 0 else "double.negativeInfinity"
        return repr(value)
    if isinstance(value, str):
        return dart_string(value)
    if isinstance(value, Mapping):
        entries = ", ".join(f"{dart_string(str(k))}: {to_dart_literal(v)}" for k, v in value.items())
        return "{" + entries + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_dart_literal(v) for v in value) + "]"
    return dart_string(str(value))
