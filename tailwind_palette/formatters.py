"""Rendering of the Tailwind configuration and the CSS stylesheet."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# Keys JavaScript accepts without quotes: canonical integers and identifiers
_INTEGER_KEY = re.compile(r"^(0|[1-9][0-9]*)$")
_IDENTIFIER_KEY = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

INDENT = "  "


def _js_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def _js_key(key: str) -> str:
    if _INTEGER_KEY.match(key) or _IDENTIFIER_KEY.match(key):
        return key
    return _js_string(key)


def to_js_literal(value: Any, level: int = 0) -> str:
    """Serialize nested mappings of strings as a JavaScript object literal.

    Object keys are left bare when JavaScript allows it, so shade labels
    come out as ``50:`` rather than ``'50':``. Strings use single quotes.

    Args:
        value: A string or a mapping of strings to nested values.
        level: Current nesting depth, used for indentation.

    Raises:
        TypeError: If the value cannot be expressed as a literal.
    """
    pad = INDENT * (level + 1)
    closing = INDENT * level

    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = [f"{pad}{_js_key(str(k))}: {to_js_literal(v, level + 1)}" for k, v in value.items()]
        return "{\n" + ",\n".join(items) + f"\n{closing}}}"
    if isinstance(value, str):
        return _js_string(value)

    msg = f"Cannot serialize {type(value).__name__} as a JavaScript literal"
    raise TypeError(msg)


def render_config(theme: Mapping[str, Mapping[str, str]], export: str = "module.exports") -> str:
    """Render the Tailwind configuration module extending the theme colors."""
    config = {"theme": {"extend": {"colors": theme}}}
    return f"{export} = {to_js_literal(config)}\n"


def render_stylesheet(styles: Mapping[str, Mapping[str, str]]) -> str:
    """Render every color's custom properties inside a ``:root`` block.

    Declarations of one color are on consecutive lines; colors are separated
    by a blank line.
    """
    blocks = [f"\n{INDENT}".join(declarations.values()) for declarations in styles.values()]
    blocks = [block for block in blocks if block]
    if not blocks:
        return ":root {\n}\n"
    body = f"\n\n{INDENT}".join(blocks)
    return f":root {{\n{INDENT}{body}\n}}\n"
