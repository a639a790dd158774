"""Code Generator - validated UiPlan to React (JSX) source."""

import json
import math
from collections.abc import Mapping
from typing import Any

from ..plan.models import CONTAINER_KINDS, WIDGET_TAGS, NodeKind, UiNode, UiPlan


_missing = set(NodeKind) - WIDGET_TAGS.keys()
if _missing:
    raise RuntimeError(f"No tag mapping for node kinds: {sorted(k.value for k in _missing)}")

COMPONENT_MODULE = "@/components/ui"
FUNCTION_NAME = "GeneratedUI"
INDENT_STEP = 2
ROOT_INDENT = 4


def _header() -> str:
    names = [WIDGET_TAGS[kind] for kind in NodeKind]
    lines = ['import React from "react";', "import {"]
    lines.extend(f"  {name}," for name in names[:-1])
    lines.append(f"  {names[-1]}")
    lines.append(f'}} from "{COMPONENT_MODULE}";')
    return "\n".join(lines)


HEADER_IMPORTS = _header()


def _number_literal(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def render_prop_value(value: Any) -> str | None:
    """
    Encode a prop value as a JavaScript literal.

    Returns None for values with no literal form; inside arrays and
    objects those become ``null``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return _number_literal(value)
    if isinstance(value, (list, tuple)):
        inner = ", ".join(render_prop_value(item) or "null" for item in value)
        return f"[{inner}]"
    if isinstance(value, Mapping):
        entries = ", ".join(
            f"{json.dumps(str(key), ensure_ascii=False)}: {render_prop_value(item) or 'null'}"
            for key, item in value.items()
        )
        return f"{{ {entries} }}"
    return None


def render_props(props: Mapping[str, Any]) -> str:
    """Attribute list for a tag, with a leading space when non-empty."""
    parts = []
    for key, value in props.items():
        if value is None or key == "id":
            continue
        rendered = render_prop_value(value)
        if rendered is not None:
            parts.append(f"{key}={{{rendered}}}")

    if not parts:
        return ""
    return " " + " ".join(parts)


class ReactCodeGenerator:
    """Lowers a validated plan into JSX source text."""

    def generate(self, plan: UiPlan) -> str:
        lines = [HEADER_IMPORTS, "", f"export function {FUNCTION_NAME}() {{", "  return ("]
        self._render_node(plan.root, lines, ROOT_INDENT)
        lines.extend(["  );", "}", ""])
        return "\n".join(lines)

    def _render_node(self, node: UiNode, lines: list[str], indent: int) -> None:
        spaces = " " * indent
        tag = WIDGET_TAGS.get(node.kind)

        if tag is None:
            kind = node.kind.value if isinstance(node.kind, NodeKind) else node.kind
            lines.append(f"{spaces}{{/* Unsupported node type: {kind} */}}")
            return

        attrs = render_props(node.props or {})
        if node.kind not in CONTAINER_KINDS:
            lines.append(f"{spaces}<{tag}{attrs} />")
            return

        lines.append(f"{spaces}<{tag}{attrs}>")
        for child in node.children or ():
            self._render_node(child, lines, indent + INDENT_STEP)
        lines.append(f"{spaces}</{tag}>")


def generate_code(plan: UiPlan) -> str:
    """
    Convenience function to generate React source for a plan.

    Args:
        plan: Validated plan

    Returns:
        Source text of a ``GeneratedUI`` component
    """
    return ReactCodeGenerator().generate(plan)
