"""Serialize a Stylesheet into CSS text."""

from __future__ import annotations

from system_css.stylesheet.model import Declaration, MediaBlock, Rule, Stylesheet

INDENT = "  "


def _render_declaration(decl: Declaration, depth: int) -> str:
    important = " !important" if decl.important else ""
    return f"{INDENT * depth}{decl.property}: {decl.value}{important};"


def _render_rule(rule: Rule, depth: int = 0) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}{rule.selector} {{"]
    lines.extend(_render_declaration(d, depth + 1) for d in rule.declarations)
    lines.append(f"{pad}}}")
    return lines


def _render_media(block: MediaBlock) -> list[str]:
    lines = [f"@media {block.params} {{"]
    for rule in block.rules:
        lines.extend(_render_rule(rule, depth=1))
    lines.append("}")
    return lines


def render(stylesheet: Stylesheet) -> str:
    """Render *stylesheet* as CSS text ending with a newline.

    An empty stylesheet renders as the empty string.
    """
    lines: list[str] = []
    for node in stylesheet.nodes:
        if isinstance(node, MediaBlock):
            lines.extend(_render_media(node))
        else:
            lines.extend(_render_rule(node))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
