"""Hand-written tree builder for expanded component bodies.

Syntax example:
    color: red;
    .root { padding: 4px; &:hover { color: blue; } }
    > .icon, .label { margin: 0; }
"""

from __future__ import annotations

from axcss.errors import ParseError
from axcss.parser.blocks import extract_block
from axcss.stylesheet.model import SyntaxNode

__all__ = ["build_tree", "declaration_problem"]


def _declarations(text: str) -> list[str]:
    return [f"{d.strip()};" for d in text.split(";") if d.strip()]


def declaration_problem(declaration: str) -> str | None:
    """Describe what is wrong with a ``property: value;`` string, or None."""
    rule = declaration.rstrip(";").strip()
    if ":" not in rule:
        return f"Malformed CSS rule '{rule}'"
    prop, value = rule.split(":", 1)
    if not value.strip():
        return f"Empty value for property '{prop.strip()}'"
    return None


def _build(body: str, node: SyntaxNode, base: int) -> SyntaxNode:
    i = 0
    length = len(body)
    while i < length:
        while i < length and body[i].isspace():
            i += 1
        if i >= length:
            break
        next_brace = body.find("{", i)
        next_semicolon = body.find(";", i)

        if next_semicolon != -1 and (next_brace == -1 or next_semicolon < next_brace):
            node.declarations.extend(_declarations(body[i:next_semicolon]))
            i = next_semicolon + 1
            continue

        if next_brace == -1:
            node.declarations.extend(_declarations(body[i:]))
            break

        block = extract_block(body, next_brace)
        if block is None:
            raise ParseError(
                f"Unclosed block for selector '{body[i:next_brace].strip()}'",
                offset=base + next_brace,
            )
        child = SyntaxNode(selector=body[i:next_brace].strip())
        node.children.append(_build(block.inner, child, base + block.inner_start))
        i = block.end
    return node


def build_tree(body: str) -> SyntaxNode:
    """Parse a flat body into a nested :class:`SyntaxNode` tree.

    Raises:
        ParseError: a nested block is never closed.
    """
    return _build(body, SyntaxNode(), 0)
