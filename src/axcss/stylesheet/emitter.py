"""CSS emitter: serializes a syntax tree under an instance class selector."""

from __future__ import annotations

from axcss.stylesheet.model import SyntaxNode

__all__ = ["combine_selectors", "emit"]


def combine_selectors(parents: list[str], selector: str) -> list[str]:
    """Combine every parent selector with every comma segment of *selector*.

    - ``&`` is replaced by the parent (``&:hover``, ``.dark &``).
    - ``:pseudo`` and ``[attr]`` segments are appended directly.
    - anything else (``> .x``, ``.x``, ``#x``, tags) becomes a descendant.
    """
    parts = [p.strip() for p in selector.split(",") if p.strip()]
    result: list[str] = []
    for parent in parents:
        for part in parts:
            if "&" in part:
                result.append(part.replace("&", parent))
            elif part.startswith((":", "[")):
                result.append(f"{parent}{part}")
            else:
                result.append(f"{parent} {part}")
    return result


def _format_block(selectors: list[str], declarations: list[str]) -> str:
    lines = [f"{', '.join(selectors)} {{"]
    lines.extend(f"  {d}" for d in declarations)
    lines.append("}")
    return "\n".join(lines)


def emit(tree: SyntaxNode, class_name: str) -> str:
    """Render *tree* as CSS scoped under ``.class_name``.

    Blocks come out in document order, separated by one blank line; blocks
    without declarations produce no output of their own.
    """
    root = [f".{class_name}"]
    blocks: list[str] = []
    if tree.declarations:
        blocks.append(_format_block(root, tree.declarations))

    def _emit_node(node: SyntaxNode, parents: list[str]) -> None:
        if node.is_empty:
            return
        selector = (node.selector or "").strip()
        selectors = combine_selectors(parents, selector) if selector else parents
        if node.declarations:
            blocks.append(_format_block(selectors, node.declarations))
        for child in node.children:
            _emit_node(child, selectors)

    for child in tree.children:
        _emit_node(child, root)
    return "\n\n".join(blocks)
