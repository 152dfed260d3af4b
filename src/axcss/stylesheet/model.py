"""Syntax tree model for expanded component bodies."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SyntaxNode:
    """A rule block: its selector, its own declarations and nested blocks.

    The root node of a body has no selector. Children keep document order,
    which is also the order their CSS is emitted in.
    """

    selector: str | None = None
    declarations: list[str] = field(default_factory=list)  # "property: value;"
    children: list[SyntaxNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when neither this block nor any descendant has declarations."""
        return not self.declarations and all(c.is_empty for c in self.children)

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
