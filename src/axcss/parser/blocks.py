"""Balanced block extraction and offset helpers shared by every scanner."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Block", "extract_block", "line_col", "mask_comments", "strip_comments"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


@dataclass(frozen=True)
class Block:
    """A balanced ``{...}`` (or ``(...)``) span.

    ``start`` is the index of the opening delimiter and ``end`` the index just
    past the matching closing delimiter.
    """

    inner: str
    start: int
    end: int

    @property
    def inner_start(self) -> int:
        return self.start + 1


def extract_block(text: str, start: int, open: str = "{", close: str = "}") -> Block | None:
    """Return the balanced block opening at *start*.

    Nested delimiters are tracked with a depth counter, so inner blocks never
    end the capture early. Returns None when ``text[start]`` is not *open* or
    when the block is never closed.
    """
    if start < 0 or start >= len(text) or text[start] != open:
        return None
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == open:
            depth += 1
        elif ch == close:
            depth -= 1
            if depth == 0:
                return Block(inner=text[start + 1 : i], start=start, end=i + 1)
    return None


def line_col(text: str, index: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    index = max(0, min(index, len(text)))
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def mask_comments(text: str) -> str:
    """Blank out ``/* ... */`` comments while keeping every offset intact."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), text)


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("", text)
