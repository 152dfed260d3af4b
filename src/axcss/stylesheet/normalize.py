"""Final CSS clean-up: comments, trailing whitespace and blank lines."""

from __future__ import annotations

import re

from axcss.parser.blocks import strip_comments

_TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_AFTER_OPEN_RE = re.compile(r"\{[ \t]*\n(?:[ \t]*\n)+")
_BEFORE_CLOSE_RE = re.compile(r"\n(?:[ \t]*\n)+([ \t]*)\}")


def normalize_css(css: str) -> str:
    """Normalize generated or preserved CSS text.

    Comments are removed, lines are right-trimmed, runs of blank lines
    collapse to one, blank lines just inside braces disappear, and the result
    ends with exactly one newline (or is empty).
    """
    if not css:
        return ""
    out = css.replace("\r\n", "\n").replace("\r", "\n")
    out = strip_comments(out)
    out = _TRAILING_WS_RE.sub("", out)
    out = _BLANK_RUN_RE.sub("\n\n", out)
    out = _AFTER_OPEN_RE.sub("{\n", out)
    out = _BEFORE_CLOSE_RE.sub(r"\n\1}", out)
    out = out.strip()
    return out + "\n" if out else ""
