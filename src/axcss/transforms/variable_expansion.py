"""Variable expansion: replaces $name placeholders in a component body."""

from __future__ import annotations

import re

_LEFTOVER_RE = re.compile(r"\$[A-Za-z0-9_-]+")


def _variable_re(name: str) -> re.Pattern[str]:
    # Bounded so $color never matches the head of $colorvar or $color-dark.
    return re.compile(re.escape("$" + name) + r"(?![A-Za-z0-9_-])")


def substitute(body: str, environment: dict[str, str]) -> str:
    """Replace ``$name`` with its resolved value, then drop any unresolved token."""
    for name, value in environment.items():
        body = _variable_re(name).sub(lambda _m, v=value: v, body)
    return _LEFTOVER_RE.sub("", body)
