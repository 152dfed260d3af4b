"""Conditional block evaluator for component bodies.

Grammar:
    WhenBlock = 'when' '$' Name Operator Literal '{' Body '}'
    Operator  = '==' | '!='
    Literal   = bare word or quoted string (quotes are stripped)

Comparison is plain string equality against the resolved environment value.
"""

from __future__ import annotations

import re

from axcss.errors import UnknownVariableError
from axcss.parser.blocks import extract_block
from axcss.parser.definitions import unquote

__all__ = ["WHEN_RE", "evaluate_condition", "evaluate_whens"]

WHEN_RE = re.compile(
    r"""
    \bwhen\s+\$(?P<name>[A-Za-z0-9_-]+)   # variable
    \s*(?P<op>==|!=)\s*                    # operator
    (?P<literal>"[^"]*"|'[^']*'|[^\s{]+)\s*   # quoted literal, or up to whitespace or brace
    """,
    re.VERBOSE,
)


def evaluate_condition(value: str, operator: str, literal: str) -> bool:
    """Compare the resolved *value* with *literal* as strings."""
    if operator == "==":
        return value == literal
    if operator == "!=":
        return value != literal
    raise ValueError(f"Unknown operator: {operator!r}")


def evaluate_whens(body: str, environment: dict[str, str]) -> str:
    """Replace each ``when`` construct by its block content or remove it.

    Scanning resumes after every construct, so a ``when`` nested inside an
    included block is passed through as-is.

    Raises:
        UnknownVariableError: a condition names a variable that has no value
            in *environment*.
    """
    out: list[str] = []
    cursor = 0
    pos = 0
    while True:
        match = WHEN_RE.search(body, pos)
        if match is None:
            break
        block = extract_block(body, match.end())
        if block is None:
            # Header without a body; leave the text alone.
            pos = match.end()
            continue
        name = match.group("name")
        if name not in environment:
            raise UnknownVariableError(name)
        out.append(body[cursor : match.start()])
        if evaluate_condition(str(environment[name]), match.group("op"), unquote(match.group("literal"))):
            out.append(block.inner)
        cursor = pos = block.end
    out.append(body[cursor:])
    return "".join(out)
