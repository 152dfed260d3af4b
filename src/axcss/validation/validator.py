"""Static analyzer: runs all analyzer rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from axcss.errors import CompileError
from axcss.model.diagnostic import Diagnostic, sort_key
from axcss.validation.document import SourceDocument
from axcss.validation.rules import ALL_RULES

RuleFunc = Callable[[SourceDocument], list[Diagnostic]]


def analyze(
    text: str, extra_rules: list[RuleFunc] | None = None, extension: str = ".axcss"
) -> list[Diagnostic]:
    """Run all analyzer rules against the raw source *text*.

    Returns the full list of diagnostics, errors first, then by line and
    column. The analyzer never reads files and never raises for bad input.
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    doc = SourceDocument.from_text(text, extension=extension)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(doc))
    return sorted(diagnostics, key=sort_key)


def analyze_or_raise(
    text: str, extra_rules: list[RuleFunc] | None = None, extension: str = ".axcss"
) -> list[Diagnostic]:
    """Run the analyzer; raises :class:`CompileError` if any ERROR diagnostics exist.

    Returns the warnings when no errors are found.
    """
    diagnostics = analyze(text, extra_rules=extra_rules, extension=extension)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise CompileError(errors)
    return diagnostics
