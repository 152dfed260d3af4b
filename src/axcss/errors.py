"""Compiler error types."""

from __future__ import annotations

from axcss.model.diagnostic import Diagnostic


class CompileError(Exception):
    """Raised when a source produces ERROR-severity diagnostics.

    The message lists every error, one ``message (line:col)`` entry per line.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [f"{d.message} ({d.location})" for d in diagnostics if d.is_error]
        super().__init__("Syntax errors found:\n" + "\n".join(messages))


class ParseError(Exception):
    """Raised when a component body cannot be turned into a syntax tree."""

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        super().__init__(message)


class UnknownVariableError(ValueError):
    """Raised when a ``when`` condition names a variable with no resolved value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"when condition references unknown variable '${name}'")
