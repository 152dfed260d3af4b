"""Analyzer rules for axcss sources.

Each rule is a function taking a SourceDocument and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import re

from axcss.conditions import WHEN_RE
from axcss.errors import ParseError
from axcss.model.diagnostic import Diagnostic, Severity
from axcss.parser.blocks import extract_block
from axcss.stylesheet.builder import build_tree, declaration_problem
from axcss.validation.document import SourceDocument

_KEYWORD_RE = re.compile(r"(?<![\w.#$-])component\s+(?=[A-Za-z])")
_VARIABLE_RE = re.compile(r"\$([A-Za-z0-9_-]+)")


def _diagnostic(
    doc: SourceDocument,
    rule: str,
    severity: Severity,
    message: str,
    offset: int,
    suggestion: str | None = None,
) -> Diagnostic:
    line, column = doc.position(offset)
    return Diagnostic(
        rule=rule,
        severity=severity,
        message=message,
        line=line,
        column=column,
        suggestion=suggestion,
    )


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_braces(doc: SourceDocument) -> list[Diagnostic]:
    """Every '}' needs an opener and every '{' needs a closer."""
    stack: list[int] = []
    diagnostics: list[Diagnostic] = []
    for i, ch in enumerate(doc.text):
        if ch == "{":
            stack.append(i)
        elif ch == "}":
            if stack:
                stack.pop()
                continue
            line, column = doc.position(i)
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_braces",
                    Severity.ERROR,
                    f"Unmatched closing '}}' at line {line}, column {column}.",
                    i,
                    "Remove the extra '}' or add the matching opening '{'.",
                )
            )
    for i in stack:
        line, column = doc.position(i)
        diagnostics.append(
            _diagnostic(
                doc,
                "check_braces",
                Severity.ERROR,
                f"Unclosed block starting at line {line}, column {column} (missing '}}').",
                i,
                "Add a closing '}' for the opened block.",
            )
        )
    return diagnostics


def check_component_headers(doc: SourceDocument) -> list[Diagnostic]:
    """A component header needs a closed parameter list before its body."""
    diagnostics: list[Diagnostic] = []
    text = doc.text
    for match in _KEYWORD_RE.finditer(text):
        brace = text.find("{", match.end())
        paren = text.find("(", match.end())
        if paren == -1 or (brace != -1 and paren > brace):
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_component_headers",
                    Severity.ERROR,
                    "Malformed component header: missing parameter list `(...)` before `{`.",
                    match.start(),
                    "Ensure you wrote: component Name($a: default, ...) { ... }",
                )
            )
            continue
        params = extract_block(text, paren, "(", ")")
        if params is None or (brace != -1 and params.end > brace):
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_component_headers",
                    Severity.ERROR,
                    "Malformed component header: missing closing `)` for parameter list.",
                    paren,
                    "Close the parameter list with `)` before the component body.",
                )
            )
        elif brace == -1:
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_component_headers",
                    Severity.ERROR,
                    "Malformed component header: missing component body `{ ... }`.",
                    match.start(),
                    "Add a body block after the parameter list.",
                )
            )
    return diagnostics


def check_declarations(doc: SourceDocument) -> list[Diagnostic]:
    """Declarations inside component bodies must be ``property: value;``."""
    diagnostics: list[Diagnostic] = []
    for comp in doc.components:
        try:
            tree = build_tree(comp.body)
        except ParseError as exc:
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_declarations",
                    Severity.ERROR,
                    f"Failed building syntax tree for component '{comp.name}': {exc}",
                    comp.body_offset + (exc.offset or 0),
                )
            )
            continue
        cursor = 0
        for node in tree.walk():
            for decl in node.declarations:
                rule = decl[:-1].strip()
                idx = comp.body.find(rule, cursor)
                if idx == -1:
                    idx = max(comp.body.find(rule), 0)
                else:
                    cursor = idx
                problem = declaration_problem(decl)
                if problem is None:
                    continue
                diagnostics.append(
                    _diagnostic(
                        doc,
                        "check_declarations",
                        Severity.ERROR,
                        f"{problem} in component '{comp.name}'.",
                        comp.body_offset + idx,
                        "Ensure rule format: property: value;",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Binding rules
# ---------------------------------------------------------------------------


def check_duplicate_parameters(doc: SourceDocument) -> list[Diagnostic]:
    """Parameter names must be unique within one component."""
    diagnostics: list[Diagnostic] = []
    for comp in doc.components:
        seen: set[str] = set()
        for param in comp.parameters:
            if param.name in seen:
                diagnostics.append(
                    _diagnostic(
                        doc,
                        "check_duplicate_parameters",
                        Severity.ERROR,
                        f"Duplicate parameter '{param.name}' in component {comp.name}.",
                        comp.offset,
                        f"Remove or rename duplicate parameter '{param.name}'.",
                    )
                )
            seen.add(param.name)
    return diagnostics


def check_when_variables(doc: SourceDocument) -> list[Diagnostic]:
    """``when`` conditions may only test declared parameters."""
    diagnostics: list[Diagnostic] = []
    for comp in doc.components:
        for match in WHEN_RE.finditer(comp.body):
            name = match.group("name")
            if comp.declares(name):
                continue
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_when_variables",
                    Severity.ERROR,
                    f"when condition references unknown variable '${name}' in component '{comp.name}'.",
                    comp.body_offset + match.start(),
                    f"Either declare ${name} in the component or fix the condition.",
                )
            )
    return diagnostics


def check_instance_components(doc: SourceDocument) -> list[Diagnostic]:
    """Instances must name a defined component.

    A file without any component is treated as plain CSS and not checked. A
    file with component imports only gets a warning, since the component may
    come from an imported file.
    """
    if not doc.components:
        return []
    severity = Severity.WARNING if doc.has_imports else Severity.ERROR
    diagnostics: list[Diagnostic] = []
    for inst in doc.instances:
        if doc.component(inst.component_name) is not None:
            continue
        diagnostics.append(
            _diagnostic(
                doc,
                "check_instance_components",
                severity,
                f"Instance refers to unknown component '{inst.component_name}'.",
                inst.offset,
                f"Ensure component '{inst.component_name}' is defined before instantiating it.",
            )
        )
    return diagnostics


def check_required_parameters(doc: SourceDocument) -> list[Diagnostic]:
    """Every parameter without a default must be supplied by the instance."""
    diagnostics: list[Diagnostic] = []
    for inst in doc.instances:
        comp = doc.component(inst.component_name)
        if comp is None:
            continue
        reported: set[str] = set()
        for param in comp.parameters:
            if not param.required or param.name in inst.properties or param.name in reported:
                continue
            reported.add(param.name)
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_required_parameters",
                    Severity.ERROR,
                    f"Default value not defined for ${param.name} in instance {inst.qualified_name}.",
                    inst.offset,
                    f"Set ${param.name} in the instance or give it a default in component {comp.name}.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Style rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_undeclared_variables(doc: SourceDocument) -> list[Diagnostic]:
    """Variables used in a body should be declared as parameters."""
    diagnostics: list[Diagnostic] = []
    for comp in doc.components:
        seen: set[str] = set()
        for match in _VARIABLE_RE.finditer(comp.body):
            name = match.group(1)
            if name in seen or comp.declares(name):
                continue
            seen.add(name)
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_undeclared_variables",
                    Severity.WARNING,
                    f"Variable '${name}' used in component '{comp.name}' but not declared as parameter.",
                    comp.body_offset + match.start(),
                    f"Declare ${name} in the component parameters or remove its usage.",
                )
            )
    return diagnostics


def check_instance_properties(doc: SourceDocument) -> list[Diagnostic]:
    """Instance properties should match a declared parameter."""
    diagnostics: list[Diagnostic] = []
    for inst in doc.instances:
        comp = doc.component(inst.component_name)
        if comp is None:
            continue
        for name in inst.properties:
            if comp.declares(name):
                continue
            idx = inst.raw_body.find(f"${name}")
            diagnostics.append(
                _diagnostic(
                    doc,
                    "check_instance_properties",
                    Severity.WARNING,
                    f"Instance '{inst.qualified_name}' defines unknown prop '${name}'.",
                    inst.body_offset + max(idx, 0),
                    f"Remove or declare '${name}' in the component parameters.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    # Structural (ERROR)
    check_braces,
    check_component_headers,
    check_declarations,
    # Binding
    check_duplicate_parameters,
    check_when_variables,
    check_instance_components,
    check_required_parameters,
    # Style (WARNING)
    check_undeclared_variables,
    check_instance_properties,
]
