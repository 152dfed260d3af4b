"""Scanner for component definitions, instance requests and import directives.

Syntax example:
    component Button($bg: #333, $size = 14px, $state) {
        .root { background: $bg; font-size: $size; }
    }
    Button.primary { $bg: #07f; $state: active; }

Headers are found with regular expressions; bodies are always taken with
:func:`extract_block` so nested rule blocks never truncate the capture.
"""

from __future__ import annotations

import re

from axcss.model.component import ComponentDefinition, InstanceRequest, Parameter
from axcss.parser.blocks import extract_block

__all__ = [
    "IMPORT_RE",
    "parse_parameters",
    "parse_definitions",
    "parse_instances",
    "strip_blocks",
    "strip_imports",
    "is_component_import",
    "unquote",
]

IDENT = r"[A-Za-z][A-Za-z0-9_-]*"

# Start of a component header; the parameter list is matched by hand so that
# defaults such as rgba(0, 0, 0, .5) keep their parentheses.
COMPONENT_RE = re.compile(rf"(?<![\w.#$-])component\s+(?P<name>{IDENT})\s*")

# Component.instance followed by its body brace. The lookbehind rejects
# compound selectors (.card.active, a.b.c) and anything glued to a word.
INSTANCE_RE = re.compile(
    rf"(?<![\w.#:$&@-])(?P<component>{IDENT})\.(?P<instance>{IDENT})\s*(?=\{{)"
)

# $name: value; inside an instance body
_PROPERTY_RE = re.compile(r"\$(?P<name>[A-Za-z0-9_-]+)\s*:\s*(?P<value>[^;]+);?")

IMPORT_RE = re.compile(r"""@import\s+(?P<quote>['"])(?P<target>[^'"]+)(?P=quote)\s*;?""")


def unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on *sep* outside of parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def parse_parameters(text: str) -> list[Parameter]:
    """Parse a parameter list such as ``$bg: red, $size = 2px, $state``.

    Either ``:`` or ``=`` separates name from default, whichever comes first.
    Duplicates are kept so the analyzer can report them.
    """
    params: list[Parameter] = []
    for raw in _split_top_level(text):
        raw = raw.strip()
        if not raw:
            continue
        seps = [i for i in (raw.find(":"), raw.find("=")) if i != -1]
        if seps:
            idx = min(seps)
            name = raw[:idx].strip().lstrip("$")
            default: str | None = unquote(raw[idx + 1 :])
        else:
            name = raw.lstrip("$")
            default = None
        if name:
            params.append(Parameter(name=name, default=default))
    return params


def _trimmed(inner: str, inner_start: int) -> tuple[str, int]:
    """Trim a block body and return it with the offset of its first character."""
    stripped = inner.lstrip()
    offset = inner_start + (len(inner) - len(stripped))
    return stripped.rstrip(), offset


def _iter_components(text: str):
    """Yield (match, params_block, body_block) for every well-formed header."""
    pos = 0
    while True:
        match = COMPONENT_RE.search(text, pos)
        if match is None:
            return
        pos = match.end()
        params = extract_block(text, match.end(), "(", ")")
        if params is None:
            continue
        brace = params.end
        while brace < len(text) and text[brace].isspace():
            brace += 1
        body = extract_block(text, brace)
        if body is None:
            continue
        yield match, params, body
        pos = body.end


def parse_definitions(text: str, origin: str | None = None) -> list[ComponentDefinition]:
    """Return every component defined in *text*, in document order.

    Malformed headers are skipped; the analyzer reports them.
    """
    components: list[ComponentDefinition] = []
    for match, params, block in _iter_components(text):
        body, body_offset = _trimmed(block.inner, block.inner_start)
        components.append(
            ComponentDefinition(
                name=match.group("name"),
                parameters=tuple(parse_parameters(params.inner)),
                body=body,
                origin_source=origin,
                offset=match.start(),
                body_offset=body_offset,
            )
        )
    return components


def _component_spans(text: str) -> list[tuple[int, int]]:
    return [(m.start(), body.end) for m, _params, body in _iter_components(text)]


def parse_instances(text: str) -> list[InstanceRequest]:
    """Return every ``Component.instance { ... }`` request outside component bodies."""
    spans = _component_spans(text)
    instances: list[InstanceRequest] = []
    cursor = 0
    for match in INSTANCE_RE.finditer(text):
        start = match.start()
        if start < cursor or any(s <= start < e for s, e in spans):
            continue
        block = extract_block(text, match.end())
        if block is None:
            continue
        raw_body, body_offset = _trimmed(block.inner, block.inner_start)
        props: dict[str, str] = {}
        for prop in _PROPERTY_RE.finditer(raw_body):
            props[prop.group("name")] = unquote(prop.group("value"))
        instances.append(
            InstanceRequest(
                component_name=match.group("component"),
                instance_name=match.group("instance"),
                properties=props,
                raw_body=raw_body,
                offset=start,
                body_offset=body_offset,
            )
        )
        cursor = block.end
    return instances


def strip_blocks(text: str, instances: bool = True) -> str:
    """Remove component definitions (and instance blocks) leaving plain CSS."""
    ranges = _component_spans(text)
    if instances:
        for inst in parse_instances(text):
            block = extract_block(text, text.index("{", inst.offset))
            if block is not None:
                ranges.append((inst.offset, block.end))
    if not ranges:
        return text
    out = text
    for start, end in sorted(ranges, reverse=True):
        out = out[:start] + out[end:]
    return out


def is_component_import(target: str, extension: str = ".axcss") -> bool:
    """True unless *target* names a plain stylesheet (a ``.css`` file or ``url(...)``).

    Dotted names such as ``btn.v2`` are component files; the extension is
    appended when resolving them.
    """
    target = target.strip()
    if target.endswith(extension):
        return True
    return not (target.lower().endswith(".css") or target.startswith("url("))


def strip_imports(text: str, extension: str = ".axcss") -> str:
    """Remove component ``@import`` directives, leaving plain CSS imports alone."""

    def _drop(match: re.Match[str]) -> str:
        if is_component_import(match.group("target").strip(), extension):
            return ""
        return match.group(0)

    return IMPORT_RE.sub(_drop, text)
