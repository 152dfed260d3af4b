"""Parsed view of one source file, shared by every analyzer rule."""

from __future__ import annotations

from dataclasses import dataclass, field

from axcss.model.component import ComponentDefinition, InstanceRequest
from axcss.parser.blocks import line_col, mask_comments
from axcss.parser.definitions import IMPORT_RE, is_component_import, parse_definitions, parse_instances


@dataclass
class SourceDocument:
    """Raw text plus the definitions and instances scanned from it.

    ``text`` has its comments blanked out, so offsets into it are offsets
    into the raw text too.
    """

    raw: str
    text: str
    components: list[ComponentDefinition] = field(default_factory=list)
    instances: list[InstanceRequest] = field(default_factory=list)
    has_imports: bool = False

    @classmethod
    def from_text(cls, raw: str, extension: str = ".axcss") -> SourceDocument:
        text = mask_comments(raw)
        return cls(
            raw=raw,
            text=text,
            components=parse_definitions(text),
            instances=parse_instances(text),
            has_imports=any(
                is_component_import(m.group("target").strip(), extension)
                for m in IMPORT_RE.finditer(text)
            ),
        )

    def position(self, offset: int) -> tuple[int, int]:
        return line_col(self.text, offset)

    def component(self, name: str) -> ComponentDefinition | None:
        """The effective definition for *name*: the last one in the file."""
        found = None
        for comp in self.components:
            if comp.name == name:
                found = comp
        return found
