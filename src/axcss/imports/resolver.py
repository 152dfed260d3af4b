"""Recursive ``@import`` resolution with cycle avoidance.

Every component import is replaced in place by the fully resolved text of
its target, depth first, so sibling imports keep their relative order. The
resolved text is tracked as a list of spans that remember which file (and
which import depth) each character came from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from axcss.parser.blocks import line_col, mask_comments
from axcss.parser.definitions import IMPORT_RE, is_component_import

logger = logging.getLogger(__name__)


class FileReader(Protocol):
    """Loads source text; raises OSError when the file cannot be read."""

    def read(self, path: Path) -> str: ...


class FilesystemReader:
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)


@dataclass(frozen=True)
class SourceSpan:
    """A run of resolved text copied from one file.

    ``source_offset`` is where the run starts inside that file's text.
    """

    start: int
    end: int
    path: Path | None
    depth: int
    source_offset: int


@dataclass
class ResolvedSource:
    """Source text with every component import inlined."""

    text: str
    spans: list[SourceSpan] = field(default_factory=list)
    sources: dict[Path | None, str] = field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str, path: Path | None = None) -> ResolvedSource:
        masked = mask_comments(text)
        return cls(
            text=masked,
            spans=[SourceSpan(0, len(masked), path, 0, 0)],
            sources={path: masked},
        )

    def span_at(self, offset: int) -> SourceSpan | None:
        for span in self.spans:
            if span.start <= offset < span.end:
                return span
        return None

    def depth_at(self, offset: int) -> int:
        span = self.span_at(offset)
        return span.depth if span else 0

    def path_at(self, offset: int) -> Path | None:
        span = self.span_at(offset)
        return span.path if span else None

    def locate(self, offset: int) -> tuple[Path | None, int, int]:
        """Map an offset in the resolved text back to (path, line, column)."""
        span = self.span_at(offset)
        if span is None:
            line, column = line_col(self.text, offset)
            return None, line, column
        line, column = line_col(self.sources[span.path], span.source_offset + offset - span.start)
        return span.path, line, column


@dataclass(frozen=True)
class _Chunk:
    text: str
    path: Path | None
    depth: int
    source_offset: int


class ImportResolver:
    """Inline ``@import "name";`` directives recursively.

    Missing targets and targets that were already visited (cycles, repeated
    imports) are replaced by empty text and logged as warnings; they never
    abort resolution.
    """

    def __init__(self, reader: FileReader | None = None, extension: str = ".axcss") -> None:
        self.reader = reader or FilesystemReader()
        self.extension = extension

    def resolve(self, path: str | Path) -> ResolvedSource:
        """Read the entry file at *path* and resolve its imports.

        Errors reading the entry file itself propagate to the caller.
        """
        entry = Path(path).resolve()
        return self.resolve_text(self.reader.read(entry), entry)

    def resolve_text(self, text: str, path: str | Path) -> ResolvedSource:
        entry = Path(path).resolve()
        visited: set[Path] = {entry}
        sources: dict[Path | None, str] = {}
        chunks = self._splice(text, entry, visited, 0, sources)

        spans: list[SourceSpan] = []
        parts: list[str] = []
        offset = 0
        for chunk in chunks:
            if not chunk.text:
                continue
            parts.append(chunk.text)
            end = offset + len(chunk.text)
            spans.append(SourceSpan(offset, end, chunk.path, chunk.depth, chunk.source_offset))
            offset = end
        return ResolvedSource(text="".join(parts), spans=spans, sources=sources)

    def target_path(self, base_dir: Path, target: str) -> Path:
        if not target.endswith(self.extension):
            target += self.extension
        return (base_dir / target).resolve()

    def _splice(
        self,
        text: str,
        path: Path,
        visited: set[Path],
        depth: int,
        sources: dict[Path | None, str],
    ) -> list[_Chunk]:
        masked = mask_comments(text)
        sources[path] = masked
        chunks: list[_Chunk] = []
        cursor = 0
        for match in IMPORT_RE.finditer(masked):
            target = match.group("target").strip()
            if not is_component_import(target, self.extension):
                continue
            chunks.append(_Chunk(masked[cursor : match.start()], path, depth, cursor))
            cursor = match.end()
            chunks.extend(self._include(target, path.parent, visited, depth + 1, sources))
        chunks.append(_Chunk(masked[cursor:], path, depth, cursor))
        return chunks

    def _include(
        self,
        target: str,
        base_dir: Path,
        visited: set[Path],
        depth: int,
        sources: dict[Path | None, str],
    ) -> list[_Chunk]:
        resolved = self.target_path(base_dir, target)
        if resolved in visited:
            logger.warning(
                "Import '%s' skipped: %s was already included (circular or repeated import).",
                target,
                resolved,
            )
            return []
        visited.add(resolved)
        try:
            text = self.reader.read(resolved)
        except OSError as exc:
            logger.warning("Failed to import '%s' (%s): %s -- skipping import.", target, resolved, exc)
            return []
        logger.debug("Resolved import '%s' -> %s", target, resolved)
        return self._splice(text, resolved, visited, depth, sources)
