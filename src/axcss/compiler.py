"""axcss compiler: analyze, resolve imports, expand instances, emit CSS.

Pipeline for one entry file:

    raw text -> analyzer (errors abort) -> import resolution
             -> definitions + instances over the resolved text
             -> per instance: merge -> when -> substitute -> build -> emit
             -> preserved plain CSS + one labelled block per instance
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from axcss.config import CompilerConfig
from axcss.errors import CompileError, ParseError, UnknownVariableError
from axcss.imports.resolver import FileReader, FilesystemReader, ImportResolver, ResolvedSource
from axcss.model.component import ComponentDefinition, InstanceRequest
from axcss.model.diagnostic import Diagnostic, Severity
from axcss.parser.blocks import strip_comments
from axcss.parser.definitions import parse_definitions, parse_instances, strip_blocks, strip_imports
from axcss.stylesheet import build_tree, declaration_problem, emit, normalize_css
from axcss.transforms import apply_transforms, merge_properties
from axcss.validation import analyze_or_raise

logger = logging.getLogger(__name__)


def unique_class_name(instance_name: str, used: set[str]) -> str:
    """Lower-case *instance_name*, appending ``-1``, ``-2``... until unused."""
    base = instance_name.lower()
    name = base
    counter = 1
    while name in used:
        name = f"{base}-{counter}"
        counter += 1
    used.add(name)
    return name


class Compiler:
    """Compile axcss sources to plain CSS.

    Every call is a fresh, self-contained pass: definitions, instances and
    diagnostics are never shared between calls.
    """

    def __init__(self, config: CompilerConfig | None = None, reader: FileReader | None = None) -> None:
        self.config = config or CompilerConfig()
        self.reader = reader or FilesystemReader(self.config.encoding)
        self.resolver = ImportResolver(self.reader, extension=self.config.extension)

    def compile_file(self, path: str | Path) -> str:
        """Compile the file at *path*, inlining its imports.

        Raises:
            CompileError: the analyzer or the instance expansion found errors.
            OSError: the entry file cannot be read.
        """
        path = Path(path)
        raw = self.reader.read(path)
        self._gate(raw, path)
        source = self.resolver.resolve_text(raw, path)
        css = self._generate(raw, source)
        logger.info("Compiled %s", path)
        return css

    def compile_string(self, content: str) -> str:
        """Compile in-memory *content*; ``@import`` directives are not followed."""
        self._gate(content, None)
        return self._generate(content, ResolvedSource.from_text(content))

    # ---- pipeline steps ----

    def _gate(self, raw: str, path: Path | None) -> None:
        warnings = analyze_or_raise(raw, extension=self.config.extension)
        where = f" in {path}" if path else ""
        for w in warnings:
            logger.warning("%s (line %s)%s", w.message, w.location, where)

    def _definitions(self, source: ResolvedSource) -> dict[str, ComponentDefinition]:
        """Pick one definition per name.

        The entry file beats imports and a shallower import beats a deeper
        one. In the entry file the last definition wins; among imports of the
        same depth the first one seen wins.
        """
        chosen: dict[str, ComponentDefinition] = {}
        depths: dict[str, int] = {}
        for comp in parse_definitions(source.text):
            depth = source.depth_at(comp.offset)
            origin = source.path_at(comp.offset)
            comp = replace(comp, origin_source=str(origin) if origin else None)
            if comp.name in chosen:
                current = depths[comp.name]
                if depth > current or (depth == current and depth > 0):
                    continue
                logger.debug("Component %s from %s overrides an earlier definition", comp.name, origin)
            chosen[comp.name] = comp
            depths[comp.name] = depth
        return chosen

    def _plain_css(self, raw: str, strip_instances: bool) -> str:
        text = strip_blocks(strip_comments(raw), instances=strip_instances)
        return normalize_css(strip_imports(text, self.config.extension))

    def _generate(self, raw: str, source: ResolvedSource) -> str:
        components = self._definitions(source)
        instances = parse_instances(source.text)

        parts: list[str] = []
        plain = self._plain_css(raw, strip_instances=bool(components))
        if plain:
            parts.append(plain)

        used: set[str] = set()
        errors: list[Diagnostic] = []
        for inst in instances:
            comp = components.get(inst.component_name)
            if comp is None:
                # Without any component the file is plain CSS and a.b { } is a selector.
                if components:
                    logger.warning(
                        'Component "%s" not found for instance "%s" -- skipping.',
                        inst.component_name,
                        inst.instance_name,
                    )
                continue
            class_name = unique_class_name(inst.instance_name, used)
            css = self._render(comp, inst, class_name, source, errors)
            if css is None:
                continue
            if not css:
                logger.warning(
                    "Generated CSS empty for %s -- check variables / when conditions.",
                    inst.qualified_name,
                )
                continue
            if self.config.label_instances:
                css = f"/* Instance: {inst.qualified_name} */\n{css}"
            parts.append(css)

        if errors:
            raise CompileError(errors)
        return "\n".join(parts)

    def _render(
        self,
        comp: ComponentDefinition,
        inst: InstanceRequest,
        class_name: str,
        source: ResolvedSource,
        errors: list[Diagnostic],
    ) -> str | None:
        """Expand one instance; binding failures are appended to *errors*."""
        merged = merge_properties(comp, inst.properties)
        if not merged.ok:
            for name in merged.missing:
                errors.append(
                    self._error(
                        source,
                        inst.offset,
                        "missing_value",
                        f"Default value not defined for ${name} in instance {inst.qualified_name}.",
                        f"Set ${name} in the instance or give it a default in component {comp.name}.",
                    )
                )
            return None
        try:
            body = apply_transforms(comp.body, merged.environment)
            tree = build_tree(body)
        except UnknownVariableError as exc:
            errors.append(
                self._error(
                    source,
                    comp.offset,
                    "unknown_when_variable",
                    f"{exc} in component '{comp.name}'.",
                    f"Either declare ${exc.name} in the component or fix the condition.",
                )
            )
            return None
        except ParseError as exc:
            errors.append(
                self._error(
                    source,
                    comp.body_offset,
                    "parse_error",
                    f"Failed building syntax tree for {inst.qualified_name}: {exc}",
                )
            )
            return None
        malformed = [
            problem
            for node in tree.walk()
            for problem in map(declaration_problem, node.declarations)
            if problem is not None
        ]
        for problem in malformed:
            errors.append(
                self._error(
                    source,
                    comp.body_offset,
                    "check_declarations",
                    f"{problem} in instance {inst.qualified_name}.",
                    "Ensure rule format: property: value; and that every variable has a non-empty value.",
                )
            )
        if malformed:
            return None
        return normalize_css(emit(tree, class_name))

    @staticmethod
    def _error(
        source: ResolvedSource,
        offset: int,
        rule: str,
        message: str,
        suggestion: str | None = None,
    ) -> Diagnostic:
        path, line, column = source.locate(offset)
        if path is not None and source.depth_at(offset) > 0:
            message = f"{message} [{path.name}]"
        return Diagnostic(
            rule=rule,
            severity=Severity.ERROR,
            message=message,
            line=line,
            column=column,
            suggestion=suggestion,
        )


def compile_file(path: str | Path, config: CompilerConfig | None = None) -> str:
    """Compile the axcss file at *path* to CSS text."""
    return Compiler(config).compile_file(path)


def compile_string(content: str, config: CompilerConfig | None = None) -> str:
    """Compile axcss *content* held in memory to CSS text."""
    return Compiler(config).compile_string(content)
