from axcss.imports.resolver import (
    FileReader,
    FilesystemReader,
    ImportResolver,
    ResolvedSource,
    SourceSpan,
)

__all__ = ["FileReader", "FilesystemReader", "ImportResolver", "ResolvedSource", "SourceSpan"]
