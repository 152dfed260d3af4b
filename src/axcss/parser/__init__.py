from axcss.parser.blocks import Block, extract_block, line_col, mask_comments, strip_comments
from axcss.parser.definitions import (
    parse_definitions,
    parse_instances,
    parse_parameters,
    strip_blocks,
    strip_imports,
)

__all__ = [
    "Block",
    "extract_block",
    "line_col",
    "mask_comments",
    "strip_comments",
    "parse_definitions",
    "parse_instances",
    "parse_parameters",
    "strip_blocks",
    "strip_imports",
]
