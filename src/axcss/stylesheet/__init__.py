from axcss.stylesheet.builder import build_tree, declaration_problem
from axcss.stylesheet.emitter import combine_selectors, emit
from axcss.stylesheet.model import SyntaxNode
from axcss.stylesheet.normalize import normalize_css

__all__ = ["build_tree", "declaration_problem", "combine_selectors", "emit", "SyntaxNode", "normalize_css"]
