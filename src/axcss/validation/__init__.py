from axcss.validation.document import SourceDocument
from axcss.validation.validator import analyze, analyze_or_raise

__all__ = ["SourceDocument", "analyze", "analyze_or_raise"]
