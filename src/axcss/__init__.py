"""axcss -- component-based CSS dialect compiler."""

__version__ = "1.0.0"

from axcss.compiler import Compiler, compile_file, compile_string  # noqa: E402
from axcss.config import CompilerConfig  # noqa: E402
from axcss.errors import CompileError  # noqa: E402
from axcss.model.diagnostic import Diagnostic, Severity  # noqa: E402
from axcss.validation import analyze  # noqa: E402

__all__ = [
    "__version__",
    "Compiler",
    "CompilerConfig",
    "CompileError",
    "Diagnostic",
    "Severity",
    "analyze",
    "compile_file",
    "compile_string",
]
