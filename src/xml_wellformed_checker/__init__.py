"""XML Well-Formedness Checker.

A single-pass checker that reads a document line by line, tracks element
nesting on a stack and reports structural errors: mismatched tags, closing
tags without an opener, elements never closed, multiple root elements and a
missing root element.

Entry points:
- check_document(): lines in, ``(line, message)`` pairs out
- check_lines() / check_text() / check_file(): full CheckResult objects
- WellFormednessChecker: streaming, line-at-a-time checking
"""

__version__ = "0.1.0"
__author__ = "XML Well-Formedness Checker Team"

from .api import check_file, check_lines, check_text, read_lines
from .checker import WellFormednessChecker, check_document
from .shared.config import CheckerConfig
from .shared.errors import LineSourceError, WellFormedCheckerError
from .shared.result import CheckResult, Diagnostic, DiagnosticKind

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Checking functions
    "check_document",
    "check_file",
    "check_lines",
    "check_text",
    "read_lines",

    # Streaming checker
    "WellFormednessChecker",

    # Result objects
    "CheckResult",
    "Diagnostic",
    "DiagnosticKind",

    # Configuration and errors
    "CheckerConfig",
    "LineSourceError",
    "WellFormedCheckerError",
]
