"""Public API for well-formedness checking."""

from .checking import check_file, check_lines, check_text
from .source import read_lines

__all__ = [
    "check_file",
    "check_lines",
    "check_text",
    "read_lines",
]
