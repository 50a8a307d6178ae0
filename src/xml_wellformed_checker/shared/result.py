"""Diagnostic and result types for well-formedness checking.

Every structural problem found in a document is a ``Diagnostic``. There is no
severity ladder: all diagnostics are errors of equal weight, distinguished
only by their ``DiagnosticKind``.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple


class DiagnosticKind(Enum):
    """Kinds of structural error reported by the checker."""

    UNMATCHED_CLOSING_TAG = auto()   # Closing tag with no open element
    MISMATCHED_TAG_NAMES = auto()    # Closing name differs from innermost open name
    MULTIPLE_ROOT_ELEMENTS = auto()  # New top-level element after the root closed
    UNCLOSED_TAG_AT_EOF = auto()     # Element still open when input ends
    MISSING_ROOT_ELEMENT = auto()    # No opening tag in the whole document


@dataclass(frozen=True)
class Diagnostic:
    """Single line-numbered diagnostic."""

    line: int
    message: str
    kind: DiagnosticKind

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if self.line < 1:
            raise ValueError("Diagnostic line must be >= 1")
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")

    def render(self) -> str:
        """Format as ``[Line n] message``."""
        return f"[Line {self.line}] {self.message}"

    def as_tuple(self) -> Tuple[int, str]:
        return (self.line, self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line,
            "message": self.message,
            "kind": self.kind.name,
        }


@dataclass
class CheckResult:
    """Outcome of checking one document."""

    diagnostics: List[Diagnostic] = field(default_factory=list)
    lines_processed: int = 0
    root_name: Optional[str] = None
    root_count: int = 0
    source: Optional[str] = None

    @property
    def is_well_formed(self) -> bool:
        """True when no diagnostics were produced."""
        return not self.diagnostics

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def diagnostics_of(self, kind: DiagnosticKind) -> List[Diagnostic]:
        """Return the diagnostics of a single kind, in emission order."""
        return [diag for diag in self.diagnostics if diag.kind is kind]

    def as_tuples(self) -> List[Tuple[int, str]]:
        return [diag.as_tuple() for diag in self.diagnostics]

    def render_lines(self) -> List[str]:
        return [diag.render() for diag in self.diagnostics]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "file": self.source,
            "well_formed": self.is_well_formed,
            "lines_processed": self.lines_processed,
            "root_name": self.root_name,
            "root_count": self.root_count,
            "diagnostics": [diag.to_dict() for diag in self.diagnostics],
        }
