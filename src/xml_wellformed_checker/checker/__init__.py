"""Well-formedness checking engine.

Key Components:
    WellFormednessChecker: Streaming, line-by-line tag structure checker
    CheckerState: Per-document nesting and root-tracking state
    check_document: One-call helper returning ``(line, message)`` pairs
"""

from .wellformedness import (
    CheckerState,
    WellFormednessChecker,
    check_document,
)

__all__ = [
    "CheckerState",
    "WellFormednessChecker",
    "check_document",
]
