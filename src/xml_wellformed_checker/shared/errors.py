"""Exception hierarchy for the well-formedness checker.

Malformed markup never raises; it is reported as a diagnostic. Exceptions are
reserved for conditions that stop an operation before or outside the scan:
an unreadable line source, misuse of a finished checker, bad configuration,
and contract violations on the nesting stack.
"""

from pathlib import Path
from typing import List, Optional, Union


class WellFormedCheckerError(Exception):
    """Base exception for all checker errors."""


class LineSourceError(WellFormedCheckerError):
    """Raised when the lines of a document cannot be obtained."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class CheckerStateError(WellFormedCheckerError):
    """Raised when a finished checker is fed more input."""


class EmptyStackError(WellFormedCheckerError, IndexError):
    """Raised by pop/peek on an empty stack."""


class ConfigError(WellFormedCheckerError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
