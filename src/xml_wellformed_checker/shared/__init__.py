"""Shared utilities for the well-formedness checker.

This module provides the configuration object, diagnostic and result types,
the exception hierarchy and correlation-aware logging used by every layer.
"""

from .config import CheckerConfig
from .errors import (
    CheckerStateError,
    ConfigError,
    ConfigValidationError,
    EmptyStackError,
    LineSourceError,
    WellFormedCheckerError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    CheckResult,
    Diagnostic,
    DiagnosticKind,
)

__all__ = [
    "CheckerConfig",
    "CheckerStateError",
    "ConfigError",
    "ConfigValidationError",
    "EmptyStackError",
    "LineSourceError",
    "WellFormedCheckerError",
    "CorrelationLogger",
    "get_logger",
    "CheckResult",
    "Diagnostic",
    "DiagnosticKind",
]
