"""Command-line interface module for the XML well-formedness checker.

This module provides the ``xml-wellformed`` tool, which checks files and
prints line-numbered diagnostics.
"""

from .main import main

__all__ = ["main"]
