"""Container types used by the checker.

Key Components:
    Stack: LIFO container holding the names of currently open elements
"""

from .stack import Stack

__all__ = ["Stack"]
