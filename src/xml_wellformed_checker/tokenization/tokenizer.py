"""Line-level tag tokenizer and tag classification.

The tokenizer does not understand XML syntax beyond angle brackets: a tag
token is whatever lies between a ``<`` and the next ``>`` on the same line.
Classification is a pure function of the token text.
"""

from enum import Enum, auto
from typing import List

TAG_OPEN = "<"
TAG_CLOSE = ">"
CLOSING_PREFIX = "</"
PI_PREFIX = "<?"
PI_SUFFIX = "?>"
SELF_CLOSING_MARKER = "/"


class TagKind(Enum):
    """Shape of a tag token, in the order the checker tests for them."""

    PROCESSING_INSTRUCTION = auto()  # <?target ...?>
    SELF_CLOSING = auto()            # <name .../>
    CLOSING = auto()                 # </name>
    OPENING = auto()                 # <name ...>
    OTHER = auto()                   # Anything else; ignored


def extract_tags(line: str) -> List[str]:
    """Extract every ``<...>`` substring from a line, left to right.

    A ``<`` without a later ``>`` ends the scan for this line; tags found
    before it are still returned.

    Args:
        line: One line of document text

    Returns:
        Tag tokens in order of appearance, delimiters included

    Examples:
        >>> extract_tags('<a x="1"><b/>text</a>')
        ['<a x="1">', '<b/>', '</a>']
        >>> extract_tags('<a> 1 < 2')
        ['<a>']
    """
    tags: List[str] = []
    start = line.find(TAG_OPEN)
    while start != -1:
        end = line.find(TAG_CLOSE, start)
        if end == -1:
            break
        tags.append(line[start:end + 1])
        start = line.find(TAG_OPEN, end + 1)
    return tags


def _inner(tag: str) -> str:
    return tag[1:-1].strip()


def is_processing_instruction(tag: str) -> bool:
    """Check for ``<?...?>``."""
    return tag.startswith(PI_PREFIX) and tag.endswith(PI_SUFFIX)


def is_self_closing(tag: str) -> bool:
    """Check whether the tag ends in ``/>``, ignoring whitespace before ``>``."""
    if not (tag.startswith(TAG_OPEN) and tag.endswith(TAG_CLOSE)):
        return False
    return _inner(tag).endswith(SELF_CLOSING_MARKER)


def is_closing(tag: str) -> bool:
    """Check for a ``</`` prefix; self-closing tags must be ruled out first."""
    return tag.startswith(CLOSING_PREFIX)


def extract_tag_name(tag: str) -> str:
    """Return the bare element name of an opening or self-closing tag.

    Example: ``<Driver code="123">`` gives ``Driver``.
    """
    inner = _inner(tag)
    if inner.endswith(SELF_CLOSING_MARKER):
        inner = inner[:-1].strip()
    parts = inner.split(maxsplit=1)
    return parts[0] if parts else ""


def closing_tag_name(tag: str) -> str:
    """Return the text between ``</`` and ``>`` unchanged."""
    return tag[len(CLOSING_PREFIX):-1]


def classify_tag(tag: str) -> TagKind:
    """Classify a tag token; the first matching kind wins."""
    if is_processing_instruction(tag):
        return TagKind.PROCESSING_INSTRUCTION
    if is_self_closing(tag):
        return TagKind.SELF_CLOSING
    if is_closing(tag):
        return TagKind.CLOSING
    if tag.startswith(TAG_OPEN) and tag.endswith(TAG_CLOSE):
        return TagKind.OPENING
    return TagKind.OTHER
