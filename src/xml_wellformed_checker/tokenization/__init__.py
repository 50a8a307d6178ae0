"""Tag tokenization for well-formedness checking.

Key Components:
    extract_tags: Splits one line into its ``<...>`` tag tokens
    classify_tag: Maps a token to its TagKind
    TagKind: Processing instruction, self-closing, closing, opening or other
"""

from .tokenizer import (
    TagKind,
    classify_tag,
    closing_tag_name,
    extract_tag_name,
    extract_tags,
    is_closing,
    is_processing_instruction,
    is_self_closing,
)

__all__ = [
    "TagKind",
    "classify_tag",
    "closing_tag_name",
    "extract_tag_name",
    "extract_tags",
    "is_closing",
    "is_processing_instruction",
    "is_self_closing",
]
