"""Text ranges over grammar source strings."""

from csstyping.text.text import TextRange, slice_text_range

__all__ = [
    "TextRange",
    "slice_text_range",
]
