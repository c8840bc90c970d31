"""Text spans and line lookup."""

from hserrpy.text.text import ZERO, LineIndex, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
