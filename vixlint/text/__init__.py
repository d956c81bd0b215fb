"""Source text positions and line helpers."""

from vixlint.text.text import TextPosition, leading_whitespace, split_source_lines

__all__ = ["TextPosition", "leading_whitespace", "split_source_lines"]
