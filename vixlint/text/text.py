from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """1-based (line, column) location in source text.

    Columns count characters, so a tab is a single column.
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("TextPosition line and column are 1-based")

    def as_tuple(self) -> tuple[int, int]:
        """Get the position as a (line, column) tuple."""
        return (self.line, self.column)

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"


def split_source_lines(source: str) -> list[str]:
    """Split text into lines without their terminators.

    Accepts `\\n`, `\\r\\n` and `\\r`. A trailing terminator does not produce an
    extra empty line, so empty text has no lines at all.
    """
    if not source:
        return []
    # Not str.splitlines: form feeds and other separators stay part of the line.
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def leading_whitespace(text: str) -> str:
    """Get the run of spaces and tabs that starts a line."""
    return text[: len(text) - len(text.lstrip(" \t"))]
