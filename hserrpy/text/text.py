from bisect import bisect_right
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into (or length of) report text, in characters."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def __add__(self, other: "TextSize") -> "TextSize":
        return TextSize(self.value + other.value)

    def __sub__(self, other: "TextSize") -> "TextSize":
        result = self.value - other.value
        if result < 0:
            raise ValueError("Resulting TextSize cannot be negative")
        return TextSize(result)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


ZERO: Final[TextSize] = TextSize(0)


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open span [start, end) of report text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        return TextRange(start.value, end.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @staticmethod
    def _from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        start = min(self._start, other._start)
        end = max(self._end, other._end)
        return TextRange._from_offsets(start, end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange."""
    return source[range.start.value : range.end.value]


class LineIndex:
    """Offset to (line, column) lookup over a fixed text.

    Lines and columns are 1-based. `\\r\\n`, `\\r` and `\\n` all end a line.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, text: str) -> None:
        starts = [0]
        index = 0
        length = len(text)
        while index < length:
            ch = text[index]
            if ch == "\r":
                if index + 1 < length and text[index + 1] == "\n":
                    index += 1
                starts.append(index + 1)
            elif ch == "\n":
                starts.append(index + 1)
            index += 1
        self._line_starts = tuple(starts)
        self._length = length

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: TextSize) -> tuple[int, int]:
        value = min(max(offset.value, 0), self._length)
        line = bisect_right(self._line_starts, value) - 1
        return line + 1, value - self._line_starts[line] + 1

    def line_of(self, offset: TextSize) -> int:
        return self.line_col(offset)[0]
