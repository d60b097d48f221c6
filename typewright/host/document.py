"""Plain-text document for the reference host."""

from collections.abc import Iterable
from bisect import bisect_right

from typewright.core import Edit, Line


class TextDocument:
    """Immutable text with line lookup."""

    def __init__(self, text: str = ""):
        self.text = text
        # Offsets at which each line starts
        self._line_starts = [0] + [i + 1 for i, char in enumerate(text) if char == "\n"]

    def __len__(self) -> int:
        return len(self.text)

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def slice(self, start: int, end: int) -> str:
        start = max(start, 0)
        return self.text[start:end]

    def line_at(self, position: int) -> Line:
        """Return the line containing position.

        Raises:
            IndexError: If position is outside the document
        """
        if position < 0 or position > self.length:
            raise IndexError(f"Position {position} outside document of length {self.length}")
        index = bisect_right(self._line_starts, position) - 1
        start = self._line_starts[index]
        if index + 1 < len(self._line_starts):
            end = self._line_starts[index + 1] - 1
        else:
            end = self.length
        return Line(number=index + 1, start=start, end=end, text=self.text[start:end])

    def apply(self, edits: Iterable[Edit]) -> "TextDocument":
        """Return a new document with non-overlapping edits applied.

        Edit positions refer to this document.
        """
        parts = []
        cursor = 0
        for edit in sorted(edits, key=lambda e: e.start):
            if edit.start < cursor or edit.end > self.length:
                raise ValueError(f"Edit {edit.start}-{edit.end} overlaps or is out of range")
            parts.append(self.text[cursor : edit.start])
            parts.append(edit.insert)
            cursor = edit.end
        parts.append(self.text[cursor:])
        return TextDocument("".join(parts))
