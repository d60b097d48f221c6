"""Type definitions for typewright."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CursorRange:
    """A selection range; a caret when start == end.

    Positions are character offsets into the document.
    """

    start: int
    end: int

    @classmethod
    def cursor(cls, position: int) -> "CursorRange":
        """Create an empty range (caret) at position."""
        return cls(position, position)

    @property
    def empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Edit:
    """Replace the text in [start, end) with insert."""

    start: int
    end: int
    insert: str

    @property
    def length_delta(self) -> int:
        """How much the document grows (or shrinks) when applied."""
        return len(self.insert) - (self.end - self.start)

    def overlaps(self, other: "Edit") -> bool:
        """Check whether two edits touch the same text.

        Two insertions at the same position also count as overlapping, since
        their relative order would be ambiguous.
        """
        if self.start == self.end == other.start == other.end:
            return True
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Line:
    """A single line of the document, without its line break."""

    number: int  # 1-based
    start: int
    end: int
    text: str
