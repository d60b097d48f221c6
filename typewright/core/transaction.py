"""Atomic multi-cursor edit batches."""

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from typewright.core.types import CursorRange, Edit


@dataclass(frozen=True)
class Transaction:
    """One keystroke's worth of edits, applied as a single document revision.

    Attributes:
        changes: Non-overlapping edits sorted by position, expressed in
            coordinates of the document before the transaction
        selection: New selection in coordinates of the document after the
            transaction, or None to let the host map the current selection
    """

    changes: tuple[Edit, ...] = ()
    selection: tuple[CursorRange, ...] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.changes and self.selection is None


def map_position(position: int, edits: Iterable[Edit], assoc: int = 1) -> int:
    """Map a position from before a set of edits to after them.

    Args:
        position: Offset in the original document
        edits: Non-overlapping edits in original coordinates
        assoc: Side the position sticks to when text is inserted exactly
            there (> 0 moves it after the insertion, otherwise it stays)

    Returns:
        The corresponding offset in the edited document
    """
    offset = 0
    for edit in sorted(edits, key=lambda e: e.start):
        if edit.start >= position and not (edit.start == edit.end == position and assoc > 0):
            break
        if edit.end <= position:
            offset += edit.length_delta
            continue
        # The position was inside replaced text
        return edit.start + offset + (len(edit.insert) if assoc > 0 else 0)
    return position + offset


class TransactionBuilder:
    """Accumulate per-cursor edits and commit them once.

    Each cursor contributes at most one edit and, optionally, its new range.
    A new range is given in coordinates of the document with only that
    cursor's own edit applied; build() shifts it by the edits of the other
    cursors.
    """

    def __init__(self) -> None:
        self._edits: list[Edit] = []
        self._ranges: list[tuple[Edit | None, CursorRange]] = []

    def __len__(self) -> int:
        return len(self._edits)

    def add(self, edit: Edit | None = None, selection: CursorRange | None = None) -> bool:
        """Register one cursor's contribution.

        Args:
            edit: The cursor's edit, if any
            selection: The cursor's range after its own edit, if the
                transaction should set the selection explicitly

        Returns:
            False if the edit overlapped an earlier one and was dropped
        """
        if edit is not None:
            for accepted in self._edits:
                if accepted.overlaps(edit):
                    logger.debug(
                        f"  Dropping edit {edit.start}-{edit.end} overlapping "
                        f"{accepted.start}-{accepted.end}"
                    )
                    return False
            self._edits.append(edit)
        if selection is not None:
            self._ranges.append((edit, selection))
        return True

    def _shift_for(self, own: Edit) -> int:
        return sum(e.length_delta for e in self._edits if e is not own and e.end <= own.start)

    def build(self) -> Transaction:
        changes = tuple(sorted(self._edits, key=lambda e: e.start))
        if not self._ranges:
            return Transaction(changes=changes)

        selection = []
        for own, local in self._ranges:
            if own is None:
                selection.append(
                    CursorRange(map_position(local.start, changes), map_position(local.end, changes))
                )
            else:
                shift = self._shift_for(own)
                selection.append(CursorRange(local.start + shift, local.end + shift))
        return Transaction(changes=changes, selection=tuple(selection))
