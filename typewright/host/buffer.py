"""In-memory multi-cursor editor for the reference host."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import cached_property

from loguru import logger

from typewright.commands import Command
from typewright.core import (
    CursorRange,
    Edit,
    EditorState,
    EditorView,
    Line,
    SyntaxTree,
    Transaction,
    TransactionBuilder,
    map_position,
)
from typewright.host.document import TextDocument
from typewright.host.markdown import MarkdownSyntaxTree

# Text the host inserts for named keys when no command handles them
DEFAULT_KEY_TEXT = {"Space": " ", "Enter": "\n"}


def normalize_selection(ranges: Iterable[CursorRange]) -> tuple[CursorRange, ...]:
    """Sort ranges and merge the ones that overlap or coincide."""
    merged: list[CursorRange] = []
    for current in sorted(ranges, key=lambda r: (r.start, r.end)):
        if merged:
            last = merged[-1]
            if current.start < last.end or current == last:
                merged[-1] = CursorRange(last.start, max(last.end, current.end))
                continue
        merged.append(current)
    return tuple(merged)


class BufferState(EditorState):
    """Immutable document + selection snapshot."""

    def __init__(self, document: TextDocument, selection: Sequence[CursorRange]):
        for cursor in selection:
            if not 0 <= cursor.start <= cursor.end <= document.length:
                raise ValueError(
                    f"Range {cursor.start}-{cursor.end} outside document of length {document.length}"
                )
        self.document = document
        self._selection = normalize_selection(selection) or (CursorRange.cursor(document.length),)

    @property
    def selection(self) -> tuple[CursorRange, ...]:
        return self._selection

    @cached_property
    def syntax_tree(self) -> SyntaxTree:
        return MarkdownSyntaxTree(self.document.text)

    @property
    def text(self) -> str:
        return self.document.text

    def slice_doc(self, start: int, end: int) -> str:
        return self.document.slice(start, end)

    def line_at(self, position: int) -> Line:
        return self.document.line_at(position)

    def apply(self, transaction: Transaction) -> BufferState:
        """Return the state after transaction."""
        document = self.document.apply(transaction.changes)
        if transaction.selection is not None:
            selection = transaction.selection
        else:
            selection = tuple(
                CursorRange(
                    map_position(cursor.start, transaction.changes),
                    map_position(cursor.end, transaction.changes),
                )
                for cursor in self._selection
            )
        return BufferState(document, selection)


class BufferView(EditorView):
    """Editor view holding a BufferState and applying transactions to it."""

    def __init__(self, state: BufferState):
        self._state = state
        self.transactions: list[Transaction] = []

    @classmethod
    def from_text(cls, text: str = "", cursors: Iterable[int | CursorRange] | None = None) -> BufferView:
        """Create a view over text.

        Args:
            text: Initial document text
            cursors: Caret offsets or ranges; a single caret at the end of
                the document when omitted
        """
        document = TextDocument(text)
        selection = [
            cursor if isinstance(cursor, CursorRange) else CursorRange.cursor(cursor)
            for cursor in (cursors or [])
        ]
        return cls(BufferState(document, selection))

    @property
    def state(self) -> BufferState:
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def selection(self) -> tuple[CursorRange, ...]:
        return self._state.selection

    def dispatch(self, transaction: Transaction) -> None:
        if transaction.is_empty:
            return
        self._state = self._state.apply(transaction)
        self.transactions.append(transaction)

    def insert_text(self, text: str) -> None:
        """Default input: replace every range with text."""
        builder = TransactionBuilder()
        for cursor in self._state.selection:
            builder.add(Edit(cursor.start, cursor.end, text), CursorRange.cursor(cursor.start + len(text)))
        self.dispatch(builder.build())

    def delete_backward(self) -> None:
        """Default Backspace: delete selections or the character before each caret."""
        builder = TransactionBuilder()
        for cursor in self._state.selection:
            if not cursor.empty:
                builder.add(Edit(cursor.start, cursor.end, ""), CursorRange.cursor(cursor.start))
            elif cursor.start > 0:
                builder.add(Edit(cursor.start - 1, cursor.start, ""), CursorRange.cursor(cursor.start - 1))
            else:
                builder.add(selection=cursor)
        self.dispatch(builder.build())

    def press(self, key: str, keymap: Mapping[str, Command] | None = None) -> bool:
        """Simulate a key press.

        The bound command runs first; when it reports the key as not handled
        the host's default behaviour follows.

        Args:
            key: A key name ("Space", "Enter", "Backspace") or a single character
            keymap: Key name -> command bindings

        Returns:
            Whether a bound command handled the key
        """
        command = (keymap or {}).get(key)
        if command is not None and command(self):
            return True

        if key == "Backspace":
            self.delete_backward()
        elif key in DEFAULT_KEY_TEXT:
            self.insert_text(DEFAULT_KEY_TEXT[key])
        elif len(key) == 1:
            self.insert_text(key)
        else:
            logger.warning(f"⚠️  Ignoring unknown key {key!r}")
        return False

    def type_keys(self, keys: Iterable[str], keymap: Mapping[str, Command] | None = None) -> None:
        """Press a sequence of keys."""
        for key in keys:
            self.press(key, keymap)
