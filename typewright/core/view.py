"""Interfaces the engine consumes from the host editing surface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typewright.core.protected import SyntaxTree
    from typewright.core.transaction import Transaction
    from typewright.core.types import CursorRange, Line


class EditorState(ABC):
    """Read-only snapshot of the host's document and selection."""

    @property
    @abstractmethod
    def selection(self) -> tuple[CursorRange, ...]:
        """Current cursor ranges, ordered by position."""

    @property
    @abstractmethod
    def syntax_tree(self) -> SyntaxTree:
        """Syntax tree of the current document."""

    @abstractmethod
    def slice_doc(self, start: int, end: int) -> str:
        """Return the document text in [start, end)."""

    @abstractmethod
    def line_at(self, position: int) -> Line:
        """Return the line containing position."""


class EditorView(ABC):
    """The host surface: current state plus transaction submission."""

    @property
    @abstractmethod
    def state(self) -> EditorState:
        """The current editor state."""

    @abstractmethod
    def dispatch(self, transaction: Transaction) -> None:
        """Apply a transaction atomically; an empty one is a no-op."""
