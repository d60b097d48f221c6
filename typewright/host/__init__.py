"""Reference in-memory host for driving the engine."""

from .buffer import BufferState, BufferView, normalize_selection
from .document import TextDocument
from .keys import parse_key_script
from .markdown import MarkdownSyntaxTree, SyntaxNode

__all__ = [
    "BufferState",
    "BufferView",
    "MarkdownSyntaxTree",
    "SyntaxNode",
    "TextDocument",
    "normalize_selection",
    "parse_key_script",
]
