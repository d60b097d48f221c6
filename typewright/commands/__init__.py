"""Keystroke commands of the autocorrect engine."""

from .backspace import handle_backspace
from .quotes import choose_quote, handle_quote
from .replacement import handle_replacement, scan
from .types import Command, ConfiguredCommand

__all__ = [
    "Command",
    "ConfiguredCommand",
    "choose_quote",
    "handle_backspace",
    "handle_quote",
    "handle_replacement",
    "scan",
]
