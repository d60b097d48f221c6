"""typewright - autocorrect and magic quotes for text editors.

Replaces trigger sequences as you type, turns straight quotes into
directional ones and reverts them on Backspace, while leaving code and
other protected Markdown regions alone.
"""

from typewright.commands import handle_backspace, handle_quote, handle_replacement, scan
from typewright.core import AutocorrectConfig, MagicQuotePair, ReplacementRule, load_config
from typewright.keymap import build_keymap
from typewright.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "AutocorrectConfig",
    "MagicQuotePair",
    "ReplacementRule",
    "build_keymap",
    "handle_backspace",
    "handle_quote",
    "handle_replacement",
    "load_config",
    "scan",
    "setup_logger",
]
