"""Magic quotes: directional quotes in place of plain ones."""

from loguru import logger

from typewright.core import (
    AutocorrectConfig,
    CursorRange,
    Edit,
    EditorView,
    MagicQuotePair,
    TransactionBuilder,
)
from typewright.utils import Constants

from .types import ConfiguredCommand


def choose_quote(char_before: str, pair: MagicQuotePair) -> str:
    """Pick the opening or closing glyph for a caret.

    Args:
        char_before: The character right before the caret, "" at document start
        pair: The quote family to pick from

    Returns:
        pair.start when a quoted span starts here, pair.end otherwise
    """
    if not char_before or char_before in Constants.QUOTE_START_CHARS:
        return pair.start
    return pair.end


def handle_quote(quote: str) -> ConfiguredCommand:
    """Create the command bound to a quote key.

    Args:
        quote: The plain quote the key produces, either " or '

    Returns:
        A command inserting magic quotes for that key
    """

    def command(view: EditorView, config: AutocorrectConfig) -> bool:
        if not config.active:
            return False

        pair = config.magic_quotes.for_quote(quote)
        state = view.state
        builder = TransactionBuilder()

        for cursor in state.selection:
            if cursor.empty:
                char_before = state.slice_doc(cursor.start - 1, cursor.start) if cursor.start > 0 else ""
                insert = choose_quote(char_before, pair)
                builder.add(
                    Edit(cursor.start, cursor.end, insert),
                    CursorRange.cursor(cursor.start + len(insert)),
                )
            else:
                # Surround the selection and keep the original text selected
                text = state.slice_doc(cursor.start, cursor.end)
                builder.add(
                    Edit(cursor.start, cursor.end, f"{pair.start}{text}{pair.end}"),
                    CursorRange(cursor.start + len(pair.start), cursor.end + len(pair.start)),
                )

        transaction = builder.build()
        logger.debug(f"  Inserting magic quotes for {quote!r} at {len(transaction.changes)} cursor(s)")
        view.dispatch(transaction)
        return True

    return command
