"""Backspace turns a magic quote back into a plain one."""

from loguru import logger

from typewright.core import AutocorrectConfig, Edit, EditorView, TransactionBuilder
from typewright.utils import Constants


def handle_backspace(view: EditorView, config: AutocorrectConfig) -> bool:
    """Downgrade magic quotes right before each caret to plain quotes.

    Args:
        view: The editor view
        config: Autocorrect configuration for this keystroke

    Returns:
        Whether any quote was replaced; if not, the host deletes backward
    """
    if not config.active:
        return False

    primary = config.magic_quotes.primary.glyphs()
    secondary = config.magic_quotes.secondary.glyphs()

    state = view.state
    builder = TransactionBuilder()
    handled = False

    for cursor in state.selection:
        if not cursor.empty or cursor.start == 0:
            continue

        char_before = state.slice_doc(cursor.start - 1, cursor.start)
        if char_before in primary and char_before != Constants.PLAIN_DOUBLE_QUOTE:
            plain = Constants.PLAIN_DOUBLE_QUOTE
        elif char_before in secondary and char_before != Constants.PLAIN_SINGLE_QUOTE:
            plain = Constants.PLAIN_SINGLE_QUOTE
        else:
            continue

        logger.debug(f"  Reverting {char_before!r} to {plain!r} at {cursor.start - 1}")
        builder.add(Edit(cursor.start - 1, cursor.start, plain))
        handled = True

    view.dispatch(builder.build())
    # If we've replaced a quote, the host must not delete it
    return handled
