"""Trigger -> replacement substitution on Space and Enter."""

from collections.abc import Iterable

from loguru import logger

from typewright.core import (
    AutocorrectConfig,
    CursorRange,
    Edit,
    EditorState,
    EditorView,
    ProtectedRegionClassifier,
    TransactionBuilder,
)
from typewright.utils import Constants


def scan(
    state: EditorState,
    cursors: Iterable[CursorRange],
    config: AutocorrectConfig,
    classifier: ProtectedRegionClassifier | None = None,
) -> list[Edit]:
    """Find the replacement edit, if any, for each cursor.

    For every empty cursor outside protected nodes, the longest trigger that
    ends at the cursor is replaced. If that trigger starts inside a protected
    node the cursor is abandoned; shorter triggers are not tried.

    Args:
        state: Editor state to read text and lines from
        cursors: Cursor ranges to inspect; other positions are never read
        config: Autocorrect configuration for this keystroke
        classifier: Protected region classifier (built from the state's
            syntax tree when omitted)

    Returns:
        At most one edit per cursor, in cursor order
    """
    table = config.replacement_table
    if not config.active or table.is_empty():
        return []

    # Sorted copy; the configured order stays untouched
    rules = table.sorted_by_length()
    max_key_length = len(rules[0].key)
    if classifier is None:
        classifier = ProtectedRegionClassifier(state.syntax_tree)

    edits: list[Edit] = []
    for cursor in cursors:
        # Only carets take part, selections are left alone
        if not cursor.empty:
            continue

        position = cursor.start
        if classifier.is_protected(position):
            continue

        if state.line_at(position).text in Constants.DELIMITER_LINES:
            continue

        text = state.slice_doc(max(position - max_key_length, 0), position)
        for rule in rules:
            if not text.endswith(rule.key):
                continue
            start = position - len(rule.key)
            # The cursor may be unprotected while the trigger starts in code
            if classifier.is_protected(start):
                break
            logger.debug(f"  Replacing {rule.key!r} with {rule.value!r} at {start}-{position}")
            edits.append(Edit(start, position, rule.value))
            break

    return edits


def handle_replacement(view: EditorView, config: AutocorrectConfig) -> bool:
    """Apply replacements for all cursors on Space or Enter.

    Args:
        view: The editor view
        config: Autocorrect configuration for this keystroke

    Returns:
        Always False, so the host still inserts the space or line break
    """
    if not config.active or config.replacement_table.is_empty():
        return False

    builder = TransactionBuilder()
    for edit in scan(view.state, view.state.selection, config):
        builder.add(edit)

    view.dispatch(builder.build())
    return False
