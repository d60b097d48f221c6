"""Unit tests for magic quote insertion."""

import pytest

from typewright.commands import choose_quote, handle_quote
from typewright.core import AutocorrectConfig, CursorRange, MagicQuotePair
from typewright.host import BufferView

DOUBLE = handle_quote('"')
SINGLE = handle_quote("'")
PAIR = MagicQuotePair.parse("“…”")


def _config(primary: str = "“…”", secondary: str = "‘…’", active: bool = True) -> AutocorrectConfig:
    return AutocorrectConfig(
        active=active, magic_quotes={"primary": primary, "secondary": secondary}
    )


class TestChooseQuote:
    """Test picking the opening or closing glyph."""

    def test_document_start_opens(self) -> None:
        assert choose_quote("", PAIR) == "“"

    @pytest.mark.parametrize("char_before", [" ", "(", "[", "{", "-", "–", "—"])
    def test_span_starting_characters_open(self, char_before: str) -> None:
        assert choose_quote(char_before, PAIR) == "“"

    @pytest.mark.parametrize("char_before", ["a", ".", ")", "“", "\n", "1"])
    def test_other_characters_close(self, char_before: str) -> None:
        assert choose_quote(char_before, PAIR) == "”"


class TestQuoteAtCursor:
    """Test inserting quotes at carets."""

    def test_inserts_opening_quote_at_start(self) -> None:
        view = BufferView.from_text("", [0])
        DOUBLE(view, _config())
        assert view.text == "“"

    def test_inserts_closing_quote_after_word(self) -> None:
        view = BufferView.from_text("word", [4])
        DOUBLE(view, _config())
        assert view.text == "word”"

    def test_opening_after_space(self) -> None:
        view = BufferView.from_text("say ", [4])
        DOUBLE(view, _config())
        assert view.text == "say “"

    def test_cursor_moves_past_quote(self) -> None:
        view = BufferView.from_text("ab", [1])
        DOUBLE(view, _config())
        assert view.selection == (CursorRange.cursor(2),)

    def test_single_quote_uses_secondary_pair(self) -> None:
        view = BufferView.from_text("it", [2])
        SINGLE(view, _config())
        assert view.text == "it’"

    def test_multi_character_glyph_moves_cursor_past_it(self) -> None:
        view = BufferView.from_text("", [0])
        DOUBLE(view, _config(primary="« … »"))
        assert view.selection == (CursorRange.cursor(2),)

    def test_reports_handled(self) -> None:
        view = BufferView.from_text("", [0])
        assert DOUBLE(view, _config()) is True

    def test_each_cursor_decides_independently(self) -> None:
        view = BufferView.from_text("a ", [1, 2])
        DOUBLE(view, _config())
        assert view.text == "a” “"

    def test_multiple_cursors_end_after_their_quotes(self) -> None:
        view = BufferView.from_text("a b", [1, 3])
        DOUBLE(view, _config())
        assert view.selection == (CursorRange.cursor(2), CursorRange.cursor(5))

    def test_all_cursors_in_one_transaction(self) -> None:
        view = BufferView.from_text("a b c", [1, 3, 5])
        DOUBLE(view, _config())
        assert len(view.transactions) == 1


class TestQuoteAroundSelection:
    """Test wrapping selections."""

    def test_wraps_selection(self) -> None:
        view = BufferView.from_text("say hi", [CursorRange(4, 6)])
        DOUBLE(view, _config())
        assert view.text == "say “hi”"

    def test_selection_still_covers_original_text(self) -> None:
        view = BufferView.from_text("say hi", [CursorRange(4, 6)])
        DOUBLE(view, _config())
        selected = view.selection[0]
        assert view.state.slice_doc(selected.start, selected.end) == "hi"

    def test_selection_offset_by_start_glyph_length(self) -> None:
        view = BufferView.from_text("x hi", [CursorRange(2, 4)])
        DOUBLE(view, _config(primary="« … »"))
        assert view.selection == (CursorRange(4, 6),)

    def test_mixed_selection_and_caret(self) -> None:
        view = BufferView.from_text("ab cd", [CursorRange(0, 2), 5])
        SINGLE(view, _config())
        assert view.text == "‘ab’ cd’"


class TestInactiveQuotes:
    """Test the inactive configuration."""

    def test_reports_not_handled(self) -> None:
        view = BufferView.from_text("", [0])
        assert DOUBLE(view, _config(active=False)) is False

    def test_leaves_document_alone(self) -> None:
        view = BufferView.from_text("a", [1])
        DOUBLE(view, _config(active=False))
        assert view.text == "a"
