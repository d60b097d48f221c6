"""Unit tests for reverting magic quotes on Backspace."""

from typewright.commands import handle_backspace
from typewright.core import AutocorrectConfig, CursorRange
from typewright.host import BufferView


def _config(primary: str = "“…”", secondary: str = "‘…’", active: bool = True) -> AutocorrectConfig:
    return AutocorrectConfig(
        active=active, magic_quotes={"primary": primary, "secondary": secondary}
    )


class TestRevertQuote:
    """Test downgrading directional quotes."""

    def test_opening_double_quote_becomes_plain(self) -> None:
        view = BufferView.from_text("“", [1])
        handle_backspace(view, _config())
        assert view.text == '"'

    def test_closing_double_quote_becomes_plain(self) -> None:
        view = BufferView.from_text("hi”", [3])
        handle_backspace(view, _config())
        assert view.text == 'hi"'

    def test_closing_single_quote_becomes_plain(self) -> None:
        view = BufferView.from_text("it’", [3])
        handle_backspace(view, _config())
        assert view.text == "it'"

    def test_reports_handled(self) -> None:
        view = BufferView.from_text("“", [1])
        assert handle_backspace(view, _config()) is True

    def test_cursor_stays_after_plain_quote(self) -> None:
        view = BufferView.from_text("“x", [1])
        handle_backspace(view, _config())
        assert view.selection == (CursorRange.cursor(1),)

    def test_only_character_before_cursor_is_checked(self) -> None:
        view = BufferView.from_text("“a", [2])
        assert handle_backspace(view, _config()) is False

    def test_every_cursor_is_reverted(self) -> None:
        view = BufferView.from_text("“a” ‘b’", [1, 3, 5, 7])
        handle_backspace(view, _config())
        assert view.text == "\"a\" 'b'"


class TestNotHandled:
    """Test cases left to the host's ordinary deletion."""

    def test_ordinary_character(self) -> None:
        view = BufferView.from_text("a", [1])
        assert handle_backspace(view, _config()) is False

    def test_ordinary_character_is_not_deleted_by_command(self) -> None:
        view = BufferView.from_text("a", [1])
        handle_backspace(view, _config())
        assert view.text == "a"

    def test_document_start(self) -> None:
        view = BufferView.from_text("“", [0])
        assert handle_backspace(view, _config()) is False

    def test_plain_quote_in_configured_pair(self) -> None:
        """A pair that contains the plain quote never turns it into itself."""
        view = BufferView.from_text('"', [1])
        assert handle_backspace(view, _config(primary='"…”')) is False

    def test_selection_is_left_to_host(self) -> None:
        view = BufferView.from_text("“a”", [CursorRange(1, 3)])
        assert handle_backspace(view, _config()) is False

    def test_inactive_config(self) -> None:
        view = BufferView.from_text("“", [1])
        assert handle_backspace(view, _config(active=False)) is False
