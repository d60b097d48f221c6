"""Unit tests for the reference host's text document."""

import pytest

from typewright.core import Edit, Line
from typewright.host import TextDocument


class TestLineAt:
    """Test line lookup."""

    def test_first_line(self) -> None:
        assert TextDocument("ab\ncd").line_at(1) == Line(number=1, start=0, end=2, text="ab")

    def test_position_at_line_break_belongs_to_line(self) -> None:
        assert TextDocument("ab\ncd").line_at(2).number == 1

    def test_second_line(self) -> None:
        assert TextDocument("ab\ncd").line_at(3).text == "cd"

    def test_empty_last_line(self) -> None:
        assert TextDocument("ab\n").line_at(3).text == ""

    def test_empty_document(self) -> None:
        assert TextDocument("").line_at(0).text == ""

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            TextDocument("ab").line_at(3)


class TestSliceAndApply:
    """Test reading and editing."""

    def test_slice_clamps_negative_start(self) -> None:
        assert TextDocument("abc").slice(-2, 1) == "a"

    def test_apply_uses_original_positions(self) -> None:
        document = TextDocument("a-b-c").apply([Edit(3, 4, "+"), Edit(1, 2, "+")])
        assert document.text == "a+b+c"

    def test_apply_insertion(self) -> None:
        assert TextDocument("ac").apply([Edit(1, 1, "b")]).text == "abc"

    def test_apply_rejects_overlap(self) -> None:
        with pytest.raises(ValueError):
            TextDocument("abcdef").apply([Edit(0, 3, "x"), Edit(2, 4, "y")])

    def test_apply_returns_new_document(self) -> None:
        document = TextDocument("abc")
        document.apply([Edit(0, 1, "z")])
        assert document.text == "abc"
