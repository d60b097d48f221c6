"""Unit tests for multi-cursor transactions."""

from typewright.core import CursorRange, Edit, Transaction, TransactionBuilder, map_position


class TestMapPosition:
    """Test mapping positions through edits."""

    def test_position_before_edit_is_unchanged(self) -> None:
        assert map_position(1, [Edit(3, 5, "x")]) == 1

    def test_position_after_edit_is_shifted(self) -> None:
        assert map_position(6, [Edit(1, 4, "x")]) == 4

    def test_position_at_end_of_replacement_follows_insert(self) -> None:
        assert map_position(3, [Edit(0, 3, "©")]) == 1

    def test_position_at_start_of_replacement_stays(self) -> None:
        assert map_position(2, [Edit(2, 4, "xyz")]) == 2

    def test_position_inside_replacement_moves_to_end(self) -> None:
        assert map_position(3, [Edit(2, 5, "ab")]) == 4

    def test_insertion_at_position_moves_it_forward(self) -> None:
        assert map_position(2, [Edit(2, 2, "ab")]) == 4

    def test_insertion_with_negative_assoc_keeps_position(self) -> None:
        assert map_position(2, [Edit(2, 2, "ab")], assoc=-1) == 2

    def test_multiple_edits_accumulate(self) -> None:
        assert map_position(10, [Edit(6, 8, ""), Edit(0, 1, "abc")]) == 10


class TestTransactionBuilder:
    """Test accumulating edits."""

    def test_changes_are_sorted(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(5, 6, "b"))
        builder.add(Edit(1, 2, "a"))
        assert [edit.start for edit in builder.build().changes] == [1, 5]

    def test_overlapping_edit_is_rejected(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(0, 3, "x"))
        assert builder.add(Edit(2, 5, "y")) is False

    def test_overlapping_edit_is_not_committed(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(0, 3, "x"))
        builder.add(Edit(2, 5, "y"))
        assert builder.build().changes == (Edit(0, 3, "x"),)

    def test_insertions_at_same_position_overlap(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(2, 2, "x"))
        assert builder.add(Edit(2, 2, "y")) is False

    def test_adjacent_edits_are_accepted(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(0, 2, "x"))
        assert builder.add(Edit(2, 4, "y")) is True

    def test_without_ranges_selection_is_left_to_host(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(0, 1, "x"))
        assert builder.build().selection is None

    def test_ranges_are_shifted_by_earlier_edits(self) -> None:
        """Each cursor's range moves by what the cursors before it inserted."""
        builder = TransactionBuilder()
        builder.add(Edit(1, 1, "“"), CursorRange.cursor(2))
        builder.add(Edit(4, 4, "“"), CursorRange.cursor(5))
        assert builder.build().selection == (CursorRange.cursor(2), CursorRange.cursor(6))

    def test_range_without_edit_is_mapped(self) -> None:
        builder = TransactionBuilder()
        builder.add(Edit(0, 2, "abcd"), CursorRange.cursor(4))
        builder.add(selection=CursorRange.cursor(5))
        assert builder.build().selection == (CursorRange.cursor(4), CursorRange.cursor(7))

    def test_empty_builder_builds_empty_transaction(self) -> None:
        assert TransactionBuilder().build().is_empty is True


class TestTransaction:
    """Test transaction helpers."""

    def test_selection_only_transaction_is_not_empty(self) -> None:
        assert Transaction(selection=(CursorRange.cursor(0),)).is_empty is False
