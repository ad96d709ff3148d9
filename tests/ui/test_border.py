"""Tests for border rows and screen geometry."""

from termchess.ui import border


class TestRows:
    def test_top(self) -> None:
        assert border.top() == "   ┌───┬───┬───┬───┬───┬───┬───┬───┐\n"

    def test_middle(self) -> None:
        assert border.middle() == "   ├───┼───┼───┼───┼───┼───┼───┼───┤\n"

    def test_bottom(self) -> None:
        assert border.bottom() == "   └───┴───┴───┴───┴───┴───┴───┴───┘\n"

    def test_bottom_labels(self) -> None:
        assert border.bottom_labels() == "     A   B   C   D   E   F   G   H "
        assert border.bottom_labels(flipped=True) == "     H   G   F   E   D   C   B   A "


class TestCell:
    def test_first_square(self) -> None:
        assert border.cell(5, 1) == "a8"
        assert border.cell(5, 1, flipped=True) == "h1"

    def test_e2(self) -> None:
        # Column 4 starts at x = 3 + 4 * 4; row 6 sits on line 1 + 2 * 6.
        assert border.cell(21, 13) == "e2"
        assert border.cell(19, 13) == "e2"
        assert border.cell(22, 13) == "e2"

    def test_border_lines(self) -> None:
        # Vertical bars belong to the square on their right.
        assert border.cell(3, 1) == "a8"
        assert border.cell(7, 1) == "b8"
        # Horizontal lines belong to the square above.
        assert border.cell(5, 2) == "a8"
        assert border.cell(5, 16) == "a1"

    def test_last_square(self) -> None:
        assert border.cell(34, 15) == "h1"
        assert border.cell(34, 15, flipped=True) == "a8"

    def test_outside_returns_none(self) -> None:
        assert border.cell(0, 5) is None  # rank label column
        assert border.cell(2, 5) is None
        assert border.cell(5, 0) is None  # top border
        assert border.cell(35, 5) is None  # right of the grid
        assert border.cell(5, 17) is None  # file labels
        assert border.cell(100, 100) is None
