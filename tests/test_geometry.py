import pytest

from table_grid.geometry import Position, Size, Rect, Section, Corners


class TestPosition:
    def test_structural_equality(self) -> None:
        assert Position(1, 2) == Position(1, 2)
        assert Position(1, 2) != Position(2, 1)
        assert len({Position(1, 2), Position(1, 2), Position(-1, 0)}) == 2


class TestRect:
    def test_edges(self) -> None:
        rect = Rect(10, 20, 100, 28)
        assert rect.size == Size(100, 28)
        assert rect.right == 109
        assert rect.bottom == 47


class TestSection:
    def test_counts(self) -> None:
        section = Section(-1, 2, 3, 2)
        assert section.columns == 5
        assert section.rows == 1

    def test_positions_column_by_column(self) -> None:
        assert list(Section(0, 0, 1, 1).positions()) == [
            Position(0, 0),
            Position(0, 1),
            Position(1, 0),
            Position(1, 1),
        ]

    @pytest.mark.parametrize(
        "position, exp",
        [
            (Position(0, 0), True),
            (Position(2, 3), True),
            (Position(1, 2), True),
            (Position(-1, 0), False),
            (Position(0, 4), False),
            ((0, 0), False),
        ],
    )
    def test_contains(self, position: Position, exp: bool) -> None:
        assert (position in Section(0, 0, 2, 3)) is exp


class TestCorners:
    def test_uniform(self) -> None:
        assert Corners.uniform(4) == Corners(4, 4, 4, 4)

    def test_default_square(self) -> None:
        assert Corners() == Corners.uniform(0)
