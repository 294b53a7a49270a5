import pytest

from typing import List

from table_grid.geometry import Position, Size, Rect, Section, Corners

from table_grid.style import Colour, TOP_LEFT, CENTRE_RIGHT

from table_grid.grid import Grid

from table_grid.renderer.backend import RenderBackend

from table_grid.renderer.layout import (
    distribute,
    corner_radii,
    place_content,
    layout_table,
    draw_layout,
)

from table_grid.exceptions import EmptyTableError


@pytest.mark.parametrize(
    "total, count, exp",
    [
        (100, 3, [33, 33, 34]),
        (100, 1, [100]),
        (100, 4, [25, 25, 25, 25]),
        (10, 4, [2, 2, 3, 3]),
        (2, 3, [0, 1, 1]),
        (0, 2, [0, 0]),
        (50, 0, []),
    ],
)
def test_distribute(total: int, count: int, exp: List[int]) -> None:
    shares = distribute(total, count)
    assert shares == exp
    if count:
        assert sum(shares) == total


class TestCornerRadii:
    def test_two_by_two(self) -> None:
        section = Section(0, 0, 1, 1)
        assert corner_radii(Position(0, 0), section, 8) == Corners(top_left=8)
        assert corner_radii(Position(1, 0), section, 8) == Corners(top_right=8)
        assert corner_radii(Position(0, 1), section, 8) == Corners(bottom_left=8)
        assert corner_radii(Position(1, 1), section, 8) == Corners(bottom_right=8)

    def test_single_cell(self) -> None:
        assert corner_radii(Position(3, 3), Section(3, 3, 3, 3), 2) == Corners.uniform(
            2
        )

    @pytest.mark.parametrize(
        "position", [Position(1, 1), Position(1, 0), Position(0, 1), Position(2, 1)]
    )
    def test_non_corner_cells(self, position: Position) -> None:
        assert corner_radii(position, Section(0, 0, 2, 2), 8) == Corners()


def make_csv_grid(radius: int = 5) -> Grid:
    grid = Grid()
    grid.corner_radius = radius
    grid.add_cells(
        [
            grid.create_cell(Position(0, 0), "A"),
            grid.create_cell(Position(1, 0), "B"),
            grid.create_cell(Position(0, 1), "1"),
            grid.create_cell(Position(1, 1), "2"),
        ]
    )
    return grid


class TestPlaceContent:
    def test_empty_cell(self, backend: RenderBackend) -> None:
        cell = Grid().create_cell(Position(0, 0))
        assert place_content(cell, Rect(0, 0, 100, 28), backend) is None

    def test_aligned(self, backend: RenderBackend) -> None:
        cell = Grid().create_cell(Position(0, 0), "abc")
        assert place_content(cell, Rect(10, 20, 100, 28), backend) == Rect(
            12, 28, 21, 10
        )

        cell.alignment = CENTRE_RIGHT
        assert place_content(cell, Rect(10, 20, 100, 28), backend) == Rect(
            10 + 99 - (21 + 2), 28, 21, 10
        )

    def test_clamped_within_cell(self, backend: RenderBackend) -> None:
        cell = Grid().create_cell(Position(0, 0), "a", alignment=TOP_LEFT)
        # The margins would push the content out of a cell this small
        assert place_content(cell, Rect(0, 0, 8, 10), backend) == Rect(1, 0, 7, 10)

    def test_oversized_content_starts_at_cell_origin(
        self, backend: RenderBackend
    ) -> None:
        cell = Grid().create_cell(Position(0, 0), "abcdef", alignment=CENTRE_RIGHT)
        assert place_content(cell, Rect(5, 5, 20, 5), backend) == Rect(5, 5, 42, 10)


class TestLayoutTable:
    def test_empty(self, backend: RenderBackend) -> None:
        with pytest.raises(EmptyTableError):
            layout_table(Grid(), backend)

    def test_two_by_two(self, backend: RenderBackend) -> None:
        grid = make_csv_grid()
        layout = layout_table(grid, backend)

        assert layout.section == Section(0, 0, 1, 1)
        assert layout.size == Size(
            grid.column_width(0) + grid.column_width(1) - 1,
            grid.row_height(0) + grid.row_height(1) - 1,
        )
        assert layout.size == Size(199, 55)
        assert layout.column_widths == {0: 100, 1: 100}
        assert layout.row_heights == {0: 28, 1: 28}

        rects = {c.cell.position: c.rect for c in layout.cells}
        assert rects == {
            Position(0, 0): Rect(0, 0, 100, 28),
            Position(0, 1): Rect(0, 27, 100, 28),
            Position(1, 0): Rect(99, 0, 100, 28),
            Position(1, 1): Rect(99, 27, 100, 28),
        }

        content_rects = {c.cell.position: c.content_rect for c in layout.cells}
        assert content_rects[Position(1, 1)] == Rect(99 + 2, 27 + 8, 7, 10)

    def test_corner_radii(self, backend: RenderBackend) -> None:
        layout = layout_table(make_csv_grid(8), backend)
        corners = {c.cell.position: c.corners for c in layout.cells}
        assert corners == {
            Position(0, 0): Corners(top_left=8),
            Position(1, 0): Corners(top_right=8),
            Position(0, 1): Corners(bottom_left=8),
            Position(1, 1): Corners(bottom_right=8),
        }

    def test_uneven_sizes_and_gaps(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(-1, -1), size=Size(10, 20)),
                grid.create_cell(Position(-1, 1), size=Size(30, 5)),
                grid.create_cell(Position(0, 0), size=Size(7, 40)),
            ]
        )
        layout = layout_table(grid, backend)

        # Columns: 30, 7. Rows: 20, 40, 5.
        assert layout.size == Size(29 + 6 + 1, 19 + 39 + 4 + 1)
        rects = {c.cell.position: c.rect for c in layout.cells}
        assert rects == {
            Position(-1, -1): Rect(0, 0, 10, 20),
            Position(-1, 1): Rect(0, 19 + 39, 30, 5),
            Position(0, 0): Rect(29, 19, 7, 40),
        }

    def test_views_disposed(self, backend: RenderBackend) -> None:
        grid = make_csv_grid()
        layout_table(grid, backend)
        assert grid.subscribers == []

    def test_zero_sized(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells([grid.create_cell(Position(0, 0), size=Size(0, 0))])
        assert layout_table(grid, backend).size == Size(1, 1)


class TestDrawLayout:
    def test_draw_order(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(0, 0), "A", background=Colour(1, 1, 1)),
                grid.create_cell(Position(1, 0)),
            ]
        )
        layout = layout_table(grid, backend)
        draw_layout(backend, layout, Colour(0, 0, 0))

        assert backend.calls == [  # type: ignore
            ("rect", Rect(0, 0, 100, 28), Colour(1, 1, 1), Corners(5, 0, 5, 0)),
            ("text", "A", Rect(2, 8, 7, 10)),
            ("rect", Rect(99, 0, 100, 28), Colour(255, 255, 255), Corners(0, 5, 0, 5)),
        ]
