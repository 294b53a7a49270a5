import pytest

from typing import List

from table_grid.geometry import Position, Size

from table_grid.style import Colour, TRANSPARENT, WHITE

from table_grid.content import TextContent

from table_grid.grid import Grid, StructureChange

from table_grid.sub_table import SubTableContent

from table_grid.renderer.backend import RenderBackend

from table_grid.passes import (
    fill_missing_gaps,
    expand_columns_to_content,
    expand_rows_to_content,
    add_stripe_ribbons_to_rows,
)

from table_grid.exceptions import ValidationError


class TestFillMissingGaps:
    def test_empty_grid(self) -> None:
        assert fill_missing_gaps(Grid()) == []

    def test_no_gaps(self) -> None:
        grid = Grid()
        grid.add_cells(
            [grid.create_cell(Position(c, r)) for c in range(2) for r in range(2)]
        )
        assert fill_missing_gaps(grid) == []
        assert len(grid) == 4

    def test_fills_sparse_grid(self) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(0, 0), "a", size=Size(50, 20)),
                grid.create_cell(Position(2, 3), "b", size=Size(70, 40)),
                grid.create_cell(Position(1, 1), "c", size=Size(60, 30)),
            ]
        )
        changes: List[StructureChange] = []
        grid.subscribe(changes.append)

        added = fill_missing_gaps(grid)

        assert len(added) == 3 * 4 - 3
        assert len(changes) == 1
        for position in (grid.bounding_region() or pytest.fail()).positions():
            cell = grid[position]
            assert cell is not None
            assert sum(1 for c in grid if c.position == position) == 1

        filler = grid[2, 0]
        assert filler is not None
        assert filler in added
        assert filler.content is None
        assert filler.background == TRANSPARENT
        # Width of column 2, height of row 0
        assert filler.size == Size(70, 20)

        # Row 2 has no cells so the default height is used
        filler = grid[1, 2]
        assert filler is not None
        assert filler.size == Size(60, 28)

    def test_idempotent(self) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(-1, -1)),
                grid.create_cell(Position(1, 2)),
            ]
        )
        assert len(fill_missing_gaps(grid)) == 10
        assert fill_missing_gaps(grid) == []
        assert len(grid) == 12


@pytest.fixture
def text_grid() -> Grid:
    grid = Grid()
    grid.add_cells(
        [
            # 6 characters of 7 pixels = 42 pixels wide
            grid.create_cell(Position(0, 0), "abcdef"),
            grid.create_cell(Position(0, 1), "abc"),
            grid.create_cell(Position(1, 0), "a"),
            grid.create_cell(Position(1, 1)),
        ]
    )
    return grid


class TestExpandColumnsToContent:
    def test_expand(self, text_grid: Grid, backend: RenderBackend) -> None:
        expand_columns_to_content(text_grid, backend, overflow=5, minimum_width=0)
        assert text_grid.column_width(0) == 47
        with text_grid.get_column(0) as column:
            assert all(cell.size.width == 47 for cell in column)
        assert text_grid.column_width(1) == 7 + 5

    def test_idempotent(self, text_grid: Grid, backend: RenderBackend) -> None:
        expand_columns_to_content(text_grid, backend)
        expand_columns_to_content(text_grid, backend)
        assert text_grid.column_width(0) == 47

    def test_minimum_width(self, text_grid: Grid, backend: RenderBackend) -> None:
        expand_columns_to_content(text_grid, backend, overflow=0, minimum_width=20)
        assert text_grid.column_width(0) == 42
        assert text_grid.column_width(1) == 20

    def test_empty_cells_contribute_zero(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells([grid.create_cell(Position(0, 0))])
        expand_columns_to_content(grid, backend, overflow=3)
        assert grid.column_width(0) == 3

    def test_auto_sized_sub_tables_contribute_zero(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(0, 0), SubTableContent()),
                grid.create_cell(Position(0, 1), SubTableContent(Size(80, 10))),
            ]
        )
        expand_columns_to_content(grid, backend, overflow=0)
        assert grid.column_width(0) == 80

    @pytest.mark.parametrize("overflow, minimum_width", [(-1, 0), (0, -1)])
    def test_negative_arguments(
        self,
        text_grid: Grid,
        backend: RenderBackend,
        overflow: int,
        minimum_width: int,
    ) -> None:
        with pytest.raises(ValidationError):
            expand_columns_to_content(text_grid, backend, overflow, minimum_width)
        assert all(cell.size == Size(100, 28) for cell in text_grid)

    def test_empty_grid(self, backend: RenderBackend) -> None:
        expand_columns_to_content(Grid(), backend)


class TestExpandRowsToContent:
    def test_expand(self, text_grid: Grid, backend: RenderBackend) -> None:
        expand_rows_to_content(text_grid, backend, overflow=5)
        assert text_grid.row_height(0) == 15
        assert text_grid.row_height(1) == 15

    def test_measures_at_column_width(self, backend: RenderBackend) -> None:
        grid = Grid()
        grid.add_cells(
            [
                grid.create_cell(Position(0, 0), "aaa bbb ccc", size=Size(30, 10)),
                grid.create_cell(Position(0, 1), size=Size(50, 10)),
            ]
        )
        # Wrapped onto two lines at the column width (50 pixels), rather than
        # three at the cell width (30 pixels)
        expand_rows_to_content(grid, backend, overflow=0)
        assert grid.row_height(0) == 20

    def test_minimum_height(self, text_grid: Grid, backend: RenderBackend) -> None:
        expand_rows_to_content(text_grid, backend, overflow=1, minimum_height=25)
        assert text_grid.row_height(0) == 26

    def test_negative_arguments(self, text_grid: Grid, backend: RenderBackend) -> None:
        with pytest.raises(ValidationError):
            expand_rows_to_content(text_grid, backend, overflow=-5)
        with pytest.raises(ValidationError):
            expand_rows_to_content(text_grid, backend, minimum_height=-5)
        assert all(cell.size == Size(100, 28) for cell in text_grid)


class TestAddStripeRibbonsToRows:
    def test_defaults(self) -> None:
        grid = Grid()
        grid.add_cells(
            [grid.create_cell(Position(c, r)) for c in range(2) for r in range(4)]
        )
        add_stripe_ribbons_to_rows(grid)

        def row_colours(row: int) -> List[Colour]:
            with grid.get_row(row) as view:
                return [cell.background for cell in view]

        assert row_colours(0) == [WHITE, WHITE]
        assert row_colours(1) == [Colour(255, 255, 255)] * 2
        assert row_colours(2) == [Colour(250, 250, 255)] * 2
        assert row_colours(3) == [Colour(255, 255, 255)] * 2

    def test_custom(self) -> None:
        grid = Grid()
        grid.add_cells([grid.create_cell(Position(0, r)) for r in range(3)])
        red = Colour(255, 0, 0)
        blue = Colour(0, 0, 255)
        add_stripe_ribbons_to_rows(grid, red, blue, start_row=0)
        assert [cell.background for cell in grid] == [red, blue, red]

    def test_empty(self) -> None:
        add_stripe_ribbons_to_rows(Grid())


class TestTextContentUnchanged:
    def test_expand_does_not_modify_content(
        self, text_grid: Grid, backend: RenderBackend
    ) -> None:
        expand_columns_to_content(text_grid, backend)
        expand_rows_to_content(text_grid, backend)
        cell = text_grid[0, 0]
        assert cell is not None
        assert isinstance(cell.content, TextContent)
        assert cell.content.text == "abcdef"
