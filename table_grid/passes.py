"""
Passes which tidy up a populated grid before it is rendered.

Grids built from ragged data often have gaps. These may be filled with empty
cells using:

.. autofunction:: fill_missing_gaps

Columns and rows may be sized to fit their contents using:

.. autofunction:: expand_columns_to_content

.. autofunction:: expand_rows_to_content

Finally, alternate rows may be shaded to make wide tables easier to read:

.. autofunction:: add_stripe_ribbons_to_rows
"""

from typing import List, Optional

from table_grid.geometry import Size

from table_grid.style import Colour, TRANSPARENT

from table_grid.cell import Cell

from table_grid.grid import Grid

from table_grid.renderer.backend import RenderBackend

from table_grid.exceptions import ValidationError


DEFAULT_PRIMARY_STRIPE = Colour(255, 255, 255)
DEFAULT_SECONDARY_STRIPE = Colour(250, 250, 255)


def fill_missing_gaps(grid: Grid) -> List[Cell]:
    """
    Add an empty cell at every position within the grid's bounding region
    which has no cell. Returns the newly added cells.

    Filler cells have a transparent background and are sized to match their
    column's width and row's height. (Where the column or row is otherwise
    empty, the grid's default cell size is used instead.) Subscribers are
    notified once.
    """
    section = grid.bounding_region()
    if section is None:
        return []

    default = grid.config.cell_size
    column_widths = {
        column: grid.column_width(column)
        for column in range(section.left, section.right + 1)
    }
    row_heights = {
        row: grid.row_height(row) for row in range(section.top, section.bottom + 1)
    }
    occupied = {cell.position for cell in grid}

    fillers = []
    for position in section.positions():
        if position not in occupied:
            width = column_widths[position.column]
            height = row_heights[position.row]
            fillers.append(
                grid.create_cell(
                    position,
                    size=Size(
                        width if width > 0 else default.width,
                        height if height > 0 else default.height,
                    ),
                    background=TRANSPARENT,
                )
            )

    if fillers:
        grid.add_cells(fillers)
    return fillers


def _auto_sized(cell: Cell) -> bool:
    # Auto-sized sub tables take their size from the cell containing them.
    return bool(getattr(cell.content, "auto_size", False))


def expand_columns_to_content(
    grid: Grid, backend: RenderBackend, overflow: int = 5, minimum_width: int = 0
) -> None:
    """
    Resize every column to fit its widest content.

    Parameters
    ==========
    grid : :py:class:`~table_grid.grid.Grid`
    backend : :py:class:`~table_grid.renderer.backend.RenderBackend`
        Used to measure contents.
    overflow : int
        Extra pixels added to every column.
    minimum_width : int
        The minimum content width allowed for before ``overflow`` is added.
    """
    if overflow < 0:
        raise ValidationError(f"overflow must not be negative (got {overflow})")
    if minimum_width < 0:
        raise ValidationError(
            f"minimum_width must not be negative (got {minimum_width})"
        )

    section = grid.bounding_region()
    if section is None:
        return

    for column_number in range(section.left, section.right + 1):
        with grid.get_column(column_number) as column:
            content_width = max(
                (
                    cell.content.measure(backend).width
                    for cell in column
                    if cell.content is not None and not _auto_sized(cell)
                ),
                default=0,
            )
            column.width = max(content_width, minimum_width) + overflow


def expand_rows_to_content(
    grid: Grid, backend: RenderBackend, overflow: int = 5, minimum_height: int = 0
) -> None:
    """
    Resize every row to fit its tallest content. Contents are measured at the
    width of their column so wrapped text is accounted for. Parameters are as
    for :py:func:`expand_columns_to_content`.
    """
    if overflow < 0:
        raise ValidationError(f"overflow must not be negative (got {overflow})")
    if minimum_height < 0:
        raise ValidationError(
            f"minimum_height must not be negative (got {minimum_height})"
        )

    section = grid.bounding_region()
    if section is None:
        return

    column_widths = {
        column: grid.column_width(column)
        for column in range(section.left, section.right + 1)
    }

    for row_number in range(section.top, section.bottom + 1):
        with grid.get_row(row_number) as row:
            content_height = max(
                (
                    cell.content.measure(
                        backend,
                        Size(column_widths[cell.position.column], cell.size.height),
                    ).height
                    for cell in row
                    if cell.content is not None and not _auto_sized(cell)
                ),
                default=0,
            )
            row.height = max(content_height, minimum_height) + overflow


def add_stripe_ribbons_to_rows(
    grid: Grid,
    primary: Optional[Colour] = None,
    secondary: Optional[Colour] = None,
    start_row: int = 1,
) -> None:
    """
    Alternate the background colour of every row from ``start_row`` to the
    bottom of the grid between ``primary`` and ``secondary``. (The default
    start row leaves a header row in row 0 untouched.)
    """
    if primary is None:
        primary = DEFAULT_PRIMARY_STRIPE
    if secondary is None:
        secondary = DEFAULT_SECONDARY_STRIPE

    section = grid.bounding_region()
    if section is None:
        return

    for row_number in range(start_row, section.bottom + 1):
        with grid.get_row(row_number) as row:
            row.set_background(primary if (row_number - start_row) % 2 == 0 else secondary)

