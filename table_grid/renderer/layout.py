r"""
The layout pass converts a grid into pixel rectangles, one per cell, ready to
be drawn by a :py:class:`~table_grid.renderer.backend.RenderBackend`.

Columns are laid out left to right and rows top to bottom. Adjacent cells
share their border line, so a column (or row) of extent :math:`e` advances the
next column's offset by :math:`e - 1` pixels and the whole table is one pixel
larger than the sum of these advances. For example, two 100 pixel wide columns
produce a 199 pixel wide table.

.. autofunction:: layout_table

.. autofunction:: draw_layout

.. autoclass:: TableLayout
    :members:

.. autoclass:: CellLayout
    :members:

Nested tables (:py:class:`~table_grid.sub_table.SubTableContent`) do not size
their columns and rows from their cells. Instead the available space is shared
out between them:

.. autofunction:: layout_sub_table

.. autofunction:: distribute

The following helpers are also used by the HTML renderer:

.. autofunction:: corner_radii

.. autofunction:: place_content
"""

from typing import List, Mapping, Optional

from dataclasses import dataclass

from table_grid.geometry import Position, Size, Rect, Section, Corners

from table_grid.style import Colour

from table_grid.cell import Cell

from table_grid.grid import Grid

from table_grid.renderer.backend import RenderBackend

from table_grid.exceptions import EmptyTableError


@dataclass(frozen=True)
class CellLayout:
    cell: Cell

    rect: Rect
    """The pixel rectangle occupied by the cell, including its border."""

    corners: Corners
    """The radius of each corner of the cell's rectangle."""

    content_rect: Optional[Rect]
    """
    The pixel rectangle the cell's content is drawn into, or None if the cell
    has no content.
    """


@dataclass(frozen=True)
class TableLayout:
    section: Section
    """The region of the grid laid out."""

    size: Size
    """The overall size of the table in pixels."""

    column_widths: Mapping[int, int]
    row_heights: Mapping[int, int]
    """The extent of each column and row in the section."""

    cells: List[CellLayout]


def distribute(total: int, count: int) -> List[int]:
    """
    Divide ``total`` pixels between ``count`` columns (or rows). Each step
    takes its share of whatever space remains so that rounding errors are
    pushed towards the end and the shares always sum to ``total``. For
    example, 100 pixels over three rows gives ``[33, 33, 34]``.
    """
    shares = []
    remaining = total
    for i in range(count):
        share = remaining // (count - i)
        shares.append(share)
        remaining -= share
    return shares


def corner_radii(position: Position, section: Section, radius: int) -> Corners:
    """
    Return the corner radii for the cell at the given position. Only the
    cells at the four corners of the section are rounded, and then only on
    their outermost corner.
    """
    left = position.column == section.left
    right = position.column == section.right
    top = position.row == section.top
    bottom = position.row == section.bottom
    return Corners(
        top_left=radius if top and left else 0,
        top_right=radius if top and right else 0,
        bottom_left=radius if bottom and left else 0,
        bottom_right=radius if bottom and right else 0,
    )


def place_content(cell: Cell, rect: Rect, backend: RenderBackend) -> Optional[Rect]:
    """
    Measure a cell's content against the cell's rectangle and position it
    according to the cell's alignment. Returns None for empty cells.

    Content which fits within the cell is never positioned outside of it,
    even when the cell is smaller than its alignment margins.
    """
    if cell.content is None:
        return None

    size = cell.content.measure(backend, rect.size)
    offset = cell.alignment.align(rect.size, size)
    x = min(max(offset.column, 0), max(rect.width - size.width, 0))
    y = min(max(offset.row, 0), max(rect.height - size.height, 0))
    return Rect(rect.x + x, rect.y + y, size.width, size.height)


def _advance(extent: int) -> int:
    return max(extent - 1, 0)


def layout_table(grid: Grid, backend: RenderBackend) -> TableLayout:
    """
    Assign every cell in a grid a pixel rectangle.

    Each cell's rectangle takes the cell's own size and is placed at the
    offset of its column and row, the widest cell of a column (and tallest of
    a row) setting that column's (row's) extent.

    Raises :py:exc:`~table_grid.exceptions.EmptyTableError` if the grid has no
    cells.
    """
    section = grid.bounding_region()
    if section is None:
        raise EmptyTableError("Cannot lay out a table with no cells.")

    row_heights = {
        row: grid.row_height(row) for row in range(section.top, section.bottom + 1)
    }
    row_offsets = {}
    y = 0
    for row in range(section.top, section.bottom + 1):
        row_offsets[row] = y
        y += _advance(row_heights[row])

    column_widths = {}
    cells = []
    x = 0
    for column in range(section.left, section.right + 1):
        with grid.get_column(column) as view:
            column_widths[column] = view.width
            for cell in view:
                rect = Rect(
                    x,
                    row_offsets[cell.position.row],
                    cell.size.width,
                    cell.size.height,
                )
                cells.append(
                    CellLayout(
                        cell,
                        rect,
                        corner_radii(cell.position, section, grid.corner_radius),
                        place_content(cell, rect, backend),
                    )
                )
        x += _advance(column_widths[column])

    return TableLayout(section, Size(x + 1, y + 1), column_widths, row_heights, cells)


def layout_sub_table(table: Grid, area: Rect, backend: RenderBackend) -> TableLayout:
    """
    Lay out a nested table within the given area. The area's width is shared
    between the table's columns and its height between its rows using
    :py:func:`distribute`. Neighbouring cells share their border line and no
    corners are rounded.

    Raises :py:exc:`~table_grid.exceptions.EmptyTableError` if the table has
    no cells.
    """
    section = table.bounding_region()
    if section is None:
        raise EmptyTableError("Cannot lay out a table with no cells.")

    column_widths = dict(
        zip(range(section.left, section.right + 1), distribute(area.width, section.columns))
    )
    row_heights = dict(
        zip(range(section.top, section.bottom + 1), distribute(area.height, section.rows))
    )

    column_offsets = {}
    x = area.x
    for column, width in column_widths.items():
        column_offsets[column] = x
        x += width

    row_offsets = {}
    y = area.y
    for row, height in row_heights.items():
        row_offsets[row] = y
        y += height

    cells = []
    for cell in sorted(table, key=lambda c: (c.position.column, c.position.row)):
        column, row = cell.position.column, cell.position.row
        rect = Rect(
            column_offsets[column],
            row_offsets[row],
            column_widths[column] + (0 if column == section.right else 1),
            row_heights[row] + (0 if row == section.bottom else 1),
        )
        cells.append(CellLayout(cell, rect, Corners(), place_content(cell, rect, backend)))

    return TableLayout(section, area.size, column_widths, row_heights, cells)


def draw_layout(backend: RenderBackend, layout: TableLayout, border: Colour) -> None:
    """
    Draw a laid out table: each cell's background and border followed by its
    content.
    """
    for cell_layout in layout.cells:
        backend.draw_rounded_rect(
            cell_layout.rect,
            cell_layout.cell.background,
            cell_layout.corners,
            border,
        )
        if cell_layout.content_rect is not None and cell_layout.cell.content is not None:
            cell_layout.cell.content.draw(backend, cell_layout.content_rect)
