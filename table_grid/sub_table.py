"""
Tables may be nested inside the cells of other tables using
:py:class:`SubTableContent`, which is both a cell content and a
:py:class:`~table_grid.grid.Grid` in its own right::

    sub_table = SubTableContent()
    sub_table.add_cells([
        sub_table.create_cell(Position(0, 0), "top"),
        sub_table.create_cell(Position(0, 1), "bottom"),
    ])
    cell = grid.create_cell(Position(0, 0), sub_table)

The columns and rows of a sub table share out the space available to the
table evenly (see :py:func:`~table_grid.renderer.layout.distribute`) rather
than being sized by their cells.

.. autoclass:: SubTableContent
    :members:

.. autoclass:: SubTableCell
    :members:
"""

from typing import Optional

from table_grid.geometry import Size, Rect

from table_grid.config import TableConfig

from table_grid.content import TableContent

from table_grid.cell import Cell

from table_grid.grid import Grid

from table_grid.renderer.backend import RenderBackend

from table_grid.renderer.layout import layout_sub_table, draw_layout


class SubTableCell(Cell):
    """The type of cell held by a :py:class:`SubTableContent`."""


class SubTableContent(Grid, TableContent):
    """
    A table nested within a cell.

    Parameters
    ==========
    table_size : :py:class:`~table_grid.geometry.Size` or None
        The size of the table in pixels. If None, the table is automatically
        sized to fill the cell containing it.
    config : :py:class:`~table_grid.config.TableConfig` or None
        Defaults for cells created in this table.
    """

    cell_class = SubTableCell

    def __init__(
        self, table_size: Optional[Size] = None, config: Optional[TableConfig] = None
    ) -> None:
        super().__init__(config)
        self.table_size = table_size if table_size is not None else Size(0, 0)
        self.auto_size = table_size is None
        """
        If True, the table fills the cell containing it and
        :py:attr:`table_size` is ignored.
        """

    @classmethod
    def for_cell(cls, cell: Cell, config: Optional[TableConfig] = None) -> "SubTableContent":
        """Create a fixed-size sub table the same size as the given cell."""
        return cls(cell.size, config)

    def measure(self, backend: RenderBackend, available: Optional[Size] = None) -> Size:
        if self.auto_size and available is not None:
            return available
        return self.table_size

    def draw(self, backend: RenderBackend, rect: Rect) -> None:
        if len(self) == 0:
            return
        if self.auto_size:
            area = rect
        else:
            area = Rect(rect.x, rect.y, self.table_size.width, self.table_size.height)
        draw_layout(backend, layout_sub_table(self, area, backend), self.border_colour)

    def __repr__(self) -> str:
        size = "auto" if self.auto_size else f"{self.table_size.width}x{self.table_size.height}"
        return f"SubTableContent({size}, {len(self)} cells)"
