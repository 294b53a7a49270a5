"""
Row and column views are live projections of a single row or column of a
:py:class:`~table_grid.grid.Grid`. They are obtained using
:py:meth:`~table_grid.grid.Grid.get_row` and
:py:meth:`~table_grid.grid.Grid.get_column`.

A view subscribes to its grid's change notifications so that its snapshot of
cells is refreshed whenever the grid changes. Views must be disposed of when
no longer required, most conveniently by using them as context managers::

    with grid.get_row(0) as row:
        row.set_background(Colour.parse("#eeeeee"))

.. autoclass:: RowView
    :members:
    :inherited-members:

.. autoclass:: ColumnView
    :members:
    :inherited-members:
"""

from typing import Optional, List, Tuple, Iterator, Any, TYPE_CHECKING

from table_grid.geometry import Size

from table_grid.style import Alignment, Colour, Font

from table_grid.content import TextualContent

from table_grid.cell import Cell

from table_grid.exceptions import DisposedViewError

if TYPE_CHECKING:
    from table_grid.grid import Grid, StructureChange


class CellView:
    """
    Base class for views of the cells sharing one coordinate.

    Parameters
    ==========
    grid : :py:class:`~table_grid.grid.Grid`
    index : int
        The row or column number viewed.
    """

    def __init__(self, grid: "Grid", index: int) -> None:
        self.grid = grid
        self.index = index
        self._cells: Optional[List[Cell]] = []
        self._subscription = grid.subscribe(self._on_structure_changed)
        self.refresh()

    def _coordinates(self, cell: Cell) -> Tuple[int, int]:
        """Return the (viewed, sorted) coordinates of a cell."""
        raise NotImplementedError()

    def _on_structure_changed(self, change: "StructureChange") -> None:
        self.refresh()

    def refresh(self) -> None:
        """Re-read the matching cells from the grid."""
        if self._cells is None:
            raise DisposedViewError(f"{self!r} has been disposed")
        self._cells = sorted(
            (cell for cell in self.grid if self._coordinates(cell)[0] == self.index),
            key=lambda cell: self._coordinates(cell)[1],
        )

    def dispose(self) -> None:
        """
        Stop tracking changes to the grid. Any further use of the view raises
        :py:exc:`~table_grid.exceptions.DisposedViewError`.
        """
        if self._cells is not None:
            self._subscription.unsubscribe()
            self._cells = None

    @property
    def disposed(self) -> bool:
        return self._cells is None

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """The cells in this view, in order."""
        if self._cells is None:
            raise DisposedViewError(f"{self!r} has been disposed")
        return tuple(self._cells)

    def __enter__(self) -> "CellView":
        return self

    def __exit__(self, *_: Any) -> None:
        self.dispose()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Optional[Cell]:
        """
        Return the cell at the given column (for rows) or row (for columns),
        or None if there is none.
        """
        for cell in self.cells:
            if self._coordinates(cell)[1] == index:
                return cell
        return None

    def set_background(self, colour: Colour) -> None:
        for cell in self.cells:
            cell.background = colour

    def set_alignment(self, alignment: Alignment) -> None:
        for cell in self.cells:
            cell.alignment = alignment

    def set_font(self, font: Font) -> None:
        """Set the font of every text (or date) content in this view."""
        for cell in self.cells:
            if isinstance(cell.content, TextualContent):
                cell.content.font = font

    def set_text_colour(self, colour: Colour) -> None:
        """Set the colour of every text (or date) content in this view."""
        for cell in self.cells:
            if isinstance(cell.content, TextualContent):
                cell.content.colour = colour

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index})"


class RowView(CellView):
    """The cells in one row of a grid, sorted by column."""

    def _coordinates(self, cell: Cell) -> Tuple[int, int]:
        return (cell.position.row, cell.position.column)

    def __enter__(self) -> "RowView":
        return self

    @property
    def height(self) -> int:
        """
        The height of the tallest cell in the row. Setting this resizes every
        cell in the row.
        """
        return max((cell.size.height for cell in self.cells), default=0)

    @height.setter
    def height(self, height: int) -> None:
        for cell in self.cells:
            cell.size = Size(cell.size.width, height)


class ColumnView(CellView):
    """The cells in one column of a grid, sorted by row."""

    def _coordinates(self, cell: Cell) -> Tuple[int, int]:
        return (cell.position.column, cell.position.row)

    def __enter__(self) -> "ColumnView":
        return self

    @property
    def width(self) -> int:
        """
        The width of the widest cell in the column. Setting this resizes every
        cell in the column.
        """
        return max((cell.size.width for cell in self.cells), default=0)

    @width.setter
    def width(self, width: int) -> None:
        for cell in self.cells:
            cell.size = Size(width, cell.size.height)
