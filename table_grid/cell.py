"""
The cells which make up a :py:class:`~table_grid.grid.Grid`.

Cells are always created by :py:meth:`~table_grid.grid.Grid.create_cell` and
belong to the grid which created them for their whole lifetime.

.. autoclass:: Cell
    :members:
"""

from typing import Optional, TYPE_CHECKING

from table_grid.geometry import Position, Size

from table_grid.style import Alignment, Colour

from table_grid.content import TableContent

from table_grid.exceptions import ValidationError

if TYPE_CHECKING:
    from table_grid.grid import Grid


class Cell:
    """
    A single cell in a grid.

    Moving a cell (by assigning :py:attr:`position`) notifies its grid so that
    any open row and column views are refreshed. Changing any other attribute
    does not.
    """

    def __init__(
        self,
        parent: "Grid",
        position: Position,
        content: Optional[TableContent],
        size: Size,
        alignment: Alignment,
        background: Colour,
    ) -> None:
        self._parent = parent
        self._position = position
        self._size = _check_size(size)

        self.content = content
        """
        The content displayed in this cell, or None for an empty (filler)
        cell. Contents may be shared between cells.
        """

        self.alignment = alignment
        self.background = background

    @property
    def parent(self) -> "Grid":
        """The grid this cell belongs to. This never changes."""
        return self._parent

    @property
    def position(self) -> Position:
        return self._position

    @position.setter
    def position(self, value: Position) -> None:
        old = self._position
        self._position = value
        self._parent._cell_position_changed(self, old, value)

    @property
    def size(self) -> Size:
        """The size of this cell in pixels, including its border."""
        return self._size

    @size.setter
    def size(self, value: Size) -> None:
        self._size = _check_size(value)

    def reset_settings(self, reset_size: bool = False) -> None:
        """
        Restore this cell's background (and, optionally, its size) to the
        defaults configured for its grid.
        """
        config = self._parent.config
        self.background = config.background
        if reset_size:
            self.size = config.cell_size

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"({self._position.column}, {self._position.row}), "
            f"{self.content!r})"
        )


def _check_size(size: Size) -> Size:
    if size.width < 0 or size.height < 0:
        raise ValidationError(f"Cell sizes cannot be negative (got {size})")
    return size
