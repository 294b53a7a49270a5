"""
A :py:class:`Grid` is a sparse collection of :py:class:`~table_grid.cell.Cell`
objects, each addressed by a :py:class:`~table_grid.geometry.Position`.

.. autoclass:: Grid
    :members:

The cells of a grid are held in a :py:class:`CellCollection` which checks
every cell added to it and notifies the grid's subscribers of each change:

.. autoclass:: CellCollection
    :members:

Subscribers are called with a :py:class:`StructureChange` describing the
change:

.. autoclass:: StructureChange
    :members:

.. autoclass:: Subscription
    :members:
"""

from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Tuple,
    Type,
    Union,
    overload,
)

from contextlib import contextmanager

from dataclasses import dataclass

from table_grid.geometry import Position, Size, Section

from table_grid.style import Alignment, Colour

from table_grid.config import TableConfig

from table_grid.content import content_from_value

from table_grid.cell import Cell

from table_grid.views import RowView, ColumnView

from table_grid.exceptions import TableMismatchError, UninitializedCellError


@dataclass(frozen=True)
class StructureChange:
    """
    Describes a change to the structure of a grid. When a single cell was
    moved, the cell and its old and new positions are given. For all other
    changes (including cells being added or removed and any bulk update) only
    the grid is given.
    """

    grid: "Grid"
    cell: Optional[Cell] = None
    old_position: Optional[Position] = None
    new_position: Optional[Position] = None


class Subscription:
    """
    A handle for a callback subscribed to a grid's structure changes. May be
    used as a context manager, unsubscribing on exit.
    """

    def __init__(self, grid: "Grid", callback: Callable[[StructureChange], Any]):
        self.grid = grid
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop calling the callback. Does nothing if already unsubscribed."""
        if self._active:
            self._active = False
            self.grid._subscriptions.remove(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *_: Any) -> None:
        self.unsubscribe()


class CellCollection(MutableSequence[Cell]):
    """
    The (observed) list of cells in a grid. The order of cells is not
    significant.

    Every cell added must have been created by the owning grid's
    :py:meth:`Grid.create_cell`: all new cells are checked before the
    collection is modified so a rejected change leaves the collection
    untouched.
    """

    def __init__(self, grid: "Grid") -> None:
        self._grid = grid
        self._cells: List[Cell] = []

    @overload
    def __getitem__(self, index: int) -> Cell:
        ...

    @overload
    def __getitem__(self, index: slice) -> List[Cell]:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Cell, List[Cell]]:
        return self._cells[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            value = list(value)
            self._grid._validate(value)
        else:
            self._grid._validate([value])
        self._cells[index] = value
        self._grid._changed()

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._cells[index]
        self._grid._changed()

    def __len__(self) -> int:
        return len(self._cells)

    def insert(self, index: int, value: Cell) -> None:
        self._grid._validate([value])
        self._cells.insert(index, value)
        self._grid._changed()

    def extend(self, values: Iterable[Cell]) -> None:
        """Append several cells, notifying subscribers once."""
        values = list(values)
        self._grid._validate(values)
        self._cells.extend(values)
        self._grid._changed()

    def clear(self) -> None:
        """Remove all cells, notifying subscribers once."""
        self._cells.clear()
        self._grid._changed()

    def __iadd__(self, values: Iterable[Cell]) -> "CellCollection":
        self.extend(values)
        return self

    def _replace_all(self, values: List[Cell]) -> None:
        self._cells[:] = values

    def __repr__(self) -> str:
        return f"CellCollection({self._cells!r})"


class Grid:
    """
    A sparse grid of cells.

    Parameters
    ==========
    config : :py:class:`~table_grid.config.TableConfig`
        The defaults used for new cells and contents.

    Duplicate positions are permitted but are best avoided: lookups by
    position return the first matching cell found.
    """

    cell_class: Type[Cell] = Cell
    """The type of cell created by :py:meth:`create_cell`."""

    def __init__(self, config: Optional[TableConfig] = None) -> None:
        self.config = config if config is not None else TableConfig()
        self._cells = CellCollection(self)
        self._subscriptions: List[Subscription] = []
        self._bulk_depth = 0
        self._pending_change = False

        self.corner_radius = self.config.corner_radius
        """The radius of the four outer corners of the rendered table."""

        self.border_colour = self.config.border_colour
        """The colour of the cell borders."""

    # Cell collection

    @property
    def cells(self) -> CellCollection:
        return self._cells

    @cells.setter
    def cells(self, cells: Iterable[Cell]) -> None:
        self.load(cells)

    def load(self, cells: Iterable[Cell]) -> None:
        """
        Replace every cell in this grid. All cells are checked before any
        change is made and subscribers are notified once.
        """
        cells = list(cells)
        self._validate(cells)
        self._cells._replace_all(cells)
        self._changed()

    def add_cells(self, cells: Iterable[Cell]) -> None:
        """Add several cells at once, notifying subscribers once."""
        self._cells.extend(cells)

    def _validate(self, cells: Iterable[Any]) -> None:
        for cell in cells:
            if not isinstance(cell, Cell) or getattr(cell, "_parent", None) is None:
                raise UninitializedCellError(
                    f"{type(cell).__name__} object was not created by "
                    f"Grid.create_cell"
                )
            if cell.parent is not self:
                raise TableMismatchError(cell, self)

    # Change notification

    def subscribe(self, callback: Callable[[StructureChange], Any]) -> Subscription:
        """
        Call ``callback`` with a :py:class:`StructureChange` whenever cells
        are added, removed or moved.
        """
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    @property
    def subscribers(self) -> List[Callable[[StructureChange], Any]]:
        """The callbacks currently subscribed to this grid."""
        return [subscription.callback for subscription in self._subscriptions]

    @contextmanager
    def bulk_update(self) -> Iterator["Grid"]:
        """
        Context manager which defers change notifications until the
        (outermost) block exits, at which point subscribers are notified once
        if anything changed. Notification also takes place if the block is
        left by an exception.
        """
        self._bulk_depth += 1
        try:
            yield self
        finally:
            self._bulk_depth -= 1
            if self._bulk_depth == 0 and self._pending_change:
                self._pending_change = False
                self._notify(StructureChange(self))

    def _changed(self) -> None:
        self._notify(StructureChange(self))

    def _cell_position_changed(
        self, cell: Cell, old_position: Position, new_position: Position
    ) -> None:
        self._notify(StructureChange(self, cell, old_position, new_position))

    def _notify(self, change: StructureChange) -> None:
        if self._bulk_depth > 0:
            self._pending_change = True
            return
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(change)

    # Construction

    def create_cell(
        self,
        position: Position,
        content: Any = None,
        size: Optional[Size] = None,
        alignment: Optional[Alignment] = None,
        background: Optional[Colour] = None,
    ) -> Cell:
        """
        Create a new cell belonging to this grid. The cell is *not* added to
        the grid.

        Content may be any value accepted by
        :py:func:`~table_grid.content.content_from_value` (e.g. a string) or
        None for an empty cell. Unspecified settings are taken from the grid's
        :py:attr:`config`.
        """
        return self.cell_class(
            self,
            position,
            content_from_value(content, self.config) if content is not None else None,
            size if size is not None else self.config.cell_size,
            alignment if alignment is not None else self.config.alignment,
            background if background is not None else self.config.background,
        )

    # Queries

    def bounding_region(self) -> Optional[Section]:
        """
        Return the smallest :py:class:`~table_grid.geometry.Section` containing
        every cell, or None if the grid is empty.
        """
        if len(self._cells) == 0:
            return None

        first = self._cells[0].position
        left = right = first.column
        top = bottom = first.row
        for cell in self._cells:
            column, row = cell.position.column, cell.position.row
            left = min(left, column)
            right = max(right, column)
            top = min(top, row)
            bottom = max(bottom, row)
        return Section(left, top, right, bottom)

    def get_row(self, row: int) -> RowView:
        """Return a new view of the cells in the given row."""
        return RowView(self, row)

    def get_column(self, column: int) -> ColumnView:
        """Return a new view of the cells in the given column."""
        return ColumnView(self, column)

    def row_height(self, row: int) -> int:
        """The height of the tallest cell in a row (or zero if it is empty)."""
        return max(
            (cell.size.height for cell in self._cells if cell.position.row == row),
            default=0,
        )

    def column_width(self, column: int) -> int:
        """The width of the widest cell in a column (or zero if it is empty)."""
        return max(
            (
                cell.size.width
                for cell in self._cells
                if cell.position.column == column
            ),
            default=0,
        )

    # Indexing

    def _find(self, position: Position) -> Optional[int]:
        for index, cell in enumerate(self._cells):
            if cell.position == position:
                return index
        return None

    def __getitem__(self, key: Union[Position, Tuple[int, int]]) -> Optional[Cell]:
        """Return the cell at a position, or None if there is no cell there."""
        index = self._find(_to_position(key))
        return self._cells[index] if index is not None else None

    def __setitem__(self, key: Union[Position, Tuple[int, int]], cell: Cell) -> None:
        """
        Place a cell at a position, replacing any cell already there. The
        cell's :py:attr:`~table_grid.cell.Cell.position` is updated to match.
        """
        position = _to_position(key)
        self._validate([cell])

        with self.bulk_update():
            index = self._find(position)
            in_grid = any(existing is cell for existing in self._cells)
            cell.position = position
            if index is not None and self._cells[index] is not cell:
                if in_grid:
                    del self._cells[index]
                else:
                    self._cells[index] = cell
            elif not in_grid:
                self._cells.append(cell)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(list(self._cells))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._cells)} cells)"


def _to_position(key: Union[Position, Tuple[int, int]]) -> Position:
    if isinstance(key, Position):
        return key
    column, row = key
    return Position(column, row)
