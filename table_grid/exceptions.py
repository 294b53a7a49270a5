from typing import Any

from dataclasses import dataclass


class TableGridError(Exception):
    """Base class for exceptions thrown by table_grid."""


@dataclass
class TableMismatchError(TableGridError):
    """
    Thrown when a cell belonging to one table is added to a different table.
    Cells are never silently moved between tables.
    """

    cell: Any
    """The cell which was being added."""

    table: Any
    """The table the cell was being added to."""

    def __str__(self) -> str:
        return (
            f"Cannot add a cell at {self.cell.position} to a table it "
            f"does not belong to."
        )


class UninitializedCellError(TableGridError):
    """
    Thrown when something other than a cell created by a table's
    ``create_cell`` method is added to a table.
    """


class ValidationError(TableGridError, ValueError):
    """Thrown when an invalid argument is given (e.g. a negative size)."""


class EmptyTableError(TableGridError, ValueError):
    """Thrown when laying out or exporting a table with no cells."""


class DisposedViewError(TableGridError):
    """Thrown when a row or column view is used after being disposed."""


class MissingResourceError(TableGridError):
    """
    Thrown when a resource needed for export (e.g. the directory images are
    written into) does not exist.
    """
