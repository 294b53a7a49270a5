"""
Functions for populating a :py:class:`~table_grid.grid.Grid` from delimited
text or from arbitrary Python objects.

Delimited text
==============

.. autoclass:: DataFormat
    :members:

.. autofunction:: load_delimited

.. autofunction:: load_file

Objects
=======

Objects are converted into rows of cells by an *extraction function* which
returns the values to display for a given object, for example::

    load_from_objects(grid, people, lambda person: [person.name, person.age])

A suitable extraction function can be built from a list of attribute names
using :py:func:`properties`::

    load_from_objects(grid, people, properties("name", "age"))

.. autofunction:: load_from_objects

.. autofunction:: properties
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, TextIO, Union

import csv

import io

from enum import Enum

from operator import attrgetter

from pathlib import Path

from table_grid.geometry import Position

from table_grid.content import TextContent

from table_grid.cell import Cell

from table_grid.grid import Grid


class DataFormat(Enum):
    """Supported delimited text formats. Values are the field delimiters."""

    csv = ","
    tsv = "\t"


def _clean_field(field: str) -> str:
    return "\n".join(line.strip() for line in field.splitlines())


def load_delimited(
    grid: Grid, source: Union[str, TextIO], format: DataFormat = DataFormat.csv
) -> List[Cell]:
    """
    Replace the contents of a grid with the cells of a CSV or TSV document.

    Field ``i`` of row ``r`` becomes a :py:class:`~table_grid.content.TextContent`
    cell at ``Position(i, r)``. Leading and trailing whitespace is removed from
    every line of every field. Returns the new cells.
    """
    if isinstance(source, str):
        source = io.StringIO(source)

    cells = []
    for row_number, row in enumerate(csv.reader(source, delimiter=format.value)):
        for column_number, field in enumerate(row):
            cells.append(
                grid.create_cell(
                    Position(column_number, row_number),
                    TextContent(
                        _clean_field(field), grid.config.font, grid.config.text_colour
                    ),
                )
            )

    grid.load(cells)
    return cells


def load_file(
    grid: Grid, path: Union[str, Path], format: Optional[DataFormat] = None
) -> List[Cell]:
    """
    Load a CSV or TSV file into a grid using :py:func:`load_delimited`. When
    no format is given, files ending in ``.tsv`` or ``.tab`` are treated as TSV
    and all others as CSV.
    """
    path = Path(path)
    if format is None:
        if path.suffix.lower() in (".tsv", ".tab"):
            format = DataFormat.tsv
        else:
            format = DataFormat.csv

    with path.open(newline="", encoding="utf-8") as f:
        return load_delimited(grid, f, format)


def load_from_objects(
    grid: Grid,
    objects: Iterable[Any],
    extract: Callable[[Any], Iterable[Any]],
    start_at: Position = Position(0, 0),
) -> List[Cell]:
    """
    Add one row of cells per object to a grid.

    The values returned by ``extract`` for each object are converted into
    contents using :py:func:`~table_grid.content.content_from_value` and placed
    in consecutive columns, starting at ``start_at``. Existing cells are kept
    and subscribers are notified once. Returns the new cells.
    """
    cells = []
    for row_offset, obj in enumerate(objects):
        for column_offset, value in enumerate(extract(obj)):
            cells.append(
                grid.create_cell(
                    Position(
                        start_at.column + column_offset, start_at.row + row_offset
                    ),
                    value,
                )
            )

    grid.add_cells(cells)
    return cells


def properties(*names: str) -> Callable[[Any], Sequence[Any]]:
    """
    Return an extraction function for :py:func:`load_from_objects` which
    reads the named attributes of an object. Names may be given as separate
    arguments or as a single dot-separated string (e.g. ``"id.name.age"``).
    """
    attributes = [part for name in names for part in name.split(".") if part]
    getter = attrgetter(*attributes)

    if len(attributes) == 1:
        return lambda obj: [getter(obj)]
    else:
        return lambda obj: list(getter(obj))
