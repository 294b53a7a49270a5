"""
Default settings for newly created cells and contents.

A :py:class:`TableConfig` is given to each :py:class:`~table_grid.grid.Grid`
when it is constructed and is consulted whenever the grid creates a cell or
content without explicit settings. Configurations are immutable; use
:py:func:`dataclasses.replace` to derive a modified one.

.. autoclass:: TableConfig
    :members:
"""

from dataclasses import dataclass

from table_grid.geometry import Size

from table_grid.style import Alignment, Colour, Font, CENTRE_LEFT, WHITE, BLACK


@dataclass(frozen=True)
class TableConfig:
    cell_size: Size = Size(100, 28)
    """Size given to new cells."""

    background: Colour = WHITE
    """Background colour given to new cells."""

    alignment: Alignment = CENTRE_LEFT
    """Content alignment given to new cells."""

    font: Font = Font()
    text_colour: Colour = BLACK
    """Font and colour used by new text and date contents."""

    date_format: str = "d"
    culture: str = "invariant"
    """
    Formatting used by new date contents. See
    :py:class:`~table_grid.content.DateContent`.
    """

    corner_radius: int = 5
    """Radius of the four outer corners of the rendered table."""

    border_colour: Colour = BLACK
    """Colour of cell borders."""

    image_format: str = "png"
    """File format used when image contents are exported alongside HTML."""
