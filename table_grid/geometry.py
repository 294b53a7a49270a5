"""
Simple value types describing positions in a table and pixel geometry.

Grid coordinates are given as :py:class:`Position` ``(column, row)`` pairs and
may be negative or non-contiguous. Pixel coordinates are always integers.

.. autoclass:: Position
    :members:

.. autoclass:: Size
    :members:

.. autoclass:: Rect
    :members:

.. autoclass:: Section
    :members:

.. autoclass:: Corners
    :members:
"""

from typing import Iterator, Any

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A logical cell address in a grid."""

    column: int
    row: int


@dataclass(frozen=True)
class Size:
    """A size in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """
    A rectangle in pixels. The rectangle's border occupies the pixel columns
    ``x`` and ``x + width - 1`` (and likewise for rows).
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        """The last pixel column covered by this rectangle."""
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        """The last pixel row covered by this rectangle."""
        return self.y + self.height - 1


@dataclass(frozen=True)
class Section:
    """
    An inclusive rectangular region of a grid, in grid coordinates.
    """

    left: int
    top: int
    right: int
    bottom: int

    @property
    def columns(self) -> int:
        """Number of columns spanned by this section."""
        return self.right - self.left + 1

    @property
    def rows(self) -> int:
        """Number of rows spanned by this section."""
        return self.bottom - self.top + 1

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in this section, column by column."""
        for column in range(self.left, self.right + 1):
            for row in range(self.top, self.bottom + 1):
                yield Position(column, row)

    def __contains__(self, position: Any) -> bool:
        return (
            isinstance(position, Position)
            and self.left <= position.column <= self.right
            and self.top <= position.row <= self.bottom
        )


@dataclass(frozen=True)
class Corners:
    """The radius, in pixels, of each of the four corners of a rectangle."""

    top_left: int = 0
    top_right: int = 0
    bottom_left: int = 0
    bottom_right: int = 0

    @classmethod
    def uniform(cls, radius: int) -> "Corners":
        return cls(radius, radius, radius, radius)
