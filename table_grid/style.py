"""
Styling primitives shared by cells and their contents.

.. autoclass:: Colour
    :members:

.. autoclass:: Font
    :members:

Content is positioned within a cell according to an :py:class:`Alignment`:

.. autoclass:: Alignment
    :members:

.. autoclass:: HorizontalAlign
    :members:

.. autoclass:: VerticalAlign
    :members:

The nine common alignments are available as module-level constants:
``TOP_LEFT``, ``TOP_CENTRE``, ``TOP_RIGHT``, ``CENTRE_LEFT``, ``CENTRE``,
``CENTRE_RIGHT``, ``BOTTOM_LEFT``, ``BOTTOM_CENTRE`` and ``BOTTOM_RIGHT``.
"""

from typing import Optional, Tuple

from dataclasses import dataclass

from enum import Enum, auto

from PIL import ImageColor

from table_grid.geometry import Position, Size


@dataclass(frozen=True)
class Colour:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def parse(cls, value: str) -> "Colour":
        """
        Parse any colour string understood by Pillow, e.g. ``"#ff0000"``,
        ``"rgb(0, 128, 0)"`` or ``"white"``. Raises :py:exc:`ValueError` for
        unrecognised colours.
        """
        if value.strip().lower() == "transparent":
            return TRANSPARENT
        red, green, blue, alpha = ImageColor.getcolor(value, "RGBA")
        return cls(red, green, blue, alpha)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def to_css(self) -> str:
        if self.alpha == 255:
            return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        else:
            return (
                f"rgba({self.red}, {self.green}, {self.blue}, "
                f"{round(self.alpha / 255, 3)})"
            )


TRANSPARENT = Colour(0, 0, 0, 0)
WHITE = Colour(255, 255, 255)
BLACK = Colour(0, 0, 0)


@dataclass(frozen=True)
class Font:
    """
    A font description. The name may be a font file name or path understood
    by the rendering backend, or None to use the backend's default face.
    """

    name: Optional[str] = None
    size: int = 15


class HorizontalAlign(Enum):
    left = auto()
    centre = auto()
    right = auto()


class VerticalAlign(Enum):
    top = auto()
    centre = auto()
    bottom = auto()


@dataclass(frozen=True)
class Alignment:
    """
    Where content is placed within the bounds of its cell.
    """

    horizontal: HorizontalAlign = HorizontalAlign.left
    vertical: VerticalAlign = VerticalAlign.centre

    margin: Size = Size(2, 2)
    """
    The gap left between content aligned against an edge and that edge.
    Ignored on centred axes.
    """

    def align(self, container: Size, item: Size) -> Position:
        """
        Return the offset of an item of the given size within a container of
        the given size.
        """
        return Position(
            _align_axis(
                self.horizontal.name,
                container.width - 1,
                item.width,
                self.margin.width,
            ),
            _align_axis(
                self.vertical.name,
                container.height - 1,
                item.height,
                self.margin.height,
            ),
        )


def _align_axis(anchor: str, container: int, item: int, margin: int) -> int:
    if anchor in ("left", "top"):
        return margin
    elif anchor == "centre":
        return int(container / 2 - item / 2)
    else:
        return container - (item + margin)


TOP_LEFT = Alignment(HorizontalAlign.left, VerticalAlign.top)
TOP_CENTRE = Alignment(HorizontalAlign.centre, VerticalAlign.top)
TOP_RIGHT = Alignment(HorizontalAlign.right, VerticalAlign.top)
CENTRE_LEFT = Alignment(HorizontalAlign.left, VerticalAlign.centre)
CENTRE = Alignment(HorizontalAlign.centre, VerticalAlign.centre)
CENTRE_RIGHT = Alignment(HorizontalAlign.right, VerticalAlign.centre)
BOTTOM_LEFT = Alignment(HorizontalAlign.left, VerticalAlign.bottom)
BOTTOM_CENTRE = Alignment(HorizontalAlign.centre, VerticalAlign.bottom)
BOTTOM_RIGHT = Alignment(HorizontalAlign.right, VerticalAlign.bottom)
