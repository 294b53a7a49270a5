"""
Tables are measured and drawn through a :py:class:`RenderBackend`. The layout
engine only ever asks a backend to measure text and to draw text, images and
(rounded) cell rectangles, so alternative rasterisers can be substituted.

.. autoclass:: RenderBackend
    :members:

The default backend draws onto a Pillow image:

.. autoclass:: PillowBackend
    :members:

.. autofunction:: load_font

.. autofunction:: wrap_text
"""

from typing import Optional, List, Callable

from functools import lru_cache

from math import ceil

from PIL import Image, ImageDraw, ImageFont

from table_grid.geometry import Size, Rect, Corners

from table_grid.style import Colour, Font


DEFAULT_FONT_FILES = [
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "arial.ttf",
]
"""Font files tried (in order) when no font name is given."""


class RenderBackend:
    """
    Base class for rendering backends.
    """

    def measure_text(
        self, text: str, font: Font, wrap_width: Optional[int] = None
    ) -> Size:
        """
        Return the size of the given text when drawn in the given font. When
        ``wrap_width`` is given, the text is word-wrapped to that width.
        """
        raise NotImplementedError()

    def draw_text(self, text: str, font: Font, colour: Colour, rect: Rect) -> None:
        """
        Draw text with its top-left corner at the rectangle's origin, wrapped
        to the rectangle's width.
        """
        raise NotImplementedError()

    def draw_image(self, image: Image.Image, rect: Rect) -> None:
        """Draw an image, resized to fill the given rectangle."""
        raise NotImplementedError()

    def draw_rounded_rect(
        self, rect: Rect, fill: Colour, corners: Corners, border: Colour
    ) -> None:
        """
        Fill a rectangle with the given colour and draw a one pixel border
        around it, rounding the corners with the given radii.
        """
        raise NotImplementedError()


@lru_cache(maxsize=None)
def load_font(font: Font) -> ImageFont.ImageFont:
    """
    Load the Pillow font for a :py:class:`~table_grid.style.Font`.

    Named fonts are loaded with :py:func:`PIL.ImageFont.truetype`. When no
    name is given (or the named font cannot be found) a common sans-serif face
    is used, falling back on Pillow's built-in font.
    """
    candidates = ([font.name] if font.name is not None else []) + DEFAULT_FONT_FILES
    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, font.size)
        except OSError:
            continue

    return ImageFont.load_default(font.size)


def wrap_text(
    text: str, text_width: Callable[[str], float], wrap_width: Optional[int]
) -> List[str]:
    """
    Greedily word-wrap text into lines no wider than ``wrap_width`` (as
    measured by ``text_width``). Existing line breaks are preserved and words
    wider than the wrap width are left on a line of their own.
    """
    lines = text.split("\n")
    if wrap_width is None:
        return lines

    out: List[str] = []
    for line in lines:
        current = ""
        for word in line.split(" "):
            candidate = word if current == "" else f"{current} {word}"
            if current != "" and text_width(candidate) > wrap_width:
                out.append(current)
                current = word
            else:
                current = candidate
        out.append(current)
    return out


class PillowBackend(RenderBackend):
    """
    A backend which draws onto a Pillow image. When no image is given, a 1x1
    scratch image is used, which is sufficient for measuring.
    """

    def __init__(self, image: Optional[Image.Image] = None) -> None:
        if image is None:
            image = Image.new("RGBA", (1, 1))
        self.image = image
        self.draw = ImageDraw.Draw(image)

    def _wrap(self, text: str, font: Font, wrap_width: Optional[int]) -> str:
        # Lines are measured by their ink extent, as in measure_text, so
        # re-wrapping at a measured width reproduces the same lines.
        pil_font = load_font(font)
        return "\n".join(
            wrap_text(
                text,
                lambda string: self.draw.textbbox((0, 0), string, font=pil_font)[2],
                wrap_width,
            )
        )

    def measure_text(
        self, text: str, font: Font, wrap_width: Optional[int] = None
    ) -> Size:
        if text == "":
            return Size(0, 0)
        left, top, right, bottom = self.draw.multiline_textbbox(
            (0, 0), self._wrap(text, font, wrap_width), font=load_font(font)
        )
        return Size(int(ceil(right)), int(ceil(bottom)))

    def draw_text(self, text: str, font: Font, colour: Colour, rect: Rect) -> None:
        self.draw.multiline_text(
            (rect.x, rect.y),
            self._wrap(text, font, rect.width),
            font=load_font(font),
            fill=colour.as_tuple(),
        )

    def draw_image(self, image: Image.Image, rect: Rect) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        resized = image.convert("RGBA").resize((rect.width, rect.height))
        self.image.paste(resized, (rect.x, rect.y), resized)

    def draw_rounded_rect(
        self, rect: Rect, fill: Colour, corners: Corners, border: Colour
    ) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return

        xy = (rect.x, rect.y, rect.right, rect.bottom)
        fill_colour = None if fill.is_transparent else fill.as_tuple()

        # NB: Pillow only supports a single radius per rectangle so the
        # largest is used for every rounded corner.
        radius = min(
            max(
                corners.top_left,
                corners.top_right,
                corners.bottom_left,
                corners.bottom_right,
            ),
            (min(rect.width, rect.height) - 1) // 2,
        )
        if radius <= 0:
            self.draw.rectangle(xy, fill=fill_colour, outline=border.as_tuple())
        else:
            self.draw.rounded_rectangle(
                xy,
                radius=radius,
                fill=fill_colour,
                outline=border.as_tuple(),
                corners=(
                    corners.top_left > 0,
                    corners.top_right > 0,
                    corners.bottom_right > 0,
                    corners.bottom_left > 0,
                ),
            )
