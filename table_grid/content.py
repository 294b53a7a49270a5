r"""
The content of a cell is described by a :py:class:`TableContent` object. The
following content types are provided:

.. autoclass:: TextContent
    :members:

.. autoclass:: DateContent
    :members:

.. autoclass:: ImageContent
    :members:

Nested tables are provided by :py:class:`table_grid.sub_table.SubTableContent`.

Custom content types may be defined by subclassing :py:class:`TableContent`:

.. autoclass:: TableContent
    :members:

Text-like contents share a common base class which the row and column views
use to apply fonts and colours in bulk:

.. autoclass:: TextualContent
    :members:

Arbitrary Python values can be converted into a suitable content type using:

.. autofunction:: content_from_value
"""

from typing import Optional, Union, Mapping, NamedTuple, Sequence, Any

from pathlib import Path

from datetime import date, datetime

from PIL import Image

from table_grid.geometry import Size, Rect

from table_grid.style import Colour, Font, BLACK

from table_grid.config import TableConfig

from table_grid.exceptions import ValidationError

from table_grid.renderer.backend import RenderBackend


class TableContent:
    """
    Base class for all cell contents.

    Contents are not owned by the cells which display them: the same content
    object may be shared by several cells.
    """

    def measure(self, backend: RenderBackend, available: Optional[Size] = None) -> Size:
        """
        Return the size of this content in pixels.

        Parameters
        ==========
        backend : :py:class:`~table_grid.renderer.backend.RenderBackend`
            The backend used to measure text etc.
        available : :py:class:`~table_grid.geometry.Size` or None
            The space available to the content (typically the size of its
            cell). Text wraps to the available width. When None, the content's
            natural, unconstrained size is returned.
        """
        raise NotImplementedError()

    def draw(self, backend: RenderBackend, rect: Rect) -> None:
        """Draw this content into the given rectangle."""
        raise NotImplementedError()

    def to_html(self, resource_dir: Optional[Path] = None) -> str:
        """
        Return a HTML snippet for this content. The built-in content types are
        rendered by :py:mod:`table_grid.renderer.html`; custom content types
        must implement this to be exported as HTML.
        """
        raise NotImplementedError()


class TextualContent(TableContent):
    """
    Base class for contents which are displayed as a string of text.
    """

    font: Font
    colour: Colour

    @property
    def text(self) -> str:
        """The text to be displayed."""
        raise NotImplementedError()

    def measure(self, backend: RenderBackend, available: Optional[Size] = None) -> Size:
        wrap_width = available.width if available is not None else None
        return backend.measure_text(self.text, self.font, wrap_width)

    def draw(self, backend: RenderBackend, rect: Rect) -> None:
        backend.draw_text(self.text, self.font, self.colour, rect)


class TextContent(TextualContent):
    """Plain text."""

    def __init__(
        self, text: str = "", font: Font = Font(), colour: Colour = BLACK
    ) -> None:
        self._text = text
        self.font = font
        self.colour = colour

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    def __repr__(self) -> str:
        return f"TextContent({self._text!r})"


class _Culture(NamedTuple):
    short_date: str
    long_date: str
    month_names: Optional[Sequence[str]] = None
    day_names: Optional[Sequence[str]] = None


CULTURES: Mapping[str, _Culture] = {
    "invariant": _Culture("%m/%d/%Y", "%A, %d %B %Y"),
    "en-US": _Culture("%-m/%-d/%Y", "%A, %B %-d, %Y"),
    "en-GB": _Culture("%d/%m/%Y", "%A, %d %B %Y"),
    "de-DE": _Culture(
        "%d.%m.%Y",
        "%A, %-d. %B %Y",
        [
            "Januar",
            "Februar",
            "März",
            "April",
            "Mai",
            "Juni",
            "Juli",
            "August",
            "September",
            "Oktober",
            "November",
            "Dezember",
        ],
        [
            "Montag",
            "Dienstag",
            "Mittwoch",
            "Donnerstag",
            "Freitag",
            "Samstag",
            "Sonntag",
        ],
    ),
    "fr-FR": _Culture(
        "%d/%m/%Y",
        "%A %-d %B %Y",
        [
            "janvier",
            "février",
            "mars",
            "avril",
            "mai",
            "juin",
            "juillet",
            "août",
            "septembre",
            "octobre",
            "novembre",
            "décembre",
        ],
        ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"],
    ),
    "ja-JP": _Culture("%Y/%m/%d", "%Y年%-m月%-d日"),
}
"""
The cultures known to :py:class:`DateContent`, mapping to their short and long
date patterns and (where not English) month and day names.
"""


def format_date(value: Union[date, datetime], date_format: str, culture: str) -> str:
    """
    Format a date or datetime.

    The format "d" selects the culture's short date pattern and "D" its long
    date pattern. Any other format is treated as a :py:meth:`~datetime.strftime`
    pattern, with month and day names (``%B`` and ``%A``) given in the
    culture's language. ``%-d`` and ``%-m`` give the day and month without
    zero padding.
    """
    try:
        info = CULTURES[culture]
    except KeyError:
        raise ValidationError(f"Unknown culture {culture!r}")

    if date_format == "d":
        pattern = info.short_date
    elif date_format == "D":
        pattern = info.long_date
    else:
        pattern = date_format

    if info.month_names is not None:
        pattern = pattern.replace("%B", info.month_names[value.month - 1])
    if info.day_names is not None:
        pattern = pattern.replace("%A", info.day_names[value.weekday()])
    pattern = pattern.replace("%-d", str(value.day)).replace("%-m", str(value.month))

    return value.strftime(pattern)


class DateContent(TextualContent):
    """
    A date (or date and time) displayed using a culture-specific format. See
    :py:func:`format_date` for the meaning of ``date_format`` and ``culture``.
    """

    def __init__(
        self,
        value: Union[date, datetime],
        date_format: str = "d",
        culture: str = "invariant",
        font: Font = Font(),
        colour: Colour = BLACK,
    ) -> None:
        if culture not in CULTURES:
            raise ValidationError(f"Unknown culture {culture!r}")
        self.value = value
        self.date_format = date_format
        self.culture = culture
        self.font = font
        self.colour = colour

    @property
    def text(self) -> str:
        return format_date(self.value, self.date_format, self.culture)

    def __repr__(self) -> str:
        return f"DateContent({self.value!r}, {self.date_format!r}, {self.culture!r})"


class ImageContent(TableContent):
    """
    An image. The size the image is drawn at (:py:attr:`render_size`) may be
    changed independently of the size of the source image
    (:py:attr:`natural_size`).
    """

    def __init__(self, image: Image.Image, image_format: str = "png") -> None:
        self.image = image
        self.render_size = self.natural_size
        self.image_format = image_format.lstrip(".").lower()
        """The file format used when this image is exported with HTML."""

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "ImageContent":
        image = Image.open(filename)
        image.load()
        return cls(image)

    @property
    def natural_size(self) -> Size:
        """The size of the source image."""
        width, height = self.image.size
        return Size(width, height)

    def measure(self, backend: RenderBackend, available: Optional[Size] = None) -> Size:
        return self.render_size

    def draw(self, backend: RenderBackend, rect: Rect) -> None:
        backend.draw_image(
            self.image,
            Rect(rect.x, rect.y, self.render_size.width, self.render_size.height),
        )

    def stretch_to_size(self, size: Size) -> None:
        """
        Stretch the rendered image to fill a cell of the given size, leaving
        room for the cell's border.
        """
        self.render_size = Size(max(size.width - 2, 0), max(size.height - 2, 0))

    def _aspect_source(self) -> Size:
        # A collapsed render size falls back to the source image's aspect ratio
        current = self.render_size
        if current.width == 0 or current.height == 0:
            current = self.natural_size
        if current.width == 0 or current.height == 0:
            raise ValidationError("Cannot scale an image with no area")
        return current

    def scale_to_width(self, width: int) -> None:
        """Scale the rendered image to the given width, keeping its aspect ratio."""
        current = self._aspect_source()
        self.render_size = Size(width, int((width / current.width) * current.height))

    def scale_to_height(self, height: int) -> None:
        """Scale the rendered image to the given height, keeping its aspect ratio."""
        current = self._aspect_source()
        self.render_size = Size(
            int((height / current.height) * current.width), height
        )

    def __repr__(self) -> str:
        return f"ImageContent(<{self.natural_size.width}x{self.natural_size.height}>)"


def content_from_value(
    value: Any, config: Optional[TableConfig] = None
) -> TableContent:
    """
    Wrap an arbitrary value in a suitable content type:

    * :py:class:`TableContent` objects are returned unchanged.
    * :py:class:`PIL.Image.Image` objects become :py:class:`ImageContent`.
    * :py:class:`~datetime.date` and :py:class:`~datetime.datetime` objects
      become :py:class:`DateContent`.
    * Everything else becomes a :py:class:`TextContent` containing ``str(value)``.

    New contents take their font, colour and formats from ``config`` when
    given.
    """
    if isinstance(value, TableContent):
        return value

    if config is None:
        config = TableConfig()

    if isinstance(value, Image.Image):
        return ImageContent(value, config.image_format)
    elif isinstance(value, (date, datetime)):
        return DateContent(
            value, config.date_format, config.culture, config.font, config.text_colour
        )
    else:
        return TextContent(str(value), config.font, config.text_colour)
