"""
This module implements :py:class:`~table_grid.grid.Grid` to HTML conversion
in the following routines:

.. autofunction:: render_html

.. autofunction:: render_table

.. autofunction:: render_css

.. autofunction:: generate_standalone_page

Cells are given inline styles setting their size, padding, background colour,
content alignment and (for the four corner cells) border radius. The
accompanying stylesheet (:py:func:`render_css`) draws the cell borders.

CSS Classes
===========

In the generated HTML, the following CSS class names are used

* Top level (``<table>``) classes:

  ``tg-table``
      Applied to each generated ``<table>``.
  ``tg-sub-table``
      Applied to tables nested within a cell.

* Cell (``<td>``) classes

  ``tg-first-column``, ``tg-first-row``
      Applied to cells in the first column (row) of the table. Only these
      cells draw a left (top) border.
  ``tg-gap``
      Applied to the empty cells generated for positions in the grid with no
      cell.

* Content classes

  ``tg-text``, ``tg-date``
      Applied to the ``<span>`` containing text and date contents.
  ``tg-image``
      Applied to the ``<img>`` of image contents.

Images
======

Image contents are written into a resource directory with randomly generated
file names and referenced from the generated HTML.
:py:exc:`~table_grid.exceptions.MissingResourceError` is thrown, before
anything is written, when a table containing images is rendered without a
(valid) resource directory.
"""  # noqa: E501

from typing import Optional, List, Mapping, MutableMapping

import html

from textwrap import indent

from pathlib import Path

from tempfile import TemporaryDirectory

from uuid import uuid4

from xml.sax.saxutils import quoteattr

from table_grid.geometry import Position, Section

from table_grid.style import HorizontalAlign, VerticalAlign

from table_grid.content import (
    TableContent,
    TextualContent,
    DateContent,
    ImageContent,
)

from table_grid.cell import Cell

from table_grid.grid import Grid

from table_grid.sub_table import SubTableContent

from table_grid.renderer.layout import corner_radii

from table_grid.renderer.templates import (
    table_css_template,
    standalone_table_template,
)

from table_grid.renderer.html_postprocessing import embed_local_images

from table_grid.exceptions import EmptyTableError, MissingResourceError


def t(tag: str, body: Optional[str] = None, **attrs: str) -> str:
    """
    A simple utility function for generating HTML tags.

    Examples::

        >>> t("foo")
        '<foo />'
        >>> t("img", src="file.png")
        '<img src="file.png"/>'
        >>> t("td", "Hello", class_="tg-gap")
        '<td class="tg-gap">Hello</td>'
        >>> t("span", "Bye", data__foo="bar")
        '<span data-foo="bar">Bye</span>'

    Note that trailing underscores (``_``) are trimmed from attribute names and
    double underscores (``__``) are replaced with hyphens.
    """

    attrs_str = " ".join(
        name.rstrip("_").replace("__", "-") + "=" + quoteattr(value)
        for name, value in attrs.items()
    )

    if body is None:
        return f"<{tag} {attrs_str}/>"
    else:
        if "\n" in body:
            body = "\n" + indent(body, "  ").rstrip() + "\n"
        return f"<{tag}{(' ' + attrs_str).rstrip()}>{body}</{tag}>"


CSS_TEXT_ALIGN: Mapping[HorizontalAlign, str] = {
    HorizontalAlign.left: "left",
    HorizontalAlign.centre: "center",
    HorizontalAlign.right: "right",
}

CSS_VERTICAL_ALIGN: Mapping[VerticalAlign, str] = {
    VerticalAlign.top: "top",
    VerticalAlign.centre: "middle",
    VerticalAlign.bottom: "bottom",
}


def _contains_images(grid: Grid) -> bool:
    for cell in grid:
        if isinstance(cell.content, ImageContent):
            return True
        elif isinstance(cell.content, SubTableContent) and _contains_images(
            cell.content
        ):
            return True
    return False


def _cells_by_position(grid: Grid) -> Mapping[Position, Cell]:
    # NB: The first cell at a position wins, matching Grid.__getitem__
    cells: MutableMapping[Position, Cell] = {}
    for cell in grid:
        cells.setdefault(cell.position, cell)
    return cells


def render_image(image: ImageContent, resource_dir: Path) -> str:
    filename = resource_dir / f"{uuid4().hex}.{image.image_format}"
    if image.image_format in ("jpg", "jpeg"):
        image.image.convert("RGB").save(filename)
    else:
        image.image.save(filename)
    return t(
        "img",
        src=filename.as_posix(),
        width=str(image.render_size.width),
        height=str(image.render_size.height),
        class_="tg-image",
    )


def render_text(content: TextualContent) -> str:
    return t(
        "span",
        html.escape(content.text).replace("\n", "<br/>"),
        class_="tg-date" if isinstance(content, DateContent) else "tg-text",
        style=(
            f"color: {content.colour.to_css()}; "
            f"font-size: {content.font.size}px;"
        ),
    )


def render_sub_table(table: SubTableContent, resource_dir: Optional[Path]) -> str:
    if table.auto_size:
        sizing = "width: 100%; height: 100%;"
    else:
        sizing = f"width: {table.table_size.width}px; height: {table.table_size.height}px;"

    section = table.bounding_region()
    rows = []
    if section is not None:
        cells = _cells_by_position(table)
        for row in range(section.top, section.bottom + 1):
            tds = []
            for column in range(section.left, section.right + 1):
                cell = cells.get(Position(column, row))
                if cell is None:
                    tds.append(t("td", "", class_="tg-gap"))
                else:
                    tds.append(
                        t(
                            "td",
                            render_content(cell.content, resource_dir),
                            style=f"background-color: {cell.background.to_css()};",
                        )
                    )
            rows.append(t("tr", "\n".join(tds)))

    return t("table", "\n".join(rows), class_="tg-sub-table", style=sizing)


def render_content(
    content: Optional[TableContent], resource_dir: Optional[Path] = None
) -> str:
    """
    Render a cell's content as HTML. Content types other than those built
    into table_grid are rendered using their
    :py:meth:`~table_grid.content.TableContent.to_html` method.
    """
    if content is None:
        return ""
    elif isinstance(content, TextualContent):
        return render_text(content)
    elif isinstance(content, ImageContent):
        if resource_dir is None:
            raise MissingResourceError("Images cannot be rendered without a resource directory")
        resource_dir = Path(resource_dir)
        if not resource_dir.is_dir():
            raise MissingResourceError(f"Resource directory {resource_dir} does not exist")
        return render_image(content, resource_dir)
    elif isinstance(content, SubTableContent):
        return render_sub_table(content, resource_dir)
    else:
        return content.to_html(resource_dir)


def render_cell(
    cell: Cell, section: Section, corner_radius: int, resource_dir: Optional[Path] = None
) -> str:
    margin = cell.alignment.margin
    styles = [
        f"width: {max(cell.size.width - 2 * margin.width, 0)}px;",
        f"height: {max(cell.size.height - 2 * margin.height, 0)}px;",
        f"padding: {margin.height}px {margin.width}px;",
        f"background-color: {cell.background.to_css()};",
        f"text-align: {CSS_TEXT_ALIGN[cell.alignment.horizontal]};",
        f"vertical-align: {CSS_VERTICAL_ALIGN[cell.alignment.vertical]};",
    ]

    corners = corner_radii(cell.position, section, corner_radius)
    for name, radius in [
        ("top-left", corners.top_left),
        ("top-right", corners.top_right),
        ("bottom-left", corners.bottom_left),
        ("bottom-right", corners.bottom_right),
    ]:
        if radius:
            styles.append(f"border-{name}-radius: {radius}px;")

    class_names: List[str] = []
    if cell.position.column == section.left:
        class_names.append("tg-first-column")
    if cell.position.row == section.top:
        class_names.append("tg-first-row")

    attrs = {"style": " ".join(styles)}
    if class_names:
        attrs["class_"] = " ".join(class_names)

    return t("td", render_content(cell.content, resource_dir), **attrs)


def _check_resource_dir(grid: Grid, resource_dir: Optional[Path]) -> None:
    if _contains_images(grid) and (resource_dir is None or not resource_dir.is_dir()):
        raise MissingResourceError(
            f"Resource directory {resource_dir} does not exist"
            if resource_dir is not None
            else "A resource directory is required for tables containing images"
        )


def render_table(grid: Grid, resource_dir: Optional[Path] = None) -> str:
    """
    Render a grid as a HTML ``<table>``.

    Parameters
    ==========
    grid : :py:class:`~table_grid.grid.Grid`
    resource_dir : Path or None
        The directory into which images are written. Required only when the
        grid contains images.
    """
    section = grid.bounding_region()
    if section is None:
        raise EmptyTableError("Cannot render a table with no cells.")

    if resource_dir is not None:
        resource_dir = Path(resource_dir)
    _check_resource_dir(grid, resource_dir)

    cells = _cells_by_position(grid)
    rows = []
    for row in range(section.top, section.bottom + 1):
        tds = []
        for column in range(section.left, section.right + 1):
            cell = cells.get(Position(column, row))
            if cell is None:
                tds.append(t("td", "", class_="tg-gap"))
            else:
                tds.append(render_cell(cell, section, grid.corner_radius, resource_dir))
        rows.append(t("tr", "\n".join(tds)))

    return t("table", "\n".join(rows), class_="tg-table")


def render_css(grid: Grid) -> str:
    """Render the stylesheet used by tables generated by :py:func:`render_table`."""
    return table_css_template.render(border_colour=grid.border_colour.to_css())


def render_html(grid: Grid, resource_dir: Optional[Path] = None) -> str:
    """
    Render a grid as a HTML snippet: a ``<style>`` block followed by the
    table.
    """
    table = render_table(grid, resource_dir)
    return t("style", render_css(grid)) + "\n" + table


def generate_standalone_page(
    grid: Grid,
    title: str,
    resource_dir: Optional[Path] = None,
    embed_images: bool = True,
) -> str:
    """
    Generate a complete HTML page containing a rendered grid.

    Parameters
    ==========
    grid : :py:class:`~table_grid.grid.Grid`
    title : str
        The page title.
    resource_dir : Path or None
        The directory images are written into. When None, and
        ``embed_images`` is True, a temporary directory is used.
    embed_images : bool
        If True, images are embedded in the page as ``data:`` URLs.
    """
    if resource_dir is None and embed_images:
        with TemporaryDirectory() as tmp_dir:
            return generate_standalone_page(grid, title, Path(tmp_dir), embed_images)

    if resource_dir is not None:
        resource_dir = Path(resource_dir)

    table_html = render_table(grid, resource_dir)

    if embed_images and resource_dir is not None:
        table_html = embed_local_images(table_html, resource_dir)

    return standalone_table_template.render(
        title=title,
        css=render_css(grid),
        table=table_html,
    )
