"""
The ``table-grid`` command renders a CSV or TSV file as a table image or a
stand-alone HTML page.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ table-grid INPUT [OUTPUT_FILENAME]

This will render the table in the indicated file. If no output filename is
given, the input filename with the suffix replaced with '.png' is used. When
the output filename ends in '.html' (or '.htm') a HTML page is generated,
otherwise an image is saved in the format implied by the suffix.

Files ending in '.tsv' or '.tab' are read as tab separated values. Other files
are read as CSV unless the ``--tsv`` argument is given.

Tidying tables
==============

Ragged input may be padded out with empty cells using ``--fill-gaps``.
Columns and rows may be sized to fit their contents using
``--expand-columns`` and ``--expand-rows``, which take the number of extra
pixels to add to each column or row. Alternate rows (after the first) may be
shaded using ``--stripes``.

Images
======

When generating HTML, images are embedded as ``data:`` URLs by default so that
the generated page is completely standalone. This can be disabled using
``--no-embed-images`` (``-E``), in which case images are written into the
directory given by ``--resource-dir``.
"""

from typing import Optional, List

import sys

from argparse import ArgumentParser

from dataclasses import replace

from pathlib import Path

from table_grid.style import Colour, Font

from table_grid.config import TableConfig

from table_grid.grid import Grid

from table_grid.loading import DataFormat, load_file

from table_grid.passes import (
    fill_missing_gaps,
    expand_columns_to_content,
    expand_rows_to_content,
    add_stripe_ribbons_to_rows,
)

from table_grid.renderer.backend import PillowBackend

from table_grid.renderer.image import export_to_image

from table_grid.renderer.html import generate_standalone_page

from table_grid.exceptions import TableGridError


HTML_SUFFIXES = (".html", ".htm")


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Render a CSV or TSV file as a table image or HTML page.
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        help="""
            The filename of the CSV or TSV file to render.
        """,
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="""
            The output filename. Files ending in .html or .htm are written as
            HTML pages, anything else as an image. Defaults to the input
            filename with the extension replaced with .png if no name is
            given.
        """,
    )

    parser.add_argument(
        "--tsv",
        "-t",
        action="store_true",
        default=False,
        help="""
            Read the input as tab separated values, regardless of its
            extension.
        """,
    )

    tidying_group = parser.add_argument_group("table tidying")
    tidying_group.add_argument(
        "--fill-gaps",
        "-g",
        action="store_true",
        default=False,
        help="""
            Fill any holes in the table with empty cells.
        """,
    )
    tidying_group.add_argument(
        "--expand-columns",
        "-c",
        type=int,
        metavar="OVERFLOW",
        default=None,
        help="""
            Resize every column to fit its contents, plus OVERFLOW pixels.
        """,
    )
    tidying_group.add_argument(
        "--expand-rows",
        "-r",
        type=int,
        metavar="OVERFLOW",
        default=None,
        help="""
            Resize every row to fit its contents, plus OVERFLOW pixels.
        """,
    )
    tidying_group.add_argument(
        "--minimum-width",
        type=int,
        metavar="PIXELS",
        default=0,
        help="""
            The minimum column content width used by --expand-columns.
        """,
    )
    tidying_group.add_argument(
        "--stripes",
        "-s",
        action="store_true",
        default=False,
        help="""
            Shade alternate rows (after the header row).
        """,
    )

    style_group = parser.add_argument_group("styling")
    style_group.add_argument(
        "--corner-radius",
        type=int,
        metavar="PIXELS",
        default=None,
        help="""
            The radius of the table's outer corners.
        """,
    )
    style_group.add_argument(
        "--border-colour",
        type=Colour.parse,
        metavar="COLOUR",
        default=None,
        help="""
            The colour of cell borders (e.g. '#000000' or 'black').
        """,
    )
    style_group.add_argument(
        "--header-background",
        type=Colour.parse,
        metavar="COLOUR",
        default=None,
        help="""
            The background colour for the first row of the table.
        """,
    )
    style_group.add_argument(
        "--font",
        metavar="FONT_FILE",
        default=None,
        help="""
            The (TrueType) font file to draw text with.
        """,
    )
    style_group.add_argument(
        "--font-size",
        type=int,
        metavar="PIXELS",
        default=None,
        help="""
            The size of text.
        """,
    )

    html_group = parser.add_argument_group("HTML output")
    html_group.add_argument(
        "--title",
        default=None,
        help="""
            The title of the generated HTML page. Defaults to the input
            filename.
        """,
    )
    html_group.add_argument(
        "--resource-dir",
        type=Path,
        metavar="DIRECTORY",
        default=None,
        help="""
            The directory into which images are written.
        """,
    )
    html_group.add_argument(
        "--embed-images",
        "-e",
        action="store_true",
        default=True,
        help="""
            Embed images into the HTML page as data: URLs. This is the default
            mode.
        """,
    )
    html_group.add_argument(
        "--no-embed-images",
        "-E",
        action="store_false",
        dest="embed_images",
        help="""
            Reference images from the resource directory rather than
            embedding them.
        """,
    )

    args = parser.parse_args(argv)

    config = TableConfig()
    font = config.font
    if args.font is not None:
        font = replace(font, name=args.font)
    if args.font_size is not None:
        font = replace(font, size=args.font_size)
    config = replace(config, font=font)
    if args.corner_radius is not None:
        config = replace(config, corner_radius=args.corner_radius)
    if args.border_colour is not None:
        config = replace(config, border_colour=args.border_colour)

    output = args.output
    if output is None:
        output = args.input.with_suffix(".png")

    try:
        grid = Grid(config)
        load_file(grid, args.input, DataFormat.tsv if args.tsv else None)

        if args.fill_gaps:
            fill_missing_gaps(grid)

        backend = PillowBackend()
        if args.expand_columns is not None:
            expand_columns_to_content(
                grid, backend, args.expand_columns, args.minimum_width
            )
        if args.expand_rows is not None:
            expand_rows_to_content(grid, backend, args.expand_rows)

        if args.stripes:
            add_stripe_ribbons_to_rows(grid)
        if args.header_background is not None:
            with grid.get_row(0) as header:
                header.set_background(args.header_background)

        if output.suffix.lower() in HTML_SUFFIXES:
            html = generate_standalone_page(
                grid,
                args.title if args.title is not None else args.input.stem,
                resource_dir=args.resource_dir,
                embed_images=args.embed_images,
            )
            with output.open("w", encoding="utf-8") as f:
                f.write(html)
        else:
            image = export_to_image(grid)
            if output.suffix.lower() in (".jpg", ".jpeg"):
                image = image.convert("RGB")
            image.save(output)
    except TableGridError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
