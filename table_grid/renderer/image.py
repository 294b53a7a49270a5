"""
Render a grid into a Pillow image.

.. autofunction:: export_to_image
"""

from PIL import Image

from table_grid.grid import Grid

from table_grid.renderer.backend import PillowBackend

from table_grid.renderer.layout import layout_table, draw_layout


def export_to_image(grid: Grid) -> Image.Image:
    """
    Draw a grid into a new RGBA image exactly large enough to hold it. Areas
    not covered by any cell are left transparent.

    Raises :py:exc:`~table_grid.exceptions.EmptyTableError` if the grid has no
    cells.
    """
    layout = layout_table(grid, PillowBackend())

    image = Image.new("RGBA", (layout.size.width, layout.size.height), (0, 0, 0, 0))
    draw_layout(PillowBackend(image), layout, grid.border_colour)
    return image
