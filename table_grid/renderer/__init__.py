"""
Grids (:py:mod:`table_grid.grid`) are rendered into images or HTML for
display.

Rendering is split into several parts. Pixel measurement and drawing is
delegated to a rendering backend (:py:mod:`table_grid.renderer.backend`). The
layout pass (:py:mod:`table_grid.renderer.layout`) walks the grid, assigning
every cell a pixel rectangle, before the result is drawn into an image by
:py:mod:`table_grid.renderer.image`. Finally, HTML output is produced by
:py:mod:`table_grid.renderer.html`.

:py:mod:`table_grid.renderer.backend`: Rendering backends
==========================================================

.. automodule:: table_grid.renderer.backend

:py:mod:`table_grid.renderer.layout`: Table layout
==================================================

.. automodule:: table_grid.renderer.layout

:py:mod:`table_grid.renderer.image`: Image export
=================================================

.. automodule:: table_grid.renderer.image

:py:mod:`table_grid.renderer.html`: HTML Table Renderer
=======================================================

.. automodule:: table_grid.renderer.html

:py:mod:`table_grid.renderer.html_postprocessing`: HTML post-processing
=======================================================================

.. automodule:: table_grid.renderer.html_postprocessing

"""  # noqa: E501
