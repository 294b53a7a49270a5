"""
Routines for post-processing generated HTML.

.. autofunction:: embed_local_images

.. autofunction:: embed_images_as_data_urls
"""

from pathlib import Path

from urllib.parse import urlsplit, unquote

import html
import mimetypes

from base64 import b64encode

import lxml.html  # type: ignore

from table_grid.exceptions import MissingResourceError


def embed_local_images(fragment: str, root: Path) -> str:
    """
    Return a HTML fragment with every local image embedded as a ``data:`` URL
    (see :py:func:`embed_images_as_data_urls`).
    """
    container = lxml.html.fragment_fromstring(fragment, create_parent="div")
    embed_images_as_data_urls(container, root)
    return html.escape(container.text or "", quote=False) + "".join(
        lxml.html.tostring(child, encoding="unicode") for child in container
    )


def embed_images_as_data_urls(tree: lxml.html.HtmlElement, root: Path) -> None:
    """
    Replace, in place, the ``src`` of every ``<img>`` referring to a local
    file with a ``data:`` URL containing the file.

    Parameters
    ==========
    tree: lxml.html.HtmlElement
        The tree to modify.
    root: Path
        The directory relative paths are resolved against.
    """
    for img in tree.iter("img"):
        url = img.get("src")
        if url is None:
            continue

        parts = urlsplit(url)

        # External or already embedded
        if parts.scheme not in ("", "file") or parts.netloc != "" or parts.path == "":
            continue

        path = Path(unquote(parts.path))
        if not path.is_absolute():
            path = root / path

        if not path.is_file():
            raise MissingResourceError(f"Image file {path} does not exist")

        mimetype, _encoding = mimetypes.guess_type(path.name)
        if mimetype is None:
            mimetype = "application/octet-stream"

        with path.open("rb") as f:
            base64_data = b64encode(f.read()).decode("ascii")

        img.set("src", f"data:{mimetype};base64,{base64_data}")
