import pytest

from typing import Optional, List, Tuple, Any

from PIL import Image

from table_grid.geometry import Size, Rect, Corners

from table_grid.style import Colour, Font

from table_grid.renderer.backend import RenderBackend, wrap_text


class FakeBackend(RenderBackend):
    """
    A backend with fixed text metrics: every character is 7 pixels wide and
    every line 10 pixels tall. Drawing operations are recorded in
    :py:attr:`calls`.
    """

    CHAR_WIDTH = 7
    LINE_HEIGHT = 10

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def _lines(self, text: str, wrap_width: Optional[int]) -> List[str]:
        return wrap_text(text, lambda s: len(s) * self.CHAR_WIDTH, wrap_width)

    def measure_text(
        self, text: str, font: Font, wrap_width: Optional[int] = None
    ) -> Size:
        if text == "":
            return Size(0, 0)
        lines = self._lines(text, wrap_width)
        return Size(
            max(len(line) for line in lines) * self.CHAR_WIDTH,
            len(lines) * self.LINE_HEIGHT,
        )

    def draw_text(self, text: str, font: Font, colour: Colour, rect: Rect) -> None:
        self.calls.append(("text", text, rect))

    def draw_image(self, image: Image.Image, rect: Rect) -> None:
        self.calls.append(("image", image, rect))

    def draw_rounded_rect(
        self, rect: Rect, fill: Colour, corners: Corners, border: Colour
    ) -> None:
        self.calls.append(("rect", rect, fill, corners))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
