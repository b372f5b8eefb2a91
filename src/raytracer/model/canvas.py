"""
Canvas (Pixel Buffer)
=====================
A fixed-size grid of Colors stored as one flat, row-major list.

Row r, column c lives at index ``r * width + c``. Rows are handed out as
CanvasRow views over that list, so writing through a row mutates the canvas
directly and no nested containers are ever built.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

import numpy as np

from raytracer.model.color import Color

if TYPE_CHECKING:
    import numpy.typing as npt

# Get module logger
logger = logging.getLogger(__name__)


def _check_index(index: int, limit: int, name: str) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{name} index must be an integer. Got {type(index).__name__}.")
    # Negative indices are out of range, they do not wrap around
    if not 0 <= index < limit:
        raise IndexError(f"{name} index {index} out of range [0, {limit}).")
    return int(index)


class CanvasRow:
    """
    Mutable view over the cells of a single canvas row.
    """
    def __init__(self, pixels: list[Color], offset: int, width: int) -> None:
        self._pixels = pixels
        self._offset = offset
        self._width = width

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(offset={self._offset}, width={self._width})"

    def __len__(self) -> int:
        return self._width

    def __getitem__(self, column: int) -> Color:
        column = _check_index(column, self._width, "Column")
        return self._pixels[self._offset + column]

    def __setitem__(self, column: int, color: Color) -> None:
        column = _check_index(column, self._width, "Column")
        if not isinstance(color, Color):
            raise TypeError(f"Canvas cells hold Colors. Got {type(color).__name__}.")
        self._pixels[self._offset + column] = color

    def __iter__(self) -> Iterator[Color]:
        return iter(self._pixels[self._offset:self._offset + self._width])


class Canvas:
    """
    Represents the image surface a renderer draws into.
    """
    def __init__(self, width: int, height: int) -> None:
        """
        Allocate the buffer with every cell set to black.

        Args:
            width: Number of columns. Zero gives an empty canvas.
            height: Number of rows. Zero gives an empty canvas.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Canvas {name} must be an integer. Got {type(value).__name__}.")
            if value < 0:
                raise ValueError(f"Canvas {name} must be non-negative. Got {value}.")

        self._width = int(width)
        self._height = int(height)
        # Colors are immutable, so every cell can share the same black instance
        self._pixels: list[Color] = [Color.black()] * (self._width * self._height)
        logger.debug(f"Allocated {self._width}x{self._height} canvas.")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(width={self._width}, height={self._height})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> tuple[Color, ...]:
        """All cells in row-major order (a snapshot, not a view)."""
        return tuple(self._pixels)

    def row(self, index: int) -> CanvasRow:
        """
        Returns a writable view over row ``index``.

        Raises:
            IndexError: If ``index`` is not in [0, height).
        """
        index = _check_index(index, self._height, "Row")
        return CanvasRow(self._pixels, index * self._width, self._width)

    def rows(self) -> Iterator[CanvasRow]:
        for index in range(self._height):
            yield self.row(index)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Writes ``color`` at column ``x`` of row ``y``."""
        self.row(y)[x] = color

    def pixel_at(self, x: int, y: int) -> Color:
        return self.row(y)[x]

    def to_array(self) -> npt.NDArray[np.float64]:
        """
        Channel values as an array of shape (height, width, 3).

        Intended for image exporters, which are expected to clamp and
        quantise the channels themselves.
        """
        data = np.array([[c.r, c.g, c.b] for c in self._pixels], dtype=np.float64)
        return data.reshape(self._height, self._width, 3)
