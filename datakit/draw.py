"""A raw RGBA raster with rectangle fills and single-pixel plotting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Color:
    """An RGBA colour with one byte per channel."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 0xFF:
                raise ValueError("colour channel out of range")


@dataclass(frozen=True)
class Point:
    """A position, or a width and height when used as a size."""

    x: int
    y: int


class RawImage:
    """A width-by-height grid of colours stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image size must not be negative")
        self.width = width
        self.height = height
        self._pixels: List[Color] = [Color()] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) outside the image")
        return y * self.width + x

    def fill(self, point: Point, size: Point, color: Color) -> None:
        """Fill the rectangle whose top-left corner is ``point`` and extent is ``size``."""
        if size.x <= 0 or size.y <= 0:
            return
        self._index(point.x, point.y)
        self._index(point.x + size.x - 1, point.y + size.y - 1)
        for y in range(point.y, point.y + size.y):
            start = y * self.width + point.x
            self._pixels[start:start + size.x] = [color] * size.x

    def fill_all(self, color: Color) -> None:
        """Fill the whole image."""
        self._pixels = [color] * (self.width * self.height)

    def plot(self, point: Point, color: Color) -> None:
        """Set one pixel."""
        self._pixels[self._index(point.x, point.y)] = color

    def pixel(self, x: int, y: int) -> Color:
        """Return the colour of one pixel."""
        return self._pixels[self._index(x, y)]