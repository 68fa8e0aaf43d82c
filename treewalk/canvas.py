"""
Indexed-color raster with point and line primitives.

Pixels hold palette indices (uint8). Writes outside the raster are ignored.
"""

from typing import Tuple, Sequence, List, Optional
from dataclasses import dataclass
import numpy as np
from PIL import Image

# Palette roles
BACKGROUND = 0
LINE = 1
VISITED = 2

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Three RGB entries indexed by BACKGROUND, LINE and VISITED."""

    background: RGB = (255, 255, 255)
    line: RGB = (0, 0, 0)
    visited: RGB = (0, 0, 255)

    def colors(self) -> List[RGB]:
        return [self.background, self.line, self.visited]

    def flat(self) -> List[int]:
        """Flattened [r, g, b, r, g, b, ...] list as PIL putpalette() expects."""
        return [c for rgb in self.colors() for c in rgb]

    @classmethod
    def from_colors(cls, colors: Sequence[Sequence[int]]) -> "Palette":
        if len(colors) != 3:
            raise ValueError(f"Palette needs exactly 3 colors, got {len(colors)}")
        rgb = []
        for color in colors:
            if len(color) != 3 or not all(0 <= int(c) <= 255 for c in color):
                raise ValueError(f"Invalid RGB color: {color}")
            rgb.append(tuple(int(c) for c in color))
        return cls(*rgb)


class Canvas:
    """
    Fixed-size indexed-color raster.

    raster[y, x] holds a palette index. A fresh canvas is filled with
    BACKGROUND.
    """

    def __init__(self, width: int, height: int, palette: Optional[Palette] = None, point_size: int = 12):
        self.width = width
        self.height = height
        self.palette = palette or Palette()
        self.point_size = point_size
        self.raster = np.full((height, width), BACKGROUND, dtype=np.uint8)

    def clear(self) -> None:
        self.raster.fill(BACKGROUND)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, color: int) -> None:
        if self.in_bounds(x, y):
            self.raster[y, x] = color

    def get(self, x: int, y: int) -> int:
        return int(self.raster[y, x])

    def draw_point(self, x: int, y: int, color: int) -> None:
        """Fill the point_size square starting at (x - s//2, y - s//2)."""
        size = self.point_size
        left, top = x - size // 2, y - size // 2
        x0, x1 = max(left, 0), min(left + size, self.width)
        y0, y1 = max(top, 0), min(top + size, self.height)
        if x0 < x1 and y0 < y1:
            self.raster[y0:y1, x0:x1] = color

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """
        Draw a segment between two points, endpoints included.

        Axis-aligned segments are filled directly. Other slopes get two
        interpolation passes, one stepping x and one stepping y, so neither
        shallow nor steep segments leave gaps.
        """
        if x1 == x2:
            lo, hi = sorted((y1, y2))
            self._fill_column(x1, lo, hi, color)
            return
        if y1 == y2:
            lo, hi = sorted((x1, x2))
            self._fill_row(y1, lo, hi, color)
            return

        k = (y2 - y1) / (x2 - x1)

        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for i in range(x2 - x1 + 1):
            self.set(x1 + i, y1 + int(k * i), color)

        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for i in range(y2 - y1 + 1):
            self.set(x1 + int(i / k), y1 + i, color)

    def _fill_column(self, x: int, y_lo: int, y_hi: int, color: int) -> None:
        if not 0 <= x < self.width:
            return
        y_lo, y_hi = max(y_lo, 0), min(y_hi, self.height - 1)
        if y_lo <= y_hi:
            self.raster[y_lo:y_hi + 1, x] = color

    def _fill_row(self, y: int, x_lo: int, x_hi: int, color: int) -> None:
        if not 0 <= y < self.height:
            return
        x_lo, x_hi = max(x_lo, 0), min(x_hi, self.width - 1)
        if x_lo <= x_hi:
            self.raster[y, x_lo:x_hi + 1] = color

    def to_image(self) -> Image.Image:
        """Convert to a PIL palette-mode image."""
        return raster_to_image(self.raster, self.palette)


def raster_to_image(raster: np.ndarray, palette: Palette) -> Image.Image:
    """Wrap an (H, W) uint8 index array as a "P" mode PIL image."""
    height, width = raster.shape
    img = Image.frombytes("P", (width, height), np.ascontiguousarray(raster, dtype=np.uint8).tobytes())
    img.putpalette(palette.flat())
    return img
