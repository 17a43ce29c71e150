"""Software RGBA surfaces and the pixel work done when building sprites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple

# Pillar sprites are drawn in rows of two 32x32 tiles.
_TILE_WIDTH = 32
_ROW_HEIGHT = 32
# Pillars with 10 entries have five rows; they are shifted down to line up
# with the eight-row pillars.
_SHORT_PILLAR = 10
_SHORT_PILLAR_SHIFT = 3 * _ROW_HEIGHT
_FRAME_INDEX_MASK = 0x0FFF

_Pixel = Tuple[int, int, int, int]
_TRANSPARENT: _Pixel = (0, 0, 0, 0)


@dataclass(frozen=True)
class Colour:
    """An RGB colour with an all-or-nothing visibility flag."""

    r: int
    g: int
    b: int
    visible: bool = True


class Frame(Protocol):
    """Anything with a size and readable pixels, such as a :class:`Surface`."""

    width: int
    height: int

    def get_pixel(self, x: int, y: int) -> Colour: ...


class Surface:
    """A width x height grid of RGBA pixels, fully transparent when created."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels: List[_Pixel] = [_TRANSPARENT] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} surface")
        return x + y * self.width

    def clear(self) -> None:
        """Make every pixel transparent black."""
        self._pixels = [_TRANSPARENT] * (self.width * self.height)

    def get_pixel(self, x: int, y: int) -> Colour:
        """Read a pixel; it is visible only if fully opaque."""
        r, g, b, a = self._pixels[self._offset(x, y)]
        return Colour(r, g, b, a == 255)

    def set_pixel(self, x: int, y: int, colour: Colour) -> None:
        """Write a pixel, opaque if ``colour.visible`` and transparent otherwise."""
        self._pixels[self._offset(x, y)] = (
            colour.r & 0xFF,
            colour.g & 0xFF,
            colour.b & 0xFF,
            255 if colour.visible else 0,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Surface):
            return NotImplemented
        return (self.width, self.height, self._pixels) == (
            other.width,
            other.height,
            other._pixels,
        )

    def __repr__(self) -> str:
        return f"Surface(width={self.width}, height={self.height})"


def draw_frame(surface: Surface, start_x: int, start_y: int, frame: Frame) -> None:
    """Copy the visible pixels of ``frame`` onto ``surface`` at ``(start_x, start_y)``."""
    for x in range(frame.width):
        for y in range(frame.height):
            colour = frame.get_pixel(x, y)
            if colour.visible:
                surface.set_pixel(start_x + x, start_y + y, colour)


def draw_min_pillar(
    surface: Surface,
    x: int,
    y: int,
    pillar: Sequence[int],
    frames: Sequence[Frame],
    top: bool,
) -> None:
    """Draw a pillar's tiles from ``frames``: all rows but the last, or only the last.

    Each pillar entry names a frame by its low 12 bits plus one; zero means
    no tile.
    """
    if len(pillar) < 2:
        raise ValueError("a pillar holds at least one row of two entries")
    if len(pillar) == _SHORT_PILLAR:
        y += _SHORT_PILLAR_SHIFT

    if top:
        rows = range(0, len(pillar) - 2, 2)
    else:
        last = len(pillar) - 2
        rows = range(last, len(pillar), 2)
        y += last * (_ROW_HEIGHT // 2)

    for i in rows:
        left = (pillar[i] & _FRAME_INDEX_MASK) - 1
        right = (pillar[i + 1] & _FRAME_INDEX_MASK) - 1
        if left != -1:
            draw_frame(surface, x, y, frames[left])
        if right != -1:
            draw_frame(surface, x + _TILE_WIDTH, y, frames[right])
        y += _ROW_HEIGHT


def key_transparency(surface: Surface, r: int, g: int, b: int) -> Surface:
    """Return a copy of ``surface`` in which pixels of colour ``(r, g, b)`` are transparent."""
    result = Surface(surface.width, surface.height)
    for x in range(surface.width):
        for y in range(surface.height):
            colour = surface.get_pixel(x, y)
            if (colour.r, colour.g, colour.b) != (r, g, b):
                result.set_pixel(x, y, colour)
    return result


def split_vertical_animation(surface: Surface, frame_height: int) -> List[Surface]:
    """Cut a vertically stacked animation strip into frames of ``frame_height`` rows.

    A frame is started at each multiple of ``frame_height`` below the last
    row; a short final frame is padded with transparent pixels.
    """
    if frame_height <= 0:
        raise ValueError("frame height must be positive")
    frames = []
    for src_y in range(0, max(surface.height - 1, 0), frame_height):
        frame = Surface(surface.width, frame_height)
        for x in range(surface.width):
            for y in range(min(frame_height, surface.height - src_y)):
                frame.set_pixel(x, y, surface.get_pixel(x, src_y + y))
        frames.append(frame)
    return frames


def pack_frames(frames: Sequence[Frame]) -> Optional[Surface]:
    """Lay ``frames`` side by side on one surface.

    Returns None when there is nothing to lay out.
    """
    total_width = sum(frame.width for frame in frames)
    if not frames or total_width == 0:
        return None
    strip = Surface(total_width, max(frame.height for frame in frames))
    x = 0
    for frame in frames:
        draw_frame(strip, x, 0, frame)
        x += frame.width
    return strip