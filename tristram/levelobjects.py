"""Per-tile records of objects drawn on top of a level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class LevelObject:
    """An object standing on a tile, possibly moving towards ``(x2, y2)``.

    ``dist`` is the percentage of the way travelled towards the target tile.
    """

    valid: bool = False
    sprite_cache_index: int = 0
    sprite_frame: int = 0
    x2: int = 0
    y2: int = 0
    dist: int = 0


class LevelObjects:
    """A grid of :class:`LevelObject` addressed as ``objects[x, y]``."""

    def __init__(self) -> None:
        self._data: List[LevelObject] = []
        self._width = 0
        self._height = 0

    def resize(self, width: int, height: int) -> None:
        """Change the grid size.

        The underlying row-major storage keeps its leading entries, so cells
        are re-addressed rather than moved; new cells start out invalid.
        """
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        size = width * height
        del self._data[size:]
        self._data.extend(LevelObject() for _ in range(size - len(self._data)))
        self._width = width
        self._height = height

    def _offset(self, key: Tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) outside {self._width}x{self._height} grid")
        return x + y * self._width

    def __getitem__(self, key: Tuple[int, int]) -> LevelObject:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: LevelObject) -> None:
        self._data[self._offset(key)] = value

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height