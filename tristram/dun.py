"""DUN level layouts: a grid of 16-bit tile-block indices."""

from __future__ import annotations

import os
import struct
from typing import Iterator, Tuple, Union

_HEADER = struct.Struct("<hh")

# Size of the assembled town map and the offset of its second row/column of sectors.
_TOWN_SIZE = 48
_TOWN_OFFSET = 23


def _to_int16(value: int) -> int:
    value = int(value) & 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


class Dun:
    """A rectangular grid of signed 16-bit block indices addressed as ``dun[x, y]``."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        self._width = width
        self._height = height
        self._blocks = [0] * (width * height)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Dun":
        """Parse a DUN image: width, height, then ``width * height`` blocks.

        Data after the block grid is ignored.
        """
        if len(data) < _HEADER.size:
            raise ValueError("DUN data too short for header")
        width, height = _HEADER.unpack_from(data)
        if width < 0 or height < 0:
            raise ValueError(f"invalid DUN dimensions {width}x{height}")
        count = width * height
        end = _HEADER.size + 2 * count
        if len(data) < end:
            raise ValueError("DUN data too short for its block grid")
        dun = cls(width, height)
        dun._blocks = list(struct.unpack_from(f"<{count}h", data, _HEADER.size))
        return dun

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "Dun":
        """Read and parse a DUN file."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())

    @classmethod
    def town(cls, sector1: "Dun", sector2: "Dun", sector3: "Dun", sector4: "Dun") -> "Dun":
        """Assemble the 48x48 town map from its four sectors."""
        town = cls(_TOWN_SIZE, _TOWN_SIZE)
        placements = (
            (sector3, 0, _TOWN_OFFSET),
            (sector4, 0, 0),
            (sector1, _TOWN_OFFSET, _TOWN_OFFSET),
            (sector2, _TOWN_OFFSET, 0),
        )
        for sector, dx, dy in placements:
            for (x, y), value in sector._cells():
                town[dx + x, dy + y] = value
        return town

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def _cells(self) -> Iterator[Tuple[Tuple[int, int], int]]:
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y), self._blocks[x + y * self._width]

    def _offset(self, key: Tuple[int, int]) -> int:
        x, y = key
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) outside {self._width}x{self._height} grid")
        return x + y * self._width

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return self._blocks[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        self._blocks[self._offset(key)] = _to_int16(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dun):
            return NotImplemented
        return (self._width, self._height, self._blocks) == (
            other._width,
            other._height,
            other._blocks,
        )

    def __repr__(self) -> str:
        return f"Dun(width={self._width}, height={self._height})"