"""Isometric projection between level tiles and screen pixels."""

from __future__ import annotations

from typing import Tuple

# Vertical offset of the map origin on screen, in pixels.
_MAP_Y_OFFSET = 160


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


def _lerp(start: int, end: int, dist: int) -> int:
    return int(start + (end - start) / 100.0 * dist)


def image_extension(path: str) -> str:
    """Return the text after the last '.' in ``path``.

    The first character is never taken as the dot; with no dot found, all but
    the first character is returned.
    """
    if not path:
        raise ValueError("empty path")
    dot = path.rfind(".", 1)
    return path[max(dot, 0) + 1:]


def map_screen_coords(
    level_width: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    dist: int,
    screen_width: int,
    screen_height: int,
) -> Tuple[int, int]:
    """Screen offset of the level for a camera moving from tile 1 to tile 2.

    ``dist`` is the percentage of the way travelled.
    """

    def corner(x: int, y: int) -> Tuple[int, int]:
        px = _int16(-(y * -32 + 32 * x + level_width * 32) + screen_width // 2)
        py = _int16(-(y * 16 + 16 * x + _MAP_Y_OFFSET) + screen_height // 2)
        return px, py

    ax, ay = corner(x1, y1)
    bx, by = corner(x2, y2)
    return _lerp(ax, bx, dist), _lerp(ay, by, dist)


def sprite_screen_position(
    level_width: int,
    sprite_width: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    dist: int,
    level_x: int,
    level_y: int,
) -> Tuple[int, int]:
    """Top-left pixel of a sprite moving from tile 1 to tile 2."""

    def corner(x: int, y: int) -> Tuple[int, int]:
        px = _int32(y * -32 + 32 * x + level_width * 32 + level_x - sprite_width // 2)
        py = _int32(y * 16 + 16 * x + _MAP_Y_OFFSET + level_y)
        return px, py

    ax, ay = corner(x1, y1)
    bx, by = corner(x2, y2)
    return _lerp(ax, bx, dist), _lerp(ay, by, dist)


def tile_screen_position(
    level_height: int, x: int, y: int, level_x: int, level_y: int
) -> Tuple[int, int]:
    """Top-left pixel of the pillar sprite for tile ``(x, y)``."""
    return (
        y * -32 + 32 * x + level_height * 32 - 32 + level_x,
        y * 16 + 16 * x + level_y,
    )


def clicked_tile(
    level_width: int,
    level_height: int,
    x: int,
    y: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    dist: int,
    screen_width: int,
    screen_height: int,
) -> Tuple[int, int]:
    """Tile under screen pixel ``(x, y)`` for the given camera position."""
    level_x, level_y = map_screen_coords(
        level_width, x1, y1, x2, y2, dist, screen_width, screen_height
    )

    # Position on the map in pixels.
    flat_x = x - level_x
    flat_y = y - level_y

    # The map split into 32x16 boxes; every second one centres on an
    # isometric tile, the others on tile corners.
    grid_x = _cdiv(flat_x + 16, 32)
    grid_y = _cdiv(flat_y + 8, 16)

    origin_x = level_height
    origin_y = 15

    if _cmod(grid_x, 2) == _cmod(grid_y, 2) and _cmod(grid_x, 2) in (0, 1):
        # A corner box: find which quadrant was hit and step into that tile.
        block_x = flat_x - (32 * grid_x - 16)
        block_y = flat_y - (16 * grid_y - 8)
        if block_y * 2 > block_x:
            if block_x < (15 - block_y) * 2:
                grid_x -= 1
            else:
                grid_y += 1
        else:
            if block_x < (15 - block_y) * 2:
                grid_y -= 1
            else:
                grid_x += 1

    line_x = origin_x + _cdiv((grid_x - origin_x) - (grid_y - origin_y), 2)
    line_y = origin_y - _cdiv(-(grid_x - origin_x) - (grid_y - origin_y), 2)
    return grid_x - line_x, grid_y - line_y