# tristram

Readers for the level layout and pillar files of a classic isometric action
role-playing game, together with the screen geometry, pixel surfaces and small
helpers used to lay those levels out on screen. Pure Python, no dependencies.

## Modules

- `tristram.dun` – `Dun`, a grid of signed 16-bit block indices read from a
  `.dun` file (`Dun.load(path)` or `Dun.from_bytes(data)`), addressed as
  `dun[x, y]`. `Dun.town(sector1, sector2, sector3, sector4)` stitches four
  town sectors into one 48×48 map.
- `tristram.pillars` – `Min`, the pillars of a `.min` file as tuples of
  16-bit values. `pillar_size_for(filename)` gives 16 entries per pillar for
  names ending in `l4.min` or `town.min` and 10 otherwise; `Min.load(path)`
  uses it, `Min.from_bytes(data, pillar_size)` takes the size directly.
- `tristram.levelobjects` – `LevelObject` (a dataclass: `valid`,
  `sprite_cache_index`, `sprite_frame`, `x2`, `y2`, `dist`) and
  `LevelObjects`, a resizable grid of them addressed as `objects[x, y]`.
- `tristram.isometric` – conversions between tiles and screen pixels:
  `map_screen_coords`, `sprite_screen_position`, `tile_screen_position`,
  `clicked_tile`, plus `image_extension(path)`.
- `tristram.surface` – an in-memory RGBA `Surface` with `Colour`, and the
  sprite-building operations `draw_frame`, `draw_min_pillar`,
  `key_transparency`, `split_vertical_animation` and `pack_frames`.
- `tristram.settings` – `Settings`, INI settings whose user values fall back
  to a defaults file; `get` converts to the type of the default given.
  `SettingsError` is raised for malformed INI text.
- `tristram.stringops` – ASCII case-insensitive comparison, prefix/suffix
  checks, `replace_end` and `split`.
- `tristram.vectors` – `get_vec(start, end)` and `get_vec_dir(vector)`, which
  maps a vector to one of eight directions (or `None` for the zero vector).
- `tristram.md5` – a pure MD5 implementation, `MD5` (with `update`, `copy`,
  `digest`, `hexdigest`) and `md5_hexdigest(data)`.

## Install

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Examples

```python
from tristram.dun import Dun

dun = Dun.from_bytes(b"\x02\x00\x01\x00\x05\x00\x06\x00")
assert (dun.width(), dun.height()) == (2, 1)
assert dun[1, 0] == 6
```

```python
from tristram.isometric import clicked_tile

tile = clicked_tile(96, 96, 640, 480, 40, 40, 40, 40, 0, 1280, 960)
```

```python
from tristram.settings import Settings

settings = Settings("settings-default.ini", "settings-user.ini")
settings.load_user_settings()
width = settings.get("Display", "resolutionWidth", 1280)
settings.set("Display", "fullscreen", True)
settings.save()
```

```python
from tristram.md5 import md5_hexdigest

assert md5_hexdigest(b"abc") == "900150983cd24fb0d6963f7d28e17f72"
```

## What it does not do

The package reads `.dun` and `.min` files only. It does not read the
tile-block (`.til`) or passability (`.sol`) files, so it cannot resolve a
level position to its pillar, tell whether a tile can be walked on, open
doors or locate stairs. It does not decode sprite image files, open a window
or draw to the screen: `Surface` is an in-memory pixel grid only. There is no
scripting console and no command-line program.