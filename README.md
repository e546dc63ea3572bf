# sibox

Core building blocks for a 2D tile-based game, in plain Python with no
dependencies beyond the standard library.

## What is inside

- `sibox.core`: `SemVer`, an ordered version value, and the `crc32` /
  `crc16` checksums of strings or bytes.
- `sibox.rng`: `Rng`, a seedable Mersenne Twister with `uniform(low, high)`
  and `integer(low, high)`.
- `sibox.delegate`: `Delegate` (one callable, `execute` raises
  `DelegateNotBoundError` when nothing is bound), `MulticastDelegate` and
  `CascadingMulticastDelegate` (stops as soon as a handler returns something
  other than `continue_if`).
- `sibox.mathutil`: `Rect` with `overlaps_with`, `contains_rect`,
  `contains_point` and `center`, and `lerp_smooth` for frame-rate independent
  smoothing of numbers or equal-length tuples.
- `sibox.transform`: `Transform` holding position, rotation and scale, with
  `translate`, `rotate`, `add_scale` and `scale_by`.
- `sibox.keys`: the `Scancode` and `MouseButton` enumerations.
- `sibox.input`: `Input`, per-frame keyboard and mouse state. Feed it with
  `set_key`, `set_mouse_button` and `move_mouse`, call `pre_update` at the
  start of each frame, and query `is_key_down_this_frame` and friends.
  Setting `keyboard_captured` or `mouse_captured` makes the matching queries
  report `False`.
- `sibox.timer`: `Stopwatch`, with an injectable clock and tick frequency.
- `sibox.tileset`: `TileData`, `TileSet` (1-based tile ids, 0 is the empty
  tile) and `StandardTiles.create()`, the built-in terrain set.
- `sibox.tilemap`: `TileMap`, an unbounded grid stored in `TileMapChunk`s that
  are generated on demand by a `ChunkProvider` (by default a
  `FlatChunkProvider`). `update_chunk_loading` loads the chunks around given
  tile positions; `rect_overlaps_solid_tile` checks loaded tiles for
  collisions.
- `sibox.world`: `World` holding `Entity` objects by id and a list of tile
  maps. `World.tick` advances entities with a time-scaled step and loads
  chunks around entities whose `loads_chunks` is true.

## Installing

```
pip install .
```

## A short example

```python
from sibox.mathutil import Rect
from sibox.tileset import StandardTiles
from sibox.world import World

tiles = StandardTiles.create()
world = World()
tile_map = world.create_tile_map(tiles.tile_set, 16, 16)
tile_map.set_tile(3, 4, tiles.stone_wall, True)

print(world.rect_overlaps_any_solid_tile(Rect(3.2, 4.1, 0.5, 0.5)))  # True
```

Delegates let code react to events:

```python
from sibox.delegate import CascadingMulticastDelegate

on_key = CascadingMulticastDelegate(continue_if=False)
on_key.bind(lambda key: key == "escape")  # returning True stops the cascade
print(on_key.execute("escape"))  # False: a handler consumed the event
```

## What it does not do

This is a library of game-state pieces only. It opens no windows, draws
nothing, plays no sound, reads no device input by itself (you feed `Input`
from your own event loop), has no networking and does not save tile maps or
worlds to disk. There is no command to run.

## Running the tests

```
pip install .[test]
pytest
```