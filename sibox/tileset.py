"""Tile definitions and the standard terrain tile set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

EMPTY_TILE = 0
"""Tile id meaning "no tile"; real tiles are numbered from 1."""


@dataclass(frozen=True)
class TileData:
    """What a tile looks like and whether it blocks movement."""

    sprite_index: int = 0
    is_solid: bool = False


EMPTY_TILE_DATA = TileData()


class TileSet:
    """An ordered collection of tile definitions, addressed by 1-based tile id."""

    def __init__(self, sprite_sheet: Any = None) -> None:
        self.sprite_sheet = sprite_sheet
        self._tiles: list[TileData] = []

    def __len__(self) -> int:
        return len(self._tiles)

    def add_tile(self, data: TileData) -> int:
        """Append ``data`` and return its tile id."""
        self._tiles.append(data)
        return len(self._tiles)

    def _checked(self, tile: int) -> TileData:
        if not 0 < tile <= len(self._tiles):
            raise IndexError(f"invalid tile id {tile}")
        return self._tiles[tile - 1]

    def get_tile(self, tile: int) -> TileData:
        """Return the definition of ``tile``; the empty tile has a non-solid definition."""
        if tile == EMPTY_TILE:
            return EMPTY_TILE_DATA
        return self._checked(tile)

    def sprite_index_for_tile(self, tile: int) -> int:
        """Return the sprite sheet index drawn for ``tile``."""
        return self._checked(tile).sprite_index


_STANDARD_DEFINITIONS: tuple[tuple[str, int, bool], ...] = (
    ("grass", 0, False),
    ("flowers", 10, False),
    ("sunflowers", 29, False),
    ("lilies", 30, False),
    ("roses", 31, False),
    ("stone_wall", 8, True),
    ("mountain_stone", 9, True),
    ("snow", 37, True),
    ("sand", 1, False),
    ("mud1", 32, False),
    ("mud2", 33, False),
    ("mud3", 34, False),
    ("mud4", 35, False),
    ("deep_water1", 18, True),
    ("deep_water2", 19, True),
    ("deep_water3", 20, True),
    ("deep_water4", 21, True),
    ("deep_water5", 22, True),
    ("deep_water6", 23, True),
    ("light_water1", 2, False),
    ("light_water2", 3, False),
    ("light_water3", 4, False),
    ("light_water4", 5, False),
    ("light_water5", 6, False),
    ("light_water6", 7, False),
)


@dataclass(frozen=True)
class StandardTiles:
    """The built-in terrain tile set together with the id of each tile."""

    tile_set: TileSet
    grass: int
    flowers: int
    sunflowers: int
    lilies: int
    roses: int
    stone_wall: int
    mountain_stone: int
    snow: int
    sand: int
    mud1: int
    mud2: int
    mud3: int
    mud4: int
    deep_water1: int
    deep_water2: int
    deep_water3: int
    deep_water4: int
    deep_water5: int
    deep_water6: int
    light_water1: int
    light_water2: int
    light_water3: int
    light_water4: int
    light_water5: int
    light_water6: int
    empty: int = field(default=EMPTY_TILE)

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Names of the standard tiles in the order they are registered."""
        return tuple(name for name, _, _ in _STANDARD_DEFINITIONS)

    @classmethod
    def create(cls) -> StandardTiles:
        """Build the standard tile set and register every terrain tile in order."""
        tile_set = TileSet()
        ids = {
            name: tile_set.add_tile(TileData(sprite_index=sprite, is_solid=solid))
            for name, sprite, solid in _STANDARD_DEFINITIONS
        }
        return cls(tile_set=tile_set, **ids)