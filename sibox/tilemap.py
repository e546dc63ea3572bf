"""Chunked, lazily generated tile maps."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from sibox.mathutil import Rect
from sibox.tileset import EMPTY_TILE, TileData, TileSet

ChunkIndex = tuple[int, int]

CHUNK_LOAD_RANGE = range(-2, 2)
"""Chunk offsets, on each axis, loaded around a player's chunk."""


class ChunkProvider(ABC):
    """Decides which tile a freshly generated chunk holds at each tile coordinate."""

    @abstractmethod
    def tile_at(self, x: int, y: int) -> int:
        """Return the tile id for world tile coordinate ``(x, y)``."""


class FlatChunkProvider(ChunkProvider):
    """Fills every tile with the same tile id."""

    def __init__(self, tile: int = EMPTY_TILE) -> None:
        self.tile = tile

    def tile_at(self, x: int, y: int) -> int:
        return self.tile


class TileMapChunk:
    """A rectangular block of tiles belonging to a tile map."""

    def __init__(self, tile_map: TileMap | None, position: Sequence[int], size: Sequence[int]) -> None:
        px, py = position
        width, height = size
        if width < 0 or height < 0:
            raise ValueError("chunk size must not be negative")
        self.tile_map = tile_map
        self.position: tuple[int, int] = (int(px), int(py))
        self.size: tuple[int, int] = (int(width), int(height))
        self._tiles = [EMPTY_TILE] * (self.size[0] * self.size[1])

    @property
    def bounds(self) -> Rect:
        return Rect(self.position[0], self.position[1], self.size[0], self.size[1])

    def _index(self, x: int, y: int) -> int:
        width, height = self.size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"tile ({x}, {y}) outside chunk of size {self.size}")
        return y * width + x

    def get_tile(self, x: int, y: int) -> int:
        """Return the tile at chunk-local coordinate ``(x, y)``."""
        return self._tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: int) -> None:
        self._tiles[self._index(x, y)] = tile

    def tile_data(self, x: int, y: int) -> TileData:
        """Return the definition of the tile at chunk-local ``(x, y)``."""
        if self.tile_map is None:
            raise RuntimeError("chunk does not belong to a tile map")
        return self.tile_map.tile_set.get_tile(self.get_tile(x, y))


class TileMap:
    """An unbounded grid of tiles stored in fixed-size chunks keyed by chunk index."""

    def __init__(
        self,
        tile_set: TileSet,
        chunk_width: int,
        chunk_height: int,
        chunk_provider: ChunkProvider | None = None,
    ) -> None:
        if chunk_width <= 0 or chunk_height <= 0:
            raise ValueError("chunk dimensions must be positive")
        self.tile_set = tile_set
        self.chunk_size: tuple[int, int] = (chunk_width, chunk_height)
        self.chunk_provider: ChunkProvider = chunk_provider or FlatChunkProvider()
        self.chunks: dict[ChunkIndex, TileMapChunk] = {}

    def _split(self, x: int, y: int) -> tuple[ChunkIndex, int, int]:
        width, height = self.chunk_size
        return (x // width, y // height), x % width, y % height

    def set_tile(self, x: int, y: int, tile: int, can_create_chunk: bool = True) -> None:
        """Set the tile at world ``(x, y)``; an unloaded chunk is loaded only if allowed."""
        index, lx, ly = self._split(x, y)
        chunk = self.chunks.get(index)
        if chunk is None:
            if not can_create_chunk:
                return
            chunk = self.load_chunk(index)
        chunk.set_tile(lx, ly, tile)

    def get_tile(self, x: int, y: int, can_create_chunk: bool = False) -> int | None:
        """Return the tile at world ``(x, y)``, or ``None`` if its chunk is not loaded."""
        index, lx, ly = self._split(x, y)
        chunk = self.chunks.get(index)
        if chunk is None:
            if not can_create_chunk:
                return None
            chunk = self.load_chunk(index)
        return chunk.get_tile(lx, ly)

    def chunk_at_tile(self, x: int, y: int, can_create_chunk: bool = False) -> TileMapChunk | None:
        """Return the chunk holding world tile ``(x, y)``, or ``None`` if not loaded."""
        index, _, _ = self._split(x, y)
        chunk = self.chunks.get(index)
        if chunk is None and can_create_chunk:
            chunk = self.load_chunk(index)
        return chunk

    def is_chunk_loaded(self, index: Sequence[int]) -> bool:
        return tuple(index) in self.chunks

    def get_chunk(self, index: Sequence[int]) -> TileMapChunk:
        """Return a loaded chunk; raise ``KeyError`` if it is not loaded."""
        return self.chunks[(index[0], index[1])]

    def load_chunk(self, index: Sequence[int]) -> TileMapChunk:
        """Return the chunk at ``index``, generating it from the provider if needed."""
        key: ChunkIndex = (int(index[0]), int(index[1]))
        existing = self.chunks.get(key)
        if existing is not None:
            return existing
        width, height = self.chunk_size
        origin_x, origin_y = key[0] * width, key[1] * height
        chunk = TileMapChunk(self, (origin_x, origin_y), self.chunk_size)
        for y in range(height):
            for x in range(width):
                chunk.set_tile(x, y, self.chunk_provider.tile_at(origin_x + x, origin_y + y))
        self.chunks[key] = chunk
        return chunk

    def update_chunk_loading(self, player_positions: Iterable[Sequence[int]]) -> None:
        """Load the block of chunks surrounding each player's tile position."""
        width, height = self.chunk_size
        for px, py in player_positions:
            cx, cy = int(px) // width, int(py) // height
            for dy in CHUNK_LOAD_RANGE:
                for dx in CHUNK_LOAD_RANGE:
                    self.load_chunk((cx + dx, cy + dy))

    def rect_overlaps_solid_tile(self, rect: Rect) -> bool:
        """True if any loaded solid tile lies under ``rect``."""
        width, height = self.chunk_size
        for y in range(math.floor(rect.y), math.ceil(rect.y + rect.height)):
            for x in range(math.floor(rect.x), math.ceil(rect.x + rect.width)):
                chunk = self.chunk_at_tile(x, y, False)
                if chunk is not None and chunk.tile_data(x % width, y % height).is_solid:
                    return True
        return False