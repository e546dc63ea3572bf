"""Entities and the world that owns them and its tile maps."""

from __future__ import annotations

import math
import secrets
from typing import Union

from sibox.mathutil import Rect
from sibox.tilemap import TileMap
from sibox.tileset import TileSet
from sibox.transform import Transform


def new_uuid() -> int:
    """Return a random 64-bit entity identifier."""
    return secrets.randbits(64)


class Entity:
    """Something that lives in a world; subclasses override the hook methods.

    Entities whose ``loads_chunks`` is true keep the tile map chunks around
    their position loaded.
    """

    loads_chunks = False

    def __init__(self, name: str = "", transform: Transform | None = None, uuid: int | None = None) -> None:
        self.name = name
        self.transform = transform if transform is not None else Transform()
        self._uuid = new_uuid() if uuid is None else uuid
        self._world: World | None = None
        self.is_alive = False
        self.age = 0.0

    @property
    def uuid(self) -> int:
        return self._uuid

    @uuid.setter
    def uuid(self, value: int) -> None:
        if self._world is not None:
            self._world.update_entity_uuid(self._uuid, value)
        else:
            self._uuid = value

    @property
    def world(self) -> World | None:
        return self._world

    @property
    def tile_position(self) -> tuple[int, int]:
        """The tile containing this entity's position."""
        x, y, _ = self.transform.position
        return (math.floor(x), math.floor(y))

    def created(self) -> None:
        """Called before the entity joins a world; marks it alive."""
        self.is_alive = True
        self.age = 0.0

    def added_to_world(self, world: World) -> None:
        """Called once the entity has joined ``world``."""
        self._world = world

    def tick(self, delta: float) -> None:
        """Called every world tick with the scaled time step; accumulates age."""
        self.age += delta

    def destroyed(self) -> None:
        """Called just before the entity leaves its world; marks it dead."""
        self.is_alive = False

    def destroy(self) -> None:
        """Remove this entity from its world."""
        if self._world is None:
            raise RuntimeError(f"entity {self._uuid} is not in a world")
        self._world.destroy_entity(self)


class World:
    """Holds entities by id and a list of tile maps."""

    def __init__(self) -> None:
        self.entities: dict[int, Entity] = {}
        self.tile_maps: list[TileMap] = []
        self.time_scale = 1.0
        self.delta = 0.0
        self.unscaled_delta = 0.0

    def add_entity(self, entity: Entity) -> Entity:
        """Add ``entity``; its id must not already be in use."""
        if entity.uuid in self.entities:
            raise ValueError(f"entity with id {entity.uuid} already exists")
        entity.created()
        self.entities[entity.uuid] = entity
        entity._world = self
        entity.added_to_world(self)
        return entity

    def update_entity_uuid(self, old_id: int, new_id: int) -> None:
        """Re-key an entity from ``old_id`` to ``new_id``."""
        if old_id not in self.entities:
            raise KeyError(f"entity with id {old_id} does not exist")
        if new_id in self.entities:
            raise ValueError(f"entity with id {new_id} already exists")
        entity = self.entities.pop(old_id)
        entity._uuid = new_id
        self.entities[new_id] = entity

    def destroy_entity(self, entity: Union[Entity, int]) -> None:
        """Destroy an entity given by object or id; raise ``KeyError`` if absent."""
        entity_id = entity.uuid if isinstance(entity, Entity) else entity
        found = self.entities.get(entity_id)
        if found is None:
            raise KeyError(f"entity with id {entity_id} does not exist")
        found.destroyed()
        del self.entities[entity_id]
        found._world = None

    def create_tile_map(self, tile_set: TileSet, chunk_width: int, chunk_height: int) -> TileMap:
        tile_map = TileMap(tile_set, chunk_width, chunk_height)
        self.tile_maps.append(tile_map)
        return tile_map

    def tick(self, delta: float) -> None:
        """Advance every entity, then load chunks around chunk-loading entities."""
        self.unscaled_delta = delta
        self.delta = delta * self.time_scale
        positions = []
        for entity in list(self.entities.values()):
            entity.tick(self.delta)
            if entity.loads_chunks:
                positions.append(entity.tile_position)
        for tile_map in self.tile_maps:
            tile_map.update_chunk_loading(positions)

    def rect_overlaps_any_solid_tile(self, rect: Rect) -> bool:
        return any(tile_map.rect_overlaps_solid_tile(rect) for tile_map in self.tile_maps)

    def clean(self) -> None:
        """Drop all tile maps and entities."""
        self.tile_maps.clear()
        self.entities.clear()