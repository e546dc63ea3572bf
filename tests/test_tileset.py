import pytest

from sibox.tileset import EMPTY_TILE, StandardTiles, TileData, TileSet


def test_add_tile_returns_consecutive_ids_from_one():
    tile_set = TileSet()
    datas = [TileData(sprite_index=i, is_solid=i % 2 == 0) for i in range(5)]
    ids = [tile_set.add_tile(d) for d in datas]
    assert ids == list(range(1, len(datas) + 1))
    assert len(tile_set) == len(datas)


def test_get_tile_round_trip():
    tile_set = TileSet()
    data = TileData(sprite_index=12, is_solid=True)
    tile = tile_set.add_tile(data)
    assert tile_set.get_tile(tile) == data


def test_empty_tile_is_not_solid():
    tile_set = TileSet()
    tile_set.add_tile(TileData(sprite_index=3, is_solid=True))
    assert tile_set.get_tile(EMPTY_TILE).is_solid is False


def test_get_tile_out_of_range_raises():
    tile_set = TileSet()
    tile_set.add_tile(TileData())
    with pytest.raises(IndexError):
        tile_set.get_tile(2)


@pytest.mark.parametrize("bad", [0, 2, -1])
def test_sprite_index_for_invalid_tile_raises(bad):
    tile_set = TileSet()
    tile_set.add_tile(TileData(sprite_index=4))
    with pytest.raises(IndexError):
        tile_set.sprite_index_for_tile(bad)


def test_sprite_index_for_tile():
    tile_set = TileSet()
    tile_set.add_tile(TileData(sprite_index=4))
    second = tile_set.add_tile(TileData(sprite_index=9))
    assert tile_set.sprite_index_for_tile(second) == 9


def test_sprite_sheet_kept():
    sheet = object()
    assert TileSet(sheet).sprite_sheet is sheet


def test_standard_tiles_are_registered_in_order():
    tiles = StandardTiles.create()
    ids = [getattr(tiles, name) for name in StandardTiles.names()]
    assert ids == list(range(1, len(ids) + 1))
    assert len(tiles.tile_set) == len(ids)
    assert tiles.empty == EMPTY_TILE


def test_standard_tile_definitions():
    tiles = StandardTiles.create()
    tile_set = tiles.tile_set
    assert tile_set.get_tile(tiles.grass) == TileData(sprite_index=0, is_solid=False)
    assert tile_set.get_tile(tiles.stone_wall) == TileData(sprite_index=8, is_solid=True)
    assert tile_set.get_tile(tiles.snow) == TileData(sprite_index=37, is_solid=True)
    assert tile_set.sprite_index_for_tile(tiles.deep_water1) == 18
    assert tile_set.sprite_index_for_tile(tiles.light_water6) == 7


def test_water_solidity():
    tiles = StandardTiles.create()
    deep = [tiles.deep_water1, tiles.deep_water2, tiles.deep_water3,
            tiles.deep_water4, tiles.deep_water5, tiles.deep_water6]
    light = [tiles.light_water1, tiles.light_water2, tiles.light_water3,
             tiles.light_water4, tiles.light_water5, tiles.light_water6]
    assert all(tiles.tile_set.get_tile(t).is_solid for t in deep)
    assert not any(tiles.tile_set.get_tile(t).is_solid for t in light)