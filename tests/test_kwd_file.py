"""Tests for loading a whole level set from disk."""
import struct
from pathlib import Path

import pytest

from kwd_decoder import KwdFile, KwdLoadError, LoadState, MapDataType
from kwd_decoder.chunks.map import BridgeTerrainType
from kwd_decoder.chunks.rooms import RoomFlag
from kwd_decoder.chunks.terrain import TerrainFlag
from kwd_decoder.chunks.triggers import TargetType, TriggerAction
from kwd_decoder.errors import ChunkParsingError
from kwd_decoder.parser.constants import DEFAULT_EFFECTS_PATH, DEFAULT_EFFECT_ELEMENTS_PATH
from kwd_decoder.utils.diagnostics import DiagnosticKind

from builders import (
    chunk, creature_record, level_chunk, map_chunk, object_record, object_thing, room_record,
    terrain_record, thing, trigger, triggers_chunk, variable
)

LEVEL_FILE = 'Data/editor/maps/Test.kwd'

BASE_PATHS = [
    (MapDataType.MAP, 'Data\\editor\\maps\\TestMap'),
    (MapDataType.TERRAIN, 'Data\\editor\\Terrain.kwd'),
    (MapDataType.ROOMS, 'Data\\editor\\Rooms.kwd'),
    (MapDataType.CREATURES, 'Data\\editor\\Creatures.kwd'),
    (MapDataType.OBJECTS, 'Data\\editor\\Objects.kwd'),
    (MapDataType.THINGS, 'Data\\editor\\maps\\TestThings.kld'),
    (MapDataType.TRIGGERS, 'Data\\editor\\maps\\TestTriggers.kld'),
    (MapDataType.VARIABLES, 'Data\\editor\\maps\\TestVariables.kld'),
]


def write(base: Path, relative: str, data: bytes) -> Path:
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def write_level(base: Path, paths=BASE_PATHS, **kwargs) -> Path:
    return write(base, LEVEL_FILE, level_chunk(paths, name='Test.kwd', **kwargs))


@pytest.fixture
def level_set(tmp_path):
    """Game root with a small level, some files use a different case on disk."""
    write(tmp_path, 'Data/editor/maps/testmap.KWD',
          map_chunk(2, 1, [(1, 0, 0, 0), (30, 1, 1, 0)]))
    write(tmp_path, 'Data/editor/terrain.kwd', chunk(
        MapDataType.TERRAIN,
        terrain_record(1, TerrainFlag.SOLID)
        + terrain_record(2, TerrainFlag.WATER)
        + terrain_record(3, TerrainFlag.WATER)
        + terrain_record(4, TerrainFlag.LAVA)
        + terrain_record(20, TerrainFlag.ROOM)
        + terrain_record(30, TerrainFlag.ROOM),
        item_count=6))
    write(tmp_path, 'Data/editor/Rooms.kwd', chunk(
        MapDataType.ROOMS,
        room_record(3, 20, RoomFlag.PLACEABLE_ON_LAND) + room_record(8, 30, RoomFlag.PLACEABLE_ON_WATER),
        item_count=2))
    write(tmp_path, 'Data/editor/Creatures.kwd', chunk(
        MapDataType.CREATURES,
        creature_record(1, 0x1) + creature_record(2, 0x41) + creature_record(3, 0x41),
        item_count=3))
    write(tmp_path, 'Data/editor/Objects.kwd', chunk(
        MapDataType.OBJECTS,
        object_record(5) + object_record(6, 0x1000) + object_record(7, 0x1000),
        item_count=3))
    write(tmp_path, 'Data/editor/maps/TestThings.kld', chunk(
        MapDataType.THINGS,
        object_thing(100, 200, money_amount=500) + thing(999, bytes(20)) + object_thing(3, 4),
        item_count=3))
    write(tmp_path, 'Data/editor/maps/TestTriggers.kld', triggers_chunk(
        [trigger(213, TargetType.TIMER, 5, id_child=6), trigger(214, 0, 6)], 1, 1))
    write(tmp_path, 'Data/editor/maps/TestVariables.kld', chunk(
        MapDataType.VARIABLES, variable(1, 12, 5, 0), item_count=1))
    write(tmp_path, DEFAULT_EFFECTS_PATH, chunk(MapDataType.EFFECTS, b''))
    write(tmp_path, DEFAULT_EFFECT_ELEMENTS_PATH, chunk(MapDataType.EFFECT_ELEMENTS, b''))
    write_level(tmp_path)
    return tmp_path


class TestKwdFile:
    def test_full_load(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.state is LoadState.LOADED
        assert kwd.level.name == 'Test'
        assert (kwd.map.width, kwd.map.height) == (2, 1)
        assert kwd.map.tile(1, 0).terrain_id == 30

        assert [t.id for t in kwd.terrains()] == [1, 2, 3, 4, 20, 30]
        assert kwd.terrain(4).is_lava()
        assert kwd.creature(7) is None

        things = kwd.things()
        assert len(things) == 2
        assert (things[0].pos_x, things[0].pos_y, things[0].money_amount) == (100, 200, 500)
        assert kwd.diagnostics.count(DiagnosticKind.UNKNOWN_THING) == 1

        assert kwd.trigger(5).id_child == 6
        assert isinstance(kwd.trigger(6), TriggerAction)
        assert kwd.creature_pool(0)[12].value == 5

    def test_derived_lookups_first_match(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.water_terrain.id == 2
        assert kwd.lava_terrain.id == 4
        assert kwd.imp().id == 2
        assert kwd.level_gem().id == 6
        assert kwd.portal().id == 3
        assert kwd.room_by_terrain(30).id == 8

    def test_terrain_bridge(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.terrain(30)).id == 2
        assert kwd.terrain_bridge(BridgeTerrainType.LAVA, kwd.room(8)).id == 4
        assert kwd.terrain_bridge(BridgeTerrainType.NONE, kwd.room(8)) is None
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.terrain(20)) is None
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.terrain(1)) is None

    def test_terrain_bridge_needs_room_terrain(self, level_set):
        write(level_set, 'Data/editor/Rooms.kwd', chunk(
            MapDataType.ROOMS,
            room_record(8, 30, RoomFlag.PLACEABLE_ON_WATER) + room_record(9, 2, RoomFlag.PLACEABLE_ON_WATER),
            item_count=2))
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.room_by_terrain(2).id == 9
        assert TerrainFlag.ROOM not in kwd.terrain(2).flags
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.terrain(2)) is None
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.room(9)).id == 2
        assert kwd.terrain_bridge(BridgeTerrainType.WATER, kwd.terrain(30)).id == 2

    def test_default_effect_paths(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        effects = kwd.level.file(MapDataType.EFFECTS)
        assert effects.path == DEFAULT_EFFECTS_PATH
        assert kwd.level.has_path(MapDataType.EFFECT_ELEMENTS)
        assert not kwd.level.custom_overrides
        assert kwd.level.file(MapDataType.MAP).path == 'Data/editor/maps/TestMap.kwd'

    def test_load_twice_is_a_no_op(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        events = len(kwd.diagnostics)
        kwd.load()
        assert kwd.state is LoadState.LOADED
        assert len(kwd.things()) == 2
        assert len(kwd.catalog(MapDataType.TERRAIN)) == 6
        assert len(kwd.diagnostics) == events

    def test_loaded_model_is_read_only(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        with pytest.raises(TypeError):
            kwd.catalog(MapDataType.TERRAIN)[99] = None

    def test_dimensions_only(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE, load=False)
        assert kwd.state is LoadState.DIMENSIONS_ONLY
        assert kwd.map is None
        assert (kwd.map_width, kwd.map_height) == (2, 1)
        assert len(kwd.catalog(MapDataType.TERRAIN)) == 0

        kwd.load()
        assert kwd.state is LoadState.LOADED
        assert kwd.map is not None
        assert kwd.water_terrain.id == 2

    def test_override_load(self, level_set):
        write(level_set, 'Data/editor/maps/TestTerrain.kld', chunk(
            MapDataType.TERRAIN, terrain_record(1, TerrainFlag.LAVA), item_count=1))
        write_level(level_set, BASE_PATHS + [(MapDataType.TERRAIN, 'Data\\editor\\maps\\TestTerrain.kld')])
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.terrain(1).is_lava()
        assert kwd.lava_terrain.id == 4
        events = kwd.diagnostics.events_of(DiagnosticKind.CATALOG_OVERRIDE)
        assert len(events) == 1
        assert events[0].file.endswith('TestTerrain.kld')

    def test_custom_overrides_skip_defaults(self, level_set):
        write(level_set, 'Data/editor/maps/TestGlobals.kld', chunk(MapDataType.GLOBALS, b''))
        write_level(level_set, BASE_PATHS + [(MapDataType.GLOBALS, 'Data\\editor\\maps\\TestGlobals.kld')])
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.level.custom_overrides
        assert not kwd.level.has_path(MapDataType.EFFECTS)
        assert kwd.diagnostics.count(DiagnosticKind.NO_READER) == 1

    def test_globals_wrap_override_chunks(self, level_set):
        nested = chunk(MapDataType.TERRAIN, terrain_record(9, TerrainFlag.LAVA), item_count=1)
        write(level_set, 'Data/editor/maps/TestGlobals.kld',
              chunk(MapDataType.GLOBALS, nested, size=56 + len(nested)))
        write_level(level_set, BASE_PATHS + [(MapDataType.GLOBALS, 'Data\\editor\\maps\\TestGlobals.kld')])
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert kwd.terrain(9) is not None
        assert kwd.terrain(9).is_lava()
        assert kwd.terrain(1) is not None
        assert kwd.lava_terrain.id == 4
        events = kwd.diagnostics.events_of(DiagnosticKind.CATALOG_OVERRIDE)
        assert len(events) == 1
        assert events[0].file.endswith('TestGlobals.kld')
        assert kwd.diagnostics.count(DiagnosticKind.NO_READER) == 1

    def test_trigger_id_collision(self, level_set):
        write(level_set, 'Data/editor/maps/TestTriggers.kld', triggers_chunk(
            [trigger(213, TargetType.TIMER, 5), trigger(214, 0, 5)], 1, 1))
        kwd = KwdFile(level_set, level_set / LEVEL_FILE)
        assert isinstance(kwd.trigger(5), TriggerAction)
        assert kwd.diagnostics.count(DiagnosticKind.TRIGGER_ID_COLLISION) == 1


class TestLoadErrors:
    def test_missing_file(self, level_set):
        (level_set / 'Data/editor/Rooms.kwd').unlink()
        with pytest.raises(KwdLoadError) as excinfo:
            KwdFile(level_set, level_set / LEVEL_FILE)
        assert str(excinfo.value.path).endswith('Rooms.kwd')
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_missing_file_not_exposed_partially(self, level_set):
        kwd = KwdFile(level_set, level_set / LEVEL_FILE, load=False)
        (level_set / 'Data/editor/Rooms.kwd').unlink()
        with pytest.raises(KwdLoadError):
            kwd.load()
        assert kwd.state is LoadState.DIMENSIONS_ONLY
        assert kwd.map is None
        assert len(kwd.catalog(MapDataType.TERRAIN)) == 0

    def test_corrupt_level(self, tmp_path):
        write(tmp_path, LEVEL_FILE, level_chunk(BASE_PATHS, check=0))
        with pytest.raises(KwdLoadError) as excinfo:
            KwdFile(tmp_path, tmp_path / LEVEL_FILE)
        assert isinstance(excinfo.value.__cause__, ChunkParsingError)
        assert 'Level file is corrupted' in str(excinfo.value.__cause__)

    def test_corrupt_creature_spells(self, level_set):
        write(level_set, 'Data/editor/CreatureSpells.kwd',
              chunk(MapDataType.CREATURE_SPELLS, b'', check_one=160, check_two=162))
        write_level(level_set, BASE_PATHS + [(MapDataType.CREATURE_SPELLS, 'Data\\editor\\CreatureSpells.kwd')])
        with pytest.raises(KwdLoadError) as excinfo:
            KwdFile(level_set, level_set / LEVEL_FILE)
        assert str(excinfo.value.path).endswith('CreatureSpells.kwd')
        assert isinstance(excinfo.value.__cause__, ChunkParsingError)

    def test_file_length_mismatch(self, level_set):
        write(level_set, 'Data/editor/maps/TestCameras.kld',
              chunk(MapDataType.CAMERAS, bytes(8), size=200))
        write_level(level_set, BASE_PATHS + [(MapDataType.CAMERAS, 'Data\\editor\\maps\\TestCameras.kld')])
        with pytest.raises(KwdLoadError) as excinfo:
            KwdFile(level_set, level_set / LEVEL_FILE)
        assert 'Failed to parse file' in str(excinfo.value.__cause__)

    def test_truncated_chunk(self, level_set):
        data = chunk(MapDataType.TERRAIN, terrain_record(1), item_count=1)
        write(level_set, 'Data/editor/terrain.kwd', data[:-100])
        with pytest.raises(KwdLoadError) as excinfo:
            KwdFile(level_set, level_set / LEVEL_FILE)
        assert isinstance(excinfo.value.__cause__, ChunkParsingError)
