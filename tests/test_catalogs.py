"""Tests for the fixed layout catalog readers."""
import pytest

from kwd_decoder.chunks import (
    CreatureSpellsChunk, CreaturesChunk, DoorsChunk, EffectElementsChunk, EffectsChunk,
    KeeperSpellsChunk, ObjectsChunk, PlayersChunk, RoomsChunk, ShotsChunk, TerrainChunk, TrapsChunk
)
from kwd_decoder.chunks.creature_spells import CreatureSpellFlag
from kwd_decoder.chunks.creatures import CreatureFlag2
from kwd_decoder.chunks.doors import DoorFlag
from kwd_decoder.chunks.effect_elements import EffectElementFlag
from kwd_decoder.chunks.effects import EffectFlag
from kwd_decoder.chunks.keeper_spells import KeeperSpellFlag
from kwd_decoder.chunks.players import AIType
from kwd_decoder.chunks.rooms import RoomFlag
from kwd_decoder.chunks.shots import ShotFlag
from kwd_decoder.chunks.terrain import TerrainFlag
from kwd_decoder.chunks.traps import TrapFlag
from kwd_decoder.errors import ChunkParsingError
from kwd_decoder.parser import ByteReader, MapDataType, read_header
from kwd_decoder.parser.catalog import Catalog
from kwd_decoder.utils.diagnostics import DiagnosticKind, Diagnostics

from builders import (
    chunk, creature_record, object_record, record, room_record, terrain_record, CREATURE_SIZE
)


def parse_chunk(chunk_cls, data: bytes, diagnostics=None):
    reader = ByteReader(data, diagnostics=diagnostics)
    header = read_header(reader)
    return chunk_cls(header, reader).parse(), reader


def parse_record(chunk_cls, kind, body: bytes, **kwargs):
    entries, reader = parse_chunk(chunk_cls, chunk(kind, body, item_count=1, **kwargs))
    assert reader.at_end()
    assert reader.diagnostics.count(DiagnosticKind.RECORD_DRIFT) == 0
    return entries[0]


class TestTerrain:
    def test_records_keep_ids_and_flags(self):
        body = terrain_record(1, TerrainFlag.SOLID) + terrain_record(2, TerrainFlag.WATER)
        terrains, reader = parse_chunk(TerrainChunk, chunk(MapDataType.TERRAIN, body, item_count=2))
        assert [t.id for t in terrains] == [1, 2]
        assert not terrains[0].is_water()
        assert terrains[1].is_water()
        assert terrains[0].complete_resource is None
        assert reader.at_end()

    def test_longer_records_are_realigned(self):
        body = terrain_record(1, size=560) + terrain_record(2, size=560)
        terrains, reader = parse_chunk(TerrainChunk, chunk(MapDataType.TERRAIN, body, item_count=2))
        assert [t.id for t in terrains] == [1, 2]
        assert reader.tell() == 56 + 2 * 560
        assert reader.diagnostics.count(DiagnosticKind.RECORD_DRIFT) == 2


class TestRooms:
    def test_room_terrain_id(self):
        body = room_record(3, 14, RoomFlag.PLACEABLE_ON_LAND)
        rooms, _ = parse_chunk(RoomsChunk, chunk(MapDataType.ROOMS, body, item_count=1))
        assert rooms[0].id == 3
        assert rooms[0].terrain_id == 14
        assert rooms[0].is_placeable_on_land()


class TestObjects:
    def test_level_gem(self):
        body = object_record(7, 0x0001000) + object_record(8)
        objects, _ = parse_chunk(ObjectsChunk, chunk(MapDataType.OBJECTS, body, item_count=2))
        assert objects[0].is_level_gem()
        assert not objects[1].is_level_gem()
        assert objects[0].additional_resources == []


class TestCreatures:
    def test_short_records_have_no_extended_fields(self):
        body = creature_record(9, 0x41)
        creatures, reader = parse_chunk(
            CreaturesChunk, chunk(MapDataType.CREATURES, body, item_count=1))
        creature = creatures[0]
        assert creature.id == 9
        assert creature.is_imp
        assert not creature.has_extended_data
        assert creature.flags2 is None
        assert creature.unknown is None
        assert reader.tell() == 56 + CREATURE_SIZE
        assert reader.diagnostics.count(DiagnosticKind.RECORD_DRIFT) == 0

    def test_extended_records(self):
        body = creature_record(4, 0x1, flags2=CreatureFlag2.IS_MALE)
        creatures, reader = parse_chunk(
            CreaturesChunk, chunk(MapDataType.CREATURES, body, item_count=1))
        creature = creatures[0]
        assert creature.has_extended_data
        assert creature.flags2 == CreatureFlag2.IS_MALE
        assert not creature.is_imp
        assert reader.at_end()


class TestCreatureSpells:
    def test_check_words_enforced(self):
        with pytest.raises(ChunkParsingError, match="Creature spells file is corrupted"):
            parse_chunk(CreatureSpellsChunk, chunk(MapDataType.CREATURE_SPELLS, b''))

    def test_valid_empty_chunk(self):
        spells, _ = parse_chunk(CreatureSpellsChunk, chunk(
            MapDataType.CREATURE_SPELLS, b'', check_one=161, check_two=162))
        assert spells == []


class TestCatalog:
    def test_override_replaces_and_reports(self):
        diagnostics = Diagnostics()
        catalog = Catalog(MapDataType.TERRAIN, diagnostics)
        first, _ = parse_chunk(TerrainChunk, chunk(
            MapDataType.TERRAIN, terrain_record(1) + terrain_record(2), item_count=2))
        second, _ = parse_chunk(TerrainChunk, chunk(
            MapDataType.TERRAIN, terrain_record(2, TerrainFlag.LAVA), item_count=1))

        catalog.merge(first)
        assert diagnostics.count(DiagnosticKind.CATALOG_OVERRIDE) == 0
        catalog.merge(second)

        events = diagnostics.events_of(DiagnosticKind.CATALOG_OVERRIDE)
        assert len(events) == 1
        assert events[0].data['replaced'] == [2]
        assert len(catalog) == 2
        assert catalog[2].is_lava()
        assert catalog[1] is first[0]

    def test_sorted_and_frozen(self):
        catalog = Catalog(MapDataType.TERRAIN)
        terrains, _ = parse_chunk(TerrainChunk, chunk(
            MapDataType.TERRAIN, terrain_record(5) + terrain_record(1), item_count=2))
        catalog.merge(terrains)
        assert [t.id for t in catalog.sorted()] == [1, 5]

        frozen = catalog.freeze()
        with pytest.raises(TypeError):
            frozen[3] = terrains[0]
        with pytest.raises(RuntimeError):
            catalog.merge(terrains)


class TestRecordLayouts:
    def test_door(self):
        flags = DoorFlag.IS_SECRET | DoorFlag.STOPS_LIQUIDS
        door = parse_record(DoorsChunk, MapDataType.DOORS, record(616, {
            536: ('i', 3 * 4096), 552: ('I', flags), 580: ('B', 4)}))
        assert door.id == 4
        assert door.height == 3.0
        assert door.flags == flags
        assert door.mesh is None

    def test_trap(self):
        flags = TrapFlag.DISARMABLE | TrapFlag.ONE_SHOT
        trap = parse_record(TrapsChunk, MapDataType.TRAPS, record(579, {
            452: ('i', 4096 // 2), 492: ('I', flags), 524: ('B', 11)}))
        assert trap.id == 11
        assert trap.height == 0.5
        assert trap.flags == flags
        assert trap.shot_offset == (0.0, 0.0, 0.0)

    def test_creature_spell(self):
        flags = CreatureSpellFlag.IS_ATTACKING | CreatureSpellFlag.CAN_TARGET_ENEMIES
        spell = parse_record(CreatureSpellsChunk, MapDataType.CREATURE_SPELLS, record(266, {
            208: ('i', 12 * 4096), 212: ('I', flags), 230: ('B', 6)}),
            check_one=161, check_two=162)
        assert spell.id == 6
        assert spell.range == 12.0
        assert spell.flags == flags

    def test_shot(self):
        flags = ShotFlag.HITS_ENEMIES | ShotFlag.DIE_WHEN_HIT_SOLID
        shot = parse_record(ShotsChunk, MapDataType.SHOTS, record(239, {
            148: ('i', 3 * 4096), 168: ('I', flags), 190: ('B', 17)}))
        assert shot.id == 17
        assert shot.speed == 3.0
        assert shot.flags == flags
        assert shot.sound_category == ''

    def test_effect(self):
        flags = EffectFlag.HAS_LIGHT | EffectFlag.FLOATS
        effect = parse_record(EffectsChunk, MapDataType.EFFECTS, record(246, {
            152: ('i', 2 * 4096), 180: ('I', flags), 184: ('H', 300), 202: ('H', 7)}))
        assert effect.id == 300
        assert effect.radius == 2.0
        assert effect.flags == flags
        assert effect.generate_ids == [7]

    def test_effect_element(self):
        flags = EffectElementFlag.ROTATES | EffectElementFlag.FLOATS
        element = parse_record(EffectElementsChunk, MapDataType.EFFECT_ELEMENTS, record(182, {
            152: ('i', 4096 // 4), 156: ('I', flags), 160: ('H', 812)}))
        assert element.id == 812
        assert element.scale_ratio == 0.25
        assert element.flags == flags

    def test_keeper_spell(self):
        flags = KeeperSpellFlag.IS_ATTACKING | KeeperSpellFlag.CAN_CAST_IN_FOG
        spell = parse_record(KeeperSpellsChunk, MapDataType.KEEPER_SPELLS, record(406, {
            204: ('i', 10 * 4096), 220: ('I', flags), 238: ('B', 9)}))
        assert spell.id == 9
        assert spell.recharge_time == 10.0
        assert spell.flags == flags
        assert spell.bonus_icon is None

    def test_player(self):
        player = parse_record(PlayersChunk, MapDataType.PLAYERS, record(205, {
            0: ('i', 2500), 4: ('I', 1), 8: ('B', AIType.CONQUEROR),
            146: ('I', 1000), 166: ('H', 12), 168: ('B', 3)}))
        assert player.id == 3
        assert player.starting_gold == 2500
        assert player.ai
        assert player.trigger_id == 12
        assert player.ai_attributes.ai_type is AIType.CONQUEROR
        assert player.ai_attributes.starting_mana == 1000
