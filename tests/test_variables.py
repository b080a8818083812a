"""Tests for the level variables."""
import struct

import pytest

from kwd_decoder.chunks import VariablesChunk
from kwd_decoder.chunks.variables import (
    Availability, AvailabilityType, AvailabilityValue, CreatureFirstPerson, CreaturePool,
    CreatureStats, MiscType, MiscVariable, Sacrifice, SacrificeRewardType, SacrificeType,
    StatType, UnknownVariable, VariableStore
)
from kwd_decoder.parser import ByteReader, MapDataType, read_header

from builders import chunk, variable


def parse_variables(*records: bytes):
    reader = ByteReader(chunk(MapDataType.VARIABLES, b''.join(records), item_count=len(records)))
    header = read_header(reader)
    variables = VariablesChunk(header, reader).parse()
    assert reader.at_end()
    return variables


class TestVariablesChunk:
    def test_creature_pool(self):
        (pool,) = parse_variables(variable(1, 12, 5, 0))
        assert pool == CreaturePool(creature_id=12, value=5, player_id=0)

        store = VariableStore()
        store.add(pool)
        assert store.creature_pool(0)[12].value == 5
        assert store.creature_pool(1) is None

    def test_availability(self):
        record = struct.pack('<iHHii', 2, AvailabilityType.ROOM, 3, 14, 1)
        (availability,) = parse_variables(record)
        assert availability == Availability(
            type=AvailabilityType.ROOM, player_id=3, type_id=14, value=AvailabilityValue.AVAILABLE)

    def test_sacrifice(self):
        record = struct.pack('<i8Bi', 75, 1, 4, 1, 4, 1, 6, 3, 9, 20)
        (sacrifice,) = parse_variables(record)
        assert isinstance(sacrifice, Sacrifice)
        assert sacrifice.type1 is SacrificeType.CREATURE
        assert (sacrifice.id1, sacrifice.id3) == (4, 6)
        assert sacrifice.reward_type is SacrificeRewardType.SPELL
        assert sacrifice.speech_id == 9
        assert sacrifice.reward_value == 20

    def test_creature_stats(self):
        stats, first_person, odd = parse_variables(
            variable(65, StatType.HEALTH, 800, 4),
            variable(74, StatType.STRENGTH, 30, 4),
            variable(65, 500, 1, 2))
        assert type(stats) is CreatureStats
        assert stats.stat_id is StatType.HEALTH
        assert isinstance(first_person, CreatureFirstPerson)
        assert odd.stat_id == 500

        store = VariableStore()
        store.extend([stats, first_person, odd])
        assert store.stats(4)[StatType.HEALTH].value == 800
        assert StatType.STRENGTH not in store.stats(4)
        assert store.first_person_stats(4)[StatType.STRENGTH].value == 30
        assert store.stats(2)[500].value == 1

    def test_unknown_and_misc(self):
        unknown, misc, unnamed = parse_variables(
            variable(17, 1, 2, 3),
            variable(MiscType.CLAIM_TILE_HEALTH, 250, 0, 0),
            variable(1000, 7, 0, 0))
        assert unknown == UnknownVariable(17, 1, 2, 3)
        assert isinstance(misc, MiscVariable)
        assert misc.variable_type is MiscType.CLAIM_TILE_HEALTH
        assert unnamed.variable_type is None

        store = VariableStore()
        store.extend([unknown, misc, unnamed])
        assert store.misc_variable(MiscType.CLAIM_TILE_HEALTH).value == 250
        assert store.misc_variable(1000).value == 7
        assert store.unknown == {unknown}
        assert len(store) == 3


class TestVariableStore:
    def test_later_values_win(self):
        store = VariableStore()
        store.extend(parse_variables(variable(1, 12, 5, 0), variable(1, 12, 9, 0)))
        assert store.creature_pool(0)[12].value == 9

    def test_freeze(self):
        store = VariableStore()
        store.extend(parse_variables(variable(1, 12, 5, 0)))
        store.freeze()
        with pytest.raises(TypeError):
            store.creature_pools[0][13] = None
        with pytest.raises(RuntimeError):
            store.add(CreaturePool(1, 1, 1))
