"""Tests for the map grid and the placed things."""
import struct

import numpy as np

from kwd_decoder.chunks import MapChunk, ThingsChunk
from kwd_decoder.chunks.map import BridgeTerrainType
from kwd_decoder.chunks.things import HeroParty, ObjectThing, ThingType
from kwd_decoder.parser import ByteReader, MapDataType, read_header
from kwd_decoder.utils.diagnostics import DiagnosticKind

from builders import chunk, map_chunk, object_thing, thing


def parse_chunk(chunk_cls, data: bytes):
    reader = ByteReader(data)
    header = read_header(reader)
    return chunk_cls(header, reader).parse(), reader


class TestMap:
    def test_two_by_one(self):
        data = map_chunk(2, 1, [(3, 0, 0, 0), (5, 1, 1, 0)])
        game_map, reader = parse_chunk(MapChunk, data)
        assert (game_map.width, game_map.height) == (2, 1)

        first, second = game_map.tile(0, 0), game_map.tile(1, 0)
        assert (first.terrain_id, first.player_id, first.flag, first.unknown) == \
            (3, 0, BridgeTerrainType.NONE, 0)
        assert (second.terrain_id, second.player_id, second.flag, second.unknown) == \
            (5, 1, BridgeTerrainType.WATER, 0)
        assert reader.at_end()

    def test_rows_are_y_major(self):
        tiles = [(x + 10 * y, 0, 0, 0) for y in range(2) for x in range(3)]
        game_map, _ = parse_chunk(MapChunk, map_chunk(3, 2, tiles))
        assert game_map.tile(2, 1).terrain_id == 12
        assert game_map.tile(3, 0) is None
        np.testing.assert_array_equal(
            game_map.terrain_ids(), np.array([[0, 1, 2], [10, 11, 12]], dtype=np.uint8))
        assert game_map.player_ids().shape == (2, 3)


class TestThings:
    def test_object_thing(self):
        data = chunk(MapDataType.THINGS, object_thing(100, 200, money_amount=500), item_count=1)
        things, reader = parse_chunk(ThingsChunk, data)
        assert len(things) == 1
        obj = things[0]
        assert isinstance(obj, ObjectThing)
        assert obj.thing_type is ThingType.OBJECT
        assert (obj.pos_x, obj.pos_y) == (100, 200)
        assert obj.money_amount == 500
        assert reader.at_end()

    def test_unknown_tag_is_skipped(self):
        body = thing(999, bytes(range(20))) + object_thing(1, 2)
        things, reader = parse_chunk(ThingsChunk, chunk(MapDataType.THINGS, body, item_count=2))
        assert len(things) == 1
        assert (things[0].pos_x, things[0].pos_y) == (1, 2)
        assert reader.at_end()

        events = reader.diagnostics.events_of(DiagnosticKind.UNKNOWN_THING)
        assert len(events) == 1
        assert events[0].offset == 56 + 8
        assert events[0].data == {'tag': 999, 'length': 20}

    def test_declared_length_wins(self):
        payload = struct.pack('<ii4BiiHBB', 5, 6, 0, 0, 0, 0, 0, 0, 0, 1, 0) + bytes(4)
        things, reader = parse_chunk(
            ThingsChunk, chunk(MapDataType.THINGS, thing(194, payload), item_count=1))
        assert things[0].pos_x == 5
        assert reader.at_end()
        assert reader.diagnostics.count(DiagnosticKind.RECORD_DRIFT) == 1

    def test_hero_party_keeps_used_slots(self):
        members = bytearray(16 * 32)
        members[24] = 6             # slot 0
        members[5 * 32 + 24] = 11   # slot 5
        payload = (b'Lord'.ljust(32, b'\0') + struct.pack('<HBii', 7, 2, 0, 0)
                   + bytes(members))
        things, reader = parse_chunk(
            ThingsChunk, chunk(MapDataType.THINGS, thing(201, payload), item_count=1))
        party = things[0]
        assert isinstance(party, HeroParty)
        assert party.name == 'Lord'
        assert party.id == 2
        assert [m.creature_id for m in party.members] == [6, 11]
        assert reader.at_end()
        assert len(reader.diagnostics) == 0
