"""Byte builders for hand made KWD chunks."""
import struct
from datetime import datetime
from typing import Dict, Iterable, Optional, Sequence, Tuple

from kwd_decoder.parser.constants import LEVEL_EXTENDED_DATA_SIZE, MapDataType

TERRAIN_SIZE = 552
ROOM_SIZE = 1055
OBJECT_SIZE = 894
CREATURE_SIZE = 5449
CREATURE_EXTENDED_SIZE = 5537


def timestamp(value: Optional[datetime] = None) -> bytes:
    if value is None:
        return bytes(10)
    return struct.pack('<HBB2xBBBx', value.year, value.day, value.month,
                       value.hour, value.minute, value.second)


def chunk(kind: int, body: bytes, item_count: int = 0, check_one: int = 0,
          check_two: int = 0, data_size: Optional[int] = None,
          created: Optional[datetime] = None, size: Optional[int] = None) -> bytes:
    """Catalog style chunk: 56 byte header then the body."""
    tail = struct.pack('<II', item_count, 0) + timestamp(created) + timestamp()
    return (struct.pack('<IIIII', kind, 4, 56 + len(body) if size is None else size,
                        check_one, len(tail))
            + tail
            + struct.pack('<II', check_two, len(body) if data_size is None else data_size)
            + body)


def map_chunk(width: int, height: int, tiles: Iterable[Tuple[int, int, int, int]]) -> bytes:
    body = b''.join(struct.pack('<4B', *tile) for tile in tiles)
    return (struct.pack('<IIIII', MapDataType.MAP, 4, 36 + len(body), 0, 8)
            + struct.pack('<II', width, height)
            + struct.pack('<II', 0, len(body))
            + body)


def triggers_chunk(records: Sequence[bytes], generic_count: int, action_count: int) -> bytes:
    body = b''.join(records)
    tail = struct.pack('<III', generic_count, action_count, 0) + timestamp() + timestamp()
    return (struct.pack('<IIIII', MapDataType.TRIGGERS, 4, 60 + len(body), 0, len(tail))
            + tail
            + struct.pack('<II', 0, len(body))
            + body)


def record(size: int, fields: Dict[int, Tuple[str, int]]) -> bytes:
    """Zero filled record with some fields packed at given offsets."""
    data = bytearray(size)
    for offset, (fmt, value) in fields.items():
        struct.pack_into('<' + fmt, data, offset, value)
    return bytes(data)


def terrain_record(terrain_id: int, flags: int = 0, size: int = TERRAIN_SIZE) -> bytes:
    return record(size, {400: ('I', flags), 470: ('B', terrain_id)})


def room_record(room_id: int, terrain_id: int, flags: int = 0) -> bytes:
    return record(ROOM_SIZE, {880: ('I', flags), 914: ('B', room_id), 916: ('B', terrain_id)})


def object_record(object_id: int, flags: int = 0) -> bytes:
    return record(OBJECT_SIZE, {836: ('I', flags), 858: ('B', object_id)})


def creature_record(creature_id: int, flags: int = 0, flags2: Optional[int] = None) -> bytes:
    fields = {3836: ('I', flags), 3915: ('B', creature_id)}
    if flags2 is None:
        return record(CREATURE_SIZE, fields)
    fields[CREATURE_SIZE + 80] = ('I', flags2)
    return record(CREATURE_EXTENDED_SIZE, fields)


def thing(tag: int, payload: bytes, length: Optional[int] = None) -> bytes:
    return struct.pack('<II', tag, len(payload) if length is None else length) + payload


def object_thing(pos_x: int, pos_y: int, money_amount: int = 0, object_id: int = 1,
                 player_id: int = 0, trigger_id: int = 0) -> bytes:
    payload = struct.pack('<ii4BiiHBB', pos_x, pos_y, 0, 0, 0, 0, 0, money_amount,
                          trigger_id, object_id, player_id)
    return thing(194, payload)


def trigger(tag: int, raw_type: int, trigger_id: int, body: bytes = bytes(8),
            id_next: int = 0, id_child: int = 0, repeat: int = 0) -> bytes:
    payload = body + struct.pack('<HHHBB', trigger_id, id_next, id_child, raw_type, repeat)
    return struct.pack('<II', tag, len(payload)) + payload


def variable(variable_id: int, *values: int) -> bytes:
    return struct.pack('<4i', variable_id, *values)


def level_chunk(paths: Sequence[Tuple[int, str]], name: str = 'Test',
                unknown_words: Sequence[int] = (), check: int = 222) -> bytes:
    """Level info chunk with the given (kind, path) table."""
    info = bytearray(LEVEL_EXTENDED_DATA_SIZE)
    encoded = name.encode('utf-16-le')
    info[:len(encoded)] = encoded
    body = bytes(info) + struct.pack('<II', check, 0)
    for kind, path in paths:
        body += struct.pack('<Ii', kind, 0) + path.encode('cp1252').ljust(64, b'\0')
    body += b''.join(struct.pack('<I', w) for w in unknown_words)

    tail = (struct.pack('<HHI', len(paths), len(unknown_words), 0)
            + timestamp() + timestamp())
    return (struct.pack('<IIIII', MapDataType.LEVEL, 4, 56 + len(body), 0, len(tail))
            + tail
            + struct.pack('<II', 0, LEVEL_EXTENDED_DATA_SIZE)
            + body)
