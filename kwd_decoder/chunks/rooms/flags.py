# kwd_decoder/chunks/rooms/flags.py
from enum import IntEnum, IntFlag


class RoomFlag(IntFlag):
    PLACEABLE_ON_WATER = 0x0001
    PLACEABLE_ON_LAVA = 0x0002
    PLACEABLE_ON_LAND = 0x0004
    HAS_WALLS = 0x0008
    CENTRE = 0x0010
    SPECIAL_TILES = 0x0020
    NORMAL_TILES = 0x0040
    BUILDABLE = 0x0080
    SPECIAL_WALLS = 0x0100
    ATTACKABLE = 0x0200
    UNKNOWN_0400 = 0x0400
    UNKNOWN_0800 = 0x0800
    HAS_FLAME = 0x1000
    IS_GOOD = 0x2000


class TileConstruction(IntEnum):
    NORMAL = 0
    QUAD = 1
    THREE_BY_THREE_ROTATED = 2
    THREE_BY_THREE = 3
    HERO_GATE_FRONT_END = 4
    HERO_GATE_TWO_BY_TWO = 5
    HERO_GATE = 6
    HERO_GATE_THREE_BY_ONE = 7
    DOUBLE_QUAD = 8
    FIVE_BY_FIVE_ROTATED = 9
