# kwd_decoder/chunks/terrain/flags.py
from enum import IntFlag


class TerrainFlag(IntFlag):
    SOLID = 0x00000001
    IMPENETRABLE = 0x00000002
    OWNABLE = 0x00000004
    TAGGABLE = 0x00000008
    ROOM = 0x00000010
    ATTACKABLE = 0x00000020
    TORCH = 0x00000040
    WATER = 0x00000080
    LAVA = 0x00000100
    ALWAYS_EXPLORED = 0x00000200
    PLAYER_COLOURED_PATH = 0x00000400
    PLAYER_COLOURED_WALL = 0x00000800
    CONSTRUCTION_TYPE_WATER = 0x00001000
    CONSTRUCTION_TYPE_QUAD = 0x00002000
    UNEXPLORE_IF_DUG_BY_ANOTHER_PLAYER = 0x00004000
    FILL_INABLE = 0x00008000
    ALLOW_ROOM_WALLS = 0x00010000
    DECAY = 0x00020000
    RANDOM_TEXTURE = 0x00040000
    TERRAIN_COLOR_RELATIVE = 0x00080000
    DWARF_CAN_DIG_THROUGH = 0x00100000
    REVEAL_THROUGH_FOG_OF_WAR = 0x00200000
    AMBIENT_COLOR_RELATIVE = 0x00400000
    LIGHT = 0x00800000
    TERRAIN_LIGHT = 0x01000000
    AMBIENT_LIGHT = 0x02000000
