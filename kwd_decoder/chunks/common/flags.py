# kwd_decoder/chunks/common/flags.py
from enum import IntEnum, IntFlag


class ArtResourceType(IntEnum):
    NONE = 0
    SPRITE = 1
    ALPHA = 2
    ADDITIVE_ALPHA = 3
    TERRAIN_MESH = 4
    MESH = 5
    ANIMATING_MESH = 6
    PROCEDURAL_MESH = 7
    MESH_COLLECTION = 8
    UNKNOWN = 9


class ArtResourceFlag(IntFlag):
    PLAYER_COLOURED = 0x0002
    ANIMATING_TEXTURE = 0x0004
    HAS_START_ANIMATION = 0x0008
    HAS_END_ANIMATION = 0x0010
    RANDOM_START_FRAME = 0x0020
    ORIGIN_AT_BOTTOM = 0x0040
    DOESNT_LOOP = 0x0080
    FLAT = 0x0100
    DOESNT_USE_PROGRESSIVE_MESH = 0x0200
    USE_ANIMATING_TEXTURE_FOR_SELECTION = 0x10000
    PRELOAD = 0x20000
    BLOOD = 0x40000


class LightFlag(IntFlag):
    FLICKER = 0x0001
    PULSE = 0x0002
    PLAYER_COLOURED = 0x0004
    COLOURED_BY_ROOM = 0x0008
    FIXED_RADIUS = 0x0010


class Material(IntEnum):
    """Surface material shared by doors, traps, objects and creatures."""
    NONE = 0
    FLESH = 1
    ROCK = 2
    WOOD = 3
    METAL1 = 4
    METAL2 = 5
    MAGIC = 6
    GLASS = 7
