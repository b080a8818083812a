# kwd_decoder/chunks/objects/flags.py
from enum import IntEnum, IntFlag


class ObjectFlag(IntFlag):
    DIE_OVER_TIME = 0x0000001
    DIE_OVER_TIME_IF_NOT_IN_ROOM = 0x0000002
    OBJECT_TYPE_SPECIAL = 0x0000004
    OBJECT_TYPE_SPELL_BOOK = 0x0000008
    OBJECT_TYPE_CRATE = 0x0000010
    OBJECT_TYPE_LAIR = 0x0000020
    OBJECT_TYPE_GOLD = 0x0000040
    OBJECT_TYPE_FOOD = 0x0000080
    CAN_BE_PICKED_UP = 0x0000100
    CAN_BE_SLAPPED = 0x0000200
    DIE_WHEN_SLAPPED = 0x0000400
    OBJECT_TYPE_LEVEL_GEM = 0x0001000
    CAN_BE_DROPPED_ON_ANY_LAND = 0x0002000
    OBSTACLE = 0x0004000
    BOUNCE = 0x0008000
    BOULDER_CAN_ROLL_THROUGH = 0x0010000
    BOULDER_DESTROYS = 0x0020000
    PILLAR = 0x0040000
    DOOR_KEY = 0x0100000
    DAMAGEABLE = 0x0200000
    HIGHLIGHTABLE = 0x0400000
    PLACEABLE = 0x0800000
    FIRST_PERSON_OBSTACLE = 0x1000000
    SOLID_OBSTACLE = 0x2000000
    CAST_SHADOWS = 0x4000000


class ObjectState(IntEnum):
    NONE = 0
    NORMAL = 1
    PRISON_ARRIVE = 2
    PRISON_ARRIVE_FINISHED = 3
    PRISON_IDLE = 4
