# kwd_decoder/chunks/shots/flags.py
from enum import IntEnum, IntFlag


class ShotFlag(IntFlag):
    DIE_OVER_TIME = 0x00000001
    HITS_FRIENDS = 0x00000002
    HITS_ENEMIES = 0x00000004
    HITS_ALL = 0x00000008
    DIE_WHEN_HIT_SOLID = 0x00000010
    DIE_WHEN_HIT_WATER = 0x00000020
    DIE_WHEN_HIT_LAVA = 0x00000040
    DIE_WHEN_HIT_THING = 0x00000080
    HAS_GRAVITY = 0x00000100
    BOUNCES = 0x00000200
    FOLLOWS_TARGET = 0x00000400
    IGNORES_OBSTACLES = 0x00000800
    PUSHES_THINGS = 0x00001000
    UNKNOWN_2000 = 0x00002000
    CAN_HIT_ALL_THINGS = 0x00004000


class ShotProcessFlag(IntFlag):
    UNKNOWN_01 = 0x0001
    UNKNOWN_02 = 0x0002
    UNKNOWN_04 = 0x0004
    UNKNOWN_08 = 0x0008


class DamageType(IntEnum):
    NONE = 0
    PHYSICAL = 1
    FIRE = 2
    COLD = 3
    ELECTRIC = 4
    POISON = 5
    HOLY = 6
    TRAP = 7
    GENERIC = 8


class CollideType(IntEnum):
    NONE = 0
    NORMAL = 1
    BOUNCE = 2
    PIERCE = 3


class ProcessType(IntEnum):
    NONE = 0
    MODIFY_HEALTH = 1
    MODIFY_SPEED = 2
    CREATE_CREATURE = 3
    CREATE_OBJECT = 4
    DIG = 5
    HEAL = 6
    TELEPORT = 7
    POSSESS = 8
    SIGHT_OF_EVIL = 9
    CALL_TO_ARMS = 10
    FREEZE = 11
    HASTE = 12
    INVISIBILITY = 13
    CHICKEN = 14
    DRAIN = 15


class AttackCategory(IntEnum):
    NONE = 0
    MELEE = 1
    RANGED = 2
    AREA = 3
    SPECIAL = 4
