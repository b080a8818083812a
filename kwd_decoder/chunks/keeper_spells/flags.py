# kwd_decoder/chunks/keeper_spells/flags.py
from enum import IntEnum, IntFlag


class KeeperSpellFlag(IntFlag):
    IS_ATTACKING = 0x0002
    IS_DEFENSIVE = 0x0004
    UNKNOWN_0008 = 0x0008
    UNKNOWN_0010 = 0x0010
    HAS_BONUS_UPGRADE = 0x0040
    CAN_CAST_IN_FOG = 0x0080


class TargetRule(IntEnum):
    NONE = 0
    ALL = 1
    POSSESSION = 2
    OWN_CREATURES = 3
    ENEMY_CREATURES = 4
    ALL_CREATURES = 5
    LOCATION = 6
    ENEMY_ROOMS = 7
    OWN_ROOMS = 8
    CREATURE_OR_LOCATION = 9


class CastRule(IntEnum):
    NONE = 0
    OWN_LAND = 1
    OWN_AND_NEUTRAL_LAND = 2
    ANY_LAND = 3
    ANY_LAND_EXCEPT_ENEMY = 4


class HandAnimId(IntEnum):
    NULL = 0
    POINT = 1
    CAST_SPELL = 2
    SLAP = 3
    IDLE = 4
    PICKUP = 5
    HOLD = 6
    DROP = 7
    NO_GO = 8
