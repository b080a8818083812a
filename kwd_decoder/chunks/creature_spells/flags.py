# kwd_decoder/chunks/creature_spells/flags.py
from enum import IntEnum, IntFlag


class CreatureSpellFlag(IntFlag):
    IS_ATTACKING = 0x0001
    IS_DEFENSIVE = 0x0002
    IS_FORCED = 0x0004
    CAN_BE_SEEN = 0x0008
    FIXED_RANGE = 0x0010
    CAN_TARGET_ALLIES = 0x0020
    CAN_TARGET_ENEMIES = 0x0040
    SELF_CAST = 0x0080


class AlternativeShot(IntEnum):
    NONE = 0
    ROOM = 1
    SHOT = 2
