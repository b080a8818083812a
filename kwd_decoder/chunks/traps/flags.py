# kwd_decoder/chunks/traps/flags.py
from enum import IntEnum, IntFlag


class TrapFlag(IntFlag):
    REVEAL_WHEN_FIRED = 0x0001
    DISARMABLE = 0x0002
    INVISIBLE = 0x0004
    MOVEMENT_SENSITIVE = 0x0008
    REQUIRES_MANA = 0x0010
    ONE_SHOT = 0x0020
    IS_GOOD = 0x0040
    GUARD_POST = 0x0080
    OBSTACLE = 0x0100
    INVULNERABLE = 0x0200
    FIRST_PERSON_OBSTACLE = 0x0400
    SOLID_OBSTACLE = 0x0800


class TriggerType(IntEnum):
    NONE = 0
    LINE_OF_SIGHT = 1
    PRESSURE = 2
    PRESSURE_TRIGGERED_BY_GOOD = 3
    ALWAYS = 4
