# kwd_decoder/chunks/effects/flags.py
from enum import IntEnum, IntFlag


class EffectFlag(IntFlag):
    DIE_WHEN_HIT_SOLID = 0x00001
    DIE_WHEN_HIT_WATER = 0x00002
    DIE_WHEN_HIT_LAVA = 0x00004
    FADE_OVER_TIME = 0x00008
    RANDOM_GENERATION = 0x00010
    GENERATE_EVERY_TURN = 0x00020
    UNKNOWN_00040 = 0x00040
    FLOATS = 0x00080
    HAS_LIGHT = 0x00100
    HAS_GRAVITY = 0x00200
    HEAT_EFFECT = 0x00400
    IS_PARTICLE = 0x00800


class GenerationType(IntEnum):
    NONE = 0
    DEFAULT = 1
    CUBE_GEN = 2
    RANDOM_DIR = 3
    EXPLOSION = 4
    RANDOM_WHIRLPOOL = 5
    RANDOM_CIRCLE = 6
