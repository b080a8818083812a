# kwd_decoder/chunks/effect_elements/flags.py
from enum import IntFlag


class EffectElementFlag(IntFlag):
    DIES_OVER_TIME = 0x000001
    SHRINKS_OVER_TIME = 0x000002
    FADES_OVER_TIME = 0x000004
    ANIMATES_ONCE = 0x000008
    EXPANDS_OVER_TIME = 0x000010
    ROTATES = 0x000020
    DIE_WHEN_HIT_SOLID = 0x000040
    DIE_WHEN_HIT_WATER = 0x000080
    DIE_WHEN_HIT_LAVA = 0x000100
    RANDOM_MOVEMENT = 0x000200
    BOUNCE = 0x000400
    HAS_DRAG = 0x000800
    WHIRLPOOL = 0x001000
    FLOATS = 0x002000
