# kwd_decoder/chunks/doors/flags.py
from enum import IntFlag


class DoorFlag(IntFlag):
    IS_SECRET = 0x0001
    IS_BARRICADE = 0x0002
    IS_GOOD = 0x0004
    RESEARCHABLE = 0x0008
    STOPS_LIQUIDS = 0x0010
    IS_UNDESTROYABLE = 0x0020
