# kwd_decoder/chunks/map/flags.py
from enum import IntEnum


class BridgeTerrainType(IntEnum):
    """What a bridge tile is built over."""
    NONE = 0
    WATER = 1
    LAVA = 2
