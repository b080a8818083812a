# kwd_decoder/chunks/players/flags.py
"""Computer player policy vocabularies."""
from enum import IntEnum


class AIType(IntEnum):
    MASTER_KEEPER = 0
    CONQUEROR = 1
    PSYCHOTIC = 2
    STALWART = 3
    GREYMAN = 4
    IDIOT = 5
    GUARDIAN = 6
    THICK_SKINNED_BIG_BULLY = 7
    PARANOID = 8


class Distance(IntEnum):
    CLOSE = 0
    FAR = 1
    VERY_FAR = 2


class CorridorStyle(IntEnum):
    BLOBBY = 0
    STRAIGHT = 1
    MIXED = 2


class RoomExpandPolicy(IntEnum):
    ALWAYS_EXPAND = 0
    EXPAND_OR_REBUILD = 1
    ALWAYS_REBUILD = 2


class DoorUsagePolicy(IntEnum):
    NEVER_USE = 0
    USE_SPARINGLY = 1
    USE_A_LOT = 2
    USE_EVERYWHERE = 3


class BreachRoomPolicy(IntEnum):
    ANY = 0
    TREASURY = 1
    LAIR = 2
    LIBRARY = 3
    HEART = 4


class DigToPolicy(IntEnum):
    HEART = 0
    ROOM = 1
    RANDOM = 2


class CreatureDisposalPolicy(IntEnum):
    SACK = 0
    KILL = 1


class SightOfEvilUsagePolicy(IntEnum):
    NEVER = 0
    SOMETIMES = 1
    OFTEN = 2
    ALWAYS = 3


class CallToArmsUsagePolicy(IntEnum):
    NEVER = 0
    SOMETIMES = 1
    OFTEN = 2
    ALWAYS = 3


class MoveToResearchPolicy(IntEnum):
    NEVER = 0
    SOMETIMES = 1
    OFTEN = 2
    ALWAYS = 3


class ImprisonedCreatureFatePolicy(IntEnum):
    TORTURE = 0
    SACRIFICE = 1
    KILL = 2
    LEAVE = 3
