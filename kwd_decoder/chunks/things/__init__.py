# kwd_decoder/chunks/things/__init__.py
"""Placed things."""
from .parser import ThingsChunk
from .entry import (
    Thing, ObjectThing, TrapThing, DoorThing, ActionPoint, NeutralCreature, GoodCreature,
    KeeperCreature, HeroParty, DeadBody, EffectGenerator, RoomThing, CameraThing, THING_TYPES
)
from .flags import ThingType

__all__ = [
    'ThingsChunk',
    'Thing',
    'ObjectThing',
    'TrapThing',
    'DoorThing',
    'ActionPoint',
    'NeutralCreature',
    'GoodCreature',
    'KeeperCreature',
    'HeroParty',
    'DeadBody',
    'EffectGenerator',
    'RoomThing',
    'CameraThing',
    'THING_TYPES',
    'ThingType',
]
