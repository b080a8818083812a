# kwd_decoder/chunks/things/flags.py
from enum import IntEnum, IntFlag


class ThingType(IntEnum):
    """Record tag of a placed thing."""
    OBJECT = 194
    TRAP = 195
    DOOR = 196
    ACTION_POINT = 197
    NEUTRAL_CREATURE = 198
    GOOD_CREATURE = 199
    KEEPER_CREATURE = 200
    HERO_PARTY = 201
    DEAD_BODY = 202
    EFFECT_GENERATOR = 203
    ROOM = 204
    CAMERA = 205


class ThingCreatureFlag(IntFlag):
    WILL_FIGHT = 0x01
    LEADER = 0x02
    FOLLOWER = 0x04
    WILL_BE_ATTACKED = 0x08
    RETURN_TO_HERO_LAIR = 0x10
    FREE_FRIENDS_ON_JAIL_BREAK = 0x20
    ACT_AS_DROPPED = 0x40
    START_AS_DYING = 0x80


class ThingCreatureFlag2(IntFlag):
    IS_UNCONSCIOUS = 0x01
    DESTROY_ROOMS = 0x02
    INVISIBLE = 0x04
    UNKNOWN_08 = 0x08


class DoorThingFlag(IntEnum):
    NONE = 0
    LOCKED = 1
    BLUEPRINT = 2


class ActionPointFlag(IntFlag):
    REVEAL_THROUGH_FOG_OF_WAR = 0x0002
    TOOL_BOX = 0x0004
    IGNORE_SOLID = 0x0008
    HERO_LAIR = 0x0010
    FLAG_20 = 0x0020
    FLAG_40 = 0x0040


class Objective(IntEnum):
    NONE = 0
    DESTROY_ROOMS = 1
    DESTROY_WALLS = 2
    STEAL_GOLD = 3
    STEAL_SPELLS = 4
    STEAL_MANUFACTURE_CRATES = 5
    KILL_CREATURES = 6
    KILL_PLAYER = 7
    WAIT = 8
    SEND_TO_ACTION_POINT = 9
    JAIL_BREAK = 10


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class RoomType(IntEnum):
    PORTAL = 0
    DUNGEON_HEART = 1
    HERO_GATE_FRONT_END = 2
    HERO_GATE_2_X_2 = 3
    HERO_GATE_3_X_1 = 4
    HERO_PORTAL = 5
    HERO_GATE = 6


class CameraFlag(IntFlag):
    DISABLE_YAW = 0x0001
    DISABLE_ROLL = 0x0002
    DISABLE_PITCH = 0x0004
    LIMIT_YAW = 0x0008
    LIMIT_ROLL = 0x0010
    LIMIT_PITCH = 0x0020
    DISABLE_MOVE = 0x0040
    DISABLE_CHANGE_VIEW_DISTANCE = 0x0080
    DISABLE_CHANGE_ZOOM = 0x0100
    DISABLE_CHANGE_LENS = 0x0200
