# kwd_decoder/chunks/things/entry.py
"""Placed things, one record type per tag.

Every variant knows its own tag and how to read its payload, the parser
picks the variant from THING_TYPES.
"""
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple, Type

from ...parser.reader import ByteReader
from ..common import DictMixin
from .flags import (
    ActionPointFlag, CameraFlag, Direction, DoorThingFlag, Objective, RoomType,
    ThingCreatureFlag, ThingCreatureFlag2, ThingType
)

HERO_PARTY_SIZE = 16


@dataclass
class Thing(DictMixin):
    thing_type: ClassVar[ThingType]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Thing':
        raise NotImplementedError


@dataclass
class ObjectThing(Thing):
    """Object, door or trap crate and the like."""
    thing_type: ClassVar[ThingType] = ThingType.OBJECT
    pos_x: int
    pos_y: int
    unknown1: List[int]
    keeper_spell_id: int
    money_amount: int
    trigger_id: int
    object_id: int
    player_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'ObjectThing':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            unknown1=reader.read_ubytes(4),
            keeper_spell_id=reader.read_int(),
            money_amount=reader.read_int(),
            trigger_id=reader.read_ushort(),
            object_id=reader.read_ubyte(),
            player_id=reader.read_ubyte()
        )


@dataclass
class TrapThing(Thing):
    thing_type: ClassVar[ThingType] = ThingType.TRAP
    pos_x: int
    pos_y: int
    unknown1: int
    number_of_shots: int
    trap_id: int
    player_id: int
    unknown2: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'TrapThing':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            unknown1=reader.read_int(),
            number_of_shots=reader.read_ubyte(),
            trap_id=reader.read_ubyte(),
            player_id=reader.read_ubyte(),
            unknown2=reader.read_ubyte()
        )


@dataclass
class DoorThing(Thing):
    thing_type: ClassVar[ThingType] = ThingType.DOOR
    pos_x: int
    pos_y: int
    unknown1: int
    trigger_id: int
    door_id: int
    player_id: int
    flag: Optional[DoorThingFlag]
    unknown2: List[int]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'DoorThing':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            unknown1=reader.read_int(),
            trigger_id=reader.read_ushort(),
            door_id=reader.read_ubyte(),
            player_id=reader.read_ubyte(),
            flag=reader.read_enum(DoorThingFlag),
            unknown2=reader.read_ubytes(3)
        )


@dataclass
class ActionPoint(Thing):
    """Rectangular area referenced by triggers and hero objectives."""
    thing_type: ClassVar[ThingType] = ThingType.ACTION_POINT
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    wait_delay: int
    flags: ActionPointFlag
    trigger_id: int
    id: int
    next_waypoint_id: int
    name: str

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'ActionPoint':
        return cls(
            start_x=reader.read_int(),
            start_y=reader.read_int(),
            end_x=reader.read_int(),
            end_y=reader.read_int(),
            wait_delay=reader.read_ushort(),
            flags=reader.read_flags(ActionPointFlag, width=2),
            trigger_id=reader.read_ushort(),
            id=reader.read_ubyte(),
            next_waypoint_id=reader.read_ubyte(),
            name=reader.read_string(32)
        )


@dataclass
class NeutralCreature(Thing):
    thing_type: ClassVar[ThingType] = ThingType.NEUTRAL_CREATURE
    pos_x: int
    pos_y: int
    pos_z: int
    gold_held: int
    level: int
    flags: ThingCreatureFlag
    initial_health: int
    trigger_id: int
    creature_id: int
    unknown1: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'NeutralCreature':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            pos_z=reader.read_int(),
            gold_held=reader.read_ushort(),
            level=reader.read_ubyte(),
            flags=reader.read_flags(ThingCreatureFlag, width=1),
            initial_health=reader.read_int(),
            trigger_id=reader.read_ushort(),
            creature_id=reader.read_ubyte(),
            unknown1=reader.read_ubyte()
        )


@dataclass
class GoodCreature(Thing):
    """Hero creature, also the layout of a hero party member."""
    thing_type: ClassVar[ThingType] = ThingType.GOOD_CREATURE
    pos_x: int
    pos_y: int
    pos_z: int
    gold_held: int
    level: int
    flags: ThingCreatureFlag
    objective_target_action_point_id: int
    initial_health: int
    trigger_id: int
    objective_target_player_id: int
    objective: Optional[Objective]
    creature_id: int
    unknown1: List[int]
    flags2: ThingCreatureFlag2

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'GoodCreature':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            pos_z=reader.read_int(),
            gold_held=reader.read_ushort(),
            level=reader.read_ubyte(),
            flags=reader.read_flags(ThingCreatureFlag, width=1),
            objective_target_action_point_id=reader.read_int(),
            initial_health=reader.read_int(),
            trigger_id=reader.read_ushort(),
            objective_target_player_id=reader.read_ubyte(),
            objective=reader.read_enum(Objective),
            creature_id=reader.read_ubyte(),
            unknown1=reader.read_ubytes(2),
            flags2=reader.read_flags(ThingCreatureFlag2, width=1)
        )


@dataclass
class KeeperCreature(Thing):
    thing_type: ClassVar[ThingType] = ThingType.KEEPER_CREATURE
    pos_x: int
    pos_y: int
    pos_z: int
    gold_held: int
    level: int
    flags: ThingCreatureFlag
    initial_health: int
    objective_target_action_point_id: int
    trigger_id: int
    creature_id: int
    player_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'KeeperCreature':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            pos_z=reader.read_int(),
            gold_held=reader.read_ushort(),
            level=reader.read_ubyte(),
            flags=reader.read_flags(ThingCreatureFlag, width=1),
            initial_health=reader.read_int(),
            objective_target_action_point_id=reader.read_int(),
            trigger_id=reader.read_ushort(),
            creature_id=reader.read_ubyte(),
            player_id=reader.read_ubyte()
        )


@dataclass
class HeroParty(Thing):
    """Named group of heroes, 16 member slots of which unused ones have creature id 0."""
    thing_type: ClassVar[ThingType] = ThingType.HERO_PARTY
    name: str
    trigger_id: int
    id: int
    x23: int
    x27: int
    members: List[GoodCreature]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'HeroParty':
        name = reader.read_string(32)
        trigger_id = reader.read_ushort()
        party_id = reader.read_ubyte()
        x23 = reader.read_int()
        x27 = reader.read_int()
        members = []
        for _ in range(HERO_PARTY_SIZE):
            member = GoodCreature.from_reader(reader)
            if member.creature_id > 0:
                members.append(member)
        return cls(name=name, trigger_id=trigger_id, id=party_id, x23=x23, x27=x27,
                   members=members)


@dataclass
class DeadBody(Thing):
    thing_type: ClassVar[ThingType] = ThingType.DEAD_BODY
    pos_x: int
    pos_y: int
    pos_z: int
    gold_held: int
    creature_id: int
    player_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'DeadBody':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            pos_z=reader.read_int(),
            gold_held=reader.read_ushort(),
            creature_id=reader.read_ubyte(),
            player_id=reader.read_ubyte()
        )


@dataclass
class EffectGenerator(Thing):
    thing_type: ClassVar[ThingType] = ThingType.EFFECT_GENERATOR
    pos_x: int
    pos_y: int
    x08: int
    x0c: int
    x10: int
    x12: int
    effect_ids: List[int]
    frequency: int
    id: int
    pad: List[int]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'EffectGenerator':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            x08=reader.read_int(),
            x0c=reader.read_int(),
            x10=reader.read_ushort(),
            x12=reader.read_ushort(),
            effect_ids=[i for i in reader.read_ushorts(4) if i > 0],
            frequency=reader.read_ubyte(),
            id=reader.read_ubyte(),
            pad=reader.read_ubytes(6)
        )


@dataclass
class RoomThing(Thing):
    """Pre placed portal, dungeon heart or hero gate."""
    thing_type: ClassVar[ThingType] = ThingType.ROOM
    pos_x: int
    pos_y: int
    x08: int
    x0c: int
    direction: Optional[Direction]
    x0f: int
    initial_health: int
    room_type: Optional[RoomType]
    player_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'RoomThing':
        return cls(
            pos_x=reader.read_int(),
            pos_y=reader.read_int(),
            x08=reader.read_int(),
            x0c=reader.read_ushort(),
            direction=reader.read_enum(Direction),
            x0f=reader.read_ubyte(),
            initial_health=reader.read_ushort(),
            room_type=reader.read_enum(RoomType),
            player_id=reader.read_ubyte()
        )


@dataclass
class CameraThing(Thing):
    thing_type: ClassVar[ThingType] = ThingType.CAMERA
    position: Tuple[float, float, float]
    position_min_clip_extent: Tuple[float, float, float]
    position_max_clip_extent: Tuple[float, float, float]
    view_distance_value: float
    view_distance_min: float
    view_distance_max: float
    zoom_value: float
    zoom_value_min: float
    zoom_value_max: float
    lens_value: float
    lens_value_min: float
    lens_value_max: float
    flags: CameraFlag
    angle_yaw: int
    angle_roll: int
    angle_pitch: int
    id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'CameraThing':
        return cls(
            position=reader.read_vector(3),
            position_min_clip_extent=reader.read_vector(3),
            position_max_clip_extent=reader.read_vector(3),
            view_distance_value=reader.read_int_as_float(),
            view_distance_min=reader.read_int_as_float(),
            view_distance_max=reader.read_int_as_float(),
            zoom_value=reader.read_int_as_float(),
            zoom_value_min=reader.read_int_as_float(),
            zoom_value_max=reader.read_int_as_float(),
            lens_value=reader.read_int_as_float(),
            lens_value_min=reader.read_int_as_float(),
            lens_value_max=reader.read_int_as_float(),
            flags=reader.read_flags(CameraFlag),
            angle_yaw=reader.read_ushort(),
            angle_roll=reader.read_ushort(),
            angle_pitch=reader.read_ushort(),
            id=reader.read_ushort()
        )


THING_TYPES: Dict[int, Type[Thing]] = {
    cls.thing_type: cls
    for cls in (ObjectThing, TrapThing, DoorThing, ActionPoint, NeutralCreature,
                GoodCreature, KeeperCreature, HeroParty, DeadBody, EffectGenerator,
                RoomThing, CameraThing)
}
