# kwd_decoder/chunks/objects/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Light, Material, read_art_resource, read_light
from .flags import ObjectFlag, ObjectState


@dataclass
class GameObject(DictMixin):
    """Single object kind from Objects.kwd."""
    name: str
    mesh_resource: Optional[ArtResource]
    gui_icon_resource: Optional[ArtResource]
    in_hand_icon_resource: Optional[ArtResource]
    in_hand_mesh_resource: Optional[ArtResource]
    unknown_resource: Optional[ArtResource]
    additional_resources: List[ArtResource]
    light: Light
    width: float
    height: float
    mass: float
    speed: float
    air_friction: float
    material: Optional[Material]
    unknown3: List[int]
    flags: ObjectFlag
    hp: int
    max_angle: int
    x34c: int
    mana_value: int
    tooltip_string_id: int
    name_string_id: int
    slap_effect_id: int
    death_effect_id: int
    misc_effect_id: int
    object_id: int
    start_state: Optional[ObjectState]
    room_capacity: int
    pick_up_priority: int
    sound_category: str

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'GameObject':
        return cls(
            name=reader.read_string(32),
            mesh_resource=read_art_resource(reader),
            gui_icon_resource=read_art_resource(reader),
            in_hand_icon_resource=read_art_resource(reader),
            in_hand_mesh_resource=read_art_resource(reader),
            unknown_resource=read_art_resource(reader),
            additional_resources=_read_additional_resources(reader),
            light=read_light(reader),
            width=reader.read_int_as_float(),
            height=reader.read_int_as_float(),
            mass=reader.read_int_as_float(),
            speed=reader.read_int_as_float(),
            air_friction=reader.read_int_as_double(),
            material=reader.read_enum(Material),
            unknown3=reader.read_ubytes(3),
            flags=reader.read_flags(ObjectFlag),
            hp=reader.read_ushort(),
            max_angle=reader.read_ushort(),
            x34c=reader.read_ushort(),
            mana_value=reader.read_ushort(),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            slap_effect_id=reader.read_ushort(),
            death_effect_id=reader.read_ushort(),
            misc_effect_id=reader.read_ushort(),
            object_id=reader.read_ubyte(),
            start_state=reader.read_enum(ObjectState),
            room_capacity=reader.read_ubyte(),
            pick_up_priority=reader.read_ubyte(),
            sound_category=reader.read_string(32)
        )

    @property
    def id(self) -> int:
        return self.object_id

    def is_level_gem(self) -> bool:
        return ObjectFlag.OBJECT_TYPE_LEVEL_GEM in self.flags


def _read_additional_resources(reader: ByteReader) -> List[ArtResource]:
    resources = []
    for _ in range(4):
        resource = read_art_resource(reader)
        if resource is not None:
            resources.append(resource)
    return resources
