# kwd_decoder/chunks/doors/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Material, read_art_resource
from .flags import DoorFlag


@dataclass
class Door(DictMixin):
    """Single door kind from Doors.kwd."""
    name: str
    mesh: Optional[ArtResource]
    gui_icon: Optional[ArtResource]
    editor_icon: Optional[ArtResource]
    flower_icon: Optional[ArtResource]
    open_resource: Optional[ArtResource]
    close_resource: Optional[ArtResource]
    height: float
    health_gain: int
    unknown1: int
    unknown2: int
    research_time: int
    material: Optional[Material]
    trap_type_id: int
    flags: DoorFlag
    health: int
    gold_cost: int
    unknown3: List[int]
    death_effect_id: int
    manuf_to_build: int
    mana_cost: int
    tooltip_string_id: int
    name_string_id: int
    general_description_string_id: int
    strength_string_id: int
    weakness_string_id: int
    door_id: int
    order_in_editor: int
    manuf_crate_object_id: int
    key_object_id: int
    sound_category: str

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Door':
        return cls(
            name=reader.read_string(32),
            mesh=read_art_resource(reader),
            gui_icon=read_art_resource(reader),
            editor_icon=read_art_resource(reader),
            flower_icon=read_art_resource(reader),
            open_resource=read_art_resource(reader),
            close_resource=read_art_resource(reader),
            height=reader.read_int_as_float(),
            health_gain=reader.read_ushort(),
            unknown1=reader.read_ushort(),
            unknown2=reader.read_uint(),
            research_time=reader.read_ushort(),
            material=reader.read_enum(Material),
            trap_type_id=reader.read_ubyte(),
            flags=reader.read_flags(DoorFlag),
            health=reader.read_ushort(),
            gold_cost=reader.read_ushort(),
            unknown3=reader.read_ubytes(2),
            death_effect_id=reader.read_ushort(),
            manuf_to_build=reader.read_uint(),
            mana_cost=reader.read_ushort(),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            weakness_string_id=reader.read_ushort(),
            door_id=reader.read_ubyte(),
            order_in_editor=reader.read_ubyte(),
            manuf_crate_object_id=reader.read_ubyte(),
            key_object_id=reader.read_ubyte(),
            sound_category=reader.read_string(32)
        )

    @property
    def id(self) -> int:
        return self.door_id
