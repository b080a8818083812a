# kwd_decoder/chunks/traps/entry.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Material, read_art_resource
from .flags import TrapFlag, TriggerType


@dataclass
class Trap(DictMixin):
    """Single trap kind from Traps.kwd."""
    name: str
    mesh_resource: Optional[ArtResource]
    gui_icon: Optional[ArtResource]
    editor_icon: Optional[ArtResource]
    flower_icon: Optional[ArtResource]
    fire_resource: Optional[ArtResource]
    height: float
    recharge_time: float
    charge_time: float
    threat_duration: float
    mana_cost_to_fire: int
    idle_effect_delay: float
    trigger_data: int
    shot_data1: int
    shot_data2: int
    research_time: int
    threat: int
    flags: TrapFlag
    health: int
    mana_cost: int
    powerless_effect_id: int
    idle_effect_id: int
    death_effect_id: int
    manuf_to_build: int
    general_description_string_id: int
    strength_string_id: int
    weakness_string_id: int
    mana_usage: int
    unknown4: List[int]
    tooltip_string_id: int
    name_string_id: int
    shots_when_armed: int
    trigger_type: Optional[TriggerType]
    trap_id: int
    shot_type_id: int
    manuf_crate_object_id: int
    sound_category: str
    material: Optional[Material]
    order_in_editor: int
    shot_offset: Tuple[float, float, float]
    shot_delay: float
    health_gain: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Trap':
        return cls(
            name=reader.read_string(32),
            mesh_resource=read_art_resource(reader),
            gui_icon=read_art_resource(reader),
            editor_icon=read_art_resource(reader),
            flower_icon=read_art_resource(reader),
            fire_resource=read_art_resource(reader),
            height=reader.read_int_as_float(),
            recharge_time=reader.read_int_as_float(),
            charge_time=reader.read_int_as_float(),
            threat_duration=reader.read_int_as_float(),
            mana_cost_to_fire=reader.read_uint(),
            idle_effect_delay=reader.read_int_as_float(),
            trigger_data=reader.read_uint(),
            shot_data1=reader.read_uint(),
            shot_data2=reader.read_uint(),
            research_time=reader.read_ushort(),
            threat=reader.read_ushort(),
            flags=reader.read_flags(TrapFlag),
            health=reader.read_ushort(),
            mana_cost=reader.read_ushort(),
            powerless_effect_id=reader.read_ushort(),
            idle_effect_id=reader.read_ushort(),
            death_effect_id=reader.read_ushort(),
            manuf_to_build=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            weakness_string_id=reader.read_ushort(),
            mana_usage=reader.read_ushort(),
            unknown4=reader.read_ubytes(2),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            shots_when_armed=reader.read_ubyte(),
            trigger_type=reader.read_enum(TriggerType),
            trap_id=reader.read_ubyte(),
            shot_type_id=reader.read_ubyte(),
            manuf_crate_object_id=reader.read_ubyte(),
            sound_category=reader.read_string(32),
            material=reader.read_enum(Material),
            order_in_editor=reader.read_ubyte(),
            shot_offset=reader.read_vector(3),
            shot_delay=reader.read_int_as_float(),
            health_gain=reader.read_ushort()
        )

    @property
    def id(self) -> int:
        return self.trap_id
