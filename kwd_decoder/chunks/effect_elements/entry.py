# kwd_decoder/chunks/effect_elements/entry.py
from dataclasses import dataclass
from typing import Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, Color, DictMixin, read_art_resource, read_color
from .flags import EffectElementFlag


@dataclass
class EffectElement(DictMixin):
    """Single particle element from EffectElements.kwd."""
    name: str
    art_resource: Optional[ArtResource]
    mass: float
    air_friction: float
    elasticity: float
    min_speed_xy: float
    max_speed_xy: float
    min_speed_yz: float
    max_speed_yz: float
    min_scale: float
    max_scale: float
    scale_ratio: float
    flags: EffectElementFlag
    effect_element_id: int
    min_hp: int
    max_hp: int
    death_element_id: int
    hit_solid_element_id: int
    hit_water_element_id: int
    hit_lava_element_id: int
    color: Color
    random_color_index: int
    table_color_index: int
    fade_percentage: int
    next_effect_id: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'EffectElement':
        return cls(
            name=reader.read_string(32),
            art_resource=read_art_resource(reader),
            mass=reader.read_int_as_float(),
            air_friction=reader.read_int_as_double(),
            elasticity=reader.read_int_as_double(),
            min_speed_xy=reader.read_int_as_float(),
            max_speed_xy=reader.read_int_as_float(),
            min_speed_yz=reader.read_int_as_float(),
            max_speed_yz=reader.read_int_as_float(),
            min_scale=reader.read_int_as_float(),
            max_scale=reader.read_int_as_float(),
            scale_ratio=reader.read_int_as_float(),
            flags=reader.read_flags(EffectElementFlag),
            effect_element_id=reader.read_ushort(),
            min_hp=reader.read_ushort(),
            max_hp=reader.read_ushort(),
            death_element_id=reader.read_ushort(),
            hit_solid_element_id=reader.read_ushort(),
            hit_water_element_id=reader.read_ushort(),
            hit_lava_element_id=reader.read_ushort(),
            color=read_color(reader),
            random_color_index=reader.read_ubyte(),
            table_color_index=reader.read_ubyte(),
            fade_percentage=reader.read_ubyte(),
            next_effect_id=reader.read_ushort()
        )

    @property
    def id(self) -> int:
        return self.effect_element_id
