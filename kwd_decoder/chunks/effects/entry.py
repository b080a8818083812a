# kwd_decoder/chunks/effects/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Light, read_art_resource, read_light
from .flags import EffectFlag, GenerationType


@dataclass
class Effect(DictMixin):
    """Single effect from Effects.kwd."""
    name: str
    art_resource: Optional[ArtResource]
    light: Light
    mass: float
    air_friction: float
    elasticity: float
    radius: float
    min_speed_xy: float
    max_speed_xy: float
    min_speed_yz: float
    max_speed_yz: float
    min_scale: float
    max_scale: float
    flags: EffectFlag
    effect_id: int
    min_hp: int
    max_hp: int
    fade_duration: int
    next_effect_id: int
    death_effect_id: int
    hit_solid_effect_id: int
    hit_water_effect_id: int
    hit_lava_effect_id: int
    generate_ids: List[int]
    outer_origin_range: int
    lower_height_limit: int
    upper_height_limit: int
    orientation_range: int
    sprite_spin_rate_range: int
    whirlpool_rate: int
    directional_spread: int
    circular_path_rate: int
    inner_origin_range: int
    generate_randomness: int
    misc2: int
    misc3: int
    generation_type: Optional[GenerationType]
    elements_per_turn: int
    unknown3: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Effect':
        return cls(
            name=reader.read_string(32),
            art_resource=read_art_resource(reader),
            light=read_light(reader),
            mass=reader.read_int_as_float(),
            air_friction=reader.read_int_as_double(),
            elasticity=reader.read_int_as_double(),
            radius=reader.read_int_as_float(),
            min_speed_xy=reader.read_int_as_float(),
            max_speed_xy=reader.read_int_as_float(),
            min_speed_yz=reader.read_int_as_float(),
            max_speed_yz=reader.read_int_as_float(),
            min_scale=reader.read_int_as_float(),
            max_scale=reader.read_int_as_float(),
            flags=reader.read_flags(EffectFlag),
            effect_id=reader.read_ushort(),
            min_hp=reader.read_ushort(),
            max_hp=reader.read_ushort(),
            fade_duration=reader.read_ushort(),
            next_effect_id=reader.read_ushort(),
            death_effect_id=reader.read_ushort(),
            hit_solid_effect_id=reader.read_ushort(),
            hit_water_effect_id=reader.read_ushort(),
            hit_lava_effect_id=reader.read_ushort(),
            generate_ids=[i for i in reader.read_ushorts(8) if i > 0],
            outer_origin_range=reader.read_ushort(),
            lower_height_limit=reader.read_ushort(),
            upper_height_limit=reader.read_ushort(),
            orientation_range=reader.read_ushort(),
            sprite_spin_rate_range=reader.read_ushort(),
            whirlpool_rate=reader.read_ushort(),
            directional_spread=reader.read_ushort(),
            circular_path_rate=reader.read_ushort(),
            inner_origin_range=reader.read_ushort(),
            generate_randomness=reader.read_ushort(),
            misc2=reader.read_ushort(),
            misc3=reader.read_ushort(),
            generation_type=reader.read_enum(GenerationType),
            elements_per_turn=reader.read_ubyte(),
            unknown3=reader.read_ushort()
        )

    @property
    def id(self) -> int:
        return self.effect_id
