# kwd_decoder/chunks/shots/entry.py
from dataclasses import dataclass
from typing import Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Light, read_art_resource, read_light
from .flags import AttackCategory, CollideType, DamageType, ProcessType, ShotFlag, ShotProcessFlag


@dataclass
class Shot(DictMixin):
    """Single projectile kind from Shots.kwd."""
    name: str
    mesh_resource: Optional[ArtResource]
    light: Light
    air_friction: float
    mass: float
    speed: float
    data1: int
    data2: int
    shot_process_flags: ShotProcessFlag
    radius: float
    flags: ShotFlag
    general_effect_id: int
    creation_effect_id: int
    death_effect_id: int
    timed_effect_id: int
    hit_solid_effect_id: int
    hit_lava_effect_id: int
    hit_water_effect: int
    hit_thing_effect_id: int
    health: int
    shot_id: int
    death_shot_id: int
    timed_delay: int
    hit_solid_shot_id: int
    hit_lava_shot_id: int
    hit_water_shot_id: int
    hit_thing_shot_id: int
    damage_type: Optional[DamageType]
    collide_type: Optional[CollideType]
    process_type: Optional[ProcessType]
    attack_category: Optional[AttackCategory]
    sound_category: str
    threat: int
    burn_duration: float

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Shot':
        return cls(
            name=reader.read_string(32),
            mesh_resource=read_art_resource(reader),
            light=read_light(reader),
            air_friction=reader.read_int_as_double(),
            mass=reader.read_int_as_float(),
            speed=reader.read_int_as_float(),
            data1=reader.read_uint(),
            data2=reader.read_uint(),
            shot_process_flags=reader.read_flags(ShotProcessFlag),
            radius=reader.read_int_as_float(),
            flags=reader.read_flags(ShotFlag),
            general_effect_id=reader.read_ushort(),
            creation_effect_id=reader.read_ushort(),
            death_effect_id=reader.read_ushort(),
            timed_effect_id=reader.read_ushort(),
            hit_solid_effect_id=reader.read_ushort(),
            hit_lava_effect_id=reader.read_ushort(),
            hit_water_effect=reader.read_ushort(),
            hit_thing_effect_id=reader.read_ushort(),
            health=reader.read_ushort(),
            shot_id=reader.read_ubyte(),
            death_shot_id=reader.read_ubyte(),
            timed_delay=reader.read_ubyte(),
            hit_solid_shot_id=reader.read_ubyte(),
            hit_lava_shot_id=reader.read_ubyte(),
            hit_water_shot_id=reader.read_ubyte(),
            hit_thing_shot_id=reader.read_ubyte(),
            damage_type=reader.read_enum(DamageType),
            collide_type=reader.read_enum(CollideType),
            process_type=reader.read_enum(ProcessType),
            attack_category=reader.read_enum(AttackCategory),
            sound_category=reader.read_string(32),
            threat=reader.read_ushort(),
            burn_duration=reader.read_int_as_float()
        )

    @property
    def id(self) -> int:
        return self.shot_id
