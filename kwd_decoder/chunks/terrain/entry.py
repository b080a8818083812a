# kwd_decoder/chunks/terrain/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import (
    ArtResource, Color, DictMixin, StringId,
    read_art_resource, read_color, read_string_id
)
from .flags import TerrainFlag


@dataclass
class Terrain(DictMixin):
    """Single terrain tile kind from Terrain.kwd."""
    name: str
    complete_resource: Optional[ArtResource]
    side_resource: Optional[ArtResource]
    top_resource: Optional[ArtResource]
    tagged_top_resource: Optional[ArtResource]
    string_ids: StringId
    depth: float
    light_height: float
    flags: TerrainFlag
    damage: int
    editor_texture_id: int
    unk198: int
    gold_value: int
    mana_gain: int
    max_mana_gain: int
    tooltip_string_id: int
    name_string_id: int
    max_health_effect_id: int
    destroyed_effect_id: int
    general_description_string_id: int
    strength_string_id: int
    weakness_string_id: int
    unk1ae: List[int]
    wibble_h: int
    lean_h: List[int]
    wibble_v: int
    lean_v: List[int]
    terrain_id: int
    starting_health: int
    max_health_type_terrain_id: int
    destroyed_type_terrain_id: int
    terrain_light: Color
    texture_frames: int
    sound_category: str
    max_health: int
    ambient_light: Color
    sound_category_first_person: str
    unk224: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Terrain':
        return cls(
            name=reader.read_string(32),
            complete_resource=read_art_resource(reader),
            side_resource=read_art_resource(reader),
            top_resource=read_art_resource(reader),
            tagged_top_resource=read_art_resource(reader),
            string_ids=read_string_id(reader),
            depth=reader.read_int_as_float(),
            light_height=reader.read_int_as_float(),
            flags=reader.read_flags(TerrainFlag),
            damage=reader.read_ushort(),
            editor_texture_id=reader.read_ushort(),
            unk198=reader.read_ushort(),
            gold_value=reader.read_ushort(),
            mana_gain=reader.read_ushort(),
            max_mana_gain=reader.read_ushort(),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            max_health_effect_id=reader.read_ushort(),
            destroyed_effect_id=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            weakness_string_id=reader.read_ushort(),
            unk1ae=reader.read_ushorts(16),
            wibble_h=reader.read_ubyte(),
            lean_h=reader.read_ubytes(3),
            wibble_v=reader.read_ubyte(),
            lean_v=reader.read_ubytes(3),
            terrain_id=reader.read_ubyte(),
            starting_health=reader.read_ushort(),
            max_health_type_terrain_id=reader.read_ubyte(),
            destroyed_type_terrain_id=reader.read_ubyte(),
            terrain_light=read_color(reader),
            texture_frames=reader.read_ubyte(),
            sound_category=reader.read_string(32),
            max_health=reader.read_ushort(),
            ambient_light=read_color(reader),
            sound_category_first_person=reader.read_string(32),
            unk224=reader.read_uint()
        )

    @property
    def id(self) -> int:
        return self.terrain_id

    def is_water(self) -> bool:
        return TerrainFlag.WATER in self.flags

    def is_lava(self) -> bool:
        return TerrainFlag.LAVA in self.flags
