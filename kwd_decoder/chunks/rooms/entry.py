# kwd_decoder/chunks/rooms/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, Color, DictMixin, read_art_resource, read_color
from .flags import RoomFlag, TileConstruction


@dataclass
class Room(DictMixin):
    """Single room kind from Rooms.kwd."""
    name: str
    gui_icon: Optional[ArtResource]
    editor_icon: Optional[ArtResource]
    complete_resource: Optional[ArtResource]
    straight_resource: Optional[ArtResource]
    inside_corner_resource: Optional[ArtResource]
    unknown_resource: Optional[ArtResource]
    outside_corner_resource: Optional[ArtResource]
    wall_resource: Optional[ArtResource]
    cap_resource: Optional[ArtResource]
    ceiling_resource: Optional[ArtResource]
    ceiling_height: float
    research_time: int
    torch_intensity: int
    flags: RoomFlag
    tooltip_string_id: int
    name_string_id: int
    cost: int
    fight_effect_id: int
    general_description_string_id: int
    strength_string_id: int
    torch_height: float
    effects: List[int]
    room_id: int
    return_percentage: int
    terrain_id: int
    tile_construction: Optional[TileConstruction]
    created_creature_id: int
    torch_color: Color
    objects: List[int]
    sound_category: str
    order_in_editor: int
    torch_radius: float
    torch: Optional[ArtResource]
    recommended_size_x: int
    recommended_size_y: int
    health_gain: int

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Room':
        return cls(
            name=reader.read_string(32),
            gui_icon=read_art_resource(reader),
            editor_icon=read_art_resource(reader),
            complete_resource=read_art_resource(reader),
            straight_resource=read_art_resource(reader),
            inside_corner_resource=read_art_resource(reader),
            unknown_resource=read_art_resource(reader),
            outside_corner_resource=read_art_resource(reader),
            wall_resource=read_art_resource(reader),
            cap_resource=read_art_resource(reader),
            ceiling_resource=read_art_resource(reader),
            ceiling_height=reader.read_int_as_float(),
            research_time=reader.read_ushort(),
            torch_intensity=reader.read_ushort(),
            flags=reader.read_flags(RoomFlag),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            cost=reader.read_ushort(),
            fight_effect_id=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            torch_height=reader.read_short_as_float(),
            effects=reader.read_ushorts(8),
            room_id=reader.read_ubyte(),
            return_percentage=reader.read_ubyte(),
            terrain_id=reader.read_ubyte(),
            tile_construction=reader.read_enum(TileConstruction),
            created_creature_id=reader.read_ubyte(),
            torch_color=read_color(reader),  # This is rather weird in the editor
            objects=reader.read_ubytes(8),
            sound_category=reader.read_string(32),
            order_in_editor=reader.read_ubyte(),
            torch_radius=reader.read_int_as_float(),
            torch=read_art_resource(reader),
            recommended_size_x=reader.read_ubyte(),
            recommended_size_y=reader.read_ubyte(),
            health_gain=reader.read_short()
        )

    @property
    def id(self) -> int:
        return self.room_id

    def is_placeable_on_land(self) -> bool:
        return RoomFlag.PLACEABLE_ON_LAND in self.flags
