# kwd_decoder/chunks/creature_spells/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, read_art_resource
from .flags import AlternativeShot, CreatureSpellFlag


@dataclass
class CreatureSpell(DictMixin):
    """Single spell from CreatureSpells.kwd."""
    name: str
    editor_icon: Optional[ArtResource]
    gui_icon: Optional[ArtResource]
    shot_data1: int
    shot_data2: int
    range: float
    flags: CreatureSpellFlag
    combat_points: int
    sound_event: int
    name_string_id: int
    tooltip_string_id: int
    general_description_string_id: int
    strength_string_id: int
    weakness_string_id: int
    creature_spell_id: int
    shot_type_id: int
    alternative_shot_id: int
    alternative_room_id: int
    recharge_time: float
    alternative_shot: Optional[AlternativeShot]
    unused: List[int]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'CreatureSpell':
        return cls(
            name=reader.read_string(32),
            editor_icon=read_art_resource(reader),
            gui_icon=read_art_resource(reader),
            shot_data1=reader.read_uint(),
            shot_data2=reader.read_uint(),
            range=reader.read_int_as_float(),
            flags=reader.read_flags(CreatureSpellFlag),
            combat_points=reader.read_ushort(),
            sound_event=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            tooltip_string_id=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            weakness_string_id=reader.read_ushort(),
            creature_spell_id=reader.read_ubyte(),
            shot_type_id=reader.read_ubyte(),
            alternative_shot_id=reader.read_ubyte(),
            alternative_room_id=reader.read_ubyte(),
            recharge_time=reader.read_int_as_float(),
            alternative_shot=reader.read_enum(AlternativeShot),
            unused=reader.read_ubytes(27)
        )

    @property
    def id(self) -> int:
        return self.creature_spell_id
