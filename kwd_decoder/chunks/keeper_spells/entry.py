# kwd_decoder/chunks/keeper_spells/entry.py
from dataclasses import dataclass
from typing import Optional

from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, read_art_resource
from .flags import CastRule, HandAnimId, KeeperSpellFlag, TargetRule


@dataclass
class KeeperSpell(DictMixin):
    """Single keeper spell from KeeperSpells.kwd."""
    name: str
    gui_icon: Optional[ArtResource]
    editor_icon: Optional[ArtResource]
    xc8: int
    recharge_time: float
    shot_data1: int
    shot_data2: int
    research_time: int
    target_rule: Optional[TargetRule]
    order_in_editor: int
    flags: KeeperSpellFlag
    xe0_unreferenced: int
    mana_drain: int
    tooltip_string_id: int
    name_string_id: int
    general_description_string_id: int
    strength_string_id: int
    weakness_string_id: int
    keeper_spell_id: int
    cast_rule: Optional[CastRule]
    shot_type_id: int
    sound_category: str
    bonus_r_time: int
    bonus_shot_type_id: int
    bonus_shot_data1: int
    bonus_shot_data2: int
    mana_cost: int
    bonus_icon: Optional[ArtResource]
    sound_category_gui: str
    hand_anim_id: Optional[HandAnimId]
    no_go_hand_anim_id: Optional[HandAnimId]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'KeeperSpell':
        return cls(
            name=reader.read_string(32),
            gui_icon=read_art_resource(reader),
            editor_icon=read_art_resource(reader),
            xc8=reader.read_int(),
            recharge_time=reader.read_int_as_float(),
            shot_data1=reader.read_int(),
            shot_data2=reader.read_int(),
            research_time=reader.read_ushort(),
            target_rule=reader.read_enum(TargetRule),
            order_in_editor=reader.read_ubyte(),
            flags=reader.read_flags(KeeperSpellFlag),
            xe0_unreferenced=reader.read_ushort(),
            mana_drain=reader.read_ushort(),
            tooltip_string_id=reader.read_ushort(),
            name_string_id=reader.read_ushort(),
            general_description_string_id=reader.read_ushort(),
            strength_string_id=reader.read_ushort(),
            weakness_string_id=reader.read_ushort(),
            keeper_spell_id=reader.read_ubyte(),
            cast_rule=reader.read_enum(CastRule),
            shot_type_id=reader.read_ubyte(),
            sound_category=reader.read_string(32),
            bonus_r_time=reader.read_ushort(),
            bonus_shot_type_id=reader.read_ubyte(),
            bonus_shot_data1=reader.read_int(),
            bonus_shot_data2=reader.read_int(),
            mana_cost=reader.read_int(),
            bonus_icon=read_art_resource(reader),
            sound_category_gui=reader.read_string(32),
            hand_anim_id=reader.read_enum(HandAnimId),
            no_go_hand_anim_id=reader.read_enum(HandAnimId)
        )

    @property
    def id(self) -> int:
        return self.keeper_spell_id
