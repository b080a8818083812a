# kwd_decoder/chunks/creatures/entry.py
"""Creature records and the small value structures they embed.

A creature record interleaves general fields with attribute fields, so the
reader collects both as it goes and builds the records at the end.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...parser.constants import CREATURE_EXTENDED_ITEM_SIZE
from ...parser.reader import ByteReader
from ..common import ArtResource, DictMixin, Light, Material, read_art_resource, read_light
from .flags import (
    AnimationType, AttackType, BASE_ANIMATIONS, CreatureFlag, CreatureFlag2, CreatureFlag3,
    DeathFallDirection, FightStyle, GammaEffect, JobClass, JobType, OffsetType,
    SpecialAbility, Swipe
)

Offset = Tuple[float, float, float]


@dataclass
class Attraction(DictMixin):
    present: int
    room_id: int
    room_size: int


@dataclass
class Spell(DictMixin):
    shot_offset: Offset
    x0c: int
    play_animation: bool
    x0e: int
    x0f: int
    shot_delay: float
    x14: int
    x15: int
    creature_spell_id: int
    level_available: int


@dataclass
class Resistance(DictMixin):
    attack_type: Optional[AttackType]
    value: int


@dataclass
class JobPreference(DictMixin):
    job_type: Optional[JobType]
    mood_change: int
    mana_change: int
    chance: int
    x09: int
    x0a: int
    x0b: int


@dataclass
class JobAlternative(DictMixin):
    job_type: Optional[JobType]
    mood_change: int
    mana_change: int


@dataclass
class X1323(DictMixin):
    x00: int
    x02: int


@dataclass
class CreatureAttributes(DictMixin):
    """Tunable creature statistics, also overridden per level by variables."""
    perception_range: float = 0.0
    shuffle_speed: float = 0.0
    height: float = 0.0
    eye_height: float = 0.0
    speed: float = 0.0
    run_speed: float = 0.0
    hunger_rate: float = 0.0
    time_awake: int = 0
    time_sleep: int = 0
    distance_can_see: float = 0.0
    distance_can_hear: float = 0.0
    stun_duration: float = 0.0
    guard_duration: float = 0.0
    idle_duration: float = 0.0
    slap_fearless_duration: float = 0.0
    possession_mana_cost: int = 0
    own_land_health_increase: int = 0
    torture_time_to_convert: float = 0.0
    exp_for_next_level: int = 0
    exp_per_second: int = 0
    exp_per_second_training: int = 0
    research_per_second: int = 0
    manufacture_per_second: int = 0
    hp: int = 0
    hp_from_chicken: int = 0
    fear: int = 0
    threat: int = 0
    slap_damage: int = 0
    mana_gen_prayer: int = 0
    pay: int = 0
    max_gold_held: int = 0
    decompose_value: int = 0
    anger_no_lair: int = 0
    anger_no_food: int = 0
    anger_no_pay: int = 0
    anger_no_work: int = 0
    anger_slap: int = 0
    anger_in_hand: int = 0
    initial_gold_held: int = 0
    hunger_fill: int = 0
    unhappy_threshold: int = 0
    torture_hp_change: int = 0
    torture_mood_change: int = 0


@dataclass
class Creature(DictMixin):
    """Single creature kind from Creatures.kwd."""
    name: str
    creature_id: int
    flags: CreatureFlag
    attributes: CreatureAttributes
    unknown1_resource: bytes = b''
    animations: Dict[AnimationType, Optional[ArtResource]] = field(default_factory=dict)
    animation_offsets: Dict[OffsetType, Offset] = field(default_factory=dict)
    icon1_resource: Optional[ArtResource] = None
    icon2_resource: Optional[ArtResource] = None
    portrait_resource: Optional[ArtResource] = None
    first_person_filter_resource: Optional[ArtResource] = None
    first_person_melee_resource: Optional[ArtResource] = None
    unique_resource: Optional[ArtResource] = None
    light: Optional[Light] = None
    attractions: List[Attraction] = field(default_factory=list)
    spells: List[Spell] = field(default_factory=list)
    resistances: List[Resistance] = field(default_factory=list)
    happy_jobs: List[JobPreference] = field(default_factory=list)
    unhappy_jobs: List[JobPreference] = field(default_factory=list)
    angry_jobs: List[JobPreference] = field(default_factory=list)
    hate_jobs: List[Optional[JobType]] = field(default_factory=list)
    alternative_jobs: List[JobAlternative] = field(default_factory=list)
    x1323: List[X1323] = field(default_factory=list)
    unkcec: int = 0
    unkcee: int = 0
    unkcf2: int = 0
    order_in_editor: int = 0
    anger_string_id_general: int = 0
    shot_delay: float = 0.0
    olhi_effect_id: int = 0
    introduction_string_id: int = 0
    anger_string_id_lair: int = 0
    anger_string_id_food: int = 0
    anger_string_id_pay: int = 0
    anger_string_id_work: int = 0
    anger_string_id_slap: int = 0
    anger_string_id_held: int = 0
    anger_string_id_lonely: int = 0
    anger_string_id_hatred: int = 0
    anger_string_id_torture: int = 0
    translation_sound_category: str = ''
    clone_creature_id: int = 0
    first_person_gamma_effect: Optional[GammaEffect] = None
    first_person_walk_cycle_scale: int = 0
    intro_camera_path_index: int = 0
    unk2e2: int = 0
    first_person_waddle_scale: float = 0.0
    first_person_oscillate_scale: float = 0.0
    unkea0: int = 0
    unkea8: float = 0.0
    unk3ab: int = 0
    unkee0: int = 0
    unkee4: int = 0
    melee_range: float = 0.0
    unkef0: int = 0
    melee_recharge: float = 0.0
    job_class: Optional[JobClass] = None
    fight_style: Optional[FightStyle] = None
    melee_damage: int = 0
    unk3cb: int = 0
    unk3cc: float = 0.0
    name_string_id: int = 0
    tooltip_string_id: int = 0
    entrance_effect_id: int = 0
    general_description_string_id: int = 0
    strength_string_id: int = 0
    weakness_string_id: int = 0
    slap_effect_id: int = 0
    death_effect_id: int = 0
    melee1_swipe: Optional[Swipe] = None
    melee2_swipe: Optional[Swipe] = None
    melee3_swipe: Optional[Swipe] = None
    spell_swipe: Optional[Swipe] = None
    first_person_special_ability1: Optional[SpecialAbility] = None
    first_person_special_ability2: Optional[SpecialAbility] = None
    unkf48: List[int] = field(default_factory=list)
    unk3ea: List[int] = field(default_factory=list)
    melee_attack_type: Optional[AttackType] = None
    unk3eb2: int = 0
    lair_object_id: int = 0
    unk3f1: int = 0
    death_fall_direction: Optional[DeathFallDirection] = None
    unk3f2: int = 0
    sound_category: str = ''
    material: Optional[Material] = None
    unkfcb: int = 0
    unk4: float = 0.0
    special1_swipe: Optional[Swipe] = None
    special2_swipe: Optional[Swipe] = None
    unk6: int = 0
    unique_name_text_id: int = 0
    x14e1: List[int] = field(default_factory=list)
    first_person_special_ability1_count: int = 0
    first_person_special_ability2_count: int = 0
    flags3: CreatureFlag3 = CreatureFlag3(0)
    # Only present in the bigger record revision
    unknown_extra_bytes: Optional[List[int]] = None
    flags2: Optional[CreatureFlag2] = None
    unknown: Optional[int] = None
    unknown_1: Optional[float] = None

    @property
    def id(self) -> int:
        return self.creature_id

    @property
    def is_imp(self) -> bool:
        """Worker flagged evil, the keeper's digger."""
        return CreatureFlag.IS_WORKER in self.flags and CreatureFlag.IS_EVIL in self.flags

    @property
    def has_extended_data(self) -> bool:
        return self.flags2 is not None

    def animation(self, animation_type: AnimationType) -> Optional[ArtResource]:
        return self.animations.get(animation_type)

    @classmethod
    def from_reader(cls, reader: ByteReader, item_size: int) -> 'Creature':
        """Read one creature record.

        Args:
            reader: Cursor at the record start
            item_size: Per item size from the header, selects the record revision
        """
        r = reader
        c = {}
        a = {}
        animations = {}
        offsets = {}

        c['name'] = r.read_string(32)
        c['unknown1_resource'] = r.read_bytes(84)
        for animation_type in BASE_ANIMATIONS:
            animations[animation_type] = read_art_resource(r)
        c['icon1_resource'] = read_art_resource(r)
        c['icon2_resource'] = read_art_resource(r)
        c['unkcec'] = r.read_ushort()
        c['unkcee'] = r.read_uint()
        c['unkcf2'] = r.read_uint()
        c['order_in_editor'] = r.read_ubyte()
        c['anger_string_id_general'] = r.read_ushort()
        c['shot_delay'] = r.read_int_as_float()
        c['olhi_effect_id'] = r.read_ushort()
        c['introduction_string_id'] = r.read_ushort()
        a['perception_range'] = r.read_int_as_float()
        for key in ('lair', 'food', 'pay', 'work', 'slap', 'held', 'lonely', 'hatred', 'torture'):
            c[f'anger_string_id_{key}'] = r.read_ushort()

        c['translation_sound_category'] = r.read_string(32)
        a['shuffle_speed'] = r.read_int_as_float()
        c['clone_creature_id'] = r.read_ubyte()
        c['first_person_gamma_effect'] = r.read_enum(GammaEffect)
        c['first_person_walk_cycle_scale'] = r.read_ubyte()
        c['intro_camera_path_index'] = r.read_ubyte()
        c['unk2e2'] = r.read_ubyte()
        c['portrait_resource'] = read_art_resource(r)
        c['light'] = read_light(r)
        c['attractions'] = [
            Attraction(present=r.read_uint(), room_id=r.read_ushort(), room_size=r.read_ushort())
            for _ in range(2)
        ]
        c['first_person_waddle_scale'] = r.read_int_as_float()
        c['first_person_oscillate_scale'] = r.read_int_as_float()
        spells = [_read_spell(r) for _ in range(3)]
        c['spells'] = [spell for spell in spells if spell.creature_spell_id != 0]
        c['resistances'] = [
            Resistance(attack_type=r.read_enum(AttackType), value=r.read_ubyte())
            for _ in range(4)
        ]
        c['happy_jobs'] = _read_job_preferences(r, 3)
        c['unhappy_jobs'] = _read_job_preferences(r, 2)
        c['angry_jobs'] = _read_job_preferences(r, 3)
        c['hate_jobs'] = [r.read_enum(JobType, width=4) for _ in range(2)]
        c['alternative_jobs'] = [
            JobAlternative(
                job_type=r.read_enum(JobType, width=4),
                mood_change=r.read_ushort(),
                mana_change=r.read_ushort()
            )
            for _ in range(3)
        ]
        offsets[OffsetType.PORTAL_ENTRANCE] = r.read_vector(3)
        c['unkea0'] = r.read_int()
        a['height'] = r.read_int_as_float()
        c['unkea8'] = r.read_int_as_float()
        c['unk3ab'] = r.read_uint()
        a['eye_height'] = r.read_int_as_float()
        a['speed'] = r.read_int_as_float()
        a['run_speed'] = r.read_int_as_float()
        a['hunger_rate'] = r.read_int_as_float()
        a['time_awake'] = r.read_uint()
        a['time_sleep'] = r.read_uint()
        a['distance_can_see'] = r.read_int_as_float()
        a['distance_can_hear'] = r.read_int_as_float()
        a['stun_duration'] = r.read_int_as_float()
        a['guard_duration'] = r.read_int_as_float()
        a['idle_duration'] = r.read_int_as_float()
        a['slap_fearless_duration'] = r.read_int_as_float()
        c['unkee0'] = r.read_int()
        c['unkee4'] = r.read_int()
        a['possession_mana_cost'] = r.read_short()
        a['own_land_health_increase'] = r.read_short()
        c['melee_range'] = r.read_int_as_float()
        c['unkef0'] = r.read_uint()
        a['torture_time_to_convert'] = r.read_int_as_float()
        c['melee_recharge'] = r.read_int_as_float()
        c['flags'] = r.read_flags(CreatureFlag)
        a['exp_for_next_level'] = r.read_ushort()
        c['job_class'] = r.read_enum(JobClass)
        c['fight_style'] = r.read_enum(FightStyle)
        a['exp_per_second'] = r.read_ushort()
        a['exp_per_second_training'] = r.read_ushort()
        a['research_per_second'] = r.read_ushort()
        a['manufacture_per_second'] = r.read_ushort()
        a['hp'] = r.read_ushort()
        a['hp_from_chicken'] = r.read_ushort()
        a['fear'] = r.read_ushort()
        a['threat'] = r.read_ushort()
        c['melee_damage'] = r.read_ushort()
        a['slap_damage'] = r.read_ushort()
        a['mana_gen_prayer'] = r.read_ushort()
        c['unk3cb'] = r.read_ushort()
        a['pay'] = r.read_ushort()
        a['max_gold_held'] = r.read_ushort()
        c['unk3cc'] = r.read_short_as_float()
        a['decompose_value'] = r.read_ushort()
        c['name_string_id'] = r.read_ushort()
        c['tooltip_string_id'] = r.read_ushort()
        for key in ('anger_no_lair', 'anger_no_food', 'anger_no_pay', 'anger_no_work',
                    'anger_slap', 'anger_in_hand', 'initial_gold_held'):
            a[key] = r.read_short()
        c['entrance_effect_id'] = r.read_ushort()
        c['general_description_string_id'] = r.read_ushort()
        c['strength_string_id'] = r.read_ushort()
        c['weakness_string_id'] = r.read_ushort()
        c['slap_effect_id'] = r.read_ushort()
        c['death_effect_id'] = r.read_ushort()
        c['melee1_swipe'] = r.read_enum(Swipe)
        c['melee2_swipe'] = r.read_enum(Swipe)
        c['melee3_swipe'] = r.read_enum(Swipe)
        c['spell_swipe'] = r.read_enum(Swipe)
        c['first_person_special_ability1'] = r.read_enum(SpecialAbility)
        c['first_person_special_ability2'] = r.read_enum(SpecialAbility)
        c['unkf48'] = r.read_ubytes(3)
        c['creature_id'] = r.read_ubyte()
        c['unk3ea'] = r.read_ubytes(2)
        a['hunger_fill'] = r.read_ubyte()
        a['unhappy_threshold'] = r.read_ubyte()
        c['melee_attack_type'] = r.read_enum(AttackType)
        c['unk3eb2'] = r.read_ubyte()
        c['lair_object_id'] = r.read_ubyte()
        c['unk3f1'] = r.read_ubyte()
        c['death_fall_direction'] = r.read_enum(DeathFallDirection)
        c['unk3f2'] = r.read_ubyte()

        c['sound_category'] = r.read_string(32)
        c['material'] = r.read_enum(Material)
        c['first_person_filter_resource'] = read_art_resource(r)
        c['unkfcb'] = r.read_ushort()
        c['unk4'] = r.read_int_as_float()
        animations[AnimationType.DRUNKED_IDLE] = read_art_resource(r)
        c['special1_swipe'] = r.read_enum(Swipe)
        c['special2_swipe'] = r.read_enum(Swipe)
        c['first_person_melee_resource'] = read_art_resource(r)
        c['unk6'] = r.read_uint()
        a['torture_hp_change'] = r.read_short()
        a['torture_mood_change'] = r.read_short()
        for animation_type in (AnimationType.SWIPE, AnimationType.IDLE_3, AnimationType.IDLE_4,
                               AnimationType.IDLE_3_1, AnimationType.IDLE_4_1, AnimationType.DIG):
            animations[animation_type] = read_art_resource(r)
        for offset_type in (OffsetType.FALL_BACK_GET_UP, OffsetType.PRAYING, OffsetType.CORPSE,
                            OffsetType.OFFSET_5, OffsetType.OFFSET_6, OffsetType.OFFSET_7,
                            OffsetType.OFFSET_8):
            offsets[offset_type] = r.read_vector(3)
        animations[AnimationType.BACK_OFF] = read_art_resource(r)
        c['x1323'] = [X1323(x00=r.read_ushort(), x02=r.read_ushort()) for _ in range(48)]
        for animation_type in (AnimationType.STAND_STILL, AnimationType.STEALTH_WALK,
                               AnimationType.DEATH_POSE):
            animations[animation_type] = read_art_resource(r)
        c['unique_name_text_id'] = r.read_ushort()
        c['x14e1'] = r.read_uints(2)
        c['first_person_special_ability1_count'] = r.read_uint()
        c['first_person_special_ability2_count'] = r.read_uint()
        c['unique_resource'] = read_art_resource(r)
        c['flags3'] = r.read_flags(CreatureFlag3)

        if item_size >= CREATURE_EXTENDED_ITEM_SIZE:
            c['unknown_extra_bytes'] = r.read_ubytes(80)
            c['flags2'] = r.read_flags(CreatureFlag2)
            c['unknown'] = r.read_ushort()
            c['unknown_1'] = r.read_short_as_float()

        return cls(
            attributes=CreatureAttributes(**a),
            animations=animations,
            animation_offsets=offsets,
            **c
        )


def _read_spell(r: ByteReader) -> Spell:
    return Spell(
        shot_offset=r.read_vector(3),
        x0c=r.read_ubyte(),
        play_animation=r.read_ubyte() == 1,
        x0e=r.read_ubyte(),
        x0f=r.read_ubyte(),
        shot_delay=r.read_int_as_float(),
        x14=r.read_ubyte(),
        x15=r.read_ubyte(),
        creature_spell_id=r.read_ubyte(),
        level_available=r.read_ubyte()
    )


def _read_job_preferences(r: ByteReader, count: int) -> List[JobPreference]:
    return [
        JobPreference(
            job_type=r.read_enum(JobType, width=4),
            mood_change=r.read_ushort(),
            mana_change=r.read_ushort(),
            chance=r.read_ubyte(),
            x09=r.read_ubyte(),
            x0a=r.read_ubyte(),
            x0b=r.read_ubyte()
        )
        for _ in range(count)
    ]
