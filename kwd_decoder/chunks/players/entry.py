# kwd_decoder/chunks/players/entry.py
from dataclasses import dataclass
from typing import List, Optional

from ...parser.reader import ByteReader
from ..common import DictMixin
from .flags import (
    AIType, BreachRoomPolicy, CallToArmsUsagePolicy, CorridorStyle, CreatureDisposalPolicy,
    DigToPolicy, Distance, DoorUsagePolicy, ImprisonedCreatureFatePolicy, MoveToResearchPolicy,
    RoomExpandPolicy, SightOfEvilUsagePolicy
)


@dataclass
class AI(DictMixin):
    """Computer player behaviour block embedded in every player record."""
    ai_type: Optional[AIType]
    speed: int
    openness: int
    remove_call_to_arms_if_total_creatures_less_than: int
    build_lost_room_after_seconds: int
    unknown1: List[int]
    create_empty_areas_when_idle: bool
    build_bigger_lair_after_claiming_portal: bool
    sell_captured_rooms_if_low_on_gold: bool
    min_time_before_placing_researched_room: int
    default_size: int
    tiles_left_between_rooms: int
    distance_between_rooms_that_should_be_close_man: Optional[Distance]
    corridor_style: Optional[CorridorStyle]
    when_more_space_in_room_required: Optional[RoomExpandPolicy]
    dig_to_neutral_rooms_within_tiles_of_heart: int
    build_order: List[int]
    flexibility: int
    dig_to_neutral_rooms_within_tiles_of_claimed_area: int
    remove_call_to_arms_after_seconds: int
    boulder_traps_on_long_corridors: bool
    boulder_traps_on_route_to_breach_points: bool
    trap_use_style: int
    door_trap_preference: int
    door_usage: Optional[DoorUsagePolicy]
    chance_of_looking_to_use_traps_and_doors: int
    require_min_level_for_creatures: bool
    require_total_threat_greater_than_the_enemy: bool
    require_all_room_types_placed: bool
    require_all_keeper_spells_researched: bool
    only_attack_attackers: bool
    never_attack: bool
    min_level_for_creatures: int
    total_threat_greater_than_the_enemy: int
    first_attempt_to_breach_room: Optional[BreachRoomPolicy]
    first_dig_to_enemy_point: Optional[DigToPolicy]
    breach_at_points_simultaneously: int
    use_percentage_of_total_creatures_in_first_fight_after_breach: int
    mana_value: int
    place_call_to_arms_where_threat_value_is_greater_than: int
    remove_call_to_arms_if_less_than_enemy_creatures: int
    remove_call_to_arms_if_less_than_enemy_creatures_within_tiles: int
    pull_creatures_from_fight_if_outnumbered_and_unable_to_drop_reinforcements: bool
    threat_value_of_dropped_creatures_is_percentage_of_enemy_threat_value: int
    spell_style: int
    attempt_to_imprison_percentage_of_enemy_creatures: int
    if_creature_health_is_percentage_and_not_in_own_room_move_to_lair_or_temple: int
    gold_value: int
    try_to_make_unhappy_ones_happy: bool
    try_to_make_angry_ones_happy: bool
    dispose_of_angry_creatures: bool
    dispose_of_rubbish_creatures_if_better_ones_come_along: bool
    disposal_method: Optional[CreatureDisposalPolicy]
    maximum_number_of_imps: int
    will_not_slap_creatures: bool
    attack_when_number_of_creatures_is_at_least: int
    use_lightning_if_enemy_is_in_water: bool
    use_sight_of_evil: Optional[SightOfEvilUsagePolicy]
    use_spells_in_battle: int
    spells_power_preference: int
    use_call_to_arms: Optional[CallToArmsUsagePolicy]
    unknown2: List[int]
    mine_gold_until_gold_held_is_greater_than: int
    wait_seconds_after_previous_attack_before_attacking_again: int
    starting_mana: int
    explore_up_to_tiles_to_find_specials: int
    imps_to_tiles_ratio: int
    build_area_start_x: int
    build_area_start_y: int
    build_area_end_x: int
    build_area_end_y: int
    likelyhood_to_moving_creatures_to_library_for_researching: Optional[MoveToResearchPolicy]
    chance_of_exploring_to_find_specials: int
    chance_of_finding_specials_when_exploring: int
    fate_of_imprisoned_creatures: Optional[ImprisonedCreatureFatePolicy]

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'AI':
        r = reader
        return cls(
            ai_type=r.read_enum(AIType),
            speed=r.read_ubyte(),
            openness=r.read_ubyte(),
            remove_call_to_arms_if_total_creatures_less_than=r.read_ubyte(),
            build_lost_room_after_seconds=r.read_ubyte(),
            unknown1=r.read_ubytes(3),
            create_empty_areas_when_idle=r.read_bool(),
            build_bigger_lair_after_claiming_portal=r.read_bool(),
            sell_captured_rooms_if_low_on_gold=r.read_bool(),
            min_time_before_placing_researched_room=r.read_ubyte(),
            default_size=r.read_ubyte(),
            tiles_left_between_rooms=r.read_ubyte(),
            distance_between_rooms_that_should_be_close_man=r.read_enum(Distance),
            corridor_style=r.read_enum(CorridorStyle),
            when_more_space_in_room_required=r.read_enum(RoomExpandPolicy),
            dig_to_neutral_rooms_within_tiles_of_heart=r.read_ubyte(),
            build_order=r.read_ubytes(15),
            flexibility=r.read_ubyte(),
            dig_to_neutral_rooms_within_tiles_of_claimed_area=r.read_ubyte(),
            remove_call_to_arms_after_seconds=r.read_ushort(),
            boulder_traps_on_long_corridors=r.read_bool(),
            boulder_traps_on_route_to_breach_points=r.read_bool(),
            trap_use_style=r.read_ubyte(),
            door_trap_preference=r.read_ubyte(),
            door_usage=r.read_enum(DoorUsagePolicy),
            chance_of_looking_to_use_traps_and_doors=r.read_ubyte(),
            require_min_level_for_creatures=r.read_bool(),
            require_total_threat_greater_than_the_enemy=r.read_bool(),
            require_all_room_types_placed=r.read_bool(),
            require_all_keeper_spells_researched=r.read_bool(),
            only_attack_attackers=r.read_bool(),
            never_attack=r.read_bool(),
            min_level_for_creatures=r.read_ubyte(),
            total_threat_greater_than_the_enemy=r.read_ubyte(),
            first_attempt_to_breach_room=r.read_enum(BreachRoomPolicy),
            first_dig_to_enemy_point=r.read_enum(DigToPolicy),
            breach_at_points_simultaneously=r.read_ubyte(),
            use_percentage_of_total_creatures_in_first_fight_after_breach=r.read_ubyte(),
            mana_value=r.read_ushort(),
            place_call_to_arms_where_threat_value_is_greater_than=r.read_ushort(),
            remove_call_to_arms_if_less_than_enemy_creatures=r.read_ubyte(),
            remove_call_to_arms_if_less_than_enemy_creatures_within_tiles=r.read_ubyte(),
            pull_creatures_from_fight_if_outnumbered_and_unable_to_drop_reinforcements=r.read_bool(),
            threat_value_of_dropped_creatures_is_percentage_of_enemy_threat_value=r.read_ubyte(),
            spell_style=r.read_ubyte(),
            attempt_to_imprison_percentage_of_enemy_creatures=r.read_ubyte(),
            if_creature_health_is_percentage_and_not_in_own_room_move_to_lair_or_temple=r.read_ubyte(),
            gold_value=r.read_ushort(),
            try_to_make_unhappy_ones_happy=r.read_bool(),
            try_to_make_angry_ones_happy=r.read_bool(),
            dispose_of_angry_creatures=r.read_bool(),
            dispose_of_rubbish_creatures_if_better_ones_come_along=r.read_bool(),
            disposal_method=r.read_enum(CreatureDisposalPolicy),
            maximum_number_of_imps=r.read_ubyte(),
            will_not_slap_creatures=r.read_ubyte() == 0,
            attack_when_number_of_creatures_is_at_least=r.read_ubyte(),
            use_lightning_if_enemy_is_in_water=r.read_bool(),
            use_sight_of_evil=r.read_enum(SightOfEvilUsagePolicy),
            use_spells_in_battle=r.read_ubyte(),
            spells_power_preference=r.read_ubyte(),
            use_call_to_arms=r.read_enum(CallToArmsUsagePolicy),
            unknown2=r.read_ubytes(2),
            mine_gold_until_gold_held_is_greater_than=r.read_ushort(),
            wait_seconds_after_previous_attack_before_attacking_again=r.read_ushort(),
            starting_mana=r.read_uint(),
            explore_up_to_tiles_to_find_specials=r.read_ushort(),
            imps_to_tiles_ratio=r.read_ushort(),
            build_area_start_x=r.read_ushort(),
            build_area_start_y=r.read_ushort(),
            build_area_end_x=r.read_ushort(),
            build_area_end_y=r.read_ushort(),
            likelyhood_to_moving_creatures_to_library_for_researching=r.read_enum(MoveToResearchPolicy),
            chance_of_exploring_to_find_specials=r.read_ubyte(),
            chance_of_finding_specials_when_exploring=r.read_ubyte(),
            fate_of_imprisoned_creatures=r.read_enum(ImprisonedCreatureFatePolicy)
        )


@dataclass
class Player(DictMixin):
    """Player slot from *Players.kld."""
    starting_gold: int
    ai: bool
    ai_attributes: AI
    trigger_id: int
    player_id: int
    starting_camera_x: int
    starting_camera_y: int
    name: str

    @classmethod
    def from_reader(cls, reader: ByteReader) -> 'Player':
        return cls(
            starting_gold=reader.read_int(),
            ai=reader.read_bool(),
            ai_attributes=AI.from_reader(reader),
            trigger_id=reader.read_ushort(),
            player_id=reader.read_ubyte(),
            starting_camera_x=reader.read_ushort(),
            starting_camera_y=reader.read_ushort(),
            name=reader.read_string(32)
        )

    @property
    def id(self) -> int:
        return self.player_id
